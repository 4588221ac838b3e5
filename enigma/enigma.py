import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from enigma.alphabet import Alphabet
from enigma.errors import InvalidCharacterError
from enigma.plugboard import Plugboard
from enigma.rotor import Rotor

logger = logging.getLogger(__name__)


class RotorStage:
    """
    a rotor mounted in a machine, i.e. the rotor plus its current rotation.
    both passes shift the signal by the position before looking up the wiring and shift it back afterwards,
    so input and output are always expressed in un-rotated coordinates.
    """

    def __init__(self, rotor: Rotor, alphabet: Alphabet):
        if sorted(rotor.wiring) != sorted(alphabet.chars):
            raise ValueError(f'wiring of rotor {rotor.name} is not a permutation of {alphabet}')
        self.rotor = rotor
        self.alphabet = alphabet
        self.n_positions = len(rotor.wiring)
        self.position = 0

        self._symbol_index = alphabet.symbol_index_table()
        # alphabet index of the symbol each contact is wired to, and the inverse of that
        self._forward = np.array([alphabet.index_of(c) for c in rotor.wiring])
        self._backward = alphabet.wiring_index_table(rotor.wiring)

        self._notches = np.zeros(self.n_positions, dtype=bool)
        for notch in rotor.notches:
            self._notches[alphabet.index_of(notch)] = True

    @property
    def is_rotating(self) -> bool:
        return self.rotor.is_rotating

    def set_position(self, pos: int):
        if self.rotor.is_entry or self.rotor.is_reflecting:
            self.position = 0
            return
        self.position = pos

    def advance(self) -> bool:
        """step one position, returns True when the position we left carries a notch"""
        if not self.rotor.is_rotating:
            return False

        self.position += 1
        if self.position >= self.n_positions:
            self.position = 0

        return bool(self._notches[(self.position - 1) % self.n_positions])

    def process_input(self, symbol: str) -> str:
        shifted = (self._symbol_index[ord(symbol)] + self.position) % self.n_positions
        out_idx = (self._forward[shifted] - self.position) % self.n_positions
        return self.alphabet.symbol_at(out_idx)

    def process_output(self, symbol: str) -> str:
        pin = (self._symbol_index[ord(symbol)] + self.position) % self.n_positions
        out_idx = (self._backward[ord(self.alphabet.symbol_at(pin))] - self.position) % self.n_positions
        return self.alphabet.symbol_at(out_idx)

    def __repr__(self):
        return f'{self.rotor}[{self.position}]'


class Enigma:
    def __init__(self, alphabet: Alphabet, rotors: Sequence[Rotor], plugboard: Optional[Plugboard] = None):
        if not rotors:
            raise ValueError('rotors must not be empty')
        self.alphabet = alphabet
        self.plugboard = plugboard if plugboard is not None else Plugboard.empty(alphabet)
        self._stages = [RotorStage(rotor, alphabet) for rotor in rotors]
        self.rotating_rotors = sum(1 for stage in self._stages if stage.is_rotating)

    @property
    def stages(self) -> Tuple[RotorStage, ...]:
        return tuple(self._stages)

    def set_rotor_positions(self, *positions: int):
        if len(positions) == 1 and not isinstance(positions[0], (int, np.integer)):
            positions = tuple(positions[0])
        if len(positions) != self.rotating_rotors:
            raise ValueError(f'number of positions ({len(positions)}) does not match '
                             f'number of rotors ({self.rotating_rotors})')
        rotating = (stage for stage in self._stages if stage.is_rotating)
        for stage, pos in zip(rotating, positions):
            stage.set_position(pos)

    def get_rotor_positions(self) -> List[int]:
        return [stage.position for stage in self._stages if stage.is_rotating]

    def _step(self):
        # entry rotors never take part in the cascade
        start = 0 if self._stages[0].is_rotating else 1
        for stage in self._stages[start:]:
            if not stage.advance():
                break
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('rotor positions %s', self.get_rotor_positions())

    def _enter(self, symbol: str) -> str:
        self._step()

        for stage in self._stages:
            out = stage.process_input(symbol)
            logger.debug('FWD [%r] %s -> %s', stage, symbol, out)
            symbol = out

        # the last stage turned the signal around, go back through all the others
        for stage in reversed(self._stages[:-1]):
            out = stage.process_output(symbol)
            logger.debug('REV [%r] %s -> %s', stage, symbol, out)
            symbol = out

        return symbol

    def _validate(self, text: str):
        for char in text:
            if not self.alphabet.contains(char.upper()):
                raise InvalidCharacterError(f'character {char!r} (0x{ord(char):X}) is not part of the alphabet')

    def process(self, text: str) -> str:
        # validate the whole batch first so a rejected batch leaves the rotors untouched
        self._validate(text)

        output = str()
        for char in text:
            output += self.plugboard.route(self._enter(self.plugboard.route(char.upper())))
        return output
