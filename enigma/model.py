from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Tuple

from enigma.alphabet import Alphabet
from enigma.enigma import Enigma
from enigma.errors import RotorOrderError, UnknownRotorError
from enigma.plugboard import Plugboard
from enigma.rotor import Rotor


@dataclass
class MachineConfiguration:
    """
    rotor names (in chain order), start positions of the rotating rotors and plugboard patches.
    an empty rotor list means the model's default rotors, missing positions are 0.
    """
    rotors: Sequence[str] = field(default_factory=tuple)
    positions: Sequence[int] = field(default_factory=tuple)
    patches: Sequence[str] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping) -> 'MachineConfiguration':
        return cls(rotors=tuple(data.get('rotors', ())),
                   positions=tuple(int(p) for p in data.get('positions', ())),
                   patches=tuple(data.get('patches', data.get('plugs', ()))))


def verify_rotor_order(rotors: Sequence[Rotor]):
    last = len(rotors) - 1
    for i, rotor in enumerate(rotors):
        if i != 0 and rotor.is_entry:
            raise RotorOrderError(f"entry rotor '{rotor.name}' must be the first rotor "
                                  f"and not on position {i} of {last}")
        if i != last and rotor.is_reflecting:
            raise RotorOrderError(f"reflecting rotor '{rotor.name}' must be the last rotor "
                                  f"and not on position {i} of {last}")


@dataclass(frozen=True)
class Model:
    name: str
    alphabet: Alphabet
    rotors: Tuple[Rotor, ...]
    default_configuration: Tuple[Rotor, ...]

    def get_rotor(self, name: str) -> Rotor:
        for rotor in self.rotors:
            if rotor.name.lower() == name.lower():
                return rotor
        raise UnknownRotorError(f"rotor '{name}' not found in model {self.name}")

    def get_rotors(self, *names: str) -> Tuple[Rotor, ...]:
        if not names:
            return self.rotors
        return tuple(self.get_rotor(name) for name in names)

    def create_instance(self, configuration: Optional[MachineConfiguration] = None,
                        plugboard: Optional[Plugboard] = None) -> Enigma:
        configuration = configuration or MachineConfiguration()

        rotors = list(self.get_rotors(*configuration.rotors)) if configuration.rotors \
            else list(self.default_configuration)
        verify_rotor_order(rotors)

        board = plugboard if plugboard is not None else Plugboard.empty(self.alphabet)
        board = board.with_patches(*configuration.patches)

        enigma = Enigma(self.alphabet, rotors, board)
        positions = list(configuration.positions)
        positions += [0] * (enigma.rotating_rotors - len(positions))
        enigma.set_rotor_positions(*positions)
        return enigma
