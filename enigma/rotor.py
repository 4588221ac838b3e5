import enum
from dataclasses import dataclass, field
from typing import Sequence, Tuple

import numpy as np

from enigma.alphabet import Alphabet

ENTRY_PREFIX = 'ETW'
REFLECTOR_PREFIX = 'UKW'


class RotorKind(enum.Enum):
    ENTRY = 'entry'
    ROTATING = 'rotating'
    REFLECTING = 'reflecting'

    @classmethod
    def from_name(cls, name: str) -> 'RotorKind':
        if name.startswith(ENTRY_PREFIX):
            return cls.ENTRY
        if name.startswith(REFLECTOR_PREFIX):
            return cls.REFLECTING
        return cls.ROTATING


@dataclass(frozen=True)
class Rotor:
    """
    a wheel as it sits in the inventory: its wiring at position 0 and the notch symbols.
    wiring[i] is the symbol the i-th contact of the alphabet is wired to.
    """
    name: str
    wiring: str
    notches: Tuple[str, ...] = ()
    kind: RotorKind = field(init=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError('rotor name must not be empty')
        if not self.wiring:
            raise ValueError(f'wiring of rotor {self.name} must not be empty')
        object.__setattr__(self, 'notches', tuple(self.notches))
        object.__setattr__(self, 'kind', RotorKind.from_name(self.name))

    @property
    def is_entry(self) -> bool:
        return self.kind is RotorKind.ENTRY

    @property
    def is_reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTING

    @property
    def is_rotating(self) -> bool:
        return self.kind is RotorKind.ROTATING

    def __str__(self):
        return self.name

    @classmethod
    def random(cls, name: str, alphabet: Alphabet, seed: int, notches: Sequence[str] = ()) -> 'Rotor':
        rng = np.random.default_rng(seed)
        wiring = ''.join(alphabet.symbol_at(i) for i in rng.permutation(len(alphabet)))
        return cls(name, wiring, tuple(notches))
