import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from enigma.alphabet import Alphabet
from enigma.errors import InvalidCharacterError, PatchOverlapError, PlugboardFullError

logger = logging.getLogger(__name__)

MAX_PATCHES = 10


@dataclass(frozen=True)
class Patch:
    first: str
    second: str

    def overlaps_with(self, other: 'Patch') -> bool:
        return bool({self.first, self.second} & {other.first, other.second})

    def __str__(self):
        return self.first + self.second


def _build_table(patches: Tuple[Patch, ...]) -> np.ndarray:
    highest = max((max(ord(p.first), ord(p.second)) for p in patches), default=0)
    table = np.arange(highest + 1)
    for patch in patches:
        table[ord(patch.first)] = ord(patch.second)
        table[ord(patch.second)] = ord(patch.first)
    table.flags.writeable = False
    return table


class Plugboard:
    """
    up to ten cables, each swapping two symbols before and after the rotors.
    a plugboard never changes, with_patch returns a new board.
    patches handed to the constructor go through the same checks as with_patch.
    """

    def __init__(self, alphabet: Alphabet, patches: Sequence = ()):
        self.alphabet = alphabet
        checked = []
        for pair in patches:
            checked.append(self._check(pair, checked))
        self._patches = tuple(checked)
        self._table = _build_table(self._patches)

    @classmethod
    def _from_patches(cls, alphabet: Alphabet, patches: Tuple[Patch, ...]) -> 'Plugboard':
        # patches are already checked
        board = cls.__new__(cls)
        board.alphabet = alphabet
        board._patches = patches
        board._table = _build_table(patches)
        return board

    @classmethod
    def empty(cls, alphabet: Alphabet) -> 'Plugboard':
        return cls._from_patches(alphabet, ())

    @property
    def patches(self) -> Tuple[Patch, ...]:
        return self._patches

    def route(self, symbol: str) -> str:
        code = ord(symbol)
        if code < len(self._table):
            return chr(self._table[code])
        return symbol

    def _check(self, pair, existing_patches: Sequence[Patch]) -> Patch:
        if isinstance(pair, Patch):
            pair = (pair.first, pair.second)
        if len(pair) != 2:
            raise ValueError(f'patch {pair!r} must contain exactly two symbols')
        first, second = (str(c).upper() for c in pair)
        if first == second:
            raise ValueError(f'cannot patch {first} with itself')
        for symbol in (first, second):
            if not self.alphabet.contains(symbol):
                raise InvalidCharacterError(f'symbol {symbol!r} is not supported by {self.alphabet}')

        patch = Patch(first, second)
        for existing in existing_patches:
            if existing.overlaps_with(patch):
                raise PatchOverlapError(f'patch {patch} overlaps with {existing}')
        if len(existing_patches) >= MAX_PATCHES:
            raise PlugboardFullError(f'all {MAX_PATCHES} patch slots are in use')
        return patch

    def with_patch(self, pair) -> 'Plugboard':
        patch = self._check(pair, self._patches)
        logger.debug('patching %s', patch)
        return Plugboard._from_patches(self.alphabet, self._patches + (patch,))

    def with_patches(self, *pairs) -> 'Plugboard':
        board = self
        for pair in pairs:
            board = board.with_patch(pair)
        return board

    @classmethod
    def random(cls, alphabet: Alphabet, n_patches: int, seed: int) -> 'Plugboard':
        if not 0 <= n_patches <= min(MAX_PATCHES, len(alphabet) // 2):
            raise ValueError(f'cannot place {n_patches} patches on an alphabet of {len(alphabet)} symbols')
        rng = np.random.default_rng(seed)
        # pick 2n distinct jacks, consecutive ones are cabled together
        jacks = rng.choice(len(alphabet), size=2 * n_patches, replace=False)
        board = cls.empty(alphabet)
        for i in range(n_patches):
            board = board.with_patch((alphabet.symbol_at(jacks[2 * i]), alphabet.symbol_at(jacks[2 * i + 1])))
        return board

    def __repr__(self):
        return f'<Plugboard {" ".join(str(p) for p in self._patches)}>'
