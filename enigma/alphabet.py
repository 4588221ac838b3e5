import functools
import string

import numpy as np

from enigma.errors import InvalidCharacterError


class Alphabet:
    """
    ordered set of the symbols a machine accepts.
    symbols are upper-cased, deduplicated and sorted, so 'cba' and 'ABC' give the same alphabet.
    the index tables are numpy arrays indexed by code point (sized to the highest symbol),
    entries for symbols outside the alphabet are 0 and must not be trusted.
    """

    DEFAULT: "Alphabet"

    def __init__(self, chars: str):
        if not chars:
            raise ValueError('alphabet must not be empty')
        self.chars = ''.join(sorted(set(chars.upper())))

    def __len__(self):
        return len(self.chars)

    def __iter__(self):
        return iter(self.chars)

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.chars == other.chars

    def __hash__(self):
        return hash(self.chars)

    def __repr__(self):
        return f'Alphabet({self.chars!r})'

    def contains(self, symbol: str) -> bool:
        return len(symbol) == 1 and symbol in self.chars

    def index_of(self, symbol: str) -> int:
        if not self.contains(symbol):
            raise InvalidCharacterError(f'symbol {symbol!r} is not part of {self}')
        return self.chars.index(symbol)

    def symbol_at(self, index: int) -> str:
        return self.chars[index]

    @functools.cached_property
    def _symbol_index(self) -> np.ndarray:
        codes = np.array([ord(c) for c in self.chars])
        table = np.zeros(codes[-1] + 1, dtype=np.int64)
        table[codes] = np.arange(len(codes))
        table.flags.writeable = False
        return table

    def symbol_index_table(self) -> np.ndarray:
        return self._symbol_index

    def wiring_index_table(self, wiring: str) -> np.ndarray:
        """position of every wiring symbol within the wiring, i.e. the inverse permutation"""
        table = np.zeros(ord(self.chars[-1]) + 1, dtype=np.int64)
        for i, symbol in enumerate(wiring):
            table[ord(symbol)] = i
        table.flags.writeable = False
        return table


Alphabet.DEFAULT = Alphabet(string.ascii_uppercase)
