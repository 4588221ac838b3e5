import io
from typing import TextIO

from enigma.enigma import Enigma


class EnigmaWriter(io.TextIOBase):
    """
    text stream that enciphers everything written to it before passing it on to `out`.
    a buffer with a symbol outside the alphabet is rejected as a whole, nothing of it reaches `out`.
    closing the writer closes `out`, dropping it does not.
    """

    def __init__(self, out: TextIO, enigma: Enigma):
        if out is None:
            raise ValueError('output stream must not be None')
        self.out = out
        self.enigma = enigma

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        if self.closed:
            raise ValueError('I/O operation on closed writer')
        self.out.write(self.enigma.process(s))
        return len(s)

    def flush(self):
        super().flush()
        self.out.flush()

    def close(self):
        if self.closed:
            return
        try:
            super().close()
        finally:
            self.out.close()

    def __del__(self):
        # garbage collection must not close `out`
        pass
