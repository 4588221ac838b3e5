class EnigmaError(Exception):
    pass


class InvalidCharacterError(EnigmaError, ValueError):
    """A symbol is not part of the machine's alphabet."""


class InvalidStateError(EnigmaError, RuntimeError):
    pass


class PatchOverlapError(InvalidStateError):
    pass


class PlugboardFullError(InvalidStateError):
    pass


class RotorOrderError(InvalidStateError):
    """Entry rotor not in front or reflector not at the end of the chain."""


class UnknownModelError(EnigmaError, LookupError):
    pass


class UnknownRotorError(EnigmaError, LookupError):
    pass


class InventoryError(EnigmaError):
    pass
