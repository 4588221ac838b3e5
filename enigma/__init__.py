from enigma.alphabet import Alphabet
from enigma.enigma import Enigma, RotorStage
from enigma.errors import (
    EnigmaError,
    InvalidCharacterError,
    InvalidStateError,
    InventoryError,
    PatchOverlapError,
    PlugboardFullError,
    RotorOrderError,
    UnknownModelError,
    UnknownRotorError,
)
from enigma.inventory import Inventory
from enigma.model import MachineConfiguration, Model
from enigma.plugboard import Patch, Plugboard
from enigma.rotor import Rotor, RotorKind
from enigma.writer import EnigmaWriter
