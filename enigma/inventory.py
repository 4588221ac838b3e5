import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from enigma.alphabet import Alphabet
from enigma.errors import InventoryError, UnknownModelError, UnknownRotorError
from enigma.model import Model
from enigma.rotor import Rotor

logger = logging.getLogger(__name__)

DEFAULT_INVENTORY = Path(__file__).with_name('inventory.json')


def _find_rotor(rotors: List[Rotor], name: str) -> Rotor:
    for rotor in rotors:
        if rotor.name.lower() == name.lower():
            return rotor
    raise UnknownRotorError(f"cannot find rotor '{name}' for the default configuration")


def parse_model(name: str, descriptor: dict, notches: Dict[str, Dict[str, List[str]]]) -> Model:
    notch_ref = descriptor.get('notch')
    if notch_ref not in notches:
        raise ValueError(f"no notch configuration found for '{notch_ref}'")
    rotor_notches = notches[notch_ref]

    rotors = [Rotor(rotor_name, wiring, tuple(rotor_notches.get(rotor_name, ())))
              for rotor_name, wiring in descriptor['rotors'].items()]

    default_names = descriptor.get('defaultConfiguration')
    if default_names is None:
        default_rotors = list(rotors)
    else:
        default_rotors = [_find_rotor(rotors, rotor_name) for rotor_name in default_names]

    return Model(name, Alphabet(descriptor['alphabet']), tuple(rotors), tuple(default_rotors))


class Inventory:
    """the machine models we know about, read from a json file"""

    def __init__(self, models: Dict[str, Model]):
        self._models = dict(models)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> 'Inventory':
        path = Path(path) if path is not None else DEFAULT_INVENTORY
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            raise InventoryError(f'cannot load inventory from {path}') from e

        models = dict()
        try:
            for name, descriptor in data['models'].items():
                models[name] = parse_model(name, descriptor, data['notches'])
                logger.debug('loaded model %s with rotors %s', name, [r.name for r in models[name].rotors])
        except KeyError as e:
            raise InventoryError(f'inventory {path} lacks the {e} entry') from e
        return cls(models)

    def model_identifiers(self) -> List[str]:
        return list(self._models)

    def get_model(self, name: str) -> Model:
        try:
            return self._models[name]
        except KeyError:
            raise UnknownModelError(f'no such model: {name}') from None
