import argparse
import json
import logging
import sys
from pathlib import Path

from enigma.errors import EnigmaError
from enigma.inventory import Inventory
from enigma.model import MachineConfiguration
from enigma.writer import EnigmaWriter

logger = logging.getLogger('enigma')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='enigma', description='encipher or decipher text with a rotor machine')
    parser.add_argument('text', nargs='*',
                        help='text to process, words are joined with a space (use --filter to drop it), '
                             'read from stdin when omitted')
    parser.add_argument('-m', '--model', default='Enigma I', help='machine model from the inventory')
    parser.add_argument('-r', '--rotors', nargs='+', default=[], help='rotor names in chain order')
    parser.add_argument('-p', '--positions', nargs='+', type=int, default=[],
                        help='start positions of the rotating rotors')
    parser.add_argument('--patch', action='append', default=[], help='plugboard patch such as AT, repeatable')
    parser.add_argument('-c', '--config', type=Path, help='json file with rotors, positions and patches')
    parser.add_argument('--inventory', type=Path, help='alternative inventory json file')
    parser.add_argument('--filter', action='store_true', help='drop symbols that are not part of the alphabet')
    parser.add_argument('--list-models', action='store_true', help='print the available models and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every rotor step')
    return parser


def load_configuration(args) -> MachineConfiguration:
    if args.config is not None:
        configuration = MachineConfiguration.from_dict(json.loads(args.config.read_text(encoding='utf-8')))
    else:
        configuration = MachineConfiguration()
    # flags win over the config file
    if args.rotors:
        configuration.rotors = tuple(args.rotors)
    if args.positions:
        configuration.positions = tuple(args.positions)
    if args.patch:
        configuration.patches = tuple(args.patch)
    return configuration


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    try:
        inventory = Inventory.load(args.inventory)
        if args.list_models:
            for name in inventory.model_identifiers():
                model = inventory.get_model(name)
                print(f'{name}: {" ".join(r.name for r in model.rotors)}')
            return 0

        model = inventory.get_model(args.model)
        enigma = model.create_instance(load_configuration(args))
        logger.info('model %s, rotor positions %s', model.name, enigma.get_rotor_positions())

        lines = [' '.join(args.text)] if args.text else (line.rstrip('\r\n') for line in sys.stdin)
        writer = EnigmaWriter(sys.stdout, enigma)
        for line in lines:
            if args.filter:
                line = ''.join(c for c in line if enigma.alphabet.contains(c.upper()))
            writer.write(line)
            sys.stdout.write('\n')
        writer.flush()
    except (EnigmaError, ValueError, OSError) as e:
        print(f'enigma: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
