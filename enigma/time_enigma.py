import random
import time

import tqdm

from enigma.alphabet import Alphabet
from enigma.enigma import Enigma
from enigma.inventory import Inventory
from enigma.plugboard import Plugboard
from enigma.rotor import Rotor

n_messages = 3000
chars_per_message = 256


def build_encoder() -> Enigma:
    alphabet = Alphabet.DEFAULT
    reflector = Inventory.load().get_model('M3').get_rotor('UKW B')
    rotor_seeds = [21, 32, 34]
    rotors = [Rotor.random(f'R{seed}', alphabet, seed=seed, notches=alphabet.symbol_at(seed % len(alphabet)))
              for seed in rotor_seeds]
    plugboard = Plugboard.random(alphabet, n_patches=10, seed=41)
    return Enigma(alphabet, rotors + [reflector], plugboard)


def main():
    encoder = build_encoder()
    rotor_positions = [3, 4, 7]

    messages = [''.join(random.choices(encoder.alphabet.chars, k=chars_per_message)) for _ in range(n_messages)]
    tick = time.time()
    for message in tqdm.tqdm(messages):
        encoder.set_rotor_positions(rotor_positions)
        encoder.process(message)
    tock = time.time()

    avg_time = (tock - tick) / n_messages

    print(f'Average encoding time for message with {chars_per_message} characters: {avg_time:.2e} seconds')


if __name__ == '__main__':
    main()
