#!/usr/bin/env python3
"""Train a network to convert Celsius to Fahrenheit.

The network has two hidden layers of size 4 and 2. It is given a temperature
between 0 and 100 degrees Celsius and returns the temperature in Fahrenheit.
Both are normalized by 212, the highest possible temperature (100 C = 212 F).
"""

import sys
import time
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from leaf_detective import Trainer, CELSIUS_TO_FAHRENHEIT

SCALE = 212.0


def make_samples(count, rng):
    samples = []
    for celsius in rng.integers(0, 101, size=count):
        samples.append(([celsius / SCALE], [(celsius * 1.8 + 32) / SCALE]))
    return samples


def main():
    rng = np.random.default_rng(CELSIUS_TO_FAHRENHEIT.seed)
    samples = make_samples(1000, rng)
    train_samples, test_samples = samples[:800], samples[800:]

    start = time.time()
    print("Training neural network...")
    trainer = Trainer(config=CELSIUS_TO_FAHRENHEIT)
    trainer.train(train_samples, verbose=False)
    print("Done Training")
    print(f"Took {(time.time() - start) * 1000:.0f} milliseconds")
    print("-" * 13)

    print("Testing neural network...")
    results = trainer.evaluate(test_samples, scale=SCALE)
    print(f"Average error: {results['mean_abs_error']:.2f} degrees Fahrenheit")


if __name__ == "__main__":
    main()
