#!/usr/bin/env python3
"""Train a network to return the first of three random bits.

The network has two hidden layers of size 3. It is given a list of 3 random
bits, such as [1, 0, 1], and is supposed to return the first value.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from leaf_detective import Trainer, FIRST_BIT


def make_samples(count, rng):
    samples = []
    for _ in range(count):
        bits = rng.integers(0, 2, size=3).tolist()
        samples.append((bits, [bits[0]]))
    return samples


def main():
    rng = np.random.default_rng(FIRST_BIT.seed)
    train_samples = make_samples(200, rng)
    test_samples = make_samples(50, rng)

    print("Training neural network...")
    trainer = Trainer(config=FIRST_BIT)
    trainer.train(train_samples, verbose=False)
    print("Done Training")
    print("-" * 13)

    print("Testing neural network...")
    results = trainer.evaluate(test_samples)
    print(f"Average error: {results['mean_abs_error']:.4f}")


if __name__ == "__main__":
    main()
