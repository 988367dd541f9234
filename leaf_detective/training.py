"""Training loop and utilities for feedforward networks."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import json
import time
import numpy as np

from .configs.config import TrainingConfig
from .core.losses import MAELoss, MSELoss
from .core.network import Network

Sample = Tuple[Sequence[float], Sequence[float]]


@dataclass
class TrainingMetrics:
    """Container for training metrics.

    Attributes:
        epoch_errors: Mean squared error over the samples of each epoch,
            measured after the sample's last update cycle.
        epoch_times: Wall-clock time per epoch.
    """
    epoch_errors: List[float] = field(default_factory=list)
    epoch_times: List[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return {
            "epoch_errors": self.epoch_errors,
            "epoch_times": self.epoch_times,
        }

    def save(self, path: str) -> None:
        """Save metrics to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def _as_targets(expected) -> np.ndarray:
    return np.atleast_1d(np.asarray(expected, dtype=float))


class Trainer:
    """Training loop for a network.

    Each sample is populated once per epoch and then driven through
    ``iterations_per_sample`` forward/backward cycles.
    """

    def __init__(
        self,
        config: Optional[TrainingConfig] = None,
        network: Optional[Network] = None,
    ):
        """Initialize trainer.

        Args:
            config: Training configuration. Uses defaults if None.
            network: Pre-built, wired network. Created from config if None.
        """
        self.config = config or TrainingConfig()
        self.network = network if network is not None else self.config.build_network()

        self.metrics = TrainingMetrics()
        self.current_epoch = 0
        self._mse = MSELoss()
        self._mae = MAELoss()

    def train_sample(self, inputs: Sequence[float], expected) -> float:
        """Train on a single sample.

        Returns:
            Squared error of the output produced by the last forward pass.
        """
        targets = _as_targets(expected)
        self.network.populate(inputs)

        error = 0.0
        for _ in range(self.config.iterations_per_sample):
            self.network.run()
            error = self._mse(self.network.output, targets)
            self.network.backpropagate(
                targets,
                learning_rate=self.config.learning_rate,
                momentum=self.config.momentum,
            )
        return error

    def train(self, samples: Sequence[Sample], verbose: bool = True) -> TrainingMetrics:
        """Run full training loop.

        Args:
            samples: Sequence of (input, expected) pairs.
            verbose: Whether to print progress.

        Returns:
            Training metrics.
        """
        start_time = time.time()

        for epoch in range(self.config.epochs):
            self.current_epoch = epoch
            epoch_start = time.time()

            errors = [self.train_sample(inputs, expected) for inputs, expected in samples]
            epoch_error = float(np.mean(errors)) if errors else 0.0

            self.metrics.epoch_errors.append(epoch_error)
            self.metrics.epoch_times.append(time.time() - epoch_start)

            if verbose and epoch % self.config.log_interval == 0:
                print(f"Epoch {epoch}: error={epoch_error:.6f}")

        total_time = time.time() - start_time

        if verbose:
            print(f"\nTraining complete in {total_time:.1f}s")
            print(f"Epochs: {len(self.metrics.epoch_errors)}")

        return self.metrics

    def predict(self, inputs: Sequence[float]) -> np.ndarray:
        """Run a forward pass and return the network output."""
        return self.network.populate(inputs).run().output

    def evaluate(self, samples: Sequence[Sample], scale: float = 1.0) -> Dict[str, float]:
        """Evaluate the network without updating it.

        Args:
            samples: Sequence of (input, expected) pairs.
            scale: Factor applied to absolute errors, e.g. to undo input
                normalization.

        Returns:
            Dictionary of evaluation metrics.
        """
        abs_errors = []
        squared_errors = []

        for inputs, expected in samples:
            output = self.predict(inputs)
            targets = _as_targets(expected)
            abs_errors.append(self._mae(output, targets) * scale)
            squared_errors.append(self._mse(output, targets))

        return {
            "mean_abs_error": float(np.mean(abs_errors)),
            "max_abs_error": float(np.max(abs_errors)),
            "mean_squared_error": float(np.mean(squared_errors)),
        }


def train_network(
    config: Optional[TrainingConfig] = None,
    samples: Sequence[Sample] = (),
    verbose: bool = True,
) -> Tuple[Network, TrainingMetrics]:
    """Convenience function to train a network.

    Args:
        config: Training configuration.
        samples: Sequence of (input, expected) pairs.
        verbose: Whether to print progress.

    Returns:
        Tuple of (trained_network, metrics).
    """
    trainer = Trainer(config=config)
    metrics = trainer.train(samples, verbose=verbose)
    return trainer.network, metrics
