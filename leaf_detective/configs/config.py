"""Configuration system for network architecture and training hyperparameters."""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List, Optional, Union
import json
import numpy as np

from ..core.activations import get_activation
from ..core.network import Network


@dataclass
class TrainingConfig:
    """Complete training configuration.

    It can be saved to and loaded from JSON for reproducibility.

    Attributes:
        # Architecture
        layer_sizes: Neuron count of every layer, input first.
        activation: Name of the catalog activation shared by all layers.

        # Update rule
        learning_rate: Scale of the gradient term, expected in (0, 1].
        momentum: Share of the current parameter value kept in each update.
            None draws a fresh value in [0, 1) on every update.

        # Schedule
        epochs: Passes over the training samples.
        iterations_per_sample: Forward/backward cycles per sample per epoch.

        # Logging
        log_interval: Epochs between progress logs.

        # Random seed
        seed: Random seed for reproducibility.
    """
    # Architecture
    layer_sizes: List[int] = field(default_factory=lambda: [2, 2, 1])
    activation: str = "sigmoid"

    # Update rule
    learning_rate: float = 0.5
    momentum: Optional[float] = 1.0

    # Schedule
    epochs: int = 1
    iterations_per_sample: int = 1

    # Logging
    log_interval: int = 10

    # Random seed
    seed: Optional[int] = None

    def build_network(self) -> Network:
        """Create a connected network with randomized parameters."""
        network = Network(
            self.layer_sizes,
            activation=get_activation(self.activation),
            rng=np.random.default_rng(self.seed),
        )
        return network.connect().add_weights().add_biases()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        """Convert config to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingConfig":
        """Create config from dictionary."""
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "TrainingConfig":
        """Create config from JSON string."""
        return cls.from_dict(json.loads(json_str))


def save_config(config: TrainingConfig, path: Union[str, Path]) -> None:
    """Save configuration to JSON file.

    Args:
        config: Configuration to save.
        path: File path for saving.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(config.to_json())


def load_config(path: Union[str, Path]) -> TrainingConfig:
    """Load configuration from JSON file.

    Args:
        path: File path to load from.

    Returns:
        Loaded configuration.
    """
    with open(path, "r") as f:
        return TrainingConfig.from_json(f.read())


# Preset configurations for the bundled examples

# Return the first of three random bits
FIRST_BIT = TrainingConfig(
    layer_sizes=[3, 3, 3, 1],
    activation="sigmoid",
    learning_rate=0.8,
    momentum=1.0,
    epochs=1,
    iterations_per_sample=50,
)

# Temperatures normalized by 212 (100 C = 212 F)
CELSIUS_TO_FAHRENHEIT = TrainingConfig(
    layer_sizes=[1, 4, 2, 1],
    activation="sigmoid",
    learning_rate=0.01,
    momentum=1.0,
    epochs=1,
    iterations_per_sample=1000,
)
