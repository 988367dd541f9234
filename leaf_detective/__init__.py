"""Leaf Detective.

A minimal feedforward neural network engine. Layers of neurons are connected
by weight matrices and bias vectors, inputs are propagated forward through a
shared activation, and parameters are adjusted by backpropagation.

Architecture:
    - Activation: (source, derivative) pair applied elementwise
    - Weights / Biases: shaped parameter storage with random initialization
    - Layer: activated and raw neuron values plus attached parameters
    - Network: ordered layers driving forward and backward sweeps

Example:
    from leaf_detective import Network, sigmoid

    network = Network([3, 3, 3, 1], activation=sigmoid)
    network.connect().add_weights().add_biases()

    network.populate([1, 0, 1]).run()
    network.backpropagate([1], learning_rate=0.8, momentum=1.0)
    print(network.output)

For a training loop:
    from leaf_detective import Trainer, FIRST_BIT

    trainer = Trainer(config=FIRST_BIT)
    trainer.train(samples)
    results = trainer.evaluate(test_samples)
    print(f"Average error: {results['mean_abs_error']}")
"""

__version__ = "0.1.0"

from .core.activations import (
    Activation,
    ACTIVATIONS,
    get_activation,
    identity,
    sigmoid,
    relu,
    arctan,
    elliotsig,
    gaussian,
    sinusoid,
    sinc,
    softplus,
)
from .core.parameters import Weights, Biases, DimensionError
from .core.layers import Layer
from .core.network import Network
from .core.losses import Loss, MSELoss, MAELoss
from .configs.config import (
    TrainingConfig,
    load_config,
    save_config,
    FIRST_BIT,
    CELSIUS_TO_FAHRENHEIT,
)
from .training import Trainer, TrainingMetrics, train_network

# Visualization imports (optional dependency)
from .visualization import plot_training_metrics

__all__ = [
    # Core components
    "Activation",
    "ACTIVATIONS",
    "get_activation",
    "identity",
    "sigmoid",
    "relu",
    "arctan",
    "elliotsig",
    "gaussian",
    "sinusoid",
    "sinc",
    "softplus",
    "Weights",
    "Biases",
    "DimensionError",
    "Layer",
    "Network",
    "Loss",
    "MSELoss",
    "MAELoss",
    # Configuration
    "TrainingConfig",
    "load_config",
    "save_config",
    "FIRST_BIT",
    "CELSIUS_TO_FAHRENHEIT",
    # Training
    "Trainer",
    "TrainingMetrics",
    "train_network",
    # Visualization (optional)
    "plot_training_metrics",
]
