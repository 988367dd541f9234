"""Core neural network components: activations, parameters, layers, network."""

from .activations import (
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
from .parameters import Weights, Biases, DimensionError
from .layers import Layer
from .network import Network
from .losses import Loss, MSELoss, MAELoss

__all__ = [
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
]
