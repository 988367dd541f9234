"""Activation functions paired with their analytic derivatives.

Every activation is an immutable ``(source, derivative)`` pair. Both halves
operate elementwise on floats and numpy arrays, so a layer can apply them to
its whole neuron vector at once. Functions written for single floats are
wrapped with ``Activation.from_scalar``.

The derivative is always evaluated at the pre-activation (raw) value, never
at the activated output.

See: https://en.wikipedia.org/wiki/Activation_function
"""

from dataclasses import dataclass
from typing import Callable, Dict
import numpy as np


@dataclass(frozen=True)
class Activation:
    """A forward nonlinearity and its derivative.

    Attributes:
        source: Function mapping a raw neuron value to its activated value.
        derivative: Derivative of ``source`` with respect to its input.
    """
    source: Callable
    derivative: Callable

    def __post_init__(self):
        if not callable(self.source):
            raise TypeError("Activation requires a callable source function")
        if not callable(self.derivative):
            raise TypeError("Activation requires a callable derivative function")

    @classmethod
    def from_scalar(cls, source: Callable, derivative: Callable) -> "Activation":
        """Build an activation from functions that accept a single float.

        Both halves are vectorized so they can be applied to a whole layer.

        Args:
            source: Function mapping one raw value to one activated value.
            derivative: Derivative of ``source`` at one raw value.

        Returns:
            An Activation operating elementwise on arrays.
        """
        if not callable(source) or not callable(derivative):
            raise TypeError("Activation requires callable source and derivative functions")
        return cls(
            np.vectorize(source, otypes=[float]),
            np.vectorize(derivative, otypes=[float]),
        )

    def __call__(self, x):
        """Alias for source."""
        return self.source(x)


def _sigmoid(x):
    return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float)))[()]


def _sigmoid_derivative(x):
    s = _sigmoid(x)
    return s * (1.0 - s)


def _sinc(x):
    x = np.asarray(x, dtype=float)
    safe = np.where(x == 0, 1.0, x)
    return np.where(x == 0, 1.0, np.sin(safe) / safe)[()]


def _sinc_derivative(x):
    x = np.asarray(x, dtype=float)
    safe = np.where(x == 0, 1.0, x)
    slope = np.cos(safe) / safe - np.sin(safe) / safe ** 2
    return np.where(x == 0, 0.0, slope)[()]


identity = Activation(
    lambda x: x,
    lambda x: np.ones_like(np.asarray(x, dtype=float))[()],
)

sigmoid = Activation(_sigmoid, _sigmoid_derivative)

# Sub-gradient at zero is taken as 0.
relu = Activation(
    lambda x: np.maximum(0.0, x),
    lambda x: np.where(np.asarray(x) <= 0, 0.0, 1.0)[()],
)

arctan = Activation(
    np.arctan,
    lambda x: 1.0 / (np.square(x) + 1.0),
)

elliotsig = Activation(
    lambda x: x / (1.0 + np.abs(x)),
    lambda x: 1.0 / np.square(1.0 + np.abs(x)),
)

gaussian = Activation(
    lambda x: np.exp(-np.square(x)),
    lambda x: -2.0 * np.asarray(x, dtype=float)[()] * np.exp(-np.square(x)),
)

sinusoid = Activation(np.sin, np.cos)

sinc = Activation(_sinc, _sinc_derivative)

# log(1 + e^x), evaluated without overflow for large x.
softplus = Activation(
    lambda x: np.logaddexp(0.0, x),
    _sigmoid,
)


ACTIVATIONS: Dict[str, Activation] = {
    "identity": identity,
    "sigmoid": sigmoid,
    "relu": relu,
    "arctan": arctan,
    "elliotsig": elliotsig,
    "gaussian": gaussian,
    "sinusoid": sinusoid,
    "sinc": sinc,
    "softplus": softplus,
}


def get_activation(name: str) -> Activation:
    """Look up a catalog activation by name.

    Args:
        name: One of the keys of ``ACTIVATIONS``.

    Returns:
        The matching Activation.
    """
    try:
        return ACTIVATIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown activation '{name}'. "
            f"Choose from: {', '.join(sorted(ACTIVATIONS))}"
        ) from None
