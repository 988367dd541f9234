"""Layer of neurons in a feedforward network.

A layer stores its activated neuron values together with the raw
(pre-activation) values they were computed from. The raw values are kept
because backpropagation evaluates the activation derivative at them.

Example:
    from leaf_detective.core import Layer, Weights, Biases, sigmoid

    input_layer = Layer(5)
    output_layer = Layer(2)

    weights = Weights(input_layer.size, output_layer.size).fill_random()
    biases = Biases(output_layer.size).populate([-10, 10])

    input_layer.add_weights(weights).connect(output_layer)
    output_layer.add_biases(biases)

    input_layer.populate([1, 1, 1, 1, 1]).run().apply(sigmoid)
"""

from typing import Callable, Optional, Sequence, Union
import numpy as np

from .activations import Activation
from .parameters import Biases, DimensionError, Weights


class Layer:
    """A stage of neurons, optionally owning outgoing weights and incoming biases.

    Attributes:
        size: Number of neurons, fixed at construction.
        neurons: Activated neuron values, shape (size,).
        raw_neurons: Weighted sum plus bias for each neuron, shape (size,).
            Only meaningful for layers that receive input from another layer.
        weights: Outgoing weight matrix of shape (next.size, size), or None.
        biases: Incoming bias vector of shape (size,), or None.
        next: Downstream layer, set by connect.
        previous: Upstream layer, set by connect.
    """

    def __init__(self, size: int):
        """Initialize the layer.

        Args:
            size: Number of neurons.
        """
        if size < 0:
            raise DimensionError("Layer size must be non-negative")
        self._size = int(size)
        self.neurons = np.zeros(self._size)
        self.raw_neurons = np.zeros(self._size)

        self.weights: Optional[Weights] = None
        self.biases: Optional[Biases] = None

        self.next: Optional["Layer"] = None
        self.previous: Optional["Layer"] = None

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def add_weights(self, weights: Weights) -> "Layer":
        """Attach the outgoing weight matrix.

        Args:
            weights: Matrix whose width equals this layer's size.

        Returns:
            This layer.
        """
        if not isinstance(weights, Weights):
            raise TypeError("Please pass a Weights object")
        if weights.width != self._size:
            raise DimensionError(
                f"Width of weight matrix ({weights.width}) must be equal to "
                f"amount of neurons ({self._size})"
            )
        self.weights = weights
        return self

    def add_biases(self, biases: Biases) -> "Layer":
        """Attach the incoming bias vector.

        Args:
            biases: Vector whose length equals this layer's size.

        Returns:
            This layer.
        """
        if not isinstance(biases, Biases):
            raise TypeError("Please pass a Biases object")
        if biases.height != self._size:
            raise DimensionError(
                f"Length of bias vector ({biases.height}) must be equal to "
                f"amount of neurons ({self._size})"
            )
        self.biases = biases
        return self

    def connect(self, layer: "Layer") -> "Layer":
        """Make ``layer`` the downstream neighbour of this layer.

        Returns:
            This layer.
        """
        if not isinstance(layer, Layer):
            raise TypeError("Please pass a Layer object")
        self.next = layer
        layer.previous = self
        return self

    def populate(self, data: Sequence[float]) -> "Layer":
        """Overwrite the neuron values.

        Args:
            data: One number per neuron.

        Returns:
            This layer.
        """
        if len(data) != self._size:
            raise DimensionError(f"Please pass data of length {self._size}")
        values = np.array(data, dtype=float)
        if values.shape != (self._size,):
            raise DimensionError(f"Please pass a flat sequence of {self._size} numbers")
        self.neurons = values
        return self

    def apply(self, activation: Union[Activation, Callable]) -> "Layer":
        """Recompute neurons by activating the raw neuron values.

        Args:
            activation: Activation whose source is applied, or a plain
                elementwise function.

        Returns:
            This layer.
        """
        func = activation.source if isinstance(activation, Activation) else activation
        self.neurons = np.asarray(func(self.raw_neurons), dtype=float).reshape(self._size)
        return self

    def run(self, target: Optional["Layer"] = None) -> "Layer":
        """Propagate this layer's neurons into the raw values of the next layer.

        The downstream layer is left un-activated; call ``apply`` on the
        returned layer to activate it.

        Args:
            target: Downstream layer. Defaults to ``self.next``.

        Returns:
            The downstream layer.
        """
        target = target if target is not None else self.next
        if target is None:
            raise RuntimeError("Must connect a downstream layer before run")
        if self.weights is None:
            raise RuntimeError("Must add weights before run")
        if target.biases is None:
            raise RuntimeError("Must add biases to the downstream layer before run")
        if self.weights.height != target.size:
            raise DimensionError(
                f"Height of weight matrix ({self.weights.height}) must be equal "
                f"to downstream layer size ({target.size})"
            )

        target.raw_neurons = np.dot(self.weights.values, self.neurons) + target.biases.values
        return target

    def __repr__(self) -> str:
        return f"Layer(size={self._size})"
