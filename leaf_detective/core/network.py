"""Feedforward network built from an ordered sequence of layers.

The network owns its layers and one shared activation. A training cycle is
``populate`` -> ``run`` -> ``backpropagate``:

    network = Network([2, 2, 1]).connect().add_weights().add_biases()
    network.populate([1, 0]).run()
    network.backpropagate([0], learning_rate=0.5, momentum=1.0)

Momentum here blends the *current* parameter value into each update:

    w <- learning_rate * delta * input + momentum * w

It is not a separately tracked velocity. With ``momentum=1`` the rule is plain
gradient descent; with ``momentum=0`` the previous value is discarded.
"""

from typing import Callable, List, Optional, Sequence, Tuple, Union
import numpy as np

from .activations import Activation, sigmoid
from .layers import Layer
from .parameters import Biases, DimensionError, Weights


class Network:
    """An ordered chain of layers sharing one activation.

    Layers are addressed by index; layer ``i`` feeds layer ``i + 1``.
    """

    def __init__(
        self,
        layers: Sequence[Union[int, Layer]],
        activation: Union[Activation, Tuple[Callable, Callable]] = sigmoid,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize the network.

        Args:
            layers: Layer sizes, or pre-built Layer instances, input first.
            activation: Activation used by every non-input layer, or a
                ``(source, derivative)`` pair of single-float functions.
            rng: Random generator for parameter initialization and the
                default momentum draw. Uses a fresh default generator if None.
        """
        if not isinstance(activation, Activation):
            if not isinstance(activation, (tuple, list)) or len(activation) != 2:
                raise TypeError(
                    "activation must be an Activation or a (source, derivative) pair"
                )
            activation = Activation.from_scalar(*activation)
        self._activation = activation
        self.rng = rng if rng is not None else np.random.default_rng()

        self.layers: List[Layer] = [
            layer if isinstance(layer, Layer) else Layer(layer) for layer in layers
        ]
        if not self.layers:
            raise DimensionError("Network needs at least one layer")

    @property
    def activation(self) -> Activation:
        return self._activation

    @property
    def input_layer(self) -> Layer:
        return self.layers[0]

    @property
    def output_layer(self) -> Layer:
        return self.layers[-1]

    @property
    def output(self) -> np.ndarray:
        """Copy of the output layer's activated neurons."""
        return self.layers[-1].neurons.copy()

    def __len__(self) -> int:
        return len(self.layers)

    def __getitem__(self, index: int) -> Layer:
        return self.layers[index]

    def __iter__(self):
        return iter(self.layers)

    def _pairs(self):
        return zip(self.layers[:-1], self.layers[1:])

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------

    def connect(self) -> "Network":
        """Connect every layer to its successor, front to back."""
        for upstream, downstream in self._pairs():
            upstream.connect(downstream)
        return self

    def add_weights(self) -> "Network":
        """Attach freshly randomized weights to every layer but the last."""
        for upstream, downstream in self._pairs():
            upstream.add_weights(
                Weights(upstream.size, downstream.size).fill_random(self.rng)
            )
        return self

    def add_biases(self) -> "Network":
        """Attach freshly randomized biases to every layer but the first."""
        for layer in self.layers[1:]:
            layer.add_biases(Biases(layer.size).fill_random(self.rng))
        return self

    # ------------------------------------------------------------------
    # Forward pass
    # ------------------------------------------------------------------

    def populate(self, data: Sequence[float]) -> "Network":
        """Write input values into the first layer."""
        self.layers[0].populate(data)
        return self

    feed = populate

    def run(self) -> "Network":
        """Forward pass from the input layer to the output layer.

        Layers are processed strictly left to right, since each layer's raw
        values depend on the previous layer's activated values.
        """
        for upstream, downstream in self._pairs():
            upstream.run(downstream).apply(self._activation)
        return self

    # ------------------------------------------------------------------
    # Backpropagation
    # ------------------------------------------------------------------

    def calculate_deltas(self, targets: Sequence[float]) -> List[Optional[np.ndarray]]:
        """Compute the error term of every non-input neuron.

        Args:
            targets: Expected output values, one per output neuron.

        Returns:
            List indexed like ``layers``; entry 0 is None, every other entry
            holds one delta per neuron of that layer.
        """
        output = self.layers[-1]
        targets = np.asarray(targets, dtype=float)
        if targets.shape != (output.size,):
            raise DimensionError(f"Please pass {output.size} target values")

        derivative = self._activation.derivative
        deltas: List[Optional[np.ndarray]] = [None] * len(self.layers)

        deltas[-1] = (targets - output.neurons) * derivative(output.raw_neurons)
        for index in range(len(self.layers) - 2, 0, -1):
            layer = self.layers[index]
            if layer.weights is None:
                raise RuntimeError("Must add weights before backpropagate")
            downstream_error = np.dot(layer.weights.values.T, deltas[index + 1])
            deltas[index] = downstream_error * derivative(layer.raw_neurons)

        return deltas

    def backpropagate(
        self,
        targets: Sequence[float],
        learning_rate: float = 0.5,
        momentum: Optional[float] = None,
    ) -> "Network":
        """Update every weight and bias from the error against ``targets``.

        All deltas are computed before any parameter changes, so the update
        depends only on the state at the start of the call.

        Args:
            targets: Expected output values, one per output neuron.
            learning_rate: Scale of the gradient term, expected in (0, 1].
            momentum: Share of the current parameter value carried into the
                new value, expected in [0, 1). Drawn from ``rng`` if None.
                Values outside the expected ranges are accepted.

        Returns:
            This network.
        """
        if len(self.layers) < 2:
            raise RuntimeError("Network needs at least two layers to backpropagate")
        if momentum is None:
            momentum = self.rng.random()

        deltas = self.calculate_deltas(targets)

        for index, layer in enumerate(self.layers[:-1]):
            if layer.weights is not None:
                gradient = np.outer(deltas[index + 1], layer.neurons)
                layer.weights.values[...] = (
                    learning_rate * gradient + momentum * layer.weights.values
                )

        for index, layer in enumerate(self.layers[1:], start=1):
            if layer.biases is not None:
                layer.biases.values[...] = (
                    learning_rate * deltas[index] + momentum * layer.biases.values
                )

        return self

    def __repr__(self) -> str:
        sizes = ", ".join(str(layer.size) for layer in self.layers)
        return f"Network([{sizes}])"
