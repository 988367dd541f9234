"""Weight matrices and bias vectors connecting layers.

Both containers are plain shaped numpy storage with two initializers: a
uniform random fill and an element-wise populate from caller data. Shapes are
fixed at construction and checked on every populate.
"""

from typing import List, Optional, Sequence, Tuple
import numpy as np


class DimensionError(ValueError):
    """Raised when data does not match the shape it is written into."""


def _as_array(data, shape: Tuple[int, ...], what: str) -> np.ndarray:
    try:
        array = np.asarray(data, dtype=float)
    except (TypeError, ValueError) as err:
        raise DimensionError(
            f"{what} data must be numeric with shape {shape}"
        ) from err
    if array.shape != shape:
        raise DimensionError(
            f"{what} data has shape {array.shape}, expected {shape}"
        )
    return array


class Weights:
    """Weight matrix between an input layer and an output layer.

    Rows correspond to neurons of the output layer, columns to neurons of the
    input layer, so ``values[row][col]`` scales input neuron ``col`` on its way
    to output neuron ``row``.

    Attributes:
        width: Number of columns (input layer size).
        height: Number of rows (output layer size).
        values: Array of shape (height, width).
    """

    def __init__(self, width: int, height: int):
        """Create a zero-filled weight matrix.

        Args:
            width: Size of the input layer.
            height: Size of the output layer.
        """
        if width < 0 or height < 0:
            raise DimensionError("Weights dimensions must be non-negative")
        self.width = int(width)
        self.height = int(height)
        self.values = np.zeros((self.height, self.width))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    def fill_random(self, rng: Optional[np.random.Generator] = None) -> "Weights":
        """Replace every entry with a uniform draw from [0, 1).

        Args:
            rng: Random generator to draw from. Uses a fresh default
                generator if None.

        Returns:
            This matrix.
        """
        rng = rng if rng is not None else np.random.default_rng()
        self.values[...] = rng.random(self.values.shape)
        return self

    def populate(self, data: Sequence[Sequence[float]]) -> "Weights":
        """Overwrite entries from a nested sequence of matching shape.

        Args:
            data: ``height`` rows of ``width`` numbers each.

        Returns:
            This matrix.
        """
        self.values[...] = _as_array(data, self.values.shape, "Weights")
        return self

    def to_list(self) -> List[List[float]]:
        return self.values.tolist()

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Weights(width={self.width}, height={self.height})"


class Biases:
    """Bias vector owned by an output layer, one entry per neuron.

    Attributes:
        height: Number of entries (owning layer size).
        values: Array of shape (height,).
    """

    def __init__(self, height: int):
        """Create a zero-filled bias vector.

        Args:
            height: Size of the owning layer.
        """
        if height < 0:
            raise DimensionError("Biases height must be non-negative")
        self.height = int(height)
        self.values = np.zeros(self.height)

    @property
    def shape(self) -> Tuple[int]:
        return self.values.shape

    def fill_random(self, rng: Optional[np.random.Generator] = None) -> "Biases":
        """Replace every entry with a uniform draw from [-1, 1).

        Args:
            rng: Random generator to draw from. Uses a fresh default
                generator if None.

        Returns:
            This vector.
        """
        rng = rng if rng is not None else np.random.default_rng()
        self.values[...] = rng.random(self.height) * 2 - 1
        return self

    def populate(self, data: Sequence[float]) -> "Biases":
        """Overwrite entries from a sequence of matching length."""
        self.values[...] = _as_array(data, self.values.shape, "Biases")
        return self

    def to_list(self) -> List[float]:
        return self.values.tolist()

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Biases(height={self.height})"
