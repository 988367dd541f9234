"""Error measures used to report training progress.

These are not part of backpropagation, which derives its error term directly
from the difference between targets and outputs.
"""

from abc import ABC, abstractmethod
import numpy as np


class Loss(ABC):
    """Abstract base class for loss functions."""

    @abstractmethod
    def compute(self, y_pred, y_true) -> float:
        """Compute the loss value.

        Args:
            y_pred: Predicted values, any shape.
            y_true: Target values, same shape as y_pred.

        Returns:
            Scalar loss value.
        """
        pass

    def __call__(self, y_pred, y_true) -> float:
        """Alias for compute."""
        return self.compute(y_pred, y_true)


class MSELoss(Loss):
    """Mean Squared Error.

    L = mean((y_pred - y_true)^2)
    """

    def compute(self, y_pred, y_true) -> float:
        diff = np.asarray(y_pred, dtype=float) - np.asarray(y_true, dtype=float)
        return float(np.mean(np.square(diff)))


class MAELoss(Loss):
    """Mean Absolute Error.

    L = mean(|y_pred - y_true|)
    """

    def compute(self, y_pred, y_true) -> float:
        diff = np.asarray(y_pred, dtype=float) - np.asarray(y_true, dtype=float)
        return float(np.mean(np.abs(diff)))
