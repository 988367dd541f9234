"""Visualization tools for network training."""

from .plots import plot_training_metrics

__all__ = ["plot_training_metrics"]
