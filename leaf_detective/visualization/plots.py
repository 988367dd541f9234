"""Training visualization plots."""

from pathlib import Path
from typing import Optional, Union
import numpy as np

try:
    import matplotlib.pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


def _check_matplotlib():
    if not HAS_MATPLOTLIB:
        raise ImportError(
            "matplotlib is required for plotting. "
            "Install with: pip install matplotlib"
        )


def plot_training_metrics(
    metrics,
    save_path: Optional[Union[str, Path]] = None,
    show: bool = True,
    figsize: tuple = (10, 4),
    title: str = "Training Metrics",
) -> "Optional[plt.Figure]":
    """Plot per-epoch error and timing of a training run.

    The error panel marks the best epoch and switches to a log scale when
    the error spans more than two orders of magnitude.

    Args:
        metrics: TrainingMetrics (anything with ``epoch_errors`` and
            ``epoch_times``).
        save_path: Path to save the figure. If None, figure is not saved.
        show: Whether to display the figure.
        figsize: Figure size as (width, height).
        title: Figure title.

    Returns:
        The matplotlib Figure object.
    """
    _check_matplotlib()

    errors = np.asarray(metrics.epoch_errors, dtype=float)
    times_ms = np.asarray(metrics.epoch_times, dtype=float) * 1000
    epochs = np.arange(len(errors))

    fig, (ax_err, ax_time) = plt.subplots(1, 2, figsize=figsize)

    # Error per epoch
    ax_err.plot(epochs, errors, linewidth=1.5, color="#2E86AB", label="MSE")
    if len(errors):
        best = int(np.argmin(errors))
        ax_err.scatter([best], [errors[best]], color="#E94F37", zorder=3,
                       label=f"best: epoch {best} ({errors[best]:.4g})")
        ax_err.axhline(errors[-1], color="gray", linestyle=":", alpha=0.7,
                       label=f"final: {errors[-1]:.4g}")
        if errors.min() > 0 and errors.max() / errors.min() > 100:
            ax_err.set_yscale("log")
        ax_err.legend()
    ax_err.set_xlabel("Epoch")
    ax_err.set_ylabel("MSE")
    ax_err.set_title("Error")
    ax_err.grid(True, alpha=0.3)

    # Time per epoch
    ax_time.bar(np.arange(len(times_ms)), times_ms, color="#A8DADC", width=1.0)
    if len(times_ms):
        ax_time.axhline(times_ms.mean(), color="#E94F37", linestyle="--",
                        label=f"mean: {times_ms.mean():.1f} ms")
        ax_time.legend()
    ax_time.set_xlabel("Epoch")
    ax_time.set_ylabel("ms")
    ax_time.set_title("Time per Epoch")
    ax_time.grid(True, alpha=0.3, axis="y")

    fig.suptitle(title, fontsize=14, fontweight="bold")
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
