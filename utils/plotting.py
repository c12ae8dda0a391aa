from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402


def new_figure(figsize: Tuple[float, float] = (16, 6)) -> Tuple[Figure, Axes]:
    """Create a new figure and axis sized for a 256-bar chart."""
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def save(fig: Figure, path) -> Path:
    """Save the figure to *path* (parent directories created automatically)."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(str(target), bbox_inches="tight")
    finally:
        plt.close(fig)
    return target


def nice_axes(
    ax: Axes,
    title: str,
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
) -> Axes:
    """Apply consistent styling to a matplotlib Axes object."""
    ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    return ax


__all__ = [
    "new_figure",
    "save",
    "nice_axes",
]
