from __future__ import annotations

from typing import Any, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..grid import GridState
from .palettes import DEFAULT_HISTORY, HistorySpec, state_cmap


def as_2d_numpy_grid(grid: Any, *, name: str = "grid") -> np.ndarray:
    """Coerce input to a 2D numpy array.

    - Accepts ``GridState``, list-likes or numpy arrays.
    """

    if isinstance(grid, GridState):
        return grid.snapshot()
    array = np.asarray(grid)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a 2D array (H x W). Got shape={array.shape}.")
    return array


class GridVisualizer:
    """Small helper to render forest grids and statistics with Matplotlib.

    Row 0 of the grid is drawn at the top.
    """

    def __init__(self, *, show_axes: bool = False) -> None:
        self.show_axes = show_axes

    def plot_grid(
        self,
        grid: Any,
        *,
        title: str = "Forest Fire Simulation",
        step: Optional[int] = None,
        total_steps: Optional[int] = None,
        ax: Any | None = None,
    ) -> Any:
        """Plot a grid snapshot with one colour per cell state."""

        grid2d = as_2d_numpy_grid(grid)
        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(6, 6))

        cmap, norm = state_cmap()
        ax.imshow(grid2d, cmap=cmap, norm=norm, origin="upper", interpolation="nearest")
        ax.set_title(title)
        ax.set_aspect("equal")

        if step is not None:
            caption = f"Time: {step}" if total_steps is None else f"Time: {step} / {total_steps}"
            ax.set_xlabel(caption)

        if not self.show_axes:
            ax.set_xticks([])
            ax.set_yticks([])
        return ax

    def plot_history(
        self,
        history: pd.DataFrame,
        *,
        spec: HistorySpec = DEFAULT_HISTORY,
        percentages: bool = False,
        ax: Any | None = None,
    ) -> Any:
        """Plot per-step statistics from ``ForestFireModel.history()``.

        With ``percentages=True`` the burning and burned shares are drawn
        instead of the tree counts.
        """

        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(8, 4))

        x = history["step"] if "step" in history else history.index
        if percentages:
            ax.plot(x, history["burning_percent"], color=spec.burning, label="burning %")
            ax.plot(x, history["burned_percent"], color=spec.burned, label="burned %")
            ax.set_ylabel("Percent")
        else:
            ax.plot(x, history["trees_burning"], color=spec.burning, label="burning")
            ax.plot(x, history["trees_burned"], color=spec.burned, label="burned")
            ax.plot(x, history["trees_remaining"], color=spec.remaining, label="remaining")
            ax.plot(x, history["trees_grown"], color=spec.grown, linestyle="--", label="grown")
            ax.set_ylabel("Trees")

        ax.set_xlabel("Step")
        ax.legend(loc="best")
        return ax

    def plot_run(self, grid: Any, history: pd.DataFrame, *, total_steps: Optional[int] = None) -> Any:
        """Final grid and statistics side by side."""

        fig, axes = plt.subplots(1, 2, figsize=(13, 5))
        step = int(history["step"].iloc[-1]) if len(history) else None
        self.plot_grid(grid, step=step, total_steps=total_steps, ax=axes[0])
        self.plot_history(history, ax=axes[1])
        fig.tight_layout()
        return fig

    def save(self, fig: Any, path: str, *, dpi: int = 150) -> None:
        """Save a Matplotlib figure to disk."""

        fig.savefig(path, dpi=dpi, bbox_inches="tight")
