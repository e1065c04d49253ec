"""Analysis package.

Matplotlib helpers for grid snapshots and statistics histories.
"""

from .grid_viz import GridVisualizer, as_2d_numpy_grid
from .palettes import STATE_COLORS, state_cmap

__all__ = ["GridVisualizer", "as_2d_numpy_grid", "STATE_COLORS", "state_cmap"]
