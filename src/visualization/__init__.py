"""Visualization package for the forest fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import InfoPanel, panel_lines

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',
    'panel_lines',

    # Cell state colors
    'EMPTY_COLOR',
    'TREE_A_COLOR',
    'TREE_B_COLOR',
    'BURNING_COLOR',
    'BURNED_COLOR',

    # UI colors
    'BLACK',
    'WHITE',
    'PANEL_COLOR',

    # Default parameters
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FRAME_DELAY',
    'PANEL_HEIGHT',
]
