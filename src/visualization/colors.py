"""Color definitions and constants for the forest fire visualization.

This module contains all RGB color tuples and default configuration values
used throughout the Pygame visualization.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

EMPTY_COLOR: Color = (255, 255, 255)                # white (no vegetation)
TREE_A_COLOR: Color = (0, 255, 0)                   # green
TREE_B_COLOR: Color = (0, 139, 0)                   # green4
BURNING_COLOR: Color = (255, 0, 0)                  # red (on fire)
BURNED_COLOR: Color = (0, 0, 0)                     # black (burned out)

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Grid frame, text
WHITE: Color = (255, 255, 255)                      # Background
PANEL_COLOR: Color = (80, 0, 0)                     # Info panel background

# ============================================================================
# DEFAULT DISPLAY PARAMETERS
# ============================================================================

DEFAULT_CELL_SIZE: int = 6                          # Cell size in pixels
DEFAULT_FRAME_DELAY: float = 0.1                    # Seconds between frames
PANEL_HEIGHT: int = 90                              # Info panel height in pixels
