"""Grid rendering functionality for the forest fire simulation.

This module provides the GridRenderer class which handles drawing the
cellular automaton grid with proper colors for each cell state.
"""

from typing import TYPE_CHECKING

import pygame

from forest_fire.cell import CellState
from .colors import (
    BLACK,
    BURNED_COLOR,
    BURNING_COLOR,
    EMPTY_COLOR,
    TREE_A_COLOR,
    TREE_B_COLOR,
    Color,
)

if TYPE_CHECKING:
    from forest_fire.grid import GridState


class GridRenderer:
    """Renders the forest grid onto a Pygame surface.

    Each cell is drawn as a square colored by its current state.

    Attributes:
        cell_size: Size of each cell in pixels.
    """

    STATE_COLORS = {
        CellState.Empty: EMPTY_COLOR,
        CellState.TreeA: TREE_A_COLOR,
        CellState.TreeB: TREE_B_COLOR,
        CellState.Burning: BURNING_COLOR,
        CellState.Burned: BURNED_COLOR,
    }

    def __init__(self, cell_size: int) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels.
        """
        self.cell_size = cell_size

    def get_cell_color(self, state) -> Color:
        """Get the RGB color for a cell state.

        Args:
            state: CellState or its integer code.

        Returns:
            RGB color tuple for the given state.
        """
        return self.STATE_COLORS[CellState(int(state))]

    def surface_size(self, grid: "GridState") -> tuple[int, int]:
        side = grid.size * self.cell_size
        return side, side

    def draw_base(self, screen: pygame.Surface, grid: "GridState", offset_x: int = 0, offset_y: int = 0) -> None:
        """Draw every cell, row 0 at the top."""
        cells = grid.snapshot()
        size = grid.size

        for row in range(size):
            for col in range(size):
                pygame.draw.rect(
                    screen,
                    self.get_cell_color(cells[row, col]),
                    (
                        offset_x + col * self.cell_size,
                        offset_y + row * self.cell_size,
                        self.cell_size,
                        self.cell_size,
                    ),
                )

        side = size * self.cell_size
        pygame.draw.rect(screen, BLACK, (offset_x, offset_y, side, side), 1)
