"""Grid state of the forest with clamped boundary addressing."""

from __future__ import annotations

import numpy as np

from .cell import CellState

GRID_DTYPE = np.int8
_VALID_CODES = np.array([state.value for state in CellState], dtype=GRID_DTYPE)


class GridState:
    """Square matrix of cell states.

    Rows and columns are 0-indexed. A grid is never modified after it is
    built: the update engine produces a new ``GridState`` each step, and the
    only other way to change a cell is :meth:`with_cell`, which also returns
    a new grid.

    Neighbour lookups use clamped boundaries: an index that falls outside the
    grid is pulled back to the nearest edge, so an edge cell sees itself in
    place of the missing neighbour.
    """

    def __init__(self, cells: np.ndarray):
        """
        Initialize a grid from a state matrix.

        Args:
            cells: Square 2D array of ``CellState`` codes. The array is copied.
        """
        array = np.array(cells, dtype=GRID_DTYPE)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Grid must be a square 2D matrix, got shape={array.shape}")
        if array.size == 0:
            raise ValueError("Grid must contain at least one cell")
        if not np.isin(array, _VALID_CODES).all():
            raise ValueError("Grid contains unknown cell state codes")
        array.setflags(write=False)
        self._cells = array

    @classmethod
    def random(cls, size: int, density: float, rng: np.random.Generator) -> "GridState":
        """Build a grid where each cell holds a tree with probability ``density``.

        Trees are split evenly between ``TreeA`` and ``TreeB``; no cell starts
        burning or burned.
        """
        probabilities = [1.0 - density, density * 0.5, density * 0.5, 0.0, 0.0]
        codes = rng.choice(_VALID_CODES, size=(size, size), p=probabilities)
        return cls(codes)

    @classmethod
    def filled(cls, size: int, state: CellState) -> "GridState":
        return cls(np.full((size, size), state, dtype=GRID_DTYPE))

    @property
    def size(self) -> int:
        return self._cells.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        return self._cells.shape

    def get(self, row: int, col: int) -> CellState:
        """Return the state at ``(row, col)``."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} grid")
        return CellState(int(self._cells[row, col]))

    def _clamp(self, index: int) -> int:
        return min(max(index, 0), self.size - 1)

    def neighbors(self, row: int, col: int) -> list[CellState]:
        """Return the left, up, right and down neighbours of a cell.

        Missing neighbours at the edge resolve to the clamped index.
        """
        return [
            self.get(row, self._clamp(col - 1)),
            self.get(self._clamp(row - 1), col),
            self.get(row, self._clamp(col + 1)),
            self.get(self._clamp(row + 1), col),
        ]

    def burning_neighbor_mask(self) -> np.ndarray:
        """Boolean matrix, True where at least one orthogonal neighbour is burning.

        Edge padding reproduces the clamped lookup of :meth:`neighbors`.
        """
        burning = np.pad(self._cells == CellState.Burning, 1, mode="edge")
        return (
            burning[1:-1, :-2]    # left
            | burning[:-2, 1:-1]  # up
            | burning[1:-1, 2:]   # right
            | burning[2:, 1:-1]   # down
        )

    def count(self, *states: CellState) -> int:
        """Number of cells holding any of ``states``."""
        return int(np.isin(self._cells, [int(s) for s in states]).sum())

    def counts(self) -> dict[CellState, int]:
        codes = np.bincount(self._cells.ravel(), minlength=len(CellState))
        return {state: int(codes[state]) for state in CellState}

    def snapshot(self) -> np.ndarray:
        """Read-only view of the state matrix."""
        return self._cells

    def to_array(self) -> np.ndarray:
        """Writable copy of the state matrix."""
        return self._cells.copy()

    def with_cell(self, row: int, col: int, state: CellState) -> "GridState":
        """Return a new grid with a single cell replaced."""
        cells = self.to_array()
        cells[row, col] = state
        return GridState(cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self) -> str:
        counts = {state.name: n for state, n in self.counts().items()}
        return f"GridState(size={self.size}, counts={counts})"
