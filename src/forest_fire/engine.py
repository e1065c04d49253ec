"""Cellular-automaton update rule for the forest grid."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

import numpy as np

from .cell import CellState, is_tree
from .grid import GridState
from .params import SimulationParams

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float: ...


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single grid update."""

    grid: GridState
    fire_spread: bool
    ignitions: int = 0


class UpdateEngine:
    """Applies the transition rule to every cell of a grid.

    Each call to :meth:`step` reads only from the pre-step grid and writes
    into a separate buffer, so the result does not depend on the order in
    which cells are visited. Random draws are taken from the injected
    source in row-major order:

    - one draw per live tree with a burning neighbour (ignition check),
    - one draw per empty cell (growth check),
    - one extra draw when a tree grows (TreeA or TreeB coin flip).

    Burning and burned cells change deterministically and consume no draws.
    """

    def __init__(self, params: SimulationParams, rng: Optional[RandomSource] = None):
        """
        Initialize the update engine.

        Args:
            params: Simulation parameters; only the growth and spread
                probabilities are used here.
            rng: Source of uniform random draws. Defaults to a fresh
                ``random.Random``.
        """
        self.params = params
        self.rng = rng if rng is not None else random.Random()

    def _next_state(self, state: int, burning_nearby: bool, rng: RandomSource) -> tuple[CellState, bool]:
        """Return ``(next_state, ignited)`` for a cell."""
        if is_tree(state):
            if burning_nearby and rng.random() < self.params.fire_spread_chance:
                return CellState.Burning, True
            return CellState(state), False

        if state == CellState.Empty:
            if rng.random() < self.params.tree_growth_rate:
                return (CellState.TreeA if rng.random() < 0.5 else CellState.TreeB), False
            return CellState.Empty, False

        if state == CellState.Burning:
            return CellState.Burned, False

        return CellState.Empty, False

    def cell_transition(
        self,
        grid: GridState,
        row: int,
        col: int,
        rng: Optional[RandomSource] = None,
    ) -> tuple[CellState, bool]:
        """Compute the next state of one cell from the current grid.

        Uses :meth:`GridState.neighbors` for the neighbourhood, so it can be
        used to check :meth:`step` cell by cell, in any order and with any
        random source.
        """
        burning_nearby = CellState.Burning in grid.neighbors(row, col)
        return self._next_state(grid.get(row, col), burning_nearby, rng or self.rng)

    def step(self, grid: GridState, order: Optional[Iterable[tuple[int, int]]] = None) -> StepResult:
        """
        Compute the next grid.

        Args:
            grid: Current (pre-step) grid. It is not modified.
            order: Optional ``(row, col)`` positions to evaluate, in the given
                order. Burning and burned cells advance regardless; a tree or
                empty cell left out keeps its state, so a partial list only
                makes sense when checking the rule cell by cell. By default
                every cell that needs a random draw is visited, in row-major
                order.

        Returns:
            StepResult with the new grid, the spread flag (True iff at least
            one tree caught fire) and the number of new ignitions.
        """
        current = grid.snapshot()
        burning_nearby = grid.burning_neighbor_mask()

        # Deterministic transitions
        new_cells = current.copy()
        new_cells[current == CellState.Burning] = CellState.Burned
        new_cells[current == CellState.Burned] = CellState.Empty

        if order is None:
            trees = (current == CellState.TreeA) | (current == CellState.TreeB)
            needs_draw = (trees & burning_nearby) | (current == CellState.Empty)
            order = (tuple(pos) for pos in np.argwhere(needs_draw))

        ignitions = 0
        for row, col in order:
            state, ignited = self._next_state(int(current[row, col]), bool(burning_nearby[row, col]), self.rng)
            new_cells[row, col] = state
            ignitions += ignited

        logger.debug("Grid update finished with %d new ignitions", ignitions)
        return StepResult(grid=GridState(new_cells), fire_spread=ignitions > 0, ignitions=ignitions)
