"""Forest fire simulation loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import numpy as np
import pandas as pd
from mesa import Model
from mesa.datacollection import DataCollector

from .cell import CellState, is_tree
from .engine import StepResult, UpdateEngine
from .grid import GridState
from .params import SimulationParams
from .statistics import RunningStatistics, StepStatistics

logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    """Terminal states of a run. All of them are successful endings."""
    ExtinguishedEarly = "extinguished_early"
    CompletedFull = "completed_full"
    Cancelled = "cancelled"


@dataclass(frozen=True)
class SimulationOutcome:
    """Tagged result of a run: how it ended and at which step."""

    kind: OutcomeKind
    step: int

    @property
    def extinguished(self) -> bool:
        return self.kind == OutcomeKind.ExtinguishedEarly


StepObserver = Callable[["ForestFireModel", StepResult, StepStatistics], None]
FinishObserver = Callable[["ForestFireModel", SimulationOutcome], None]


class ForestFireModel(Model):
    """Drives the update engine for up to ``params.steps`` steps.

    Step 1 sets one random cell on fire before the update. After every
    update the run halts as soon as no tree caught fire; the ignition of
    step 1 counts as spread, so the earliest possible halt is step 2.

    ``current_step`` is the step counter of the run. It differs from
    mesa's ``steps``, which also counts calls made after the run finished,
    and from ``params.steps``, the step budget.
    """

    def __init__(
        self,
        params: SimulationParams,
        seed: Optional[int] = None,
        grid: Optional[GridState] = None,
        ignition_pos: Optional[tuple[int, int]] = None,
    ):
        """
        Initialize the simulation.

        Args:
            params: Validated simulation parameters.
            seed: Seed for every random source of the run (initial grid,
                ignition cell and update draws).
            grid: Optional initial grid. When omitted, a random grid with
                ``params.initial_trees_density`` is generated.
            ignition_pos: Optional ``(row, col)`` of the step-1 ignition.
                When omitted, a cell is chosen uniformly at random.
        """
        super().__init__(seed=seed)
        self.params = params.validate()
        self.np_rng = np.random.default_rng(seed)

        if grid is None:
            grid = GridState.random(params.grid_size, params.initial_trees_density, self.np_rng)
        elif grid.size != params.grid_size:
            raise ValueError(f"Grid size {grid.size} does not match grid_size={params.grid_size}")

        self.grid = grid
        self.engine = UpdateEngine(params, rng=self.random)
        self.statistics = RunningStatistics.for_grid(grid)
        self.ignition_pos = ignition_pos
        self.current_step = 0
        self.outcome: Optional[SimulationOutcome] = None
        self.last_result: Optional[StepResult] = None

        self.step_observers: list[StepObserver] = []
        self.finish_observers: list[FinishObserver] = []

        self.datacollector = DataCollector(
            model_reporters={
                "step": lambda m: m.current_step,
                "trees_burning": lambda m: m.statistics.latest.trees_burning,
                "trees_burned": lambda m: m.statistics.latest.trees_burned,
                "trees_remaining": lambda m: m.statistics.latest.trees_remaining,
                "trees_grown": lambda m: m.statistics.latest.trees_grown,
                "trees_burned_total": lambda m: m.statistics.trees_burned_total,
                "trees_grown_total": lambda m: m.statistics.trees_grown_total,
                "burning_percent": lambda m: m.statistics.latest.burning_percent,
                "burned_percent": lambda m: m.statistics.latest.burned_percent,
                "fire_spread": lambda m: m.last_result.fire_spread,
            }
        )

    def add_observer(
        self,
        on_step: Optional[StepObserver] = None,
        on_finish: Optional[FinishObserver] = None,
    ) -> None:
        """Register rendering or logging callbacks."""
        if on_step is not None:
            self.step_observers.append(on_step)
        if on_finish is not None:
            self.finish_observers.append(on_finish)

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    def ignite(self) -> CellState:
        """Set the step-1 ignition cell on fire, whatever it holds.

        Returns the state the cell held before.
        """
        if self.ignition_pos is None:
            row = self.random.randrange(self.params.grid_size)
            col = self.random.randrange(self.params.grid_size)
        else:
            row, col = self.ignition_pos
        overwritten = self.grid.get(row, col)
        self.grid = self.grid.with_cell(row, col, CellState.Burning)
        logger.info("Fire ignited at (%d, %d) on %s cell", row, col, overwritten.name)
        return overwritten

    def step(self) -> None:
        """
        Execute one step of the simulation.

        Does nothing once the run has finished.
        """
        if self.finished:
            return

        self.current_step += 1
        t = self.current_step

        ignited = False
        uncounted_burned = 0
        if t == 1:
            # A non-tree ignition cell is not a tree that burned down
            if not is_tree(self.ignite()):
                uncounted_burned = 1
            ignited = True

        previous = self.grid
        result = self.engine.step(previous)
        self.grid = result.grid
        self.last_result = result
        stats = self.statistics.update(t, previous, result.grid, uncounted_burned=uncounted_burned)
        self.datacollector.collect(self)

        logger.debug(
            "Step %d: burning=%d burned=%d remaining=%d grown=%d",
            t, stats.trees_burning, stats.trees_burned, stats.trees_remaining, stats.trees_grown,
        )

        if not (result.fire_spread or ignited):
            self._finish(SimulationOutcome(OutcomeKind.ExtinguishedEarly, t))
            return

        for observer in self.step_observers:
            observer(self, result, stats)

        if t >= self.params.steps:
            self._finish(SimulationOutcome(OutcomeKind.CompletedFull, t))

    def stop(self) -> None:
        """Request the run to stop at the next step boundary."""
        self.running = False

    def run(self) -> SimulationOutcome:
        """Step until the fire dies out, the step budget is spent or :meth:`stop` is called."""
        while not self.finished:
            if not self.running:
                self._finish(SimulationOutcome(OutcomeKind.Cancelled, self.current_step))
                break
            self.step()
        return self.outcome

    def _finish(self, outcome: SimulationOutcome) -> None:
        self.outcome = outcome
        self.running = False
        for observer in self.finish_observers:
            observer(self, outcome)

    def history(self) -> pd.DataFrame:
        """Per-step statistics collected so far, one row per step."""
        return self.datacollector.get_model_vars_dataframe()
