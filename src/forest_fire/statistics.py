"""Per-step and cumulative tree statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .cell import TREE_STATES, CellState
from .grid import GridState

DISPLAY_DECIMALS = 2


def _percent(num: int, den: int) -> float:
    return 0.0 if den == 0 else num / den * 100.0


@dataclass(frozen=True)
class StepStatistics:
    """Statistics of the grid produced by one step.

    Counts are exact integers; percentages are unrounded. Use
    :meth:`rounded` for display.
    """

    step: int
    trees_burning: int
    trees_burned: int
    trees_remaining: int
    trees_grown: int
    trees_burned_total: int
    trees_grown_total: int
    initial_trees: int

    @property
    def burning_percent(self) -> float:
        """Share of remaining trees that are on fire."""
        return _percent(self.trees_burning, self.trees_remaining)

    @property
    def burned_percent(self) -> float:
        """Share of all trees ever present (initial plus grown) that burned down."""
        return _percent(self.trees_burned_total, self.initial_trees + self.trees_grown_total)

    def as_dict(self) -> dict:
        record = asdict(self)
        record["burning_percent"] = self.burning_percent
        record["burned_percent"] = self.burned_percent
        return record

    def rounded(self) -> dict:
        record = self.as_dict()
        record["burning_percent"] = round(record["burning_percent"], DISPLAY_DECIMALS)
        record["burned_percent"] = round(record["burned_percent"], DISPLAY_DECIMALS)
        return record


class RunningStatistics:
    """Cumulative counters of a run.

    ``initial_trees`` is fixed when the accumulator is created; the totals
    only ever grow.
    """

    def __init__(self, initial_trees: int):
        self.initial_trees = initial_trees
        self.trees_burned_total = 0
        self.trees_grown_total = 0
        self.latest: StepStatistics | None = None

    @classmethod
    def for_grid(cls, grid: GridState) -> "RunningStatistics":
        return cls(initial_trees=grid.count(*TREE_STATES))

    def update(
        self,
        step: int,
        previous: GridState,
        current: GridState,
        uncounted_burned: int = 0,
    ) -> StepStatistics:
        """Account for the transition ``previous`` -> ``current`` and return its statistics.

        Growth is the net change in live trees, floored at zero: when more
        trees ignite than grow in the same step, no growth is reported.
        ``uncounted_burned`` Burned cells of ``current`` never held a tree
        (a forced ignition of an empty or burned cell) and are left out of
        the burned counts.
        """
        counts = current.counts()
        live_trees = counts[CellState.TreeA] + counts[CellState.TreeB]
        burning = counts[CellState.Burning]
        burned = max(0, counts[CellState.Burned] - uncounted_burned)

        # remaining_prev - burning_prev is the live-tree count before the step
        live_before = previous.count(*TREE_STATES)
        grown = max(0, live_trees - live_before)

        # A cell stays Burned for exactly one step, so each burned tree is added once
        self.trees_burned_total += burned
        self.trees_grown_total += grown

        self.latest = StepStatistics(
            step=step,
            trees_burning=burning,
            trees_burned=burned,
            trees_remaining=live_trees + burning,
            trees_grown=grown,
            trees_burned_total=self.trees_burned_total,
            trees_grown_total=self.trees_grown_total,
            initial_trees=self.initial_trees,
        )
        return self.latest
