"""Unit tests for step statistics."""

import numpy as np
import pytest

from forest_fire.cell import CellState
from forest_fire.grid import GridState
from forest_fire.statistics import RunningStatistics, StepStatistics

E, A, B, F, X = (int(s) for s in CellState)


class TestStepStatistics:
    """Test cases for the percentage properties."""

    def make(self, **overrides):
        values = dict(
            step=1, trees_burning=0, trees_burned=0, trees_remaining=0, trees_grown=0,
            trees_burned_total=0, trees_grown_total=0, initial_trees=0,
        )
        values.update(overrides)
        return StepStatistics(**values)

    def test_zero_denominators_give_zero_percent(self):
        stats = self.make()
        assert stats.burning_percent == 0.0
        assert stats.burned_percent == 0.0

    def test_percentages(self):
        stats = self.make(
            trees_burning=1, trees_remaining=3,
            trees_burned_total=2, initial_trees=5, trees_grown_total=1,
        )
        assert stats.burning_percent == pytest.approx(100 / 3)
        assert stats.burned_percent == pytest.approx(100 / 3)

    def test_rounded_for_display_only(self):
        stats = self.make(trees_burning=1, trees_remaining=3)
        assert stats.rounded()["burning_percent"] == 33.33
        assert stats.as_dict()["burning_percent"] == pytest.approx(33.333333)
        assert stats.rounded()["trees_burning"] == 1


class TestRunningStatistics:
    """Test cases for cumulative counters."""

    def test_initial_trees_from_grid(self):
        grid = GridState(np.array([[A, B], [E, A]]))
        assert RunningStatistics.for_grid(grid).initial_trees == 3

    def test_update_counts(self):
        previous = GridState(np.array([
            [F, A, A],
            [E, A, E],
            [E, E, X],
        ]))
        current = GridState(np.array([
            [X, F, A],
            [B, F, A],
            [E, E, E],
        ]))
        running = RunningStatistics(initial_trees=3)
        stats = running.update(1, previous, current)

        assert stats.trees_burning == 2
        assert stats.trees_burned == 1
        assert stats.trees_remaining == 5   # 3 trees + 2 burning
        # 3 live trees before, 3 after: growth of 2 hidden by 2 ignitions
        assert stats.trees_grown == 0
        assert running.trees_burned_total == 1

    def test_growth_floored_at_zero(self):
        previous = GridState(np.array([[A, A], [A, F]]))
        current = GridState(np.array([[F, F], [F, X]]))
        stats = RunningStatistics(initial_trees=3).update(1, previous, current)
        assert stats.trees_grown == 0

    def test_net_growth(self):
        previous = GridState(np.array([[A, E], [E, E]]))
        current = GridState(np.array([[A, B], [A, E]]))
        running = RunningStatistics(initial_trees=1)
        stats = running.update(1, previous, current)
        assert stats.trees_grown == 2
        assert running.trees_grown_total == 2

    def test_totals_never_decrease(self):
        running = RunningStatistics(initial_trees=4)
        grids = [
            GridState(np.array([[F, A], [A, A]])),
            GridState(np.array([[X, F], [F, A]])),
            GridState(np.array([[E, X], [X, F]])),
            GridState(np.array([[A, E], [E, X]])),
            GridState(np.array([[A, B], [E, E]])),
        ]
        burned, grown = 0, 0
        for step, (prev, cur) in enumerate(zip(grids, grids[1:]), start=1):
            stats = running.update(step, prev, cur)
            assert stats.trees_burned_total >= burned
            assert stats.trees_grown_total >= grown
            burned, grown = stats.trees_burned_total, stats.trees_grown_total
        assert burned == 4
        assert running.latest.step == 4


class TestUncountedBurned:
    """Burned cells that never held a tree are left out."""

    def test_uncounted_burned_cell(self):
        previous = GridState(np.array([[A, E], [E, F]]))
        current = GridState(np.array([[A, E], [E, X]]))
        running = RunningStatistics(initial_trees=1)
        stats = running.update(1, previous, current, uncounted_burned=1)
        assert stats.trees_burned == 0
        assert running.trees_burned_total == 0
        assert stats.burned_percent == 0.0

    def test_uncounted_only_reduces_own_cell(self):
        previous = GridState(np.array([[F, E], [E, F]]))
        current = GridState(np.array([[X, E], [E, X]]))
        stats = RunningStatistics(initial_trees=1).update(1, previous, current, uncounted_burned=1)
        assert stats.trees_burned == 1
