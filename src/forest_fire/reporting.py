"""Logging of simulation progress and termination."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .model import OutcomeKind, SimulationOutcome

if TYPE_CHECKING:
    from .engine import StepResult
    from .model import ForestFireModel
    from .statistics import StepStatistics

logger = logging.getLogger(__name__)


def format_statistics(stats: "StepStatistics") -> str:
    """One-line summary of step statistics with percentages rounded for display."""
    r = stats.rounded()
    return (
        f"burning={r['trees_burning']} ({r['burning_percent']}%), "
        f"burned={r['trees_burned']}, remaining={r['trees_remaining']}, "
        f"grown={r['trees_grown']}, burned total={r['trees_burned_total']} "
        f"({r['burned_percent']}%)"
    )


def termination_message(outcome: SimulationOutcome) -> str:
    if outcome.kind == OutcomeKind.ExtinguishedEarly:
        return f"Simulation stopped early. Fire died down at time: {outcome.step}"
    if outcome.kind == OutcomeKind.Cancelled:
        return f"Simulation cancelled at time: {outcome.step}"
    return f"Simulation complete after specified time: {outcome.step}"


class StepLogger:
    """Observer that logs every step and the end of the run.

    Attach with ``StepLogger().attach(model)``.
    """

    def __init__(self, log: logging.Logger = logger, level: int = logging.INFO):
        self.log = log
        self.level = level

    def attach(self, model: "ForestFireModel") -> "StepLogger":
        model.add_observer(on_step=self.on_step, on_finish=self.on_finish)
        return self

    def on_step(self, model: "ForestFireModel", result: "StepResult", stats: "StepStatistics") -> None:
        self.log.log(
            self.level,
            "Time: %d / %d - %s",
            stats.step, model.params.steps, format_statistics(stats),
        )

    def on_finish(self, model: "ForestFireModel", outcome: SimulationOutcome) -> None:
        self.log.info(termination_message(outcome))
