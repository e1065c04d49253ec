"""Unit tests for progress logging."""

import logging

from forest_fire.cell import CellState
from forest_fire.grid import GridState
from forest_fire.model import ForestFireModel, OutcomeKind, SimulationOutcome
from forest_fire.params import SimulationParams
from forest_fire.reporting import StepLogger, termination_message


def test_termination_messages():
    assert termination_message(SimulationOutcome(OutcomeKind.ExtinguishedEarly, 7)) == (
        "Simulation stopped early. Fire died down at time: 7"
    )
    assert termination_message(SimulationOutcome(OutcomeKind.CompletedFull, 500)) == (
        "Simulation complete after specified time: 500"
    )
    assert "cancelled" in termination_message(SimulationOutcome(OutcomeKind.Cancelled, 3))


def test_step_logger_logs_steps_and_outcome(caplog):
    params = SimulationParams(grid_size=3, tree_growth_rate=0.0, fire_spread_chance=1.0, steps=10)
    model = ForestFireModel(params, seed=0, grid=GridState.filled(3, CellState.TreeB), ignition_pos=(1, 1))
    StepLogger().attach(model)

    with caplog.at_level(logging.INFO, logger="forest_fire"):
        model.run()

    messages = [r.getMessage() for r in caplog.records if r.name == "forest_fire.reporting"]
    assert messages[0].startswith("Time: 1 / 10 - burning=4 (50.0%)")
    assert messages[-1] == "Simulation stopped early. Fire died down at time: 3"
