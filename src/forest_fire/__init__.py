"""
Forest Fire Simulation using Cellular Automata.

A stochastic cellular automaton of fire spreading through a forest grid,
with tree regrowth and burned-cell decay, for exploring how tree density,
regrowth rate and ignition probability shape a fire.
"""

from .cell import CellState, TREE_STATES, is_tree
from .grid import GridState
from .params import SimulationParams, ConfigurationError
from .engine import UpdateEngine, StepResult
from .statistics import RunningStatistics, StepStatistics
from .model import ForestFireModel, OutcomeKind, SimulationOutcome
from .reporting import StepLogger

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "TREE_STATES",
    "is_tree",
    "GridState",
    "SimulationParams",
    "ConfigurationError",
    "UpdateEngine",
    "StepResult",
    "RunningStatistics",
    "StepStatistics",
    "ForestFireModel",
    "OutcomeKind",
    "SimulationOutcome",
    "StepLogger",
]
