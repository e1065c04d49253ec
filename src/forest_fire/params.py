"""Simulation parameters and their validation."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

DEFAULT_GRID_SIZE: int = 100                 # cells per side
DEFAULT_TREE_GROWTH_RATE: float = 0.0        # chance an empty cell grows a tree
DEFAULT_FIRE_SPREAD_CHANCE: float = 1.0      # chance a tree next to fire ignites
DEFAULT_INITIAL_TREES_DENSITY: float = 0.6   # share of cells holding a tree at start
DEFAULT_STEPS: int = 500                     # step budget


class ConfigurationError(ValueError):
    """Raised when simulation parameters are out of range."""


@dataclass(frozen=True)
class SimulationParams:
    """Immutable configuration of one simulation run."""

    grid_size: int = DEFAULT_GRID_SIZE
    tree_growth_rate: float = DEFAULT_TREE_GROWTH_RATE
    fire_spread_chance: float = DEFAULT_FIRE_SPREAD_CHANCE
    initial_trees_density: float = DEFAULT_INITIAL_TREES_DENSITY
    steps: int = DEFAULT_STEPS

    def validate(self) -> "SimulationParams":
        """Check parameter ranges and return ``self``.

        Raises:
            ConfigurationError: if a size is not a positive integer or a
                probability lies outside [0, 1].
        """
        for name in ("grid_size", "steps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

        for name in ("tree_growth_rate", "fire_spread_chance", "initial_trees_density"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {value}")
        return self

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "SimulationParams":
        """Build validated parameters from a mapping, ignoring unknown and ``None`` entries."""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in values.items() if k in known and v is not None}
        return cls(**kwargs).validate()

    def with_changes(self, **changes: Any) -> "SimulationParams":
        return replace(self, **changes).validate()
