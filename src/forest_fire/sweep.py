"""Headless parameter sweeps for sensitivity studies."""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .model import ForestFireModel
from .params import SimulationParams

logger = logging.getLogger(__name__)

SWEEP_COLUMNS = [
    "initial_trees_density",
    "tree_growth_rate",
    "fire_spread_chance",
    "run",
    "seed",
    "outcome",
    "final_step",
    "initial_trees",
    "burned_total",
    "grown_total",
    "burned_percent",
]


def run_sweep(
    grid_size: int,
    densities: Iterable[float],
    growth_rates: Iterable[float] = (0.0,),
    spread_chances: Iterable[float] = (1.0,),
    steps: int = 500,
    runs: int = 1,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Run every parameter combination ``runs`` times.

    Each run gets its own seed drawn from a generator seeded with ``seed``,
    so a sweep is reproducible as a whole.

    Returns:
        DataFrame with one row per run and the columns in ``SWEEP_COLUMNS``.
    """
    seeds = np.random.default_rng(seed)
    rows = []

    for density, growth, spread in itertools.product(densities, growth_rates, spread_chances):
        params = SimulationParams(
            grid_size=grid_size,
            tree_growth_rate=growth,
            fire_spread_chance=spread,
            initial_trees_density=density,
            steps=steps,
        ).validate()

        for run in range(runs):
            run_seed = int(seeds.integers(0, 2**31 - 1))
            model = ForestFireModel(params, seed=run_seed)
            outcome = model.run()
            stats = model.statistics.latest
            rows.append(
                {
                    "initial_trees_density": density,
                    "tree_growth_rate": growth,
                    "fire_spread_chance": spread,
                    "run": run,
                    "seed": run_seed,
                    "outcome": outcome.kind.value,
                    "final_step": outcome.step,
                    "initial_trees": model.statistics.initial_trees,
                    "burned_total": model.statistics.trees_burned_total,
                    "grown_total": model.statistics.trees_grown_total,
                    "burned_percent": stats.burned_percent if stats else 0.0,
                }
            )
        logger.info(
            "density=%.2f growth=%.2f spread=%.2f: %d runs done", density, growth, spread, runs
        )

    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)
