#!/usr/bin/env python3
"""Headless script to run the forest fire simulation."""

import argparse
import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import ConfigurationError, ForestFireModel, SimulationParams, StepLogger
from forest_fire.params import (
    DEFAULT_FIRE_SPREAD_CHANCE,
    DEFAULT_GRID_SIZE,
    DEFAULT_INITIAL_TREES_DENSITY,
    DEFAULT_STEPS,
    DEFAULT_TREE_GROWTH_RATE,
)

logger = logging.getLogger("run_simulation")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate forest fire dynamics on a grid.")
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE)
    parser.add_argument("--tree-growth-rate", type=float, default=DEFAULT_TREE_GROWTH_RATE)
    parser.add_argument("--fire-spread-chance", type=float, default=DEFAULT_FIRE_SPREAD_CHANCE)
    parser.add_argument("--initial-trees-density", type=float, default=DEFAULT_INITIAL_TREES_DENSITY)
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--history-csv", type=Path, default=None, help="Write per-step statistics to CSV")
    parser.add_argument("--plot", type=Path, default=None, help="Save final grid and statistics as PNG")
    return parser


def main(argv=None) -> int:
    """Run the forest fire simulation."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params = SimulationParams.from_mapping(vars(args))
    except ConfigurationError as exc:
        logger.error("Invalid parameters: %s", exc)
        return 2

    model = ForestFireModel(params, seed=args.seed)
    StepLogger().attach(model)
    outcome = model.run()

    history = model.history()
    if args.history_csv is not None:
        history.to_csv(args.history_csv, index=False)
        logger.info("Statistics written to %s", args.history_csv)

    if args.plot is not None:
        import matplotlib
        matplotlib.use("Agg")
        from forest_fire.analysis import GridVisualizer

        viz = GridVisualizer()
        fig = viz.plot_run(model.grid, history, total_steps=params.steps)
        viz.save(fig, str(args.plot))
        logger.info("Plot saved to %s", args.plot)

    logger.info("Outcome: %s at step %d", outcome.kind.value, outcome.step)
    return 0


if __name__ == "__main__":
    sys.exit(main())
