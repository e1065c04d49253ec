"""Headless sensitivity sweep over tree density, growth and spread chance.

Edit the CONFIG block to tweak the parameter grid. Results are printed as a
summary table and optionally saved as CSV.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict

# Ensure src/ is on path when running from repo root
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
	sys.path.insert(0, str(SRC_PATH))

from forest_fire.sweep import run_sweep


CONFIG: Dict[str, Any] = {
	"grid_size": 50,
	"densities": [0.3, 0.4, 0.5, 0.6, 0.7],
	"growth_rates": [0.0, 0.01],
	"spread_chances": [0.5, 1.0],
	"steps": 300,
	"runs": 5,
	"seed": 2024,
	"output_csv": REPO_ROOT / "output" / "sweep.csv",
}


def main() -> None:
	logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

	df = run_sweep(
		grid_size=CONFIG["grid_size"],
		densities=CONFIG["densities"],
		growth_rates=CONFIG["growth_rates"],
		spread_chances=CONFIG["spread_chances"],
		steps=CONFIG["steps"],
		runs=CONFIG["runs"],
		seed=CONFIG["seed"],
	)

	summary = (
		df.groupby(["initial_trees_density", "tree_growth_rate", "fire_spread_chance"])
		.agg(burned_percent=("burned_percent", "mean"), final_step=("final_step", "mean"))
		.round(2)
	)
	print(summary.to_string())

	out = CONFIG.get("output_csv")
	if out:
		out.parent.mkdir(parents=True, exist_ok=True)
		df.to_csv(out, index=False)
		print(f"Saved {len(df)} runs to {out}")


if __name__ == "__main__":
	main()
