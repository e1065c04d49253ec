"""Tests for the matplotlib helpers."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from forest_fire.analysis import GridVisualizer, as_2d_numpy_grid, state_cmap
from forest_fire.cell import CellState
from forest_fire.grid import GridState
from forest_fire.model import ForestFireModel
from forest_fire.params import SimulationParams


@pytest.fixture
def finished_model():
    params = SimulationParams(grid_size=12, fire_spread_chance=1.0, initial_trees_density=0.7, steps=15)
    model = ForestFireModel(params, seed=8)
    model.run()
    return model


def test_as_2d_numpy_grid_rejects_1d():
    with pytest.raises(ValueError):
        as_2d_numpy_grid(np.zeros(4))


def test_as_2d_numpy_grid_accepts_grid_state():
    grid = GridState.filled(3, CellState.TreeA)
    assert as_2d_numpy_grid(grid).shape == (3, 3)


def test_state_cmap_has_one_color_per_state():
    cmap, norm = state_cmap()
    assert cmap.N == len(CellState)
    assert norm(int(CellState.Burned)) == len(CellState) - 1


def test_plot_grid_caption(finished_model):
    ax = GridVisualizer().plot_grid(finished_model.grid, step=3, total_steps=15)
    assert ax.get_title() == "Forest Fire Simulation"
    assert ax.get_xlabel() == "Time: 3 / 15"
    plt.close("all")


def test_plot_history_lines(finished_model):
    viz = GridVisualizer()
    ax = viz.plot_history(finished_model.history())
    assert len(ax.get_lines()) == 4
    ax = viz.plot_history(finished_model.history(), percentages=True)
    assert len(ax.get_lines()) == 2
    plt.close("all")


def test_plot_run_and_save(finished_model, tmp_path):
    viz = GridVisualizer()
    fig = viz.plot_run(finished_model.grid, finished_model.history(), total_steps=15)
    out = tmp_path / "run.png"
    viz.save(fig, str(out))
    assert out.exists()
    plt.close(fig)
