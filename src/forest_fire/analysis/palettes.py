from __future__ import annotations

from dataclasses import dataclass

from matplotlib.colors import BoundaryNorm, ListedColormap

from ..cell import CellState

# Matplotlib colour per cell state
STATE_COLORS: dict[CellState, str] = {
    CellState.Empty: "white",
    CellState.TreeA: "#00FF00",  # green
    CellState.TreeB: "#008B00",  # green4
    CellState.Burning: "red",
    CellState.Burned: "black",
}


@dataclass(frozen=True)
class HistorySpec:
    """Line colours for statistics plots."""

    burning: str = "red"
    burned: str = "black"
    remaining: str = "green"
    grown: str = "#008B00"


DEFAULT_HISTORY = HistorySpec()


def state_cmap() -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap and norm mapping each state code to its colour."""
    cmap = ListedColormap([STATE_COLORS[state] for state in CellState])
    norm = BoundaryNorm([s.value - 0.5 for s in CellState] + [len(CellState) - 0.5], cmap.N)
    return cmap, norm
