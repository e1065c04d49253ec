"""Cell states of the forest grid."""

from enum import IntEnum


class CellState(IntEnum):
    """Possible states of a forest cell.

    The integer values are the codes stored in the grid matrix.
    """
    Empty = 0
    TreeA = 1
    TreeB = 2
    Burning = 3
    Burned = 4


TREE_STATES = (CellState.TreeA, CellState.TreeB)


def is_tree(state) -> bool:
    """Check if a state holds a live (not burning) tree."""
    return state == CellState.TreeA or state == CellState.TreeB
