"""Unit tests for CellState."""

from forest_fire.cell import CellState, TREE_STATES, is_tree


class TestCellState:
    """Test cases for CellState enum."""

    def test_cell_states_exist(self):
        """Test that all five states exist."""
        assert [s.name for s in CellState] == ["Empty", "TreeA", "TreeB", "Burning", "Burned"]

    def test_cell_state_values(self):
        """Test cell state codes."""
        assert CellState.Empty.value == 0
        assert CellState.TreeA.value == 1
        assert CellState.TreeB.value == 2
        assert CellState.Burning.value == 3
        assert CellState.Burned.value == 4

    def test_is_tree(self):
        """Only the two live tree variants count as trees."""
        assert is_tree(CellState.TreeA)
        assert is_tree(CellState.TreeB)
        assert is_tree(1)
        assert not is_tree(CellState.Empty)
        assert not is_tree(CellState.Burning)
        assert not is_tree(CellState.Burned)
        assert set(TREE_STATES) == {CellState.TreeA, CellState.TreeB}
