"""Unit tests for dense grid storage.

Tests construction, access, bulk fill and equality of the row-major
boolean grid that backs every board.
"""

import pytest
import numpy as np
from lifeboard.core.grid import DenseGrid


class TestGridInitialization:
    """Test grid initialization and basic properties."""

    def test_dimensions(self):
        grid = DenseGrid(3, 7)

        assert grid.rows == 3
        assert grid.cols == 7
        assert grid.shape == (3, 7)

    def test_fill_value(self):
        """Grid starts with every cell set to the fill value."""
        assert DenseGrid(4, 4).count_alive() == 0
        assert DenseGrid(4, 4, fill=True).count_alive() == 16

    @pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), (-2, 2)])
    def test_non_positive_dimensions(self, rows, cols):
        with pytest.raises(ValueError, match="must be positive"):
            DenseGrid(rows, cols)


class TestGridFromFlat:
    """Test creating grids from flat row-major sequences."""

    def test_row_major_layout(self):
        """Consecutive values fill a row before moving to the next."""
        grid = DenseGrid.from_flat([1, 0, 0, 0, 0, 1], 3)

        assert grid.rows == 2
        assert grid.cols == 3
        assert grid[0, 0] is True
        assert grid[0, 2] is False
        assert grid[1, 2] is True

    def test_bool_and_int_values(self):
        """0/1 and False/True build the same grid."""
        assert DenseGrid.from_flat([0, 1], 2) == DenseGrid.from_flat([False, True], 2)

    def test_invalid_sequences(self):
        with pytest.raises(ValueError, match="empty sequence"):
            DenseGrid.from_flat([], 3)

        with pytest.raises(ValueError, match="not a multiple"):
            DenseGrid.from_flat([1, 0, 1], 2)

        with pytest.raises(ValueError, match="Column count must be positive"):
            DenseGrid.from_flat([1, 0], 0)


class TestGridAccess:
    """Test cell reads and bounds checking."""

    def test_get_and_indexing(self):
        grid = DenseGrid.from_flat([0, 1, 1, 0], 2)

        assert grid.get(0, 1) is True
        assert grid[1, 1] is False

    def test_bounds_checking(self):
        """Out-of-bounds access raises IndexError, negatives included."""
        grid = DenseGrid(4, 4)

        with pytest.raises(IndexError):
            grid.get(-1, 0)

        with pytest.raises(IndexError):
            grid.get(0, 4)

        with pytest.raises(IndexError):
            grid[4, 0]


class TestGridFill:
    """Test generator-driven bulk fill."""

    def test_fill_with_row_major(self):
        counter = iter(range(6))
        grid = DenseGrid(2, 3)

        grid.fill_with(lambda: next(counter) % 2 == 0)

        assert np.array_equal(grid.to_array(), np.array([
            [True, False, True],
            [False, True, False],
        ]))

    def test_to_array_is_copy(self):
        grid = DenseGrid(2, 2)
        array = grid.to_array()

        array[0, 0] = True
        assert grid[0, 0] is False


class TestGridEquality:
    """Test grid equality comparison."""

    def test_copy_equality(self):
        grid1 = DenseGrid.from_flat([1, 0, 0, 1], 2)
        grid2 = grid1.copy()

        assert grid1 == grid2

        grid2.state[0, 0] = False
        assert grid1 != grid2

    def test_different_shapes_inequal(self):
        """Same cells in a different shape are not equal."""
        assert DenseGrid.from_flat([0] * 6, 3) != DenseGrid.from_flat([0] * 6, 2)

    def test_non_grid_comparison(self):
        grid = DenseGrid(2, 2)
        assert grid != 42
        assert grid != None

    def test_repr(self):
        assert repr(DenseGrid(2, 3, fill=True)) == "DenseGrid(2x3, alive=6)"
