"""Dense grid storage for the Game of Life board.

Fixed-size, row-major 2D container of boolean cells. The board owns one of
these and replaces it wholesale on every generation; the grid itself is
never resized.
"""

import numpy as np
from typing import Callable, Iterable, Tuple
import logging

logger = logging.getLogger(__name__)


class DenseGrid:
    """2D boolean grid backed by a numpy array.

    Attributes:
        state: 2D numpy boolean array of shape (rows, cols) (True=alive, False=dead)
    """

    def __init__(self, rows: int, cols: int, fill: bool = False):
        """Initialize grid with given dimensions and fill value.

        Args:
            rows: Number of rows (cells)
            cols: Number of columns (cells)
            fill: Initial state of every cell

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.state = np.full((rows, cols), bool(fill), dtype=bool)

    @classmethod
    def from_flat(cls, values: Iterable, cols: int) -> 'DenseGrid':
        """Create grid from a flat row-major sequence.

        Args:
            values: Cell values in row-major order (anything truthy is alive)
            cols: Number of columns

        Returns:
            DenseGrid: New grid with len(values) // cols rows

        Raises:
            ValueError: If the sequence is empty or doesn't divide into full rows
        """
        cells = np.array([bool(v) for v in values], dtype=bool)
        if cols < 1:
            raise ValueError(f"Column count must be positive, got {cols}")
        if cells.size == 0:
            raise ValueError("Cannot build a grid from an empty sequence")
        if cells.size % cols != 0:
            raise ValueError(f"Sequence length {cells.size} is not a multiple of {cols} columns")

        grid = cls(cells.size // cols, cols)
        grid.state = cells.reshape(grid.rows, cols)
        return grid

    @property
    def rows(self) -> int:
        return self.state.shape[0]

    @property
    def cols(self) -> int:
        return self.state.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.state.shape

    def get(self, row: int, col: int) -> bool:
        """Get cell state at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        return bool(self.state[row, col])

    def fill_with(self, generator: Callable[[], bool]) -> None:
        """Fill every cell by calling generator once per cell, row-major."""
        for row in range(self.rows):
            for col in range(self.cols):
                self.state[row, col] = bool(generator())

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.state))

    def to_array(self) -> np.ndarray:
        """Get grid as numpy array (copy)."""
        return self.state.copy()

    def copy(self) -> 'DenseGrid':
        """Create a deep copy of the grid."""
        grid = DenseGrid(self.rows, self.cols)
        grid.state[:] = self.state
        return grid

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[row, col] syntax."""
        row, col = key
        return self.get(row, col)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseGrid):
            return False
        return self.shape == other.shape and np.array_equal(self.state, other.state)

    def __repr__(self) -> str:
        return f"DenseGrid({self.rows}x{self.cols}, alive={self.count_alive()})"
