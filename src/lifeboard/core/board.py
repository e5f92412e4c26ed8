"""Game of Life board.

A Board owns a fixed-size DenseGrid and advances it one generation at a
time. Every generation is computed from the untouched previous grid and then
swapped in whole, so no cell ever sees a neighbor's new state mid-pass.
"""

import numpy as np
from typing import Callable, List, Optional, Sequence
import logging

from ..config import ALIVE_CHAR, DEAD_CHAR
from .grid import DenseGrid
from .rules import next_state, count_live_neighbors

logger = logging.getLogger(__name__)

BoolSource = Callable[[], bool]


def uniform_bool_source(seed: Optional[int] = None) -> BoolSource:
    """Create an unbiased true/false source backed by a numpy Generator.

    Args:
        seed: Optional seed for reproducible boards

    Returns:
        Zero-argument callable returning True or False with equal probability
    """
    rng = np.random.default_rng(seed)
    return lambda: bool(rng.integers(0, 2))


class Board:
    """Conway's Game of Life on a finite, non-wrapping grid.

    Attributes:
        grid: Current generation
    """

    def __init__(self, grid: DenseGrid):
        self.grid = grid

    @classmethod
    def dead(cls, rows: int, cols: int) -> 'Board':
        """Create a board with every cell dead.

        Raises:
            ValueError: If either dimension is not positive
        """
        logger.debug(f"Created dead board {rows}x{cols}")
        return cls(DenseGrid(rows, cols, False))

    @classmethod
    def random(cls, rows: int, cols: int, source: Optional[BoolSource] = None) -> 'Board':
        """Create a board with every cell set independently at random.

        Args:
            rows: Number of rows
            cols: Number of columns
            source: Zero-argument boolean callable, invoked once per cell in
                row-major order (uniform numpy source if None)

        Returns:
            Board: Randomly populated board
        """
        grid = DenseGrid(rows, cols)
        grid.fill_with(source or uniform_bool_source())
        logger.debug(f"Created random board {rows}x{cols} with {grid.count_alive()} live cells")
        return cls(grid)

    @classmethod
    def from_flat(cls, values: Sequence, cols: int) -> 'Board':
        """Create a board from a flat row-major sequence of 0/1 or bools."""
        return cls(DenseGrid.from_flat(values, cols))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> 'Board':
        """Create a board from a list of rows, e.g. [[0, 1], [1, 0]].

        Raises:
            ValueError: If rows is empty or the rows have different lengths
        """
        if len(rows) == 0:
            raise ValueError("Cannot build a board from zero rows")
        cols = len(rows[0])
        if any(len(row) != cols for row in rows):
            raise ValueError("All rows must have the same length")
        return cls.from_flat([cell for row in rows for cell in row], cols)

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    def cell(self, row: int, col: int) -> bool:
        return self.grid.get(row, col)

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Number of live cells around (row, col) within the clamped window."""
        return count_live_neighbors(self.grid, row, col)

    def live_count(self) -> int:
        return self.grid.count_alive()

    def advance(self) -> None:
        """Replace the board with its next generation.

        Dimensions are preserved. All new states are computed from the
        current grid before it is replaced.
        """
        current = self.grid
        new_state: List[bool] = [
            next_state(current.state[row, col], count_live_neighbors(current, row, col))
            for row in range(current.rows)
            for col in range(current.cols)
        ]
        self.grid = DenseGrid.from_flat(new_state, current.cols)

    def advance_many(self, generations: int) -> List[int]:
        """Advance several generations.

        Args:
            generations: Number of generations to advance

        Returns:
            Live cell count after each generation

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations cannot be negative, got {generations}")

        live_counts = []
        for _ in range(generations):
            self.advance()
            live_counts.append(self.live_count())

        logger.debug(f"Advanced {generations} generations, live counts {live_counts}")
        return live_counts

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        return Board(self.grid.copy())

    def render(self) -> str:
        """Render as text: one line per row, '1' alive, '0' dead."""
        return "".join(
            "".join(ALIVE_CHAR if alive else DEAD_CHAR for alive in row) + "\n"
            for row in self.grid.state
        )

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.grid == other.grid

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols}, alive={self.live_count()})"
