"""
Conway transition rule and clamped neighbor counting.

The board edges do not wrap: a cell on the border only sees the cells that
actually exist around it, so corners have 3 neighbors, other border cells 5
and interior cells 8.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import DenseGrid


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rule table to one cell.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)

    Raises:
        ValueError: If live_neighbors is negative
    """
    if live_neighbors < 0:
        raise ValueError(f"Neighbor count cannot be negative, got {live_neighbors}")

    if live_neighbors <= 1:
        return False  # underpopulation
    if live_neighbors == 2:
        return bool(alive)
    if live_neighbors == 3:
        return True
    return False  # overcrowding


def neighbor_window(index: int, size: int) -> range:
    """Clamped window of indices around index along one axis.

    Args:
        index: Position along the axis
        size: Length of the axis

    Returns:
        range covering index and its in-bounds neighbors

    Raises:
        IndexError: If index is outside [0, size)
    """
    if not 0 <= index < size:
        raise IndexError(f"Index {index} out of bounds for axis of size {size}")

    if size == 1:
        return range(0, 1)
    if index == 0:
        return range(0, 2)
    if index == size - 1:
        return range(index - 1, index + 1)
    return range(index - 1, index + 2)


def count_live_neighbors(grid: 'DenseGrid', row: int, col: int) -> int:
    """Count live neighbors of the cell at (row, col), edges clamped.

    Args:
        grid: Grid holding the current generation
        row: Cell row
        col: Cell column

    Returns:
        Number of live neighbors (0-8)
    """
    count = 0
    for r in neighbor_window(row, grid.rows):
        for c in neighbor_window(col, grid.cols):
            if (r, c) == (row, col):
                continue
            if grid.state[r, c]:
                count += 1
    return count
