"""Board, storage and transition rule for the Game of Life."""

from .board import Board, uniform_bool_source
from .grid import DenseGrid
from .rules import count_live_neighbors, neighbor_window, next_state

__all__ = [
    'Board',
    'DenseGrid',
    'count_live_neighbors',
    'neighbor_window',
    'next_state',
    'uniform_bool_source',
]
