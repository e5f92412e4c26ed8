"""
lifeboard: Conway's Game of Life on a finite, non-wrapping board.

Boards are built dead, at random, or from literal patterns, advanced one
generation at a time and rendered as rows of 0/1 text.
"""

from .core import Board, DenseGrid
from .patterns import PATTERNS, get_pattern

__version__ = "0.1.0"

__all__ = [
    'Board',
    'DenseGrid',
    'PATTERNS',
    'get_pattern',
]
