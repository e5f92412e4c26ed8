"""Classic Conway patterns as ready-made boards.

Each pattern is stored as literal rows of 0/1 with enough dead padding that
the clamped board edges do not disturb it.
"""

from typing import Dict, List, Tuple

from .core.board import Board

_PATTERN_ROWS: Dict[str, Tuple[Tuple[int, ...], ...]] = {
    # Still lifes
    "block": (
        (0, 0, 0, 0),
        (0, 1, 1, 0),
        (0, 1, 1, 0),
        (0, 0, 0, 0),
    ),
    "beehive": (
        (0, 0, 0, 0, 0, 0),
        (0, 0, 1, 1, 0, 0),
        (0, 1, 0, 0, 1, 0),
        (0, 0, 1, 1, 0, 0),
        (0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0),
    ),
    "boat": (
        (0, 0, 0, 0, 0),
        (0, 0, 1, 0, 0),
        (0, 1, 0, 1, 0),
        (0, 1, 1, 0, 0),
        (0, 0, 0, 0, 0),
    ),
    # Oscillators, period 2
    "blinker": (
        (0, 0, 0, 0, 0),
        (0, 0, 1, 0, 0),
        (0, 0, 1, 0, 0),
        (0, 0, 1, 0, 0),
        (0, 0, 0, 0, 0),
    ),
    "blinker_horizontal": (
        (0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0),
        (0, 1, 1, 1, 0),
        (0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0),
    ),
    "toad": (
        (0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0),
        (0, 0, 1, 1, 1, 0),
        (0, 1, 1, 1, 0, 0),
        (0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0),
    ),
    "toad_expanded": (
        (0, 0, 0, 0, 0, 0),
        (0, 0, 0, 1, 0, 0),
        (0, 1, 0, 0, 1, 0),
        (0, 1, 0, 0, 1, 0),
        (0, 0, 1, 0, 0, 0),
        (0, 0, 0, 0, 0, 0),
    ),
    # Spaceship, travels down-right one cell every 4 generations
    "glider": (
        (0, 1, 0, 0, 0, 0, 0, 0),
        (0, 0, 1, 0, 0, 0, 0, 0),
        (1, 1, 1, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 0, 0, 0, 0, 0, 0),
    ),
}

PATTERNS: List[str] = sorted(_PATTERN_ROWS)


def get_pattern(name: str) -> Board:
    """Create a fresh board holding the named pattern.

    Args:
        name: One of PATTERNS

    Returns:
        Board: New board; callers may advance it freely

    Raises:
        KeyError: If the pattern name is unknown
    """
    if name not in _PATTERN_ROWS:
        raise KeyError(f"Unknown pattern {name!r}, expected one of {PATTERNS}")
    return Board.from_rows(_PATTERN_ROWS[name])
