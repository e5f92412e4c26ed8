"""Configuration and constants for lifeboard."""

from dataclasses import dataclass

# Board rendered by the program entry point
DEFAULT_ROWS: int = 8
DEFAULT_COLS: int = 8

ALIVE_CHAR: str = "1"
DEAD_CHAR: str = "0"

LOG_FORMAT: str = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass
class BoardConfig:
    """Settings for building and running a board."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    generations: int = 0

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols
