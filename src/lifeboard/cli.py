"""Program entry point: print one random board."""

import logging

from .config import BoardConfig
from .core.board import Board

logger = logging.getLogger(__name__)


def main() -> int:
    config = BoardConfig()
    board = Board.random(config.rows, config.cols)
    logger.debug(f"Rendering {board!r}")
    print(board)
    return 0
