#!/usr/bin/env python3
"""
Game of Life Generations Demonstration Script

Runs a named pattern (or a random board) for a number of generations and
logs the live cell count and rendered board as it evolves.
"""

import sys
import logging
import argparse

from lifeboard.config import BoardConfig, LOG_FORMAT
from lifeboard.core.board import Board
from lifeboard.patterns import PATTERNS, get_pattern

# Configure logging
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def run_demo(config: BoardConfig, pattern=None, show_every=1):
    """Run the board for config.generations and return the live counts."""
    if pattern:
        board = get_pattern(pattern)
        logger.info(f"=== PATTERN: {pattern} ({board.rows}x{board.cols}) ===")
    else:
        board = Board.random(config.rows, config.cols)
        logger.info(f"=== RANDOM BOARD {config.rows}x{config.cols} ===")

    logger.info(f"Generation 0: live={board.live_count()}\n{board}")

    live_counts = [board.live_count()]
    for generation in range(1, config.generations + 1):
        board.advance()
        live_counts.append(board.live_count())

        if generation % show_every == 0 or generation == config.generations:
            logger.info(f"Generation {generation}: live={live_counts[-1]}\n{board}")

        if live_counts[-1] == 0:
            logger.info(f"Board died out at generation {generation}")
            break

    return live_counts


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pattern", choices=PATTERNS, default=None)
    parser.add_argument("--rows", type=int, default=BoardConfig.rows)
    parser.add_argument("--cols", type=int, default=BoardConfig.cols)
    parser.add_argument("--generations", type=int, default=10)
    parser.add_argument("--show-every", type=int, default=1)

    args = parser.parse_args(argv)
    if args.generations < 0 or args.show_every < 1:
        parser.error("--generations must be >= 0 and --show-every >= 1")

    config = BoardConfig(rows=args.rows, cols=args.cols, generations=args.generations)
    try:
        live_counts = run_demo(config, args.pattern, args.show_every)
    except ValueError as e:
        logger.error(f"Demo failed: {e}")
        return 1

    logger.info(f"Live counts: {live_counts}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
