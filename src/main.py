"""Print the starting position"""

import logging

from src.chess.board import Board

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    board = Board.standard_opening()
    logger.info("Standard opening on a %dx%d board", board.width, board.height)
    print(board.to_text(), end="")


if __name__ == "__main__":
    main()
