"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.square import Square
from src.chess.tile import Tile


@pytest.fixture
def board_with_pieces() -> Callable[[dict[str, str]], Board]:
    """Call the inner function with {algebraic square: piece character}, everything else stays empty"""

    def _create_board(pieces: dict[str, str]) -> Board:
        board = Board.empty()
        for square_name, char in pieces.items():
            square = Square.from_algebraic(square_name)
            board.tiles[square.rank][square.file] = Tile.from_char(char)
        return board

    return _create_board
