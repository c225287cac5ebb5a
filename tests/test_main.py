"""Unit tests for src/main.py"""

import pytest

from src.chess.board import Board
from src.main import main


def test_main_prints_standard_opening(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    captured = capsys.readouterr()
    assert captured.out == Board.standard_opening().to_text()
