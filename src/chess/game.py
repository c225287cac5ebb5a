"""
A Game ties the board together with the per-player information that is not part of the board itself.

For now that is only whether castling is still available. Nothing reads these flags yet.
"""

from dataclasses import dataclass, field
from typing import Self

from src.chess.board import Board
from src.chess.tile import Owner
from src.core.exceptions import NoPlayerError


@dataclass
class PlayerInfo:
    short_castling_available: bool = True
    long_castling_available: bool = True


@dataclass
class Game:
    board: Board
    white: PlayerInfo = field(default_factory=PlayerInfo)
    black: PlayerInfo = field(default_factory=PlayerInfo)

    @classmethod
    def new_game(cls) -> Self:
        """Start from the standard opening with all castling options available"""
        return cls(board=Board.standard_opening())

    def player_info(self, owner: Owner) -> PlayerInfo:
        if owner == Owner.WHITE:
            return self.white
        if owner == Owner.BLACK:
            return self.black
        raise NoPlayerError(f"No player info for {owner}")
