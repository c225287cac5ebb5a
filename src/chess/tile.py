"""Defines what can occupy a single square of the board"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidTileCharError, NoPlayerError

logger = logging.getLogger(__name__)


class PieceKind(Enum):
    NONE = auto()
    PAWN = auto()
    ROOK = auto()
    KNIGHT = auto()
    BISHOP = auto()
    QUEEN = auto()
    KING = auto()


class Owner(Enum):
    WHITE = auto()
    BLACK = auto()
    NONE = auto()

    @property
    def opponent(self) -> "Owner":
        if self == Owner.WHITE:
            return Owner.BLACK
        if self == Owner.BLACK:
            return Owner.WHITE
        raise NoPlayerError("An empty tile has no opponent.")


CHAR_TO_PIECE: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "r": PieceKind.ROOK,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

PIECE_TO_CHAR: dict[PieceKind, str] = {value: key for key, value in CHAR_TO_PIECE.items()}

EMPTY_CHAR = "."

DISPLAY_GLYPHS: dict[tuple[Owner, PieceKind], str] = {
    (Owner.WHITE, PieceKind.PAWN): "♙",
    (Owner.WHITE, PieceKind.ROOK): "♖",
    (Owner.WHITE, PieceKind.KNIGHT): "♘",
    (Owner.WHITE, PieceKind.BISHOP): "♗",
    (Owner.WHITE, PieceKind.QUEEN): "♕",
    (Owner.WHITE, PieceKind.KING): "♔",
    (Owner.BLACK, PieceKind.PAWN): "♟",
    (Owner.BLACK, PieceKind.ROOK): "♜",
    (Owner.BLACK, PieceKind.KNIGHT): "♞",
    (Owner.BLACK, PieceKind.BISHOP): "♝",
    (Owner.BLACK, PieceKind.QUEEN): "♛",
    (Owner.BLACK, PieceKind.KING): "♚",
    (Owner.NONE, PieceKind.NONE): " ",
}


@dataclass(frozen=True)
class Tile:
    owner: Owner
    piece: PieceKind

    def __post_init__(self) -> None:
        # an occupied tile always has an owner, an empty one never does
        assert (self.owner == Owner.NONE) == (self.piece == PieceKind.NONE), (
            f"Inconsistent tile: owner={self.owner}, piece={self.piece}"
        )

    @classmethod
    def empty(cls) -> Self:
        return cls(Owner.NONE, PieceKind.NONE)

    @property
    def is_empty(self) -> bool:
        return self.piece == PieceKind.NONE

    @classmethod
    def from_char(cls, character: str) -> Self:
        """
        Pieces are denoted with the letters P/R/N/B/Q/K.
        Upper case letters are white pieces, lower case letters are black pieces. A dot (.) is an empty tile.
        """
        if character == EMPTY_CHAR:
            return cls.empty()
        if len(character) != 1 or character.lower() not in CHAR_TO_PIECE:
            raise InvalidTileCharError(f"Cannot create Tile from {character!r}")

        owner = Owner.WHITE if character.isupper() else Owner.BLACK
        return cls(owner, CHAR_TO_PIECE[character.lower()])

    def to_char(self) -> str:
        """Inverse of `from_char()`"""
        if self.is_empty:
            return EMPTY_CHAR
        char = PIECE_TO_CHAR[self.piece]
        return char.upper() if self.owner == Owner.WHITE else char

    def to_display_char(self) -> str:
        """Chess glyph used when printing the board. Empty tiles are a blank space."""
        glyph = DISPLAY_GLYPHS.get((self.owner, self.piece))
        if glyph is None:
            logger.error(
                "Tile stringification: owner is %s, piece is %s", self.owner, self.piece
            )
            raise AssertionError(f"No glyph for owner={self.owner}, piece={self.piece}")
        return glyph
