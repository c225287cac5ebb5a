"""The board owns the grid of tiles and knows where each piece is allowed to go (pseudo-legally)"""

import logging
from dataclasses import dataclass
from typing import Self

from src.chess.moves import MOVEMENT_RULES, CandidateMovesFn, Move
from src.chess.square import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH, Square
from src.chess.tile import Owner, PieceKind, Tile
from src.core.exceptions import BoardDimensionError, OutOfBoundsError

logger = logging.getLogger(__name__)

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def text_index_to_square(index: int, width: int, height: int) -> Square:
    """
    The text representation starts in the top-left corner and reads left-to-right, top-to-bottom.
    The board counts from the bottom-left corner. This is the one place where the two get translated.
    """
    return Square(rank=height - 1 - index // width, file=index % width)


@dataclass
class Board:
    width: int
    height: int
    tiles: list[list[Tile]]  # indexed [rank][file]

    @classmethod
    def empty(
        cls, width: int = DEFAULT_BOARD_WIDTH, height: int = DEFAULT_BOARD_HEIGHT
    ) -> Self:
        if width <= 0 or height <= 0:
            raise BoardDimensionError(
                f"Board dimensions must be positive, got {width=}, {height=}"
            )
        tiles = [[Tile.empty() for _ in range(width)] for _ in range(height)]
        return cls(width, height, tiles)

    @classmethod
    def standard_opening(cls) -> Self:
        """The classical starting position: white on ranks 0 and 1, black on ranks 6 and 7"""
        board = cls.empty(DEFAULT_BOARD_WIDTH, DEFAULT_BOARD_HEIGHT)
        for file, piece in enumerate(BACK_RANK):
            board.tiles[0][file] = Tile(Owner.WHITE, piece)
            board.tiles[1][file] = Tile(Owner.WHITE, PieceKind.PAWN)
            board.tiles[6][file] = Tile(Owner.BLACK, PieceKind.PAWN)
            board.tiles[7][file] = Tile(Owner.BLACK, piece)
        return board

    @classmethod
    def from_text(
        cls,
        text: str,
        width: int = DEFAULT_BOARD_WIDTH,
        height: int = DEFAULT_BOARD_HEIGHT,
    ) -> Self:
        """Construct a board from its compact string representation.

        One character per tile (see `Tile.from_char()`), whitespace is ignored.
        ex. standard starting position:
            rnbqkbnr
            pppppppp
            ........
            ........
            ........
            ........
            PPPPPPPP
            RNBQKBNR
        The first character is the top-left tile (highest rank, first file).

        NOTE: supplying fewer than width * height characters leaves the remaining tiles empty.
        That is considered a mistake by the caller, but not checked here.
        """
        characters = "".join(text.split())
        if len(characters) > width * height:
            raise BoardDimensionError(
                f"Got {len(characters)} tiles for a {width}x{height} board."
            )

        board = cls.empty(width, height)
        for idx, character in enumerate(characters):
            square = text_index_to_square(idx, width, height)
            board.tiles[square.rank][square.file] = Tile.from_char(character)

        if len(characters) < width * height:
            logger.debug(
                "Board text has %d of %d tiles, remaining tiles left empty",
                len(characters),
                width * height,
            )
        return board

    def to_text(self) -> str:
        """Printable board: top rank first, one chess glyph per tile, newline after each rank"""
        return "".join(
            "".join(tile.to_display_char() for tile in self.tiles[rank]) + "\n"
            for rank in range(self.height - 1, -1, -1)
        )

    def to_compact_text(self) -> str:
        """Same orientation as `to_text()` but in the alphabet `from_text()` reads"""
        return "".join(
            "".join(tile.to_char() for tile in self.tiles[rank]) + "\n"
            for rank in range(self.height - 1, -1, -1)
        )

    def is_within_bounds(self, square: Square) -> bool:
        return square.is_within_bounds(self.width, self.height)

    def tile(self, square: Square) -> Tile:
        if not self.is_within_bounds(square):
            raise OutOfBoundsError(
                f"{square} is not on a {self.width}x{self.height} board."
            )
        return self.tiles[square.rank][square.file]

    def locate_owner(self, owner: Owner) -> list[Square]:
        return [
            Square(rank, file)
            for rank in range(self.height)
            for file in range(self.width)
            if self.tiles[rank][file].owner == owner
        ]

    def moves_from(self, rank: int, file: int) -> list[Move]:
        """
        Pseudo-legal moves of the piece on the given square.
        ---

        An empty square simply has no moves. No check detection, castling, en passant, or promotion.
        """
        square = Square(rank, file)
        tile = self.tile(square)
        if tile.is_empty:
            return []

        movement_rule: CandidateMovesFn = MOVEMENT_RULES[tile.piece]
        moves = movement_rule(square, self)
        logger.debug(
            "%s %s on %s has %d candidate moves",
            tile.owner.name,
            tile.piece.name,
            square,
            len(moves),
        )
        return moves

    def generate_candidate_moves(self, owner: Owner) -> list[Move]:
        """
        All pseudo-legal moves of one player. A legality layer can later filter these
        (making sure they do not put yourself in check).
        """
        candidate_moves: list[Move] = []
        for square in self.locate_owner(owner):
            candidate_moves.extend(self.moves_from(square.rank, square.file))
        return candidate_moves
