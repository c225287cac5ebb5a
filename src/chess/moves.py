"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the pseudo-legal move sets for each piece kind.

Nothing in here checks whether a move leaves your own king in check. That is left to a legality layer built on top.
"""

from dataclasses import dataclass
from typing import Callable, Protocol, Self

from src.chess.square import Square
from src.chess.tile import Owner, PieceKind, Tile


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def tile(self, square: Square) -> Tile: ...
    def is_within_bounds(self, square: Square) -> bool: ...


# (d_rank, d_file)
Vector = tuple[int, int]

ORTHOGONALS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
ALL_DIRECTIONS: list[Vector] = ORTHOGONALS + DIAGONALS
KNIGHT_JUMPS: list[Vector] = [
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
]


@dataclass(frozen=True)
class Move:
    """basic definition of a move: where a piece starts and where it ends up"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface notation: <from_square><to_square>

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "g1f3": the knight jumps from g1 to f3
        """
        return cls(Square.from_algebraic(uci[:2]), Square.from_algebraic(uci[2:4]))

    def to_uci(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    Step along each direction until we hit the edge of the board or another piece.
    Your own piece blocks the ray (no move onto it), an opponent's piece can be captured, but ends the ray as well.
    """
    player = board.tile(square).owner
    opponent = player.opponent

    moves: list[Move] = []
    for dr, df in directions:
        target_square = square
        while True:
            target_square = target_square.shifted(dr, df)
            if not board.is_within_bounds(target_square):
                break

            occupant = board.tile(target_square).owner
            if occupant == player:
                break

            moves.append(Move(from_square=square, to_square=target_square))
            if occupant == opponent:
                break
    return moves


def single_step_move(square: Square, board: Board, deltas: list[Vector]) -> list[Move]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that only take a single step along a direction"""
    player = board.tile(square).owner
    moves: list[Move] = []
    for dr, df in deltas:
        target_square = square.shifted(dr, df)
        if not board.is_within_bounds(target_square):
            continue

        if board.tile(target_square).owner != player:
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


WHITE_PAWN_STARTING_RANK = 1
BLACK_PAWN_STARTING_RANK = 6


def pawn_starting_rank(owner: Owner) -> int:
    """Counted from the bottom, whatever the height of the board"""
    return (
        WHITE_PAWN_STARTING_RANK if owner == Owner.WHITE else BLACK_PAWN_STARTING_RANK
    )


def candidate_pawn_moves(square: Square, board: Board) -> list[Move]:
    """
    A pawn:
    - moves by a single square forward, but only onto an empty square.
    - can move by two from its starting rank, if both squares in front of it are empty.
    - takes diagonally (and only takes: an empty diagonal square is not a move)

    NOTE: No en passant and no promotion here.
    """
    player = board.tile(square).owner
    opponent = player.opponent
    # White moves up the board, black moves down the board
    forward = 1 if player == Owner.WHITE else -1

    moves: list[Move] = []
    single_step = square.shifted(forward, 0)
    if board.is_within_bounds(single_step) and board.tile(single_step).is_empty:
        moves.append(Move(from_square=square, to_square=single_step))

        double_step = single_step.shifted(forward, 0)
        on_starting_rank = square.rank == pawn_starting_rank(player)
        if (
            on_starting_rank
            and board.is_within_bounds(double_step)
            and board.tile(double_step).is_empty
        ):
            moves.append(Move(from_square=square, to_square=double_step))

    for df in (-1, 1):
        target_square = square.shifted(forward, df)
        if not board.is_within_bounds(target_square):
            continue
        if board.tile(target_square).owner == opponent:
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def candidate_knight_moves(square: Square, board: Board) -> list[Move]:
    """Knights always move such that |delta_rank| + |delta_file| = 3 (and they jump over everything)"""
    return single_step_move(square, board, KNIGHT_JUMPS)


def candidate_king_moves(square: Square, board: Board) -> list[Move]:
    """The king moves a single square in any direction. No castling."""
    return single_step_move(square, board, ALL_DIRECTIONS)


def candidate_rook_moves(square: Square, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, ORTHOGONALS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Move]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_queen_moves(square: Square, board: Board) -> list[Move]:
    """The Queen combines the rook moves and the bishop moves"""
    return raycasting_move(square, board, ALL_DIRECTIONS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Move]]
MOVEMENT_RULES: dict[PieceKind, CandidateMovesFn] = {
    PieceKind.PAWN: candidate_pawn_moves,
    PieceKind.ROOK: candidate_rook_moves,
    PieceKind.KNIGHT: candidate_knight_moves,
    PieceKind.BISHOP: candidate_bishop_moves,
    PieceKind.QUEEN: candidate_queen_moves,
    PieceKind.KING: candidate_king_moves,
}
