"""Orchestration from (validated) requests to the rules engine and back to responses."""

import logging

from src.api.models import (
    BoardRequest,
    BoardResponse,
    GameResponse,
    MovesRequest,
    MovesResponse,
    PlayerInfoResponse,
)
from src.chess.board import Board
from src.chess.game import Game, PlayerInfo
from src.chess.square import Square

logger = logging.getLogger(__name__)


class RulesService:
    """Stateless: every request carries the full board."""

    def render_board(self, request: BoardRequest) -> BoardResponse:
        """Parse the board and print it back, both as glyphs and in compact text."""
        board = self._build_board(request)
        return self._create_board_response(board)

    def moves_from(self, request: MovesRequest) -> MovesResponse:
        """Pseudo-legal moves of whatever stands on the requested square."""
        board = self._build_board(request)
        square = Square.from_algebraic(request.square)
        moves = board.moves_from(square.rank, square.file)
        tile = board.tile(square)
        logger.debug("Generated %d moves from %s", len(moves), request.square)

        return MovesResponse(
            square=request.square,
            owner=None if tile.is_empty else tile.owner.name.lower(),
            piece=None if tile.is_empty else tile.piece.name.lower(),
            moves=sorted(move.to_uci() for move in moves),
        )

    def new_game(self) -> GameResponse:
        """Standard opening, all castling options still available."""
        game = Game.new_game()
        return GameResponse(
            board=self._create_board_response(game.board),
            white=self._create_player_info_response(game.white),
            black=self._create_player_info_response(game.black),
        )

    # -- Internal helpers --
    def _build_board(self, request: BoardRequest) -> Board:
        if request.board_text is None:
            return Board.standard_opening()
        return Board.from_text(request.board_text, request.width, request.height)

    def _create_board_response(self, board: Board) -> BoardResponse:
        return BoardResponse(
            width=board.width,
            height=board.height,
            display=board.to_text(),
            compact=board.to_compact_text(),
        )

    def _create_player_info_response(self, info: PlayerInfo) -> PlayerInfoResponse:
        return PlayerInfoResponse(
            short_castling_available=info.short_castling_available,
            long_castling_available=info.long_castling_available,
        )
