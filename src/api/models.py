"""Requests and Response models"""

from string import ascii_lowercase
from typing import Optional, Self

from pydantic import BaseModel, field_validator, model_validator

from src.chess.square import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH
from src.core.exceptions import InvalidRequestError

# Square names use a single letter per file
MAX_BOARD_DIMENSION = len(ascii_lowercase)


# --- REQUEST MODELS ---
class BoardRequest(BaseModel):
    """A board in compact text. No text means the standard opening."""

    board_text: Optional[str] = None
    width: int = DEFAULT_BOARD_WIDTH
    height: int = DEFAULT_BOARD_HEIGHT

    @field_validator(*["width", "height"])
    @classmethod
    def validate_dimension(cls, value: int) -> int:
        if not 1 <= value <= MAX_BOARD_DIMENSION:
            raise InvalidRequestError(
                f"Board dimensions must lie between 1 and {MAX_BOARD_DIMENSION}, got {value}."
            )
        return value

    @model_validator(mode="after")
    def validate_standard_dimensions(self) -> Self:
        standard_dimensions = (DEFAULT_BOARD_WIDTH, DEFAULT_BOARD_HEIGHT)
        if self.board_text is None and (self.width, self.height) != standard_dimensions:
            raise InvalidRequestError(
                "The standard opening is only defined on an 8x8 board. Supply a board_text."
            )
        return self


class MovesRequest(BoardRequest):
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        def _is_algebraic_notation(value: str) -> bool:
            if len(value) < 2:
                return False

            first_character = value[0]
            rest = value[1:]
            if not (first_character in ascii_lowercase and rest.isdecimal()):
                return False
            # ranks are written without leading zeros, starting at 1
            return rest[0] != "0"

        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    width: int
    height: int
    display: str
    compact: str


class MovesResponse(BaseModel):
    square: str
    owner: Optional[str]
    piece: Optional[str]
    moves: list[str]


class PlayerInfoResponse(BaseModel):
    short_castling_available: bool
    long_castling_available: bool


class GameResponse(BaseModel):
    board: BoardResponse
    white: PlayerInfoResponse
    black: PlayerInfoResponse
