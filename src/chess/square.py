"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

# Classical chess is 8x8 (width, height). Boards can be created with other dimensions though.
DEFAULT_BOARD_WIDTH = 8
DEFAULT_BOARD_HEIGHT = 8
BOARD_DIMENSIONS = (DEFAULT_BOARD_WIDTH, DEFAULT_BOARD_HEIGHT)


@dataclass(frozen=True)
class Square:
    """Counted from the bottom-left corner, starting at zero. The vertical coordinate comes first."""

    rank: int
    file: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0, 0) - (7, 7)"""
        file = ascii_lowercase.index(sq[0])
        rank = int(sq[1:]) - 1
        return cls(rank, file)

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.file]}{self.rank + 1}"

    def shifted(self, d_rank: int, d_file: int) -> Square:
        """The square you land on after taking a single step along (d_rank, d_file)"""
        return Square(self.rank + d_rank, self.file + d_file)

    def is_within_bounds(
        self, width: int = DEFAULT_BOARD_WIDTH, height: int = DEFAULT_BOARD_HEIGHT
    ) -> bool:
        return (0 <= self.rank < height) and (0 <= self.file < width)
