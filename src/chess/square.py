"""
A square on the board, and its address in the bordered board array.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from src.core.exceptions import IllegalArgumentError

BOARD_DIMENSIONS = (8, 8)

# The board array has a 1-cell border on every side: 10 cells wide, 12 high
# (two border rows below rank 1 and above rank 8 so knight jumps also land on the border).
BOARD_WIDTH = 10
BOARD_HEIGHT = 12
FIRST_SQUARE_INDEX = 21

FILE_SYMBOLS = "abcdefgh"
RANK_SYMBOLS = "12345678"

_ALGEBRAIC = re.compile(r"[a-h][1-8]")


def board_index(row: int, column: int) -> int:
    """Row 0 is rank 1, column 0 is file a."""
    return FIRST_SQUARE_INDEX + BOARD_WIDTH * row + column


@dataclass(frozen=True)
class Square:
    row: int
    column: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0, 0) - (7, 7), as (row, column)"""
        if not isinstance(sq, str) or _ALGEBRAIC.fullmatch(sq) is None:
            raise IllegalArgumentError("Square.from_algebraic")
        return cls(RANK_SYMBOLS.index(sq[1]), FILE_SYMBOLS.index(sq[0]))

    def to_algebraic(self) -> str:
        return f"{FILE_SYMBOLS[self.column]}{RANK_SYMBOLS[self.row]}"

    @property
    def index(self) -> int:
        return board_index(self.row, self.column)
