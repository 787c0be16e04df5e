"""
Castling rights, stored as one bitmask per color over the board columns.

Bit `c` set for a color means that color may in principle still castle with the rook standing on column `c`.
The FEN codec only ever touches columns 0 (queen side) and 7 (king side), but other columns can be represented.
Whether the king and rook actually are where they should be is not checked here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from src.chess.pieces import Color

QUEEN_SIDE_COLUMN = 0
KING_SIDE_COLUMN = 7

_STRICT_CASTLING = re.compile(r"K?Q?k?q?")
_LENIENT_CASTLING = re.compile(r"[KQkq]*")


class CastleSide(Enum):
    """Values are the tokens accepted by the Position accessors."""

    KING_SIDE = "k"
    QUEEN_SIDE = "q"

    @property
    def column(self) -> int:
        return KING_SIDE_COLUMN if self is CastleSide.KING_SIDE else QUEEN_SIDE_COLUMN


# FEN letter -> (color, column). The order of this mapping is the order in which FEN writes the rights.
CASTLING_ORDER: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, KING_SIDE_COLUMN),
    "Q": (Color.WHITE, QUEEN_SIDE_COLUMN),
    "k": (Color.BLACK, KING_SIDE_COLUMN),
    "q": (Color.BLACK, QUEEN_SIDE_COLUMN),
}


@dataclass
class CastleRights:
    masks: list[int] = field(default_factory=lambda: [0, 0])

    @classmethod
    def all(cls) -> CastleRights:
        rights = cls()
        for color, column in CASTLING_ORDER.values():
            rights.set(color, column, True)
        return rights

    def get(self, color: Color, column: int) -> bool:
        return (self.masks[color.value] & (1 << column)) != 0

    def set(self, color: Color, column: int, value: bool) -> None:
        if value:
            self.masks[color.value] |= 1 << column
        else:
            self.masks[color.value] &= ~(1 << column)

    @classmethod
    def from_fen(cls, castle_fen: str, strict: bool = False) -> Optional[CastleRights]:
        """
        Parse the part of the FEN string that encodes castling rights. Returns None if it cannot be parsed.

        strict: only 'KQkq' in that order, each letter at most once (or '-').
        lenient: any combination of these 4 letters, repeats allowed.
        """
        rights = cls()
        if castle_fen == "-":
            return rights

        pattern = _STRICT_CASTLING if strict else _LENIENT_CASTLING
        if pattern.fullmatch(castle_fen) is None:
            return None

        for character in castle_fen:
            color, column = CASTLING_ORDER[character]
            rights.set(color, column, True)
        return rights

    def to_fen(self) -> str:
        """create the part of the FEN string that encodes castling rights"""
        castling_chars = "".join(
            character
            for character, (color, column) in CASTLING_ORDER.items()
            if self.get(color, column)
        )
        return castling_chars or "-"
