"""Defines colors, piece types and how a colored piece is packed into a single board code"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.core.exceptions import IllegalArgumentError


class Color(Enum):
    """Values double as index into per-color arrays."""

    WHITE = 0
    BLACK = 1

    @classmethod
    def from_fen(cls, character: str) -> Color:
        if not isinstance(character, str) or character not in FEN_TO_COLOR:
            raise IllegalArgumentError("Color.from_fen")
        return FEN_TO_COLOR[character]

    def to_fen(self) -> str:
        return COLOR_TO_FEN[self]


class PieceType(Enum):
    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    PAWN = 5


FEN_TO_COLOR: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
COLOR_TO_FEN: dict[Color, str] = {value: key for key, value in FEN_TO_COLOR.items()}

FEN_TO_PIECE: dict[str, PieceType] = {
    "k": PieceType.KING,
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "p": PieceType.PAWN,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Index in this string == board code of the colored piece (piece_type * 2 + color)
COLORED_PIECE_SYMBOLS = "KkQqRrBbNnPp"


@dataclass(frozen=True)
class Piece:
    """A piece type together with the color owning it. This is what a square holds, seen from outside the board."""

    type: PieceType
    color: Color

    @classmethod
    def from_code(cls, code: int) -> Piece:
        return cls(PieceType(code // 2), Color(code % 2))

    @property
    def code(self) -> int:
        return self.type.value * 2 + self.color.value

    @classmethod
    def from_fen(cls, character: str) -> Piece:
        # upper case: White pieces, lower case: Black pieces
        if (
            not isinstance(character, str)
            or len(character) != 1
            or character not in COLORED_PIECE_SYMBOLS
        ):
            raise IllegalArgumentError("Piece.from_fen")
        return cls.from_code(COLORED_PIECE_SYMBOLS.index(character))

    def to_fen(self) -> str:
        return COLORED_PIECE_SYMBOLS[self.code]

    @classmethod
    def from_letters(cls, piece: str, color: str) -> Piece:
        """('p', 'b') -> black pawn. Both letters are lower case."""
        if not (isinstance(piece, str) and isinstance(color, str)):
            raise IllegalArgumentError("Piece.from_letters")
        if piece not in FEN_TO_PIECE or color not in FEN_TO_COLOR:
            raise IllegalArgumentError("Piece.from_letters")
        return cls(FEN_TO_PIECE[piece], FEN_TO_COLOR[color])

    @property
    def piece_letter(self) -> str:
        return PIECE_TO_FEN[self.type]

    @property
    def color_letter(self) -> str:
        return self.color.to_fen()
