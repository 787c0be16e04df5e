"""
Representation of a single position: the board, whose turn it is, castling rights and en passant file.
The part that can be encoded in a FEN string (minus the move counters).
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Union

from src.chess.board import EMPTY, Board
from src.chess.castling import CastleRights, CastleSide
from src.chess.fen import MoveCounters, format_fen, parse_fen
from src.chess.pieces import COLORED_PIECE_SYMBOLS, Color, Piece
from src.chess.square import BOARD_DIMENSIONS, FILE_SYMBOLS, Square
from src.core.exceptions import IllegalArgumentError

ColorLike = Union[Color, str]
SideLike = Union[CastleSide, str]

EMPTY_SQUARE = "-"
DIAGRAM_BORDER = "+---+---+---+---+---+---+---+---+"

KING_START: dict[Color, str] = {Color.WHITE: "e1", Color.BLACK: "e8"}


class Legality(Enum):
    """Cached answer to 'is this a legal chess position?'. Only a full legality checker can turn UNKNOWN into the others."""

    VALID = auto()
    INVALID = auto()
    UNKNOWN = auto()


def _to_color(value: ColorLike, function: str) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, str) and value in ("w", "b"):
        return Color.from_fen(value)
    raise IllegalArgumentError(function)


def _to_side(value: SideLike, function: str) -> CastleSide:
    if isinstance(value, CastleSide):
        return value
    if isinstance(value, str) and value in ("k", "q"):
        return CastleSide(value)
    raise IllegalArgumentError(function)


class Position:
    """
    Chess position, mutated in place through its accessors.

    The board array, castle rights etc. are owned by the position: accessors hand out values (Piece, str, bool),
    never the internal containers. Every setter resets the legality cache to UNKNOWN.

    NOTE: the king location cache is only reliable since the last reset() / clear(). Decoding a FEN string does
    not update it.
    """

    def __init__(self) -> None:
        self._board = Board()
        self._turn = Color.WHITE
        self._castle_rights = CastleRights()
        self._en_passant: Optional[int] = None
        self._legality = Legality.UNKNOWN
        self._king: dict[Color, Optional[int]] = {Color.WHITE: None, Color.BLACK: None}
        self.reset()

    # --- Constructors ---
    @classmethod
    def empty(cls) -> Position:
        position = cls()
        position.clear()
        return position

    @classmethod
    def from_fen(cls, fen: str, strict: bool = False) -> Position:
        """Decoded position. Starts from the empty position, so the king cache holds no location."""
        position = cls.empty()
        if strict:
            position.set_fen_strict(fen)
        else:
            position.set_fen(fen)
        return position

    def reset(self) -> None:
        """Set the position to the starting state."""
        self._board.reset()
        self._turn = Color.WHITE
        self._castle_rights = CastleRights.all()
        self._en_passant = None
        self._legality = Legality.VALID
        self._king = {
            color: Square.from_algebraic(name).index
            for color, name in KING_START.items()
        }

    def clear(self) -> None:
        """Set the position to the empty state. Trivially valid: king presence is not checked."""
        self._board.clear()
        self._turn = Color.WHITE
        self._castle_rights = CastleRights()
        self._en_passant = None
        self._legality = Legality.VALID
        self._king = {Color.WHITE: None, Color.BLACK: None}

    # --- FEN ---
    def fen(self, counters: MoveCounters = MoveCounters()) -> str:
        """FEN representation of the position, completed with the given move counters."""
        return format_fen(
            self._board, self._turn, self._castle_rights, self._en_passant, counters
        )

    def set_fen(self, fen: str) -> MoveCounters:
        """Parse the FEN (lenient mode) and replace the position with it. The position is untouched if it fails."""
        return self._set_fen(fen, strict=False)

    def set_fen_strict(self, fen: str) -> MoveCounters:
        """Same as set_fen, but rejects non-canonical castling rights, en passant rank and move counters."""
        return self._set_fen(fen, strict=True)

    def _set_fen(self, fen: str, strict: bool) -> MoveCounters:
        if not isinstance(fen, str):
            raise IllegalArgumentError("Position.set_fen")
        parsed = parse_fen(fen, strict)

        # only commit once the whole string has been decoded
        self._board = parsed.board
        self._turn = parsed.turn
        self._castle_rights = parsed.castle_rights
        self._en_passant = parsed.en_passant
        self._legality = Legality.UNKNOWN
        return parsed.counters

    # --- Squares ---
    def square(self, name: str) -> Optional[Piece]:
        """Content of the square (ex. 'e4'), None if empty."""
        sq = self._parse_square(name, "Position.square")
        return self._board.piece(sq.row, sq.column)

    def set_square(self, name: str, content: Union[Piece, str, None]) -> None:
        """Put a piece on the square, or empty it with None / '-'."""
        sq = self._parse_square(name, "Position.set_square")
        if content is None or content == EMPTY_SQUARE:
            code = EMPTY
        elif isinstance(content, Piece):
            code = content.code
        else:
            raise IllegalArgumentError("Position.set_square")
        self._board.set(sq.row, sq.column, code)
        self._legality = Legality.UNKNOWN

    @staticmethod
    def _parse_square(name: str, function: str) -> Square:
        try:
            return Square.from_algebraic(name)
        except IllegalArgumentError:
            raise IllegalArgumentError(function) from None

    # --- Turn ---
    @property
    def turn(self) -> Color:
        return self._turn

    @turn.setter
    def turn(self, value: ColorLike) -> None:
        self._turn = _to_color(value, "Position.turn")
        self._legality = Legality.UNKNOWN

    # --- Castling ---
    def castle_rights(self, color: ColorLike, side: SideLike) -> bool:
        color = _to_color(color, "Position.castle_rights")
        side = _to_side(side, "Position.castle_rights")
        return self._castle_rights.get(color, side.column)

    def set_castle_rights(self, color: ColorLike, side: SideLike, value: bool) -> None:
        color = _to_color(color, "Position.set_castle_rights")
        side = _to_side(side, "Position.set_castle_rights")
        if not isinstance(value, bool):
            raise IllegalArgumentError("Position.set_castle_rights")
        self._castle_rights.set(color, side.column, value)
        self._legality = Legality.UNKNOWN

    # --- En passant ---
    @property
    def en_passant(self) -> Optional[str]:
        """File where an en passant capture is allowed ('a' - 'h'), None if there is none."""
        return None if self._en_passant is None else FILE_SYMBOLS[self._en_passant]

    @en_passant.setter
    def en_passant(self, value: Optional[str]) -> None:
        if value is None or value == EMPTY_SQUARE:
            self._en_passant = None
        elif isinstance(value, str) and len(value) == 1 and value in FILE_SYMBOLS:
            self._en_passant = FILE_SYMBOLS.index(value)
        else:
            raise IllegalArgumentError("Position.en_passant")
        self._legality = Legality.UNKNOWN

    # --- Cached, computed attributes ---
    @property
    def legality(self) -> Legality:
        return self._legality

    def set_legality(self, legality: Legality) -> None:
        """Store the outcome of a legality check."""
        if not isinstance(legality, Legality):
            raise IllegalArgumentError("Position.set_legality")
        self._legality = legality

    def king_location(self, color: ColorLike) -> Optional[int]:
        """Board index of the king of that color, as of the last reset() / clear()."""
        return self._king[_to_color(color, "Position.king_location")]

    # --- Display ---
    def ascii(self) -> str:
        """Multi-line text diagram, meant for a fixed-width font."""
        lines = [DIAGRAM_BORDER]
        for row in range(BOARD_DIMENSIONS[1] - 1, -1, -1):
            cells = []
            for column in range(BOARD_DIMENSIONS[0]):
                code = self._board.get(row, column)
                cells.append(COLORED_PIECE_SYMBOLS[code] if code >= 0 else " ")
            lines.append("| " + " | ".join(cells) + " |")
            lines.append(DIAGRAM_BORDER)
        en_passant = self.en_passant or "-"
        lines.append(
            f"{self._turn.to_fen()} {self._castle_rights.to_fen()} {en_passant}"
        )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Position({self.fen()!r})"
