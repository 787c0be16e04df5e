"""
Encoding / decoding of FEN strings.

FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.

<board position> <active color> <castling rights> <en passant square> <half move clock> <full move number>

* The board position lists the ranks from the 8th down to the 1st, separated by "/". Within a rank squares are
  read from the a-file to the h-file: a letter is a piece (capital letters for the white pieces), a digit is a run
  of empty squares.
* The active color is either "w" or "b"
* Castling rights are "K"/"Q" for white king-/queen-side, "k"/"q" for black, or "-" if none is left.
* The en passant square is the square a pawn can capture on, or "-". Its rank follows from the active color
  (6th rank when white is to move, 3rd rank when black is to move), so only the file is kept.
* The half move clock counts the moves made since the last pawn move or capture, and the full move number starts
  at 1 and increments after every move black makes. Neither is part of the position itself.

ex) The standard starting position:
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from src.chess.board import Board
from src.chess.castling import CastleRights
from src.chess.pieces import COLORED_PIECE_SYMBOLS, FEN_TO_COLOR, Color
from src.chess.square import BOARD_DIMENSIONS, FILE_SYMBOLS
from src.core.exceptions import InvalidFENError
from src.core.messages import FENError, FENErrorKind, ordinal

logger = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"

NUM_FIELDS = 6

_EN_PASSANT = re.compile(r"[a-h][36]")
_STRICT_COUNTER = re.compile(r"0|[1-9][0-9]*")
_LENIENT_COUNTER = re.compile(r"[0-9]+")

# rank digit of the en passant square, given the color to move
EN_PASSANT_RANK: dict[Color, str] = {Color.WHITE: "6", Color.BLACK: "3"}


@dataclass(frozen=True)
class MoveCounters:
    """The last two FEN fields. Passed along with a position, never stored in it."""

    half_move_clock: int = 0
    full_move_number: int = 1


@dataclass
class ParsedFEN:
    """Everything a FEN string describes, decoded but not yet applied to a Position."""

    board: Board
    turn: Color
    castle_rights: CastleRights
    en_passant: Optional[int]
    counters: MoveCounters = field(default_factory=MoveCounters)


def parse_fen(fen: str, strict: bool = False) -> ParsedFEN:
    """
    Decode a FEN string. Raises InvalidFENError at the first rule that is broken.

    In strict mode, the castling rights must be written in the canonical order, the en passant rank must match the
    color to move, and move counters cannot have leading zeros.
    """
    fen = fen.strip()

    def fail(kind: FENErrorKind, *args: str) -> InvalidFENError:
        logger.debug("Rejected FEN %r: %s %s", fen, kind.name, args)
        return InvalidFENError(fen, FENError(kind, args))

    fields = fen.split()
    if len(fields) != NUM_FIELDS:
        raise fail(FENErrorKind.WRONG_FIELD_COUNT)
    position, active_color, castling, en_passant, half_move_clock, num_turns = fields

    board = _parse_board(position, fail)

    if active_color not in FEN_TO_COLOR:
        raise fail(FENErrorKind.INVALID_TURN)
    turn = FEN_TO_COLOR[active_color]

    castle_rights = CastleRights.from_fen(castling, strict)
    if castle_rights is None:
        raise fail(FENErrorKind.INVALID_CASTLE_RIGHTS)

    en_passant_file: Optional[int] = None
    if en_passant != "-":
        if _EN_PASSANT.fullmatch(en_passant) is None:
            raise fail(FENErrorKind.INVALID_EN_PASSANT)
        if strict and en_passant[1] != EN_PASSANT_RANK[turn]:
            raise fail(FENErrorKind.WRONG_EN_PASSANT_ROW)
        en_passant_file = FILE_SYMBOLS.index(en_passant[0])

    counter_pattern = _STRICT_COUNTER if strict else _LENIENT_COUNTER
    counters: list[int] = []
    for field_idx, counter in ((4, half_move_clock), (5, num_turns)):
        if counter_pattern.fullmatch(counter) is None:
            raise fail(FENErrorKind.INVALID_MOVE_COUNTER, ordinal(field_idx))
        try:
            counters.append(int(counter))
        except ValueError:
            # digit runs beyond the interpreter's int conversion limit
            raise fail(FENErrorKind.INVALID_MOVE_COUNTER, ordinal(field_idx)) from None

    return ParsedFEN(
        board=board,
        turn=turn,
        castle_rights=castle_rights,
        en_passant=en_passant_file,
        counters=MoveCounters(*counters),
    )


def _parse_board(position: str, fail: Callable[..., InvalidFENError]) -> Board:
    """Decode the first FEN field into a fresh Board."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_ranks:
        raise fail(FENErrorKind.WRONG_RANK_COUNT)

    board = Board()
    for rank_idx, rank_fen in enumerate(rank_fens):
        # FEN string is read from top rank (8th) to bottom rank (1st)
        row = num_ranks - 1 - rank_idx
        column = 0
        char_idx = 0
        while char_idx < len(rank_fen) and column < num_files:
            character = rank_fen[char_idx]
            if character in "12345678":
                # A number denotes the amount of empty squares after each other
                column += int(character)
            elif character in COLORED_PIECE_SYMBOLS:
                board.set(row, column, COLORED_PIECE_SYMBOLS.index(character))
                column += 1
            else:
                raise fail(FENErrorKind.UNEXPECTED_CHARACTER, character)
            char_idx += 1

        # the rank must describe exactly 8 squares, using all of its characters
        if char_idx != len(rank_fen) or column != num_files:
            raise fail(FENErrorKind.WRONG_RANK_LENGTH, ordinal(rank_idx))
    return board


def format_fen(
    board: Board,
    turn: Color,
    castle_rights: CastleRights,
    en_passant: Optional[int],
    counters: MoveCounters = MoveCounters(),
) -> str:
    """reverse operation: write a FEN from the given data"""
    en_passant_algebraic = (
        f"{FILE_SYMBOLS[en_passant]}{EN_PASSANT_RANK[turn]}"
        if en_passant is not None
        else "-"
    )
    fields = [
        board.to_fen(),
        turn.to_fen(),
        castle_rights.to_fen(),
        en_passant_algebraic,
        str(counters.half_move_clock),
        str(counters.full_move_number),
    ]
    return " ".join(fields)


def is_valid_fen(fen: str, strict: bool = False) -> bool:
    """Check if given string can be decoded as FEN."""
    try:
        parse_fen(fen, strict)
    except InvalidFENError:
        return False
    return True
