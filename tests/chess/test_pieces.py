"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import (
    COLORED_PIECE_SYMBOLS,
    FEN_TO_PIECE,
    PIECE_TO_FEN,
    Color,
    Piece,
    PieceType,
)
from src.core.exceptions import IllegalArgumentError


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE
    assert piece.to_fen() == char


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char]
    assert piece.color == Color.BLACK
    assert piece.to_fen() == char


@pytest.mark.parametrize("code", range(12))
def test_piece_codes(code: int) -> None:
    """code = piece type * 2 + color, and the code indexes the FEN symbol"""
    piece = Piece.from_code(code)
    assert piece.code == code
    assert piece.type.value == code // 2
    assert piece.color.value == code % 2
    assert piece.to_fen() == COLORED_PIECE_SYMBOLS[code]


def test_symbol_order() -> None:
    assert Piece(PieceType.KING, Color.WHITE).code == 0
    assert Piece(PieceType.KING, Color.BLACK).code == 1
    assert Piece(PieceType.PAWN, Color.BLACK).code == 11


@pytest.mark.parametrize("piece_type", list(PieceType))
@pytest.mark.parametrize("color", list(Color))
def test_from_letters(piece_type: PieceType, color: Color) -> None:
    piece = Piece.from_letters(PIECE_TO_FEN[piece_type], color.to_fen())
    assert piece == Piece(piece_type, color)
    assert piece.piece_letter == PIECE_TO_FEN[piece_type]
    assert piece.color_letter == color.to_fen()


@pytest.mark.parametrize(
    "piece, color", [("x", "w"), ("P", "w"), ("p", "W"), ("p", "white"), (None, "b"), ("p", 1)]
)
def test_invalid_letters(piece: str, color: str) -> None:
    with pytest.raises(IllegalArgumentError):
        Piece.from_letters(piece, color)


@pytest.mark.parametrize("char", ["", "x", "1", "KQ", "-"])
def test_invalid_fen_piece(char: str) -> None:
    with pytest.raises(IllegalArgumentError):
        Piece.from_fen(char)


@pytest.mark.parametrize("char, color", [("w", Color.WHITE), ("b", Color.BLACK)])
def test_color_fen(char: str, color: Color) -> None:
    assert Color.from_fen(char) == color
    assert color.to_fen() == char


def test_invalid_color_fen() -> None:
    with pytest.raises(IllegalArgumentError):
        Color.from_fen("white")
