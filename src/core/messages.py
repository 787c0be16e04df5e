"""
Tags for FEN decoding failures and the catalogue of human-readable messages.

The decoder only produces a FENError (a tag + the data needed to explain it).
Turning it into text happens here, so a front end can swap the catalogue for a translated one.
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

ORDINALS: tuple[str, ...] = ("1st", "2nd", "3rd", "4th", "5th", "6th", "7th", "8th")


class FENErrorKind(Enum):
    WRONG_FIELD_COUNT = auto()
    WRONG_RANK_COUNT = auto()
    UNEXPECTED_CHARACTER = auto()
    WRONG_RANK_LENGTH = auto()
    INVALID_TURN = auto()
    INVALID_CASTLE_RIGHTS = auto()
    INVALID_EN_PASSANT = auto()
    WRONG_EN_PASSANT_ROW = auto()
    INVALID_MOVE_COUNTER = auto()


@dataclass(frozen=True)
class FENError:
    """
    A single decoding failure.
    `args` holds the values substituted into the message template ({1}, {2}, ...), already as strings.
    """

    kind: FENErrorKind
    args: tuple[str, ...] = ()


# Templates use positional placeholders {1}, {2}... so translators can reorder them.
MESSAGES: Mapping[FENErrorKind, str] = MappingProxyType(
    {
        FENErrorKind.WRONG_FIELD_COUNT: "A FEN string must contain exactly 6 space-separated fields.",
        FENErrorKind.WRONG_RANK_COUNT: "The 1st field of a FEN string must contain exactly 8 `/`-separated subfields.",
        FENErrorKind.UNEXPECTED_CHARACTER: "Unexpected character in the 1st field of the FEN string: `{1}`.",
        FENErrorKind.WRONG_RANK_LENGTH: "The {1} subfield of the FEN string 1st field does not describe exactly 8 squares.",
        FENErrorKind.INVALID_TURN: "The 2nd field of a FEN string must be either `w` or `b`.",
        FENErrorKind.INVALID_CASTLE_RIGHTS: (
            "The 3rd field of a FEN string must be either `-` or a list of characters among `K`, `Q`, `k` and `q` (in this order)."
        ),
        FENErrorKind.INVALID_EN_PASSANT: (
            "The 4th field of a FEN string must be either `-` or a square from the 3rd or 6th row where en-passant is allowed."
        ),
        FENErrorKind.WRONG_EN_PASSANT_ROW: (
            "The row number indicated in the FEN string 4th field is inconsistent with respect to the 2nd field."
        ),
        FENErrorKind.INVALID_MOVE_COUNTER: "The {1} field of a FEN string must be a number.",
    }
)


def ordinal(index: int) -> str:
    """0 -> '1st', 1 -> '2nd', ..."""
    return ORDINALS[index]


def format_fen_error(
    error: FENError, catalogue: Mapping[FENErrorKind, str] = MESSAGES
) -> str:
    """Fill in the template registered for the error's kind."""
    message = catalogue[error.kind]
    for position, value in enumerate(error.args, start=1):
        message = message.replace(f"{{{position}}}", value)
    return message
