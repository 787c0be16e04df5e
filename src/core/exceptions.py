"""
Exceptions shared across layers.

Two kinds of failures come out of the domain layer:
* IllegalArgumentError: the caller (code, not a user) passed a malformed argument to an accessor.
* InvalidFENError: untrusted text could not be decoded as FEN.
"""

from src.core.messages import FENError, format_fen_error


class ChessError(Exception):
    """Base class for every error raised by this package."""


class IllegalArgumentError(ChessError):
    """An accessor received an argument it cannot interpret. Nothing has been mutated."""

    def __init__(self, function: str) -> None:
        self.function = function
        super().__init__(f"Illegal argument in {function}")


class InvalidFENError(ChessError):
    """Decoding a FEN string failed. `error` tells which rule was broken."""

    def __init__(self, fen: str, error: FENError) -> None:
        self.fen = fen
        self.error = error
        self.message = format_fen_error(error)
        super().__init__(f"{self.message} (FEN: {fen!r})")


class InvalidRequestError(ChessError):
    """Boundary model received values it cannot accept."""


class RepositoryError(ChessError):
    """Something went wrong while reading from / writing to persistence."""
