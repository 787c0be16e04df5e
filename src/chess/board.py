"""
The board: a flat array of 10 x 12 cells holding the 8 x 8 playing area surrounded by a border.

Border cells always hold OFF_BOARD. A future move generator can walk the array with fixed index offsets
(+1, +10, +21, ...) and detect leaving the board with a single check, instead of comparing rows and columns.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.chess.pieces import COLORED_PIECE_SYMBOLS, Piece
from src.chess.square import BOARD_DIMENSIONS, BOARD_HEIGHT, BOARD_WIDTH, board_index

# Special cell values. Any value >= 0 is the code of a colored piece.
EMPTY = -1
OFF_BOARD = -2

# Back rank from file a to file h (upper case: White)
BACK_RANK = "RNBQKBNR"


def _empty_cells() -> list[int]:
    cells = [OFF_BOARD] * (BOARD_WIDTH * BOARD_HEIGHT)
    for row in range(BOARD_DIMENSIONS[1]):
        for column in range(BOARD_DIMENSIONS[0]):
            cells[board_index(row, column)] = EMPTY
    return cells


@dataclass
class Board:
    cells: list[int] = field(default_factory=_empty_cells)

    @classmethod
    def starting_position(cls) -> Board:
        board = cls()
        board.reset()
        return board

    def get(self, row: int, column: int) -> int:
        return self.cells[board_index(row, column)]

    def set(self, row: int, column: int, code: int) -> None:
        """Only EMPTY or a colored piece code. Coordinates are validated by the caller."""
        self.cells[board_index(row, column)] = code

    def piece(self, row: int, column: int) -> Piece | None:
        code = self.get(row, column)
        return None if code < 0 else Piece.from_code(code)

    def clear(self) -> None:
        self.cells = _empty_cells()

    def reset(self) -> None:
        """Put all pieces on their starting squares"""
        self.clear()
        last_row = BOARD_DIMENSIONS[1] - 1
        for column, symbol in enumerate(BACK_RANK):
            self.set(0, column, COLORED_PIECE_SYMBOLS.index(symbol))
            self.set(1, column, COLORED_PIECE_SYMBOLS.index("P"))
            self.set(last_row - 1, column, COLORED_PIECE_SYMBOLS.index("p"))
            self.set(last_row, column, COLORED_PIECE_SYMBOLS.index(symbol.lower()))

    def is_off_board(self, index: int) -> bool:
        return self.cells[index] == OFF_BOARD

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string, starting from the 8th rank."""
        return "/".join(
            self._rank_to_fen(row) for row in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, row: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for column in range(BOARD_DIMENSIONS[0]):
            code = self.get(row, column)

            if code >= 0:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(COLORED_PIECE_SYMBOLS[code])
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)
