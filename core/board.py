from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .pieces import BOARD_SIZE, Cell, Side

BoardRows = tuple[str, ...]
OccupiedCell = tuple[int, int, Cell]

_START_ROWS = {Side.RED: range(0, 3), Side.BLACK: range(BOARD_SIZE - 3, BOARD_SIZE)}


class Board:
    """8x8 grid of cells; red starts on rows 0-2, black on rows 5-7."""

    size = BOARD_SIZE

    def __init__(self) -> None:
        self.grid: list[list[Cell]] = []
        self.initialize()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.grid = [[Cell.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from eight strings of cell symbols, e.g. ``".r.r.r.r"``.

        Whitespace inside a row is ignored so rows can be written as ``". r . r"``.
        """
        cleaned = ["".join(row.split()) for row in rows]
        if len(cleaned) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cleaned):
            raise ValueError(f"Board layout must be {BOARD_SIZE} rows of {BOARD_SIZE} symbols.")
        board = cls.empty()
        for row, line in enumerate(cleaned):
            for col, symbol in enumerate(line):
                board.grid[row][col] = Cell.from_symbol(symbol)
        return board

    def initialize(self) -> None:
        self.grid = [[Cell.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        for side, rows in _START_ROWS.items():
            man = Cell.RED_MAN if side is Side.RED else Cell.BLACK_MAN
            for row in rows:
                for col in range(BOARD_SIZE):
                    if is_dark_square(row, col):
                        self.grid[row][col] = man

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self.grid[row][col]

    def set(self, row: int, col: int, cell: Cell) -> None:
        self._check_bounds(row, col)
        self.grid[row][col] = cell

    def pieces(self, side: Optional[Side] = None) -> Iterator[OccupiedCell]:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                cell = self.grid[row][col]
                if cell.is_empty:
                    continue
                if side is not None and cell.side is not side:
                    continue
                yield row, col, cell

    def count(self, side: Side) -> int:
        return sum(1 for _ in self.pieces(side))

    def copy(self) -> "Board":
        clone = Board.empty()
        clone.grid = [list(row) for row in self.grid]
        return clone

    def to_rows(self) -> BoardRows:
        return tuple("".join(cell.symbol for cell in row) for row in self.grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        return "\n".join(" ".join(line) for line in self.to_rows())

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board.")


def is_dark_square(row: int, col: int) -> bool:
    return (row + col) % 2 == 1
