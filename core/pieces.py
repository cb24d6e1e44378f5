from __future__ import annotations

from enum import Enum
from typing import Optional

BOARD_SIZE = 8

Direction = tuple[int, int]


class Side(Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.RED else Side.RED

    @property
    def forward(self) -> int:
        """Row delta of a man's step: red travels down the board, black up."""
        return 1 if self is Side.RED else -1

    @property
    def promotion_row(self) -> int:
        return BOARD_SIZE - 1 if self is Side.RED else 0


class Rank(Enum):
    MAN = "man"
    KING = "king"


_ALL_DIAGONALS: tuple[Direction, ...] = ((1, -1), (1, 1), (-1, -1), (-1, 1))

DIRECTIONS: dict[tuple[Side, Rank], tuple[Direction, ...]] = {
    (Side.RED, Rank.MAN): ((1, -1), (1, 1)),
    (Side.BLACK, Rank.MAN): ((-1, -1), (-1, 1)),
    (Side.RED, Rank.KING): _ALL_DIAGONALS,
    (Side.BLACK, Rank.KING): _ALL_DIAGONALS,
}


class Cell(Enum):
    EMPTY = "."
    RED_MAN = "r"
    RED_KING = "R"
    BLACK_MAN = "b"
    BLACK_KING = "B"

    @classmethod
    def of(cls, side: Side, rank: Rank) -> "Cell":
        return _CELL_BY_KEY[(side, rank)]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        try:
            return cls(symbol)
        except ValueError as exc:
            raise ValueError(f"Unknown cell symbol {symbol!r}.") from exc

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY

    @property
    def side(self) -> Optional[Side]:
        return _KEY_BY_CELL[self][0] if self is not Cell.EMPTY else None

    @property
    def rank(self) -> Optional[Rank]:
        return _KEY_BY_CELL[self][1] if self is not Cell.EMPTY else None

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def belongs_to(self, side: Side) -> bool:
        return self.side is side

    def is_opponent_of(self, other: "Cell") -> bool:
        if self.is_empty or other.is_empty:
            return False
        return self.side is not other.side

    def promoted(self) -> "Cell":
        if self.is_empty:
            return self
        return Cell.of(self.side, Rank.KING)

    def directions(self) -> tuple[Direction, ...]:
        if self.is_empty:
            return ()
        return DIRECTIONS[(self.side, self.rank)]

    def __repr__(self) -> str:
        if self.is_empty:
            return "Cell(EMPTY)"
        return f"Cell({self.side.name},{self.rank.name})"


_CELL_BY_KEY: dict[tuple[Side, Rank], Cell] = {
    (Side.RED, Rank.MAN): Cell.RED_MAN,
    (Side.RED, Rank.KING): Cell.RED_KING,
    (Side.BLACK, Rank.MAN): Cell.BLACK_MAN,
    (Side.BLACK, Rank.KING): Cell.BLACK_KING,
}
_KEY_BY_CELL: dict[Cell, tuple[Side, Rank]] = {cell: key for key, cell in _CELL_BY_KEY.items()}
