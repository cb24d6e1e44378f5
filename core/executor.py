from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .move import Coordinate, Move
from .move_generator import can_capture
from .pieces import Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    success: bool
    move: Optional[Move] = None
    promoted: bool = False
    chain_pending: bool = False

    def __bool__(self) -> bool:
        return self.success

    @property
    def captured(self) -> Optional[Coordinate]:
        return self.move.captured if self.move else None


REJECTED = MoveResult(success=False)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def classify_move(board: Board, from_row: int, from_col: int, to_row: int, to_col: int) -> Optional[Move]:
    """Return the move ``from -> to`` would be on the current board, or None if illegal.

    Does not touch the board.
    """
    if not (board.in_bounds(from_row, from_col) and board.in_bounds(to_row, to_col)):
        return None
    piece = board.get(from_row, from_col)
    if piece.is_empty:
        return None

    row_diff = to_row - from_row
    col_diff = to_col - from_col
    distance = abs(col_diff)
    if abs(row_diff) != distance or distance not in (1, 2):
        return None
    # Kings may use any diagonal, men only their two forward ones.
    if (_sign(row_diff), _sign(col_diff)) not in piece.directions():
        return None
    if not board.get(to_row, to_col).is_empty:
        return None

    start, end = (from_row, from_col), (to_row, to_col)
    if distance == 1:
        return Move(start=start, end=end)

    jumped = ((from_row + to_row) // 2, (from_col + to_col) // 2)
    if not piece.is_opponent_of(board.get(*jumped)):
        return None
    return Move(start=start, end=end, captured=jumped)


def apply_move(board: Board, move: Move) -> MoveResult:
    """Relocate the piece, remove a jumped piece and promote on the last row."""
    piece = board.get(*move.start)
    board.set(*move.start, Cell.EMPTY)
    if move.captured is not None:
        board.set(*move.captured, Cell.EMPTY)

    end_row, end_col = move.end
    promoted = not piece.is_king and end_row == piece.side.promotion_row
    if promoted:
        piece = piece.promoted()
    board.set(end_row, end_col, piece)

    chain_pending = move.is_capture and can_capture(board, end_row, end_col)
    return MoveResult(success=True, move=move, promoted=promoted, chain_pending=chain_pending)


def try_move(
    board: Board,
    from_row: int,
    from_col: int,
    to_row: int,
    to_col: int,
    *,
    require_capture: bool = False,
) -> MoveResult:
    """Validate and play ``from -> to``; the board is untouched when the move is rejected.

    With ``require_capture`` set, simple steps are rejected and only jumps are played.
    """
    move = classify_move(board, from_row, from_col, to_row, to_col)
    if move is not None and require_capture and not move.is_capture:
        move = None
    if move is None:
        logger.debug("Rejected move (%d, %d) -> (%d, %d)", from_row, from_col, to_row, to_col)
        return REJECTED
    return apply_move(board, move)
