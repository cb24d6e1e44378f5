from __future__ import annotations

from .board import Board
from .move import Coordinate, Move
from .pieces import Cell, Side

MoveList = list[Move]


def candidate_moves(board: Board, row: int, col: int, cell: Cell) -> MoveList:
    """Step and jump candidates for ``cell`` standing on ``(row, col)``.

    Each direction of the piece is checked for a step onto an empty neighbour
    and for a jump over an opponent onto an empty landing square.
    """
    moves: MoveList = []
    origin = (row, col)
    for dr, dc in cell.directions():
        step_r, step_c = row + dr, col + dc
        if not board.in_bounds(step_r, step_c):
            continue
        adjacent = board.get(step_r, step_c)
        if adjacent.is_empty:
            moves.append(Move(start=origin, end=(step_r, step_c)))
            continue

        land_r, land_c = row + 2 * dr, col + 2 * dc
        if (
            board.in_bounds(land_r, land_c)
            and cell.is_opponent_of(adjacent)
            and board.get(land_r, land_c).is_empty
        ):
            moves.append(Move(start=origin, end=(land_r, land_c), captured=(step_r, step_c)))
    return moves


def generate_moves(board: Board, row: int, col: int, cell: Cell) -> list[Coordinate]:
    return [move.end for move in candidate_moves(board, row, col, cell)]


def capture_moves(board: Board, row: int, col: int, cell: Cell) -> MoveList:
    return [move for move in candidate_moves(board, row, col, cell) if move.is_capture]


def can_capture(board: Board, row: int, col: int) -> bool:
    """True when the piece on ``(row, col)`` has at least one jump available."""
    cell = board.get(row, col)
    return bool(capture_moves(board, row, col, cell))


def has_moves(board: Board, side: Side) -> bool:
    return any(candidate_moves(board, row, col, cell) for row, col, cell in board.pieces(side))


def side_has_capture(board: Board, side: Side) -> bool:
    return any(capture_moves(board, row, col, cell) for row, col, cell in board.pieces(side))
