from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from core.board import Board  # noqa: E402
from core.executor import classify_move, try_move  # noqa: E402
from core.pieces import Cell  # noqa: E402


def _board(*rows: str) -> Board:
    return Board.from_rows(rows)


class SimpleMoveTests(unittest.TestCase):
    def test_opening_step(self) -> None:
        board = Board()
        result = try_move(board, 2, 1, 3, 0)

        self.assertTrue(result)
        self.assertIsNone(result.captured)
        self.assertFalse(result.chain_pending)
        self.assertIs(board.get(2, 1), Cell.EMPTY)
        self.assertIs(board.get(3, 0), Cell.RED_MAN)

    def test_empty_source_is_rejected_without_changes(self) -> None:
        board = Board()
        before = board.copy()
        self.assertFalse(try_move(board, 3, 0, 4, 1))
        self.assertEqual(board, before)

    def test_man_cannot_step_backwards(self) -> None:
        board = _board(
            "........",
            "........",
            "........",
            "...r....",
            "........",
            "........",
            "........",
            "........",
        )
        self.assertFalse(try_move(board, 3, 3, 2, 2))
        self.assertIs(board.get(3, 3), Cell.RED_MAN)

    def test_step_onto_occupied_square_is_rejected(self) -> None:
        board = Board()
        before = board.copy()
        self.assertFalse(try_move(board, 1, 0, 2, 1))
        self.assertEqual(board, before)

    def test_non_diagonal_and_long_moves_are_rejected(self) -> None:
        board = _board(
            "........",
            "........",
            "........",
            "...R....",
            "........",
            "........",
            "........",
            "........",
        )
        before = board.copy()
        self.assertFalse(try_move(board, 3, 3, 3, 4))
        self.assertFalse(try_move(board, 3, 3, 5, 4))
        self.assertFalse(try_move(board, 3, 3, 6, 6))
        self.assertFalse(try_move(board, 3, 3, 3, 3))
        self.assertEqual(board, before)

    def test_out_of_bounds_destination_is_rejected(self) -> None:
        board = _board(
            "........",
            "........",
            "........",
            "r.......",
            "........",
            "........",
            "........",
            "........",
        )
        self.assertFalse(try_move(board, 3, 0, 4, -1))
        self.assertFalse(try_move(board, 3, 0, 8, 5))

    def test_king_steps_backwards(self) -> None:
        board = _board(
            "........",
            "........",
            "........",
            "...B....",
            "........",
            "........",
            "........",
            "........",
        )
        self.assertTrue(try_move(board, 3, 3, 4, 4))
        self.assertIs(board.get(4, 4), Cell.BLACK_KING)

    def test_step_onto_last_row_promotes(self) -> None:
        board = _board(
            "........",
            "..b.....",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
        )
        result = try_move(board, 1, 2, 0, 1)
        self.assertTrue(result.promoted)
        self.assertIs(board.get(0, 1), Cell.BLACK_KING)


class CaptureTests(unittest.TestCase):
    def test_single_capture_removes_jumped_piece(self) -> None:
        board = _board(
            "........",
            "........",
            ".r......",
            "..b.....",
            "........",
            "........",
            "........",
            "........",
        )
        result = try_move(board, 2, 1, 4, 3)

        self.assertTrue(result)
        self.assertEqual(result.captured, (3, 2))
        self.assertFalse(result.chain_pending)
        self.assertIs(board.get(3, 2), Cell.EMPTY)
        self.assertIs(board.get(4, 3), Cell.RED_MAN)

    def test_jump_over_own_piece_is_rejected(self) -> None:
        board = _board(
            "........",
            "........",
            ".r......",
            "..r.....",
            "........",
            "........",
            "........",
            "........",
        )
        before = board.copy()
        self.assertFalse(try_move(board, 2, 1, 4, 3))
        self.assertEqual(board, before)

    def test_jump_over_empty_square_is_rejected(self) -> None:
        board = _board(
            "........",
            "........",
            ".r......",
            "........",
            "........",
            "........",
            "........",
            "........",
        )
        self.assertFalse(try_move(board, 2, 1, 4, 3))

    def test_capture_with_follow_up_reports_chain(self) -> None:
        board = _board(
            "........",
            "........",
            ".r......",
            "..b.....",
            "........",
            "..b.....",
            "........",
            "........",
        )
        result = try_move(board, 2, 1, 4, 3)
        self.assertTrue(result.chain_pending)

    def test_promotion_applies_before_chain_check(self) -> None:
        board = _board(
            "........",
            "........",
            "........",
            "........",
            "........",
            "...r....",
            "..b.b...",
            "........",
        )
        result = try_move(board, 5, 3, 7, 1)

        self.assertTrue(result.promoted)
        self.assertIs(board.get(7, 1), Cell.RED_KING)
        self.assertFalse(result.chain_pending)

        board = _board(
            "........",
            "........",
            "........",
            "........",
            "........",
            ".r......",
            "..b.b...",
            "........",
        )
        # Crowned on row 7, the piece jumps back over (6, 4) as a king.
        result = try_move(board, 5, 1, 7, 3)
        self.assertTrue(result.promoted)
        self.assertTrue(result.chain_pending)

    def test_man_chain_uses_forward_directions_only(self) -> None:
        board = _board(
            "........",
            "........",
            ".r......",
            "..b.b...",
            "........",
            "........",
            "........",
            "........",
        )
        result = try_move(board, 2, 1, 4, 3)
        self.assertTrue(result)
        self.assertFalse(result.chain_pending)
        self.assertIs(board.get(3, 4), Cell.BLACK_MAN)

    def test_require_capture_rejects_steps(self) -> None:
        board = _board(
            "........",
            "........",
            ".r......",
            "..b.....",
            "........",
            "........",
            "........",
            "........",
        )
        self.assertFalse(try_move(board, 2, 1, 3, 0, require_capture=True))
        self.assertTrue(try_move(board, 2, 1, 4, 3, require_capture=True))

    def test_classify_move_does_not_mutate(self) -> None:
        board = Board()
        before = board.copy()
        move = classify_move(board, 2, 1, 3, 2)
        self.assertIsNotNone(move)
        self.assertFalse(move.is_capture)
        self.assertEqual(board, before)


if __name__ == "__main__":
    unittest.main()
