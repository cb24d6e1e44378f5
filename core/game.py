from __future__ import annotations

import logging
from typing import Callable, Optional

from .board import Board
from . import executor
from .executor import REJECTED, MoveResult
from .move import Coordinate
from .move_generator import capture_moves, generate_moves, has_moves, side_has_capture
from .options import RuleOptions
from .pieces import Cell, Side

logger = logging.getLogger(__name__)

WinListener = Callable[[Side], None]


class Game:
    """Click-driven checkers session: board, turn, selection and highlights.

    A presentation layer forwards clicks to :meth:`on_cell_click` and reads the
    state back through the ``get_*`` accessors. After a capture that leaves the
    same piece another jump, the turn stays with the mover and the landing
    square stays selected until the chain is finished.
    """

    def __init__(self, options: Optional[RuleOptions] = None) -> None:
        self.options = options or RuleOptions()
        self.board = Board()
        self.current_player = Side.RED
        self.selection: Optional[Coordinate] = None
        self.highlighted: list[Coordinate] = []
        self.chain_pending = False
        self.winner: Optional[Side] = None
        self._win_listeners: list[WinListener] = []

    def reset(self, options: Optional[RuleOptions] = None) -> None:
        if options is not None:
            self.options = options
        self.board = Board()
        self.current_player = Side.RED
        self._clear_selection()
        self.winner = None
        logger.info("New game started (mandatory capture: %s)", self.options.mandatory_capture)

    # queries -------------------------------------------------------------

    def get_cell_state(self, row: int, col: int) -> Cell:
        return self.board.get(row, col)

    def get_current_player(self) -> Side:
        return self.current_player

    def get_selection(self) -> Optional[Coordinate]:
        return self.selection

    def get_highlighted_destinations(self) -> list[Coordinate]:
        return list(self.highlighted)

    @property
    def is_chain_pending(self) -> bool:
        return self.chain_pending

    def has_pieces(self, side: Side) -> bool:
        return any(True for _ in self.board.pieces(side))

    def has_moves(self, side: Side) -> bool:
        return has_moves(self.board, side)

    # win notification ----------------------------------------------------

    def add_win_listener(self, listener: WinListener) -> None:
        self._win_listeners.append(listener)

    def remove_win_listener(self, listener: WinListener) -> None:
        if listener in self._win_listeners:
            self._win_listeners.remove(listener)

    # interaction ---------------------------------------------------------

    def on_cell_click(self, row: int, col: int) -> None:
        if not self.board.in_bounds(row, col) or self.winner is not None:
            return

        if self.selection is None:
            cell = self.board.get(row, col)
            if cell.belongs_to(self.current_player):
                self._select(row, col, cell)
            return

        if self.chain_pending:
            # Only the remaining jumps of the chaining piece are accepted.
            if (row, col) in self.highlighted:
                self.try_move(*self.selection, row, col)
            return

        if self.try_move(*self.selection, row, col):
            return

        cell = self.board.get(row, col)
        if cell.belongs_to(self.current_player):
            self._select(row, col, cell)
        else:
            self._clear_selection()

    def try_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> MoveResult:
        if self.winner is not None:
            return REJECTED
        if self.chain_pending and self.selection != (from_row, from_col):
            return REJECTED
        if not self.board.in_bounds(from_row, from_col):
            return REJECTED
        if not self.board.get(from_row, from_col).belongs_to(self.current_player):
            logger.debug("Rejected move from (%d, %d): not %s's piece", from_row, from_col, self.current_player.value)
            return REJECTED

        result = executor.try_move(
            self.board,
            from_row,
            from_col,
            to_row,
            to_col,
            require_capture=self._capture_required(),
        )
        if not result:
            return result

        logger.info("%s played %s", self.current_player.value, result.move)
        if result.promoted:
            logger.info("%s man crowned at %s", self.current_player.value, result.move.end)

        if result.chain_pending:
            end_row, end_col = result.move.end
            self.chain_pending = True
            self._select(end_row, end_col, self.board.get(end_row, end_col))
            logger.debug("%s must continue capturing from %s", self.current_player.value, result.move.end)
        else:
            self._clear_selection()
            self._switch_turn()
        return result

    # helpers -------------------------------------------------------------

    def _capture_required(self) -> bool:
        if self.chain_pending:
            return True
        return self.options.mandatory_capture and side_has_capture(self.board, self.current_player)

    def _select(self, row: int, col: int, cell: Cell) -> None:
        self.selection = (row, col)
        if self._capture_required():
            self.highlighted = [move.end for move in capture_moves(self.board, row, col, cell)]
        else:
            self.highlighted = generate_moves(self.board, row, col, cell)
        logger.debug("Selected %s at %s, destinations %s", cell.symbol, self.selection, self.highlighted)

    def _clear_selection(self) -> None:
        self.selection = None
        self.highlighted = []
        self.chain_pending = False

    def _switch_turn(self) -> None:
        self.current_player = self.current_player.opponent
        logger.info("%s to move", self.current_player.value)
        if not self.has_pieces(self.current_player) or not self.has_moves(self.current_player):
            self._declare_winner(self.current_player.opponent)

    def _declare_winner(self, side: Side) -> None:
        self.winner = side
        logger.info("Game over: %s wins", side.value)
        for listener in list(self._win_listeners):
            listener(side)
