from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock
from typing import Any, Optional

from core.game import Game
from core.options import RuleOptions
from core.pieces import Side

from .schemas import ClickRequest, ResetRequest
from .serializers import serialize_game, serialize_win_event

logger = logging.getLogger(__name__)


class GameSession:
    """Thread-safe orchestrator around a single Game instance.

    Win notifications raised by the game are queued and handed out with the
    next response only, so each one reaches the client exactly once.
    """

    def __init__(self, options: Optional[RuleOptions] = None) -> None:
        self.lock = Lock()
        self.game = Game(options)
        self.pending_events: list[dict[str, Any]] = []
        self.game.add_win_listener(self._on_win)

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def click(self, payload: ClickRequest) -> dict[str, Any]:
        with self.lock:
            self.game.on_cell_click(payload.row, payload.col)
            return self._serialize_locked()

    def reset(self, payload: Optional[ResetRequest] = None) -> dict[str, Any]:
        with self.lock:
            options = None
            if payload is not None and payload.mandatoryCapture is not None:
                options = replace(self.game.options, mandatory_capture=payload.mandatoryCapture)
            self.game.reset(options)
            self.pending_events.clear()
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _on_win(self, winner: Side) -> None:
        logger.info("Queueing win notification for %s", winner.value)
        self.pending_events.append(serialize_win_event(winner))

    def _serialize_locked(self) -> dict[str, Any]:
        events, self.pending_events = self.pending_events, []
        return serialize_game(self.game, events)
