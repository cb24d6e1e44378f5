from __future__ import annotations

from typing import Any, Optional

from core.game import Game
from core.move import Coordinate
from core.pieces import Side


def _coord_tuple_to_dict(coord: Optional[Coordinate]) -> Optional[dict[str, int]]:
    if coord is None:
        return None
    row, col = coord
    return {"row": row, "col": col}


def serialize_pieces(game: Game) -> list[dict[str, Any]]:
    return [
        {"row": row, "col": col, "side": cell.side.value, "isKing": cell.is_king}
        for row, col, cell in game.board.pieces()
    ]


def serialize_win_event(winner: Side) -> dict[str, str]:
    return {"type": "win", "winner": winner.value}


def serialize_game(game: Game, events: list[dict[str, Any]]) -> dict[str, Any]:
    pieces = serialize_pieces(game)
    piece_counts = {
        side.value: {
            "total": sum(1 for piece in pieces if piece["side"] == side.value),
            "kings": sum(1 for piece in pieces if piece["side"] == side.value and piece["isKing"]),
        }
        for side in Side
    }

    return {
        "cells": list(game.board.to_rows()),
        "pieces": pieces,
        "turn": game.get_current_player().value,
        "selection": _coord_tuple_to_dict(game.get_selection()),
        "highlights": [_coord_tuple_to_dict(coord) for coord in game.get_highlighted_destinations()],
        "winner": game.winner.value if game.winner else None,
        "chainPending": game.is_chain_pending,
        "mandatoryCapture": game.options.mandatory_capture,
        "pieceCounts": piece_counts,
        "events": events,
    }
