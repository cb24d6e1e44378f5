"""Core checkers engine package."""

from .board import Board
from .executor import MoveResult, try_move
from .game import Game
from .move import Coordinate, Move
from .move_generator import generate_moves, has_moves
from .options import RuleOptions
from .pieces import Cell, Rank, Side

__all__ = [
    "Board",
    "Game",
    "Move",
    "MoveResult",
    "Coordinate",
    "Cell",
    "Side",
    "Rank",
    "RuleOptions",
    "generate_moves",
    "has_moves",
    "try_move",
]
