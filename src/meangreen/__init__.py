"""Mean Green: greedy chess move selection with one-ply king safety."""

from __future__ import annotations

from meangreen.core import Board, Color, Move, ValidationPolicy
from meangreen.core.rules import Rules
from meangreen.engine.greedy_search import GreedySearchEngine
from meangreen.engine.search import SearchContext

__version__ = "0.1.0"


def select_move(board: Board, color: Color, context: SearchContext | None = None) -> Move:
    """Greedy king-safe move for *color*, or the terminal sentinel."""
    return GreedySearchEngine().select_move(board, color, context)


def validate_move(
    board_before: Board,
    move: Move,
    color: Color,
    policy: ValidationPolicy = ValidationPolicy.STRICT,
) -> bool:
    """Whether *move* by *color* is legal on *board_before* under *policy*."""
    return Rules.is_valid_move(board_before, move, color, policy)


__all__ = ["__version__", "select_move", "validate_move"]
