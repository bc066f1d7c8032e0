"""Core domain layer: board, move rules and self-check detection.

Quick start::

    from meangreen.core import (
        STARTING_PLACEMENT, Color, MoveGenerator, Rules, board_from_fen,
    )

    board = board_from_fen(STARTING_PLACEMENT)
    moves, successors = MoveGenerator(board).successors(Color.WHITE)
    safe = [m for m in moves if not Rules.results_in_check(board, m, Color.WHITE)]
"""

from meangreen.core.board import Board, KingNotFoundError
from meangreen.core.enums import Color, MoveFlag, PieceType, ValidationPolicy
from meangreen.core.move import Move
from meangreen.core.move_generator import MOVE_RULES, MoveGenerator
from meangreen.core.notation import (
    STARTING_FEN,
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    parse_color,
    parse_uci,
    side_from_fen,
)
from meangreen.core.piece import PIECE_VALUES, Piece
from meangreen.core.rules import Rules
from meangreen.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "MoveFlag",
    "PieceType",
    "ValidationPolicy",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "KingNotFoundError",
    "MOVE_RULES",
    "Move",
    "MoveGenerator",
    "PIECE_VALUES",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "parse_color",
    "parse_uci",
    "side_from_fen",
]
