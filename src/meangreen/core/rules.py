"""Self-check detection and move validation."""

from __future__ import annotations

import logging

from meangreen.core.board import Board
from meangreen.core.enums import Color, ValidationPolicy
from meangreen.core.move import Move
from meangreen.core.move_generator import MoveGenerator

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Check is a single-ply simulation: a king is in check when any opposing
    move generated on the board would land on its square.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Whether *color*'s king can be captured on the opponent's next ply."""
        king_sq = board.find_king(color)
        if king_sq is None:
            return False
        return MoveGenerator(board).attacks_square(king_sq, color.opposite)

    @staticmethod
    def results_in_check(board: Board, move: Move, color: Color) -> bool:
        """Whether playing *move* exposes *color*'s king to capture.

        A side without a king is never reported in check; the condition is
        logged so the caller can notice the degenerate board.
        """
        after = board.apply_move(move)
        king_sq = after.find_king(color)
        if king_sq is None:
            _LOGGER.warning("No %s king on board after %s", color.name, move)
            return False

        for enemy_move in MoveGenerator(after).moves(color.opposite):
            if enemy_move.to_sq == king_sq:
                _LOGGER.debug(
                    "%s exposes %s king: enemy %s -> %s",
                    move,
                    color,
                    enemy_move.from_sq,
                    enemy_move.to_sq,
                )
                return True
        return False

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[Move]:
        """Generated moves for *color* that do not result in self-check."""
        return [
            move
            for move in MoveGenerator(board).moves(color)
            if not Rules.results_in_check(board, move, color)
        ]

    @staticmethod
    def is_valid_move(
        board: Board,
        move: Move,
        color: Color,
        policy: ValidationPolicy = ValidationPolicy.STRICT,
    ) -> bool:
        """Validate *move* by *color* against the board before it is played.

        ``STRICT`` requires a piece of *color* on the from-square, the move
        among that piece's generated moves, and no self-check. ``PERMISSIVE``
        accepts everything. A missing board or color raises ``ValueError``
        under either policy.
        """
        if board is None:
            raise ValueError("Move validation requires a board")
        if color is None:
            raise ValueError("Move validation requires a side to move")
        if policy == ValidationPolicy.PERMISSIVE:
            return True
        if not (move.from_sq.is_valid and move.to_sq.is_valid):
            return False
        piece = board[move.from_sq]
        if piece is None or piece.color != color:
            return False
        if move not in MoveGenerator(board).moves_from(move.from_sq):
            return False
        return not Rules.results_in_check(board, move, color)
