"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntEnum):
    """Move classification.

    ``GAME_OVER`` marks the terminal sentinel returned when the side to move
    has nothing to play. Checkmate and stalemate share it.
    """

    NORMAL = 0
    GAME_OVER = 1


class ValidationPolicy(IntEnum):
    """How strictly opponent moves are validated."""

    STRICT = 0
    PERMISSIVE = 1
