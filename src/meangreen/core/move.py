"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from meangreen.core.enums import MoveFlag
from meangreen.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable move from one square to another.

    ``value`` only ranks candidates during selection; it is not a game
    score. Two moves are equal when their squares match, whatever their flag
    or value.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = field(default=MoveFlag.NORMAL, compare=False)
    value: int = field(default=0, compare=False)

    @classmethod
    def terminal(cls, square: Square = Square(0, 0)) -> Move:
        """Sentinel returned when the side to move has no legal move."""
        return cls(square, square, MoveFlag.GAME_OVER)

    @property
    def is_terminal(self) -> bool:
        return self.flag == MoveFlag.GAME_OVER or self.from_sq == self.to_sq

    # -- Display ----------------------------------------------------------

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
