"""Square coordinate type and helpers.

Squares are ``(file, rank)`` pairs::

    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), ..., h8=(7, 7)

Rank 0 is White's back rank.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


def is_on_board(file: int, rank: int) -> bool:
    """Whether ``(file, rank)`` lies on the 8x8 grid."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


class Square(NamedTuple):
    """Board coordinate."""

    file: int
    rank: int

    @property
    def is_valid(self) -> bool:
        return is_on_board(self.file, self.rank)

    def offset(self, df: int, dr: int) -> Square:
        """Square shifted by ``(df, dr)``; may be off the board."""
        return Square(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        return square_name(self)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 3) -> 'e4'."""
    if not sq.is_valid:
        return f"({sq.file},{sq.rank})"
    return chr(ord("a") + sq.file) + str(sq.rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> (4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(ord(name[0]) - ord("a"), int(name[1]) - 1)


# Scan order: rank ascending, then file ascending.
ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank) for rank in range(BOARD_SIZE) for file in range(BOARD_SIZE)
)
