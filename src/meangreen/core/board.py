"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from meangreen.core.enums import Color, PieceType
from meangreen.core.piece import Piece
from meangreen.core.types import ALL_SQUARES, BOARD_SIZE, Square

if TYPE_CHECKING:
    from meangreen.core.move import Move

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE
_COLOR_COUNT = 2


class KingNotFoundError(ValueError):
    """Raised when a side has no king on the board."""


def _index(sq: Square) -> int:
    return sq.rank * BOARD_SIZE + sq.file


class Board:
    """Immutable 64-square board with per-color piece indexes.

    Every mutation returns a new board; the receiver is never touched.
    """

    __slots__ = ("_squares", "_locations", "_king_squares")

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells = tuple(squares) if squares is not None else (None,) * _SQUARE_COUNT
        if len(cells) != _SQUARE_COUNT:
            raise ValueError(f"Board needs {_SQUARE_COUNT} squares, got {len(cells)}")
        self._squares: tuple[Piece | None, ...] = cells

        # [color] -> occupied squares in scan order.
        locations: list[list[Square]] = [[] for _ in range(_COLOR_COUNT)]
        # [color] -> king square cache (None if king missing).
        kings: list[Square | None] = [None] * _COLOR_COUNT
        for sq, piece in zip(ALL_SQUARES, cells):
            if piece is None:
                continue
            color_idx = int(piece.color)
            locations[color_idx].append(sq)
            if piece.piece_type == PieceType.KING and kings[color_idx] is None:
                kings[color_idx] = sq
        self._locations: tuple[tuple[Square, ...], ...] = tuple(
            tuple(squares_of_color) for squares_of_color in locations
        )
        self._king_squares: tuple[Square | None, ...] = tuple(kings)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.is_valid:
            raise IndexError(f"Square off board: {sq!r}")
        return self._squares[_index(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def color_at(self, sq: Square) -> Color | None:
        """Owner of the piece on *sq*, or ``None`` when empty."""
        piece = self[sq]
        return None if piece is None else piece.color

    def is_enemy(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of the side opposing *color*."""
        piece = self[sq]
        return piece is not None and piece.color != color

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> tuple[Square, ...]:
        """Squares occupied by *color*, in scan order."""
        return self._locations[int(color)]

    def find_king(self, color: Color) -> Square | None:
        """King square for *color*, or ``None`` if it has no king."""
        return self._king_squares[int(color)]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        sq = self.find_king(color)
        if sq is None:
            raise KingNotFoundError(f"No {color.name} king on board")
        return sq

    # -- Successor construction ---------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """Copy of the board with *sq* set to *piece*."""
        if not sq.is_valid:
            raise IndexError(f"Square off board: {sq!r}")
        cells = list(self._squares)
        cells[_index(sq)] = piece
        return Board(cells)

    def apply_move(self, move: Move) -> Board:
        """Board after *move*; any piece on the destination is captured."""
        piece = self[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")
        if not move.to_sq.is_valid:
            raise IndexError(f"Square off board: {move.to_sq!r}")
        cells = list(self._squares)
        cells[_index(move.from_sq)] = None
        cells[_index(move.to_sq)] = piece
        return Board(cells)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_pieces(cls, placement: Mapping[Square, Piece]) -> Board:
        """Build a board from a ``{square: piece}`` mapping."""
        cells: list[Piece | None] = [None] * _SQUARE_COUNT
        for sq, piece in placement.items():
            if not sq.is_valid:
                raise IndexError(f"Square off board: {sq!r}")
            cells[_index(sq)] = piece
        return cls(cells)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        placement: dict[Square, Piece] = {}
        for f in range(BOARD_SIZE):
            placement[Square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            placement[Square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for f, pt in enumerate(back_rank):
            placement[Square(f, 0)] = Piece(Color.WHITE, pt)
            placement[Square(f, 7)] = Piece(Color.BLACK, pt)
        return cls.from_pieces(placement)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
