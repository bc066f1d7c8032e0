"""Material evaluation."""

from __future__ import annotations

from meangreen.core.board import Board
from meangreen.core.enums import Color, PieceType
from meangreen.core.piece import KING_VALUE, PIECE_VALUES

# Units counted as material; the king contributes only the fixed term.
_MATERIAL_TYPES: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.QUEEN,
)


def unit_counts(board: Board, color: Color) -> dict[PieceType, int]:
    """Number of pawns, bishops, knights, rooks and queens *color* owns."""
    counts = dict.fromkeys(_MATERIAL_TYPES, 0)
    for sq in board.pieces(color):
        piece = board[sq]
        if piece is not None and piece.piece_type in counts:
            counts[piece.piece_type] += 1
    return counts


def material_score(board: Board, color: Color) -> int:
    """Fixed king term plus the weighted count of *color*'s units."""
    counts = unit_counts(board, color)
    return KING_VALUE + sum(PIECE_VALUES[pt] * n for pt, n in counts.items())


def material_balance(board: Board, color: Color) -> int:
    """*color*'s material score minus the opponent's."""
    return material_score(board, color) - material_score(board, color.opposite)
