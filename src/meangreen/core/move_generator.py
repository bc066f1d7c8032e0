"""Per-piece move rules and successor generation."""

from __future__ import annotations

import logging
from collections.abc import Callable

from meangreen.core.board import Board
from meangreen.core.enums import Color, PieceType
from meangreen.core.move import Move
from meangreen.core.types import ALL_SQUARES, Square, is_on_board

_LOGGER = logging.getLogger(__name__)

MoveRule = Callable[[Board, Square, Color], list[Move]]

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# [color] -> rank step toward the opponent / starting rank.
_PAWN_FORWARD: tuple[int, int] = (1, -1)
_PAWN_START_RANK: tuple[int, int] = (1, 6)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for df, dr in offsets:
            af = sq.file + df
            ar = sq.rank + dr
            if is_on_board(af, ar):
                moves.append(Square(af, ar))
        targets[sq] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = sq.file + df
            ar = sq.rank + dr
            ray: list[Square] = []
            while is_on_board(af, ar):
                ray.append(Square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Piece rules -----------------------------------------------------------


def _step_moves(
    board: Board,
    sq: Square,
    color: Color,
    targets: tuple[Square, ...],
) -> list[Move]:
    moves: list[Move] = []
    for to_sq in targets:
        target = board[to_sq]
        if target is None:
            moves.append(Move(sq, to_sq))
        elif target.color != color:
            moves.append(Move(sq, to_sq, value=target.value))
    return moves


def _sliding_moves(
    board: Board,
    sq: Square,
    color: Color,
    rays: tuple[tuple[Square, ...], ...],
) -> list[Move]:
    moves: list[Move] = []
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
                continue
            if target.color != color:
                moves.append(Move(sq, to_sq, value=target.value))
            break
    return moves


def pawn_moves(board: Board, sq: Square, color: Color) -> list[Move]:
    """Forward pushes into empty squares and diagonal captures.

    Captures are ranked ``1 + |pawn value - target value|`` so that even an
    even trade outranks a quiet move.
    """
    moves: list[Move] = []
    forward = _PAWN_FORWARD[int(color)]

    one_step = sq.offset(0, forward)
    if one_step.is_valid and board.is_empty(one_step):
        moves.append(Move(sq, one_step))
        if sq.rank == _PAWN_START_RANK[int(color)]:
            two_step = sq.offset(0, 2 * forward)
            if two_step.is_valid and board.is_empty(two_step):
                moves.append(Move(sq, two_step))

    pawn = board[sq]
    own_value = pawn.value if pawn is not None else 0
    for df in (-1, 1):
        cap_sq = sq.offset(df, forward)
        if not cap_sq.is_valid:
            continue
        target = board[cap_sq]
        if target is not None and target.color != color:
            moves.append(Move(sq, cap_sq, value=1 + abs(own_value - target.value)))
    return moves


def knight_moves(board: Board, sq: Square, color: Color) -> list[Move]:
    return _step_moves(board, sq, color, _KNIGHT_TARGETS[sq])


def bishop_moves(board: Board, sq: Square, color: Color) -> list[Move]:
    return _sliding_moves(board, sq, color, _BISHOP_RAYS[sq])


def rook_moves(board: Board, sq: Square, color: Color) -> list[Move]:
    return _sliding_moves(board, sq, color, _ROOK_RAYS[sq])


def queen_moves(board: Board, sq: Square, color: Color) -> list[Move]:
    return _sliding_moves(board, sq, color, _QUEEN_RAYS[sq])


def king_moves(board: Board, sq: Square, color: Color) -> list[Move]:
    """Single steps to adjacent squares; no castling."""
    return _step_moves(board, sq, color, _KING_TARGETS[sq])


MOVE_RULES: dict[PieceType, MoveRule] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


class MoveGenerator:
    """Generates scored moves and successor boards for a :class:`Board`.

    Moves are pseudo-legal: they respect movement patterns, board bounds and
    friendly blocking, but may leave the mover's own king capturable. See
    :class:`meangreen.core.rules.Rules` for the self-check filter.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def moves_from(self, sq: Square) -> list[Move]:
        """Moves for the piece standing on *sq*.

        Empty or off-board squares yield no moves. A rule that fails is
        logged and contributes nothing.
        """
        if not sq.is_valid:
            return []
        piece = self._board[sq]
        if piece is None:
            return []

        rule = MOVE_RULES.get(piece.piece_type)
        if rule is None:
            _LOGGER.debug("No move rule for %s on %s", piece.piece_type.name, sq)
            return []
        try:
            return rule(self._board, sq, piece.color)
        except Exception:
            _LOGGER.exception("Move rule for %s on %s failed", piece.piece_type.name, sq)
            return []

    def moves(self, color: Color) -> list[Move]:
        """All moves for *color* in board scan order."""
        moves: list[Move] = []
        for sq in self._board.pieces(color):
            moves.extend(self.moves_from(sq))
        return moves

    def successors(self, color: Color) -> tuple[list[Move], list[Board]]:
        """Every move for *color* and, at the same index, its resulting board."""
        moves = self.moves(color)
        boards = [self._board.apply_move(move) for move in moves]
        return moves, boards

    def attacks_square(self, target: Square, by_color: Color) -> bool:
        """Whether any move of *by_color* lands on *target*."""
        return any(move.to_sq == target for move in self.moves(by_color))
