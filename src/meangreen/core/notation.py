"""FEN piece placement and UCI move text."""

from __future__ import annotations

from meangreen.core.board import Board
from meangreen.core.enums import Color
from meangreen.core.move import Move
from meangreen.core.piece import Piece
from meangreen.core.types import BOARD_SIZE, Square, parse_square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
STARTING_FEN = f"{STARTING_PLACEMENT} w - - 0 1"


def board_from_fen(fen: str) -> Board:
    """Parse the piece-placement field of *fen* into a :class:`Board`.

    Only the first whitespace-separated field is read, so both a bare
    placement and a full FEN record are accepted.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    placement: dict[Square, Piece] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                placement[Square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return Board.from_pieces(placement)


def side_from_fen(fen: str, default: Color = Color.WHITE) -> Color:
    """Side to move from the second FEN field, or *default* if absent."""
    parts = fen.split()
    if len(parts) < 2:
        return default
    return parse_color(parts[1])


def board_to_fen(board: Board) -> str:
    """Serialise the piece placement of *board*."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[Square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def parse_color(text: str) -> Color:
    """Parse ``w``/``b``/``white``/``black`` (case-insensitive)."""
    lowered = text.strip().lower()
    if lowered in ("w", "white"):
        return Color.WHITE
    if lowered in ("b", "black"):
        return Color.BLACK
    raise ValueError(f"Invalid color: {text!r}")


def parse_uci(text: str) -> Move:
    """Parse a UCI move such as ``e2e4``."""
    uci = text.strip()
    if len(uci) != 4:
        raise ValueError(f"Invalid UCI move: {text!r}")
    return Move(parse_square(uci[0:2]), parse_square(uci[2:4]))
