"""Tests for Board."""

import pytest

from meangreen.core.board import Board, KingNotFoundError
from meangreen.core.enums import Color, PieceType
from meangreen.core.move import Move
from meangreen.core.piece import Piece
from meangreen.core.types import Square, parse_square

E1 = parse_square("e1")
E2 = parse_square("e2")
E4 = parse_square("e4")
E8 = parse_square("e8")


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for file, pt in enumerate(expected):
            assert board[Square(file, 0)] == Piece(Color.WHITE, pt), f"Mismatch at file {file}"

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        for file in range(8):
            assert board[Square(file, 1)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[Square(file, 6)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board[Square(file, rank)] is None

    def test_pieces_in_scan_order(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE)
        assert len(white) == 16
        assert white[0] == Square(0, 0)
        assert white[-1] == Square(7, 1)
        assert list(white) == sorted(white, key=lambda sq: (sq.rank, sq.file))


class TestBoardQueries:
    def test_color_at(self) -> None:
        board = Board.initial()
        assert board.color_at(E2) == Color.WHITE
        assert board.color_at(E8) == Color.BLACK
        assert board.color_at(E4) is None

    def test_is_enemy(self) -> None:
        board = Board.initial()
        assert board.is_enemy(E8, Color.WHITE)
        assert not board.is_enemy(E2, Color.WHITE)
        assert not board.is_enemy(E4, Color.WHITE)

    def test_off_board_lookup_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(IndexError):
            _ = board[Square(8, 0)]
        with pytest.raises(IndexError):
            _ = board[Square(0, -1)]

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_missing_king(self) -> None:
        board = Board.from_pieces({E2: Piece(Color.WHITE, PieceType.ROOK)})
        assert board.find_king(Color.WHITE) is None
        with pytest.raises(KingNotFoundError):
            board.king_square(Color.WHITE)

    def test_wrong_square_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 10)


class TestBoardImmutability:
    def test_apply_move_returns_new_board(self) -> None:
        board = Board.initial()
        after = board.apply_move(Move(E2, E4))

        assert after is not board
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E4] is None
        assert after[E2] is None
        assert after[E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_apply_move_captures(self) -> None:
        board = Board.from_pieces(
            {
                E1: Piece(Color.WHITE, PieceType.ROOK),
                E8: Piece(Color.BLACK, PieceType.QUEEN),
            }
        )
        after = board.apply_move(Move(E1, E8))
        assert after[E8] == Piece(Color.WHITE, PieceType.ROOK)
        assert after.pieces(Color.BLACK) == ()

    def test_apply_move_updates_king_index(self) -> None:
        board = Board.initial().apply_move(Move(E2, E4)).apply_move(Move(E1, E2))
        assert board.king_square(Color.WHITE) == E2

    def test_apply_move_from_empty_square_raises(self) -> None:
        with pytest.raises(ValueError):
            Board.initial().apply_move(Move(E4, parse_square("e5")))

    def test_with_piece(self) -> None:
        board = Board.empty()
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        after = board.with_piece(E4, knight)
        assert after[E4] == knight
        assert board.is_empty(E4)

    def test_equality_and_hash(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())
        assert Board.initial() != Board.empty()

    def test_repr_diagram(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  a b c d e f g h"
