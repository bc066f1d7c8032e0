"""Tests for Rules: self-check detection and move validation."""

import logging

import pytest

from meangreen import validate_move
from meangreen.core.board import Board
from meangreen.core.enums import Color, ValidationPolicy
from meangreen.core.move import Move
from meangreen.core.notation import board_from_fen
from meangreen.core.rules import Rules
from meangreen.core.types import Square, parse_square


def mv(uci: str) -> Move:
    return Move(parse_square(uci[:2]), parse_square(uci[2:]))


FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"
PINNED_KNIGHT = "4r2k/8/8/8/3q4/1n6/P3N3/4K3"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(Board.initial(), Color.WHITE)
        assert not Rules.is_in_check(Board.initial(), Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        assert Rules.is_in_check(board_from_fen(FOOLS_MATE), Color.WHITE)

    def test_kingless_side_is_never_in_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R7")
        assert not Rules.is_in_check(board, Color.WHITE)


class TestResultsInCheck:
    def test_moving_pinned_piece_exposes_king(self) -> None:
        board = board_from_fen(PINNED_KNIGHT)
        assert Rules.results_in_check(board, mv("e2d4"), Color.WHITE)

    def test_unrelated_move_is_safe(self) -> None:
        board = board_from_fen(PINNED_KNIGHT)
        assert not Rules.results_in_check(board, mv("a2b3"), Color.WHITE)

    def test_king_cannot_step_onto_rook_file(self) -> None:
        board = board_from_fen("3r3k/8/8/8/8/8/8/4K3")
        assert Rules.results_in_check(board, mv("e1d1"), Color.WHITE)
        assert Rules.results_in_check(board, mv("e1d2"), Color.WHITE)
        assert not Rules.results_in_check(board, mv("e1f1"), Color.WHITE)

    def test_pawns_threaten_diagonally_only(self) -> None:
        board = board_from_fen("7k/8/3p4/8/4K3/8/8/8")
        assert Rules.results_in_check(board, mv("e4e5"), Color.WHITE)
        assert not Rules.results_in_check(board, mv("e4d5"), Color.WHITE)

    def test_capturing_the_checker_is_safe(self) -> None:
        board = board_from_fen("7k/8/8/8/8/8/4r3/4K3")
        assert not Rules.results_in_check(board, mv("e1e2"), Color.WHITE)

    def test_black_mover(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/3R3K")
        assert Rules.results_in_check(board, mv("e8d8"), Color.BLACK)
        assert not Rules.results_in_check(board, mv("e8f8"), Color.BLACK)

    def test_missing_king_is_logged_and_safe(self, caplog: pytest.LogCaptureFixture) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/R7")
        with caplog.at_level(logging.WARNING, logger="meangreen.core.rules"):
            assert not Rules.results_in_check(board, mv("a1a2"), Color.WHITE)
        assert "No WHITE king" in caplog.text

    def test_board_is_not_mutated(self) -> None:
        board = board_from_fen(PINNED_KNIGHT)
        snapshot = board_from_fen(PINNED_KNIGHT)
        Rules.results_in_check(board, mv("e2d4"), Color.WHITE)
        assert board == snapshot


class TestLegalMoves:
    def test_fools_mate_has_no_legal_moves(self) -> None:
        assert Rules.legal_moves(board_from_fen(FOOLS_MATE), Color.WHITE) == []

    def test_stalemate_has_no_legal_moves(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        assert not Rules.is_in_check(board, Color.BLACK)
        assert Rules.legal_moves(board, Color.BLACK) == []

    def test_pinned_piece_filtered(self) -> None:
        legal = Rules.legal_moves(board_from_fen(PINNED_KNIGHT), Color.WHITE)
        assert all(move.from_sq != parse_square("e2") for move in legal)
        assert mv("a2b3") in legal


class TestIsValidMove:
    def test_accepts_generated_move(self) -> None:
        assert Rules.is_valid_move(Board.initial(), mv("e2e4"), Color.WHITE)
        assert Rules.is_valid_move(Board.initial(), mv("g8f6"), Color.BLACK)

    def test_rejects_unreachable_destination(self) -> None:
        assert not Rules.is_valid_move(Board.initial(), mv("e2e5"), Color.WHITE)

    def test_rejects_wrong_color(self) -> None:
        assert not Rules.is_valid_move(Board.initial(), mv("e7e5"), Color.WHITE)

    def test_rejects_empty_origin(self) -> None:
        assert not Rules.is_valid_move(Board.initial(), mv("e4e5"), Color.WHITE)

    def test_rejects_off_board(self) -> None:
        move = Move(Square(4, 1), Square(4, 8))
        assert not Rules.is_valid_move(Board.initial(), move, Color.WHITE)

    def test_rejects_self_check(self) -> None:
        board = board_from_fen(PINNED_KNIGHT)
        assert not Rules.is_valid_move(board, mv("e2d4"), Color.WHITE)

    def test_permissive_accepts_anything(self) -> None:
        assert Rules.is_valid_move(
            Board.initial(), mv("e2e5"), Color.WHITE, ValidationPolicy.PERMISSIVE
        )

    @pytest.mark.parametrize("policy", list(ValidationPolicy))
    def test_missing_board_raises(self, policy: ValidationPolicy) -> None:
        with pytest.raises(ValueError):
            Rules.is_valid_move(None, mv("e2e4"), Color.WHITE, policy)  # type: ignore[arg-type]

    @pytest.mark.parametrize("policy", list(ValidationPolicy))
    def test_missing_color_raises(self, policy: ValidationPolicy) -> None:
        with pytest.raises(ValueError):
            Rules.is_valid_move(
                Board.initial(), mv("e2e4"), None, policy  # type: ignore[arg-type]
            )

    def test_package_shortcut_rejects_missing_board(self) -> None:
        with pytest.raises(ValueError):
            validate_move(None, mv("e2e4"), Color.WHITE)  # type: ignore[arg-type]
