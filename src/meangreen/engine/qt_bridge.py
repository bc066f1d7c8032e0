"""Qt bridge to run move selection in a worker thread."""

from __future__ import annotations

import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from meangreen.core.board import Board
from meangreen.core.enums import Color, ValidationPolicy
from meangreen.core.move import Move
from meangreen.core.rules import Rules
from meangreen.engine.greedy_search import GreedySearchEngine
from meangreen.engine.search import SearchContext, SearchLimits
from meangreen.game.clock import TurnTimer


class EngineWorker(QObject):
    """Thread-affine worker that computes greedy moves on demand.

    The turn budget and :meth:`cancel` only decide whether a search starts.
    A search that has started always reports its move.
    """

    best_move_ready = pyqtSignal(int, object, int)
    search_no_move = pyqtSignal(int, bool)
    search_expired = pyqtSignal(int)
    search_error = pyqtSignal(int, str)
    log_message = pyqtSignal(str)

    __slots__ = ("_cancel_event", "_engine", "_limits", "_validation")

    def __init__(
        self,
        *,
        time_limit_ms: int | None = 5000,
        validation: ValidationPolicy = ValidationPolicy.STRICT,
    ) -> None:
        super().__init__()
        self._engine = GreedySearchEngine()
        self._limits = SearchLimits(time_limit_ms=time_limit_ms)
        self._validation = validation
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, color_value: int, request_id: int) -> None:
        """Select a move for *color_value* on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return
        try:
            color = Color(color_value)
        except ValueError:
            self.search_error.emit(request_id, f"Engine received invalid color {color_value}")
            return

        timer = TurnTimer.from_millis(self._limits.time_limit_ms)
        timer.start()
        context = SearchContext(
            is_turn_over=lambda: self._cancel_event.is_set() or timer.is_turn_over(),
            log=self.log_message.emit,
        )
        try:
            if context.turn_over():
                self.search_expired.emit(request_id)
                return

            try:
                result = self._engine.search(board_obj, color, context)
            except Exception as exc:
                self.search_error.emit(request_id, str(exc))
                return
        finally:
            timer.stop()
            self._cancel_event.clear()

        if not result.has_move:
            self.search_no_move.emit(request_id, result.in_check)
            return

        self.best_move_ready.emit(request_id, result.best_move, result.score)

    @pyqtSlot(object, object, int, result=bool)
    def validate_move(self, board_obj: object, move_obj: object, color_value: int) -> bool:
        """Validate an opponent move under the configured policy."""
        if not isinstance(board_obj, Board) or not isinstance(move_obj, Move):
            return False
        try:
            color = Color(color_value)
        except ValueError:
            return False
        return Rules.is_valid_move(board_obj, move_obj, color, self._validation)

    @pyqtSlot()
    def cancel(self) -> None:
        """Mark the current turn as over; a running search still reports."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_limits(self, time_limit_ms: int) -> None:
        """Update the turn budget (takes effect on the next request)."""
        self._limits = SearchLimits(time_limit_ms=time_limit_ms)
