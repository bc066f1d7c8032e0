"""Host-facing greedy agent."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Callable

from meangreen.core.enums import Color, ValidationPolicy
from meangreen.core.rules import Rules
from meangreen.engine.greedy_search import GreedySearchEngine
from meangreen.engine.search import (
    IEngine,
    IProfiler,
    LogSink,
    SearchContext,
    SearchLimits,
    SearchResult,
    TurnOverCheck,
)
from meangreen.game.clock import TurnTimer
from meangreen.game.interfaces import IPlayer

if TYPE_CHECKING:
    from meangreen.core.board import Board
    from meangreen.core.move import Move
    from meangreen.engine.search import DecisionNode

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAME = "Mean Green Chess Machine"


class GreedyAIPlayer(IPlayer):
    """Agent that answers the host with greedy, king-safe moves.

    Host collaborators are passed in explicitly and bundled into a
    :class:`SearchContext` per turn.

    Args:
        color: Side the agent plays.
        name: Display name.
        limits: Turn budget used when the host supplies no expiry query.
        validation: Policy for :meth:`is_valid_move`.
        is_turn_over: Host turn-expiry query; replaces the built-in timer.
        log: Host diagnostic sink.
        profiler: Host profiling sink.
        set_decision_tree: Host decision-tree sink.
        engine: Move selector, mostly for tests.
    """

    __slots__ = (
        "_color",
        "_name",
        "_limits",
        "_validation",
        "_is_turn_over",
        "_log",
        "_profiler",
        "_set_decision_tree",
        "_engine",
        "_last_result",
    )

    def __init__(
        self,
        color: Color,
        name: str = DEFAULT_NAME,
        *,
        limits: SearchLimits | None = None,
        validation: ValidationPolicy = ValidationPolicy.STRICT,
        is_turn_over: TurnOverCheck | None = None,
        log: LogSink | None = None,
        profiler: IProfiler | None = None,
        set_decision_tree: Callable[[DecisionNode], None] | None = None,
        engine: IEngine | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._limits = limits or SearchLimits()
        self._validation = validation
        self._is_turn_over = is_turn_over
        self._log = log
        self._profiler = profiler
        self._set_decision_tree = set_decision_tree
        self._engine: IEngine = engine or GreedySearchEngine()
        self._last_result: SearchResult | None = None

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def last_result(self) -> SearchResult | None:
        """Search result behind the most recent move, if any."""
        return self._last_result

    def get_next_move(self, board: Board) -> Move | None:
        """Compute a move unless the turn is already over.

        The expiry query is polled once, before the search; a computed move
        is always returned.
        """
        timer: TurnTimer | None = None
        if self._is_turn_over is None:
            timer = TurnTimer.from_millis(self._limits.time_limit_ms)
            timer.start()
        context = self._make_context(timer)

        try:
            if context.turn_over():
                context.emit(f"{self._color} ({self._name}) ran out of time before moving")
                return None

            result = self._engine.search(board, self._color, context)
        finally:
            if timer is not None:
                timer.stop()

        self._last_result = result
        move = result.best_move
        if not move.is_terminal and not Rules.is_valid_move(board, move, self._color):
            context.emit(f"Greedy search generated an illegal move: {move}")
            _LOGGER.error("Greedy search generated an illegal move: %s", move)

        context.emit(f"{self._color} ({self._name}) just moved.")
        return move

    def is_valid_move(self, board_before: Board, move: Move, color: Color) -> bool:
        return Rules.is_valid_move(board_before, move, color, self._validation)

    def _make_context(self, timer: TurnTimer | None) -> SearchContext:
        context = SearchContext(
            profiler=self._profiler,
            set_decision_tree=self._set_decision_tree,
        )
        if self._log is not None:
            context = replace(context, log=self._log)
        if self._is_turn_over is not None:
            context = replace(context, is_turn_over=self._is_turn_over)
        elif timer is not None:
            context = replace(context, is_turn_over=timer.is_turn_over)
        return context
