"""Shared engine search models, host context and protocol."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from meangreen.core.board import Board
    from meangreen.core.enums import Color
    from meangreen.core.move import Move

_LOGGER = logging.getLogger(__name__)

TurnOverCheck = Callable[[], bool]
LogSink = Callable[[str], None]


class IProfiler(Protocol):
    """Receives one tick per named operation."""

    def tick(self, key: str) -> None: ...


def _turn_never_over() -> bool:
    return False


def _log_to_logger(message: str) -> None:
    _LOGGER.debug(message)


@dataclass(slots=True)
class DecisionNode:
    """One node of the decision tree reported to the host."""

    board: Board
    move: Move | None = None
    value: int = 0
    score: int = 0
    safe: bool | None = None
    selected: bool = False
    children: list[DecisionNode] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class SearchContext:
    """Host collaborators handed to a single move computation.

    Every sink is fire-and-forget: a failing sink is reported through the
    module logger and never interrupts the search.
    """

    is_turn_over: TurnOverCheck = _turn_never_over
    log: LogSink = _log_to_logger
    profiler: IProfiler | None = None
    set_decision_tree: Callable[[DecisionNode], None] | None = None

    def emit(self, message: str) -> None:
        try:
            self.log(message)
        except Exception:
            _LOGGER.warning("Log sink failed for message %r", message, exc_info=True)

    def tick(self, key: str) -> None:
        if self.profiler is None:
            return
        try:
            self.profiler.tick(key)
        except Exception:
            _LOGGER.warning("Profiler failed for key %r", key, exc_info=True)

    def publish_tree(self, root: DecisionNode) -> None:
        if self.set_decision_tree is None:
            return
        try:
            self.set_decision_tree(root)
        except Exception:
            _LOGGER.warning("Decision tree sink failed", exc_info=True)

    def turn_over(self) -> bool:
        """Poll the host's turn-expiry query; a failing query means expired."""
        try:
            return bool(self.is_turn_over())
        except Exception:
            _LOGGER.warning("Turn-expiry query failed", exc_info=True)
            return True


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Turn budget for a single move computation."""

    time_limit_ms: int | None = 5000


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``best_move`` is the terminal sentinel when no safe move exists.
    ``score`` is the material balance after the move, from the mover's side.
    ``king_missing`` is set when the side to move has no king, in which case
    no candidate could be filtered for self-check.
    """

    best_move: Move
    score: int
    candidates: int
    rejected: int
    nodes: int
    in_check: bool = False
    king_missing: bool = False

    @property
    def has_move(self) -> bool:
        return not self.best_move.is_terminal


class IEngine(Protocol):
    """Protocol for move-selection engines used by the game layer."""

    def search(
        self,
        board: Board,
        color: Color,
        context: SearchContext | None = None,
    ) -> SearchResult: ...
