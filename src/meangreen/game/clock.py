"""Turn timer answering the host's "is my turn over?" query."""

from __future__ import annotations

import time

from meangreen.game.interfaces import ITurnTimer


class TurnTimer(ITurnTimer):
    """Monotonic countdown for a single turn.

    A budget of ``None`` never expires.
    """

    __slots__ = ("_budget", "_started_at", "_running")

    def __init__(self, budget_seconds: float | None) -> None:
        self._budget = budget_seconds
        self._started_at: float = 0.0
        self._running: bool = False

    @classmethod
    def from_millis(cls, time_limit_ms: int | None) -> TurnTimer:
        if time_limit_ms is None:
            return cls(None)
        return cls(max(time_limit_ms, 0) / 1000.0)

    # ── ITurnTimer implementation ────────────────────────────────────────

    def start(self) -> None:
        self._started_at = time.monotonic()
        self._running = True

    def stop(self) -> None:
        self._running = False

    def is_turn_over(self) -> bool:
        if self._budget is None:
            return False
        return self.remaining() <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_unlimited(self) -> bool:
        return self._budget is None

    def elapsed(self) -> float:
        if not self._running:
            return 0.0
        return time.monotonic() - self._started_at

    def remaining(self) -> float:
        if self._budget is None:
            return float("inf")
        return max(0.0, self._budget - self.elapsed())
