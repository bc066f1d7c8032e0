"""Tests for TurnTimer."""

import math
import time

from meangreen.game.clock import TurnTimer


class TestTurnTimerBasics:
    def test_not_running_initially(self) -> None:
        timer = TurnTimer(5.0)
        assert not timer.is_running
        assert timer.elapsed() == 0.0

    def test_start_sets_running(self) -> None:
        timer = TurnTimer(5.0)
        timer.start()
        assert timer.is_running

    def test_stop_pauses(self) -> None:
        timer = TurnTimer(5.0)
        timer.start()
        timer.stop()
        assert not timer.is_running

    def test_time_decreases(self) -> None:
        timer = TurnTimer(5.0)
        timer.start()
        time.sleep(0.02)
        assert timer.elapsed() > 0.0
        assert timer.remaining() < 5.0
        assert not timer.is_turn_over()


class TestTurnTimerExpiry:
    def test_zero_budget_is_over_immediately(self) -> None:
        timer = TurnTimer.from_millis(0)
        timer.start()
        assert timer.is_turn_over()

    def test_negative_budget_clamped(self) -> None:
        timer = TurnTimer.from_millis(-50)
        timer.start()
        assert timer.remaining() == 0.0
        assert timer.is_turn_over()

    def test_short_budget_expires(self) -> None:
        timer = TurnTimer.from_millis(10)
        timer.start()
        time.sleep(0.03)
        assert timer.is_turn_over()

    def test_unlimited_never_expires(self) -> None:
        timer = TurnTimer.from_millis(None)
        timer.start()
        assert timer.is_unlimited
        assert math.isinf(timer.remaining())
        assert not timer.is_turn_over()
