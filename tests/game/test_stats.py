"""Tests for derived session statistics."""

from __future__ import annotations

import pytest

from chessdss.core.enums import Side
from chessdss.game.clock import ClockState
from chessdss.game.stats import session_stats


class TestSessionStats:
    def test_before_first_move(self) -> None:
        stats = session_stats(ClockState(300_000, 300_000), now_ms=99_999)
        assert stats.total_plies == 0
        assert stats.total_match_time_ms == 0
        assert stats.white_avg_move_sec == 0.0
        assert stats.black_avg_move_sec == 0.0

    def test_ongoing_uses_now(self) -> None:
        clock = ClockState(
            300_000,
            297_000,
            match_started_at_ms=10_000,
            black_elapsed_ms=3_000,
            white_moves=1,
            black_moves=1,
        )
        stats = session_stats(clock, now_ms=25_000)
        assert stats.total_plies == 2
        assert stats.total_match_time_ms == 15_000
        assert stats.white_avg_move_sec == 0.0
        assert stats.avg_move_sec(Side.BLACK) == pytest.approx(3.0)

    def test_ended_uses_end_stamp(self) -> None:
        clock = ClockState(
            290_000,
            300_000,
            match_started_at_ms=1_000,
            ended_at_ms=8_000,
            white_elapsed_ms=10_000,
            white_moves=4,
        )
        stats = session_stats(clock, now_ms=1_000_000)
        assert stats.total_match_time_ms == 7_000
        assert stats.avg_move_sec(Side.WHITE) == pytest.approx(2.5)
