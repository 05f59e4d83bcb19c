"""Tests for the dual clock display and its tick timer."""

from __future__ import annotations

import pytest

from chessdss.core.enums import Side
from chessdss.game.clock import ClockState
from chessdss.game.interfaces import TICK_MS
from chessdss.ui.panels.clock_widget import ClockWidget, format_clock


@pytest.mark.parametrize(
    ("ms", "text"),
    [(300_000, "05:00"), (59_999, "00:59"), (61_000, "01:01"), (0, "00:00"), (-5, "00:00")],
)
def test_format_clock(ms: int, text: str) -> None:
    assert format_clock(ms) == text


class TestClockWidget:
    def test_idle_state(self) -> None:
        widget = ClockWidget()
        widget.show_state(ClockState(300_000, 300_000))
        assert widget.clock(Side.WHITE).text() == "05:00"
        assert widget.clock(Side.BLACK).text() == "05:00"
        assert not widget.clock(Side.WHITE).is_active
        assert not widget.is_ticking()

    def test_running_state_starts_timer(self) -> None:
        widget = ClockWidget()
        state = ClockState(
            300_000,
            299_000,
            active_side=Side.BLACK,
            running=True,
            match_started_at_ms=0,
        )
        widget.show_state(state)
        assert widget.is_ticking()
        assert widget._timer.interval() == TICK_MS
        assert widget.clock(Side.BLACK).is_active
        assert not widget.clock(Side.WHITE).is_active
        assert widget.clock(Side.BLACK).text() == "04:59"
        widget.stop()
        assert not widget.is_ticking()

    def test_ended_state_stops_timer_and_clears_active(self) -> None:
        widget = ClockWidget()
        widget.show_state(
            ClockState(300_000, 300_000, active_side=Side.WHITE, running=True)
        )
        widget.show_state(
            ClockState(
                300_000,
                0,
                active_side=Side.BLACK,
                match_started_at_ms=0,
                ended_at_ms=60_000,
            )
        )
        assert not widget.is_ticking()
        assert not widget.clock(Side.BLACK).is_active

    def test_paused_keeps_active_side(self) -> None:
        widget = ClockWidget()
        widget.show_state(
            ClockState(300_000, 300_000, active_side=Side.WHITE, paused=True)
        )
        assert not widget.is_ticking()
        assert widget.clock(Side.WHITE).is_active

    def test_tick_invokes_callback(self) -> None:
        widget = ClockWidget()
        calls: list[int] = []
        widget.set_tick_callback(lambda: calls.append(1))
        widget._tick()
        widget._tick()
        assert calls == [1, 1]
        widget.set_tick_callback(None)
        widget._tick()
        assert calls == [1, 1]
