"""Tests for the two-sided countdown clock."""

from __future__ import annotations

import pytest

from chessdss.core.enums import Side
from chessdss.game.clock import Clock, ClockState
from chessdss.game.interfaces import TICK_MS, ClockStatus, TimeSetting


@pytest.fixture
def clock(fake_now) -> Clock:
    return Clock(TimeSetting(1), time_source=fake_now)


class TestTimeSetting:
    def test_defaults(self) -> None:
        assert TimeSetting().base_minutes == 5
        assert TimeSetting(10).initial_ms == 600_000

    @pytest.mark.parametrize("bad", [0, -3])
    def test_rejects_non_positive(self, bad: int) -> None:
        with pytest.raises(ValueError):
            TimeSetting(bad)

    @pytest.mark.parametrize("bad", ["5", 2.5, True, None])
    def test_rejects_non_int(self, bad: object) -> None:
        with pytest.raises(TypeError):
            TimeSetting(bad)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(10, 10), ("20", 20), ("7.9", 7), (0, 5), (-1, 5), ("abc", 5), (None, 5)],
    )
    def test_parse(self, raw: object, expected: int) -> None:
        assert TimeSetting.parse(raw) == TimeSetting(expected)

    def test_presets(self) -> None:
        assert TimeSetting.blitz_5m().base_minutes == 5
        assert TimeSetting.rapid_10m().base_minutes == 10
        assert TimeSetting.rapid_20m().base_minutes == 20


class TestClock:
    def test_initial_state(self, clock: Clock) -> None:
        assert clock.state == ClockState(60_000, 60_000)
        assert clock.status == ClockStatus.IDLE
        assert clock.tick() is None

    def test_hand_off_starts_opponent(self, clock: Clock, fake_now) -> None:
        clock.hand_off(Side.WHITE)
        s = clock.state
        assert s.active_side == Side.BLACK
        assert s.running
        assert s.white_moves == 1
        assert s.match_started_at_ms == fake_now.ms
        assert clock.status == ClockStatus.RUNNING

    def test_start_time_stamped_once(self, clock: Clock, fake_now) -> None:
        clock.hand_off(Side.WHITE)
        started = clock.state.match_started_at_ms
        fake_now.advance(5_000)
        clock.hand_off(Side.BLACK)
        assert clock.state.match_started_at_ms == started
        assert clock.state.active_side == Side.WHITE

    def test_tick_charges_active_side(self, clock: Clock) -> None:
        clock.hand_off(Side.WHITE)
        clock.tick()
        clock.tick()
        s = clock.state
        assert s.black_remaining_ms == 60_000 - 2 * TICK_MS
        assert s.black_elapsed_ms == 2 * TICK_MS
        assert s.white_remaining_ms == 60_000
        assert s.white_elapsed_ms == 0

    def test_elapsed_plus_remaining_is_base(self, clock: Clock) -> None:
        clock.hand_off(Side.WHITE)
        for _ in range(7):
            clock.tick()
        clock.hand_off(Side.BLACK)
        for _ in range(3):
            clock.tick()
        s = clock.state
        for side in Side:
            assert s.remaining_ms(side) + s.elapsed_ms(side) == 60_000

    def test_flag_fall(self, clock: Clock) -> None:
        clock.hand_off(Side.WHITE)
        flagged = [clock.tick() for _ in range(60)]
        assert flagged[:-1] == [None] * 59
        assert flagged[-1] == Side.BLACK
        assert clock.remaining_ms(Side.BLACK) == 0
        assert not clock.is_running
        assert clock.tick() is None

    def test_stop_is_terminal(self, clock: Clock, fake_now) -> None:
        clock.hand_off(Side.WHITE)
        fake_now.advance(2_500)
        clock.stop()
        ended = clock.state.ended_at_ms
        assert ended == fake_now.ms
        assert clock.status == ClockStatus.STOPPED

        clock.hand_off(Side.BLACK)
        fake_now.advance(1_000)
        clock.stop()
        assert clock.state.ended_at_ms == ended
        assert not clock.is_running

    def test_pause_and_resume(self, clock: Clock) -> None:
        assert not clock.pause()
        clock.hand_off(Side.WHITE)
        assert clock.pause()
        assert clock.status == ClockStatus.PAUSED
        assert clock.tick() is None
        assert clock.remaining_ms(Side.BLACK) == 60_000
        assert clock.resume()
        assert clock.status == ClockStatus.RUNNING
        assert not clock.resume()

    def test_resume_after_stop_refused(self, clock: Clock) -> None:
        clock.hand_off(Side.WHITE)
        clock.pause()
        clock.stop()
        assert not clock.resume()

    def test_set_time_setting_only_when_idle(self, clock: Clock) -> None:
        assert clock.set_time_setting(TimeSetting(10))
        assert clock.remaining_ms(Side.WHITE) == 600_000

        clock.hand_off(Side.WHITE)
        assert not clock.set_time_setting(TimeSetting(20))
        assert clock.time_setting == TimeSetting(10)

    def test_reset(self, clock: Clock) -> None:
        clock.hand_off(Side.WHITE)
        clock.tick()
        clock.reset()
        assert clock.state == ClockState.initial(TimeSetting(1))
        clock.reset(TimeSetting(20))
        assert clock.state.white_remaining_ms == 1_200_000
