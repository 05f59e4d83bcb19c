"""Two-sided countdown clock with tick-based accounting."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from chessdss.core.enums import Side
from chessdss.game.interfaces import TICK_MS, ClockStatus, IClock, TimeSetting

TimeSource = Callable[[], int]  # wall-clock milliseconds


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True, slots=True)
class ClockState:
    """Immutable clock snapshot. The clock publishes a new one per change."""

    white_remaining_ms: int
    black_remaining_ms: int
    active_side: Side | None = None
    running: bool = False
    paused: bool = False
    match_started_at_ms: int | None = None
    ended_at_ms: int | None = None
    white_elapsed_ms: int = 0
    black_elapsed_ms: int = 0
    white_moves: int = 0
    black_moves: int = 0

    @classmethod
    def initial(cls, time_setting: TimeSetting) -> ClockState:
        return cls(
            white_remaining_ms=time_setting.initial_ms,
            black_remaining_ms=time_setting.initial_ms,
        )

    @property
    def status(self) -> ClockStatus:
        if self.running:
            return ClockStatus.RUNNING
        if self.paused:
            return ClockStatus.PAUSED
        if self.match_started_at_ms is not None or self.ended_at_ms is not None:
            return ClockStatus.STOPPED
        return ClockStatus.IDLE

    def remaining_ms(self, side: Side) -> int:
        return self.white_remaining_ms if side == Side.WHITE else self.black_remaining_ms

    def elapsed_ms(self, side: Side) -> int:
        return self.white_elapsed_ms if side == Side.WHITE else self.black_elapsed_ms


class Clock(IClock):
    """Dual chess clock driven by an external one-second tick.

    Every tick removes exactly ``TICK_MS`` from the active side and adds
    the same amount to its elapsed counter, so ``elapsed == base -
    remaining`` holds per side regardless of timer drift. Wall-clock time
    is only read to stamp the start and end of the match.
    """

    __slots__ = ("_time_setting", "_state", "_now")

    def __init__(
        self,
        time_setting: TimeSetting | None = None,
        *,
        time_source: TimeSource | None = None,
    ) -> None:
        self._time_setting = time_setting or TimeSetting()
        self._now = time_source or wall_clock_ms
        self._state = ClockState.initial(self._time_setting)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def status(self) -> ClockStatus:
        return self._state.status

    @property
    def time_setting(self) -> TimeSetting:
        return self._time_setting

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def active_side(self) -> Side | None:
        return self._state.active_side

    def now_ms(self) -> int:
        return self._now()

    # ── IClock implementation ────────────────────────────────────────────

    def hand_off(self, mover: Side) -> None:
        """Count the move for *mover* and start the opponent's time.

        The first hand-off of a match also stamps the start time. The whole
        transition is one state replacement, so a tick sees either the old
        active side or the new one, never a mix.
        """
        s = self._state
        if s.ended_at_ms is not None:
            return
        started = s.match_started_at_ms
        if started is None:
            started = self._now()
        if mover == Side.WHITE:
            moves = {"white_moves": s.white_moves + 1}
        else:
            moves = {"black_moves": s.black_moves + 1}
        self._state = replace(
            s,
            active_side=mover.opposite,
            running=True,
            paused=False,
            match_started_at_ms=started,
            **moves,
        )

    def tick(self) -> Side | None:
        s = self._state
        side = s.active_side
        if not s.running or side is None:
            return None

        if side == Side.WHITE:
            remaining = max(0, s.white_remaining_ms - TICK_MS)
            s = replace(
                s,
                white_remaining_ms=remaining,
                white_elapsed_ms=s.white_elapsed_ms + TICK_MS,
            )
        else:
            remaining = max(0, s.black_remaining_ms - TICK_MS)
            s = replace(
                s,
                black_remaining_ms=remaining,
                black_elapsed_ms=s.black_elapsed_ms + TICK_MS,
            )

        if remaining == 0:
            s = replace(s, running=False)
            self._state = s
            return side
        self._state = s
        return None

    def stop(self) -> None:
        s = self._state
        ended = s.ended_at_ms
        if ended is None and s.match_started_at_ms is not None:
            ended = self._now()
        self._state = replace(s, running=False, paused=False, ended_at_ms=ended)

    def pause(self) -> bool:
        """Suspend ticking. Returns True if the clock was running."""
        if not self._state.running:
            return False
        self._state = replace(self._state, running=False, paused=True)
        return True

    def resume(self) -> bool:
        """Resume after :meth:`pause`. Returns True if ticking restarted."""
        s = self._state
        if not s.paused or s.active_side is None or s.ended_at_ms is not None:
            return False
        self._state = replace(s, running=True, paused=False)
        return True

    def reset(self, time_setting: TimeSetting | None = None) -> None:
        if time_setting is not None:
            self._time_setting = time_setting
        self._state = ClockState.initial(self._time_setting)

    def set_time_setting(self, time_setting: TimeSetting) -> bool:
        """Apply a new base time. Only allowed while idle."""
        if self.status != ClockStatus.IDLE:
            return False
        self.reset(time_setting)
        return True

    def remaining_ms(self, side: Side) -> int:
        return self._state.remaining_ms(side)
