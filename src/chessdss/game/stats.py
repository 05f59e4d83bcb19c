"""Derived session statistics."""

from __future__ import annotations

from dataclasses import dataclass

from chessdss.core.enums import Side
from chessdss.game.clock import ClockState


@dataclass(frozen=True, slots=True)
class SessionStats:
    """Per-match performance figures shown in the analysis panel."""

    total_plies: int
    total_match_time_ms: int
    white_avg_move_sec: float
    black_avg_move_sec: float

    def avg_move_sec(self, side: Side) -> float:
        return self.white_avg_move_sec if side == Side.WHITE else self.black_avg_move_sec


def _avg_move_sec(elapsed_ms: int, moves: int) -> float:
    if moves <= 0:
        return 0.0
    return elapsed_ms / 1000 / moves


def session_stats(clock: ClockState, now_ms: int) -> SessionStats:
    """Compute stats from a clock snapshot.

    Total match time is wall-clock: from the first move to the end of the
    match, or to *now_ms* while the match is still going.
    """
    if clock.match_started_at_ms is None:
        total_ms = 0
    else:
        end = clock.ended_at_ms if clock.ended_at_ms is not None else now_ms
        total_ms = max(0, end - clock.match_started_at_ms)

    return SessionStats(
        total_plies=clock.white_moves + clock.black_moves,
        total_match_time_ms=total_ms,
        white_avg_move_sec=_avg_move_sec(clock.white_elapsed_ms, clock.white_moves),
        black_avg_move_sec=_avg_move_sec(clock.black_elapsed_ms, clock.black_moves),
    )
