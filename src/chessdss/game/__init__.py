"""Match layer — the state machine behind the board.

Quick start::

    from chessdss.game import MatchController, TimeSetting

    ctrl = MatchController(time_setting=TimeSetting.blitz_5m())
    ctrl.attempt_move("e2", "e4")
    ctrl.tick()  # called once per second by the UI timer
"""

from chessdss.game.clock import Clock, ClockState
from chessdss.game.controller import MatchController, MatchEvents, RendererView
from chessdss.game.interfaces import (
    DEFAULT_BASE_MINUTES,
    TICK_MS,
    TIME_PRESETS,
    ClockStatus,
    IClock,
    IMatchController,
    RejectReason,
    TimeSetting,
)
from chessdss.game.outcome import GameOverOutcome, classify
from chessdss.game.state import MatchSnapshot, MatchState, SquareHighlights
from chessdss.game.stats import SessionStats, session_stats
from chessdss.game.validator import (
    AppliedMove,
    MoveApplier,
    MoveOutcome,
    MoveRejected,
    is_promotion_move,
    parse_promotion,
)

__all__ = [
    # Interfaces
    "ClockStatus",
    "DEFAULT_BASE_MINUTES",
    "IClock",
    "IMatchController",
    "RejectReason",
    "TICK_MS",
    "TIME_PRESETS",
    "TimeSetting",
    # Concrete
    "AppliedMove",
    "Clock",
    "ClockState",
    "GameOverOutcome",
    "MatchController",
    "MatchEvents",
    "MatchSnapshot",
    "MatchState",
    "MoveApplier",
    "MoveOutcome",
    "MoveRejected",
    "RendererView",
    "SessionStats",
    "SquareHighlights",
    "classify",
    "is_promotion_move",
    "parse_promotion",
    "session_stats",
]
