"""MatchController — the central orchestrator of a match session.

Coordinates: MatchState, MoveApplier, Clock and the game-over classifier.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessdss.core.enums import Side
from chessdss.core.position import Position
from chessdss.core.rules import ChessRules, IRulesEngine
from chessdss.core.types import SquareName
from chessdss.game.clock import Clock, ClockState, TimeSource
from chessdss.game.interfaces import (
    ClockStatus,
    IMatchController,
    TimeSetting,
)
from chessdss.game.outcome import GameOverOutcome, classify
from chessdss.game.state import NO_HIGHLIGHTS, MatchState, SquareHighlights
from chessdss.game.stats import SessionStats, session_stats
from chessdss.game.validator import (
    AppliedMove,
    MoveApplier,
    MoveOutcome,
    MoveRejected,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[AppliedMove, MatchState], None]
RejectedCallback = Callable[[MoveRejected], None]
GameOverCallback = Callable[[GameOverOutcome], None]
ClockCallback = Callable[[ClockState], None]
ResetCallback = Callable[[int], None]  # new session id
HighlightsCallback = Callable[[SquareHighlights], None]


@dataclass
class MatchEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_clock_changed: list[ClockCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)
    on_highlights_changed: list[HighlightsCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RendererView:
    """Everything the board renderer needs to draw the match."""

    position: Position
    orientation: Side
    highlights: SquareHighlights
    interaction_enabled: bool


# ── Controller ───────────────────────────────────────────────────────────────


class MatchController(IMatchController):
    """Owns one match session: validates moves, drives the clock,
    classifies the outcome and notifies listeners.

    Thread-safety: every method is meant to run on the Qt main thread.
    The one-second tick and user input are serialised by the event loop,
    so no locking is needed.
    """

    __slots__ = ("_rules", "_applier", "_state", "events")

    def __init__(
        self,
        rules: IRulesEngine | None = None,
        time_setting: TimeSetting | None = None,
        *,
        time_source: TimeSource | None = None,
    ) -> None:
        self._rules = rules or ChessRules()
        self._applier = MoveApplier(self._rules)
        clock = Clock(time_setting, time_source=time_source)
        self._state = MatchState(self._rules.new_game(), clock)
        self.events = MatchEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def rules(self) -> IRulesEngine:
        return self._rules

    @property
    def position(self) -> Position:
        return self._state.position

    @property
    def side_to_move(self) -> Side:
        return self._state.side_to_move

    @property
    def outcome(self) -> GameOverOutcome | None:
        return self._state.outcome

    @property
    def is_game_over(self) -> bool:
        return self._state.is_game_over

    @property
    def session_id(self) -> int:
        return self._state.session_id

    @property
    def highlights(self) -> SquareHighlights:
        return self._state.highlights

    @property
    def clock_state(self) -> ClockState:
        return self._state.clock.state

    @property
    def clock_status(self) -> ClockStatus:
        return self._state.clock.status

    @property
    def time_setting(self) -> TimeSetting:
        return self._state.clock.time_setting

    def stats(self) -> SessionStats:
        clock = self._state.clock
        return session_stats(clock.state, clock.now_ms())

    def renderer_view(self) -> RendererView:
        return RendererView(
            position=self._state.position,
            orientation=self._state.side_to_move,
            highlights=self._state.highlights,
            interaction_enabled=not self._state.is_game_over,
        )

    # ── Moves ────────────────────────────────────────────────────────────

    def needs_promotion(self, from_sq: SquareName, to_sq: SquareName) -> bool:
        if self._state.is_game_over:
            return False
        return self._applier.needs_promotion(self._state.position, from_sq, to_sq)

    def attempt_move(
        self,
        from_sq: SquareName,
        to_sq: SquareName,
        piece_hint: object = None,
    ) -> MoveOutcome:
        result = self._applier.attempt_move(self._state, from_sq, to_sq, piece_hint)
        return self._after_attempt(result)

    def choose_promotion(
        self, piece: object, from_sq: SquareName, to_sq: SquareName
    ) -> MoveOutcome:
        result = self._applier.apply_promotion(self._state, piece, from_sq, to_sq)
        return self._after_attempt(result)

    # ── Clock ────────────────────────────────────────────────────────────

    def tick(self) -> bool:
        """Advance the clock by one second if the match is live.

        Returns True when a decrement happened.
        """
        clock = self._state.clock
        if (
            not clock.is_running
            or self._state.is_game_over
            or clock.active_side is None
        ):
            return False

        flagged = clock.tick()
        if flagged is not None:
            _LOGGER.info("%s ran out of time", flagged)
            outcome = classify(self._rules, self._state.position, timed_out=flagged)
            if outcome is not None:
                self._finish(outcome)
                return True
        self._emit_clock()
        return True

    def pause_clock(self) -> bool:
        if self._state.clock.pause():
            self._emit_clock()
            return True
        return False

    def resume_clock(self) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.clock.resume():
            self._emit_clock()
            return True
        return False

    def set_base_minutes(self, minutes: object) -> bool:
        """Change the per-side base time. Refused unless the clock is idle."""
        setting = TimeSetting.parse(minutes)
        if not self._state.clock.set_time_setting(setting):
            _LOGGER.debug("Ignoring time setting %r: clock not idle", setting)
            return False
        _LOGGER.debug("Time setting changed to %r", setting)
        self._emit_clock()
        return True

    # ── Session ──────────────────────────────────────────────────────────

    def play_again(self) -> None:
        """Reset position, outcome, clock and highlights in one step."""
        self._state.reset(self._rules.new_game())
        _LOGGER.info("New match started (session %d)", self._state.session_id)
        for cb in self.events.on_reset:
            cb(self._state.session_id)
        self._emit_clock()
        self._emit_highlights()

    def select_square(self, square: SquareName) -> SquareHighlights:
        """Highlight the legal destinations of the side-to-move piece on *square*."""
        if self._state.is_game_over:
            return self._state.highlights

        highlights = NO_HIGHLIGHTS
        position = self._state.position
        piece = self._rules.piece_at(position, square)
        if piece is not None and piece.side == self._state.side_to_move:
            destinations = self._rules.legal_destinations(position, square)
            if destinations:
                highlights = SquareHighlights(square, destinations)

        self._state.highlights = highlights
        self._emit_highlights()
        return highlights

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_attempt(self, result: MoveOutcome) -> MoveOutcome:
        if isinstance(result, MoveRejected):
            _LOGGER.debug("Move rejected: %s %s", result.reason, result.detail)
            for cb in self.events.on_rejected:
                cb(result)
            return result

        _LOGGER.debug(
            "%s played %s%s -> %s",
            result.mover,
            result.from_sq,
            result.to_sq,
            result.position.fen,
        )
        for cb in self.events.on_move:
            cb(result, self._state)
        self._emit_highlights()

        outcome = classify(self._rules, self._state.position)
        if outcome is not None:
            self._finish(outcome)
        else:
            self._emit_clock()
        return result

    def _finish(self, outcome: GameOverOutcome) -> None:
        self._state.clock.stop()
        if not self._state.record_outcome(outcome):
            return
        _LOGGER.info(
            "Game over: %s (winner: %s)", outcome.reason, outcome.winner or "none"
        )
        self._emit_clock()
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_clock(self) -> None:
        state = self._state.clock.state
        for cb in self.events.on_clock_changed:
            cb(state)

    def _emit_highlights(self) -> None:
        for cb in self.events.on_highlights_changed:
            cb(self._state.highlights)
