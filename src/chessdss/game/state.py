"""MatchState — the single owner of mutable session state."""

from __future__ import annotations

from dataclasses import dataclass

from chessdss.core.enums import Side
from chessdss.core.position import Position
from chessdss.core.types import SquareName
from chessdss.game.clock import Clock, ClockState
from chessdss.game.outcome import GameOverOutcome


@dataclass(frozen=True, slots=True)
class SquareHighlights:
    """Selected square and its legal destinations, for the board renderer."""

    selected: SquareName | None = None
    destinations: frozenset[SquareName] = frozenset()

    @property
    def is_empty(self) -> bool:
        return self.selected is None and not self.destinations

    @property
    def squares(self) -> frozenset[SquareName]:
        """Every highlighted square, the selection included."""
        if self.selected is None:
            return self.destinations
        return self.destinations | {self.selected}


NO_HIGHLIGHTS = SquareHighlights()


class PositionStore:
    """Holds the authoritative position. Only the move applier replaces it."""

    __slots__ = ("_position",)

    def __init__(self, position: Position) -> None:
        self._position = position

    @property
    def position(self) -> Position:
        return self._position

    @property
    def side_to_move(self) -> Side:
        return self._position.side_to_move

    def replace(self, position: Position) -> None:
        self._position = position


@dataclass(frozen=True, slots=True)
class MatchSnapshot:
    """Comparable view of everything a reset must restore."""

    position: Position
    clock: ClockState
    outcome: GameOverOutcome | None
    highlights: SquareHighlights


class MatchState:
    """Position, clock, outcome and highlights of the current match.

    Owned by the :class:`~chessdss.game.controller.MatchController` and
    injected into the move applier; nothing else writes to it.
    """

    __slots__ = ("store", "clock", "_outcome", "highlights", "session_id")

    def __init__(self, position: Position, clock: Clock) -> None:
        self.store = PositionStore(position)
        self.clock = clock
        self._outcome: GameOverOutcome | None = None
        self.highlights: SquareHighlights = NO_HIGHLIGHTS
        self.session_id = 0

    @property
    def position(self) -> Position:
        return self.store.position

    @property
    def side_to_move(self) -> Side:
        return self.store.side_to_move

    @property
    def outcome(self) -> GameOverOutcome | None:
        return self._outcome

    @property
    def is_game_over(self) -> bool:
        return self._outcome is not None

    def record_outcome(self, outcome: GameOverOutcome) -> bool:
        """Set the outcome once. Later calls are ignored and return False."""
        if self._outcome is not None:
            return False
        self._outcome = outcome
        return True

    def reset(self, position: Position) -> None:
        """Start over on *position* with a full clock on the current setting."""
        self.store.replace(position)
        self.clock.reset()
        self._outcome = None
        self.highlights = NO_HIGHLIGHTS
        self.session_id += 1

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            position=self.store.position,
            clock=self.clock.state,
            outcome=self._outcome,
            highlights=self.highlights,
        )
