"""Abstract interfaces for the match layer.

Follows Dependency Inversion: the MatchController depends on these ABCs
and on :class:`~chessdss.core.rules.IRulesEngine`, not on concrete
implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, StrEnum, auto
from typing import TYPE_CHECKING

from chessdss.core.enums import Side

if TYPE_CHECKING:
    from chessdss.core.types import SquareName
    from chessdss.game.clock import ClockState
    from chessdss.game.state import SquareHighlights
    from chessdss.game.validator import MoveOutcome

DEFAULT_BASE_MINUTES = 5
TIME_PRESETS: tuple[int, ...] = (5, 10, 20)
TICK_MS = 1000


# ── Clock FSM states ─────────────────────────────────────────────────────────


class ClockStatus(IntEnum):
    """Finite-state-machine states of the match clock."""

    IDLE = auto()  # before the first move, nothing recorded
    RUNNING = auto()
    PAUSED = auto()
    STOPPED = auto()  # terminal outcome or flag fall


class RejectReason(StrEnum):
    """Why a move attempt was refused."""

    GAME_OVER = "game_over"
    ILLEGAL_MOVE = "illegal_move"
    INVALID_PROMOTION = "invalid_promotion"


# ── Time setting ─────────────────────────────────────────────────────────────


class TimeSetting:
    """Immutable per-side base time, in whole minutes.

    Args:
        base_minutes: Starting time per side. Must be a positive integer.
    """

    __slots__ = ("base_minutes",)

    def __init__(self, base_minutes: int = DEFAULT_BASE_MINUTES) -> None:
        if isinstance(base_minutes, bool) or not isinstance(base_minutes, int):
            raise TypeError(f"base_minutes must be an int, got {base_minutes!r}")
        if base_minutes <= 0:
            raise ValueError(f"base_minutes must be positive, got {base_minutes}")
        self.base_minutes = base_minutes

    @classmethod
    def parse(cls, value: object) -> TimeSetting:
        """Coerce user input; anything not a positive number gives the default."""
        try:
            minutes = int(float(value))  # type: ignore[arg-type]
        except (TypeError, ValueError, OverflowError):
            return cls(DEFAULT_BASE_MINUTES)
        if minutes <= 0:
            return cls(DEFAULT_BASE_MINUTES)
        return cls(minutes)

    # Presets offered by the time selector
    @classmethod
    def blitz_5m(cls) -> TimeSetting:
        return cls(5)

    @classmethod
    def rapid_10m(cls) -> TimeSetting:
        return cls(10)

    @classmethod
    def rapid_20m(cls) -> TimeSetting:
        return cls(20)

    @property
    def initial_ms(self) -> int:
        return self.base_minutes * 60 * 1000

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSetting):
            return NotImplemented
        return self.base_minutes == other.base_minutes

    def __hash__(self) -> int:
        return hash(self.base_minutes)

    def __repr__(self) -> str:
        return f"TimeSetting({self.base_minutes}m)"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IClock(ABC):
    """Interface for the two-sided match clock."""

    @abstractmethod
    def hand_off(self, mover: Side) -> None:
        """Record a completed move by *mover* and start the other side."""

    @abstractmethod
    def tick(self) -> Side | None:
        """Advance one second. Returns the side whose flag fell, if any."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the clock for good (terminal outcome)."""

    @abstractmethod
    def reset(self, time_setting: TimeSetting | None = None) -> None:
        """Return to idle with full time on both sides."""

    @abstractmethod
    def remaining_ms(self, side: Side) -> int:
        """Milliseconds remaining for *side*."""


class IMatchController(ABC):
    """Interface for the match session orchestrator."""

    @abstractmethod
    def attempt_move(
        self,
        from_sq: SquareName,
        to_sq: SquareName,
        piece_hint: object = None,
    ) -> MoveOutcome:
        """Submit a move attempt from the board renderer."""

    @abstractmethod
    def choose_promotion(
        self, piece: object, from_sq: SquareName, to_sq: SquareName
    ) -> MoveOutcome:
        """Submit a promotion chosen in the promotion dialog."""

    @abstractmethod
    def tick(self) -> bool:
        """One-second timer entry point."""

    @abstractmethod
    def play_again(self) -> None:
        """Reset everything for a fresh match."""

    @abstractmethod
    def set_base_minutes(self, minutes: object) -> bool:
        """Change the time setting. Returns True if applied."""

    @abstractmethod
    def select_square(self, square: SquareName) -> SquareHighlights:
        """Compute highlight hints for a clicked square."""

    @property
    @abstractmethod
    def clock_state(self) -> ClockState: ...
