"""Game-over classification."""

from __future__ import annotations

from dataclasses import dataclass

from chessdss.core.enums import OutcomeKind, Side
from chessdss.core.position import Position
from chessdss.core.rules import IRulesEngine


@dataclass(frozen=True, slots=True)
class GameOverOutcome:
    """Terminal result of a match. ``winner`` is ``None`` for draws."""

    kind: OutcomeKind
    winner: Side | None
    reason: str

    @classmethod
    def checkmate(cls, winner: Side) -> GameOverOutcome:
        return cls(OutcomeKind.CHECKMATE, winner, OutcomeKind.CHECKMATE.reason)

    @classmethod
    def stalemate(cls) -> GameOverOutcome:
        return cls(OutcomeKind.STALEMATE, None, OutcomeKind.STALEMATE.reason)

    @classmethod
    def draw(cls) -> GameOverOutcome:
        return cls(OutcomeKind.DRAW, None, OutcomeKind.DRAW.reason)

    @classmethod
    def timeout(cls, flagged: Side) -> GameOverOutcome:
        return cls(OutcomeKind.TIMEOUT, flagged.opposite, OutcomeKind.TIMEOUT.reason)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def classify(
    rules: IRulesEngine,
    position: Position,
    *,
    timed_out: Side | None = None,
) -> GameOverOutcome | None:
    """Derive the terminal outcome for *position*, if any.

    Board predicates win over a pending timeout: checkmate, then
    stalemate, then any other draw, and only then the flag fall. The
    checkmating side is the one that is not to move.
    """
    if rules.is_checkmate(position):
        return GameOverOutcome.checkmate(rules.side_to_move(position).opposite)
    if rules.is_stalemate(position):
        return GameOverOutcome.stalemate()
    if rules.is_draw(position):
        return GameOverOutcome.draw()
    if timed_out is not None:
        return GameOverOutcome.timeout(timed_out)
    return None
