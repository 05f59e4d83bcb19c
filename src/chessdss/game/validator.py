"""Move validation and application against the rules-engine oracle."""

from __future__ import annotations

from dataclasses import dataclass

from chessdss.core.enums import PROMOTION_KINDS, PieceKind, Side
from chessdss.core.position import Position
from chessdss.core.rules import Applied, IRulesEngine, PieceInfo
from chessdss.core.types import SquareName, file_index, is_valid_square, rank_number
from chessdss.game.interfaces import RejectReason
from chessdss.game.state import NO_HIGHLIGHTS, MatchState

_PROMOTION_NAMES: dict[str, PieceKind] = {
    "queen": PieceKind.QUEEN,
    "rook": PieceKind.ROOK,
    "bishop": PieceKind.BISHOP,
    "knight": PieceKind.KNIGHT,
}


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """A move the rules engine accepted."""

    from_sq: SquareName
    to_sq: SquareName
    promotion: PieceKind | None
    position: Position
    mover: Side

    @property
    def next_side(self) -> Side:
        return self.mover.opposite


@dataclass(frozen=True, slots=True)
class MoveRejected:
    """A refused move attempt. State is untouched."""

    reason: RejectReason
    detail: str = ""


MoveOutcome = AppliedMove | MoveRejected


def is_promotion_move(
    piece: PieceInfo | None, from_sq: SquareName, to_sq: SquareName
) -> bool:
    """A pawn reaching its last rank, at most one file sideways."""
    if piece is None or piece.kind != PieceKind.PAWN:
        return False
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return False
    last_rank = 8 if piece.side == Side.WHITE else 1
    if rank_number(to_sq) != last_rank:
        return False
    return abs(file_index(from_sq) - file_index(to_sq)) <= 1


def parse_promotion(hint: object) -> PieceKind | None:
    """Normalise a promotion hint.

    Accepts a :class:`PieceKind`, a symbol (``"q"``), a renderer code
    (``"wQ"``) or a name (``"queen"``). ``None``, empty strings and pawn
    codes (the renderer's description of the dragged piece) mean "not
    supplied". Raises ``ValueError`` for anything else.
    """
    if hint is None:
        return None
    if isinstance(hint, PieceKind):
        kind = hint
    elif isinstance(hint, str):
        text = hint.strip()
        if not text:
            return None
        lowered = text.lower()
        if lowered in _PROMOTION_NAMES:
            return _PROMOTION_NAMES[lowered]
        if len(text) == 2 and text[0] in "wb":
            text = text[1]
        if len(text) != 1:
            raise ValueError(f"Invalid promotion piece: {hint!r}")
        kind = PieceKind.from_symbol(text)
    else:
        raise ValueError(f"Invalid promotion piece: {hint!r}")

    if kind == PieceKind.PAWN:
        return None
    if kind not in PROMOTION_KINDS:
        raise ValueError(f"Cannot promote to {kind.name.lower()}")
    return kind


class MoveApplier:
    """Validates move attempts and applies them to a :class:`MatchState`."""

    __slots__ = ("_rules",)

    def __init__(self, rules: IRulesEngine) -> None:
        self._rules = rules

    def needs_promotion(
        self, position: Position, from_sq: SquareName, to_sq: SquareName
    ) -> bool:
        return is_promotion_move(self._rules.piece_at(position, from_sq), from_sq, to_sq)

    def attempt_move(
        self,
        state: MatchState,
        from_sq: SquareName,
        to_sq: SquareName,
        piece_hint: object = None,
    ) -> MoveOutcome:
        """Apply a drag/click move; promotions default to a queen."""
        if state.is_game_over:
            return MoveRejected(RejectReason.GAME_OVER)

        promotion: PieceKind | None = None
        if self.needs_promotion(state.position, from_sq, to_sq):
            try:
                promotion = parse_promotion(piece_hint) or PieceKind.QUEEN
            except ValueError as exc:
                return MoveRejected(RejectReason.INVALID_PROMOTION, str(exc))
        return self._apply(state, from_sq, to_sq, promotion)

    def apply_promotion(
        self,
        state: MatchState,
        piece: object,
        from_sq: SquareName,
        to_sq: SquareName,
    ) -> MoveOutcome:
        """Apply a move whose promotion piece was chosen explicitly."""
        if state.is_game_over:
            return MoveRejected(RejectReason.GAME_OVER)
        try:
            promotion = parse_promotion(piece)
        except ValueError as exc:
            return MoveRejected(RejectReason.INVALID_PROMOTION, str(exc))
        if promotion is None:
            return MoveRejected(
                RejectReason.INVALID_PROMOTION, f"No promotion piece in {piece!r}"
            )
        return self._apply(state, from_sq, to_sq, promotion)

    def _apply(
        self,
        state: MatchState,
        from_sq: SquareName,
        to_sq: SquareName,
        promotion: PieceKind | None,
    ) -> MoveOutcome:
        mover = state.side_to_move
        result = self._rules.apply_move(state.position, from_sq, to_sq, promotion)
        if not isinstance(result, Applied):
            return MoveRejected(RejectReason.ILLEGAL_MOVE, result.detail)

        state.store.replace(result.position)
        state.highlights = NO_HIGHLIGHTS
        state.clock.hand_off(mover)
        return AppliedMove(
            from_sq=from_sq,
            to_sq=to_sq,
            promotion=promotion,
            position=result.position,
            mover=mover,
        )
