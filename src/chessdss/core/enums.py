"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Side(IntEnum):
    """Side colour. "No side" is represented by ``None`` throughout."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def code(self) -> str:
        """Single-letter code used in FEN and by the analysis service."""
        return "w" if self == Side.WHITE else "b"

    @classmethod
    def from_code(cls, code: str) -> Side:
        if code == "w":
            return cls.WHITE
        if code == "b":
            return cls.BLACK
        raise ValueError(f"Invalid side code: {code!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds, numbered like ``chess.PieceType``."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> PieceKind:
        try:
            return _BY_SYMBOL[symbol.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from None


_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}

_BY_SYMBOL: dict[str, PieceKind] = {v: k for k, v in _SYMBOLS.items()}


PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


class OutcomeKind(StrEnum):
    """Terminal outcome categories."""

    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"
    TIMEOUT = "timeout"

    @property
    def reason(self) -> str:
        """Fixed display reason for this kind."""
        return _REASONS[self]


_REASONS: dict[OutcomeKind, str] = {
    OutcomeKind.CHECKMATE: "Checkmate",
    OutcomeKind.STALEMATE: "Stalemate",
    OutcomeKind.DRAW: "Draw",
    OutcomeKind.TIMEOUT: "Time Out",
}
