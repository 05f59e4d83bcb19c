"""Immutable position snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from chessdss.core.enums import Side

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@dataclass(frozen=True, slots=True)
class Position:
    """A complete board snapshot, canonically a FEN string.

    Positions are never mutated; the rules engine derives a new one for
    every applied move.
    """

    fen: str

    @classmethod
    def starting(cls) -> Position:
        return cls(STARTING_FEN)

    @property
    def side_to_move(self) -> Side:
        fields = self.fen.split()
        return Side.BLACK if len(fields) > 1 and fields[1] == "b" else Side.WHITE

    @property
    def fullmove_number(self) -> int:
        fields = self.fen.split()
        try:
            return int(fields[5])
        except (IndexError, ValueError):
            return 1

    def __str__(self) -> str:
        return self.fen
