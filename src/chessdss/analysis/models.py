"""Data models returned by the analysis service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from chessdss.core.enums import Side

MOCK_WIN_PROBABILITY = 0.5
ML_UNAVAILABLE_MESSAGE = "ML service unavailable"


def _side(code: object) -> Side | None:
    if code in ("w", "white"):
        return Side.WHITE
    if code in ("b", "black"):
        return Side.BLACK
    return None


def _labels(values: object) -> tuple[str, ...]:
    if not isinstance(values, Sequence) or isinstance(values, str):
        return ()
    return tuple(str(v) for v in values)


@dataclass(slots=True, frozen=True)
class BestMove:
    """Minimax best move for the side to move."""

    san: str
    score: int | None = None

    @classmethod
    def from_json(cls, data: object) -> BestMove | None:
        if not isinstance(data, Mapping) or not data.get("san"):
            return None
        score = data.get("score")
        return cls(
            san=str(data["san"]),
            score=int(score) if isinstance(score, (int, float)) else None,
        )


@dataclass(slots=True, frozen=True)
class PayoffMatrix:
    """Current player's top moves against the opponent's best replies.

    Cells are evaluations from White's perspective.
    """

    row_labels: tuple[str, ...] = ()
    col_labels: tuple[str, ...] = ()
    matrix: tuple[tuple[float, ...], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.row_labels

    def cell(self, row: int, col: int) -> float | None:
        try:
            return self.matrix[row][col]
        except IndexError:
            return None

    @classmethod
    def from_json(cls, data: object) -> PayoffMatrix:
        if not isinstance(data, Mapping):
            return cls()
        rows = data.get("matrix") or []
        matrix = tuple(
            tuple(float(cell) for cell in row)
            for row in rows
            if isinstance(row, Sequence) and not isinstance(row, str)
        )
        return cls(
            row_labels=_labels(data.get("rowLabels")),
            col_labels=_labels(data.get("colLabels")),
            matrix=matrix,
        )


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Response of ``POST /api/analyze``."""

    best_move: BestMove | None = None
    payoff_matrix: PayoffMatrix = field(default_factory=PayoffMatrix)
    dominated_moves: tuple[str, ...] = ()
    dominated_rows: frozenset[int] = frozenset()
    turn: Side | None = None
    game_over: bool = False
    checkmate: bool = False
    draw: bool = False
    winner: Side | None = None
    score: int | None = None
    perspective: Side | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> AnalysisResult:
        rows = data.get("dominatedRows") or []
        score = data.get("score")
        return cls(
            best_move=BestMove.from_json(data.get("bestMove")),
            payoff_matrix=PayoffMatrix.from_json(data.get("payoffMatrix")),
            dominated_moves=_labels(data.get("dominatedMoves")),
            dominated_rows=frozenset(int(i) for i in rows if isinstance(i, int)),
            turn=_side(data.get("turn")),
            game_over=bool(data.get("gameOver")),
            checkmate=bool(data.get("checkmate")),
            draw=bool(data.get("draw")),
            winner=_side(data.get("winner")),
            score=int(score) if isinstance(score, (int, float)) else None,
            perspective=_side(data.get("currentPlayerPerspective")),
        )


@dataclass(slots=True, frozen=True)
class WinProbability:
    """Win estimate for White, with a display message."""

    probability: float
    message: str
    mock: bool = False

    @classmethod
    def unavailable(cls) -> WinProbability:
        return cls(MOCK_WIN_PROBABILITY, ML_UNAVAILABLE_MESSAGE, mock=True)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> WinProbability:
        raw = data.get("winProbability", MOCK_WIN_PROBABILITY)
        probability = float(raw) if isinstance(raw, (int, float)) else MOCK_WIN_PROBABILITY
        return cls(
            probability=probability,
            message=str(data.get("message") or "—"),
            mock=bool(data.get("mock", False)),
        )

    @classmethod
    def for_terminal(cls, result: AnalysisResult) -> WinProbability:
        """Local estimate for a finished position; the ML call is skipped."""
        if result.checkmate and result.winner is not None:
            name = "White" if result.winner == Side.WHITE else "Black"
            return cls(
                1.0 if result.winner == Side.WHITE else 0.0,
                f"{name} has a 100% chance of winning (Checkmate).",
            )
        if result.draw:
            return cls(MOCK_WIN_PROBABILITY, "Game Over: Draw.")
        return cls(MOCK_WIN_PROBABILITY, "—", mock=True)


@dataclass(slots=True, frozen=True)
class PositionReport:
    """Everything the dashboard shows for one analysed position."""

    fen: str
    analysis: AnalysisResult
    win_probability: WinProbability
