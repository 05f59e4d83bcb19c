"""Rules-engine oracle backed by python-chess.

The match state machine never decides legality itself; it asks an
:class:`IRulesEngine` and switches on the returned :data:`MoveResult`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import chess

from chessdss.core.enums import PieceKind, Side
from chessdss.core.position import Position
from chessdss.core.types import SquareName, is_valid_square


@dataclass(frozen=True, slots=True)
class PieceInfo:
    """A piece standing on a square."""

    side: Side
    kind: PieceKind

    @property
    def code(self) -> str:
        """Renderer code, e.g. ``"wP"``."""
        return f"{self.side.code}{self.kind.symbol.upper()}"


@dataclass(frozen=True, slots=True)
class Applied:
    """The move was legal; *position* is the result."""

    position: Position


@dataclass(frozen=True, slots=True)
class Illegal:
    """The move was refused by the rules engine."""

    detail: str = ""


MoveResult = Applied | Illegal


class IRulesEngine(ABC):
    """Contract of the rules-engine oracle."""

    @abstractmethod
    def new_game(self) -> Position:
        """Standard starting position."""

    @abstractmethod
    def load_position(self, fen: str) -> Position:
        """Validate and wrap a FEN string. Raises ``ValueError`` if invalid."""

    @abstractmethod
    def apply_move(
        self,
        position: Position,
        from_sq: SquareName,
        to_sq: SquareName,
        promotion: PieceKind | None = None,
    ) -> MoveResult:
        """Apply a candidate move, returning :class:`Applied` or :class:`Illegal`."""

    @abstractmethod
    def side_to_move(self, position: Position) -> Side: ...

    @abstractmethod
    def is_checkmate(self, position: Position) -> bool: ...

    @abstractmethod
    def is_stalemate(self, position: Position) -> bool: ...

    @abstractmethod
    def is_draw(self, position: Position) -> bool: ...

    @abstractmethod
    def legal_destinations(
        self, position: Position, square: SquareName
    ) -> frozenset[SquareName]: ...

    @abstractmethod
    def piece_at(self, position: Position, square: SquareName) -> PieceInfo | None: ...


class ChessRules(IRulesEngine):
    """:class:`IRulesEngine` implemented with :mod:`chess`.

    Positions carry no move history, so repetition draws cannot be
    detected; draws are insufficient material, the fifty-move rule and
    stalemate.
    """

    __slots__ = ()

    def new_game(self) -> Position:
        return Position(chess.Board().fen())

    def load_position(self, fen: str) -> Position:
        board = chess.Board(fen)
        return Position(board.fen())

    def apply_move(
        self,
        position: Position,
        from_sq: SquareName,
        to_sq: SquareName,
        promotion: PieceKind | None = None,
    ) -> MoveResult:
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return Illegal(f"invalid square: {from_sq!r} -> {to_sq!r}")
        try:
            board = chess.Board(position.fen)
            move = chess.Move(
                chess.parse_square(from_sq),
                chess.parse_square(to_sq),
                promotion=int(promotion) if promotion is not None else None,
            )
        except ValueError as exc:
            return Illegal(str(exc))

        if not board.is_legal(move):
            return Illegal(f"{move.uci()} is not legal in {position.fen}")
        board.push(move)
        return Applied(Position(board.fen()))

    def side_to_move(self, position: Position) -> Side:
        return Side.WHITE if self._board(position).turn == chess.WHITE else Side.BLACK

    def is_checkmate(self, position: Position) -> bool:
        return self._board(position).is_checkmate()

    def is_stalemate(self, position: Position) -> bool:
        return self._board(position).is_stalemate()

    def is_draw(self, position: Position) -> bool:
        board = self._board(position)
        return (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.is_fifty_moves()
        )

    def legal_destinations(
        self, position: Position, square: SquareName
    ) -> frozenset[SquareName]:
        if not is_valid_square(square):
            return frozenset()
        board = self._board(position)
        origin = chess.parse_square(square)
        return frozenset(
            chess.square_name(move.to_square)
            for move in board.legal_moves
            if move.from_square == origin
        )

    def piece_at(self, position: Position, square: SquareName) -> PieceInfo | None:
        if not is_valid_square(square):
            return None
        piece = self._board(position).piece_at(chess.parse_square(square))
        if piece is None:
            return None
        side = Side.WHITE if piece.color == chess.WHITE else Side.BLACK
        return PieceInfo(side, PieceKind(piece.piece_type))

    @staticmethod
    def _board(position: Position) -> chess.Board:
        return chess.Board(position.fen)


def piece_map(position: Position) -> dict[SquareName, PieceInfo]:
    """All occupied squares of *position*, keyed by square name."""
    board = chess.Board(position.fen)
    return {
        chess.square_name(sq): PieceInfo(
            Side.WHITE if piece.color == chess.WHITE else Side.BLACK,
            PieceKind(piece.piece_type),
        )
        for sq, piece in board.piece_map().items()
    }
