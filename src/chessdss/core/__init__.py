"""Core domain layer — positions, squares and the rules-engine oracle.

Quick start::

    from chessdss.core import ChessRules, Applied

    rules = ChessRules()
    pos = rules.new_game()
    result = rules.apply_move(pos, "e2", "e4")
    if isinstance(result, Applied):
        print(result.position.fen)
"""

from chessdss.core.enums import PROMOTION_KINDS, OutcomeKind, PieceKind, Side
from chessdss.core.position import STARTING_FEN, Position
from chessdss.core.rules import (
    Applied,
    ChessRules,
    Illegal,
    IRulesEngine,
    MoveResult,
    PieceInfo,
    piece_map,
)
from chessdss.core.types import (
    ALL_SQUARES,
    SquareName,
    file_index,
    is_valid_square,
    rank_number,
    square_name,
)

__all__ = [
    # Enums
    "OutcomeKind",
    "PROMOTION_KINDS",
    "PieceKind",
    "Side",
    # Squares
    "ALL_SQUARES",
    "SquareName",
    "file_index",
    "is_valid_square",
    "rank_number",
    "square_name",
    # Domain objects
    "Position",
    "STARTING_FEN",
    # Rules oracle
    "Applied",
    "ChessRules",
    "IRulesEngine",
    "Illegal",
    "MoveResult",
    "PieceInfo",
    "piece_map",
]
