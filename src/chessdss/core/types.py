"""Square name alias and coordinate helpers.

Squares are exchanged between components as algebraic names (``"e4"``),
the same form the board renderer emits and the analysis service reads.
"""

from __future__ import annotations

from typing import TypeAlias

SquareName: TypeAlias = str  # "a1" … "h8"

FILES = "abcdefgh"
RANKS = "12345678"


def is_valid_square(name: object) -> bool:
    """Check whether *name* is a well-formed square name."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in RANKS
    )


def file_index(name: SquareName) -> int:
    """File index 0–7 (a–h)."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return FILES.index(name[0])


def rank_number(name: SquareName) -> int:
    """Rank number 1–8."""
    if not is_valid_square(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return int(name[1])


def square_name(file: int, rank: int) -> SquareName:
    """Square name from file index 0–7 and rank index 0–7."""
    return FILES[file] + RANKS[rank]


ALL_SQUARES: tuple[SquareName, ...] = tuple(
    square_name(f, r) for r in range(8) for f in range(8)
)
