"""Tests for square helpers and enums."""

from __future__ import annotations

import pytest

from chessdss.core.enums import OutcomeKind, PieceKind, Side
from chessdss.core.types import (
    ALL_SQUARES,
    file_index,
    is_valid_square,
    rank_number,
    square_name,
)


class TestSquares:
    @pytest.mark.parametrize("name", ["a1", "h8", "e4"])
    def test_valid(self, name: str) -> None:
        assert is_valid_square(name)

    @pytest.mark.parametrize("name", ["", "a", "i1", "a9", "a0", "e44", None, 42])
    def test_invalid(self, name: object) -> None:
        assert not is_valid_square(name)

    def test_coordinates(self) -> None:
        assert file_index("a1") == 0
        assert file_index("h5") == 7
        assert rank_number("e4") == 4
        assert square_name(4, 3) == "e4"

    def test_coordinates_reject_bad_name(self) -> None:
        with pytest.raises(ValueError):
            file_index("z1")
        with pytest.raises(ValueError):
            rank_number("a9")

    def test_all_squares(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert len(set(ALL_SQUARES)) == 64
        assert ALL_SQUARES[0] == "a1"
        assert ALL_SQUARES[-1] == "h8"


class TestEnums:
    def test_side(self) -> None:
        assert Side.WHITE.opposite == Side.BLACK
        assert Side.BLACK.opposite == Side.WHITE
        assert Side.from_code("b") == Side.BLACK
        assert Side.WHITE.code == "w"
        with pytest.raises(ValueError):
            Side.from_code("x")

    def test_piece_symbols(self) -> None:
        assert PieceKind.from_symbol("Q") == PieceKind.QUEEN
        assert PieceKind.KNIGHT.symbol == "n"
        with pytest.raises(ValueError):
            PieceKind.from_symbol("x")

    def test_outcome_reasons(self) -> None:
        assert OutcomeKind.CHECKMATE.reason == "Checkmate"
        assert OutcomeKind.STALEMATE.reason == "Stalemate"
        assert OutcomeKind.DRAW.reason == "Draw"
        assert OutcomeKind.TIMEOUT.reason == "Time Out"
