"""Tests for the python-chess backed rules oracle."""

from __future__ import annotations

import chess
import pytest

from chessdss.core.enums import PieceKind, Side
from chessdss.core.position import STARTING_FEN, Position
from chessdss.core.rules import Applied, ChessRules, Illegal, PieceInfo, piece_map

PROMOTION_FEN = "4k3/P7/8/8/8/8/8/4K3 w - - 0 1"


@pytest.fixture
def rules() -> ChessRules:
    return ChessRules()


class TestPosition:
    def test_starting(self) -> None:
        pos = Position.starting()
        assert pos.fen == STARTING_FEN
        assert pos.side_to_move == Side.WHITE
        assert pos.fullmove_number == 1

    def test_black_to_move(self) -> None:
        pos = Position("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1")
        assert pos.side_to_move == Side.BLACK

    def test_new_game_is_standard_start(self, rules: ChessRules) -> None:
        assert rules.new_game() == Position(STARTING_FEN)


class TestApplyMove:
    def test_legal_move(self, rules: ChessRules) -> None:
        result = rules.apply_move(rules.new_game(), "e2", "e4")
        assert isinstance(result, Applied)
        assert result.position.side_to_move == Side.BLACK
        assert rules.piece_at(result.position, "e4") == PieceInfo(Side.WHITE, PieceKind.PAWN)
        assert rules.piece_at(result.position, "e2") is None

    def test_illegal_move(self, rules: ChessRules) -> None:
        result = rules.apply_move(rules.new_game(), "e2", "e5")
        assert isinstance(result, Illegal)
        assert "e2e5" in result.detail

    def test_wrong_side(self, rules: ChessRules) -> None:
        assert isinstance(rules.apply_move(rules.new_game(), "e7", "e5"), Illegal)

    @pytest.mark.parametrize(("from_sq", "to_sq"), [("z9", "e4"), ("e2", ""), ("", "")])
    def test_malformed_squares(self, rules: ChessRules, from_sq: str, to_sq: str) -> None:
        assert isinstance(rules.apply_move(rules.new_game(), from_sq, to_sq), Illegal)

    def test_promotion_piece(self, rules: ChessRules) -> None:
        pos = rules.load_position(PROMOTION_FEN)
        result = rules.apply_move(pos, "a7", "a8", PieceKind.KNIGHT)
        assert isinstance(result, Applied)
        assert rules.piece_at(result.position, "a8") == PieceInfo(Side.WHITE, PieceKind.KNIGHT)

    def test_promotion_missing_is_illegal(self, rules: ChessRules) -> None:
        pos = rules.load_position(PROMOTION_FEN)
        assert isinstance(rules.apply_move(pos, "a7", "a8"), Illegal)

    def test_promotion_to_king_is_illegal(self, rules: ChessRules) -> None:
        pos = rules.load_position(PROMOTION_FEN)
        assert isinstance(rules.apply_move(pos, "a7", "a8", PieceKind.KING), Illegal)

    def test_input_position_unchanged(self, rules: ChessRules) -> None:
        pos = rules.new_game()
        rules.apply_move(pos, "e2", "e4")
        assert pos.fen == STARTING_FEN

    def test_matches_python_chess(self, rules: ChessRules) -> None:
        moves = ["e2e4", "e7e5", "g1f3", "b8c6", "f1b5", "a7a6", "e1g1"]
        board = chess.Board()
        pos = rules.new_game()
        for uci in moves:
            board.push_uci(uci)
            result = rules.apply_move(pos, uci[:2], uci[2:4])
            assert isinstance(result, Applied)
            pos = result.position
        assert pos.fen == board.fen()


class TestQueries:
    def test_load_position_rejects_garbage(self, rules: ChessRules) -> None:
        with pytest.raises(ValueError):
            rules.load_position("not a fen")

    def test_legal_destinations(self, rules: ChessRules) -> None:
        pos = rules.new_game()
        assert rules.legal_destinations(pos, "e2") == {"e3", "e4"}
        assert rules.legal_destinations(pos, "g1") == {"f3", "h3"}
        assert rules.legal_destinations(pos, "a1") == frozenset()
        assert rules.legal_destinations(pos, "e5") == frozenset()
        assert rules.legal_destinations(pos, "xx") == frozenset()

    def test_piece_at_invalid_square(self, rules: ChessRules) -> None:
        assert rules.piece_at(rules.new_game(), "i9") is None

    def test_piece_code(self) -> None:
        assert PieceInfo(Side.WHITE, PieceKind.PAWN).code == "wP"
        assert PieceInfo(Side.BLACK, PieceKind.KNIGHT).code == "bN"

    def test_piece_map(self, rules: ChessRules) -> None:
        pieces = piece_map(rules.new_game())
        assert len(pieces) == 32
        assert pieces["e1"] == PieceInfo(Side.WHITE, PieceKind.KING)
        assert pieces["d8"] == PieceInfo(Side.BLACK, PieceKind.QUEEN)

    def test_terminal_predicates(self, rules: ChessRules) -> None:
        mate = rules.load_position(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        assert rules.is_checkmate(mate)
        assert not rules.is_draw(mate)

        stalemate = rules.load_position("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        assert rules.is_stalemate(stalemate)
        assert rules.is_draw(stalemate)

        bare_kings = rules.load_position("8/8/8/8/8/8/8/k6K w - - 0 1")
        assert rules.is_draw(bare_kings)
        assert not rules.is_stalemate(bare_kings)

        fifty = rules.load_position("8/8/8/8/8/4k3/8/R3K3 w - - 100 60")
        assert rules.is_draw(fifty)
