"""Tests for game-over classification."""

from __future__ import annotations

import pytest

from chessdss.core.enums import OutcomeKind, Side
from chessdss.core.rules import ChessRules
from chessdss.game.outcome import GameOverOutcome, classify

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
STALEMATE = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
BARE_KINGS = "8/8/8/8/8/8/8/k6K w - - 0 1"
FIFTY_MOVES = "8/8/8/8/8/4k3/8/R3K3 w - - 100 60"


@pytest.fixture
def rules() -> ChessRules:
    return ChessRules()


class TestClassify:
    def test_ongoing(self, rules: ChessRules) -> None:
        assert classify(rules, rules.new_game()) is None

    def test_checkmate_winner_is_side_not_to_move(self, rules: ChessRules) -> None:
        outcome = classify(rules, rules.load_position(FOOLS_MATE))
        assert outcome == GameOverOutcome(OutcomeKind.CHECKMATE, Side.BLACK, "Checkmate")

    def test_stalemate(self, rules: ChessRules) -> None:
        outcome = classify(rules, rules.load_position(STALEMATE))
        assert outcome == GameOverOutcome.stalemate()
        assert outcome.is_draw

    @pytest.mark.parametrize("fen", [BARE_KINGS, FIFTY_MOVES])
    def test_other_draws(self, rules: ChessRules, fen: str) -> None:
        outcome = classify(rules, rules.load_position(fen))
        assert outcome == GameOverOutcome(OutcomeKind.DRAW, None, "Draw")

    def test_timeout(self, rules: ChessRules) -> None:
        outcome = classify(rules, rules.new_game(), timed_out=Side.BLACK)
        assert outcome == GameOverOutcome(OutcomeKind.TIMEOUT, Side.WHITE, "Time Out")
        assert not outcome.is_draw

    def test_board_result_beats_timeout(self, rules: ChessRules) -> None:
        mate = classify(rules, rules.load_position(FOOLS_MATE), timed_out=Side.WHITE)
        assert mate is not None and mate.kind == OutcomeKind.CHECKMATE

        draw = classify(rules, rules.load_position(BARE_KINGS), timed_out=Side.WHITE)
        assert draw is not None and draw.kind == OutcomeKind.DRAW
