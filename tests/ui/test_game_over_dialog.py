"""Tests for the game-over summary dialog."""

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QDialog

from chessdss.core.enums import Side
from chessdss.game.outcome import GameOverOutcome
from chessdss.ui.dialogs.game_over_dialog import GameOverDialog, outcome_lines
from chessdss.ui.i18n import set_language


@pytest.mark.parametrize(
    ("outcome", "lines"),
    [
        (GameOverOutcome.checkmate(Side.BLACK), ["Winner: Black", "Reason: Checkmate"]),
        (GameOverOutcome.timeout(Side.BLACK), ["Winner: White", "Reason: Time Out"]),
        (GameOverOutcome.stalemate(), ["Game Over: Draw (Stalemate)"]),
        (GameOverOutcome.draw(), ["Game Over: Draw (Draw)"]),
    ],
)
def test_outcome_lines(outcome: GameOverOutcome, lines: list[str]) -> None:
    assert outcome_lines(outcome) == lines


def test_outcome_lines_localised() -> None:
    set_language("Russian")
    assert outcome_lines(GameOverOutcome.checkmate(Side.WHITE))[0] == "Победитель: Белые"


def test_dialog_shows_lines() -> None:
    dlg = GameOverDialog(GameOverOutcome.timeout(Side.WHITE))
    assert dlg.windowTitle() == "Match Over"
    assert dlg.line_texts() == ["Winner: Black", "Reason: Time Out"]


def test_play_again_accepts() -> None:
    dlg = GameOverDialog(GameOverOutcome.draw())
    dlg._btn_play_again.click()
    assert dlg.result() == QDialog.DialogCode.Accepted


@pytest.mark.parametrize(
    ("code", "expected"),
    [(QDialog.DialogCode.Accepted, True), (QDialog.DialogCode.Rejected, False)],
)
def test_ask(monkeypatch: pytest.MonkeyPatch, code: object, expected: bool) -> None:
    monkeypatch.setattr(GameOverDialog, "exec", lambda self: code)
    assert GameOverDialog.ask(GameOverOutcome.stalemate()) is expected
