"""Game-over dialog — winner, reason and a "Play Again" action."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QDialog, QLabel, QPushButton, QVBoxLayout, QWidget

from chessdss.game.outcome import GameOverOutcome
from chessdss.ui.i18n import side_name, t


def outcome_lines(outcome: GameOverOutcome) -> list[str]:
    """Text lines describing *outcome*, as shown in the dialog."""
    s = t()
    if outcome.is_draw:
        return [s.game_over_draw.format(reason=outcome.reason)]
    assert outcome.winner is not None
    return [
        s.game_over_winner.format(color=side_name(outcome.winner)),
        s.game_over_reason.format(reason=outcome.reason),
    ]


class GameOverDialog(QDialog):
    """Modal "Match Over" summary. Accepting it means "play again"."""

    def __init__(self, outcome: GameOverOutcome, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(360)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        s = t()
        self.setWindowTitle(s.game_over_title)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(10)

        title = QLabel(s.game_over_title)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setFont(QFont("Helvetica Neue", 16, QFont.Weight.Bold))
        layout.addWidget(title)

        self._lines: list[QLabel] = []
        for text in outcome_lines(outcome):
            label = QLabel(text)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setFont(QFont("Helvetica Neue", 12))
            layout.addWidget(label)
            self._lines.append(label)

        self._btn_play_again = QPushButton(s.btn_play_again)
        self._btn_play_again.setObjectName("primary")
        self._btn_play_again.setMinimumHeight(36)
        self._btn_play_again.clicked.connect(self.accept)
        layout.addWidget(self._btn_play_again)

    def line_texts(self) -> list[str]:
        return [label.text() for label in self._lines]

    @staticmethod
    def ask(outcome: GameOverOutcome, parent: QWidget | None = None) -> bool:
        """Show the dialog; True when the user chose to play again."""
        dlg = GameOverDialog(outcome, parent)
        return dlg.exec() == QDialog.DialogCode.Accepted
