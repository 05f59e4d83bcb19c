"""Modal picker for the piece a pawn promotes to."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessdss.core.enums import PROMOTION_KINDS, PieceKind, Side
from chessdss.ui.board.piece_item import piece_glyph
from chessdss.ui.i18n import t
from chessdss.ui.styles.theme import BoardTheme


def _button_style(side: Side, theme: BoardTheme) -> str:
    fill = theme.piece_white if side == Side.WHITE else theme.piece_black
    back = theme.dark_square if side == Side.WHITE else theme.light_square
    return (
        f"QPushButton {{ color: {fill.name()}; background: {back.name()};"
        " border-radius: 6px; }"
    )


class PromotionDialog(QDialog):
    """One button per promotion kind; closing the dialog cancels the move."""

    def __init__(self, side: Side, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setFixedSize(340, 130)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._side = side
        self._selected: PieceKind | None = None
        self._buttons: dict[PieceKind, QPushButton] = {}

        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setFont(QFont("Helvetica Neue", 11))

        row = QHBoxLayout()
        style = _button_style(side, BoardTheme.default())
        for kind in PROMOTION_KINDS:
            row.addWidget(self._make_button(kind, style))

        layout = QVBoxLayout(self)
        layout.addWidget(self._label)
        layout.addLayout(row)
        self.retranslate_ui()

    def _make_button(self, kind: PieceKind, style: str) -> QPushButton:
        btn = QPushButton(piece_glyph(kind))
        btn.setFont(QFont("DejaVu Sans", 30))
        btn.setFixedSize(68, 68)
        btn.setStyleSheet(style)
        btn.setToolTip(kind.name.capitalize())
        btn.clicked.connect(lambda _checked=False, k=kind: self._choose(k))
        self._buttons[kind] = btn
        return btn

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.promote_title)
        self._label.setText(s.promote_label)

    def _choose(self, kind: PieceKind) -> None:
        self._selected = kind
        self.accept()

    @property
    def selected(self) -> PieceKind | None:
        return self._selected

    @staticmethod
    def ask(side: Side, parent: QWidget | None = None) -> PieceKind | None:
        dlg = PromotionDialog(side, parent)
        if dlg.exec() != QDialog.DialogCode.Accepted:
            return None
        return dlg.selected
