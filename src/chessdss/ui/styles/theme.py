"""Visual theme constants and QSS styles for the desktop UI."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# GitHub-dark palette
BG = "#0f1419"
SURFACE = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"
TEXT = "#e6edf3"
ACCENT = "#3fb950"
ACCENT_HOVER = "#56d364"
ERROR = "#f85149"


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    piece_white: QColor
    piece_black: QColor
    piece_outline: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor("#484f58"),
            dark_square=QColor("#2d333b"),
            highlight_from=QColor(144, 238, 144, 140),
            highlight_to=QColor(144, 238, 144, 90),
            coord_light=QColor("#8b949e"),
            coord_dark=QColor("#c9d1d9"),
            piece_white=QColor("#f0f0f0"),
            piece_black=QColor("#111111"),
            piece_outline=QColor("#0d1117"),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = f"""
QMainWindow, QDialog {{
    background: {BG};
}}

QLabel {{
    color: {TEXT};
    font-family: "Helvetica Neue", sans-serif;
}}

QFrame#card {{
    background: {SURFACE};
    border: 1px solid {BORDER};
    border-radius: 6px;
}}

QTableWidget {{
    background: #0d1117;
    color: {TEXT};
    gridline-color: {BORDER};
    border: 1px solid {BORDER};
}}
QHeaderView::section {{
    background: #21262d;
    color: #c9d1d9;
    border: 1px solid {BORDER};
    padding: 4px;
}}

QComboBox {{
    background: #0d1117;
    color: {TEXT};
    border: 1px solid {BORDER};
    border-radius: 4px;
    padding: 3px 8px;
}}
QComboBox:disabled {{
    color: {MUTED};
}}

QPushButton {{
    background: #21262d;
    color: {TEXT};
    border: 1px solid {BORDER};
    border-radius: 6px;
    padding: 6px 14px;
    font-size: 13px;
}}
QPushButton:hover {{
    background: #30363d;
}}
QPushButton:disabled {{
    color: {MUTED};
    background: {SURFACE};
}}

QPushButton#primary {{
    background: {ACCENT};
    color: #0d1117;
    border: none;
    font-weight: 600;
}}
QPushButton#primary:hover {{
    background: {ACCENT_HOVER};
}}
QPushButton#primary:disabled {{
    background: {ACCENT};
    color: #0d1117;
}}

QScrollArea {{
    background: {SURFACE};
    border: none;
}}
"""
