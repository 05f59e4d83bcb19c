"""AnalysisPanel — game-theory dashboard for the current position.

Shows the best move, the 3×3 payoff matrix with dominated rows marked,
the strictly dominated moves, the win estimate and session statistics.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QHeaderView,
    QLabel,
    QPushButton,
    QSizePolicy,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from chessdss.analysis.models import AnalysisResult, PayoffMatrix, PositionReport
from chessdss.core.enums import Side
from chessdss.game.stats import SessionStats
from chessdss.ui.i18n import side_name, t
from chessdss.ui.styles.theme import ACCENT, ERROR, MUTED

def _mono_font() -> QFont:
    return QFont("DejaVu Sans Mono", 11)


def format_cell(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def format_total_time(ms: int) -> str:
    """Whole seconds, rounded half up."""
    return f"{(max(0, ms) + 500) // 1000} s"


def format_avg_move(seconds: float) -> str:
    return f"{seconds:.2f} s" if seconds else "—"


def _section_title(text: str = "") -> QLabel:
    label = QLabel(text)
    label.setFont(QFont("Helvetica Neue", 9, QFont.Weight.Bold))
    label.setStyleSheet(f"color: {MUTED};")
    return label


def _body(text: str = "", *, mono: bool = False) -> QLabel:
    label = QLabel(text)
    label.setWordWrap(True)
    if mono:
        label.setFont(_mono_font())
    return label


# ── Payoff matrix ───────────────────────────────────────────────────────


class PayoffMatrixWidget(QFrame):
    """3×3 table of current-player moves against opponent replies."""

    _DOMINATED_BG = QColor(248, 81, 73, 64)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(4)

        self._title = QLabel()
        self._title.setFont(QFont("Helvetica Neue", 11, QFont.Weight.Bold))
        layout.addWidget(self._title)

        self._empty = _body()
        self._empty.setStyleSheet(f"color: {MUTED};")
        layout.addWidget(self._empty)

        self._axes = _body()
        self._axes.setStyleSheet(f"color: {MUTED}; font-size: 11px;")
        layout.addWidget(self._axes)

        self._perspective = _body()
        self._perspective.setStyleSheet("color: #6e7681; font-size: 10px;")
        layout.addWidget(self._perspective)

        self._table = QTableWidget(0, 0)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._table.setFont(_mono_font())
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self._table.verticalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self._table.setMinimumHeight(130)
        layout.addWidget(self._table)

        self._matrix = PayoffMatrix()
        self._dominated_rows: frozenset[int] = frozenset()
        self._turn: Side | None = None
        self.retranslate_ui()
        self.set_matrix(PayoffMatrix())

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.payoff_title)
        self._empty.setText(s.payoff_empty)
        self._axes.setText(s.payoff_axes)
        self._update_perspective()

    def set_matrix(
        self,
        matrix: PayoffMatrix,
        dominated_rows: frozenset[int] = frozenset(),
        turn: Side | None = None,
    ) -> None:
        self._matrix = matrix
        self._dominated_rows = dominated_rows
        self._turn = turn

        empty = matrix.is_empty
        self._empty.setVisible(empty)
        self._axes.setVisible(not empty)
        self._perspective.setVisible(not empty)
        self._table.setVisible(not empty)
        self._update_perspective()

        self._table.clear()
        self._table.setRowCount(len(matrix.row_labels))
        self._table.setColumnCount(len(matrix.col_labels))
        self._table.setHorizontalHeaderLabels(list(matrix.col_labels))

        s = t()
        for i, label in enumerate(matrix.row_labels):
            header = QTableWidgetItem(label)
            if i in dominated_rows:
                header.setBackground(QBrush(self._DOMINATED_BG))
                header.setForeground(QBrush(QColor(ERROR)))
                header.setToolTip(s.dominated_tooltip)
            self._table.setVerticalHeaderItem(i, header)
            for j in range(len(matrix.col_labels)):
                value = matrix.cell(i, j)
                item = QTableWidgetItem("" if value is None else format_cell(value))
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self._table.setItem(i, j, item)

    def is_empty(self) -> bool:
        return self._matrix.is_empty

    def dominated_labels(self) -> list[str]:
        return [
            self._matrix.row_labels[i]
            for i in sorted(self._dominated_rows)
            if i < len(self._matrix.row_labels)
        ]

    def _update_perspective(self) -> None:
        s = t()
        text = s.payoff_perspective
        if self._turn == Side.BLACK:
            text = f"{text} {s.payoff_black_prefers}"
        self._perspective.setText(text)


# ── Main panel ──────────────────────────────────────────────────────────


class AnalysisPanel(QWidget):
    """Dashboard shown beside the board.

    Signals:
        analyze_clicked(): The user asked for an analysis of the position.
    """

    analyze_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._report: PositionReport | None = None
        self._error: str | None = None
        self._loading = False
        self._game_over = False
        self._stats: SessionStats | None = None
        self._setup_ui()
        self.retranslate_ui()
        self._refresh()

    def _setup_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)

        # ── Header ──
        self._title = QLabel()
        self._title.setFont(QFont("Helvetica Neue", 14, QFont.Weight.Bold))
        root.addWidget(self._title)

        self._btn_analyze = QPushButton()
        self._btn_analyze.setObjectName("primary")
        self._btn_analyze.setMinimumHeight(36)
        self._btn_analyze.clicked.connect(self.analyze_clicked)
        root.addWidget(self._btn_analyze)

        # ── Error box ──
        self._error_label = _body()
        self._error_label.setStyleSheet(
            f"color: {ERROR}; background: rgba(248, 81, 73, 0.15);"
            f" border: 1px solid {ERROR}; border-radius: 6px; padding: 8px;"
        )
        root.addWidget(self._error_label)

        # ── Terminal state ──
        self._terminal_box = QWidget()
        box = QVBoxLayout(self._terminal_box)
        box.setContentsMargins(0, 0, 0, 0)
        self._terminal_title = _section_title()
        self._terminal_text = _body()
        box.addWidget(self._terminal_title)
        box.addWidget(self._terminal_text)
        root.addWidget(self._terminal_box)

        # ── Live analysis ──
        self._live_box = QWidget()
        box = QVBoxLayout(self._live_box)
        box.setContentsMargins(0, 0, 0, 0)
        box.setSpacing(6)
        self._perspective_title = _section_title()
        self._perspective_text = _body()
        self._perspective_text.setStyleSheet(f"color: {ACCENT}; font-weight: 600;")
        box.addWidget(self._perspective_title)
        box.addWidget(self._perspective_text)

        self._best_title = _section_title()
        self._best_text = _body(mono=True)
        self._best_text.setTextFormat(Qt.TextFormat.RichText)
        box.addWidget(self._best_title)
        box.addWidget(self._best_text)

        self._matrix_widget = PayoffMatrixWidget()
        box.addWidget(self._matrix_widget)

        self._dominated_box = QWidget()
        dbox = QVBoxLayout(self._dominated_box)
        dbox.setContentsMargins(0, 0, 0, 0)
        self._dominated_title = _section_title()
        self._dominated_hint = _body()
        self._dominated_hint.setStyleSheet(f"color: {MUTED};")
        self._dominated_list = _body(mono=True)
        self._dominated_list.setStyleSheet(f"color: {ERROR};")
        dbox.addWidget(self._dominated_title)
        dbox.addWidget(self._dominated_hint)
        dbox.addWidget(self._dominated_list)
        box.addWidget(self._dominated_box)
        root.addWidget(self._live_box)

        # ── Win probability ──
        self._win_box = QWidget()
        box = QVBoxLayout(self._win_box)
        box.setContentsMargins(0, 0, 0, 0)
        self._win_title = _section_title()
        self._win_text = _body()
        self._mock_badge = QLabel()
        self._mock_badge.setStyleSheet(
            f"background: #21262d; color: {MUTED}; border-radius: 4px;"
            " padding: 1px 6px; font-size: 10px;"
        )
        self._mock_badge.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        box.addWidget(self._win_title)
        box.addWidget(self._win_text)
        box.addWidget(self._mock_badge)
        root.addWidget(self._win_box)

        # ── Stats ──
        self._stats_box = QWidget()
        box = QVBoxLayout(self._stats_box)
        box.setContentsMargins(0, 0, 0, 0)
        self._stats_title = _section_title()
        box.addWidget(self._stats_title)
        self._stat_labels = [_body() for _ in range(4)]
        for label in self._stat_labels:
            box.addWidget(label)
        root.addWidget(self._stats_box)

        # ── Hint ──
        self._hint = _body()
        self._hint.setStyleSheet(f"color: {MUTED};")
        root.addWidget(self._hint)

        root.addStretch(1)

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.dashboard_title)
        self._terminal_title.setText(s.terminal_title.upper())
        self._perspective_title.setText(s.analysis_for_title.upper())
        self._best_title.setText(s.best_move_title.upper())
        self._dominated_title.setText(s.dominated_title.upper())
        self._dominated_hint.setText(s.dominated_hint)
        self._win_title.setText(s.win_prob_title.upper())
        self._mock_badge.setText(s.mock_badge)
        self._stats_title.setText(s.stats_title.upper())
        self._hint.setText(s.analysis_hint)
        self._matrix_widget.retranslate_ui()
        self._refresh()

    # ── Public API ───────────────────────────────────────────────────────

    def set_loading(self, loading: bool) -> None:
        self._loading = loading
        if loading:
            self._error = None
        self._refresh()

    def set_game_over(self, game_over: bool) -> None:
        self._game_over = game_over
        self._refresh()

    def show_report(self, report: PositionReport) -> None:
        self._report = report
        self._error = None
        self._loading = False
        self._refresh()

    def show_error(self, message: str) -> None:
        self._error = message or t().analysis_failed
        self._report = None
        self._loading = False
        self._refresh()

    def set_stats(self, stats: SessionStats) -> None:
        self._stats = stats
        self._refresh_stats()

    def clear(self) -> None:
        """Forget the last result, as for a brand-new match."""
        self._report = None
        self._error = None
        self._loading = False
        self._game_over = False
        self._refresh()

    @property
    def report(self) -> PositionReport | None:
        return self._report

    def is_analyze_enabled(self) -> bool:
        return self._btn_analyze.isEnabled()

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        s = t()
        self._btn_analyze.setText(s.btn_analyzing if self._loading else s.btn_analyze)
        self._btn_analyze.setEnabled(not (self._loading or self._game_over))

        self._error_label.setVisible(self._error is not None)
        self._error_label.setText(self._error or "")

        report = self._report
        self._hint.setVisible(report is None and not self._loading and self._error is None)
        if report is None:
            for widget in (
                self._terminal_box,
                self._live_box,
                self._win_box,
                self._stats_box,
            ):
                widget.hide()
            return

        result = report.analysis
        self._terminal_box.setVisible(result.game_over)
        self._live_box.setVisible(not result.game_over)
        if result.game_over:
            self._terminal_text.setText(self._terminal_summary(result))
        else:
            self._show_live(result)

        probability = report.win_probability
        self._win_box.show()
        self._win_text.setText(probability.message or "—")
        self._mock_badge.setVisible(probability.mock)

        self._stats_box.show()
        self._refresh_stats()

    def _show_live(self, result: AnalysisResult) -> None:
        s = t()
        perspective = result.perspective or result.turn or Side.WHITE
        self._perspective_text.setText(s.analysis_for.format(color=side_name(perspective)))

        best = result.best_move
        if best is None:
            self._best_text.setText("—")
        else:
            score = ""
            if best.score is not None:
                score = (
                    f'<span style="color:{MUTED}; font-weight:normal;">'
                    f"{s.best_move_score.format(score=best.score)}</span>"
                )
            self._best_text.setText(f"<b>{best.san}</b>{score}")

        self._matrix_widget.set_matrix(
            result.payoff_matrix, result.dominated_rows, result.turn
        )

        self._dominated_box.setVisible(bool(result.dominated_moves))
        self._dominated_list.setText("\n".join(f"• {san}" for san in result.dominated_moves))

    def _refresh_stats(self) -> None:
        stats = self._stats
        if stats is None:
            for label in self._stat_labels:
                label.setText("")
            return
        s = t()
        rows = (
            (s.stats_total_moves, str(stats.total_plies)),
            (s.stats_total_time, format_total_time(stats.total_match_time_ms)),
            (s.stats_avg_white, format_avg_move(stats.white_avg_move_sec)),
            (s.stats_avg_black, format_avg_move(stats.black_avg_move_sec)),
        )
        for label, (name, value) in zip(self._stat_labels, rows):
            label.setText(f"{name} {value}")

    @staticmethod
    def _terminal_summary(result: AnalysisResult) -> str:
        s = t()
        if result.checkmate and result.winner is not None:
            return s.terminal_checkmate.format(
                color=side_name(result.winner), score=result.score
            )
        if result.draw:
            return s.terminal_draw
        return s.terminal_other
