"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QCloseEvent, QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from chessdss.analysis import AnalysisClient, PositionReport
from chessdss.config import ERROR_DISPLAY_MS, AppConfig
from chessdss.game.controller import MatchController
from chessdss.game.interfaces import TimeSetting
from chessdss.game.outcome import GameOverOutcome
from chessdss.game.validator import AppliedMove, MoveRejected
from chessdss.ui.analysis_session import AnalysisSession
from chessdss.ui.board.board_view import BoardView
from chessdss.ui.dialogs.game_over_dialog import GameOverDialog
from chessdss.ui.game_sync import GameSync
from chessdss.ui.i18n import set_language, t
from chessdss.ui.panels.analysis_panel import AnalysisPanel
from chessdss.ui.panels.clock_widget import ClockWidget
from chessdss.ui.panels.control_panel import ControlPanel
from chessdss.ui.styles.theme import ACCENT, ERROR, MUTED

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window: board, clocks and the analysis dashboard."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        controller: MatchController | None = None,
        client: AnalysisClient | None = None,
    ) -> None:
        super().__init__()
        self._config = config or AppConfig()
        set_language(self._config.language)

        self.setMinimumSize(980, 680)
        self.resize(1180, 780)

        self._controller = controller or MatchController(
            time_setting=TimeSetting.parse(self._config.base_minutes)
        )
        self._analysis_session = AnalysisSession(
            client=client
            or AnalysisClient(self._config.api_base, self._config.request_timeout_s),
            on_finished=self._on_analysis_finished,
            on_failed=self._on_analysis_failed,
            current_session=lambda: self._controller.session_id,
            parent=self,
        )
        self._error_timer = QTimer(self)
        self._error_timer.setSingleShot(True)
        self._error_timer.setInterval(ERROR_DISPLAY_MS)
        self._error_timer.timeout.connect(self._hide_move_error)
        self._game_over_timer = QTimer(self)
        self._game_over_timer.setSingleShot(True)
        self._game_over_timer.setInterval(0)
        self._game_over_timer.timeout.connect(self._show_pending_game_over)
        self._pending_outcome: GameOverOutcome | None = None

        self._setup_ui()
        self._setup_menu()
        self._game_sync = GameSync(
            controller=self._controller,
            board_scene=self._board_view.board_scene,
            clock_widget=self._clock_widget,
            control_panel=self._control_panel,
            analysis_panel=self._analysis_panel,
            set_turn_text=self._turn_label.setText,
        )
        self._connect_signals()
        self._connect_game_events()

        self.retranslate_ui()
        self._game_sync.sync_all()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(12, 10, 12, 10)
        root.setSpacing(8)

        # Header
        self._title_label = QLabel()
        self._title_label.setFont(QFont("Helvetica Neue", 18, QFont.Weight.Bold))
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title_label)

        self._subtitle_label = QLabel()
        self._subtitle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._subtitle_label.setStyleSheet(f"color: {MUTED};")
        root.addWidget(self._subtitle_label)

        self._turn_label = QLabel()
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._turn_label.setStyleSheet(f"color: {ACCENT}; font-weight: 600;")
        root.addWidget(self._turn_label)

        self._error_label = QLabel()
        self._error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._error_label.setStyleSheet(f"color: {ERROR}; font-weight: 500;")
        self._error_label.hide()
        root.addWidget(self._error_label)

        body = QHBoxLayout()
        body.setSpacing(16)

        # Board column
        left = QVBoxLayout()
        left.setSpacing(8)
        self._control_panel = ControlPanel()
        left.addWidget(self._control_panel)
        self._clock_widget = ClockWidget()
        left.addWidget(self._clock_widget)
        self._board_view = BoardView()
        left.addWidget(self._board_view, stretch=1)
        body.addLayout(left, stretch=3)

        # Dashboard column
        self._analysis_panel = AnalysisPanel()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._analysis_panel)
        scroll.setMinimumWidth(320)
        scroll.setMaximumWidth(440)
        body.addWidget(scroll, stretch=2)

        root.addLayout(body, stretch=1)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_play_again = QAction(self)
        self._act_play_again.setShortcut("Ctrl+N")
        self._act_play_again.triggered.connect(self._on_play_again)
        self._menu_game.addAction(self._act_play_again)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        self._title_label.setText(s.window_title)
        self._subtitle_label.setText(s.subtitle)
        self._menu_game.setTitle(s.menu_game)
        self._act_play_again.setText(s.btn_play_again)
        self._act_quit.setText(s.menu_quit)
        self._control_panel.retranslate_ui()
        self._clock_widget.retranslate_ui()
        self._analysis_panel.retranslate_ui()
        self._game_sync.update_turn()

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        scene = self._board_view.board_scene
        scene.set_promotion_check(self._controller.needs_promotion)
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._board_view.move_attempted.connect(self._on_move_attempted)
        self._board_view.promotion_chosen.connect(self._on_promotion_chosen)
        self._clock_widget.set_tick_callback(self._controller.tick)
        self._control_panel.minutes_selected.connect(self._on_minutes_selected)
        self._control_panel.pause_clicked.connect(self._controller.pause_clock)
        self._control_panel.resume_clicked.connect(self._controller.resume_clock)
        self._analysis_panel.analyze_clicked.connect(self._on_analyze)

    def _connect_game_events(self) -> None:
        """Subscribe to MatchController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_rejected, self._on_move_rejected)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(events.on_clock_changed, self._game_sync.on_clock_changed)
        self._replace_callback(events.on_reset, self._on_reset)
        self._replace_callback(
            events.on_highlights_changed, self._board_view.board_scene.set_highlights
        )

    def _disconnect_game_events(self) -> None:
        """Detach this window from MatchController callbacks."""
        events = self._controller.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_rejected, self._on_move_rejected)
        self._remove_callback(events.on_game_over, self._on_game_over)
        self._remove_callback(events.on_clock_changed, self._game_sync.on_clock_changed)
        self._remove_callback(events.on_reset, self._on_reset)
        self._remove_callback(
            events.on_highlights_changed, self._board_view.board_scene.set_highlights
        )

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._clock_widget.stop()
        self._error_timer.stop()
        self._game_over_timer.stop()
        self._disconnect_game_events()
        self._analysis_session.shutdown()
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_square_clicked(self, square: str) -> None:
        self._controller.select_square(square)

    def _on_move_attempted(self, from_sq: str, to_sq: str, hint: str) -> None:
        self._controller.attempt_move(from_sq, to_sq, hint or None)

    def _on_promotion_chosen(self, piece: str, from_sq: str, to_sq: str) -> None:
        self._controller.choose_promotion(piece, from_sq, to_sq)

    def _on_minutes_selected(self, minutes: int) -> None:
        if not self._controller.set_base_minutes(minutes):
            self._control_panel.set_minutes(self._controller.time_setting.base_minutes)

    def _on_play_again(self) -> None:
        self._controller.play_again()

    def _on_analyze(self) -> None:
        if self._controller.is_game_over:
            return
        self._analysis_panel.set_loading(True)
        if not self._analysis_session.start_analysis(self._controller.position.fen):
            self._analysis_panel.set_loading(False)

    # ── Move error line ──────────────────────────────────────────────────

    def show_move_error(self) -> None:
        """Show the transient illegal-move message; restarts its timeout."""
        self._error_label.setText(t().move_error)
        self._error_label.show()
        self._error_timer.start()

    def _hide_move_error(self) -> None:
        self._error_label.hide()
        self._error_label.clear()

    # ── Match event callbacks ────────────────────────────────────────────

    def _on_game_move(self, _move: AppliedMove, _state: object) -> None:
        self._error_timer.stop()
        self._hide_move_error()
        self._game_sync.sync_board()

    def _on_move_rejected(self, rejection: MoveRejected) -> None:
        _LOGGER.debug("Showing move error for %s", rejection.reason)
        self.show_move_error()
        self._game_sync.sync_board()

    def _on_game_over(self, outcome: GameOverOutcome) -> None:
        self._analysis_session.cancel_analysis()
        self._game_sync.on_game_over(outcome)
        # Leave the controller call stack before opening a modal dialog.
        self._pending_outcome = outcome
        self._game_over_timer.start()

    def _show_pending_game_over(self) -> None:
        outcome, self._pending_outcome = self._pending_outcome, None
        if outcome is not None and self._controller.outcome == outcome:
            self._show_game_over_dialog(outcome)

    def _show_game_over_dialog(self, outcome: GameOverOutcome) -> None:
        if GameOverDialog.ask(outcome, self):
            self._controller.play_again()

    def _on_reset(self, _session_id: int) -> None:
        self._game_over_timer.stop()
        self._pending_outcome = None
        self._analysis_session.cancel_analysis()
        self._error_timer.stop()
        self._hide_move_error()
        self._game_sync.after_reset()

    # ── Analysis callbacks ───────────────────────────────────────────────

    def _on_analysis_finished(self, report: PositionReport) -> None:
        self._analysis_panel.show_report(report)

    def _on_analysis_failed(self, message: str) -> None:
        self._analysis_panel.show_error(message)
