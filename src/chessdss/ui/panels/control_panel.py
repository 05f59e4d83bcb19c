"""ControlPanel — time selector and clock controls."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QPushButton, QWidget

from chessdss.game.interfaces import TIME_PRESETS, ClockStatus
from chessdss.ui.i18n import t


class ControlPanel(QWidget):
    """Per-side base time selector plus a pause / resume toggle."""

    minutes_selected = pyqtSignal(int)
    pause_clicked = pyqtSignal()
    resume_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._paused = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._label = QLabel()
        layout.addWidget(self._label)

        self._combo = QComboBox()
        for minutes in TIME_PRESETS:
            self._combo.addItem("", minutes)
        self._combo.activated.connect(self._on_activated)
        layout.addWidget(self._combo)
        layout.addStretch(1)

        self._btn_pause = QPushButton()
        self._btn_pause.setEnabled(False)
        self._btn_pause.clicked.connect(self._on_pause_toggled)
        layout.addWidget(self._btn_pause)

    def retranslate_ui(self) -> None:
        s = t()
        self._label.setText(s.clock_per_side)
        for i in range(self._combo.count()):
            self._combo.setItemText(i, s.time_option.format(minutes=self._combo.itemData(i)))
        self._btn_pause.setText(s.btn_resume if self._paused else s.btn_pause)

    # ── Public API ───────────────────────────────────────────────────────

    def selected_minutes(self) -> int:
        return int(self._combo.currentData())

    def set_minutes(self, minutes: int) -> None:
        """Show *minutes* as the current choice without emitting a signal."""
        index = self._combo.findData(minutes)
        if index >= 0:
            self._combo.setCurrentIndex(index)

    def set_clock_status(self, status: ClockStatus) -> None:
        """The selector is usable only before the first move of a match."""
        self._combo.setEnabled(status == ClockStatus.IDLE)
        self._paused = status == ClockStatus.PAUSED
        self._btn_pause.setEnabled(status in (ClockStatus.RUNNING, ClockStatus.PAUSED))
        self.retranslate_ui()

    def is_selector_enabled(self) -> bool:
        return self._combo.isEnabled()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_activated(self, index: int) -> None:
        self.minutes_selected.emit(int(self._combo.itemData(index)))

    def _on_pause_toggled(self) -> None:
        if self._paused:
            self.resume_clicked.emit()
        else:
            self.pause_clicked.emit()
