"""ClockWidget — dual chess clock display and the one-second tick source."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QWidget

from chessdss.core.enums import Side
from chessdss.game.clock import ClockState
from chessdss.game.interfaces import TICK_MS
from chessdss.ui.i18n import t
from chessdss.ui.styles.theme import ACCENT, BORDER, MUTED, SURFACE, TEXT


def format_clock(ms: int) -> str:
    """``MM:SS`` with whole seconds rounded down."""
    total = max(0, ms) // 1000
    return f"{total // 60:02d}:{total % 60:02d}"


class _SingleClock(QWidget):
    """Display for one side's time."""

    def __init__(self, side: Side, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._side = side
        self._active = False

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)

        self._name = QLabel()
        self._name.setFont(QFont("Helvetica Neue", 9))
        layout.addWidget(self._name)
        layout.addStretch(1)

        self._time = QLabel(format_clock(0))
        self._time.setFont(QFont("DejaVu Sans Mono", 16, QFont.Weight.Bold))
        self._time.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        layout.addWidget(self._time)

        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self._apply_style()

    @property
    def is_active(self) -> bool:
        return self._active

    def text(self) -> str:
        return self._time.text()

    def set_name(self, name: str) -> None:
        self._name.setText(name.upper())

    def set_active(self, active: bool) -> None:
        if active != self._active:
            self._active = active
            self._apply_style()

    def update_time(self, ms: int) -> None:
        self._time.setText(format_clock(ms))

    def _apply_style(self) -> None:
        border = ACCENT if self._active else BORDER
        self.setStyleSheet(
            f"_SingleClock {{ background-color: {SURFACE}; "
            f"border: 2px solid {border}; border-radius: 6px; }}"
            f"QLabel {{ color: {TEXT}; background: transparent; border: none; }}"
        )
        self._name.setStyleSheet(f"color: {MUTED};")


class ClockWidget(QWidget):
    """Combined dual clock widget.

    Owns the one-second ``QTimer``: it ticks only while the shown clock
    state is running.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._white_clock = _SingleClock(Side.WHITE)
        self._black_clock = _SingleClock(Side.BLACK)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)
        layout.addWidget(self._white_clock)
        layout.addWidget(self._black_clock)

        self._timer = QTimer(self)
        self._timer.setInterval(TICK_MS)
        self._timer.timeout.connect(self._tick)
        self._on_tick: Callable[[], object] | None = None

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._white_clock.set_name(s.clock_white)
        self._black_clock.set_name(s.clock_black)

    def set_tick_callback(self, on_tick: Callable[[], object] | None) -> None:
        """*on_tick* is called once per second while the clock runs."""
        self._on_tick = on_tick

    def is_ticking(self) -> bool:
        return self._timer.isActive()

    def clock(self, side: Side) -> _SingleClock:
        return self._white_clock if side == Side.WHITE else self._black_clock

    def show_state(self, state: ClockState) -> None:
        """Render *state* and start or stop the tick timer to match it."""
        self._white_clock.update_time(state.white_remaining_ms)
        self._black_clock.update_time(state.black_remaining_ms)

        live = state.active_side is not None and state.ended_at_ms is None
        self._white_clock.set_active(live and state.active_side == Side.WHITE)
        self._black_clock.set_active(live and state.active_side == Side.BLACK)

        if state.running:
            if not self._timer.isActive():
                self._timer.start()
        else:
            self._timer.stop()

    def stop(self) -> None:
        self._timer.stop()

    def _tick(self) -> None:
        if self._on_tick is not None:
            self._on_tick()
