"""Tests for the time selector and pause toggle."""

from __future__ import annotations

from chessdss.game.interfaces import ClockStatus
from chessdss.ui.i18n import set_language
from chessdss.ui.panels.control_panel import ControlPanel


def test_presets_and_default() -> None:
    panel = ControlPanel()
    assert panel._combo.count() == 3
    assert panel._combo.itemText(1) == "10 minutes"
    assert panel.selected_minutes() == 5


def test_set_minutes_is_silent() -> None:
    panel = ControlPanel()
    seen: list[int] = []
    panel.minutes_selected.connect(seen.append)
    panel.set_minutes(20)
    assert panel.selected_minutes() == 20
    assert seen == []
    panel.set_minutes(7)
    assert panel.selected_minutes() == 20


def test_activation_emits_minutes() -> None:
    panel = ControlPanel()
    seen: list[int] = []
    panel.minutes_selected.connect(seen.append)
    panel._on_activated(1)
    assert seen == [10]


def test_selector_enabled_only_when_idle() -> None:
    panel = ControlPanel()
    panel.set_clock_status(ClockStatus.IDLE)
    assert panel.is_selector_enabled()
    assert not panel._btn_pause.isEnabled()

    for status in (ClockStatus.RUNNING, ClockStatus.PAUSED, ClockStatus.STOPPED):
        panel.set_clock_status(status)
        assert not panel.is_selector_enabled()


def test_pause_toggle() -> None:
    panel = ControlPanel()
    events: list[str] = []
    panel.pause_clicked.connect(lambda: events.append("pause"))
    panel.resume_clicked.connect(lambda: events.append("resume"))

    panel.set_clock_status(ClockStatus.RUNNING)
    assert panel._btn_pause.isEnabled()
    assert panel._btn_pause.text() == "Pause"
    panel._btn_pause.click()

    panel.set_clock_status(ClockStatus.PAUSED)
    assert panel._btn_pause.text() == "Resume"
    panel._btn_pause.click()

    assert events == ["pause", "resume"]


def test_retranslate() -> None:
    panel = ControlPanel()
    set_language("Russian")
    panel.retranslate_ui()
    assert panel._combo.itemText(0) != "5 minutes"
