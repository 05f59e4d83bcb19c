"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessdss.config import AppConfig

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

APP_NAME = "Chess DSS"


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessdss.ui.styles.theme import APP_STYLE

    app.setApplicationName(APP_NAME)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    config: AppConfig | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessdss.ui.main_window import MainWindow

    config = config or AppConfig()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)
    _LOGGER.info("Using analysis service at %s", config.api_base)

    window = MainWindow(config)
    window.show()

    return app.exec()
