"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from boardshot.ui.styles.theme import APP_STYLE

    app.setApplicationName("Boardshot")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from boardshot.ui.dialogs.settings_dialog import AppSettings
    from boardshot.ui.main_window import MainWindow

    load_dotenv()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    settings = AppSettings.from_env()
    _LOGGER.info("Using move server %s", settings.server_url)
    window = MainWindow(settings)
    window.show()

    return app.exec()
