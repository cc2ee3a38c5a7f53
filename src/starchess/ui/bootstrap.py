"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "STARCHESS_LOG_LEVEL"


def _configure_logging() -> None:
    """Set the root log level from ``STARCHESS_LOG_LEVEL`` (default WARNING)."""
    name = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not known:
        _LOGGER.warning("Unknown %s=%r, using WARNING", _LOG_LEVEL_ENV, name)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from starchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Starchess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from starchess.ui.main_window import MainWindow

    _configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.info("Starchess window shown")

    return app.exec()
