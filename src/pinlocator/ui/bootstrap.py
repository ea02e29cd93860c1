"""Logging setup and Qt application startup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the ``pinlocator`` logger with a stdout handler."""
    logger = logging.getLogger("pinlocator")
    logger.setLevel(level)

    # Avoid duplicate output when the app is restarted in-process.
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)


def _configure_application(app: QApplication) -> None:
    """Set the application name, Fusion style and the slate stylesheet."""
    from pinlocator.ui.styles.theme import APP_STYLE

    app.setApplicationName("PinLocator")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, initial_file: Path | None = None
) -> int:
    """Show the main window, optionally open *initial_file*, run the event loop."""
    from PyQt6.QtWidgets import QApplication

    from pinlocator.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    if initial_file is not None:
        _LOGGER.info("Opening %s", initial_file)
        window.open_path(initial_file)

    return app.exec()
