"""Application entry point and setup for Bullseye."""

import logging
import random
import sys
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from bullseye.core.game import Game
from bullseye.core.interaction import InteractionController
from bullseye.core.settings import Settings, load_settings
from bullseye.ui.colors import palette_for
from bullseye.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def system_theme(app: QApplication) -> str:
    """Follow the operating system's light/dark preference."""
    scheme = app.styleHints().colorScheme()
    return "dark" if scheme == Qt.ColorScheme.Dark else "light"


def build_controller(settings: Settings, rng: Optional[random.Random] = None) -> InteractionController:
    """Create a fresh game and its controller from loaded settings."""
    game = Game(rng=rng, minimum=settings.minimum, maximum=settings.maximum)
    return InteractionController(
        game,
        default_value=settings.default,
        minimum=settings.minimum,
        maximum=settings.maximum,
    )


def run() -> None:
    """Load settings, build the game and start the main window."""
    configure_logging()
    settings = load_settings()

    app = QApplication(sys.argv)
    app.setApplicationName("Bullseye")
    app.setApplicationDisplayName("Bullseye")

    theme = system_theme(app)
    logging.info("Starting Bullseye: range %d-%d, %s theme", settings.minimum, settings.maximum, theme)

    window = MainWindow(build_controller(settings), palette_for(theme))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
