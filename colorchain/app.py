"""Application entry point and setup for Color Chain."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from colorchain.core.levels import LevelFactory
from colorchain.core.progress import ProgressStore
from colorchain.core.session import GameSession
from colorchain.core.settings import SettingsStore
from colorchain.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_session(progress_store: ProgressStore) -> GameSession:
    """Session restored from saved progress, with completions written back to the store."""
    session = GameSession(LevelFactory(), on_save=progress_store.save_game_state)
    state = progress_store.load_game_state()
    session.load_game(state)
    if not session.load_level(state.current_level):
        session.load_level(1)
    return session


def run() -> None:
    """Initialize the application, restore progress, and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Color Chain")
    app.setApplicationDisplayName("Color Chain")

    progress_store = ProgressStore()
    settings_store = SettingsStore()
    session = create_session(progress_store)

    window = MainWindow(session=session, progress_store=progress_store, settings_store=settings_store)

    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(900, geometry.width()), min(900, geometry.height()))
    window.show()

    sys.exit(app.exec())
