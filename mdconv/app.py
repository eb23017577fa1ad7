from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from mdconv.di.container import Container
from mdconv.services.config.app_config import build_app_config
from mdconv.utils.constants import APP_NAME, APP_ORG
from mdconv.utils.logger import configure_logging, get_logger

log = get_logger(__name__)


def read_start_text(path: Path) -> str:
    """Markdown to preload from the command line; unreadable files start an empty editor."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Could not read %s: %s", path, e)
        return ""


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    configure_logging(config.log_level())

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional Markdown file passed as first CLI argument
    start_text = read_start_text(Path(argv[1])) if len(argv) > 1 else ""

    win = container.build_main_window(start_text=start_text, app_title=APP_NAME)
    win.show()
    log.info("%s %s started (config: %s)", APP_NAME, config.get_version(), config.loaded_from)

    return app.exec()
