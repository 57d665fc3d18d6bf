"""
Entry point for the preferences window.

Run: python main.py [--ephemeral] [--page NAME]
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from prefs_app.application.preferences import PAGE_SPECS
from prefs_app.core.errors import SettingsStoreError
from prefs_app.core.observability.logging_config import setup_logging
from prefs_app.core.version import get_version_string

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prefs-window", description="Application settings window.")
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="keep settings in memory only; nothing is persisted",
    )
    parser.add_argument(
        "--page",
        choices=[spec.name for spec in PAGE_SPECS],
        help="page shown when the window opens",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args, qt_args = build_parser().parse_known_args(argv)
    setup_logging()
    log.info("Starting settings window %s", get_version_string())

    from PySide6.QtWidgets import QMessageBox

    from prefs_app.ui.infrastructure import (
        Container,
        create_application,
        install_error_boundary,
        run_application,
    )
    from prefs_app.ui.shell import PreferencesWindow
    from prefs_app.ui.theme.manager import ThemeManager

    install_error_boundary()
    app = create_application([sys.argv[0], *qt_args])
    container = Container(ephemeral=args.ephemeral)
    theme_manager = ThemeManager(container.style_manager, container.event_bus)
    container.theme_manager = theme_manager

    try:
        window = PreferencesWindow(container, initial_page=args.page)
    except SettingsStoreError as exc:
        log.error("Cannot open settings store: %s", exc)
        QMessageBox.critical(None, "Settings", f"The settings store could not be opened.\n\n{exc}")
        sys.exit(1)

    theme_manager.apply()
    window.show()
    app.aboutToQuit.connect(theme_manager.close)
    app.aboutToQuit.connect(container.shutdown)
    run_application(app)
