"""Infrastructure: application bootstrap, DI, settings backend, page loader.

Keep this package import lightweight: do not import Qt GUI modules at import time.
Some headless CI environments have PySide6 installed but miss runtime GUI libs
(e.g. ``libGL.so.1``). Lazy exports below allow importing
``prefs_app.ui.infrastructure.di`` without triggering Qt GUI initialization.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "create_application",
    "run_application",
    "Container",
    "install_error_boundary",
    "QSettingsBackend",
    "QtPropertyTarget",
    "UiFilePageLoader",
]

_EXPORTS = {
    "create_application": "prefs_app.ui.infrastructure.application",
    "run_application": "prefs_app.ui.infrastructure.application",
    "Container": "prefs_app.ui.infrastructure.di",
    "install_error_boundary": "prefs_app.ui.infrastructure.error_boundary",
    "QSettingsBackend": "prefs_app.ui.infrastructure.settings",
    "QtPropertyTarget": "prefs_app.ui.infrastructure.qt_binding",
    "UiFilePageLoader": "prefs_app.ui.infrastructure.ui_loader",
}


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)
