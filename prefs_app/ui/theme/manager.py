"""
ThemeManager: turns the shared style mode into a QPalette and application stylesheet.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtGui import QColor, QGuiApplication, QPalette
from PySide6.QtWidgets import QApplication

from prefs_app.application.style import StyleManager, StyleMode
from prefs_app.core.events import EventBus, StyleModeChanged
from prefs_app.ui.theme.tokens import DARK, LIGHT, TokenSet

log = logging.getLogger(__name__)

THEME_DARK = "dark"
THEME_LIGHT = "light"


def system_prefers_dark() -> bool:
    hints = QGuiApplication.styleHints()
    return hints is not None and hints.colorScheme() == Qt.ColorScheme.Dark


def resolve_theme(mode: StyleMode, prefers_dark: bool) -> str:
    if mode == StyleMode.FORCE_DARK:
        return THEME_DARK
    if mode == StyleMode.FORCE_LIGHT:
        return THEME_LIGHT
    return THEME_DARK if prefers_dark else THEME_LIGHT


class ThemeManager(QObject):
    """
    Applies the current style mode to the whole application; emits theme_changed.
    No global singleton: one instance per container, driven by StyleManager events.
    """

    theme_changed = Signal(str)  # effective theme name

    def __init__(self, style_manager: StyleManager, bus: EventBus) -> None:
        super().__init__()
        self._style_manager = style_manager
        self._current: str | None = None
        self._subscription = bus.subscribe_weak(StyleModeChanged, self._on_style_mode_changed)
        hints = QGuiApplication.styleHints()
        if hints is not None:
            hints.colorSchemeChanged.connect(self._on_system_scheme_changed)

    def get_theme(self) -> str | None:
        return self._current

    def apply(self) -> str:
        name = resolve_theme(self._style_manager.mode, system_prefers_dark())
        if name == self._current:
            return name
        self._current = name
        source = DARK if name == THEME_DARK else LIGHT
        self._apply_palette(source)
        self._apply_stylesheet(source)
        log.debug("Theme applied: %s", name)
        self.theme_changed.emit(name)
        return name

    def close(self) -> None:
        self._subscription.dispose()

    def _on_style_mode_changed(self, _event: StyleModeChanged) -> None:
        self.apply()

    def _on_system_scheme_changed(self, _scheme: Qt.ColorScheme) -> None:
        if self._style_manager.mode == StyleMode.DEFAULT:
            self.apply()

    def _apply_palette(self, t: TokenSet) -> None:
        app = QApplication.instance()
        if not app:
            return
        pal = QPalette()
        pal.setColor(QPalette.ColorRole.Window, QColor(t.background_main))
        pal.setColor(QPalette.ColorRole.Base, QColor(t.surface))
        pal.setColor(QPalette.ColorRole.Button, QColor(t.surface_hover))
        pal.setColor(QPalette.ColorRole.WindowText, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.ButtonText, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.Text, QColor(t.text_primary))
        pal.setColor(QPalette.ColorRole.Highlight, QColor(t.primary))
        pal.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
        pal.setColor(QPalette.ColorRole.PlaceholderText, QColor(t.text_secondary))
        app.setPalette(pal)

    def _apply_stylesheet(self, t: TokenSet) -> None:
        app = QApplication.instance()
        if not app:
            return
        app.setStyleSheet(_build_application_stylesheet(t))


def _build_application_stylesheet(t: TokenSet) -> str:
    """Single global stylesheet so every page updates when the theme changes."""
    return f"""
        QWidget, QMainWindow {{
            background-color: {t.background_main};
            color: {t.text_primary};
        }}
        #sidebarList {{
            background-color: {t.surface};
            border: none;
            border-right: 1px solid {t.border};
            padding: {t.space_sm}px;
        }}
        #sidebarList::item {{
            padding: {t.space_sm}px {t.space_md}px;
            border-radius: {t.radius_sm}px;
        }}
        #sidebarList::item:selected {{
            background-color: {t.surface_hover};
            color: {t.text_primary};
        }}
        QGroupBox {{
            border: 1px solid {t.border};
            border-radius: {t.radius_md}px;
            margin-top: 18px;
            padding: {t.space_md}px;
            font-weight: bold;
        }}
        QComboBox {{
            background-color: {t.surface};
            border: 1px solid {t.border};
            border-radius: {t.radius_sm}px;
            padding: 4px 6px;
            min-height: 24px;
        }}
        QToolButton {{
            border: none;
            padding: {t.space_sm}px;
        }}
        QLabel[secondary="true"] {{
            color: {t.text_secondary};
        }}
    """
