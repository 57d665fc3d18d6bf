"""Theme tokens and ThemeManager for Qt UI."""

from prefs_app.ui.theme.manager import THEME_DARK, THEME_LIGHT, ThemeManager
from prefs_app.ui.theme.tokens import DARK, LIGHT, TokenSet

__all__ = [
    "DARK",
    "LIGHT",
    "TokenSet",
    "ThemeManager",
    "THEME_DARK",
    "THEME_LIGHT",
]
