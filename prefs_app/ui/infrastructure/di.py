"""UI composition container.

Adds the Qt-only collaborators (settings backend, theme manager) on top of
the application container to preserve layer boundaries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prefs_app.application.container import Container as AppContainer
from prefs_app.settings.backends import MemorySettingsBackend

if TYPE_CHECKING:
    from prefs_app.ui.theme.manager import ThemeManager


class Container(AppContainer):
    def __init__(self, *, ephemeral: bool = False) -> None:
        if ephemeral:
            super().__init__(MemorySettingsBackend)
        else:
            from prefs_app.ui.infrastructure.settings import QSettingsBackend

            super().__init__(QSettingsBackend)
        self.theme_manager: ThemeManager | None = None


__all__ = ["Container"]
