"""Composition root / DI container.

Owns the process-wide collaborators: event bus, style manager, settings
store. The UI layer subclasses it to supply the Qt settings backend.
"""

from __future__ import annotations

from collections.abc import Callable

from prefs_app.application.style import StyleManager
from prefs_app.core.events import EventBus
from prefs_app.settings.backends import MemorySettingsBackend, SettingsBackend
from prefs_app.settings.store import SettingsStore


class Container:
    """Resolves application services. Single place to swap implementations if needed."""

    def __init__(self, backend_factory: Callable[[], SettingsBackend] | None = None) -> None:
        self._backend_factory = backend_factory or MemorySettingsBackend
        self._event_bus: EventBus | None = None
        self._style_manager: StyleManager | None = None
        self._settings_store: SettingsStore | None = None

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus()
        return self._event_bus

    @property
    def style_manager(self) -> StyleManager:
        if self._style_manager is None:
            self._style_manager = StyleManager(self.event_bus)
        return self._style_manager

    @property
    def settings_store(self) -> SettingsStore:
        """Opened on first access. Raises SettingsStoreError if that fails."""
        if self._settings_store is None:
            self._settings_store = SettingsStore.open(self._backend_factory(), self.event_bus)
        return self._settings_store

    def shutdown(self) -> None:
        if self._settings_store is not None:
            self._settings_store.close()
            self._settings_store = None
