from __future__ import annotations

import os

import pytest

from prefs_app.application.style import StyleManager
from prefs_app.core.events import EventBus
from prefs_app.settings import MemorySettingsBackend, SettingsStore

# Qt tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def backend() -> MemorySettingsBackend:
    return MemorySettingsBackend()


@pytest.fixture
def store(backend: MemorySettingsBackend, bus: EventBus) -> SettingsStore:
    return SettingsStore.open(backend, bus)


@pytest.fixture
def style_manager(bus: EventBus) -> StyleManager:
    return StyleManager(bus)
