from __future__ import annotations

import pytest

from fakes import FakeControl
from prefs_app.application.appearance import (
    COLOR_SCHEMES,
    AppearanceController,
    index_to_scheme,
    scheme_to_index,
    style_mode_for,
)
from prefs_app.application.style import StyleManager, StyleMode
from prefs_app.core.events import EventBus, StyleModeChanged
from prefs_app.settings import MemorySettingsBackend, SettingsStore


@pytest.mark.parametrize("scheme", COLOR_SCHEMES)
def test_scheme_index_mapping_is_a_bijection(scheme: str) -> None:
    assert index_to_scheme(scheme_to_index(scheme)) == scheme


@pytest.mark.parametrize("value", ["purple", "", None, 2])
def test_unknown_scheme_resolves_to_system(value: object) -> None:
    assert scheme_to_index(value) == 0
    assert style_mode_for(value) is StyleMode.DEFAULT


@pytest.mark.parametrize("index", [-1, 3, None, True])
def test_out_of_range_index_maps_to_system(index: object) -> None:
    assert index_to_scheme(index) == "system"


def test_style_modes() -> None:
    assert style_mode_for("system") is StyleMode.DEFAULT
    assert style_mode_for("light") is StyleMode.FORCE_LIGHT
    assert style_mode_for("dark") is StyleMode.FORCE_DARK


def test_load_sets_selector_and_style(bus: EventBus, style_manager: StyleManager) -> None:
    store = SettingsStore.open(MemorySettingsBackend({"color-scheme": "light"}), bus)
    combo = FakeControl("color_combo", selected=0)

    AppearanceController(store, style_manager, bus).bind_selector(combo)

    assert combo.get_property("selected") == 1
    assert style_manager.mode is StyleMode.FORCE_LIGHT
    # Loading does not write anything back.
    assert store.get("color-scheme") == "light"


def test_corrupt_value_loads_as_system(bus: EventBus, style_manager: StyleManager) -> None:
    backend = MemorySettingsBackend({"color-scheme": "purple"})
    store = SettingsStore.open(backend, bus)
    combo = FakeControl("color_combo", selected=2)

    AppearanceController(store, style_manager, bus).bind_selector(combo)

    assert combo.get_property("selected") == 0
    assert style_manager.mode is StyleMode.DEFAULT
    assert backend.snapshot()["color-scheme"] == "purple"


def test_selecting_dark_persists_and_restyles_in_same_call(
    store: SettingsStore, style_manager: StyleManager, bus: EventBus
) -> None:
    combo = FakeControl("color_combo", selected=0)
    controller = AppearanceController(store, style_manager, bus)
    controller.bind_selector(combo)
    modes: list[str] = []
    bus.subscribe(StyleModeChanged, lambda evt: modes.append(evt.mode))

    combo.set_property("selected", 2)

    assert store.get("color-scheme") == "dark"
    assert style_manager.mode is StyleMode.FORCE_DARK
    assert modes == ["force-dark"]


def test_external_change_restyles_and_resyncs_selector(backend: MemorySettingsBackend, bus: EventBus) -> None:
    style_manager = StyleManager(bus)
    store = SettingsStore.open(backend, bus)
    combo = FakeControl("color_combo", selected=0)
    controller = AppearanceController(store, style_manager, bus)
    controller.bind_selector(combo)
    controller.watch()

    other = SettingsStore.open(backend, EventBus())
    other.set("color-scheme", "dark")

    assert style_manager.mode is StyleMode.FORCE_DARK
    assert combo.get_property("selected") == 2
    assert store.get("color-scheme") == "dark"


def test_watch_without_selector_applies_style(store: SettingsStore, style_manager: StyleManager, bus: EventBus) -> None:
    controller = AppearanceController(store, style_manager, bus)
    handle = controller.watch()

    store.set("color-scheme", "light")
    assert style_manager.mode is StyleMode.FORCE_LIGHT

    handle.dispose()
    store.set("color-scheme", "dark")
    assert style_manager.mode is StyleMode.FORCE_LIGHT


def test_style_manager_announces_only_changes(bus: EventBus) -> None:
    manager = StyleManager(bus)
    modes: list[str] = []
    bus.subscribe(StyleModeChanged, lambda evt: modes.append(evt.mode))

    manager.set_mode(StyleMode.DEFAULT)
    manager.set_mode(StyleMode.FORCE_DARK)
    manager.set_mode(StyleMode.FORCE_DARK)

    assert modes == ["force-dark"]


def test_external_unknown_scheme_is_not_overwritten_by_selector_resync(
    backend: MemorySettingsBackend, bus: EventBus, style_manager: StyleManager
) -> None:
    store = SettingsStore.open(backend, bus)
    store.set("color-scheme", "dark")
    combo = FakeControl("color_combo", selected=0)
    AppearanceController(store, style_manager, bus).bind_selector(combo)
    assert combo.get_property("selected") == 2

    other = SettingsStore.open(backend, EventBus())
    other.set("color-scheme", "purple")

    assert combo.get_property("selected") == 0
    assert style_manager.mode is StyleMode.DEFAULT
    assert backend.snapshot()["color-scheme"] == "purple"


def test_user_choice_after_unknown_scheme_is_persisted(
    backend: MemorySettingsBackend, bus: EventBus, style_manager: StyleManager
) -> None:
    backend.set_value("color-scheme", "purple")
    store = SettingsStore.open(backend, bus)
    combo = FakeControl("color_combo", selected=0)
    AppearanceController(store, style_manager, bus).bind_selector(combo)

    combo.set_property("selected", 1)

    assert backend.snapshot()["color-scheme"] == "light"
    assert style_manager.mode is StyleMode.FORCE_LIGHT
