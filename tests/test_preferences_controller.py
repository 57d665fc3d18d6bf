from __future__ import annotations

import pytest

from fakes import FakeControl, FakeLoader, FakeNavigation, FakeRevealer, TitledHost, page_resources
from prefs_app.application.preferences import PAGE_SPECS, PreferencesController
from prefs_app.application.style import StyleManager, StyleMode
from prefs_app.core.errors import SchemaError
from prefs_app.core.events import EventBus, RowSelected
from prefs_app.settings import MemorySettingsBackend, SettingsStore


def _controller(
    resources: dict,
    backend: MemorySettingsBackend | None = None,
) -> tuple[PreferencesController, TitledHost, FakeNavigation, FakeRevealer, EventBus, StyleManager]:
    bus = EventBus()
    store = SettingsStore.open(backend or MemorySettingsBackend(), bus)
    style = StyleManager(bus)
    host, nav, revealer = TitledHost(), FakeNavigation(), FakeRevealer()
    controller = PreferencesController(store, style, bus, FakeLoader(resources), host, nav, revealer)
    return controller, host, nav, revealer, bus, style


def test_builds_all_pages_in_fixed_order() -> None:
    controller, host, nav, _revealer, _bus, _style = _controller(page_resources())

    controller.build()

    expected = [spec.name for spec in PAGE_SPECS]
    assert expected == ["general", "appearance", "keyboard", "network", "about"]
    assert controller.registry.names() == expected
    assert [name for name, _ in nav.rows] == expected
    assert [title for _, title in nav.rows] == ["General", "Appearance", "Keyboard", "Network", "About"]


def test_missing_page_does_not_abort_construction() -> None:
    controller, host, nav, revealer, _bus, _style = _controller(page_resources(skip=("keyboard",)))

    controller.build()

    assert controller.registry.names() == ["general", "appearance", "network", "about"]
    assert [name for name, _ in nav.rows] == ["general", "appearance", "network", "about"]
    assert nav.selected == 0
    assert host.visible == "general"
    assert revealer.calls[0] is True


def test_persisted_login_flag_is_shown_without_interaction() -> None:
    launch = FakeControl("launch_row", active=False)
    backend = MemorySettingsBackend({"launch-at-login": True})
    controller, *_ = _controller(page_resources(launch_row=launch), backend)

    controller.build()

    assert launch.get_property("active") is True


def test_toggles_write_through_to_store() -> None:
    notif = FakeControl("notif_row")
    network = FakeControl("network_row")
    controller, *_ = _controller(page_resources(notif_row=notif, network_row=network))
    controller.build()

    notif.set_property("active", False)
    network.set_property("active", False)

    assert controller.store.get("show-notifications") is False
    assert controller.store.get("enable-networking") is False


def test_selector_flip_to_dark_persists_and_forces_dark() -> None:
    combo = FakeControl("color_combo", selected=0)
    controller, _host, _nav, _rev, _bus, style = _controller(page_resources(color_combo=combo))
    controller.build()

    combo.set_property("selected", 2)

    assert controller.store.get("color-scheme") == "dark"
    assert style.mode is StyleMode.FORCE_DARK


def test_initial_style_follows_stored_scheme() -> None:
    backend = MemorySettingsBackend({"color-scheme": "dark"})
    controller, _host, _nav, _rev, _bus, style = _controller(page_resources(skip=("appearance",)), backend)

    controller.build()

    assert style.mode is StyleMode.FORCE_DARK


def test_row_selection_switches_page() -> None:
    controller, host, _nav, _rev, bus, _style = _controller(page_resources())
    controller.build()

    bus.publish(RowSelected("network"))

    assert host.visible == "network"


def test_show_page_by_name() -> None:
    controller, host, nav, _rev, _bus, _style = _controller(page_resources())
    controller.build()

    assert controller.show_page("about") is True
    assert nav.selected == 4
    assert host.visible == "about"


def test_dispose_releases_every_binding() -> None:
    launch = FakeControl("launch_row")
    combo = FakeControl("color_combo", selected=0)
    controller, host, _nav, _rev, bus, style = _controller(page_resources(launch_row=launch, color_combo=combo))
    controller.build()
    assert controller.handle_count > 0

    controller.dispose()
    launch.set_property("active", True)
    combo.set_property("selected", 2)
    controller.store.set("color-scheme", "light")
    bus.publish(RowSelected("network"))

    assert controller.handle_count == 0
    assert controller.store.get("launch-at-login") is False
    assert style.mode is StyleMode.DEFAULT
    assert host.visible == "general"


def test_build_is_idempotent() -> None:
    controller, _host, nav, *_ = _controller(page_resources())
    controller.build()
    controller.build()

    assert nav.row_count() == 5


def test_schema_mismatch_in_binder_is_fatal() -> None:
    controller, *_ = _controller(page_resources())

    def _bad_binder(definition) -> None:
        controller.store.bind("not-declared", FakeControl("x"), "active")

    controller.bind_general = _bad_binder  # type: ignore[method-assign]

    with pytest.raises(SchemaError):
        controller.build()
