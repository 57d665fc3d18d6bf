"""Composition of the preferences window model.

``PreferencesController.build()`` registers the pages, builds the sidebar,
selects the first page and wires the color scheme, in that order. All
bindings and subscriptions made here are released by ``dispose()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from prefs_app.application.appearance import AppearanceController
from prefs_app.application.page_registry import Binder, Namer, PageRegistry, resolve_page_adder
from prefs_app.application.ports.pages import (
    ContentRevealer,
    NavigationList,
    PageDefinition,
    PageLoader,
    VisiblePageHost,
)
from prefs_app.application.sidebar_sync import SidebarSynchronizer
from prefs_app.application.style import StyleManager
from prefs_app.core.disposables import CompositeDisposable
from prefs_app.core.events import EventBus
from prefs_app.settings.store import SettingsStore

log = logging.getLogger(__name__)

TOGGLE_PROPERTY = "active"
SELECTOR_PROPERTY = "selected"


@dataclass(frozen=True, slots=True)
class PageSpec:
    name: str
    title: str
    resource_path: str
    binder: str | None = None  # PreferencesController method name


PAGE_SPECS: tuple[PageSpec, ...] = (
    PageSpec("general", "General", "pages/general.ui", "bind_general"),
    PageSpec("appearance", "Appearance", "pages/appearance.ui", "bind_appearance"),
    PageSpec("keyboard", "Keyboard", "pages/keyboard.ui"),
    PageSpec("network", "Network", "pages/network.ui", "bind_network"),
    PageSpec("about", "About", "pages/about.ui"),
)


class PreferencesController:
    def __init__(
        self,
        store: SettingsStore,
        style_manager: StyleManager,
        bus: EventBus,
        loader: PageLoader,
        page_host: VisiblePageHost,
        navigation: NavigationList,
        revealer: ContentRevealer | None = None,
        *,
        namer: Namer | None = None,
        page_specs: tuple[PageSpec, ...] = PAGE_SPECS,
    ) -> None:
        self._store = store
        self._bus = bus
        self._page_specs = page_specs
        self._handles = CompositeDisposable()
        self.registry = PageRegistry(loader, resolve_page_adder(page_host, namer))
        self.sidebar = SidebarSynchronizer(navigation, page_host, bus, revealer)
        self.appearance = AppearanceController(store, style_manager, bus)
        self._built = False

    @property
    def store(self) -> SettingsStore:
        return self._store

    def build(self) -> None:
        if self._built:
            return
        self._built = True
        for spec in self._page_specs:
            binder: Binder | None = getattr(self, spec.binder) if spec.binder else None
            self.registry.register_page(spec.resource_path, spec.name, spec.title, binder)
        self.sidebar.rebuild()
        self._handles.add(self.sidebar.attach())
        self.sidebar.select_first()
        self.appearance.apply_style_from_settings()
        self._handles.add(self.appearance.watch())
        log.info("Preferences ready with pages: %s", ", ".join(self.registry.names()))

    def bind_general(self, definition: PageDefinition) -> None:
        launch_row = definition.get_control("launch_row")
        notif_row = definition.get_control("notif_row")
        if launch_row is not None:
            self._handles.add(self._store.bind("launch-at-login", launch_row, TOGGLE_PROPERTY))
        if notif_row is not None:
            self._handles.add(self._store.bind("show-notifications", notif_row, TOGGLE_PROPERTY))

    def bind_network(self, definition: PageDefinition) -> None:
        net_row = definition.get_control("network_row")
        if net_row is not None:
            self._handles.add(self._store.bind("enable-networking", net_row, TOGGLE_PROPERTY))

    def bind_appearance(self, definition: PageDefinition) -> None:
        combo = definition.get_control("color_combo")
        if combo is None:
            return
        self._handles.add(self.appearance.bind_selector(combo, SELECTOR_PROPERTY))

    def show_page(self, name: str) -> bool:
        return self.sidebar.select_name(name)

    @property
    def handle_count(self) -> int:
        return len(self._handles)

    def dispose(self) -> None:
        self._handles.dispose()
