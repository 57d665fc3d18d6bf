"""Sidebar navigation derived from the page container.

Rows are never patched: every rebuild discards all rows and recreates one per
page, in container order.
"""

from __future__ import annotations

import logging

from prefs_app.application.ports.pages import (
    ContentRevealer,
    NavigationList,
    PageEnumerator,
    VisiblePageHost,
)
from prefs_app.core.disposables import Disposable
from prefs_app.core.events import EventBus, RowSelected

log = logging.getLogger(__name__)


class SidebarSynchronizer:
    def __init__(
        self,
        navigation: NavigationList,
        pages_host: VisiblePageHost,
        bus: EventBus,
        revealer: ContentRevealer | None = None,
    ) -> None:
        self._nav = navigation
        self._host = pages_host
        self._bus = bus
        self._revealer = revealer

    def rebuild(self) -> int:
        self._nav.clear_rows()
        if not isinstance(self._host, PageEnumerator):
            log.debug("Page container cannot enumerate pages; sidebar left empty")
            return 0
        for info in self._host.pages():
            self._nav.append_row(info.name, info.title)
        count = self._nav.row_count()
        log.debug("Sidebar rebuilt with %d rows", count)
        return count

    def attach(self) -> Disposable:
        return self._bus.subscribe(RowSelected, self._on_row_selected)

    def _on_row_selected(self, event: RowSelected) -> None:
        if event.name is None:
            return
        self.show_page(event.name)

    def show_page(self, name: str) -> None:
        self._host.set_visible_name(name)
        if self._revealer is not None:
            self._revealer.set_show_content(True)

    def select_first(self) -> str | None:
        name = self._nav.row_name(0)
        if name is None:
            return None
        self._nav.select_row(0)
        self.show_page(name)
        return name

    def select_name(self, name: str) -> bool:
        for index in range(self._nav.row_count()):
            if self._nav.row_name(index) == name:
                self._nav.select_row(index)
                self.show_page(name)
                return True
        return False
