"""
Page stack: QStackedWidget with named, titled pages.
"""
from __future__ import annotations

import logging

from PySide6.QtWidgets import QStackedWidget, QWidget

from prefs_app.application.ports.pages import PageInfo

log = logging.getLogger(__name__)

# Dynamic Qt properties carrying the page identity
NAME_PROPERTY = "pageName"
TITLE_PROPERTY = "pageTitle"


def set_page_name(widget: QWidget, name: str) -> None:
    """Namer for pages attached through ``append``."""
    widget.setObjectName(name)


class PageStack(QStackedWidget):
    """Content area. Pages are looked up by name, in insertion order."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("pageStack")

    def add_titled(self, child: QWidget, name: str, title: str) -> None:
        child.setProperty(NAME_PROPERTY, name)
        child.setProperty(TITLE_PROPERTY, title)
        self.addWidget(child)

    def append(self, child: QWidget) -> None:
        self.addWidget(child)

    @staticmethod
    def _page_name(widget: QWidget) -> str:
        return str(widget.property(NAME_PROPERTY) or widget.objectName())

    def pages(self) -> list[PageInfo]:
        infos: list[PageInfo] = []
        for index in range(self.count()):
            widget = self.widget(index)
            infos.append(PageInfo(self._page_name(widget), str(widget.property(TITLE_PROPERTY) or "")))
        return infos

    def page(self, name: str) -> QWidget | None:
        for index in range(self.count()):
            widget = self.widget(index)
            if self._page_name(widget) == name:
                return widget
        return None

    def set_visible_name(self, name: str) -> None:
        widget = self.page(name)
        if widget is None:
            log.warning("No page named %r", name, extra={"page": name})
            return
        if widget is not self.currentWidget():
            self.setCurrentWidget(widget)

    def visible_name(self) -> str | None:
        widget = self.currentWidget()
        return None if widget is None else self._page_name(widget)
