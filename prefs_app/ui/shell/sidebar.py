"""
Sidebar navigation list: one row per page, row selection published on the event bus.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QAbstractItemView, QListWidget, QListWidgetItem, QWidget

from prefs_app.core.events import EventBus, RowSelected

NAME_ROLE = Qt.ItemDataRole.UserRole


class SidebarList(QListWidget):
    def __init__(self, bus: EventBus, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._bus = bus
        self.setObjectName("sidebarList")
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.currentRowChanged.connect(self._on_current_row_changed)

    def clear_rows(self) -> None:
        self.clear()

    def append_row(self, name: str, title: str) -> None:
        item = QListWidgetItem(title or name)
        item.setData(NAME_ROLE, name)
        item.setToolTip(title or name)
        self.addItem(item)

    def row_count(self) -> int:
        return self.count()

    def row_name(self, index: int) -> str | None:
        item = self.item(index)
        return None if item is None else item.data(NAME_ROLE)

    def select_row(self, index: int) -> None:
        self.setCurrentRow(index)

    def _on_current_row_changed(self, row: int) -> None:
        self._bus.publish(RowSelected(self.row_name(row) if row >= 0 else None))
