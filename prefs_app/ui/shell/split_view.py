"""
Split view: sidebar beside content; below the breakpoint only one of them is shown.
"""
from __future__ import annotations

from PySide6.QtGui import QResizeEvent
from PySide6.QtWidgets import QHBoxLayout, QToolButton, QVBoxLayout, QWidget

from prefs_app.config import NARROW_BREAKPOINT_PX, SIDEBAR_WIDTH

QWIDGETSIZE_MAX = (1 << 24) - 1


class SplitView(QWidget):
    def __init__(
        self,
        sidebar: QWidget,
        content: QWidget,
        parent: QWidget | None = None,
        breakpoint: int = NARROW_BREAKPOINT_PX,
    ) -> None:
        super().__init__(parent)
        self._sidebar = sidebar
        self._breakpoint = breakpoint
        self._collapsed = False
        self._show_content = False

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._content_pane = QWidget()
        pane_layout = QVBoxLayout(self._content_pane)
        pane_layout.setContentsMargins(0, 0, 0, 0)
        pane_layout.setSpacing(0)
        self._back_btn = QToolButton()
        self._back_btn.setObjectName("backButton")
        self._back_btn.setText("‹ Back")
        self._back_btn.clicked.connect(lambda: self.set_show_content(False))
        pane_layout.addWidget(self._back_btn)
        pane_layout.addWidget(content, 1)

        layout.addWidget(sidebar)
        layout.addWidget(self._content_pane, 1)
        self._update_visibility()

    def is_collapsed(self) -> bool:
        return self._collapsed

    def show_content(self) -> bool:
        return self._show_content

    def set_collapsed(self, collapsed: bool) -> None:
        if collapsed == self._collapsed:
            return
        self._collapsed = collapsed
        self._update_visibility()

    def set_show_content(self, show: bool) -> None:
        if show == self._show_content:
            return
        self._show_content = show
        self._update_visibility()

    def _update_visibility(self) -> None:
        if not self._collapsed:
            self._sidebar.setFixedWidth(SIDEBAR_WIDTH)
            self._sidebar.setVisible(True)
            self._content_pane.setVisible(True)
            self._back_btn.setVisible(False)
            return
        self._sidebar.setMinimumWidth(0)
        self._sidebar.setMaximumWidth(QWIDGETSIZE_MAX)
        self._sidebar.setVisible(not self._show_content)
        self._content_pane.setVisible(self._show_content)
        self._back_btn.setVisible(True)

    def resizeEvent(self, event: QResizeEvent) -> None:
        self.set_collapsed(event.size().width() < self._breakpoint)
        super().resizeEvent(event)
