"""
Preferences window: sidebar + page stack, composed by PreferencesController.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow

from prefs_app.application.ports.pages import PageLoader
from prefs_app.application.preferences import PreferencesController
from prefs_app.config import DEFAULT_WINDOW_SIZE, WINDOW_TITLE
from prefs_app.ui.shell.page_stack import PageStack, set_page_name
from prefs_app.ui.shell.sidebar import SidebarList
from prefs_app.ui.shell.split_view import SplitView

if TYPE_CHECKING:
    from prefs_app.application.container import Container


class PreferencesWindow(QMainWindow):
    """Main window. Bindings live until the window is closed."""

    def __init__(
        self,
        container: Container,
        loader: PageLoader | None = None,
        initial_page: str | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*DEFAULT_WINDOW_SIZE)
        # Opens the settings store; SettingsStoreError propagates to the launcher.
        store = container.settings_store
        bus = container.event_bus

        self._stack = PageStack()
        self._sidebar = SidebarList(bus)
        self._split_view = SplitView(self._sidebar, self._stack)
        self.setCentralWidget(self._split_view)

        if loader is None:
            from prefs_app.ui.infrastructure.ui_loader import UiFilePageLoader

            loader = UiFilePageLoader()
        self._controller = PreferencesController(
            store,
            container.style_manager,
            bus,
            loader,
            self._stack,
            self._sidebar,
            self._split_view,
            namer=set_page_name,
        )
        self._controller.build()
        if initial_page:
            self._controller.show_page(initial_page)

    @property
    def controller(self) -> PreferencesController:
        return self._controller

    @property
    def page_stack(self) -> PageStack:
        return self._stack

    @property
    def sidebar(self) -> SidebarList:
        return self._sidebar

    @property
    def split_view(self) -> SplitView:
        return self._split_view

    def closeEvent(self, event: QCloseEvent) -> None:
        self._controller.dispose()
        super().closeEvent(event)
