"""App shell: preferences window, sidebar list, page stack, split view."""

from prefs_app.ui.shell.main_window import PreferencesWindow
from prefs_app.ui.shell.page_stack import PageStack
from prefs_app.ui.shell.sidebar import SidebarList
from prefs_app.ui.shell.split_view import SplitView

__all__ = ["PreferencesWindow", "PageStack", "SidebarList", "SplitView"]
