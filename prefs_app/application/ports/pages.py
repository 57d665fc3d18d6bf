"""Ports for the page registry and the sidebar.

The Qt shell implements these; tests use plain fakes. Optional capabilities
(titled pages, page enumeration, content reveal) are runtime-checkable
protocols resolved once when the window is composed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from prefs_app.settings.store import BindableTarget


@dataclass(frozen=True, slots=True)
class PageInfo:
    name: str
    title: str


class PageDefinition(Protocol):
    """Object graph of one loaded page resource."""

    def get_object(self, object_id: str) -> Any | None:
        """Raw UI object by identifier (``root`` is the page content)."""

    def get_control(self, object_id: str) -> BindableTarget | None:
        """Control by identifier, wrapped for settings binding."""


class PageLoader(Protocol):
    def load(self, resource_path: str) -> PageDefinition:
        """Load a page. Raises ResourceLoadError when missing or malformed."""


@runtime_checkable
class TitledPageHost(Protocol):
    def add_titled(self, child: Any, name: str, title: str) -> None: ...


@runtime_checkable
class ChildHost(Protocol):
    def append(self, child: Any) -> None: ...


@runtime_checkable
class PageEnumerator(Protocol):
    def pages(self) -> Sequence[PageInfo]: ...


class VisiblePageHost(Protocol):
    def set_visible_name(self, name: str) -> None: ...


class NavigationList(Protocol):
    def clear_rows(self) -> None: ...

    def append_row(self, name: str, title: str) -> None: ...

    def row_count(self) -> int: ...

    def row_name(self, index: int) -> str | None: ...

    def select_row(self, index: int) -> None: ...


@runtime_checkable
class ContentRevealer(Protocol):
    def set_show_content(self, show: bool) -> None: ...
