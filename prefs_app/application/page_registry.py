"""Page registry: load a page resource, attach it under a stable name, run its binder.

A page that fails to load is skipped; registration of the remaining pages is
unaffected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from prefs_app.application.ports.pages import ChildHost, PageDefinition, PageLoader, TitledPageHost
from prefs_app.core.errors import CapabilityUnavailable, ResourceLoadError

log = logging.getLogger(__name__)

ROOT_ID = "root"

Binder = Callable[[PageDefinition], None]
Namer = Callable[[Any, str], None]


@dataclass(frozen=True, slots=True)
class Page:
    name: str
    title: str
    content: Any
    binder: Binder | None = None


class PageAdder(Protocol):
    def add(self, child: Any, name: str, title: str) -> None: ...


class TitledPageAdder:
    """Preferred path: the container stores name and title itself."""

    def __init__(self, host: object) -> None:
        if not isinstance(host, TitledPageHost):
            raise CapabilityUnavailable(f"{type(host).__name__} has no add_titled()")
        self._host = host

    def add(self, child: Any, name: str, title: str) -> None:
        self._host.add_titled(child, name, title)


class AppendPageAdder:
    """Fallback: generic append, then the name is assigned to the child."""

    def __init__(self, host: ChildHost, namer: Namer | None = None) -> None:
        self._host = host
        self._namer = namer

    def add(self, child: Any, name: str, title: str) -> None:
        self._host.append(child)
        if self._namer is None:
            return
        try:
            self._namer(child, name)
        except (AttributeError, TypeError):
            log.debug("Could not name page %r", name, exc_info=True)


def resolve_page_adder(host: object, namer: Namer | None = None) -> PageAdder:
    try:
        return TitledPageAdder(host)
    except CapabilityUnavailable:
        log.debug("%s: titled pages unavailable, using append", type(host).__name__)
    if not isinstance(host, ChildHost):
        raise TypeError(f"{type(host).__name__} can neither add titled pages nor append children")
    return AppendPageAdder(host, namer)


class PageRegistry:
    def __init__(self, loader: PageLoader, adder: PageAdder) -> None:
        self._loader = loader
        self._adder = adder
        self._pages: list[Page] = []

    @property
    def pages(self) -> tuple[Page, ...]:
        return tuple(self._pages)

    def names(self) -> list[str]:
        return [p.name for p in self._pages]

    def get(self, name: str) -> Page | None:
        for page in self._pages:
            if page.name == name:
                return page
        return None

    def register_page(
        self,
        resource_path: str,
        name: str,
        title: str,
        binder: Binder | None = None,
    ) -> Page | None:
        if self.get(name) is not None:
            log.warning("Page %r already registered; skipping %s", name, resource_path, extra={"page": name})
            return None
        try:
            definition = self._loader.load(resource_path)
            content = definition.get_object(ROOT_ID)
            if content is None:
                raise ResourceLoadError(f"{resource_path}: no '{ROOT_ID}' element")
        except ResourceLoadError as exc:
            log.warning(
                "Skipping page %r: %s", name, exc, extra={"page": name, "resource": resource_path}
            )
            return None

        self._adder.add(content, name, title)
        page = Page(name=name, title=title, content=content, binder=binder)
        self._pages.append(page)
        if binder is not None:
            binder(definition)
        log.debug("Registered page %r", name, extra={"page": name})
        return page
