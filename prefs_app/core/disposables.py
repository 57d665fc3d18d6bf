"""Disposable handles returned by subscribe/bind calls.

Owners collect them in a :class:`CompositeDisposable` and release everything
in one place on teardown.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

log = logging.getLogger(__name__)


class Disposable:
    """Runs ``release`` once. Further ``dispose()`` calls are no-ops."""

    __slots__ = ("_release",)

    def __init__(self, release: Callable[[], None] | None = None) -> None:
        self._release = release

    @property
    def disposed(self) -> bool:
        return self._release is None

    def dispose(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()

    def __enter__(self) -> Disposable:
        return self

    def __exit__(self, *exc: object) -> None:
        self.dispose()


class CompositeDisposable(Disposable):
    """Collects handles; disposes them in reverse acquisition order."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        super().__init__(self._release_all)
        self._items: list[Disposable] = []

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: Disposable) -> Disposable:
        if self.disposed:
            # Late arrivals are released right away.
            item.dispose()
            return item
        self._items.append(item)
        return item

    def _release_all(self) -> None:
        items, self._items = self._items, []
        for item in reversed(items):
            try:
                item.dispose()
            except Exception:
                log.exception("Failed to release %r", item)
