"""Persistence backends for :class:`SettingsStore`.

The Qt implementation lives in ``prefs_app.ui.infrastructure.settings``; this
module keeps the protocol and the in-memory backend free of Qt imports.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from prefs_app.core.disposables import Disposable


class SettingsBackend(Protocol):
    def value(self, key: str, default: Any, type_: type) -> Any:
        """Stored value for ``key`` converted to ``type_`` if possible, else ``default``."""

    def set_value(self, key: str, value: Any) -> None: ...

    def sync(self) -> None:
        """Flush pending writes and pick up changes made by other writers."""

    def status_ok(self) -> bool: ...

    def watch(self, callback: Callable[[], None]) -> Disposable:
        """Call ``callback`` when the underlying storage may have changed."""


class MemorySettingsBackend:
    """Dict-backed backend. Every write notifies all watchers.

    Several stores may share one instance to model other processes writing
    the same settings.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(initial or {})
        self._watchers: list[Callable[[], None]] = []

    def value(self, key: str, default: Any, type_: type) -> Any:
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value
        for callback in list(self._watchers):
            callback()

    def sync(self) -> None:
        return None

    def status_ok(self) -> bool:
        return True

    def watch(self, callback: Callable[[], None]) -> Disposable:
        self._watchers.append(callback)

        def _release() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return Disposable(_release)

    def snapshot(self) -> dict[str, Any]:
        return dict(self._values)
