"""QSettings backend for the settings store.

Native location by default (organisation/application names); an INI file when
``PREFS_SETTINGS_PATH`` is set. Changes made by other processes are picked up
through a file system watch on the settings file.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from PySide6.QtCore import QFileSystemWatcher, QSettings

from prefs_app.config import APPLICATION_NAME, ORGANIZATION_NAME, SETTINGS_PATH_ENV
from prefs_app.core.disposables import Disposable

log = logging.getLogger(__name__)


class QSettingsBackend:
    def __init__(self, path: str | Path | None = None) -> None:
        path = path or os.getenv(SETTINGS_PATH_ENV)
        if path:
            self._q = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self._q = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)
        self._watcher: QFileSystemWatcher | None = None
        self._callbacks: list[Callable[[], None]] = []

    @property
    def file_name(self) -> str:
        return self._q.fileName()

    def value(self, key: str, default: Any, type_: type) -> Any:
        if not self._q.contains(key):
            return default
        return self._q.value(key, default, type_)

    def set_value(self, key: str, value: Any) -> None:
        self._q.setValue(key, value)
        self._q.sync()

    def sync(self) -> None:
        self._q.sync()

    def status_ok(self) -> bool:
        return self._q.status() == QSettings.Status.NoError

    def watch(self, callback: Callable[[], None]) -> Disposable:
        self._ensure_watcher()
        self._callbacks.append(callback)

        def _release() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return Disposable(_release)

    def _ensure_watcher(self) -> None:
        if self._watcher is not None:
            return
        self._watcher = QFileSystemWatcher()
        path = Path(self._q.fileName())
        # The file may not exist before the first write; its directory is watched as well.
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.warning("Cannot create settings directory %s: %s", path.parent, exc)
        targets = [str(p) for p in (path, path.parent) if p.exists()]
        if not targets:
            log.warning("Settings location %s not on disk; external changes are not watched", path)
            return
        failed = self._watcher.addPaths(targets)
        if failed:
            log.debug("Cannot watch %s", ", ".join(failed))
        self._watcher.fileChanged.connect(self._on_storage_changed)
        self._watcher.directoryChanged.connect(self._on_storage_changed)

    def _on_storage_changed(self, _path: str) -> None:
        file_name = self._q.fileName()
        # Writers often replace the file; re-arm the watch on the new inode.
        if self._watcher is not None and Path(file_name).exists() and file_name not in self._watcher.files():
            self._watcher.addPath(file_name)
        self._q.sync()
        for callback in list(self._callbacks):
            callback()
