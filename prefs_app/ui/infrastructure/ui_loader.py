"""Loads Qt Designer ``.ui`` page files with QUiLoader."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PySide6.QtCore import QFile, QIODevice
from PySide6.QtUiTools import QUiLoader
from PySide6.QtWidgets import QWidget

from prefs_app.config import RESOURCES_DIR
from prefs_app.core.errors import ResourceLoadError
from prefs_app.ui.infrastructure.qt_binding import QtPropertyTarget

log = logging.getLogger(__name__)


class QtPageDefinition:
    """Widget tree of one loaded page; objects are looked up by objectName."""

    def __init__(self, top: QWidget) -> None:
        self._top = top

    def get_object(self, object_id: str) -> Any | None:
        if self._top.objectName() == object_id:
            return self._top
        return self._top.findChild(QWidget, object_id)

    def get_control(self, object_id: str) -> QtPropertyTarget | None:
        widget = self.get_object(object_id)
        if widget is None:
            return None
        return QtPropertyTarget(widget, object_id)


class UiFilePageLoader:
    def __init__(self, base_dir: Path = RESOURCES_DIR) -> None:
        self._base_dir = base_dir
        self._loader = QUiLoader()

    def load(self, resource_path: str) -> QtPageDefinition:
        path = self._base_dir / resource_path
        if not path.is_file():
            raise ResourceLoadError(f"Page resource not found: {path}")
        ui_file = QFile(str(path))
        if not ui_file.open(QIODevice.OpenModeFlag.ReadOnly):
            raise ResourceLoadError(f"Cannot open {path}: {ui_file.errorString()}")
        try:
            widget = self._loader.load(ui_file)
        finally:
            ui_file.close()
        if widget is None:
            raise ResourceLoadError(f"Malformed page resource {path}: {self._loader.errorString()}")
        log.debug("Loaded page resource %s", path, extra={"resource": resource_path})
        return QtPageDefinition(widget)
