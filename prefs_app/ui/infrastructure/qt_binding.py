"""Adapter exposing Qt widget properties to ``SettingsStore.bind``.

Binders use toolkit-neutral property names (``active`` for toggles,
``selected`` for choice selectors); they map to the Qt property and its
notify signal here.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from PySide6.QtWidgets import QWidget

from prefs_app.core.disposables import Disposable

log = logging.getLogger(__name__)

# neutral name -> (Qt property, notify signal)
PROPERTY_MAP: dict[str, tuple[str, str]] = {
    "active": ("checked", "toggled"),
    "selected": ("currentIndex", "currentIndexChanged"),
    "checked": ("checked", "toggled"),
    "currentIndex": ("currentIndex", "currentIndexChanged"),
}


class QtPropertyTarget:
    def __init__(self, widget: QWidget, control_id: str | None = None) -> None:
        self._widget = widget
        self._control_id = control_id or widget.objectName()

    @property
    def control_id(self) -> str:
        return self._control_id

    @property
    def widget(self) -> QWidget:
        return self._widget

    @staticmethod
    def _resolve(name: str) -> tuple[str, str]:
        try:
            return PROPERTY_MAP[name]
        except KeyError:
            raise ValueError(f"Unsupported bindable property {name!r}") from None

    def get_property(self, name: str) -> Any:
        return self._widget.property(self._resolve(name)[0])

    def set_property(self, name: str, value: Any) -> None:
        self._widget.setProperty(self._resolve(name)[0], value)

    def connect_notify(self, name: str, callback: Callable[[Any], None]) -> Disposable:
        _prop, signal_name = self._resolve(name)
        signal = getattr(self._widget, signal_name)

        def _slot(*_args: Any) -> None:
            callback(self.get_property(name))

        signal.connect(_slot)

        def _release() -> None:
            try:
                signal.disconnect(_slot)
            except (RuntimeError, TypeError):
                # Widget already destroyed with its window.
                log.debug("Signal %s of %s already gone", signal_name, self._control_id)

        return Disposable(_release)
