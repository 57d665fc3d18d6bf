"""Color scheme: maps the ``color-scheme`` setting to the selector index and style mode.

Fixed order ``system, light, dark`` = indices ``0, 1, 2``. Unknown stored
values resolve to ``system``; they are never reported as errors.
"""

from __future__ import annotations

import logging
from typing import Any

from prefs_app.application.style import StyleManager, StyleMode
from prefs_app.core.disposables import CompositeDisposable, Disposable
from prefs_app.core.events import ControlChanged, EventBus
from prefs_app.settings.store import BindableTarget, SettingsStore

log = logging.getLogger(__name__)

COLOR_SCHEME_KEY = "color-scheme"
SCHEME_SYSTEM = "system"
COLOR_SCHEMES = (SCHEME_SYSTEM, "light", "dark")

_STYLE_MODES = {
    "system": StyleMode.DEFAULT,
    "light": StyleMode.FORCE_LIGHT,
    "dark": StyleMode.FORCE_DARK,
}


def scheme_to_index(value: Any) -> int:
    try:
        return COLOR_SCHEMES.index(value)
    except ValueError:
        return 0


def index_to_scheme(index: Any) -> str:
    if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(COLOR_SCHEMES):
        return COLOR_SCHEMES[index]
    return SCHEME_SYSTEM


def style_mode_for(value: Any) -> StyleMode:
    return _STYLE_MODES.get(value, StyleMode.DEFAULT) if isinstance(value, str) else StyleMode.DEFAULT


class AppearanceController:
    def __init__(self, store: SettingsStore, style_manager: StyleManager, bus: EventBus) -> None:
        self._store = store
        self._style = style_manager
        self._bus = bus

    def apply_style_from_settings(self) -> StyleMode:
        mode = style_mode_for(self._store.get(COLOR_SCHEME_KEY))
        self._style.set_mode(mode)
        return mode

    def bind_selector(self, selector: BindableTarget, prop: str = "selected") -> Disposable:
        """Load the stored scheme into ``selector`` and persist user changes back."""
        control_id = selector.control_id
        handles = CompositeDisposable()

        def _load(_value: Any = None) -> None:
            index = scheme_to_index(self._store.get(COLOR_SCHEME_KEY))
            if selector.get_property(prop) != index:
                selector.set_property(prop, index)

        def _store(event: ControlChanged) -> None:
            if event.control_id != control_id or event.property != prop:
                return
            # A selector moved by _load already agrees with the stored value;
            # writing it back would replace an unknown scheme with "system".
            if scheme_to_index(self._store.get(COLOR_SCHEME_KEY)) != event.value:
                self._store.set(COLOR_SCHEME_KEY, index_to_scheme(event.value))
            self.apply_style_from_settings()

        _load()
        self.apply_style_from_settings()
        handles.add(self._bus.subscribe(ControlChanged, _store))
        handles.add(
            selector.connect_notify(
                prop, lambda value: self._bus.publish(ControlChanged(control_id, prop, value))
            )
        )
        handles.add(self._store.on_change(COLOR_SCHEME_KEY, _load))
        return handles

    def watch(self) -> Disposable:
        """Re-apply the style whenever the stored scheme changes, whoever wrote it."""
        return self._store.on_change(COLOR_SCHEME_KEY, lambda _value: self.apply_style_from_settings())
