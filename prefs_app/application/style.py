"""Process-wide style mode register.

One instance is owned by the container and injected into every consumer.
Last writer wins; changes are announced as :class:`StyleModeChanged`.
"""

from __future__ import annotations

import enum
import logging

from prefs_app.core.events import EventBus, StyleModeChanged

log = logging.getLogger(__name__)


class StyleMode(str, enum.Enum):
    DEFAULT = "default"  # follow the system
    FORCE_LIGHT = "force-light"
    FORCE_DARK = "force-dark"


class StyleManager:
    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self._mode = StyleMode.DEFAULT

    @property
    def mode(self) -> StyleMode:
        return self._mode

    def set_mode(self, mode: StyleMode) -> None:
        mode = StyleMode(mode)
        if mode == self._mode:
            return
        self._mode = mode
        log.info("Style mode -> %s", mode.value)
        self._bus.publish(StyleModeChanged(mode=mode.value))
