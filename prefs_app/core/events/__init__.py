"""Lightweight in-process event bus.

Decouples the settings store, the controls and the navigation list. Producers
publish named events; controllers subscribe.
"""

from .event_bus import EventBus, Subscription
from .events import ControlChanged, RowSelected, SettingChanged, StyleModeChanged

__all__ = [
    "EventBus",
    "Subscription",
    "ControlChanged",
    "RowSelected",
    "SettingChanged",
    "StyleModeChanged",
]
