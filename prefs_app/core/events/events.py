from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SettingChanged:
    """A persisted key changed, by this window or by any other writer."""

    key: str
    value: Any


@dataclass(frozen=True, slots=True)
class ControlChanged:
    """A bound control property changed (user interaction or programmatic set)."""

    control_id: str
    property: str
    value: Any


@dataclass(frozen=True, slots=True)
class RowSelected:
    """Sidebar selection changed. ``name`` is None when the selection is cleared."""

    name: str | None


@dataclass(frozen=True, slots=True)
class StyleModeChanged:
    mode: str  # StyleMode value
