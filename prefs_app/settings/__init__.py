"""Settings store adapter: schema, backends, bindings."""

from prefs_app.settings.backends import MemorySettingsBackend, SettingsBackend
from prefs_app.settings.schema import SettingKey, SettingsSchema, coerce_bool
from prefs_app.settings.store import BindableTarget, BindDirection, SettingsStore

__all__ = [
    "BindableTarget",
    "BindDirection",
    "MemorySettingsBackend",
    "SettingKey",
    "SettingsBackend",
    "SettingsSchema",
    "SettingsStore",
    "coerce_bool",
]
