"""Settings schema: declared keys, value types and defaults.

Loaded from ``schema.yaml``. Looking up an undeclared key raises
:class:`SchemaError`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from prefs_app.config import SCHEMA_PATH
from prefs_app.core.errors import SchemaError, SettingsStoreError

TYPE_BOOL = "bool"
TYPE_ENUM = "enum"

_TRUE_TEXT = {"1", "true", "yes", "on"}
_FALSE_TEXT = {"0", "false", "no", "off", ""}


def coerce_bool(value: Any, default: bool) -> bool:
    """Bool from native bools, ints and the strings INI files round-trip."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_TEXT:
            return True
        if text in _FALSE_TEXT:
            return False
    return default


@dataclass(frozen=True, slots=True)
class SettingKey:
    name: str
    type: str
    default: Any
    choices: tuple[str, ...] = ()

    @property
    def python_type(self) -> type:
        return bool if self.type == TYPE_BOOL else str

    def coerce(self, raw: Any) -> Any:
        if raw is None:
            return self.default
        if self.type == TYPE_BOOL:
            return coerce_bool(raw, self.default)
        # Enum values pass through unchecked; readers map unknown values themselves.
        return str(raw)


class SettingsSchema:
    def __init__(self, schema_id: str, keys: Mapping[str, SettingKey]) -> None:
        self.schema_id = schema_id
        self._keys = dict(keys)

    def __contains__(self, name: object) -> bool:
        return name in self._keys

    def __iter__(self) -> Iterator[SettingKey]:
        return iter(self._keys.values())

    def names(self) -> tuple[str, ...]:
        return tuple(self._keys)

    def key(self, name: str) -> SettingKey:
        try:
            return self._keys[name]
        except KeyError:
            raise SchemaError(f"Settings key {name!r} is not declared in schema {self.schema_id!r}") from None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SettingsSchema:
        schema_id = str(data.get("id") or "")
        raw_keys = data.get("keys")
        if not schema_id or not isinstance(raw_keys, Mapping):
            raise SchemaError("Schema must define 'id' and a 'keys' mapping")
        keys: dict[str, SettingKey] = {}
        for name, spec in raw_keys.items():
            if not isinstance(spec, Mapping):
                raise SchemaError(f"Schema entry {name!r} must be a mapping")
            type_ = spec.get("type")
            if type_ == TYPE_BOOL:
                keys[name] = SettingKey(
                    name=name,
                    type=TYPE_BOOL,
                    default=coerce_bool(spec.get("default"), False),
                )
            elif type_ == TYPE_ENUM:
                choices = tuple(str(c) for c in spec.get("choices") or ())
                if not choices:
                    raise SchemaError(f"Enum key {name!r} declares no choices")
                default = str(spec.get("default", choices[0]))
                if default not in choices:
                    raise SchemaError(f"Default {default!r} of {name!r} is not one of {choices}")
                keys[name] = SettingKey(
                    name=name,
                    type=TYPE_ENUM,
                    default=default,
                    choices=choices,
                )
            else:
                raise SchemaError(f"Unsupported type {type_!r} for key {name!r}")
        return cls(schema_id, keys)

    @classmethod
    def load(cls, path: Path = SCHEMA_PATH) -> SettingsSchema:
        """Read the schema file. Missing or unparsable files raise :class:`SettingsStoreError`."""
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise SettingsStoreError(f"Cannot read settings schema {path}", cause=exc) from exc
        if not isinstance(data, Mapping):
            raise SettingsStoreError(f"Settings schema {path} is empty or not a mapping")
        return cls.from_mapping(data)
