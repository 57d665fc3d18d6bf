"""Schema-checked settings store: get/set/bind/on_change over a backend.

Every write and every externally detected change is published on the event
bus as :class:`SettingChanged`; bindings and change callbacks are plain bus
subscriptions and return disposable handles.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any, Protocol

from prefs_app.core.disposables import CompositeDisposable, Disposable
from prefs_app.core.errors import SchemaError, SettingsStoreError
from prefs_app.core.events import ControlChanged, EventBus, SettingChanged
from prefs_app.settings.backends import SettingsBackend
from prefs_app.settings.schema import TYPE_BOOL, SettingKey, SettingsSchema

log = logging.getLogger(__name__)


class BindDirection(enum.Flag):
    GET = enum.auto()  # store -> control
    SET = enum.auto()  # control -> store
    DEFAULT = GET | SET


class BindableTarget(Protocol):
    """A control exposing named properties with change notification."""

    @property
    def control_id(self) -> str: ...

    def get_property(self, name: str) -> Any: ...

    def set_property(self, name: str, value: Any) -> None: ...

    def connect_notify(self, name: str, callback: Callable[[Any], None]) -> Disposable: ...


class SettingsStore:
    def __init__(self, backend: SettingsBackend, bus: EventBus, schema: SettingsSchema) -> None:
        self._backend = backend
        self._bus = bus
        self._schema = schema
        # Last known value per key; writes and refresh() only publish differences.
        self._known: dict[str, Any] = {spec.name: self._read(spec) for spec in schema}
        self._watch = backend.watch(self.refresh)

    @classmethod
    def open(
        cls,
        backend: SettingsBackend,
        bus: EventBus,
        schema: SettingsSchema | None = None,
    ) -> SettingsStore:
        """Attach to ``backend``. Raises :class:`SettingsStoreError` if it is unusable."""
        if schema is None:
            schema = SettingsSchema.load()
        if not backend.status_ok():
            raise SettingsStoreError(f"Settings backend for {schema.schema_id!r} is not accessible")
        store = cls(backend, bus, schema)
        log.info("Settings store opened: %s", schema.schema_id)
        return store

    @property
    def schema(self) -> SettingsSchema:
        return self._schema

    def _read(self, spec: SettingKey) -> Any:
        return spec.coerce(self._backend.value(spec.name, spec.default, spec.python_type))

    def get(self, key: str) -> Any:
        return self._read(self._schema.key(key))

    def set(self, key: str, value: Any) -> bool:
        """Persist ``value``. Returns False (and publishes nothing) if it is unchanged."""
        spec = self._schema.key(key)
        if spec.type == TYPE_BOOL and not isinstance(value, (bool, int)):
            raise SchemaError(f"Settings key {key!r} expects a bool, got {type(value).__name__}")
        value = spec.coerce(value)
        # Compare against storage as well: backends that cannot watch leave _known stale.
        stored = self._read(spec)
        if stored == value and self._known.get(key) == value:
            return False
        # Update before writing: backends may notify watchers synchronously.
        self._known[key] = value
        if stored != value:
            self._backend.set_value(key, value)
        log.debug("Setting %s = %r", key, value, extra={"key": key})
        self._bus.publish(SettingChanged(key=key, value=value))
        return True

    def on_change(self, key: str, callback: Callable[[Any], None]) -> Disposable:
        self._schema.key(key)

        def _handler(event: SettingChanged) -> None:
            if event.key == key:
                callback(event.value)

        return self._bus.subscribe(SettingChanged, _handler)

    def bind(
        self,
        key: str,
        target: BindableTarget,
        target_property: str,
        direction: BindDirection = BindDirection.DEFAULT,
    ) -> Disposable:
        """Link ``key`` with ``target.<target_property>`` until the handle is disposed."""
        self._schema.key(key)
        control_id = target.control_id
        handles = CompositeDisposable()
        if direction & BindDirection.GET:
            target.set_property(target_property, self.get(key))
            handles.add(self.on_change(key, lambda value: target.set_property(target_property, value)))
        if direction & BindDirection.SET:

            def _on_control(event: ControlChanged) -> None:
                if event.control_id == control_id and event.property == target_property:
                    self.set(key, event.value)

            handles.add(self._bus.subscribe(ControlChanged, _on_control))
            handles.add(
                target.connect_notify(
                    target_property,
                    lambda value: self._bus.publish(ControlChanged(control_id, target_property, value)),
                )
            )
        log.debug("Bound %s to %s.%s", key, control_id, target_property, extra={"key": key})
        return handles

    def refresh(self) -> list[str]:
        """Re-read all keys and publish the ones another writer changed."""
        changed: list[tuple[str, Any]] = []
        for spec in self._schema:
            value = self._read(spec)
            if self._known.get(spec.name) != value:
                self._known[spec.name] = value
                changed.append((spec.name, value))
        for key, value in changed:
            log.info("Setting %s changed externally", key, extra={"key": key})
            self._bus.publish(SettingChanged(key=key, value=value))
        return [key for key, _ in changed]

    def close(self) -> None:
        self._watch.dispose()
        self._backend.sync()
