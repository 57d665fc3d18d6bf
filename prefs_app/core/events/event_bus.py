from __future__ import annotations

import logging
from collections import defaultdict, deque
from collections.abc import Callable
from threading import RLock
from typing import Any, TypeVar, cast
from weakref import WeakMethod

from prefs_app.core.disposables import Disposable

logger = logging.getLogger(__name__)


class Subscription(Disposable):
    """Handle for one handler registration. ``dispose()`` unsubscribes."""

    __slots__ = ("event_type", "handler")

    def __init__(self, bus: EventBus, event_type: type[object], handler: Callable[[object], None]) -> None:
        super().__init__(lambda: bus.unsubscribe(self))
        self.event_type = event_type
        self.handler = handler


TEvent = TypeVar("TEvent")


class EventBus:
    """Synchronous, in-process event bus with a single dispatch queue.

    - ``publish`` enqueues the event. The outermost ``publish`` call drains the
      queue, so every handler of one event runs to completion before the next
      event is dispatched. Events published from inside a handler are queued,
      never interleaved.
    - A failing handler is logged; the remaining handlers still run.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: defaultdict[type[object], list[Callable[[object], None]]] = defaultdict(list)
        self._queue: deque[object] = deque()
        self._dispatching = False

    def subscribe(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        def _wrapped(event: object) -> None:
            handler(cast(TEvent, event))

        with self._lock:
            self._subs[event_type].append(_wrapped)
        return Subscription(self, event_type, _wrapped)

    def subscribe_weak(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        """Subscribe with a weak reference when possible.

        Intended for Qt widgets. If the owner is garbage-collected, the
        subscription is removed on the next publish.
        """

        wm: WeakMethod | None
        try:
            # Only bound methods are supported by WeakMethod; others raise TypeError.
            wm = WeakMethod(cast(Any, handler))
        except TypeError:
            wm = None

        if wm is None:
            return self.subscribe(event_type, handler)

        sub: Subscription

        def _wrapped(event: object) -> None:
            alive = wm()
            if alive is None:
                sub.dispose()
                return
            alive(cast(TEvent, event))

        sub = Subscription(self, event_type, _wrapped)
        with self._lock:
            self._subs[event_type].append(_wrapped)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            handlers = self._subs.get(subscription.event_type)
            if not handlers:
                return
            try:
                handlers.remove(subscription.handler)
            except ValueError:
                return

    def subscriber_count(self, event_type: type[object]) -> int:
        with self._lock:
            return len(self._subs.get(event_type, ()))

    def publish(self, event: object) -> None:
        with self._lock:
            self._queue.append(event)
            if self._dispatching:
                return
            self._dispatching = True
        try:
            while True:
                with self._lock:
                    if not self._queue:
                        break
                    current = self._queue.popleft()
                    # Copy handlers under lock, then execute outside the lock.
                    handlers = list(self._subs.get(type(current), []))
                self._dispatch(current, handlers)
        finally:
            with self._lock:
                self._dispatching = False
                self._queue.clear()

    def _dispatch(self, event: object, handlers: list[Callable[[object], None]]) -> None:
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Event handler failed",
                    extra={"event_type": type(event).__name__, "handler": repr(handler)},
                )
