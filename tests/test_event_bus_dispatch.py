from __future__ import annotations

from dataclasses import dataclass

from prefs_app.core.disposables import CompositeDisposable, Disposable
from prefs_app.core.events.event_bus import EventBus


@dataclass(frozen=True)
class _Evt:
    value: int


@dataclass(frozen=True)
class _Other:
    value: int


def test_publish_continues_when_one_handler_raises() -> None:
    bus = EventBus()
    received: list[int] = []

    def broken(_evt: _Evt) -> None:
        raise RuntimeError("boom")

    def healthy(evt: _Evt) -> None:
        received.append(evt.value)

    bus.subscribe(_Evt, broken)
    bus.subscribe(_Evt, healthy)

    bus.publish(_Evt(7))

    assert received == [7]


def test_nested_publish_runs_after_current_event_handlers() -> None:
    bus = EventBus()
    order: list[str] = []

    def first(evt: _Evt) -> None:
        order.append(f"first:{evt.value}")
        bus.publish(_Other(evt.value))
        order.append(f"first-done:{evt.value}")

    def second(evt: _Evt) -> None:
        order.append(f"second:{evt.value}")

    bus.subscribe(_Evt, first)
    bus.subscribe(_Evt, second)
    bus.subscribe(_Other, lambda evt: order.append(f"other:{evt.value}"))

    bus.publish(_Evt(1))

    assert order == ["first:1", "first-done:1", "second:1", "other:1"]


def test_subscription_dispose_unsubscribes() -> None:
    bus = EventBus()
    received: list[int] = []
    sub = bus.subscribe(_Evt, lambda evt: received.append(evt.value))

    bus.publish(_Evt(1))
    sub.dispose()
    sub.dispose()
    bus.publish(_Evt(2))

    assert received == [1]
    assert bus.subscriber_count(_Evt) == 0


def test_weak_subscription_is_dropped_with_owner() -> None:
    bus = EventBus()

    class Owner:
        def __init__(self) -> None:
            self.seen: list[int] = []

        def on_event(self, evt: _Evt) -> None:
            self.seen.append(evt.value)

    owner = Owner()
    bus.subscribe_weak(_Evt, owner.on_event)
    bus.publish(_Evt(1))
    assert owner.seen == [1]

    del owner
    bus.publish(_Evt(2))
    assert bus.subscriber_count(_Evt) == 0


def test_composite_disposable_releases_in_reverse_order() -> None:
    released: list[str] = []
    group = CompositeDisposable()
    group.add(Disposable(lambda: released.append("a")))
    group.add(Disposable(lambda: released.append("b")))

    group.dispose()
    assert released == ["b", "a"]

    group.add(Disposable(lambda: released.append("late")))
    assert released == ["b", "a", "late"]
    assert len(group) == 0
