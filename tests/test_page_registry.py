from __future__ import annotations

import pytest

from fakes import AppendHost, FakeDefinition, FakeLoader, FakeWidget, OpaqueHost, TitledHost
from prefs_app.application.page_registry import (
    AppendPageAdder,
    PageRegistry,
    TitledPageAdder,
    resolve_page_adder,
)


def _definition(label: str) -> FakeDefinition:
    return FakeDefinition({"root": FakeWidget(label)})


def _name_widget(widget: FakeWidget, name: str) -> None:
    widget.name = name


def test_registration_order_is_collection_order() -> None:
    loader = FakeLoader({f"{n}.ui": _definition(n) for n in ("a", "b", "c")})
    host = TitledHost()
    registry = PageRegistry(loader, resolve_page_adder(host))

    for name in ("c", "a", "b"):
        registry.register_page(f"{name}.ui", name, name.upper())

    assert registry.names() == ["c", "a", "b"]
    assert [info.name for info in host.pages()] == ["c", "a", "b"]
    assert [info.title for info in host.pages()] == ["C", "A", "B"]


def test_missing_resource_is_skipped_without_affecting_siblings() -> None:
    loader = FakeLoader({"a.ui": _definition("a"), "c.ui": _definition("c")})
    host = TitledHost()
    registry = PageRegistry(loader, resolve_page_adder(host))
    bound: list[str] = []

    assert registry.register_page("a.ui", "a", "A", lambda d: bound.append("a")) is not None
    assert registry.register_page("b.ui", "b", "B", lambda d: bound.append("b")) is None
    assert registry.register_page("c.ui", "c", "C", lambda d: bound.append("c")) is not None

    assert registry.names() == ["a", "c"]
    assert [info.name for info in host.pages()] == ["a", "c"]
    assert bound == ["a", "c"]


def test_definition_without_root_counts_as_load_failure() -> None:
    loader = FakeLoader({"a.ui": FakeDefinition({"other": FakeWidget("x")})})
    host = TitledHost()
    registry = PageRegistry(loader, resolve_page_adder(host))

    assert registry.register_page("a.ui", "a", "A") is None
    assert host.pages() == []


def test_binder_receives_loaded_definition() -> None:
    definition = _definition("a")
    registry = PageRegistry(FakeLoader({"a.ui": definition}), resolve_page_adder(TitledHost()))
    received: list[object] = []

    page = registry.register_page("a.ui", "a", "A", received.append)

    assert received == [definition]
    assert page is not None and page.content is definition.get_object("root")


def test_duplicate_name_is_rejected() -> None:
    loader = FakeLoader({"a.ui": _definition("a"), "b.ui": _definition("b")})
    host = TitledHost()
    registry = PageRegistry(loader, resolve_page_adder(host))

    registry.register_page("a.ui", "same", "First")
    assert registry.register_page("b.ui", "same", "Second") is None

    assert [info.title for info in host.pages()] == ["First"]


def test_titled_host_resolves_to_titled_adder() -> None:
    assert isinstance(resolve_page_adder(TitledHost()), TitledPageAdder)


def test_append_fallback_still_names_the_child() -> None:
    host = AppendHost()
    adder = resolve_page_adder(host, _name_widget)
    registry = PageRegistry(FakeLoader({"a.ui": _definition("a")}), adder)

    registry.register_page("a.ui", "general", "General")

    assert isinstance(adder, AppendPageAdder)
    assert [child.name for child in host.children] == ["general"]
    assert [info.name for info in host.pages()] == ["general"]


def test_append_fallback_tolerates_unnameable_children() -> None:
    host = OpaqueHost()

    def _refuse(_child: object, _name: str) -> None:
        raise AttributeError("read-only")

    registry = PageRegistry(FakeLoader({"a.ui": _definition("a")}), resolve_page_adder(host, _refuse))

    assert registry.register_page("a.ui", "a", "A") is not None
    assert len(host.children) == 1


def test_host_without_any_capability_is_rejected() -> None:
    with pytest.raises(TypeError):
        resolve_page_adder(object())
