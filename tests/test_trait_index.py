"""Tests for implview.index.trait_index — immutable module -> implementors mapping."""

from dataclasses import replace

import pytest

from implview.index.entry import ImplementorEntry
from implview.index.trait_index import TraitIndex


def _entry(module: str, signature: str, *, synthetic: bool = False) -> ImplementorEntry:
    entry = ImplementorEntry.from_signature(module, signature)
    return replace(entry, synthetic=True) if synthetic else entry


@pytest.fixture
def index() -> TraitIndex:
    return TraitIndex(
        {
            "modA": [_entry("modA", "impl Foo for Bar"), _entry("modA", "impl<T> Foo for Baz<T>")],
            "modB": [_entry("modB", "impl Foo for Qux", synthetic=True)],
        },
        trait="core::Foo",
    )


class TestMapping:
    def test_lookup(self, index: TraitIndex) -> None:
        assert [e.impl for e in index["modA"]] == ["Bar", "Baz<T>"]
        assert "modB" in index
        assert len(index) == 2
        assert list(index) == ["modA", "modB"]

    def test_entries_are_tuples(self, index: TraitIndex) -> None:
        assert isinstance(index["modA"], tuple)

    def test_missing_module(self, index: TraitIndex) -> None:
        with pytest.raises(KeyError):
            index["nope"]
        assert index.implementors_of_module("nope") == ()

    def test_no_item_assignment(self, index: TraitIndex) -> None:
        with pytest.raises(TypeError):
            index["modC"] = ()  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        source = {"m": [_entry("m", "impl Foo for Bar")]}
        index = TraitIndex(source, trait="Foo")
        source["m"].append(_entry("m", "impl Foo for Baz"))
        source["n"] = []
        assert len(index["m"]) == 1
        assert "n" not in index


class TestEquality:
    def test_structural(self, index: TraitIndex) -> None:
        copy = TraitIndex(dict(index.items()), trait="core::Foo")
        assert copy == index
        assert hash(copy) == hash(index)

    def test_trait_path_matters(self, index: TraitIndex) -> None:
        assert TraitIndex(dict(index.items()), trait="other::Foo") != index

    def test_entry_order_matters(self) -> None:
        a = _entry("m", "impl Foo for A")
        b = _entry("m", "impl Foo for B")
        assert TraitIndex({"m": [a, b]}) != TraitIndex({"m": [b, a]})

    def test_module_order_matters(self) -> None:
        a = [_entry("a", "impl Foo for A")]
        b = [_entry("b", "impl Foo for B")]
        assert TraitIndex({"a": a, "b": b}) != TraitIndex({"b": b, "a": a})

    def test_not_equal_to_dict(self, index: TraitIndex) -> None:
        assert index != dict(index.items())


class TestQueries:
    def test_count_and_modules(self, index: TraitIndex) -> None:
        assert index.count == 3
        assert index.modules == ("modA", "modB")
        assert index.trait == "core::Foo"

    def test_entries_in_order(self, index: TraitIndex) -> None:
        assert [e.impl for e in index.entries()] == ["Bar", "Baz<T>", "Qux"]

    def test_find_by_display_or_bare_name(self, index: TraitIndex) -> None:
        assert [e.module for e in index.find("Baz")] == ["modA"]
        assert [e.module for e in index.find("Baz<T>")] == ["modA"]
        assert index.find("Missing") == []

    def test_synthetic_partition(self, index: TraitIndex) -> None:
        assert [e.impl for e in index.synthetic()] == ["Qux"]
        assert [e.impl for e in index.concrete()] == ["Bar", "Baz<T>"]

    def test_without_module(self, index: TraitIndex) -> None:
        trimmed = index.without("modA")
        assert list(trimmed) == ["modB"]
        assert trimmed.trait == "core::Foo"
        assert "modA" in index

    def test_empty(self) -> None:
        index = TraitIndex()
        assert len(index) == 0
        assert index.count == 0
        assert index.trait is None
