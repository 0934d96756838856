"""Tests for cascading mapping helpers."""

from __future__ import annotations

import doctest

import kindchain.domain.lookup as lookup_module
from kindchain.domain.kind import Kind
from kindchain.domain.lookup import clear_direct, get_cascading, resolve_all, set_direct

CHAIN = Kind.from_path("upperLeft/rectCorner/rect/general")


class TestGetCascading:
    def test_reads_most_specific(self) -> None:
        assert get_cascading({"rect": "blue", "general": "gray"}, CHAIN) == "blue"

    def test_miss_returns_none(self) -> None:
        assert get_cascading({"other": "x"}, CHAIN) is None

    def test_miss_returns_default(self) -> None:
        assert get_cascading({"other": "x"}, CHAIN, "fallback") == "fallback"

    def test_agrees_with_value_in_ids(self) -> None:
        mapping = {"rectCorner": 1, "general": 2}
        assert get_cascading(mapping, CHAIN) == CHAIN.value_in_ids(mapping)


class TestSetDirect:
    def test_writes_top_level_only(self) -> None:
        mapping = {"rect": "blue", "general": "gray"}
        set_direct(mapping, CHAIN, "red")
        assert mapping == {"rect": "blue", "general": "gray", "upperLeft": "red"}

    def test_overwrites_existing_top_level(self) -> None:
        mapping = {"upperLeft": "red"}
        set_direct(mapping, CHAIN, "green")
        assert mapping["upperLeft"] == "green"

    def test_write_then_read_asymmetry(self) -> None:
        mapping: dict[str, str] = {"general": "gray"}
        assert get_cascading(mapping, CHAIN) == "gray"
        set_direct(mapping, CHAIN, "red")
        assert get_cascading(mapping, CHAIN) == "red"
        assert get_cascading(mapping, Kind.from_path("rect/general")) == "gray"


class TestClearDirect:
    def test_removes_top_level_only(self) -> None:
        mapping = {"upperLeft": "red", "rect": "blue"}
        clear_direct(mapping, CHAIN)
        assert mapping == {"rect": "blue"}
        assert get_cascading(mapping, CHAIN) == "blue"

    def test_missing_key_ignored(self) -> None:
        mapping = {"rect": "blue"}
        clear_direct(mapping, CHAIN)
        assert mapping == {"rect": "blue"}


class TestResolveAll:
    def test_cascade_order(self) -> None:
        mapping = {"general": "gray", "rect": "blue", "unused": "x"}
        assert resolve_all(CHAIN, mapping) == [("rect", "blue"), ("general", "gray")]

    def test_empty_when_nothing_matches(self) -> None:
        assert resolve_all(CHAIN, {"other": "x"}) == []


def test_docstring_examples() -> None:
    failures, _ = doctest.testmod(lookup_module)
    assert failures == 0
