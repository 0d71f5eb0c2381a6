"""Tests for field lookup."""

from __future__ import annotations

import logging
import weakref
from collections import namedtuple
from dataclasses import dataclass

import pytest

from virtualview.collection.fields import (
    MISSING_VALUE,
    FieldNotFoundError,
    FieldResolver,
    resolve,
)


@dataclass
class Track:
    title: str
    plays: int
    rating: float | None = None
    _secret: str = "hidden"

    def describe(self) -> str:
        return f"{self.title} ({self.plays})"


class Tag:
    """Plain object, kept alive only by the tests that reference it."""

    def __init__(self, label: str) -> None:
        self.label = label


Point = namedtuple("Point", ["x", "y"])


class TestFieldResolver:
    """Tests for FieldResolver.resolve."""

    def test_attribute_lookup(self) -> None:
        resolver = FieldResolver()
        track = Track(title="Intro", plays=3)

        assert resolver.resolve(track, "title") == "Intro"
        assert resolver.resolve(track, "plays") == 3

    def test_mapping_lookup(self) -> None:
        resolver = FieldResolver()

        assert resolver.resolve({"Name": "Alice"}, "Name") == "Alice"

    def test_namedtuple_lookup(self) -> None:
        resolver = FieldResolver()

        assert resolver.resolve(Point(1, 2), "y") == 2

    def test_field_value_none_is_kept(self) -> None:
        """A field that exists with value None is not treated as missing."""
        resolver = FieldResolver(strict=True)

        assert resolver.resolve(Track(title="a", plays=1), "rating") is None
        assert resolver.resolve({"k": None}, "k") is None

    def test_none_item_resolves_to_none(self) -> None:
        resolver = FieldResolver(strict=True)

        assert resolver.resolve(None, "anything") is None

    def test_weakref_is_followed(self) -> None:
        resolver = FieldResolver()
        tag = Tag("urgent")
        ref = weakref.ref(tag)

        assert resolver.resolve(ref, "label") == "urgent"

    def test_dead_weakref_resolves_to_none(self) -> None:
        resolver = FieldResolver(strict=True)
        tag = Tag("gone")
        ref = weakref.ref(tag)
        del tag

        assert resolver.resolve(ref, "label") is None

    def test_unknown_field_is_missing_value(self) -> None:
        resolver = FieldResolver()

        assert resolver.resolve(Track(title="a", plays=1), "Missing") == MISSING_VALUE
        assert resolver.resolve({"Name": "a"}, "Missing") == MISSING_VALUE

    def test_methods_and_private_names_are_not_fields(self) -> None:
        resolver = FieldResolver()
        track = Track(title="a", plays=1)

        assert resolver.resolve(track, "describe") == MISSING_VALUE
        assert resolver.resolve(track, "_secret") == MISSING_VALUE
        assert resolver.resolve(track, "__class__") == MISSING_VALUE

    def test_unknown_field_warns_once_per_type(self, caplog: pytest.LogCaptureFixture) -> None:
        resolver = FieldResolver()

        with caplog.at_level(logging.WARNING, logger="virtualview.fields"):
            for plays in range(5):
                resolver.resolve(Track(title="a", plays=plays), "Missing")
            resolver.resolve({"Name": "a"}, "Missing")

        warnings = [r for r in caplog.records if r.name == "virtualview.fields"]
        assert len(warnings) == 2
        assert "Missing" in warnings[0].getMessage()
        assert "Track" in warnings[0].getMessage()

    def test_strict_mode_raises(self) -> None:
        resolver = FieldResolver(strict=True)

        with pytest.raises(FieldNotFoundError) as exc_info:
            resolver.resolve(Track(title="a", plays=1), "Missing")

        assert exc_info.value.field_key == "Missing"
        assert exc_info.value.item_type is Track
        assert str(exc_info.value) == "Track has no field 'Missing'"

    def test_strict_error_is_a_key_error(self) -> None:
        resolver = FieldResolver(strict=True)

        with pytest.raises(KeyError):
            resolver.resolve({}, "Missing")


class TestAccessors:
    """Tests for registered accessors."""

    def test_accessor_takes_precedence(self) -> None:
        resolver = FieldResolver(accessors={"title": lambda t: t.title.upper()})

        assert resolver.resolve(Track(title="intro", plays=1), "title") == "INTRO"

    def test_accessor_for_computed_field(self) -> None:
        resolver = FieldResolver(strict=True)
        resolver.register("double", lambda t: t.plays * 2)

        assert resolver.has_accessor("double")
        assert resolver.resolve(Track(title="a", plays=4), "double") == 8

    def test_accessor_receives_dereferenced_item(self) -> None:
        resolver = FieldResolver(accessors={"label": lambda t: t.label})
        tag = Tag("x")

        assert resolver.resolve(weakref.ref(tag), "label") == "x"

    def test_register_replaces(self) -> None:
        resolver = FieldResolver()
        resolver.register("k", lambda _: 1)
        resolver.register("k", lambda _: 2)

        assert resolver.resolve(object(), "k") == 2


class TestResolveText:
    """Tests for display text conversion."""

    def test_values_are_stringified(self) -> None:
        resolver = FieldResolver()

        assert resolver.resolve_text({"Age": 30}, "Age") == "30"
        assert resolver.resolve_text({"Ok": True}, "Ok") == "True"

    def test_none_becomes_empty(self) -> None:
        resolver = FieldResolver()

        assert resolver.resolve_text({"k": None}, "k") == ""
        assert resolver.resolve_text(None, "k") == ""

    def test_module_level_resolve(self) -> None:
        assert resolve({"Name": "Bob"}, "Name") == "Bob"
        assert resolve({"Name": "Bob"}, "Nope") == MISSING_VALUE
