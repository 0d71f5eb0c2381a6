"""
Field lookup on arbitrary item shapes.

``FieldResolver`` extracts a named value from an item so that it can be
compared or displayed.  Items may be attribute objects (dataclasses, plain
classes, named tuples), mappings, or a ``weakref.ref`` to either.

Explicitly registered accessors take precedence over name-based lookup.
Name-based lookup is lenient by default: an unknown field resolves to
``""`` and is reported once per item type through the ``virtualview.fields``
logger.  Pass ``strict=True`` to raise :class:`FieldNotFoundError` instead.
"""

from __future__ import annotations

import inspect
import weakref
from collections.abc import Callable, Mapping
from typing import Any

from virtualview.logging import get_logger

logger = get_logger("fields")

Accessor = Callable[[Any], Any]

MISSING_VALUE = ""
"""Value an unknown field resolves to in lenient mode."""

_NOT_FOUND = object()


class FieldNotFoundError(KeyError):
    """Raised in strict mode when an item has no member named *field_key*."""

    def __init__(self, item_type: type, field_key: str) -> None:
        super().__init__(field_key)
        self.item_type = item_type
        self.field_key = field_key

    def __str__(self) -> str:
        return f"{self.item_type.__name__} has no field {self.field_key!r}"


class FieldResolver:
    """
    Resolve ``(item, field_key)`` pairs to comparable values.

    Parameters
    ----------
    accessors:
        Optional mapping of field key to a function ``item -> value``.  An
        accessor is used instead of introspection for its key.
    strict:
        When ``True`` an unknown field raises :class:`FieldNotFoundError`.
    """

    def __init__(
        self,
        accessors: Mapping[str, Accessor] | None = None,
        strict: bool = False,
    ) -> None:
        self._accessors: dict[str, Accessor] = dict(accessors) if accessors else {}
        self._strict = strict
        self._reported: set[tuple[type, str]] = set()

    @property
    def strict(self) -> bool:
        return self._strict

    def register(self, field_key: str, accessor: Accessor) -> None:
        """Register (or replace) the accessor for *field_key*."""
        self._accessors[field_key] = accessor

    def has_accessor(self, field_key: str) -> bool:
        return field_key in self._accessors

    def resolve(self, item: Any, field_key: str) -> Any:
        """
        Return the value of *field_key* on *item*.

        ``None`` items and dead weak references resolve to ``None``.
        Unknown fields resolve to :data:`MISSING_VALUE` unless strict.
        """
        target = _deref(item)
        if target is None:
            return None

        accessor = self._accessors.get(field_key)
        if accessor is not None:
            return accessor(target)

        value = _lookup(target, field_key)
        if value is _NOT_FOUND:
            return self._missing(target, field_key)
        return value

    def resolve_text(self, item: Any, field_key: str) -> str:
        """Return the display text of *field_key* on *item* (``""`` if absent)."""
        value = self.resolve(item, field_key)
        if value is None:
            return ""
        return str(value)

    def _missing(self, target: Any, field_key: str) -> Any:
        item_type = type(target)
        if self._strict:
            raise FieldNotFoundError(item_type, field_key)

        marker = (item_type, field_key)
        if marker not in self._reported:
            self._reported.add(marker)
            logger.warning(
                "Unknown field %r on %s; resolving to an empty value",
                field_key,
                item_type.__name__,
            )
        return MISSING_VALUE


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------


def _deref(item: Any) -> Any:
    """Follow one level of ``weakref.ref`` indirection."""
    if isinstance(item, weakref.ref):
        return item()
    return item


def _lookup(target: Any, field_key: str) -> Any:
    if isinstance(target, Mapping):
        return target.get(field_key, _NOT_FOUND)

    if not field_key or field_key.startswith("_"):
        return _NOT_FOUND

    value = getattr(target, field_key, _NOT_FOUND)
    if value is not _NOT_FOUND and inspect.isroutine(value):
        return _NOT_FOUND
    return value


_default_resolver = FieldResolver()


def resolve(item: Any, field_key: str) -> Any:
    """Resolve *field_key* on *item* with a shared lenient resolver."""
    return _default_resolver.resolve(item, field_key)
