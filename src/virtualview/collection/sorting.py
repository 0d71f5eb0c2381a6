"""
Sort state and field sorting.

``SortController`` owns the active sort field and its direction.  Sorting
the active field again toggles the direction; sorting a new field starts
ascending.  The input sequence is never modified: each sort returns a new
list together with the index permutation that produced it.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from virtualview.collection.compare import SortDirection, compare_tagged
from virtualview.collection.fields import FieldResolver
from virtualview.logging import get_logger

logger = get_logger("sorting")


@dataclass
class SortState:
    """Currently active sort field and direction."""

    active_field: str | None = None
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def ascending(self) -> bool:
        return self.direction is SortDirection.ASCENDING

    def is_active(self, field_key: str) -> bool:
        return self.active_field is not None and self.active_field == field_key


@dataclass
class SortResult:
    """
    Outcome of a sort.

    ``items[i]`` is ``source[permutation[i]]`` for the sequence that was
    sorted.
    """

    items: list[Any]
    permutation: list[int]
    field_key: str
    direction: SortDirection
    mixed_types: bool = False
    moved: bool = True


class SortController:
    """
    Sort a collection by a named field with ascending/descending toggling.

    Parameters
    ----------
    resolver:
        Field resolver used to extract sort keys.  A lenient default
        resolver is created when omitted.
    """

    def __init__(self, resolver: FieldResolver | None = None) -> None:
        self._resolver = resolver or FieldResolver()
        self._state = SortState()

    @property
    def state(self) -> SortState:
        return self._state

    @property
    def resolver(self) -> FieldResolver:
        return self._resolver

    def reset(self) -> None:
        """Forget the active field and return to ascending."""
        self._state = SortState()

    def apply_sort(
        self,
        items: Sequence[Any],
        field_key: str,
        sortable: bool = True,
    ) -> SortResult | None:
        """
        Sort *items* by *field_key*.

        Returns ``None`` without touching the sort state when *items* is
        empty or *sortable* is false.
        """
        if not sortable or len(items) == 0:
            return None

        # Resolve first so a strict resolver leaves the state untouched
        keys = [self._resolver.resolve(item, field_key) for item in items]

        if self._state.is_active(field_key):
            self._state.direction = self._state.direction.toggled()
        else:
            self._state.active_field = field_key
            self._state.direction = SortDirection.ASCENDING

        direction = self._state.direction
        mixed = False

        def cmp(i: int, j: int) -> int:
            nonlocal mixed
            result = compare_tagged(keys[i], keys[j])
            if result.mixed:
                mixed = True
            if direction is SortDirection.DESCENDING:
                return -int(result.ordering)
            return int(result.ordering)

        permutation = sorted(range(len(items)), key=functools.cmp_to_key(cmp))
        if mixed:
            logger.debug(
                "Sort by %r compared values of different types; order is best-effort",
                field_key,
            )
        logger.debug("Sorted %d items by %r (%s)", len(items), field_key, direction.value)

        return SortResult(
            items=[items[i] for i in permutation],
            permutation=permutation,
            field_key=field_key,
            direction=direction,
            mixed_types=mixed,
            moved=permutation != list(range(len(items))),
        )


def sort_items(
    items: Sequence[Any],
    field_key: str,
    direction: SortDirection = SortDirection.ASCENDING,
    resolver: FieldResolver | None = None,
) -> list[Any]:
    """One-shot sort of *items* by *field_key* without sort state."""
    controller = SortController(resolver)
    if direction is SortDirection.DESCENDING:
        controller.state.active_field = field_key
    result = controller.apply_sort(items, field_key)
    return result.items if result is not None else list(items)
