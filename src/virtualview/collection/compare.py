"""
Type-dispatched value comparison.

Values are grouped into families by runtime type (absent, boolean, numeric,
string) and compared within a family.  Two values of the same
unrecognised type use that type's own ordering when it has one.  Values
from different families, or values that cannot be ordered, fall back to
comparing ``str()`` of both sides; such results are tagged ``mixed``
because they do not form a consistent total order across families.
"""

from __future__ import annotations

import enum
import numbers
from dataclasses import dataclass
from typing import Any


class SortDirection(str, enum.Enum):
    """Direction of a sort."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> SortDirection:
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


class Ordering(enum.IntEnum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def inverted(self) -> Ordering:
        return Ordering(-self.value)


class TypeFamily(enum.Enum):
    ABSENT = "absent"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    OTHER = "other"


@dataclass(frozen=True)
class Comparison:
    """
    Tagged comparison result.

    Attributes
    ----------
    ordering:
        Ascending order of the two values.
    mixed:
        ``True`` when the values belong to different type families (or cannot
        be ordered directly) and *ordering* comes from the string fallback.
    """

    ordering: Ordering
    mixed: bool = False


def type_family(value: Any) -> TypeFamily:
    """Classify *value* for comparison dispatch."""
    if value is None:
        return TypeFamily.ABSENT
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return TypeFamily.BOOL
    if isinstance(value, numbers.Real):
        return TypeFamily.NUMBER
    # Decimal registers as a Number but not as Real
    if isinstance(value, numbers.Number) and not isinstance(value, numbers.Complex):
        return TypeFamily.NUMBER
    if isinstance(value, str):
        return TypeFamily.STRING
    return TypeFamily.OTHER


def _order(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_tagged(a: Any, b: Any) -> Comparison:
    """Compare *a* and *b* in ascending order, tagging mixed-type fallbacks."""
    family_a = type_family(a)
    family_b = type_family(b)

    # Absent sorts before everything else
    if family_a is TypeFamily.ABSENT or family_b is TypeFamily.ABSENT:
        if family_a is family_b:
            return Comparison(Ordering.EQUAL)
        if family_a is TypeFamily.ABSENT:
            return Comparison(Ordering.LESS)
        return Comparison(Ordering.GREATER)

    # False < True falls out of int ordering.  Same-typed unrecognised
    # values (dates, times) use their own ordering when they define one.
    if family_a is family_b and (family_a is not TypeFamily.OTHER or type(a) is type(b)):
        try:
            return Comparison(_order(a, b))
        except TypeError:
            pass

    return Comparison(_order(str(a), str(b)), mixed=True)


def compare_values(a: Any, b: Any) -> Ordering:
    """Compare *a* and *b* in ascending order."""
    return compare_tagged(a, b).ordering


def compare(
    a: Any,
    b: Any,
    direction: SortDirection = SortDirection.ASCENDING,
) -> Ordering:
    """Compare *a* and *b*; ``DESCENDING`` inverts the ascending result."""
    ordering = compare_values(a, b)
    if direction is SortDirection.DESCENDING:
        return ordering.inverted()
    return ordering
