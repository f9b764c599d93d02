"""Comparison predicates shared by the static and chained guards.

Every predicate relies on the host comparison operators, so unordered
values such as NaN compare false to everything.
"""

from __future__ import annotations

from fluent_guards.models.enums import Bound
from fluent_guards.protocols import SupportsEquality, SupportsOrdering


def equal(value: SupportsEquality, expected: SupportsEquality) -> bool:
    return value == expected


def not_equal(value: SupportsEquality, forbidden: SupportsEquality) -> bool:
    return value != forbidden


def greater_than(value: SupportsOrdering, bound: SupportsOrdering) -> bool:
    return value > bound


def greater_or_equal(value: SupportsOrdering, bound: SupportsOrdering) -> bool:
    return value >= bound


def less_than(value: SupportsOrdering, bound: SupportsOrdering) -> bool:
    return value < bound


def less_or_equal(value: SupportsOrdering, bound: SupportsOrdering) -> bool:
    return value <= bound


def within(
    value: SupportsOrdering,
    low: SupportsOrdering,
    high: SupportsOrdering,
    bound: Bound,
) -> bool:
    """Check that ``value`` lies between ``low`` and ``high``.

    An inverted range (``low > high``) never matches.
    """
    if Bound(bound) is Bound.EXCLUSIVE:
        return value > low and value < high
    return value >= low and value <= high


def outside(
    value: SupportsOrdering,
    low: SupportsOrdering,
    high: SupportsOrdering,
    bound: Bound,
) -> bool:
    """Check that ``value`` lies outside ``low`` and ``high``.

    With ``Bound.INCLUSIVE`` the endpoints belong to the range and therefore
    fail; with ``Bound.EXCLUSIVE`` they pass.
    """
    if Bound(bound) is Bound.EXCLUSIVE:
        return value <= low or value >= high
    return value < low or value > high
