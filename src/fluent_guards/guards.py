"""One-shot guard checks.

Each check inspects a single value and returns ``Ok(value)`` when the
comparison holds, otherwise ``Err(error)`` with the caller's error value.

Example:
    >>> from fluent_guards import Guards
    >>> Guards.is_equal_to(4, 5, "Value was not 5!")
    Err(error='Value was not 5!')
    >>> Guards.is_equal_to(5, 5, "Value was not 5!")
    Ok(value=5)
"""

from __future__ import annotations

from typing import TypeVar

from fluent_guards.core import comparisons
from fluent_guards.models.enums import Bound
from fluent_guards.models.results import Err, GuardResult, Ok
from fluent_guards.protocols import EqT, OrdT

E = TypeVar("E")


class Guards:
    """Stateless collection of single-use guards."""

    @staticmethod
    def is_equal_to(value: EqT, expected: EqT, error: E) -> GuardResult[EqT, E]:
        """Ensure that ``value`` equals ``expected``.

        Args:
            value: Value to check.
            expected: Value it must be equal to.
            error: Error value returned on failure.

        Returns:
            ``Ok(value)`` if the values match, otherwise ``Err(error)``.
        """
        if comparisons.equal(value, expected):
            return Ok(value)
        return Err(error)

    @staticmethod
    def is_not_equal_to(value: EqT, forbidden: EqT, error: E) -> GuardResult[EqT, E]:
        """Ensure that ``value`` differs from ``forbidden``.

        Note that ``float("nan")`` is never equal to itself, so
        ``is_not_equal_to(nan, nan, ...)`` succeeds.
        """
        if comparisons.not_equal(value, forbidden):
            return Ok(value)
        return Err(error)

    @staticmethod
    def is_greater_than(value: OrdT, bound: OrdT, error: E) -> GuardResult[OrdT, E]:
        """Ensure that ``value > bound``."""
        if comparisons.greater_than(value, bound):
            return Ok(value)
        return Err(error)

    @staticmethod
    def is_greater_or_equal(value: OrdT, bound: OrdT, error: E) -> GuardResult[OrdT, E]:
        """Ensure that ``value >= bound``."""
        if comparisons.greater_or_equal(value, bound):
            return Ok(value)
        return Err(error)

    @staticmethod
    def is_less_than(value: OrdT, bound: OrdT, error: E) -> GuardResult[OrdT, E]:
        """Ensure that ``value < bound``."""
        if comparisons.less_than(value, bound):
            return Ok(value)
        return Err(error)

    @staticmethod
    def is_less_or_equal(value: OrdT, bound: OrdT, error: E) -> GuardResult[OrdT, E]:
        """Ensure that ``value <= bound``."""
        if comparisons.less_or_equal(value, bound):
            return Ok(value)
        return Err(error)

    @staticmethod
    def is_between(
        value: OrdT,
        low: OrdT,
        high: OrdT,
        bound: Bound,
        error: E,
    ) -> GuardResult[OrdT, E]:
        """Ensure that ``value`` lies between ``low`` and ``high``.

        Args:
            value: Value to check.
            low: Lower endpoint.
            high: Upper endpoint. Must not be below ``low``; an inverted
                range is accepted but never matches.
            bound: Whether both endpoints are inclusive or exclusive.
            error: Error value returned on failure.

        Returns:
            ``Ok(value)`` if within range, otherwise ``Err(error)``.

        Example:
            >>> Guards.is_between(4, 4, 6, Bound.EXCLUSIVE, "out of range")
            Err(error='out of range')
            >>> Guards.is_between(6, 4, 6, Bound.INCLUSIVE, "out of range")
            Ok(value=6)
        """
        if comparisons.within(value, low, high, bound):
            return Ok(value)
        return Err(error)

    @staticmethod
    def is_outside(
        value: OrdT,
        low: OrdT,
        high: OrdT,
        bound: Bound,
        error: E,
    ) -> GuardResult[OrdT, E]:
        """Ensure that ``value`` lies outside ``low`` and ``high``.

        ``bound`` describes the range being excluded: with
        ``Bound.INCLUSIVE`` the endpoints themselves fail, with
        ``Bound.EXCLUSIVE`` they pass.

        Example:
            >>> Guards.is_outside(4, 4, 6, Bound.EXCLUSIVE, "inside")
            Ok(value=4)
            >>> Guards.is_outside(4, 4, 6, Bound.INCLUSIVE, "inside")
            Err(error='inside')
        """
        if comparisons.outside(value, low, high, bound):
            return Ok(value)
        return Err(error)
