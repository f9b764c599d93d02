"""Fluent guard chain.

This module provides a builder that runs several guard checks against one
value and keeps only the first failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

from fluent_guards.core import comparisons
from fluent_guards.models.enums import Bound
from fluent_guards.models.errors import FluentGuardsError
from fluent_guards.models.results import Err, GuardResult, Ok

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class _Failed(Generic[E]):
    """Failed chain state holding the first recorded error."""

    error: E


class Guard(Generic[T, E]):
    """Chainable guards evaluated against a single value.

    Each check is skipped entirely once an earlier check has failed, so later
    checks may rely on the invariants established by earlier ones. The chain
    is finished with ``result()``, after which it cannot be used again.

    Example:
        >>> def check_channel(channel: int) -> GuardResult:
        ...     return (
        ...         Guard.new(channel)
        ...         .is_between(1, 15, Bound.INCLUSIVE, "Invalid channel!")
        ...         .is_not_equal_to(13, "Channel 13 is blocked!")
        ...         .result()
        ...     )
        >>> check_channel(5)
        Ok(value=5)
        >>> check_channel(13)
        Err(error='Channel 13 is blocked!')
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._failure: _Failed[E] | None = None
        self._consumed = False

    @classmethod
    def new(cls, value: T) -> Guard[T, E]:
        """Create a new guard chain on ``value``."""
        return cls(value)

    @property
    def is_failed(self) -> bool:
        """True once any check in the chain has failed."""
        return self._failure is not None

    @property
    def is_consumed(self) -> bool:
        """True once ``result()`` has been called."""
        return self._consumed

    def __repr__(self) -> str:
        if self._consumed:
            state = "consumed"
        elif self._failure is not None:
            state = "failed"
        else:
            state = "passing"
        return f"Guard({self._value!r}, state={state})"

    def _step(
        self,
        operation: str,
        check: Callable[..., bool],
        operands: tuple[Any, ...],
        error: E,
    ) -> Self:
        if self._consumed:
            raise FluentGuardsError.consumed(operation)
        if self._failure is not None:
            logger.debug("Skipping %s: guard chain already failed", operation)
            return self
        if not check(self._value, *operands):
            logger.debug("Guard check %s failed for %r", operation, self._value)
            self._failure = _Failed(error)
        return self

    def result(self) -> GuardResult[T, E]:
        """Finish the chain.

        Returns:
            ``Ok(value)`` if every check passed, otherwise ``Err`` with the
            error of the first failing check.

        Raises:
            FluentGuardsError: If the chain was already consumed.
        """
        if self._consumed:
            raise FluentGuardsError.consumed("result")
        self._consumed = True
        if self._failure is None:
            return Ok(self._value)
        return Err(self._failure.error)

    def is_equal_to(self, expected: T, error: E) -> Self:
        """Ensure that the value equals ``expected``."""
        return self._step("is_equal_to", comparisons.equal, (expected,), error)

    def is_not_equal_to(self, forbidden: T, error: E) -> Self:
        """Ensure that the value differs from ``forbidden``."""
        return self._step("is_not_equal_to", comparisons.not_equal, (forbidden,), error)

    def is_greater_than(self, bound: T, error: E) -> Self:
        """Ensure that the value is greater than ``bound``."""
        return self._step("is_greater_than", comparisons.greater_than, (bound,), error)

    def is_greater_or_equal(self, bound: T, error: E) -> Self:
        """Ensure that the value is greater than or equal to ``bound``."""
        return self._step("is_greater_or_equal", comparisons.greater_or_equal, (bound,), error)

    def is_less_than(self, bound: T, error: E) -> Self:
        """Ensure that the value is less than ``bound``."""
        return self._step("is_less_than", comparisons.less_than, (bound,), error)

    def is_less_or_equal(self, bound: T, error: E) -> Self:
        """Ensure that the value is less than or equal to ``bound``."""
        return self._step("is_less_or_equal", comparisons.less_or_equal, (bound,), error)

    def is_between(self, low: T, high: T, bound: Bound, error: E) -> Self:
        """Ensure that the value lies between ``low`` and ``high``.

        Args:
            low: Lower endpoint.
            high: Upper endpoint.
            bound: Inclusivity applied to both endpoints.
            error: Error recorded if this is the first failing check.
        """
        return self._step("is_between", comparisons.within, (low, high, bound), error)

    def is_outside(self, low: T, high: T, bound: Bound, error: E) -> Self:
        """Ensure that the value lies outside ``low`` and ``high``.

        See ``Guards.is_outside`` for how ``bound`` treats the endpoints.
        """
        return self._step("is_outside", comparisons.outside, (low, high, bound), error)
