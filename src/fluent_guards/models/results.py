"""Result types returned by guard checks.

A check yields either ``Ok`` holding the inspected value or ``Err`` holding
the caller-supplied error value, untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from fluent_guards.models.errors import FluentGuardsError

T = TypeVar("T")
E = TypeVar("E")
D = TypeVar("D")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful check carrying the validated value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the validated value."""
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed check carrying the caller-supplied error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the failure.

        Raises:
            Exception: The error value itself when it is an exception.
            FluentGuardsError: For any other payload, kept in the error context.
        """
        if isinstance(self.error, BaseException):
            raise self.error.with_traceback(None)
        raise FluentGuardsError.guard_failed(self.error)

    def unwrap_or(self, default: D) -> D:
        return default


GuardResult = Union[Ok[T], Err[E]]
