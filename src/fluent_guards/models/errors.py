"""Package-specific error classes.

Guard failures never raise: the caller's error value travels inside
``Err``. These errors cover misuse of the library itself.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "fluent_guards"


class FluentGuardsError(PydanticCustomError):
    """Custom exception for fluent_guards.

    Inherits from PydanticCustomError so it can be raised from inside Pydantic
    validators and still be reported as a regular validation error.
    """

    @classmethod
    def consumed(cls, operation: str) -> FluentGuardsError:
        """Error for a call made on a guard chain after ``result()``.

        Args:
            operation: Name of the method that was called.

        Returns:
            FluentGuardsError of type ``guard_consumed``.
        """
        return cls(
            "guard_consumed",
            "Guard chain was already consumed by result(); cannot call {operation}()",
            {"package": PACKAGE_NAME, "operation": operation},
        )

    @classmethod
    def guard_failed(cls, error: Any) -> FluentGuardsError:
        """Error raised when unwrapping an ``Err`` whose payload is not an exception.

        Args:
            error: The caller-supplied error value, kept as-is in the context.

        Returns:
            FluentGuardsError of type ``guard_failed``.
        """
        return cls(
            "guard_failed",
            "Guard failed: {error}",
            {"package": PACKAGE_NAME, "error": error},
        )
