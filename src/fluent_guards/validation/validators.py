"""Validator bridge for guard chains.

Wraps a guard chain as an ``abstract_validation_base`` validator so it can
run inside a ``CompositeValidator`` or ``ValidatorPipelineBuilder`` pipeline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from abstract_validation_base import BaseValidator, ValidationResult

from fluent_guards.guard import Guard
from fluent_guards.models.results import Err

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GuardValidator(BaseValidator[T], Generic[T]):
    """Validator that runs a guard chain against each item.

    Only the first failing check of the chain is reported.

    Example:
        >>> from fluent_guards import Bound
        >>> channel_validator = GuardValidator(
        ...     "channel",
        ...     "channel",
        ...     lambda g: g.is_between(1, 15, Bound.INCLUSIVE, "Invalid channel!")
        ...     .is_not_equal_to(13, "Channel 13 is blocked!"),
        ... )
        >>> channel_validator.validate(13).errors[0].message
        'Channel 13 is blocked!'
    """

    def __init__(
        self,
        name: str,
        field: str,
        build: Callable[[Guard[T, Any]], Guard[T, Any]],
    ) -> None:
        """Initialize the guard validator.

        Args:
            name: Name of this validator for error reporting.
            field: Field name attached to reported errors.
            build: Callable that chains checks onto a fresh guard and
                returns it.
        """
        self._name = name
        self._field = field
        self._build = build

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    def validate(self, item: T) -> ValidationResult:
        """Run the guard chain against ``item``.

        Args:
            item: Value to validate.

        Returns:
            ValidationResult with at most one error.
        """
        result = ValidationResult(is_valid=True)
        outcome = self._build(Guard(item)).result()
        if isinstance(outcome, Err):
            logger.debug("Validator %s rejected %r", self._name, item)
            result.add_error(field=self._field, message=str(outcome.error), value=item)
        return result
