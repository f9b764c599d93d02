"""Data models for guard results, bounds and errors."""

from fluent_guards.models.enums import Bound
from fluent_guards.models.errors import PACKAGE_NAME, FluentGuardsError
from fluent_guards.models.results import Err, GuardResult, Ok

__all__ = [
    "Bound",
    "Err",
    "FluentGuardsError",
    "GuardResult",
    "Ok",
    "PACKAGE_NAME",
]
