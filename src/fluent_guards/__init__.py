"""fluent-guards: reusable comparison guards.

This package provides value checks for equality, ordering and range
membership in two styles:
- ``Guards``: one-shot static checks
- ``Guard``: a fluent chain that stops at the first failure

Quick Start:
    >>> from fluent_guards import Bound, Guard, Guards
    >>> Guards.is_equal_to(4, 5, "Value was not 5!")
    Err(error='Value was not 5!')

    >>> volume = (
    ...     Guard.new(0.0)
    ...     .is_not_equal_to(0.0, "TV does not support mute!")
    ...     .is_greater_or_equal(0.1, "Volume must be more than 10%!")
    ...     .is_less_or_equal(1.0, "Volume cannot be more than 100%!")
    ...     .result()
    ... )
    >>> volume
    Err(error='TV does not support mute!')
"""

from __future__ import annotations

from fluent_guards.guard import Guard
from fluent_guards.guards import Guards
from fluent_guards.models import PACKAGE_NAME, Bound, Err, FluentGuardsError, GuardResult, Ok
from fluent_guards.protocols import SupportsEquality, SupportsOrdering
from fluent_guards.validation import GuardValidator

__version__ = "0.1.0"
__package_name__ = "fluent-guards"

__all__ = [
    # Version
    "__version__",
    # Guards
    "Guard",
    "Guards",
    "GuardValidator",
    # Models
    "Bound",
    "Err",
    "GuardResult",
    "Ok",
    # Errors
    "FluentGuardsError",
    "PACKAGE_NAME",
    # Protocols
    "SupportsEquality",
    "SupportsOrdering",
]
