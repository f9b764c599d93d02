"""Range bound enumeration."""

from __future__ import annotations

from enum import Enum


class Bound(str, Enum):
    """Inclusivity mode for range-endpoint comparisons.

    The same mode applies to both the lower and the upper endpoint.
    """

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"
