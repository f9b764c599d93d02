"""Shared comparison semantics for guards."""

from __future__ import annotations

from fluent_guards.core.comparisons import (
    equal,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    not_equal,
    outside,
    within,
)

__all__ = [
    "equal",
    "greater_or_equal",
    "greater_than",
    "less_or_equal",
    "less_than",
    "not_equal",
    "outside",
    "within",
]
