"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from hypothesis import Verbosity, settings

from tests.helpers import CountingValue

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def counting_value() -> tuple[Callable[[int], CountingValue], list[str]]:
    """Factory for values that log the comparisons made on them, plus the shared log."""
    calls: list[str] = []

    def make(value: int) -> CountingValue:
        return CountingValue(value, calls)

    return make, calls
