"""Stateful property-based tests using Hypothesis for guard chains.

This module uses Hypothesis's RuleBasedStateMachine to apply arbitrary
sequences of chained checks and verify first-failure-wins.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, initialize, invariant, rule

from fluent_guards import Bound, Err, Guard, Guards, Ok
from tests.strategies import bounds, small_ints, value_and_range

# =============================================================================
# Guard Chain State Machine
# =============================================================================


class GuardChainStateMachine(RuleBasedStateMachine):
    """State machine for testing the Guard fluent API.

    Every rule applies one chained check and mirrors it with the static
    guard, tracking the first error that should be reported.
    """

    def __init__(self) -> None:
        super().__init__()
        self.value = 0
        self.guard: Guard[int, str] = Guard(0)
        self.first_error: str | None = None
        self.step = 0

    @initialize(value=small_ints)
    def start(self, value: int) -> None:
        """Start a fresh chain on a random value."""
        self.value = value
        self.guard = Guard(value)
        self.first_error = None
        self.step = 0

    def _record(self, expected: Ok | Err) -> str:
        self.step += 1
        error = f"check {self.step}"
        if self.first_error is None and isinstance(expected, Err):
            self.first_error = error
        return error

    # =========================================================================
    # Rules for chained checks
    # =========================================================================

    @rule(other=small_ints)
    def equal_to(self, other: int) -> None:
        error = self._record(Guards.is_equal_to(self.value, other, None))
        self.guard.is_equal_to(other, error)

    @rule(other=small_ints)
    def not_equal_to(self, other: int) -> None:
        error = self._record(Guards.is_not_equal_to(self.value, other, None))
        self.guard.is_not_equal_to(other, error)

    @rule(other=small_ints)
    def greater_than(self, other: int) -> None:
        error = self._record(Guards.is_greater_than(self.value, other, None))
        self.guard.is_greater_than(other, error)

    @rule(other=small_ints)
    def less_or_equal(self, other: int) -> None:
        error = self._record(Guards.is_less_or_equal(self.value, other, None))
        self.guard.is_less_or_equal(other, error)

    @rule(case=value_and_range(), bound=bounds)
    def between(self, case: tuple[int, int, int], bound: Bound) -> None:
        _, low, high = case
        error = self._record(Guards.is_between(self.value, low, high, bound, None))
        self.guard.is_between(low, high, bound, error)

    @rule(case=value_and_range(), bound=bounds)
    def outside(self, case: tuple[int, int, int], bound: Bound) -> None:
        _, low, high = case
        error = self._record(Guards.is_outside(self.value, low, high, bound, None))
        self.guard.is_outside(low, high, bound, error)

    # =========================================================================
    # Finish rule
    # =========================================================================

    @rule()
    def finish_and_restart(self) -> None:
        """Consume the chain, check the outcome and start over."""
        expected = Ok(self.value) if self.first_error is None else Err(self.first_error)
        assert self.guard.result() == expected
        self.guard = Guard(self.value)
        self.first_error = None
        self.step = 0

    # =========================================================================
    # Invariants
    # =========================================================================

    @invariant()
    def failed_state_matches_first_error(self) -> None:
        assert self.guard.is_failed == (self.first_error is not None)
        assert not self.guard.is_consumed


# Create pytest test case
TestGuardChain = GuardChainStateMachine.TestCase
TestGuardChain.settings = settings(
    max_examples=100,
    stateful_step_count=20,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
