"""Helper types shared across the test suite."""

from __future__ import annotations


class CountingValue:
    """Orderable wrapper that records every comparison made against it."""

    def __init__(self, value: int, calls: list[str]) -> None:
        self.value = value
        self.calls = calls

    def _other(self, other: object) -> int:
        return other.value if isinstance(other, CountingValue) else other  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        self.calls.append("eq")
        return self.value == self._other(other)

    def __ne__(self, other: object) -> bool:
        self.calls.append("ne")
        return self.value != self._other(other)

    def __lt__(self, other: object) -> bool:
        self.calls.append("lt")
        return self.value < self._other(other)

    def __le__(self, other: object) -> bool:
        self.calls.append("le")
        return self.value <= self._other(other)

    def __gt__(self, other: object) -> bool:
        self.calls.append("gt")
        return self.value > self._other(other)

    def __ge__(self, other: object) -> bool:
        self.calls.append("ge")
        return self.value >= self._other(other)

    def __repr__(self) -> str:
        return f"CountingValue({self.value})"

