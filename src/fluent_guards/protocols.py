"""Capability protocols for guarded values.

Equality guards only need ``==``/``!=``; ordering and range guards need the
rich comparison operators.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SupportsEquality(Protocol):
    """Values that can be compared for equality."""

    def __eq__(self, other: Any, /) -> bool: ...

    def __ne__(self, other: Any, /) -> bool: ...


@runtime_checkable
class SupportsOrdering(SupportsEquality, Protocol):
    """Values that support rich ordering comparison."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


EqT = TypeVar("EqT", bound=SupportsEquality)
OrdT = TypeVar("OrdT", bound=SupportsOrdering)
