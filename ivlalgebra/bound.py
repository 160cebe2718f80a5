"""Interval endpoints tagged as included (closed) or excluded (open).

A bound is an immutable value. The four combinators on `Bound` are the whole
algebraic engine behind `Interval`: every binary interval operation reduces to
applying them to the relevant pair of endpoints.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import override

# Points only need to be totally ordered; arithmetic is required solely by
# the width and endpoint-shift operations on Interval.
T = TypeVar("T")


@dataclass(frozen=True, repr=False)
class Bound(Generic[T]):
    """One endpoint of an interval.

    Only the `Included` and `Excluded` variants can be instantiated.
    """

    point: T

    def __post_init__(self) -> None:
        if type(self) is Bound:
            raise TypeError(
                f"Bound is abstract, got Bound({self.point!r}).\n"
                f"Hint: Use Included({self.point!r}) for a closed endpoint\n"
                f"      or Excluded({self.point!r}) for an open one."
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.point!r})"

    def is_closed(self) -> bool:
        """True if the bound includes its point."""
        raise NotImplementedError

    def is_open(self) -> bool:
        """True if the bound excludes its point."""
        return not self.is_closed()

    def intersect_or_least(self, other: "Bound[T]") -> "Bound[T]":
        """Combine two bounds for an intersection, keeping the lesser point.

        At equal points the result is closed only when both inputs are closed.

            >>> Included(0).intersect_or_least(Excluded(0))
            Excluded(0)
            >>> Included(1).intersect_or_least(Excluded(3))
            Included(1)
        """
        if self.point == other.point:
            if self.is_closed() and other.is_closed():
                return self
            return Excluded(self.point)
        return self if self.point < other.point else other

    def intersect_or_greatest(self, other: "Bound[T]") -> "Bound[T]":
        """Combine two bounds for an intersection, keeping the greater point.

        At equal points the result is closed only when both inputs are closed.
        """
        if self.point == other.point:
            if self.is_closed() and other.is_closed():
                return self
            return Excluded(self.point)
        return self if self.point > other.point else other

    def union_or_least(self, other: "Bound[T]") -> "Bound[T]":
        """Combine two bounds for a union, keeping the lesser point.

        At equal points the result is closed when either input is closed.

            >>> Included(0).union_or_least(Excluded(0))
            Included(0)
        """
        if self.point == other.point:
            if self.is_open() and other.is_open():
                return self
            return Included(self.point)
        return self if self.point < other.point else other

    def union_or_greatest(self, other: "Bound[T]") -> "Bound[T]":
        """Combine two bounds for a union, keeping the greater point.

        At equal points the result is closed when either input is closed.
        """
        if self.point == other.point:
            if self.is_open() and other.is_open():
                return self
            return Included(self.point)
        return self if self.point > other.point else other

    @staticmethod
    def from_point(value: "T | Bound[T]") -> "Bound[T]":
        """Convert a raw point into a closed bound. Bounds pass through."""
        if isinstance(value, Bound):
            return value
        return Included(value)

    @staticmethod
    def default(point_type: Callable[[], Any]) -> "Bound[Any]":
        """Closed bound at the default value of `point_type` (e.g. ``int()``)."""
        return Included(point_type())


@dataclass(frozen=True, repr=False)
class Included(Bound[T]):
    """A bound that includes its point."""

    @override
    def is_closed(self) -> bool:
        return True


@dataclass(frozen=True, repr=False)
class Excluded(Bound[T]):
    """A bound that excludes its point."""

    @override
    def is_closed(self) -> bool:
        return False
