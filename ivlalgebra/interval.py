import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Generic

from ivlalgebra.bound import Bound, Excluded, Included, T
from ivlalgebra.util import (
    LEFT_CLOSED,
    LEFT_OPEN,
    RIGHT_CLOSED,
    RIGHT_OPEN,
    SEPARATOR,
)

logger = logging.getLogger(__name__)


@dataclass(init=False)
class Interval(Generic[T]):
    """A contiguous range of points whose endpoints may be open or closed.

    The bounds are always stored in order, ``start.point <= end.point``.
    Arguments given out of order are swapped by the constructor.

    Intervals are compared by value. The endpoint-shift methods
    (`left_crop`, `right_crop`, `left_extend`, `right_extend`) modify the
    interval in place, every other operation returns a new value.
    """

    start: Bound[T]
    end: Bound[T]

    def __init__(self, start: Bound[T], end: Bound[T] | None = None) -> None:
        for edge, bound in (("start", start), ("end", end)):
            if bound is not None and not isinstance(bound, Bound):
                raise TypeError(
                    f"Interval {edge} must be an Included or Excluded bound.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}\n"
                    f"Hint: Build from raw points with a named constructor:\n"
                    f"  Interval.closed(0, 2)      # [0, 2]\n"
                    f"  Interval.right_open(0, 2)  # [0, 2)\n"
                    f"  Interval.from_point(1)     # [1, 1]"
                )
        if end is None:
            self.start = start
            self.end = start
        else:
            # At a shared point this also merges the flags (closed if either).
            self.start = start.union_or_least(end)
            self.end = start.union_or_greatest(end)

    @classmethod
    def open(cls, start: T, end: T) -> "Interval[T]":
        """Interval excluding both endpoints, ``(start, end)``."""
        return cls(Excluded(start), Excluded(end))

    @classmethod
    def closed(cls, start: T, end: T) -> "Interval[T]":
        """Interval including both endpoints, ``[start, end]``."""
        return cls(Included(start), Included(end))

    @classmethod
    def left_open(cls, start: T, end: T) -> "Interval[T]":
        """Interval excluding its left endpoint, ``(start, end]``."""
        return cls(Excluded(start), Included(end))

    @classmethod
    def right_open(cls, start: T, end: T) -> "Interval[T]":
        """Interval excluding its right endpoint, ``[start, end)``."""
        return cls(Included(start), Excluded(end))

    @classmethod
    def from_point(cls, point: T) -> "Interval[T]":
        """Closed interval containing only `point`."""
        return cls.closed(point, point)

    @property
    def left_point(self) -> T:
        """Least boundary point. Not a member of the interval if left-open."""
        return self.start.point

    @property
    def right_point(self) -> T:
        """Greatest boundary point. Not a member of the interval if right-open."""
        return self.end.point

    @property
    def left_bound(self) -> Bound[T]:
        return self.start

    @property
    def right_bound(self) -> Bound[T]:
        return self.end

    def copy(self) -> "Interval[T]":
        return replace(self)

    def is_empty(self) -> bool:
        """True if no point lies in the interval.

        Only a degenerate interval whose shared bound is open is empty:
        ``(0, 0)`` is empty, while ``[0, 0]`` and ``(0, 0]`` hold the point 0.
        """
        return self.start == self.end and self.start.is_open()

    def non_empty(self) -> "Interval[T] | None":
        """Return a copy of the interval, or None if it is empty."""
        if self.is_empty():
            return None
        return self.copy()

    def contains(self, point: T) -> bool:
        return (
            self.left_point < point < self.right_point
            or (point == self.left_point and self.start.is_closed())
            or (point == self.right_point and self.end.is_closed())
        )

    def __contains__(self, point: Any) -> bool:
        return self.contains(point)

    def _oriented(self, other: "Interval[T]") -> "tuple[Interval[T], Interval[T]]":
        """Order the operands by left point, preferring self on ties."""
        if self.left_point <= other.left_point:
            return self, other
        return other, self

    def intersect(self, other: "Interval[T]") -> "Interval[T] | None":
        """Return the overlap of two intervals, or None if they are disjoint.

        Intervals touching at a single point overlap only when both of them
        include that point.

            >>> Interval.right_open(0.0, 2.0).intersect(Interval.closed(1.0, 3.0))
            Interval(start=Included(1.0), end=Excluded(2.0))
        """
        if self.is_empty() or other.is_empty():
            return None

        a, b = self._oriented(other)
        if a.right_point < b.left_point or (
            a.right_point == b.left_point and (a.end.is_open() or b.start.is_open())
        ):
            return None
        # Shared left points: a degenerate b may sit on the open left edge of a.
        if b.right_point == a.left_point and (b.end.is_open() or a.start.is_open()):
            return None

        return Interval(
            a.start.intersect_or_greatest(b.start),
            a.end.intersect_or_least(b.end),
        )

    def union(self, other: "Interval[T]") -> "Interval[T] | None":
        """Return the union of two intervals, or None if it is not contiguous.

        An empty operand is the identity. Intervals touching at a single point
        join unless both of them exclude that point.

            >>> Interval.left_open(0.0, 2.0).union(Interval.closed(1.0, 3.0))
            Interval(start=Excluded(0.0), end=Included(3.0))
        """
        if self.is_empty() and other.is_empty():
            return None
        if self.is_empty():
            return other.copy()
        if other.is_empty():
            return self.copy()

        a, b = self._oriented(other)
        if a.right_point < b.left_point or (
            a.right_point == b.left_point and a.end.is_open() and b.start.is_open()
        ):
            return None

        return Interval(
            a.start.union_or_least(b.start),
            a.end.union_or_greatest(b.end),
        )

    def __and__(self, other: Any) -> "Interval[T] | None":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    def __or__(self, other: Any) -> "Interval[T] | None":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.union(other)

    @staticmethod
    def enclose(intervals: "Iterable[Interval[T]]") -> "Interval[T] | None":
        """Return the smallest interval holding every point of the inputs.

        Gaps between inputs are filled in, empty inputs are ignored. Returns
        None when there is no non-empty input.
        """
        hull: Interval[T] | None = None
        for interval in intervals:
            if interval.is_empty():
                continue
            if hull is None:
                hull = interval.copy()
                continue
            hull = Interval(
                hull.start.union_or_least(interval.start),
                hull.end.union_or_greatest(interval.end),
            )
        return hull

    @staticmethod
    def normalize(intervals: "Iterable[Interval[T]]") -> "list[Interval[T]]":
        """Reduce intervals to a smaller set by unioning overlapping ones.

        Empty intervals are dropped. Each remaining interval is merged into
        the first already collected interval it unions with, or appended as
        a new entry. This is a single pass that keeps input order, so when
        several inputs only become contiguous through a later one the result
        depends on that order and is not guaranteed to be minimal or sorted.

            >>> Interval.normalize([
            ...     Interval.open(1.0, 2.0),
            ...     Interval.open(2.0, 3.0),
            ...     Interval.open(2.5, 3.5),
            ...     Interval.closed(3.0, 3.0),
            ...     Interval.open(0.0, 1.5),
            ...     Interval.open(6.0, 6.0),
            ... ])
            [Interval(start=Excluded(0.0), end=Excluded(2.0)), Interval(start=Excluded(2.0), end=Excluded(3.5))]
        """
        merged: list[Interval[T]] = []
        seen = 0
        for interval in intervals:
            seen += 1
            if interval.is_empty():
                continue
            for idx, existing in enumerate(merged):
                joined = existing.union(interval)
                if joined is not None:
                    merged[idx] = joined
                    break
            else:
                merged.append(interval.copy())

        logger.debug(f"Normalized {seen} intervals into {len(merged)}")
        return merged

    def width(self) -> Any:
        """Distance between the boundary points, ``right_point - left_point``.

        The result has whatever type the subtraction produces, for example
        `timedelta` for datetime points. Empty intervals have zero width.
        """
        return self.right_point - self.left_point

    def left_crop(self, amount: Any) -> None:
        """Move the left endpoint right by `amount`, keeping its flag."""
        self._reshape(replace(self.start, point=self.left_point + amount), self.end)

    def right_crop(self, amount: Any) -> None:
        """Move the right endpoint left by `amount`, keeping its flag."""
        self._reshape(self.start, replace(self.end, point=self.right_point - amount))

    def left_extend(self, amount: Any) -> None:
        """Move the left endpoint left by `amount`, keeping its flag."""
        self._reshape(replace(self.start, point=self.left_point - amount), self.end)

    def right_extend(self, amount: Any) -> None:
        """Move the right endpoint right by `amount`, keeping its flag."""
        self._reshape(self.start, replace(self.end, point=self.right_point + amount))

    def _reshape(self, start: Bound[T], end: Bound[T]) -> None:
        # Rebuilt through the constructor, so crossing bounds are swapped back
        # into order rather than leaving an inverted interval.
        if start.point > end.point:
            logger.debug(
                f"Endpoint shift crossed bounds ({start!r} > {end!r}), reordering"
            )
        reshaped = Interval(start, end)
        self.start = reshaped.start
        self.end = reshaped.end

    def __str__(self) -> str:
        """Standard interval notation, e.g. ``[0, 2)``."""
        left = LEFT_OPEN if self.start.is_open() else LEFT_CLOSED
        right = RIGHT_OPEN if self.end.is_open() else RIGHT_CLOSED
        return f"{left}{self.left_point}{SEPARATOR}{self.right_point}{right}"
