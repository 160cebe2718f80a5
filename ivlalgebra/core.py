from collections.abc import Iterable
from functools import reduce

from ivlalgebra.bound import T
from ivlalgebra.interval import Interval


def intersection(*intervals: Interval[T]) -> Interval[T] | None:
    """Fold `Interval.intersect` over the arguments (equivalent to chaining `&`).

    Returns None as soon as any pair fails to overlap.
    """

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(Interval.closed(0, 5), Interval.open(2, 8))"
        )

    def reducer(acc: Interval[T] | None, nxt: Interval[T]) -> Interval[T] | None:
        if acc is None:
            return None
        return acc.intersect(nxt)

    first, *rest = intervals
    return reduce(reducer, rest, first.non_empty())


def union(*intervals: Interval[T]) -> Interval[T] | None:
    """Fold `Interval.union` over the arguments (equivalent to chaining `|`).

    Empty intervals are ignored. Returns None when every argument is empty or
    when the non-empty ones do not join into one contiguous interval in the
    order given.
    """

    if not intervals:
        raise ValueError(
            f"union() requires at least one interval argument.\n"
            f"Example: union(Interval.closed(0, 5), Interval.open(2, 8))\n"
            f"Hint: Use Interval.normalize() to merge intervals that may be disjoint"
        )

    def reducer(acc: Interval[T] | None, nxt: Interval[T]) -> Interval[T] | None:
        if acc is None:
            return None
        return acc.union(nxt)

    remaining = [interval for interval in intervals if not interval.is_empty()]
    if not remaining:
        return None

    first, *rest = remaining
    return reduce(reducer, rest, first.copy())


def covering(point: T, intervals: Iterable[Interval[T]]) -> list[Interval[T]]:
    """Return the intervals containing `point`, in input order.

    Example:
        >>> windows = [Interval.right_open(9, 12), Interval.right_open(13, 17)]
        >>> covering(12, windows)
        []
        >>> covering(14, windows)
        [Interval(start=Included(13), end=Excluded(17))]
    """
    return [interval for interval in intervals if interval.contains(point)]
