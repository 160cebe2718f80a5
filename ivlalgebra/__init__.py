from .bound import Bound, Excluded, Included
from .core import covering, intersection, union
from .interval import Interval

__all__ = [
    "Bound",
    "Included",
    "Excluded",
    "Interval",
    "intersection",
    "union",
    "covering",
]
