from dataclasses import FrozenInstanceError

import pytest

from ivlalgebra import Bound, Excluded, Included


def test_point_ignores_inclusion() -> None:
    assert Included(0).point == 0
    assert Excluded(1).point == 1


def test_closed_and_open_are_complementary() -> None:
    assert Included(0).is_closed()
    assert not Included(0).is_open()
    assert Excluded(1).is_open()
    assert not Excluded(1).is_closed()


def test_variants_compare_by_flag_and_point() -> None:
    assert Included(0) == Included(0)
    assert Included(0) != Excluded(0)
    assert Included(0) != Included(1)
    assert len({Included(0), Included(0), Excluded(0)}) == 2


def test_bound_is_immutable() -> None:
    bound = Included(3)
    with pytest.raises(FrozenInstanceError):
        bound.point = 4  # type: ignore[misc]


def test_abstract_bound_rejected() -> None:
    with pytest.raises(TypeError, match="Bound is abstract"):
        Bound(0)


def test_repr() -> None:
    assert repr(Included(0)) == "Included(0)"
    assert repr(Excluded(2.5)) == "Excluded(2.5)"


class TestTieBreaks:
    """Combinators at a shared point: intersections narrow, unions widen."""

    def test_intersect_excludes_unless_both_closed(self) -> None:
        assert Included(0).intersect_or_least(Excluded(0)) == Excluded(0)
        assert Included(0).intersect_or_greatest(Excluded(0)) == Excluded(0)
        assert Excluded(0).intersect_or_least(Excluded(0)) == Excluded(0)
        assert Included(0).intersect_or_least(Included(0)) == Included(0)
        assert Included(0).intersect_or_greatest(Included(0)) == Included(0)

    def test_union_includes_if_either_closed(self) -> None:
        assert Included(0).union_or_least(Excluded(0)) == Included(0)
        assert Included(0).union_or_greatest(Excluded(0)) == Included(0)
        assert Excluded(0).union_or_least(Included(0)) == Included(0)
        assert Excluded(0).union_or_least(Excluded(0)) == Excluded(0)
        assert Excluded(0).union_or_greatest(Excluded(0)) == Excluded(0)


class TestDistinctPoints:
    """Away from a tie the winning bound keeps its own flag."""

    def test_least(self) -> None:
        assert Included(1).intersect_or_least(Excluded(3)) == Included(1)
        assert Excluded(1).union_or_least(Included(3)) == Excluded(1)
        assert Included(3).union_or_least(Excluded(1)) == Excluded(1)

    def test_greatest(self) -> None:
        assert Included(1).intersect_or_greatest(Excluded(3)) == Excluded(3)
        assert Excluded(1).union_or_greatest(Included(3)) == Included(3)
        assert Included(3).intersect_or_greatest(Excluded(1)) == Included(3)


@pytest.mark.parametrize(
    "a, b",
    [
        (Included(0), Excluded(0)),
        (Excluded(0), Excluded(0)),
        (Included(-1), Included(2)),
        (Excluded(0.5), Included(0.25)),
    ],
)
@pytest.mark.parametrize(
    "combinator",
    [
        "intersect_or_least",
        "intersect_or_greatest",
        "union_or_least",
        "union_or_greatest",
    ],
)
def test_combinators_are_symmetric(a: Bound, b: Bound, combinator: str) -> None:
    assert getattr(a, combinator)(b) == getattr(b, combinator)(a)


def test_from_point() -> None:
    assert Bound.from_point(5) == Included(5)

    excluded = Excluded(5)
    assert Bound.from_point(excluded) is excluded


def test_default_is_closed_at_default_value() -> None:
    assert Bound.default(int) == Included(0)
    assert Bound.default(float) == Included(0.0)
    assert Bound.default(str) == Included("")
