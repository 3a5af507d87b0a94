import math
import sys

import pytest

from intervalkit.interval import Interval, bloat_point


def test_bloat_point():
    c1 = 3.14159265339999960176
    c2 = 3.1415926534
    c3 = 3.141592653400000489938
    assert c1 < c2
    assert c2 < c3

    bloated = bloat_point(c2)
    assert bloated.lb == c1
    assert bloated.ub == c3


def test_bloat_point_pos_inf():
    bloated = bloat_point(math.inf)
    assert bloated.lb == sys.float_info.max
    assert bloated.ub == math.inf


def test_bloat_point_neg_inf():
    bloated = bloat_point(-math.inf)
    assert bloated.lb == -math.inf
    assert bloated.ub == -sys.float_info.max


def test_default_interval_is_whole_line():
    i = Interval()
    assert i.lb == -math.inf
    assert i.ub == math.inf


def test_empty_interval():
    assert Interval.make_empty().is_empty() is True
    assert Interval(2, 1).is_empty() is True
    assert Interval(math.nan, 1).is_empty() is True
    assert Interval(1, 2).is_empty() is False
    assert Interval(2, 1) == Interval.make_empty()


def test_diam_and_mid():
    i = Interval(-10, 10)
    assert i.diam() == 20.0
    assert i.mid() == 0.0
    assert Interval(5, 5).diam() == 0.0
    assert Interval.make_empty().diam() == 0.0


def test_mid_unbounded():
    assert Interval().mid() == 0.0
    assert Interval(-math.inf, 3).mid() == -sys.float_info.max
    assert Interval(3, math.inf).mid() == sys.float_info.max


def test_is_bisectable():
    assert Interval(0, 1).is_bisectable() is True
    assert Interval(10, math.nextafter(10, 11)).is_bisectable() is False
    assert Interval(5, 5).is_bisectable() is False
    assert Interval.make_empty().is_bisectable() is False


def test_bisect_half():
    left, right = Interval(-10, 10).bisect(0.5)
    assert left == Interval(-10, 0)
    assert right == Interval(0, 10)


def test_bisect_ratio():
    left, right = Interval(0, 10).bisect(0.25)
    assert left == Interval(0, 2.5)
    assert right == Interval(2.5, 10)


def test_bisect_errors():
    with pytest.raises(ValueError):
        Interval(10, math.nextafter(10, 11)).bisect(0.5)
    with pytest.raises(ValueError):
        Interval(0, 1).bisect(1.0)
    with pytest.raises(ValueError):
        Interval(0, 1).bisect(0.0)


def test_union():
    assert Interval(0, 1) | Interval(2, 3) == Interval(0, 3)
    assert Interval(0, 1).union(Interval(3, 4)) == Interval(0, 4)
    assert Interval.make_empty() | Interval(1, 2) == Interval(1, 2)
    assert Interval(1, 2) | Interval.make_empty() == Interval(1, 2)


def test_equality():
    assert Interval(3, 5) == Interval(3.0, 5.0)
    assert not (Interval(3, 5) == Interval(3, 6))
    assert hash(Interval(3, 5)) == hash(Interval(3.0, 5.0))


@pytest.mark.parametrize(
    "interval, text",
    [
        (Interval(0, 1), "[0, 1]"),
        (Interval(-0.5, 2.25), "[-0.5, 2.25]"),
        (Interval(), "[-oo, +oo]"),
        (Interval.make_empty(), "[ empty ]"),
    ],
)
def test_str(interval, text):
    assert str(interval) == text