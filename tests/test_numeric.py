import math

import pytest

from intervalkit.numeric import (
    convert_int64_to_double,
    convert_int64_to_int,
    is_integer,
)


def test_is_integer():
    assert is_integer(3.0) is True
    assert is_integer(3.1) is False


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, True),
        (-7.0, True),
        (2147483647.0, True),
        (-2147483648.0, True),
        (2147483648.0, False),
        (-2147483649.0, False),
        (math.inf, False),
        (-math.inf, False),
        (math.nan, False),
        (0.5, False),
    ],
)
def test_is_integer_range(value, expected):
    assert is_integer(value) is expected


def test_convert_int64_to_int():
    assert convert_int64_to_int(3017294) == 3017294
    with pytest.raises(OverflowError):
        convert_int64_to_int(2147483647 + 1)
    with pytest.raises(OverflowError):
        convert_int64_to_int(-2147483648 - 1)


def test_convert_int64_to_int_bounds():
    assert convert_int64_to_int(2147483647) == 2147483647
    assert convert_int64_to_int(-2147483648) == -2147483648


def test_convert_int64_to_double():
    assert convert_int64_to_double(3017294) == 3017294.0
    m1 = 1 << 53
    m2 = float(1 << 53)
    assert convert_int64_to_double(m1) == m2
    with pytest.raises(OverflowError):
        convert_int64_to_double(m1 + 1)
    with pytest.raises(OverflowError):
        convert_int64_to_double(-m1 - 1)


def test_convert_int64_to_double_negative_bound():
    assert convert_int64_to_double(-(1 << 53)) == -9007199254740992.0