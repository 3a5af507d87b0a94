"""Checks and lossless conversions between integer and floating-point values."""

import math

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Every integer with magnitude up to 2**53 has an exact double representation.
_DOUBLE_EXACT_LIMIT = 2**53


def is_integer(v: float) -> bool:
    """Return True if ``v`` is a whole number that fits in a 32-bit signed int."""
    if not (INT_MIN <= v <= INT_MAX):
        return False
    return math.modf(v)[0] == 0.0


def convert_int64_to_int(v: int) -> int:
    """Return ``v`` unchanged if it fits in a 32-bit signed int.

    Raises OverflowError if the conversion would lose information.
    """
    if INT_MIN <= v <= INT_MAX:
        return int(v)
    raise OverflowError(f"Fail to convert an int64 value {v} to int")


def convert_int64_to_double(v: int) -> float:
    """Return ``v`` as a float if the conversion is exact.

    Raises OverflowError if ``v`` lies outside [-2**53, 2**53].
    """
    if -_DOUBLE_EXACT_LIMIT <= v <= _DOUBLE_EXACT_LIMIT:
        return float(v)
    raise OverflowError(f"Fail to convert an int64 value {v} to double")