"""Parsing decimal text into the tightest enclosing interval of doubles."""

import math
import re
from decimal import Decimal
from fractions import Fraction

from .interval import Interval

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def string_to_interval(s: str) -> Interval:
    """Return ``[lb, ub]`` where ``lb``/``ub`` round the number in ``s`` down/up.

    Leading whitespace is skipped and trailing text after the number is
    ignored. Raises ValueError if ``s`` does not start with a number or the
    number is too large for a double.
    """
    match = _NUMBER.match(s.lstrip())
    if match is None:
        raise ValueError(f"{s!r} does not represent a double number")
    text = match.group(0)
    nearest = float(text)
    if math.isnan(nearest) or math.isinf(nearest):
        if math.isinf(nearest) and not text.lstrip("+-")[:1].isalpha():
            raise ValueError(f"{s!r} is out of the range of a double")
        return Interval(nearest, nearest)

    exact = Fraction(Decimal(text))
    rounded = Fraction(nearest)
    if rounded == exact:
        return Interval(nearest, nearest)
    if rounded > exact:
        return Interval(math.nextafter(nearest, -math.inf), nearest)
    return Interval(nearest, math.nextafter(nearest, math.inf))