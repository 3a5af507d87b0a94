"""Closed floating-point intervals."""

from __future__ import annotations

import math
import sys

_INF = math.inf
_DBL_MAX = sys.float_info.max


def _format_bound(x: float) -> str:
    if x == _INF:
        return "+oo"
    if x == -_INF:
        return "-oo"
    if x.is_integer():
        return str(int(x))
    return repr(x)


class Interval:
    """A closed interval ``[lb, ub]`` of doubles; empty when ``lb > ub`` or NaN."""

    __slots__ = ("_lb", "_ub")

    def __init__(self, lb: float = -_INF, ub: float = _INF) -> None:
        lb = float(lb)
        ub = float(ub)
        if math.isnan(lb) or math.isnan(ub) or lb > ub:
            lb, ub = _INF, -_INF
        self._lb = lb
        self._ub = ub

    @classmethod
    def make_empty(cls) -> Interval:
        """Return the empty interval."""
        return cls(_INF, -_INF)

    @property
    def lb(self) -> float:
        return self._lb

    @property
    def ub(self) -> float:
        return self._ub

    def is_empty(self) -> bool:
        return self._lb > self._ub

    def diam(self) -> float:
        """Return ``ub - lb``; 0 for the empty interval."""
        if self.is_empty():
            return 0.0
        return self._ub - self._lb

    def mid(self) -> float:
        """Return a point inside the interval close to its centre."""
        if self.is_empty():
            return math.nan
        lb, ub = self._lb, self._ub
        if lb == -_INF and ub == _INF:
            return 0.0
        if lb == -_INF:
            return -_DBL_MAX
        if ub == _INF:
            return _DBL_MAX
        m = 0.5 * lb + 0.5 * ub
        return min(max(m, lb), ub)

    def is_bisectable(self) -> bool:
        """Return True if a point strictly between the bounds exists."""
        if self.is_empty():
            return False
        m = self.mid()
        return self._lb < m < self._ub

    def bisect(self, ratio: float = 0.5) -> tuple[Interval, Interval]:
        """Split the interval at the point given by ``ratio`` in (0, 1)."""
        if not 0.0 < ratio < 1.0:
            raise ValueError(f"bisection ratio {ratio} is not in (0, 1)")
        if not self.is_bisectable():
            raise ValueError(f"interval {self} is not bisectable")
        lb, ub = self._lb, self._ub
        if ratio == 0.5:
            point = self.mid()
        elif lb == -_INF:
            point = 0.0 if ub == _INF else -_DBL_MAX
        elif ub == _INF:
            point = _DBL_MAX
        else:
            point = ratio * ub + (1.0 - ratio) * lb
            if point <= lb:
                point = math.nextafter(lb, _INF)
            if point >= ub:
                point = math.nextafter(ub, -_INF)
        return Interval(lb, point), Interval(point, ub)

    def union(self, other: Interval) -> Interval:
        """Return the smallest interval containing both intervals."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return Interval(min(self._lb, other._lb), max(self._ub, other._ub))

    def __or__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.union(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._lb == other._lb and self._ub == other._ub

    def __hash__(self) -> int:
        return hash((self._lb, self._ub))

    def __str__(self) -> str:
        if self.is_empty():
            return "[ empty ]"
        return f"[{_format_bound(self._lb)}, {_format_bound(self._ub)}]"

    def __repr__(self) -> str:
        if self.is_empty():
            return "Interval.make_empty()"
        return f"Interval({self._lb!r}, {self._ub!r})"


def bloat_point(c: float) -> Interval:
    """Return ``[prev(c), next(c)]``, the neighbouring doubles around ``c``.

    For +inf this is ``[DBL_MAX, +inf]``; for -inf, ``[-inf, -DBL_MAX]``.
    """
    return Interval(math.nextafter(c, -_INF), math.nextafter(c, _INF))