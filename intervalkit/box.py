"""Boxes: named, typed variables paired with interval domains."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence, Union

from .interval import Interval
from .numeric import INT_MAX, is_integer

_next_variable_id = itertools.count()


class VariableType(Enum):
    """The sort of a variable, which decides its default domain."""

    CONTINUOUS = "Continuous"
    INTEGER = "Integer"
    BINARY = "Binary"
    BOOLEAN = "Boolean"


@dataclass(frozen=True)
class Variable:
    """A named variable; two variables are the same only if created once."""

    name: str
    type: VariableType = VariableType.CONTINUOUS
    id: int = field(default_factory=lambda: next(_next_variable_id), repr=False)

    def __str__(self) -> str:
        return self.name


Key = Union[int, Variable]


def _default_domain(variable: Variable) -> Interval:
    if variable.type in (VariableType.BOOLEAN, VariableType.BINARY):
        return Interval(0.0, 1.0)
    if variable.type is VariableType.INTEGER:
        return Interval(-INT_MAX, INT_MAX)
    return Interval()


class Box:
    """An n-dimensional interval vector indexed by position or by variable."""

    def __init__(self, variables: Iterable[Variable] = ()) -> None:
        self._variables: list[Variable] = []
        self._values: list[Interval] = []
        self._index: dict[Variable, int] = {}
        self._empty_without_variables = False
        for variable in variables:
            self.add(variable)

    def add(
        self,
        variable: Variable,
        lb: float | None = None,
        ub: float | None = None,
    ) -> None:
        """Add ``variable``; its domain is ``[lb, ub]`` or the default for its type."""
        if variable in self._index:
            raise ValueError(f"Variable {variable} is already in this box.")
        if (lb is None) != (ub is None):
            raise TypeError("lb and ub must be given together")
        if lb is None:
            domain = _default_domain(variable)
        else:
            if not lb <= ub:
                raise ValueError(f"Lower bound {lb} is greater than upper bound {ub}.")
            if variable.type is VariableType.BINARY and not (0.0 <= lb and ub <= 1.0):
                raise ValueError(
                    f"Binary variable {variable} needs bounds in [0, 1], got [{lb}, {ub}]."
                )
            if variable.type is VariableType.INTEGER and not (
                is_integer(lb) and is_integer(ub)
            ):
                raise ValueError(
                    f"Integer variable {variable} needs integer bounds, got [{lb}, {ub}]."
                )
            domain = Interval(lb, ub)
        self._index[variable] = len(self._variables)
        self._variables.append(variable)
        self._values.append(domain)

    def is_empty(self) -> bool:
        if not self._values:
            return self._empty_without_variables
        return any(interval.is_empty() for interval in self._values)

    def set_empty(self) -> None:
        """Make every interval of the box empty."""
        self._values[:] = [Interval.make_empty() for _ in self._values]
        self._empty_without_variables = True

    def __len__(self) -> int:
        return len(self._variables)

    def _resolve(self, key: Key) -> int:
        if isinstance(key, Variable):
            try:
                return self._index[key]
            except KeyError:
                raise KeyError(f"Variable {key} is not found in this box.") from None
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < len(self._variables):
                raise IndexError(f"Index {key} is out of range for a box of size {len(self)}.")
            return key
        raise TypeError(f"Box indices must be int or Variable, not {type(key).__name__}")

    def __getitem__(self, key: Key) -> Interval:
        return self._values[self._resolve(key)]

    def __setitem__(self, key: Key, value: Interval) -> None:
        if not isinstance(value, Interval):
            raise TypeError(f"Box values must be Interval, not {type(value).__name__}")
        self._values[self._resolve(key)] = value

    def variables(self) -> list[Variable]:
        return list(self._variables)

    def variable(self, i: int) -> Variable:
        return self._variables[self._resolve(i)]

    def has_variable(self, var: Variable) -> bool:
        return var in self._index

    def index(self, var: Variable) -> int:
        return self._resolve(var)

    def interval_vector(self) -> list[Interval]:
        """Return the box's own list of intervals; assigning to it updates the box."""
        return self._values

    def max_diam(self) -> tuple[float, int]:
        """Return the largest diameter among bisectable intervals and its index.

        The index is -1 when no interval is bisectable.
        """
        best_diam, best_index = 0.0, -1
        for i, interval in enumerate(self._values[: len(self._variables)]):
            diam = interval.diam()
            if diam > best_diam and interval.is_bisectable():
                best_diam, best_index = diam, i
        return best_diam, best_index

    def bisect(self, key: Key) -> tuple[Box, Box]:
        """Split the box in two along the dimension given by ``key``.

        Raises KeyError if a variable is not in the box and ValueError if the
        dimension cannot be bisected.
        """
        i = self._resolve(key)
        var = self._variables[i]
        interval = self._values[i]
        if not interval.is_bisectable():
            raise ValueError(
                f"Variable {var} = {interval} is not bisectable but Box.bisect is called."
            )
        if var.type is VariableType.CONTINUOUS:
            first, second = interval.bisect(0.5)
        elif var.type in (VariableType.INTEGER, VariableType.BINARY):
            lb = math.ceil(interval.lb)
            ub = math.floor(interval.ub)
            mid_floor = math.floor(interval.mid())
            first = Interval(lb, mid_floor)
            second = Interval(mid_floor + 1, ub)
        else:
            raise ValueError(f"Boolean variable {var} cannot be bisected.")
        box1, box2 = self.copy(), self.copy()
        box1._values[i] = first
        box2._values[i] = second
        return box1, box2

    def inplace_union(self, other: Box) -> Box:
        """Replace each interval with its hull with ``other``'s; return self."""
        if self._variables != other._variables:
            raise ValueError("Union of boxes needs the same variables in the same order.")
        self._values[:] = [a | b for a, b in zip(self._values, other._values)]
        return self

    def copy(self) -> Box:
        clone = Box.__new__(Box)
        clone._variables = list(self._variables)
        clone._values = list(self._values)
        clone._index = dict(self._index)
        clone._empty_without_variables = self._empty_without_variables
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self._variables == other._variables and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(
            f"{var} : {_format_value(var, interval)}"
            for var, interval in zip(self._variables, self._values)
        )

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{var}={interval!r}" for var, interval in zip(self._variables, self._values)
        )
        return f"Box({entries})"


def _format_value(var: Variable, interval: Interval) -> str:
    if var.type in (VariableType.INTEGER, VariableType.BINARY):
        if interval.is_empty():
            return "[ empty ]"
        return f"[{int(interval.lb)}, {int(interval.ub)}]"
    if var.type is VariableType.BOOLEAN:
        if interval.ub == 0.0:
            return "False"
        if interval.lb == 1.0:
            return "True"
        return "Unassigned"
    return str(interval)


def display_diff(
    variables: Sequence[Variable],
    old_iv: Sequence[Interval],
    new_iv: Sequence[Interval],
) -> str:
    """Return one ``var : old -> new`` line for every interval that changed."""
    return "".join(
        f"{var} : {old} -> {new}\n"
        for var, old, new in zip(variables, old_iv, new_iv)
        if old != new
    )