# intervalkit

Building blocks for interval-based constraint solving.

## Modules

- `intervalkit.interval` provides `Interval`, a closed interval `[lb, ub]` of
  doubles. An interval is empty when `lb > ub` or when either bound is NaN.
  It has `lb`, `ub`, `is_empty()`, `diam()`, `mid()`, `is_bisectable()`,
  `bisect(ratio)` and `union(other)` (also available as `a | b`), and the
  class method `Interval.make_empty()`. The module also has
  `bloat_point(c)`, which returns the interval from the double just below
  `c` to the double just above it.
- `intervalkit.string_to_interval` provides `string_to_interval(s)`, which
  parses the number at the start of `s` into the tightest interval of
  doubles that contains its exact decimal value. Exactly representable
  numbers such as `"0.5"` give a point interval. It raises `ValueError` if
  `s` does not start with a number or the number is too large for a double.
- `intervalkit.box` provides `Variable` (a name plus a `VariableType`:
  `CONTINUOUS`, `INTEGER`, `BINARY` or `BOOLEAN`) and `Box`, a vector of
  intervals that you can index by position or by variable.
  - `Box.add(var, lb, ub)` adds a variable. If you leave out the bounds, the
    default domain for its type is used.
  - `bisect` splits a continuous dimension at its midpoint. It splits an
    integer or binary dimension into `[lb, floor(mid)]` and
    `[floor(mid) + 1, ub]`.
  - Other members are `max_diam`, `inplace_union`, `copy`, `set_empty` and
    `interval_vector`.
  - `display_diff(variables, old_iv, new_iv)` returns one
    `var : old -> new` line for each interval that changed.
- `intervalkit.option_value` provides `OptionValue`, a setting that records
  where its value came from. The sources are ranked default < file <
  command line < code, as listed in `OptionValueType`. An update only takes
  effect if its source ranks equal to or higher than the current one.
  - `set_from_file` updates the value unless it was set from the command
    line or from code.
  - `set_from_command_line` updates the value unless it was set from code.
  - `set` always updates the value.
- `intervalkit.numeric` provides `is_integer`, `convert_int64_to_int` and
  `convert_int64_to_double`. The two conversions raise `OverflowError` if
  the result would lose information.
- `intervalkit.filesystem` provides `file_exists` and `get_extension`.

## Installation

```
pip install intervalkit
```

## Examples

```python
from intervalkit.box import Box, Variable, VariableType

x = Variable("x")
i = Variable("i", VariableType.INTEGER)

box = Box([])
box.add(x, -10, 10)
box.add(i, -5, 5)

left, right = box.bisect(x)
print(left[x], right[x])      # [-10, 0] [0, 10]

lo, hi = box.bisect(i)
print(lo[i].ub, hi[i].lb)     # 0.0 1.0
```

```python
from intervalkit.option_value import OptionValue

opt = OptionValue(0)
opt.set_from_command_line(1)
opt.set_from_file(2)          # ignored: the command line ranks higher
assert opt.get() == 1
```

```python
from intervalkit.string_to_interval import string_to_interval

iv = string_to_interval("0.1")
assert iv.lb <= 0.1 <= iv.ub and iv.diam() > 0
```

## What it does not do

This is a library only. It has no command-line program. It also has no
logging setup, no timers or profiling, no signal handling and no
backtrackable containers.

## Running the tests

```
pip install intervalkit[test]
pytest
```