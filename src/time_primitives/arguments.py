"""Component argument normalizer: positional argument list -> TimeComponents.

Accepted shapes:
    - 1..8 elements: (year, month, day, hour, minute, second, usec, ignored)
    - 10 elements: the ``to_a`` shape (sec, min, hour, day, month, year,
      wday, yday, isdst, zone); only the first six are read

Each present position is converted to an integer and range-checked left to
right, stopping at the first failure. Missing trailing positions take the
TimeComponents defaults.
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from time_primitives.types import (
    I32_MAX,
    I32_MIN,
    MICROS_IN_NANO,
    NANOS_IN_SECOND,
    ArgumentCountError,
    ComponentRangeError,
    FieldRangeError,
    TimeComponents,
    TypeConversionError,
)

_TO_A_LENGTH = 10
_MAX_POSITIONAL = 8


def to_int(value: Any) -> int:
    """Implicit integer conversion.

    Integers (anything implementing ``__index__``) pass through, other real
    numbers truncate toward zero. Booleans, None, strings and everything else
    raise TypeConversionError.
    """
    if value is None:
        raise TypeConversionError(value, "no implicit conversion from nil to integer")
    if isinstance(value, bool):
        raise TypeConversionError(
            value, f"no implicit conversion of {str(value).lower()} into Integer"
        )
    try:
        return operator.index(value)
    except TypeError:
        pass
    if isinstance(value, numbers.Real):
        if math.isnan(value):
            raise TypeConversionError(value, "NaN")
        if math.isinf(value):
            raise TypeConversionError(value, "-Infinity" if value < 0 else "Infinity")
        return math.trunc(value)
    raise TypeConversionError(
        value, f"no implicit conversion of {type(value).__name__} into Integer"
    )


@dataclass(frozen=True)
class _Field:
    """One row of the positional table."""

    attr: str | None  # None: position accepted and ignored
    name: str = ""
    low: int = 0
    high: int = 0
    scale: int = 1


_FIELDS: tuple[_Field, ...] = (
    _Field("year", "year", I32_MIN, I32_MAX),
    _Field("month", "mon", 1, 12),
    _Field("day", "mday", 1, 31),
    _Field("hour", "hour", 0, 59),
    _Field("minute", "min", 0, 59),
    _Field("second", "sec", 0, 59),
    _Field("nanoseconds", "subsecx", 0, 999_999, scale=MICROS_IN_NANO),
    _Field(None),
)


def _reorder_to_a(args: Sequence[Any]) -> list[Any]:
    """Turn a 10-element to_a list into canonical (year..second) order.

    Positions 6-9 are dropped before any conversion happens, so their
    contents never matter.
    """
    packed = list(args)
    packed[0], packed[5] = packed[5], packed[0]
    packed[1], packed[4] = packed[4], packed[1]
    packed[2], packed[3] = packed[3], packed[2]
    return packed[:6]


def normalize(
    args: Sequence[Any],
    convert: Callable[[Any], int] = to_int,
) -> TimeComponents:
    """Validate a positional argument list into TimeComponents.

    Raises ArgumentCountError for lengths other than 1..8 and 10.
    Raises TypeConversionError if a read position is not integer-like.
    Raises FieldRangeError naming the first field that is out of range.
    """
    given = len(args)
    if given == _TO_A_LENGTH:
        args = _reorder_to_a(args)
    elif not 1 <= given <= _MAX_POSITIONAL:
        raise ArgumentCountError(given)

    values: dict[str, int] = {}
    for row, arg in zip(_FIELDS, args):
        if row.attr is None:
            continue
        value = convert(arg)
        if not row.low <= value <= row.high:
            raise FieldRangeError(row.name)
        values[row.attr] = value * row.scale

    return TimeComponents(**values)


def check_components(components: TimeComponents) -> TimeComponents:
    """Range-check components that were built without ``normalize``.

    Uses the same per-field limits as the positional table. Raises
    FieldRangeError naming the first field out of range, or
    ComponentRangeError for nanoseconds outside 0..999_999_999.
    """
    for row in _FIELDS:
        if row.attr is None or row.attr == "nanoseconds":
            continue
        if not row.low <= operator.index(getattr(components, row.attr)) <= row.high:
            raise FieldRangeError(row.name)
    nanoseconds = operator.index(components.nanoseconds)
    if not 0 <= nanoseconds < NANOS_IN_SECOND:
        raise ComponentRangeError("nanoseconds", nanoseconds)
    return components
