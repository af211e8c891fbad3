"""Shared types: Instant, TimeComponents, constants and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from time_primitives.offset import Offset

NANOS_IN_SECOND = 1_000_000_000
MICROS_IN_NANO = 1_000
SECONDS_IN_DAY = 86_400

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


@dataclass(frozen=True, order=True)
class Instant:
    """A point in physical time: seconds since the Unix epoch plus nanoseconds.

    Ordering is lexicographic on (seconds, nanoseconds), which is the
    chronological order because nanoseconds is always in 0..999_999_999.
    """

    seconds: int
    nanoseconds: int = 0

    @property
    def total_nanoseconds(self) -> int:
        return self.seconds * NANOS_IN_SECOND + self.nanoseconds


@dataclass(frozen=True)
class TimeComponents:
    """Wall-clock components as read in some zone.

    Invariants:
        - Each field is individually in range (month 1..12, day 1..31,
          hour/minute/second 0..59, nanoseconds 0..999_999_999)
        - No cross-field calendar validation: day=31 in April and hour=30
          are representable here and rejected only during zone resolution
    """

    year: int = 0
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanoseconds: int = 0

    @property
    def microsecond(self) -> int:
        return self.nanoseconds // MICROS_IN_NANO


class TimeError(Exception):
    """Base class for every error raised by time-primitives."""


class ArgumentError(TimeError, ValueError):
    """An argument list was rejected by the component normalizer."""


class ArgumentCountError(ArgumentError):
    """Raised when a component argument list has an unsupported length."""

    def __init__(self, given: int) -> None:
        self.given = given
        super().__init__(f"wrong number of arguments (given {given}, expected 1..8)")


class FieldRangeError(ArgumentError):
    """Raised when a single field is outside its valid range.

    The message is ``"{field} out of range"`` with the field name used
    verbatim (``year``, ``mon``, ``mday``, ``hour``, ``min``, ``sec``,
    ``subsecx``, ``utc_offset``).
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} out of range")


class TypeConversionError(TimeError, TypeError):
    """Raised when an argument cannot be implicitly converted to an integer."""

    def __init__(self, value: object, message: str) -> None:
        self.value = value
        super().__init__(message)


class ComponentRangeError(TimeError, ValueError):
    """Raised when a raw timestamp component is out of range."""

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} out of range: {value}")


class ZoneResolutionError(TimeError):
    """Raised when wall-clock components have no instant in the requested zone.

    This happens inside a forward DST gap, on a calendar-invalid date such as
    February 30, or for an hour beyond 23.
    """

    def __init__(self, components: TimeComponents, offset: Offset) -> None:
        self.components = components
        self.offset = offset
        c = components
        super().__init__(
            f"no instant matches local time "
            f"{c.year:04d}-{c.month:02d}-{c.day:02d} "
            f"{c.hour:02d}:{c.minute:02d}:{c.second:02d} in {offset}"
        )


class ZoneNotFoundError(TimeError, LookupError):
    """Raised when a timezone identifier cannot be materialized."""

    def __init__(self, key: str, reason: str = "unknown time zone") -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"{reason}: {key!r}")
