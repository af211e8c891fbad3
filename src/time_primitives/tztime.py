"""Time: an immutable, timezone-aware instant."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field, replace
from fractions import Fraction
from typing import Any, Sequence

from time_primitives import gregorian
from time_primitives.arguments import check_components, normalize
from time_primitives.offset import Offset, OffsetKind
from time_primitives.resolution import ZoneState, decompose, resolve
from time_primitives.toa import ToA
from time_primitives.types import (
    I64_MAX,
    I64_MIN,
    NANOS_IN_SECOND,
    ComponentRangeError,
    Instant,
    TimeComponents,
    TimeError,
)
from time_primitives.zones import Clock, ZoneSource, default_clock, default_zones


@dataclass(frozen=True, eq=False)
class Time:
    """An absolute instant paired with the offset used to display it.

    Equality, ordering and hashing look only at the instant; two Times in
    different zones that denote the same moment are equal and hash alike.
    Calendar fields are decomposed through the offset on every read and are
    never stored.

    Invariants:
        - I64_MIN <= seconds <= I64_MAX
        - 0 <= nanoseconds < NANOS_IN_SECOND
    """

    seconds: int
    nanoseconds: int
    offset: Offset
    zones: ZoneSource = field(default_factory=default_zones, repr=False)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanoseconds: int,
        offset: Offset,
        *,
        zones: ZoneSource | None = None,
        strict: bool = False,
    ) -> Time:
        """Build a Time from wall-clock components in ``offset``.

        During a DST fold the earliest matching instant is chosen.
        Raises ZoneResolutionError (RuntimeError if ``strict``) when the
        local time does not exist.
        """
        components = TimeComponents(
            year, month, day, hour, minute, second, nanoseconds
        )
        return cls.from_components(components, offset, zones=zones, strict=strict)

    @classmethod
    def from_components(
        cls,
        components: TimeComponents,
        offset: Offset,
        *,
        zones: ZoneSource | None = None,
        strict: bool = False,
    ) -> Time:
        """Resolve components in ``offset``.

        Raises FieldRangeError or ComponentRangeError if a field is out of
        range, before any zone lookup happens.
        """
        check_components(components)
        zones = zones or default_zones()
        instant = resolve(components, offset, zones, strict=strict)
        return cls(instant.seconds, instant.nanoseconds, offset, zones)

    @classmethod
    def from_args(
        cls,
        args: Sequence[Any],
        offset: Offset,
        *,
        zones: ZoneSource | None = None,
        strict: bool = False,
    ) -> Time:
        """Normalize a positional argument list, then resolve it in ``offset``."""
        return cls.from_components(
            normalize(args), offset, zones=zones, strict=strict
        )

    @classmethod
    def utc(cls, *args: Any, zones: ZoneSource | None = None) -> Time:
        """``Time.utc(2022, 2, 3, 4, 5, 6, 7)``: year..usec in UTC."""
        return cls.from_args(args, Offset.utc(), zones=zones)

    @classmethod
    def local(cls, *args: Any, zones: ZoneSource | None = None) -> Time:
        """Same argument shapes as ``utc``, resolved in the local zone."""
        return cls.from_args(args, Offset.local(), zones=zones)

    @classmethod
    def at(
        cls,
        seconds: int,
        nanoseconds: int = 0,
        offset: Offset | None = None,
        *,
        zones: ZoneSource | None = None,
    ) -> Time:
        """Build a Time directly from a Unix timestamp, bypassing resolution.

        Raises ComponentRangeError if nanoseconds is outside 0..999_999_999
        or seconds does not fit a signed 64-bit integer.
        Raises ZoneNotFoundError if the offset's zone cannot be materialized.
        """
        seconds = operator.index(seconds)
        nanoseconds = operator.index(nanoseconds)
        if not 0 <= nanoseconds < NANOS_IN_SECOND:
            raise ComponentRangeError("nanoseconds", nanoseconds)
        if not I64_MIN <= seconds <= I64_MAX:
            raise ComponentRangeError("seconds", seconds)
        offset = offset or Offset.utc()
        zones = zones or default_zones()
        offset.tzinfo(zones)
        return cls(seconds, nanoseconds, offset, zones)

    @classmethod
    def now(
        cls,
        *,
        clock: Clock | None = None,
        zones: ZoneSource | None = None,
    ) -> Time:
        """The current instant in the local zone.

        Raises RuntimeError if the clock or zone database is unusable.
        """
        clock = clock or default_clock()
        try:
            instant = clock.now()
            return cls.at(
                instant.seconds, instant.nanoseconds, Offset.local(), zones=zones
            )
        except (TimeError, OSError) as exc:
            raise RuntimeError("Unable to find now") from exc

    @classmethod
    def from_to_a(cls, to_a: ToA, *, zones: ZoneSource | None = None) -> Time:
        """Rebuild a Time from its array form. Nanoseconds are always 0."""
        return cls.new(
            to_a.year,
            to_a.month,
            to_a.day,
            to_a.hour,
            to_a.min,
            to_a.sec,
            0,
            to_a.zone,
            zones=zones,
        )

    # ------------------------------------------------------------------
    # Identity: instant only
    # ------------------------------------------------------------------

    @property
    def instant(self) -> Instant:
        return Instant(self.seconds, self.nanoseconds)

    def _key(self) -> tuple[int, int]:
        return (self.seconds, self.nanoseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # ------------------------------------------------------------------
    # Numeric conversions
    # ------------------------------------------------------------------

    def to_int(self) -> int:
        """Whole seconds since the epoch, ignoring nanoseconds."""
        return self.seconds

    def to_float(self) -> float:
        """Seconds since the epoch with the fraction; large values lose precision."""
        return float(self.seconds) + float(self.nanoseconds) / float(NANOS_IN_SECOND)

    def subsec_fractional(self) -> tuple[int, int]:
        """Unsimplified (numerator, denominator) of the sub-second part."""
        return (self.nanoseconds, NANOS_IN_SECOND)

    def to_rational(self) -> Fraction:
        return self.seconds + Fraction(*self.subsec_fractional())

    __int__ = to_int
    __float__ = to_float

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _shift(self, seconds: int) -> Time:
        shifted = self.seconds + seconds
        if not I64_MIN <= shifted <= I64_MAX:
            raise ComponentRangeError("seconds", shifted)
        return replace(self, seconds=shifted)

    def __add__(self, other: object) -> Time:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self._shift(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Any:
        if isinstance(other, Time):
            delta = (self.seconds - other.seconds) + (
                self.nanoseconds - other.nanoseconds
            ) / NANOS_IN_SECOND
            return float(delta)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self._shift(-other)

    # ------------------------------------------------------------------
    # Re-zoning
    # ------------------------------------------------------------------

    def to_offset(self, offset: Offset) -> Time:
        """The same instant displayed in another offset."""
        offset.tzinfo(self.zones)
        return replace(self, offset=offset)

    def to_utc(self) -> Time:
        return self.to_offset(Offset.utc())

    def to_local(self) -> Time:
        return self.to_offset(Offset.local())

    # ------------------------------------------------------------------
    # Calendar fields, decomposed on every read
    # ------------------------------------------------------------------

    def _parts(self) -> tuple[TimeComponents, ZoneState]:
        return decompose(self.instant, self.offset.tzinfo(self.zones))

    def components(self) -> TimeComponents:
        return self._parts()[0]

    @property
    def year(self) -> int:
        return self.components().year

    @property
    def month(self) -> int:
        return self.components().month

    @property
    def day(self) -> int:
        return self.components().day

    @property
    def hour(self) -> int:
        return self.components().hour

    @property
    def minute(self) -> int:
        return self.components().minute

    @property
    def second(self) -> int:
        return self.components().second

    @property
    def nanosecond(self) -> int:
        return self.nanoseconds

    @property
    def microsecond(self) -> int:
        return self.components().microsecond

    @property
    def weekday(self) -> int:
        """Day of week, 0 = Sunday."""
        c = self.components()
        return gregorian.weekday(gregorian.days_from_civil(c.year, c.month, c.day))

    @property
    def year_day(self) -> int:
        """Day of year, 1..366."""
        c = self.components()
        return gregorian.year_day(c.year, c.month, c.day)

    @property
    def is_dst(self) -> bool:
        return self._parts()[1].is_dst

    @property
    def utc_offset(self) -> int:
        """Seconds east of UTC in force at this instant."""
        return self._parts()[1].utc_offset

    @property
    def is_utc(self) -> bool:
        return self.offset.is_utc

    def time_zone(self) -> str:
        """Display name: "UTC", "±HHMM" for fixed offsets, else the abbreviation."""
        if self.offset.kind is OffsetKind.UTC:
            return "UTC"
        if self.offset.kind is OffsetKind.FIXED:
            return Offset.format_fixed(self.offset.seconds)
        return self._parts()[1].abbreviation

    def is_sunday(self) -> bool:
        return self.weekday == 0

    def is_monday(self) -> bool:
        return self.weekday == 1

    def is_tuesday(self) -> bool:
        return self.weekday == 2

    def is_wednesday(self) -> bool:
        return self.weekday == 3

    def is_thursday(self) -> bool:
        return self.weekday == 4

    def is_friday(self) -> bool:
        return self.weekday == 5

    def is_saturday(self) -> bool:
        return self.weekday == 6

    # ------------------------------------------------------------------
    # Array form
    # ------------------------------------------------------------------

    def to_a(self) -> ToA:
        """Lossy array form; see ToA."""
        c, state = self._parts()
        days = gregorian.days_from_civil(c.year, c.month, c.day)
        return ToA(
            sec=c.second,
            min=c.minute,
            hour=c.hour,
            day=c.day,
            month=c.month,
            year=c.year,
            wday=gregorian.weekday(days),
            yday=gregorian.year_day(c.year, c.month, c.day),
            isdst=state.is_dst,
            zone=self.offset,
            zone_name=self.time_zone(),
        )
