"""Zoned instant resolver: wall-clock components <-> absolute instants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from time_primitives.gregorian import (
    DAYS_IN_CYCLE,
    civil_from_days,
    days_from_civil,
    is_valid_date,
)
from time_primitives.offset import Offset
from time_primitives.types import (
    SECONDS_IN_DAY,
    Instant,
    TimeComponents,
    ZoneResolutionError,
)
from time_primitives.zones import ZoneSource

logger = logging.getLogger(__name__)

_CYCLE_SECONDS = DAYS_IN_CYCLE * SECONDS_IN_DAY
_UTC_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Lookups stay one day inside datetime's range so the local side never overflows.
_LOOKUP_MIN = days_from_civil(1, 1, 2) * SECONDS_IN_DAY
_LOOKUP_MAX = days_from_civil(9999, 12, 30) * SECONDS_IN_DAY

# Distance either side of a wall time at which neighbouring offsets are sampled.
_PROBE_SECONDS = SECONDS_IN_DAY


@dataclass(frozen=True)
class ZoneState:
    """What a zone says about one instant."""

    utc_offset: int
    abbreviation: str
    is_dst: bool


def _cycle_shift(seconds: int) -> int:
    """Whole 400-year cycles, in seconds, that bring ``seconds`` into lookup range."""
    if seconds < _LOOKUP_MIN:
        return -((seconds - _LOOKUP_MIN) // _CYCLE_SECONDS) * _CYCLE_SECONDS
    if seconds > _LOOKUP_MAX:
        return ((_LOOKUP_MAX - seconds) // _CYCLE_SECONDS) * _CYCLE_SECONDS
    return 0


def zone_state(tz: tzinfo, seconds: int) -> ZoneState:
    """Offset, abbreviation and DST flag of ``tz`` at an absolute instant.

    Instants outside years 1..9999 are answered from the equivalent instant
    a whole number of 400-year cycles away.
    """
    shifted = seconds + _cycle_shift(seconds)
    local = (_UTC_EPOCH + timedelta(seconds=shifted)).astimezone(tz)
    utc_offset = local.utcoffset()
    dst = local.dst()
    return ZoneState(
        utc_offset=int(utc_offset.total_seconds()) if utc_offset is not None else 0,
        abbreviation=local.tzname() or "",
        is_dst=bool(dst),
    )


def _wall_seconds(c: TimeComponents) -> int:
    """Wall-clock components as if they were UTC seconds since epoch."""
    days = days_from_civil(c.year, c.month, c.day)
    return days * SECONDS_IN_DAY + c.hour * 3600 + c.minute * 60 + c.second


def candidates(components: TimeComponents, tz: tzinfo) -> list[Instant]:
    """All instants whose local wall clock under ``tz`` equals ``components``.

    Returns a sorted list: empty for a nonexistent local time (DST gap or a
    calendar-invalid date), one element normally, several inside a DST fold.
    """
    c = components
    if not (0 <= c.hour <= 23 and 0 <= c.minute <= 59 and 0 <= c.second <= 59):
        return []
    if not is_valid_date(c.year, c.month, c.day):
        return []

    wall = _wall_seconds(c)
    offsets = {
        zone_state(tz, wall + delta).utc_offset
        for delta in (-_PROBE_SECONDS, 0, _PROBE_SECONDS)
    }
    # Transitions closer together than a day can hide an offset from the probes.
    offsets |= {zone_state(tz, wall - utc_offset).utc_offset for utc_offset in offsets}

    found: set[Instant] = set()
    for utc_offset in offsets:
        seconds = wall - utc_offset
        if zone_state(tz, seconds).utc_offset == utc_offset:
            found.add(Instant(seconds, c.nanoseconds))
    return sorted(found)


def resolve(
    components: TimeComponents,
    offset: Offset,
    zones: ZoneSource,
    *,
    strict: bool = False,
) -> Instant:
    """Resolve wall-clock components under ``offset`` to one absolute instant.

    Ambiguous local times resolve to the earliest candidate.

    Raises ZoneResolutionError for a nonexistent local time, or RuntimeError
    chained from it when ``strict`` is set.
    Raises ZoneNotFoundError if the offset's zone cannot be materialized.
    """
    found = candidates(components, offset.tzinfo(zones))
    if not found:
        logger.debug("no instant for %s in %s", components, offset)
        error = ZoneResolutionError(components, offset)
        if strict:
            raise RuntimeError(
                "Could not find a matching DateTime for this timezone"
            ) from error
        raise error
    if len(found) > 1:
        logger.debug(
            "ambiguous local time %s in %s: %d candidates, choosing %s",
            components,
            offset,
            len(found),
            found[0],
        )
    return found[0]


def decompose(instant: Instant, tz: tzinfo) -> tuple[TimeComponents, ZoneState]:
    """Split an instant into local wall-clock components under ``tz``."""
    state = zone_state(tz, instant.seconds)
    days, second_of_day = divmod(instant.seconds + state.utc_offset, SECONDS_IN_DAY)
    year, month, day = civil_from_days(days)
    hour, remainder = divmod(second_of_day, 3600)
    minute, second = divmod(remainder, 60)
    components = TimeComponents(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        nanoseconds=instant.nanoseconds,
    )
    return components, state
