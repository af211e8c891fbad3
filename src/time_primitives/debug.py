"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from datetime import timezone

from time_primitives.gregorian import days_from_civil
from time_primitives.offset import Offset
from time_primitives.resolution import decompose
from time_primitives.types import SECONDS_IN_DAY, Instant
from time_primitives.zones import ZoneSource, default_zones


def show_day(
    offset: Offset,
    year: int,
    month: int,
    day: int,
    zones: ZoneSource | None = None,
) -> str:
    """Print an hour-by-hour table of a local calendar day.

    One row per UTC hour whose local wall time falls on the given date.
    Rows where the offset differs from the previous row are marked with '*',
    which makes DST gaps (a skipped local hour) and folds (a repeated local
    hour) easy to spot. Returns the string and also prints to stdout.

    Args:
        offset: Offset to display the day in
        year, month, day: Local calendar date
        zones: Zone source (defaults to the system database)
    """
    tz = offset.tzinfo(zones or default_zones())
    lines: list[str] = [f"{'UTC':<16s}     {'local':<8s}  {'offset':<6s}  zone"]

    midnight = days_from_civil(year, month, day) * SECONDS_IN_DAY
    # Any instant whose local date is this day lies within a day either side.
    start = midnight - SECONDS_IN_DAY
    stop = midnight + 2 * SECONDS_IN_DAY

    previous: int | None = None
    for seconds in range(start, stop, 3600):
        local, state = decompose(Instant(seconds), tz)
        if (local.year, local.month, local.day) != (year, month, day):
            continue
        utc, _ = decompose(Instant(seconds), timezone.utc)
        marker = "*" if previous is not None and state.utc_offset != previous else " "
        previous = state.utc_offset
        lines.append(
            f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d} {utc.hour:02d}:{utc.minute:02d}"
            f"{marker:>3s}  "
            f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}  "
            f"{Offset.format_fixed(state.utc_offset):>6s}  {state.abbreviation}"
        )

    result = "\n".join(lines)
    print(result)
    return result
