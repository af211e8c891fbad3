"""ToA: the lossy array decomposition of a Time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from time_primitives.offset import Offset


@dataclass(frozen=True)
class ToA:
    """Wall-clock fields of a Time, without any sub-second part.

    Rebuilding a Time from a ToA always yields nanoseconds == 0, so
    Time -> ToA -> Time drops the fractional second. That loss is the
    documented behaviour of the array form.
    """

    sec: int
    min: int
    hour: int
    day: int
    month: int
    year: int
    wday: int
    yday: int
    isdst: bool
    zone: Offset
    zone_name: str = ""

    def to_list(self) -> list[Any]:
        """The 10-element array form, accepted back by ``normalize``."""
        return [
            self.sec,
            self.min,
            self.hour,
            self.day,
            self.month,
            self.year,
            self.wday,
            self.yday,
            self.isdst,
            self.zone_name,
        ]
