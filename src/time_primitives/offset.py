"""Offset: how an instant maps to local wall-clock display."""

from __future__ import annotations

import enum
import operator
import re
from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo

from time_primitives.types import SECONDS_IN_DAY, FieldRangeError
from time_primitives.zones import ZoneSource

_FIXED_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")
_UTC_NAMES = frozenset({"UTC", "Z", "GMT"})


class OffsetKind(enum.Enum):
    FIXED = "fixed"
    UTC = "utc"
    LOCAL = "local"
    NAMED = "named"


@dataclass(frozen=True)
class Offset:
    """Tagged union over the four offset kinds. Immutable.

    Only ``seconds`` is meaningful for FIXED and only ``zone_id`` for NAMED.
    Two offsets may denote the same physical zone with different kinds
    (``Offset.fixed(0)`` and ``Offset.utc()``); Time equality ignores this.
    """

    kind: OffsetKind
    seconds: int = 0
    zone_id: str | None = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def fixed(cls, seconds: int) -> Offset:
        """A constant UTC offset with no DST.

        Raises FieldRangeError("utc_offset") unless -86400 < seconds < 86400,
        and TypeError if ``seconds`` is not an integer.
        """
        seconds = operator.index(seconds)
        if not -SECONDS_IN_DAY < seconds < SECONDS_IN_DAY:
            raise FieldRangeError("utc_offset")
        return cls(OffsetKind.FIXED, seconds=seconds)

    @classmethod
    def utc(cls) -> Offset:
        return cls(OffsetKind.UTC)

    @classmethod
    def local(cls) -> Offset:
        """The process's local zone, looked up each time it is used."""
        return cls(OffsetKind.LOCAL)

    @classmethod
    def named(cls, zone_id: str) -> Offset:
        return cls(OffsetKind.NAMED, zone_id=zone_id)

    @classmethod
    def parse(cls, text: str) -> Offset:
        """Parse "UTC"/"Z"/"GMT", "+HHMM", "+HH:MM", or a zone identifier."""
        if text in _UTC_NAMES:
            return cls.utc()
        m = _FIXED_RE.match(text)
        if m:
            sign, hours, minutes = m.groups()
            if int(minutes) > 59:
                raise FieldRangeError("utc_offset")
            seconds = int(hours) * 3600 + int(minutes) * 60
            return cls.fixed(-seconds if sign == "-" else seconds)
        return cls.named(text)

    # ------------------------------------------------------------------
    # Capability
    # ------------------------------------------------------------------

    def tzinfo(self, zones: ZoneSource) -> tzinfo:
        """Resolve to a concrete timezone capability.

        Raises ZoneNotFoundError if a NAMED zone cannot be materialized.
        """
        if self.kind is OffsetKind.UTC:
            return timezone.utc
        if self.kind is OffsetKind.FIXED:
            return timezone(timedelta(seconds=self.seconds))
        if self.kind is OffsetKind.LOCAL:
            return zones.local()
        return zones.named(self.zone_id)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def is_utc(self) -> bool:
        return self.kind is OffsetKind.UTC

    @staticmethod
    def format_fixed(seconds: int) -> str:
        """Render a UTC offset as ±HHMM. Sub-minute remainders truncate.

        >>> Offset.format_fixed(-7320)
        '-0202'
        >>> Offset.format_fixed(59)
        '+0000'
        """
        sign = "-" if seconds < 0 else "+"
        hours, remainder = divmod(abs(seconds), 3600)
        return f"{sign}{hours:02d}{remainder // 60:02d}"

    def __str__(self) -> str:
        if self.kind is OffsetKind.UTC:
            return "UTC"
        if self.kind is OffsetKind.FIXED:
            return self.format_fixed(self.seconds)
        if self.kind is OffsetKind.LOCAL:
            return "local"
        return str(self.zone_id)
