"""Boundary: timezone database and clock capabilities.

Construction never reaches for ambient global state directly. A ZoneSource
answers "which tzinfo is zone X / the local zone" and a Clock answers "what
instant is it now"; both are passed in explicitly, with system-backed
defaults for library use and deterministic implementations for tests.
"""

from __future__ import annotations

import functools
import logging
import os
import time
from dataclasses import dataclass, field
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Mapping, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from time_primitives.types import NANOS_IN_SECOND, Instant, ZoneNotFoundError

logger = logging.getLogger(__name__)

TZ_ENVIRON = "TZ"
TZ_DEFAULT = Path("/etc/localtime")


class ZoneSource(Protocol):
    """Read-only timezone database capability."""

    def named(self, key: str) -> tzinfo:
        """Return the zone for a database key. Raises ZoneNotFoundError."""
        ...

    def local(self) -> tzinfo:
        """Return the process's current local zone."""
        ...


class Clock(Protocol):
    def now(self) -> Instant:
        ...


@functools.lru_cache(maxsize=None)
def _load_named(key: str) -> tzinfo:
    try:
        zone = ZoneInfo(key)
    except ZoneInfoNotFoundError as exc:
        raise ZoneNotFoundError(key) from exc
    except (ValueError, OSError) as exc:
        # ZoneInfo rejects malformed keys (absolute paths, "..") with ValueError
        raise ZoneNotFoundError(key, "invalid time zone key") from exc
    logger.debug("loaded time zone %r", key)
    return zone


@functools.lru_cache(maxsize=None)
def _load_file(path: str) -> tzinfo:
    with open(path, "rb") as f:
        zone = ZoneInfo.from_file(f, key=path)
    logger.debug("loaded time zone file %s", path)
    return zone


class SystemZoneSource:
    """Zones from the platform database (or the tzdata distribution).

    The local zone follows the ``TZ`` environment variable at the moment of
    use, falling back to /etc/localtime and then UTC. Loaded zones are cached
    for the lifetime of the process.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        default_path: Path = TZ_DEFAULT,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._default_path = default_path

    def named(self, key: str) -> tzinfo:
        if not key:
            raise ZoneNotFoundError(key, "empty time zone key")
        return _load_named(key)

    def local(self) -> tzinfo:
        value = self._environ.get(TZ_ENVIRON)
        if value is None:
            if self._default_path.exists():
                return _load_file(str(self._default_path))
            return timezone.utc

        value = value.removeprefix(":")
        if not value:
            return timezone.utc
        try:
            if os.path.isabs(value):
                return _load_file(value)
            return _load_named(value)
        except (ZoneNotFoundError, OSError, ValueError):
            logger.warning("unusable %s=%r, falling back to UTC", TZ_ENVIRON, value)
            return timezone.utc


@dataclass(frozen=True)
class StaticZoneSource:
    """In-memory zone table. Keys missing from ``zones`` raise ZoneNotFoundError."""

    local_zone: tzinfo = timezone.utc
    zones: Mapping[str, tzinfo] = field(default_factory=dict)

    @classmethod
    def from_keys(cls, local: str, *keys: str) -> StaticZoneSource:
        """Build a table from database keys; ``local`` is also registered."""
        table = {key: _load_named(key) for key in (local, *keys)}
        return cls(local_zone=table[local], zones=table)

    def named(self, key: str) -> tzinfo:
        try:
            return self.zones[key]
        except KeyError:
            raise ZoneNotFoundError(key) from None

    def local(self) -> tzinfo:
        return self.local_zone


class SystemClock:
    def now(self) -> Instant:
        seconds, nanoseconds = divmod(time.time_ns(), NANOS_IN_SECOND)
        return Instant(seconds, nanoseconds)


@dataclass(frozen=True)
class FrozenClock:
    """A clock that always reports the same instant."""

    instant: Instant

    def now(self) -> Instant:
        return self.instant


_SYSTEM_ZONES = SystemZoneSource()
_SYSTEM_CLOCK = SystemClock()


def default_zones() -> ZoneSource:
    return _SYSTEM_ZONES


def default_clock() -> Clock:
    return _SYSTEM_CLOCK
