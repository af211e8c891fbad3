"""time-primitives: Immutable, timezone-aware instants and their construction rules."""

from time_primitives.arguments import normalize, to_int
from time_primitives.offset import Offset, OffsetKind
from time_primitives.resolution import ZoneState, candidates, decompose, resolve
from time_primitives.toa import ToA
from time_primitives.types import (
    ArgumentCountError,
    ArgumentError,
    ComponentRangeError,
    FieldRangeError,
    Instant,
    TimeComponents,
    TimeError,
    TypeConversionError,
    ZoneNotFoundError,
    ZoneResolutionError,
)
from time_primitives.tztime import Time
from time_primitives.zones import (
    Clock,
    FrozenClock,
    StaticZoneSource,
    SystemClock,
    SystemZoneSource,
    ZoneSource,
)

__all__ = [
    "ArgumentCountError",
    "ArgumentError",
    "Clock",
    "ComponentRangeError",
    "FieldRangeError",
    "FrozenClock",
    "Instant",
    "Offset",
    "OffsetKind",
    "StaticZoneSource",
    "SystemClock",
    "SystemZoneSource",
    "Time",
    "TimeComponents",
    "TimeError",
    "ToA",
    "TypeConversionError",
    "ZoneNotFoundError",
    "ZoneResolutionError",
    "ZoneSource",
    "ZoneState",
    "candidates",
    "decompose",
    "normalize",
    "resolve",
    "to_int",
]
