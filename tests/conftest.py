"""Shared test fixtures and data loading for time-primitives.

All test data lives in data/fixtures/scenarios/ as JSON files. This module
loads that data and exposes helper functions + pytest fixtures for the tests.

Reference local zone: America/New_York (fixed through StaticZoneSource, so
results never depend on the machine's TZ).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"

LOCAL_ZONE = "America/New_York"
TEST_ZONES = (
    "America/New_York",
    "Europe/London",
    "Australia/Lord_Howe",
    "Pacific/Apia",
    "Asia/Tokyo",
)


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def utc_seconds(iso: str) -> int:
    """Unix seconds for a naive ISO string read as UTC.

    >>> utc_seconds("1970-01-01T00:01:00")
    60
    """
    dt = datetime.fromisoformat(iso).replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def make_zones(local: str = LOCAL_ZONE):
    """StaticZoneSource holding every test zone, with ``local`` as the local zone."""
    from time_primitives.zones import StaticZoneSource

    return StaticZoneSource.from_keys(local, *TEST_ZONES)


def components(values: list[int]):
    """TimeComponents from a positional (year, month, day, ...) list."""
    from time_primitives.types import TimeComponents

    return TimeComponents(*values)


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def zones():
    """Static zone table with America/New_York as the local zone."""
    return make_zones()


@pytest.fixture
def tokyo_zones():
    """Static zone table with Asia/Tokyo as the local zone."""
    return make_zones("Asia/Tokyo")


@pytest.fixture
def utc():
    from time_primitives.offset import Offset

    return Offset.utc()
