#!/usr/bin/env python
"""Visual verification report for time-primitives.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Argument normalization  -- each fixture argument list and its components or error
  2. Offset rendering        -- fixed offsets as ±HHMM
  3. Zone resolution         -- candidates and the chosen instant per DST case
  4. DST days                -- ASCII hour-by-hour view of a fold and a gap day
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
SCENARIOS = ROOT / "data" / "fixtures" / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from time_primitives.arguments import normalize
from time_primitives.debug import show_day
from time_primitives.offset import Offset
from time_primitives.resolution import candidates, resolve
from time_primitives.types import TimeComponents, TimeError
from time_primitives.zones import SystemZoneSource


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


_args = _load(SCENARIOS / "arguments.json")
_offsets = _load(SCENARIOS / "offsets.json")
_zones = _load(SCENARIOS / "zones.json")

ZONES = SystemZoneSource()

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _fmt_components(c: TimeComponents) -> str:
    return (
        f"{c.year:04d}-{c.month:02d}-{c.day:02d} "
        f"{c.hour:02d}:{c.minute:02d}:{c.second:02d}.{c.nanoseconds:09d}"
    )


def _fmt_instant(seconds: int) -> str:
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M:%S UTC")


# ---------------------------------------------------------------------------
# Section 1: Argument normalization
# ---------------------------------------------------------------------------
def section_arguments():
    banner("ARGUMENT NORMALIZATION")

    heading("Accepted")
    rows = []
    for spec in _args["valid"]:
        rows.append([spec["id"], json.dumps(spec["args"]), _fmt_components(normalize(spec["args"]))])
    table(["Case", "Args", "Components"], rows)

    heading("Rejected")
    rows = []
    for group in ("count_errors", "range_errors", "type_errors"):
        for spec in _args[group]:
            try:
                normalize(spec["args"])
                outcome = "ACCEPTED (unexpected)"
            except TimeError as exc:
                outcome = f"{type(exc).__name__}: {exc}"
            rows.append([spec["id"], json.dumps(spec["args"]), outcome])
    table(["Case", "Args", "Error"], rows)


# ---------------------------------------------------------------------------
# Section 2: Offsets
# ---------------------------------------------------------------------------
def section_offsets():
    banner("FIXED OFFSET RENDERING")
    rows = []
    for spec in _offsets["display"]:
        rendered = Offset.format_fixed(spec["seconds"])
        status = "ok" if rendered == spec["display"] else f"MISMATCH (want {spec['display']})"
        rows.append([str(spec["seconds"]), rendered, status])
    table(["Seconds", "Display", "Check"], rows)


# ---------------------------------------------------------------------------
# Section 3: Zone resolution
# ---------------------------------------------------------------------------
def section_resolution():
    banner("ZONE RESOLUTION")
    rows = []
    for spec in _zones["cases"]:
        c = TimeComponents(*spec["components"])
        offset = Offset.named(spec["zone"])
        found = candidates(c, offset.tzinfo(ZONES))
        try:
            chosen = _fmt_instant(resolve(c, offset, ZONES).seconds)
        except TimeError as exc:
            chosen = type(exc).__name__
        rows.append([spec["id"], spec["zone"], str(len(found)), chosen])
    table(["Case", "Zone", "Candidates", "Resolved"], rows)


# ---------------------------------------------------------------------------
# Section 4: DST days
# ---------------------------------------------------------------------------
def section_dst_days():
    banner("DST DAYS")
    new_york = Offset.named("America/New_York")

    heading("America/New_York 2022-03-13 (gap)")
    show_day(new_york, 2022, 3, 13, zones=ZONES)

    heading("America/New_York 2022-11-06 (fold)")
    show_day(new_york, 2022, 11, 6, zones=ZONES)


def main():
    banner("TIME-PRIMITIVES   --  VISUAL VERIFICATION REPORT")
    print(f"    Fixture data: {SCENARIOS.relative_to(ROOT)}/")

    section_arguments()
    section_offsets()
    section_resolution()
    section_dst_days()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
