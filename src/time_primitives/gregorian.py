"""Proleptic Gregorian calendar arithmetic over unbounded integer years.

Days are counted from the Unix epoch, 1970-01-01 being day 0. Year 0 exists
and is a leap year. The 400-year cycle is exactly 146097 days (a whole number
of weeks), which is what lets zone lookups shift far-away years into range.
"""

from __future__ import annotations

DAYS_IN_CYCLE = 146_097
YEARS_IN_CYCLE = 400

# Day offset of 0000-03-01 relative to the Unix epoch.
_EPOCH_SHIFT = 719_468

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in month 1..12 of year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date.

    Years are counted from March so that the leap day falls at the end of
    the computational year.
    """
    if month <= 2:
        year -= 1
    era = year // YEARS_IN_CYCLE
    year_of_era = year - era * YEARS_IN_CYCLE
    march_month = (month + 9) % 12
    day_of_year = (153 * march_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * DAYS_IN_CYCLE + day_of_era - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of days_from_civil: (year, month, day) for days since epoch."""
    days += _EPOCH_SHIFT
    era = days // DAYS_IN_CYCLE
    day_of_era = days - era * DAYS_IN_CYCLE
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    march_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * march_month + 2) // 5 + 1
    month = march_month + 3 if march_month < 10 else march_month - 9
    year = year_of_era + era * YEARS_IN_CYCLE
    if month <= 2:
        year += 1
    return year, month, day


def weekday(days: int) -> int:
    """Day of week for days since epoch, 0 = Sunday. 1970-01-01 was a Thursday."""
    return (days + 4) % 7


def year_day(year: int, month: int, day: int) -> int:
    """1-based ordinal of the date within its year."""
    return days_from_civil(year, month, day) - days_from_civil(year, 1, 1) + 1


def is_valid_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)
