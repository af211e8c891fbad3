"""Tests for the Time value type."""

from __future__ import annotations

from fractions import Fraction

import pytest

from conftest import components, utc_seconds


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
class TestConstruction:

    def test_epoch_plus_minute(self, zones):
        from time_primitives.tztime import Time

        t = Time.utc(1970, 1, 1, 0, 1, 0, zones=zones)
        assert t.to_int() == 60
        assert t.is_utc

    def test_new_with_offset(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        t = Time.new(2022, 7, 8, 12, 34, 56, 1000, Offset.fixed(3600), zones=zones)
        assert t.to_int() == utc_seconds("2022-07-08T11:34:56")
        assert t.nanoseconds == 1000

    def test_from_args_ten_element_form(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        t = Time.from_args([1, 2, 3, 4, 5, 2022, None, None, None, None], Offset.utc(), zones=zones)
        assert (t.year, t.month, t.day, t.hour, t.minute, t.second) == (2022, 5, 4, 3, 2, 1)

    def test_local(self, zones):
        """Time.local resolves in the zone source's local zone."""
        from time_primitives.tztime import Time

        t = Time.local(2022, 1, 15, 12, zones=zones)
        assert t.to_int() == utc_seconds("2022-01-15T17:00:00")
        assert t.time_zone() == "EST"

    def test_argument_errors_surface(self, zones):
        from time_primitives.tztime import Time
        from time_primitives.types import ArgumentCountError, FieldRangeError

        with pytest.raises(ArgumentCountError):
            Time.utc(zones=zones)
        with pytest.raises(FieldRangeError):
            Time.utc(2022, 1, 1, 0, 0, 0, 1_000_000, zones=zones)

    def test_gap_is_catchable(self, zones):
        from time_primitives.tztime import Time
        from time_primitives.types import ZoneResolutionError

        with pytest.raises(ZoneResolutionError):
            Time.local(2022, 3, 13, 2, 30, zones=zones)

    def test_gap_strict(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        with pytest.raises(RuntimeError):
            Time.new(2022, 3, 13, 2, 30, 0, 0, Offset.local(), zones=zones, strict=True)

    def test_fold_picks_earliest(self, zones):
        from time_primitives.tztime import Time

        t = Time.local(2022, 11, 6, 1, 30, zones=zones)
        assert t.to_int() == utc_seconds("2022-11-06T05:30:00")
        assert t.is_dst

    @pytest.mark.parametrize("nanoseconds", [-1, 2_000_000_000])
    def test_new_rejects_nanoseconds_out_of_range(self, nanoseconds, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time
        from time_primitives.types import ComponentRangeError

        with pytest.raises(ComponentRangeError) as exc_info:
            Time.new(2022, 1, 1, 0, 0, 0, nanoseconds, Offset.utc(), zones=zones)
        assert exc_info.value.field == "nanoseconds"

    @pytest.mark.parametrize(
        "fields, name",
        [
            ((2022, 1, 1, 0, 75, 0), "min"),
            ((2022, 1, 1, 0, 0, 60), "sec"),
            ((2022, 1, 1, -1, 0, 0), "hour"),
            ((2022, 13, 1, 0, 0, 0), "mon"),
            ((2022, 1, 0, 0, 0, 0), "mday"),
            ((2**31, 1, 1, 0, 0, 0), "year"),
        ],
    )
    def test_new_rejects_fields_instead_of_rolling_over(self, fields, name, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time
        from time_primitives.types import FieldRangeError

        with pytest.raises(FieldRangeError) as exc_info:
            Time.new(*fields, 0, Offset.utc(), zones=zones)
        assert exc_info.value.field == name

    def test_from_components_checks_before_zone_lookup(self, zones):
        """A bad field is reported even when the zone is unknown."""
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time
        from time_primitives.types import FieldRangeError

        with pytest.raises(FieldRangeError):
            Time.from_components(
                components([2022, 1, 1, 0, 60]), Offset.named("Mars/Olympus_Mons"), zones=zones
            )

    def test_hour_past_23_is_unresolvable(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time
        from time_primitives.types import ZoneResolutionError

        with pytest.raises(ZoneResolutionError):
            Time.new(2022, 1, 1, 24, 0, 0, 0, Offset.utc(), zones=zones)


class TestAt:

    def test_bypasses_resolution(self, zones):
        """A timestamp inside a local gap is still constructible."""
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        t = Time.at(utc_seconds("2022-03-13T07:30:00"), 0, Offset.local(), zones=zones)
        assert (t.hour, t.minute, t.time_zone()) == (3, 30, "EDT")

    @pytest.mark.parametrize("nanoseconds", [-1, 1_000_000_000])
    def test_nanoseconds_out_of_range(self, nanoseconds, zones):
        from time_primitives.tztime import Time
        from time_primitives.types import ComponentRangeError

        with pytest.raises(ComponentRangeError) as exc_info:
            Time.at(0, nanoseconds, zones=zones)
        assert exc_info.value.field == "nanoseconds"

    def test_seconds_beyond_i64(self, zones):
        from time_primitives.tztime import Time
        from time_primitives.types import ComponentRangeError

        with pytest.raises(ComponentRangeError):
            Time.at(2**63, zones=zones)

    def test_unknown_zone(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time
        from time_primitives.types import ZoneNotFoundError

        with pytest.raises(ZoneNotFoundError):
            Time.at(0, 0, Offset.named("Nowhere/Special"), zones=zones)

    def test_defaults_to_utc(self, zones):
        from time_primitives.tztime import Time

        assert Time.at(0, zones=zones).time_zone() == "UTC"


class TestNow:

    def test_frozen_clock(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time
        from time_primitives.types import Instant
        from time_primitives.zones import FrozenClock

        clock = FrozenClock(Instant(utc_seconds("2022-07-01T16:00:00"), 5))
        t = Time.now(clock=clock, zones=zones)
        assert t.offset == Offset.local()
        assert (t.hour, t.nanosecond) == (12, 5)

    def test_broken_clock_is_fatal(self, zones):
        from time_primitives.tztime import Time
        from time_primitives.types import Instant
        from time_primitives.zones import FrozenClock

        with pytest.raises(RuntimeError, match="Unable to find now"):
            Time.now(clock=FrozenClock(Instant(0, -5)), zones=zones)

    def test_system_clock(self, zones):
        from time_primitives.tztime import Time

        assert Time.now(zones=zones).to_int() > utc_seconds("2020-01-01T00:00:00")


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------
class TestIdentity:

    def test_equal_across_offsets(self, zones):
        """Same instant, different display zone: equal and same hash."""
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        utc = Time.utc(2022, 7, 1, 16, zones=zones)
        local = utc.to_local()
        named = utc.to_offset(Offset.named("Asia/Tokyo"))
        assert utc == local == named
        assert hash(utc) == hash(local) == hash(named)
        assert {utc, local, named} == {utc}
        assert utc.time_zone() != local.time_zone()

    def test_ordering_ignores_offset(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        earlier = Time.at(100, 0, Offset.fixed(-36000), zones=zones)
        later = Time.at(100, 1, Offset.fixed(36000), zones=zones)
        assert earlier < later
        assert later > earlier
        assert earlier <= earlier.to_utc()
        assert sorted([later, earlier]) == [earlier, later]

    def test_not_equal_to_other_types(self, zones):
        from time_primitives.tztime import Time

        t = Time.at(60, zones=zones)
        assert t != 60
        with pytest.raises(TypeError):
            t < 60  # noqa: B015

    def test_immutable(self, zones):
        from time_primitives.tztime import Time

        t = Time.at(60, zones=zones)
        with pytest.raises(AttributeError):
            t.seconds = 0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Numeric conversions
# ---------------------------------------------------------------------------
class TestConversions:

    def test_to_float(self, zones):
        from time_primitives.tztime import Time

        t = Time.utc(1970, 1, 1, 0, 1, 0, 1, zones=zones)
        assert t.to_float() == pytest.approx(60.000001)
        assert float(t) == t.to_float()

    def test_to_int_truncates(self, zones):
        from time_primitives.tztime import Time

        t = Time.at(-1, 999_999_999, zones=zones)
        assert t.to_int() == -1
        assert int(t) == -1

    def test_subsec_fractional_unsimplified(self, zones):
        from time_primitives.tztime import Time

        t = Time.utc(1970, 1, 1, 0, 0, 1, 1, zones=zones)
        assert t.subsec_fractional() == (1000, 1_000_000_000)

    def test_to_rational(self, zones):
        from time_primitives.tztime import Time

        t = Time.at(60, 500_000_000, zones=zones)
        assert t.to_rational() == Fraction(121, 2)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------
class TestArithmetic:

    def test_add_and_subtract_seconds(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        t = Time.at(1000, 42, Offset.fixed(3600), zones=zones)
        later = t + 3600
        assert later.to_int() == 4600
        assert later.nanoseconds == 42
        assert later.offset == Offset.fixed(3600)
        assert (3600 + t) == later
        assert (later - 3600) == t

    def test_difference_of_times(self, zones):
        from time_primitives.tztime import Time

        a = Time.at(10, 500_000_000, zones=zones)
        b = Time.at(8, 0, zones=zones)
        assert a - b == pytest.approx(2.5)

    @pytest.mark.parametrize("operand", [1.5, "1", True, None])
    def test_rejects_non_integers(self, operand, zones):
        from time_primitives.tztime import Time

        with pytest.raises(TypeError):
            Time.at(0, zones=zones) + operand

    def test_overflow(self, zones):
        from time_primitives.tztime import Time
        from time_primitives.types import ComponentRangeError

        with pytest.raises(ComponentRangeError):
            Time.at(2**63 - 1, zones=zones) + 1


# ---------------------------------------------------------------------------
# Calendar fields
# ---------------------------------------------------------------------------
class TestFields:

    def test_fields_follow_offset(self, zones):
        """Accessors are decomposed through the offset at hand."""
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        utc = Time.utc(2022, 7, 10, 23, 30, zones=zones)
        tokyo = utc.to_offset(Offset.named("Asia/Tokyo"))
        assert (utc.day, utc.hour, utc.weekday) == (10, 23, 0)
        assert (tokyo.day, tokyo.hour, tokyo.weekday) == (11, 8, 1)
        assert utc.is_sunday() and tokyo.is_monday()
        assert tokyo.utc_offset == 32400

    def test_year_day_and_micros(self, zones):
        from time_primitives.tztime import Time

        t = Time.utc(2024, 12, 31, 0, 0, 0, 123_456, zones=zones)
        assert t.year_day == 366
        assert t.microsecond == 123_456
        assert t.nanosecond == 123_456_000
        assert t.is_tuesday()

    @pytest.mark.parametrize(
        "seconds, display",
        [(-7320, "-0202"), (0, "+0000"), (59, "+0000")],
    )
    def test_time_zone_fixed(self, seconds, display, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        assert Time.at(0, 0, Offset.fixed(seconds), zones=zones).time_zone() == display

    def test_time_zone_named(self, zones):
        from time_primitives.offset import Offset
        from time_primitives.tztime import Time

        winter = Time.at(utc_seconds("2022-01-15T12:00:00"), 0, Offset.named("Europe/London"), zones=zones)
        summer = winter + 182 * 86400
        assert (winter.time_zone(), summer.time_zone()) == ("GMT", "BST")
        assert (winter.is_dst, summer.is_dst) == (False, True)


# ---------------------------------------------------------------------------
# Array form
# ---------------------------------------------------------------------------
class TestToA:

    def test_fields(self, zones):
        from time_primitives.tztime import Time

        to_a = Time.local(2022, 7, 8, 12, 34, 56, 1000, zones=zones).to_a()
        assert (to_a.sec, to_a.min, to_a.hour, to_a.day, to_a.month, to_a.year) == (56, 34, 12, 8, 7, 2022)
        assert (to_a.wday, to_a.yday, to_a.isdst, to_a.zone_name) == (5, 189, True, "EDT")

    def test_round_trip_drops_nanoseconds(self, zones):
        """Time -> ToA -> Time keeps wall fields and loses the sub-second part."""
        from time_primitives.tztime import Time

        original = Time.local(2022, 7, 8, 12, 34, 56, 1000, zones=zones)
        rebuilt = Time.from_to_a(original.to_a(), zones=zones)
        assert (rebuilt.second, rebuilt.minute, rebuilt.hour) == (56, 34, 12)
        assert (rebuilt.day, rebuilt.month, rebuilt.year) == (8, 7, 2022)
        assert original.nanoseconds == 1_000_000
        assert rebuilt.nanoseconds == 0
        assert rebuilt != original
        assert rebuilt.offset == original.offset

    def test_list_form_feeds_normalizer(self, zones):
        """to_list() is the 10-element shape the normalizer reorders."""
        from time_primitives.arguments import normalize
        from time_primitives.tztime import Time

        t = Time.utc(2022, 2, 3, 4, 5, 6, zones=zones)
        to_list = t.to_a().to_list()
        assert len(to_list) == 10
        assert to_list[-1] == "UTC"
        c = normalize(to_list)
        assert (c.year, c.month, c.day, c.hour, c.minute, c.second) == (2022, 2, 3, 4, 5, 6)
