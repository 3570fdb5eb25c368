"""
tests/calendar/test_interval.py

Covers:
  - Unit constructors and readers agree with each other
  - Hebrew parts and moons on the shared unit scale
  - Arithmetic, ordering and ratios
  - Euclidean remainder and rounding down for negative spans
  - timedelta conversion
"""

from datetime import timedelta

import pytest

from keystone.calendar import CalendarInterval
from keystone.calendar.interval import UNITS_PER_DAY, UNITS_PER_HEBREW_PART, UNITS_PER_SECOND


# ── Helpers ───────────────────────────────────────────────────────────────────

def assert_close(a, b, rel=1e-12):
    assert abs(a - b) <= rel * max(abs(b), 1.0), f"{a} != {b}"


# ── Constructors and readers ──────────────────────────────────────────────────

class TestUnits:

    def test_unit_constants(self):
        assert UNITS_PER_SECOND == 3
        assert UNITS_PER_HEBREW_PART == 10
        assert UNITS_PER_DAY == 259_200

    def test_units_are_float(self):
        interval = CalendarInterval(5)
        assert isinstance(interval.units, float)
        assert interval.units == 5.0

    def test_constructors_agree(self):
        assert CalendarInterval.weeks(1) == CalendarInterval.days(7)
        assert CalendarInterval.days(1) == CalendarInterval.hours(24)
        assert CalendarInterval.hours(1) == CalendarInterval.minutes(60)
        assert CalendarInterval.minutes(1) == CalendarInterval.seconds(60)
        assert CalendarInterval.hours(1) == CalendarInterval.hebrew_parts(1080)
        assert CalendarInterval.gregorian_leap_year_cycles(1) == CalendarInterval.days(146_097)

    def test_fractional_seconds_survive(self):
        assert CalendarInterval.seconds(1.5).units == 4.5
        assert CalendarInterval.seconds(1.5).in_seconds == 1.5

    def test_hebrew_moon(self):
        moon = CalendarInterval.hebrew_moons(1)
        expected = CalendarInterval.days(29) + CalendarInterval.hours(12) + CalendarInterval.hebrew_parts(793)
        assert moon == expected
        assert_close(moon.in_days, 29 + 12 / 24 + 793 / 25_920)
        assert moon.in_hebrew_moons == 1.0

    def test_readers(self):
        interval = CalendarInterval.days(14)
        assert interval.in_weeks == 2.0
        assert interval.in_hours == 336.0
        assert interval.in_minutes == 20_160.0
        assert CalendarInterval.hours(2).in_hebrew_parts == 2160.0


# ── Arithmetic ────────────────────────────────────────────────────────────────

class TestArithmetic:

    def test_add_and_subtract(self):
        assert CalendarInterval.days(1) + CalendarInterval.hours(12) == CalendarInterval.hours(36)
        assert CalendarInterval.days(1) - CalendarInterval.days(2) == CalendarInterval.days(-1)

    def test_scale(self):
        assert CalendarInterval.days(1) * 3 == CalendarInterval.days(3)
        assert 2 * CalendarInterval.hours(1) == CalendarInterval.hours(2)
        assert CalendarInterval.days(1) / 2 == CalendarInterval.hours(12)

    def test_ratio(self):
        assert CalendarInterval.weeks(1) / CalendarInterval.days(1) == 7.0

    def test_sign(self):
        assert (-CalendarInterval.days(1)).is_negative
        assert abs(CalendarInterval.days(-1)) == CalendarInterval.days(1)
        assert not CalendarInterval().is_negative

    def test_ordering(self):
        assert CalendarInterval.hours(1) < CalendarInterval.days(1)
        assert CalendarInterval.days(-1) < CalendarInterval()
        assert max(CalendarInterval.minutes(61), CalendarInterval.hours(1)) == CalendarInterval.minutes(61)

    def test_foreign_operand(self):
        with pytest.raises(TypeError):
            CalendarInterval.days(1) + 1

    def test_hashable(self):
        assert len({CalendarInterval.days(1), CalendarInterval.hours(24)}) == 1


# ── Remainder and rounding ────────────────────────────────────────────────────

class TestRemainder:

    def test_positive(self):
        assert CalendarInterval.hours(25).mod(CalendarInterval.days(1)) == CalendarInterval.hours(1)

    def test_negative_dividend(self):
        assert CalendarInterval.days(-1).mod(CalendarInterval.hours(5)) == CalendarInterval.hours(1)

    def test_negative_divisor(self):
        assert CalendarInterval.days(1).mod(CalendarInterval.hours(-5)) == CalendarInterval.hours(4)

    def test_rounded_down(self):
        day = CalendarInterval.days(1)
        assert CalendarInterval.hours(30).rounded_down(day) == day
        assert CalendarInterval.hours(-1).rounded_down(day) == CalendarInterval.days(-1)
        assert CalendarInterval.days(2).rounded_down(day) == CalendarInterval.days(2)


# ── timedelta ─────────────────────────────────────────────────────────────────

class TestTimedelta:

    def test_from_timedelta(self):
        delta = timedelta(days=1, seconds=1, microseconds=500_000)
        assert CalendarInterval.from_timedelta(delta).in_seconds == 86_401.5

    def test_negative_timedelta(self):
        assert CalendarInterval.from_timedelta(timedelta(hours=-3)) == CalendarInterval.hours(-3)

    def test_to_timedelta(self):
        assert CalendarInterval.days(2).to_timedelta() == timedelta(days=2)
        assert CalendarInterval.seconds(-90).to_timedelta() == timedelta(minutes=-1, seconds=-30)
