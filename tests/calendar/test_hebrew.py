"""
tests/calendar/test_hebrew.py

Covers:
  - Leap years and year lengths
  - Month ordinals, successor and predecessor in common and leap years
  - Adar fitting and day overflow correction
  - Known correspondences with the Gregorian calendar
  - Inverse conversion round trips, parts and weekdays
"""

import pytest

from keystone import ContractViolation
from keystone.calendar import (
    CalendarInterval,
    HebrewDate,
    HebrewDay,
    HebrewHour,
    HebrewMonth,
    HebrewPart,
    HebrewWeekday,
    HebrewYear,
    HebrewYearLength,
    interval_of,
)
from keystone.calendar.hebrew import EPOCH, components_of


# ── Year ──────────────────────────────────────────────────────────────────────

class TestHebrewYear:

    @pytest.mark.parametrize("year, leap", [(5782, True), (5783, False), (5784, True), (5785, False), (5776, True)])
    def test_leap_year(self, year, leap):
        assert HebrewYear(year).is_leap_year is leap
        assert HebrewYear(year).number_of_months == (13 if leap else 12)

    @pytest.mark.parametrize(
        "year, days, length",
        [
            (5782, 384, HebrewYearLength.REGULAR),
            (5783, 355, HebrewYearLength.COMPLETE),
            (5784, 383, HebrewYearLength.DEFICIENT),
            (5785, 355, HebrewYearLength.COMPLETE),
        ],
    )
    def test_length(self, year, days, length):
        assert HebrewYear(year).number_of_days == days
        assert HebrewYear(year).length is length

    def test_every_year_has_a_valid_length(self):
        for year in range(5600, 5900):
            assert HebrewYear(year).length in HebrewYearLength

    def test_arithmetic(self):
        assert HebrewYear(5784) + 1 == HebrewYear(5785)
        assert HebrewYear(5784) - 1 == HebrewYear(5783)
        assert HebrewYear(5784) - HebrewYear(5758) == 26


# ── Month ─────────────────────────────────────────────────────────────────────

class TestHebrewMonth:

    @pytest.mark.parametrize(
        "month, common, leap",
        [
            (HebrewMonth.TISHREI, 1, 1),
            (HebrewMonth.SHEVAT, 5, 5),
            (HebrewMonth.ADAR, 6, None),
            (HebrewMonth.ADAR_I, None, 6),
            (HebrewMonth.ADAR_II, None, 7),
            (HebrewMonth.NISAN, 7, 8),
            (HebrewMonth.ELUL, 12, 13),
        ],
    )
    def test_ordinal(self, month, common, leap):
        assert month.ordinal(False) == common
        assert month.ordinal(True) == leap

    def test_from_ordinal_inverts_ordinal(self):
        for leap_year, months in ((False, 12), (True, 13)):
            for ordinal in range(1, months + 1):
                assert HebrewMonth.from_ordinal(ordinal, leap_year).ordinal(leap_year) == ordinal

    def test_from_ordinal_out_of_range(self):
        with pytest.raises(ContractViolation):
            HebrewMonth.from_ordinal(13, False)
        with pytest.raises(ContractViolation):
            HebrewMonth.from_ordinal(0, True)

    def test_successor(self):
        assert HebrewMonth.SHEVAT.successor(False) is HebrewMonth.ADAR
        assert HebrewMonth.SHEVAT.successor(True) is HebrewMonth.ADAR_I
        assert HebrewMonth.ADAR_I.successor(True) is HebrewMonth.ADAR_II
        assert HebrewMonth.ADAR_II.successor(True) is HebrewMonth.NISAN
        assert HebrewMonth.ELUL.successor(False) is HebrewMonth.TISHREI

    def test_predecessor(self):
        assert HebrewMonth.NISAN.predecessor(False) is HebrewMonth.ADAR
        assert HebrewMonth.NISAN.predecessor(True) is HebrewMonth.ADAR_II
        assert HebrewMonth.ADAR_I.predecessor(True) is HebrewMonth.SHEVAT
        assert HebrewMonth.TISHREI.predecessor(True) is HebrewMonth.ELUL

    def test_lengths_add_up_to_the_year(self):
        for year in (5782, 5783, 5784, 5785):
            year = HebrewYear(year)
            total = sum(month.number_of_days(year.length, year.is_leap_year) for month in HebrewMonth)
            assert total == year.number_of_days

    def test_variable_months(self):
        assert HebrewMonth.CHESHVAN.number_of_days(HebrewYearLength.COMPLETE, False) == 30
        assert HebrewMonth.CHESHVAN.number_of_days(HebrewYearLength.REGULAR, False) == 29
        assert HebrewMonth.KISLEV.number_of_days(HebrewYearLength.DEFICIENT, True) == 29
        assert HebrewMonth.KISLEV.number_of_days(HebrewYearLength.REGULAR, True) == 30


# ── Components and correction ─────────────────────────────────────────────────

class TestCorrection:

    def test_adar_becomes_adar_ii_in_a_leap_year(self):
        assert HebrewDate(5784, HebrewMonth.ADAR, 1).month is HebrewMonth.ADAR_II

    def test_adar_i_becomes_adar_in_a_common_year(self):
        assert HebrewDate(5783, HebrewMonth.ADAR_I, 1).month is HebrewMonth.ADAR

    def test_overflowing_day(self):
        # Cheshvan 5784 has 29 days.
        assert HebrewDate(5784, HebrewMonth.CHESHVAN, 30) == HebrewDate(5784, HebrewMonth.KISLEV, 1)

    def test_elul_overflow_moves_into_next_year(self):
        assert HebrewDate(5783, HebrewMonth.ELUL, 30) == HebrewDate(5784, HebrewMonth.TISHREI, 1)

    def test_raw_month_values(self):
        assert HebrewDate(5784, 8, 15) == HebrewDate(5784, HebrewMonth.NISAN, 15)

    def test_invalid_raw_month(self):
        with pytest.raises(ContractViolation):
            HebrewDate(5784, 14, 1)

    @pytest.mark.parametrize("kind, value", [(HebrewDay, 31), (HebrewHour, 24), (HebrewPart, 1080)])
    def test_out_of_range(self, kind, value):
        with pytest.raises(ContractViolation):
            kind(value)


# ── Forward conversion ────────────────────────────────────────────────────────

class TestKnownDates:

    def test_epoch(self):
        assert HebrewDate(5758).interval == EPOCH == interval_of(1997, 10, 1, 18)

    @pytest.mark.parametrize(
        "hebrew, gregorian",
        [
            ((5782, HebrewMonth.TISHREI, 1), (2021, 9, 6, 18)),
            ((5783, HebrewMonth.TISHREI, 1), (2022, 9, 25, 18)),
            ((5783, HebrewMonth.NISAN, 15), (2023, 4, 5, 18)),
            ((5784, HebrewMonth.TISHREI, 1), (2023, 9, 15, 18)),
            ((5784, HebrewMonth.NISAN, 15), (2024, 4, 22, 18)),
            ((5785, HebrewMonth.TISHREI, 1), (2024, 10, 2, 18)),
        ],
    )
    def test_correspondence(self, hebrew, gregorian):
        assert HebrewDate(*hebrew).interval == interval_of(*gregorian)

    def test_hours_and_parts(self):
        start = HebrewDate(5784).interval
        date = HebrewDate(5784, HebrewMonth.TISHREI, 1, 6, 540)
        assert date.interval - start == CalendarInterval.hours(6) + CalendarInterval.hebrew_parts(540)


# ── Inverse conversion ────────────────────────────────────────────────────────

class TestFromInterval:

    def test_gregorian_reference(self):
        year, month, day, hour, part = components_of(CalendarInterval())
        assert (year, month, day) == (HebrewYear(5761), HebrewMonth.TEVET, HebrewDay(6))
        assert hour == HebrewHour(6)
        assert part == HebrewPart(0)

    def test_half_a_part(self):
        interval = interval_of(2023, 9, 15, 18) + CalendarInterval(5)
        assert components_of(interval)[-1] == HebrewPart(0.5)

    @pytest.mark.parametrize(
        "fields",
        [
            (5784, HebrewMonth.TISHREI, 1),
            (5784, HebrewMonth.ADAR_I, 30, 23, 1079),
            (5784, HebrewMonth.ADAR_II, 1),
            (5783, HebrewMonth.ADAR, 29),
            (5784, HebrewMonth.ELUL, 29, 12, 540),
            (5600, HebrewMonth.CHESHVAN, 5),
            (3761, HebrewMonth.TEVET, 18),
        ],
    )
    def test_round_trip(self, fields):
        date = HebrewDate(*fields)
        assert HebrewDate.from_interval(date.interval) == date

    def test_round_trip_sweep(self):
        for days in range(-40_000, 40_000, 997):
            interval = CalendarInterval.days(days) + CalendarInterval.hours(days % 24)
            year, month, day, hour, part = components_of(interval)
            assert HebrewDate(year, month, day, hour, part).interval == interval


# ── Weekday ───────────────────────────────────────────────────────────────────

class TestWeekday:

    def test_rosh_hashanah_5784(self):
        assert HebrewDate(5784).weekday is HebrewWeekday.SATURDAY

    def test_epoch(self):
        assert HebrewDate(5758).weekday is HebrewWeekday.THURSDAY

    def test_first_day_never_falls_on_sunday_wednesday_or_friday(self):
        forbidden = {HebrewWeekday.SUNDAY, HebrewWeekday.WEDNESDAY, HebrewWeekday.FRIDAY}
        for year in range(5700, 5850):
            assert HebrewDate(year).weekday not in forbidden
