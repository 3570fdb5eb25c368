"""
Hebrew calendar.

A year starts on the day of its molad Tishrei (the mean new moon), subject
to the four postponement rules. Year starts are reckoned from 1 Tishrei 5758
(1997-10-01 18:00 Gregorian), whose molad fell 4 hours and 129 parts into
the day; the kernel converts them to the shared timeline, where interval
zero is 2001-01-01 00:00 Gregorian.

Hebrew days start at 18:00 Gregorian, so ``HebrewHour(0)`` is 18:00 on the
previous Gregorian day.
"""

from __future__ import annotations

import functools
import logging
import math
import operator
from enum import Enum
from typing import Any, Optional, Sequence, Union

import numpy as np

from keystone._contracts import contract_violation
from keystone.precision.analysis import find_local_minimum
from .components import CalendarComponent, Weekday
from .gregorian import GregorianDate
from .interval import CalendarInterval

logger = logging.getLogger(__name__)


# ── Year ──────────────────────────────────────────────────────────────────────

class HebrewYearLength(Enum):
    DEFICIENT = "deficient"
    REGULAR = "regular"
    COMPLETE = "complete"


# Positions within the 19-year cycle that hold a leap month (19 ≡ 0).
_LEAP_YEAR_POSITIONS = frozenset({3, 6, 8, 11, 14, 17, 0})

_LENGTHS = {
    353: HebrewYearLength.DEFICIENT,
    354: HebrewYearLength.REGULAR,
    355: HebrewYearLength.COMPLETE,
    383: HebrewYearLength.DEFICIENT,
    384: HebrewYearLength.REGULAR,
    385: HebrewYearLength.COMPLETE,
}


class HebrewYear(CalendarComponent):
    YEARS_PER_LEAP_YEAR_CYCLE = 19
    MONTHS_PER_LEAP_YEAR_CYCLE = 235

    def _validate(self) -> None:
        object.__setattr__(self, "value", operator.index(self.value))

    def __add__(self, years: int) -> HebrewYear:
        if not isinstance(years, int):
            return NotImplemented
        return HebrewYear(self.value + years)

    def __sub__(self, other: Union[HebrewYear, int]) -> Any:
        if isinstance(other, HebrewYear):
            return self.value - other.value
        if isinstance(other, int):
            return HebrewYear(self.value - other)
        return NotImplemented

    @property
    def number_already_elapsed(self) -> int:
        return self.value - 1

    @classmethod
    def from_number_already_elapsed(cls, count: int) -> HebrewYear:
        return cls(count + 1)

    @property
    def is_leap_year(self) -> bool:
        return self.value % self.YEARS_PER_LEAP_YEAR_CYCLE in _LEAP_YEAR_POSITIONS

    @property
    def number_of_months(self) -> int:
        return 13 if self.is_leap_year else 12

    @property
    def number_of_days(self) -> int:
        return round((interval_to_start_of_year(self + 1) - interval_to_start_of_year(self)).in_days)

    @property
    def length(self) -> HebrewYearLength:
        days = self.number_of_days
        if days not in _LENGTHS:
            contract_violation(f"Hebrew year {self.value} has {days} days.")
        return _LENGTHS[days]


# ── Month ─────────────────────────────────────────────────────────────────────

class HebrewMonth(Enum):
    TISHREI = 0
    CHESHVAN = 1
    KISLEV = 2
    TEVET = 3
    SHEVAT = 4
    ADAR_I = 5
    ADAR = 6
    ADAR_II = 7
    NISAN = 8
    IYAR = 9
    SIVAN = 10
    TAMMUZ = 11
    AV = 12
    ELUL = 13

    def number_of_days(self, year_length: HebrewYearLength, leap_year: bool) -> int:
        if self in (HebrewMonth.TISHREI, HebrewMonth.SHEVAT, HebrewMonth.NISAN, HebrewMonth.SIVAN, HebrewMonth.AV):
            return 30
        if self in (HebrewMonth.TEVET, HebrewMonth.IYAR, HebrewMonth.TAMMUZ, HebrewMonth.ELUL):
            return 29
        if self is HebrewMonth.CHESHVAN:
            return 30 if year_length is HebrewYearLength.COMPLETE else 29
        if self is HebrewMonth.KISLEV:
            return 29 if year_length is HebrewYearLength.DEFICIENT else 30
        if self is HebrewMonth.ADAR:
            return 0 if leap_year else 29
        if self is HebrewMonth.ADAR_I:
            return 30 if leap_year else 0
        return 29 if leap_year else 0

    def ordinal(self, leap_year: bool) -> Optional[int]:
        """Position within the year, or ``None`` for an Adar the year does not have."""
        if self.value <= HebrewMonth.SHEVAT.value:
            return self.value + 1
        if leap_year:
            special = {HebrewMonth.ADAR_I: 6, HebrewMonth.ADAR_II: 7, HebrewMonth.ADAR: None}
            return special[self] if self in special else self.value
        special = {HebrewMonth.ADAR: 6, HebrewMonth.ADAR_I: None, HebrewMonth.ADAR_II: None}
        return special[self] if self in special else self.value - 1

    def number_already_elapsed(self, leap_year: bool) -> Optional[int]:
        ordinal = self.ordinal(leap_year)
        return None if ordinal is None else ordinal - 1

    @classmethod
    def from_ordinal(cls, ordinal: int, leap_year: bool) -> HebrewMonth:
        months = 13 if leap_year else 12
        if not 1 <= ordinal <= months:
            contract_violation(f"There is no Hebrew month {ordinal} in a year of {months} months.")
        if ordinal <= HebrewMonth.SHEVAT.value + 1:
            return cls(ordinal - 1)
        if leap_year:
            if ordinal == 6:
                return HebrewMonth.ADAR_I
            return HebrewMonth.ADAR_II if ordinal == 7 else cls(ordinal)
        return HebrewMonth.ADAR if ordinal == 6 else cls(ordinal + 1)

    @classmethod
    def from_number_already_elapsed(cls, count: int, leap_year: bool) -> HebrewMonth:
        return cls.from_ordinal(count + 1, leap_year)

    def successor(self, leap_year: bool) -> HebrewMonth:
        if self is HebrewMonth.SHEVAT:
            return HebrewMonth.ADAR_I if leap_year else HebrewMonth.ADAR
        if self is HebrewMonth.ADAR_I:
            return HebrewMonth.ADAR_II
        if self in (HebrewMonth.ADAR, HebrewMonth.ADAR_II):
            return HebrewMonth.NISAN
        if self is HebrewMonth.ELUL:
            return HebrewMonth.TISHREI
        return HebrewMonth(self.value + 1)

    def predecessor(self, leap_year: bool) -> HebrewMonth:
        if self is HebrewMonth.NISAN:
            return HebrewMonth.ADAR_II if leap_year else HebrewMonth.ADAR
        if self is HebrewMonth.ADAR_II:
            return HebrewMonth.ADAR_I
        if self in (HebrewMonth.ADAR, HebrewMonth.ADAR_I):
            return HebrewMonth.SHEVAT
        if self is HebrewMonth.TISHREI:
            return HebrewMonth.ELUL
        return HebrewMonth(self.value - 1)

    def corrected_for_year(self, leap_year: bool) -> HebrewMonth:
        """Adar becomes Adar II in a leap year; either Adar I or II becomes Adar otherwise."""
        if leap_year and self is HebrewMonth.ADAR:
            return HebrewMonth.ADAR_II
        if not leap_year and self in (HebrewMonth.ADAR_I, HebrewMonth.ADAR_II):
            return HebrewMonth.ADAR
        return self


HEBREW_MOON = CalendarInterval.hebrew_moons(1)
YEAR_MEAN_DURATION = HEBREW_MOON * (HebrewYear.MONTHS_PER_LEAP_YEAR_CYCLE / HebrewYear.YEARS_PER_LEAP_YEAR_CYCLE)
YEAR_MINIMUM_DURATION = CalendarInterval.days(353)
YEAR_MAXIMUM_DURATION = CalendarInterval.days(385)
MONTH_MEAN_DURATION = HEBREW_MOON


# ── Day and time of day ───────────────────────────────────────────────────────

class HebrewDay(CalendarComponent):
    valid_range = (1, 31)

    def corrected(
        self, month: HebrewMonth, year: HebrewYear
    ) -> tuple[HebrewDay, HebrewMonth, HebrewYear]:
        """Fits the month to the year, then moves an overflowing day into the next month, once."""
        leap_year = year.is_leap_year
        month = month.corrected_for_year(leap_year)
        days_in_month = month.number_of_days(year.length, leap_year)
        if self.value <= days_in_month:
            return self, month, year
        if month is HebrewMonth.ELUL:
            year = year + 1
        return HebrewDay(self.value - days_in_month), month.successor(leap_year), year


class HebrewHour(CalendarComponent):
    valid_range = (0, 24)


class HebrewPart(CalendarComponent):
    """Parts of an hour (1080 per hour); may be fractional."""

    valid_range = (0, 1080)


class HebrewWeekday(Weekday):
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


# ── Conversion kernel ─────────────────────────────────────────────────────────

REFERENCE_YEAR = HebrewYear(5758)
_REFERENCE_YEAR_WEEKDAY = HebrewWeekday.THURSDAY
_REFERENCE_MOLAD = CalendarInterval.hours(4) + CalendarInterval.hebrew_parts(129)

# 1 Tishrei 5758, hour 0, on the shared timeline.
EPOCH = GregorianDate(1997, 10, 1, 18).interval

_OLD_MOON = CalendarInterval.hours(18)
_GATARAD = CalendarInterval.hours(9) + CalendarInterval.hebrew_parts(204)
_BETUTAKPAT = CalendarInterval.hours(15) + CalendarInterval.hebrew_parts(589)
_ONE_DAY = CalendarInterval.days(1)
_ONE_WEEK = CalendarInterval.weeks(1)


def _build_cycle_table() -> np.ndarray:
    """Months from the start of the reference year to the start of each year in one cycle."""
    months = np.array(
        [(REFERENCE_YEAR + j).number_of_months for j in range(HebrewYear.YEARS_PER_LEAP_YEAR_CYCLE)],
        dtype=np.int64,
    )
    table = np.zeros(months.size + 1, dtype=np.int64)
    np.cumsum(months, out=table[1:])
    if table[-1] != HebrewYear.MONTHS_PER_LEAP_YEAR_CYCLE:
        contract_violation(f"A Hebrew cycle has {table[-1]} months.")
    logger.debug("Built Hebrew cycle table starting at %d", REFERENCE_YEAR.value)
    return table


_CYCLE_START_MONTHS = _build_cycle_table()


@functools.lru_cache(maxsize=4096)
def _start_of_year_since_epoch(year: int) -> CalendarInterval:
    target = HebrewYear(year)
    cycles, remaining = divmod(target - REFERENCE_YEAR, HebrewYear.YEARS_PER_LEAP_YEAR_CYCLE)
    months = cycles * HebrewYear.MONTHS_PER_LEAP_YEAR_CYCLE + int(_CYCLE_START_MONTHS[remaining])

    molad = _REFERENCE_MOLAD + CalendarInterval.hebrew_moons(months)
    start = molad.rounded_down(_ONE_DAY)
    into_day = molad.mod(_ONE_DAY)

    old_moon = into_day >= _OLD_MOON
    if old_moon:
        start += _ONE_DAY

    since_week_start = start + CalendarInterval.days(_REFERENCE_YEAR_WEEKDAY.number_already_elapsed)
    weekday = HebrewWeekday.from_number_already_elapsed(
        math.floor(since_week_start.mod(_ONE_WEEK).in_days)
    )
    if weekday in (HebrewWeekday.SUNDAY, HebrewWeekday.WEDNESDAY, HebrewWeekday.FRIDAY):
        start += _ONE_DAY

    if not old_moon:
        if not target.is_leap_year and weekday is HebrewWeekday.TUESDAY and into_day >= _GATARAD:
            start += CalendarInterval.days(2)
        if (target - 1).is_leap_year and weekday is HebrewWeekday.MONDAY and into_day >= _BETUTAKPAT:
            start += _ONE_DAY

    return start


def interval_to_start_of_year(year: HebrewYear) -> CalendarInterval:
    return EPOCH + _start_of_year_since_epoch(year.value)


def interval_to_start_of_month(
    month: HebrewMonth, leap_year: bool, year_length: HebrewYearLength
) -> CalendarInterval:
    days = 0
    while month is not HebrewMonth.TISHREI:
        month = month.predecessor(leap_year)
        days += month.number_of_days(year_length, leap_year)
    return CalendarInterval.days(days)


def _wrapped(delta: CalendarInterval) -> CalendarInterval:
    return delta if not delta.is_negative else abs(delta) + YEAR_MAXIMUM_DURATION


def _coerce(kind, value):
    return value if isinstance(value, kind) else kind(value)


class HebrewDate:
    """
    A Hebrew date and time, convertible to and from an absolute interval.

    ``HebrewDate(5784, HebrewMonth.TISHREI, 1)`` begins at 2023-09-15 18:00
    Gregorian. The month is fitted to the year (Adar ↔ Adar II) and an
    overflowing day is moved into the next month once.
    """

    identifier = "hebrew"
    reference_year = REFERENCE_YEAR

    __slots__ = ("year", "month", "day", "hour", "part", "interval")

    def __init__(
        self,
        year: Union[HebrewYear, int],
        month: Union[HebrewMonth, int] = HebrewMonth.TISHREI,
        day: Union[HebrewDay, int] = 1,
        hour: Union[HebrewHour, int] = 0,
        part: Union[HebrewPart, float] = 0.0,
    ) -> None:
        year = _coerce(HebrewYear, year)
        if not isinstance(month, HebrewMonth):
            if month not in {m.value for m in HebrewMonth}:
                contract_violation(f"There is no Hebrew month with raw value {month!r}.")
            month = HebrewMonth(month)
        day, month, year = _coerce(HebrewDay, day).corrected(month, year)

        self.year = year
        self.month = month
        self.day = day
        self.hour = _coerce(HebrewHour, hour)
        self.part = _coerce(HebrewPart, part)

        self.interval = (
            interval_to_start_of_year(self.year)
            + interval_to_start_of_month(self.month, self.year.is_leap_year, self.year.length)
            + CalendarInterval.days(self.day.number_already_elapsed)
            + CalendarInterval.hours(self.hour.number_already_elapsed)
            + CalendarInterval.hebrew_parts(self.part.number_already_elapsed)
        )

    @classmethod
    def from_interval(cls, interval: CalendarInterval) -> HebrewDate:
        guess = REFERENCE_YEAR + int((interval - EPOCH) / YEAR_MEAN_DURATION)
        year = find_local_minimum(
            guess,
            lambda candidate: _wrapped(interval - interval_to_start_of_year(candidate)),
        )
        remainder = interval - interval_to_start_of_year(year)
        leap_year = year.is_leap_year
        year_length = year.length

        last_month = year.number_of_months - 1
        month_index = find_local_minimum(
            min(int(remainder / MONTH_MEAN_DURATION), last_month),
            lambda index: _wrapped(
                remainder
                - interval_to_start_of_month(
                    HebrewMonth.from_number_already_elapsed(index, leap_year), leap_year, year_length
                )
            ),
            within=(0, last_month),
        )
        month = HebrewMonth.from_number_already_elapsed(month_index, leap_year)
        remainder -= interval_to_start_of_month(month, leap_year, year_length)

        day = HebrewDay.from_number_already_elapsed(math.floor(remainder.in_days))
        remainder = remainder.mod(_ONE_DAY)
        hour = HebrewHour.from_number_already_elapsed(math.floor(remainder.in_hours))
        remainder = remainder.mod(CalendarInterval.hours(1))
        part = HebrewPart.from_number_already_elapsed(remainder.in_hebrew_parts)

        date = cls.__new__(cls)
        date.year = year
        date.month = month
        date.day = day
        date.hour = hour
        date.part = part
        date.interval = interval
        return date

    @property
    def weekday(self) -> HebrewWeekday:
        days = math.floor((self.interval - EPOCH).in_days)
        return HebrewWeekday.from_number_already_elapsed(
            (days + _REFERENCE_YEAR_WEEKDAY.number_already_elapsed) % 7
        )

    def components(self) -> tuple[HebrewYear, HebrewMonth, HebrewDay, HebrewHour, HebrewPart]:
        return self.year, self.month, self.day, self.hour, self.part

    # ── encoding ─────────────────────────────────────────────────────────

    def encode(self) -> list[Any]:
        return [
            self.year.value,
            self.month.value,
            self.day.value,
            self.hour.value,
            self.part.value,
        ]

    @classmethod
    def decode(cls, fields: Sequence[Any]) -> HebrewDate:
        year, month, day, hour, part = fields
        return cls(year, month, day, hour, part)

    # ── value semantics ──────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HebrewDate):
            return NotImplemented
        return self.components() == other.components()

    def __hash__(self) -> int:
        return hash(self.components())

    def __repr__(self) -> str:
        return (
            f"HebrewDate({self.year.value}, HebrewMonth.{self.month.name}, {self.day.value}, "
            f"{self.hour.value}, {self.part.value})"
        )


def components_of(interval: CalendarInterval):
    """``(year, month, day, hour, part)`` at ``interval`` after 2001-01-01 00:00 Gregorian."""
    return HebrewDate.from_interval(interval).components()
