"""
Proleptic Gregorian calendar.

Forward conversion sums whole 400-year cycles, the remaining years' lengths
(read from a prefix-sum table over one cycle), the month offset, and the
elapsed days, hours, minutes and seconds. The inverse estimates the year from
the mean year length and corrects the estimate with a local-minimum search,
then does the same for the month.

Interval zero is 2001-01-01 00:00.
"""

from __future__ import annotations

import logging
import math
import operator
from enum import IntEnum
from typing import Any, Sequence, Union

import numpy as np

from keystone._contracts import contract_violation
from keystone.precision.analysis import find_local_minimum
from .components import CalendarComponent, Weekday
from .interval import UNITS_PER_DAY, CalendarInterval

logger = logging.getLogger(__name__)


# ── Year ──────────────────────────────────────────────────────────────────────

class GregorianYear(CalendarComponent):
    """
    A year of the Common Era; negative values are years BCE.

    There is no year zero: ``GregorianYear(-1) + 1 == GregorianYear(1)`` and
    ``GregorianYear(1) - GregorianYear(-1) == 1``.
    """

    YEARS_PER_LEAP_YEAR_CYCLE = 400
    DAYS_PER_LEAP_YEAR_CYCLE = 146_097
    MONTHS_PER_YEAR = 12

    def _validate(self) -> None:
        object.__setattr__(self, "value", operator.index(self.value))
        if self.value == 0:
            contract_violation("There is no year 0 in the Gregorian calendar.")

    def __add__(self, years: int) -> GregorianYear:
        if not isinstance(years, int):
            return NotImplemented
        result = self.value + years
        if self.value > 0 and result <= 0:
            result -= 1
        elif self.value < 0 and result >= 0:
            result += 1
        return GregorianYear(result)

    def __sub__(self, other: Union[GregorianYear, int]) -> Any:
        if isinstance(other, GregorianYear):
            result = self.value - other.value
            if self.value > 0 and other.value < 0:
                result -= 1
            elif self.value < 0 and other.value > 0:
                result += 1
            return result
        if isinstance(other, int):
            return self + (-other)
        return NotImplemented

    @property
    def number_already_elapsed(self) -> int:
        return self - GregorianYear(1)

    @classmethod
    def from_number_already_elapsed(cls, count: int) -> GregorianYear:
        return GregorianYear(1) + count

    @property
    def astronomical_number(self) -> int:
        """The year on a scale with a year zero (1 BCE → 0, 2 BCE → −1)."""
        return self - GregorianYear(-1)

    @property
    def is_leap_year(self) -> bool:
        n = self.astronomical_number
        return n % 4 == 0 and (n % 100 != 0 or n % 400 == 0)

    @property
    def number_of_days(self) -> int:
        return 366 if self.is_leap_year else 365

    def in_iso_format(self) -> str:
        n = self.astronomical_number
        digits = f"{abs(n):04d}"
        return "−" + digits if n < 0 else digits


YEAR_MEAN_DURATION = CalendarInterval.days(GregorianYear.DAYS_PER_LEAP_YEAR_CYCLE / 400)
YEAR_MINIMUM_DURATION = CalendarInterval.days(365)
YEAR_MAXIMUM_DURATION = CalendarInterval.days(366)


# ── Month ─────────────────────────────────────────────────────────────────────

_DAYS_IN_MONTH = np.array(
    [
        [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31],
        [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31],
    ],
    dtype=np.int64,
)

# Row = leap status, column = month index; column 12 is the year length.
_MONTH_START_DAYS = np.zeros((2, 13), dtype=np.int64)
np.cumsum(_DAYS_IN_MONTH, axis=1, out=_MONTH_START_DAYS[:, 1:])

MONTH_MINIMUM_NUMBER_OF_DAYS = int(_DAYS_IN_MONTH.min())
MONTH_MAXIMUM_NUMBER_OF_DAYS = int(_DAYS_IN_MONTH.max())


class GregorianMonth(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def number_already_elapsed(self) -> int:
        return self.value - 1

    @property
    def ordinal(self) -> int:
        return self.value

    @classmethod
    def from_number_already_elapsed(cls, count: int) -> GregorianMonth:
        if not 0 <= count < 12:
            contract_violation(f"There is no Gregorian month {count + 1}.")
        return cls(count + 1)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> GregorianMonth:
        return cls.from_number_already_elapsed(ordinal - 1)

    def number_of_days(self, leap_year: bool) -> int:
        return int(_DAYS_IN_MONTH[int(leap_year), self.value - 1])

    def days_before(self, leap_year: bool) -> int:
        """Days from the start of the year to the start of this month."""
        return int(_MONTH_START_DAYS[int(leap_year), self.value - 1])

    def successor(self) -> GregorianMonth:
        return GregorianMonth(self.value % 12 + 1)

    def predecessor(self) -> GregorianMonth:
        return GregorianMonth((self.value - 2) % 12 + 1)

    def in_iso_format(self) -> str:
        return f"{self.value:02d}"


MONTH_MEAN_DURATION = YEAR_MEAN_DURATION / 12


# ── Day and time of day ───────────────────────────────────────────────────────

class GregorianDay(CalendarComponent):
    valid_range = (1, MONTH_MAXIMUM_NUMBER_OF_DAYS + 1)

    def corrected(
        self, month: GregorianMonth, year: GregorianYear
    ) -> tuple[GregorianDay, GregorianMonth, GregorianYear]:
        """Moves an overflowing day (e.g. 30 February) into the following month, once."""
        days_in_month = month.number_of_days(year.is_leap_year)
        if self.value <= days_in_month:
            return self, month, year
        if month is GregorianMonth.DECEMBER:
            year = year + 1
        return GregorianDay(self.value - days_in_month), month.successor(), year


class GregorianHour(CalendarComponent):
    valid_range = (0, 24)

    def in_twenty_four_hour_format(self) -> str:
        return str(self.value)

    def in_twelve_hour_format(self) -> str:
        hour = self.value
        if hour > 12:
            hour -= 12
        return str(hour or 12)

    def am_or_pm(self) -> str:
        return "AM" if self.value < 12 else "PM"


class GregorianMinute(CalendarComponent):
    valid_range = (0, 60)


class GregorianSecond(CalendarComponent):
    """Seconds may be fractional."""

    valid_range = (0, 60)

    def in_iso_format(self) -> str:
        return f"{math.floor(self.value + 0.000_001):02d}"


class GregorianWeekday(Weekday):
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


# ── Conversion kernel ─────────────────────────────────────────────────────────

REFERENCE_YEAR = GregorianYear(2001)


def _build_cycle_table() -> np.ndarray:
    """Days from the start of the reference year to the start of each year in one cycle."""
    lengths = np.array(
        [(REFERENCE_YEAR + j).number_of_days for j in range(GregorianYear.YEARS_PER_LEAP_YEAR_CYCLE)],
        dtype=np.int64,
    )
    table = np.zeros(lengths.size + 1, dtype=np.int64)
    np.cumsum(lengths, out=table[1:])
    if table[-1] != GregorianYear.DAYS_PER_LEAP_YEAR_CYCLE:
        contract_violation(f"A Gregorian cycle has {table[-1]} days.")
    logger.debug("Built Gregorian cycle table starting at %d", REFERENCE_YEAR.value)
    return table


_CYCLE_START_DAYS = _build_cycle_table()


def interval_to_start_of_year(year: GregorianYear) -> CalendarInterval:
    cycles, remaining = divmod(year - REFERENCE_YEAR, GregorianYear.YEARS_PER_LEAP_YEAR_CYCLE)
    return CalendarInterval.gregorian_leap_year_cycles(cycles) + CalendarInterval.days(
        int(_CYCLE_START_DAYS[remaining])
    )


def interval_to_start_of_month(month: GregorianMonth, leap_year: bool) -> CalendarInterval:
    return CalendarInterval.days(month.days_before(leap_year))


def _wrapped(delta: CalendarInterval, penalty: CalendarInterval) -> CalendarInterval:
    """Scores a candidate start: overshooting is always worse than any undershoot."""
    return delta if not delta.is_negative else abs(delta) + penalty


def _coerce(kind, value):
    return value if isinstance(value, kind) else kind(value)


class GregorianDate:
    """
    A Gregorian date and time, convertible to and from an absolute interval.

    ``GregorianDate(2001, 1, 1).interval == CalendarInterval(0)``. Components
    may be given as plain numbers; an overflowing day is moved into the next
    month once (``GregorianDate(2023, 2, 30)`` is 2 March).
    """

    identifier = "gregorian"
    reference_year = REFERENCE_YEAR

    __slots__ = ("year", "month", "day", "hour", "minute", "second", "interval")

    def __init__(
        self,
        year: Union[GregorianYear, int],
        month: Union[GregorianMonth, int] = GregorianMonth.JANUARY,
        day: Union[GregorianDay, int] = 1,
        hour: Union[GregorianHour, int] = 0,
        minute: Union[GregorianMinute, int] = 0,
        second: Union[GregorianSecond, float] = 0.0,
    ) -> None:
        year = _coerce(GregorianYear, year)
        month = month if isinstance(month, GregorianMonth) else GregorianMonth.from_ordinal(month)
        day, month, year = _coerce(GregorianDay, day).corrected(month, year)

        self.year = year
        self.month = month
        self.day = day
        self.hour = _coerce(GregorianHour, hour)
        self.minute = _coerce(GregorianMinute, minute)
        self.second = _coerce(GregorianSecond, second)

        self.interval = (
            interval_to_start_of_year(self.year)
            + interval_to_start_of_month(self.month, self.year.is_leap_year)
            + CalendarInterval.days(self.day.number_already_elapsed)
            + CalendarInterval.hours(self.hour.number_already_elapsed)
            + CalendarInterval.minutes(self.minute.number_already_elapsed)
            + CalendarInterval.seconds(self.second.number_already_elapsed)
        )

    @classmethod
    def from_interval(cls, interval: CalendarInterval) -> GregorianDate:
        # Search on whole days only; the time of day is split off first so a
        # sub-unit offset cannot round across a year or month boundary.
        elapsed_days, time_of_day = divmod(interval.units, UNITS_PER_DAY)
        if time_of_day >= UNITS_PER_DAY:
            elapsed_days, time_of_day = elapsed_days + 1, 0.0
        start_of_day = CalendarInterval.days(elapsed_days)

        guess = REFERENCE_YEAR + int(start_of_day / YEAR_MEAN_DURATION)
        year = find_local_minimum(
            guess,
            lambda candidate: _wrapped(
                start_of_day - interval_to_start_of_year(candidate), YEAR_MAXIMUM_DURATION
            ),
        )
        remainder = start_of_day - interval_to_start_of_year(year)
        leap_year = year.is_leap_year

        last_month = GregorianYear.MONTHS_PER_YEAR - 1
        month_index = find_local_minimum(
            min(int(remainder / MONTH_MEAN_DURATION), last_month),
            lambda index: _wrapped(
                remainder
                - interval_to_start_of_month(GregorianMonth.from_number_already_elapsed(index), leap_year),
                YEAR_MAXIMUM_DURATION,
            ),
            within=(0, last_month),
        )
        month = GregorianMonth.from_number_already_elapsed(month_index)
        remainder -= interval_to_start_of_month(month, leap_year)

        day = GregorianDay.from_number_already_elapsed(round(remainder.in_days))
        remainder = CalendarInterval(time_of_day)
        hour = GregorianHour.from_number_already_elapsed(math.floor(remainder.in_hours))
        remainder = remainder.mod(CalendarInterval.hours(1))
        minute = GregorianMinute.from_number_already_elapsed(math.floor(remainder.in_minutes))
        remainder = remainder.mod(CalendarInterval.minutes(1))
        second = GregorianSecond.from_number_already_elapsed(remainder.in_seconds)

        date = cls.__new__(cls)
        date.year = year
        date.month = month
        date.day = day
        date.hour = hour
        date.minute = minute
        date.second = second
        date.interval = interval
        return date

    @property
    def weekday(self) -> GregorianWeekday:
        # 2001-01-01 was a Monday.
        days = math.floor(self.interval.in_days)
        return GregorianWeekday.from_number_already_elapsed((days + 1) % 7)

    def components(self) -> tuple[GregorianYear, GregorianMonth, GregorianDay, GregorianHour, GregorianMinute, GregorianSecond]:
        return self.year, self.month, self.day, self.hour, self.minute, self.second

    # ── encoding ─────────────────────────────────────────────────────────

    def encode(self) -> list[Any]:
        return [
            self.year.value,
            self.month.value,
            self.day.value,
            self.hour.value,
            self.minute.value,
            self.second.value,
        ]

    @classmethod
    def decode(cls, fields: Sequence[Any]) -> GregorianDate:
        year, month, day, hour, minute, second = fields
        return cls(year, month, day, hour, minute, second)

    # ── value semantics ──────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self.components() == other.components()

    def __hash__(self) -> int:
        return hash(self.components())

    def __repr__(self) -> str:
        return (
            f"GregorianDate({self.year.value}, {self.month.value}, {self.day.value}, "
            f"{self.hour.value}, {self.minute.value}, {self.second.value})"
        )


def interval_of(
    year: Union[GregorianYear, int],
    month: Union[GregorianMonth, int] = GregorianMonth.JANUARY,
    day: Union[GregorianDay, int] = 1,
    hour: Union[GregorianHour, int] = 0,
    minute: Union[GregorianMinute, int] = 0,
    second: Union[GregorianSecond, float] = 0.0,
) -> CalendarInterval:
    return GregorianDate(year, month, day, hour, minute, second).interval


def components_of(interval: CalendarInterval):
    """``(year, month, day, hour, minute, second)`` at ``interval`` after 2001-01-01 00:00."""
    return GregorianDate.from_interval(interval).components()
