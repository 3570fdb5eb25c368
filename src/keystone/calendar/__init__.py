"""
keystone.calendar
~~~~~~~~~~~~~~~~~

Conversion between calendar components and an absolute interval since
2001-01-01 00:00 (Gregorian), for the proleptic Gregorian calendar and the
Hebrew calendar. Intervals count thirds of a second, so seconds and Hebrew
parts are both whole numbers of units.

Basic usage::

    from keystone.calendar import CalendarDate, CalendarInterval, HebrewDate

    date = CalendarDate.gregorian(2023, 9, 15, 18)
    date.hebrew_year, date.hebrew_month, date.hebrew_day   # → 5784, TISHREI, 1
    date.date_in_iso_format()                              # → "2023-09-15"

    later = date + CalendarInterval.days(220)
    later.converted_to(HebrewDate)                         # → 15 Nisan 5784, hour 0

The conversion kernel is usable without ``CalendarDate``::

    from keystone.calendar import GregorianDate, components_of

    GregorianDate(2001, 1, 1).interval                     # → CalendarInterval(units=0.0)
    components_of(CalendarInterval.days(31))               # → 2001-02-01 00:00

Encoded dates round-trip through plain lists::

    payload = date.encode()            # ["gregorian", 2023, 9, 15, 18, 0, 0.0]
    CalendarDate.decode(payload) == date

Public API
----------
CalendarDate       Calendar-agnostic point in time.
CalendarInterval   Signed duration.
GregorianDate, HebrewDate and their components.
components_of, interval_of   Gregorian kernel functions.
CalendarError      Raised when an encoded date cannot be decoded.
"""

from __future__ import annotations

from keystone.calendar._exceptions import CalendarError
from keystone.calendar.calendar import CalendarDate
from keystone.calendar.components import CalendarComponent
from keystone.calendar.gregorian import (
    GregorianDate,
    GregorianDay,
    GregorianHour,
    GregorianMinute,
    GregorianMonth,
    GregorianSecond,
    GregorianWeekday,
    GregorianYear,
    components_of,
    interval_of,
)
from keystone.calendar.hebrew import (
    HebrewDate,
    HebrewDay,
    HebrewHour,
    HebrewMonth,
    HebrewPart,
    HebrewWeekday,
    HebrewYear,
    HebrewYearLength,
)
from keystone.calendar.interval import CalendarInterval

__all__ = [
    "CalendarComponent",
    "CalendarDate",
    "CalendarError",
    "CalendarInterval",
    "GregorianDate",
    "GregorianDay",
    "GregorianHour",
    "GregorianMinute",
    "GregorianMonth",
    "GregorianSecond",
    "GregorianWeekday",
    "GregorianYear",
    "HebrewDate",
    "HebrewDay",
    "HebrewHour",
    "HebrewMonth",
    "HebrewPart",
    "HebrewWeekday",
    "HebrewYear",
    "HebrewYearLength",
    "components_of",
    "interval_of",
]
