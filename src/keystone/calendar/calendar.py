from __future__ import annotations

import functools
import logging
from datetime import datetime, timezone
from typing import Any, Optional, Sequence, Union

from ._exceptions import CalendarError
from .gregorian import (
    GregorianDate,
    GregorianDay,
    GregorianHour,
    GregorianMinute,
    GregorianMonth,
    GregorianSecond,
    GregorianWeekday,
    GregorianYear,
)
from .hebrew import (
    HebrewDate,
    HebrewDay,
    HebrewHour,
    HebrewMonth,
    HebrewPart,
    HebrewWeekday,
    HebrewYear,
)
from .interval import CalendarInterval

logger = logging.getLogger(__name__)

DateDefinition = Union[GregorianDate, HebrewDate]

_REFERENCE_DATETIME = datetime(2001, 1, 1, tzinfo=timezone.utc)


@functools.total_ordering
class CalendarDate:
    """
    A point on the absolute timeline, defined in whichever calendar it was
    created with and converted lazily into others.

    Conversions are cached per instance; equality and ordering use the
    absolute interval, so ``CalendarDate.gregorian(2023, 9, 15, 18)`` equals
    ``CalendarDate.hebrew(5784, HebrewMonth.TISHREI, 1)``.
    """

    _definitions: dict[str, type] = {
        GregorianDate.identifier: GregorianDate,
        HebrewDate.identifier: HebrewDate,
    }

    __slots__ = ("_definition", "_conversions")

    def __init__(self, definition: DateDefinition) -> None:
        self._definition = definition
        self._conversions: dict[type, Any] = {type(definition): definition}

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def gregorian(
        cls,
        year: Union[GregorianYear, int],
        month: Union[GregorianMonth, int] = GregorianMonth.JANUARY,
        day: Union[GregorianDay, int] = 1,
        hour: Union[GregorianHour, int] = 0,
        minute: Union[GregorianMinute, int] = 0,
        second: Union[GregorianSecond, float] = 0.0,
    ) -> CalendarDate:
        return cls(GregorianDate(year, month, day, hour, minute, second))

    @classmethod
    def hebrew(
        cls,
        year: Union[HebrewYear, int],
        month: Union[HebrewMonth, int] = HebrewMonth.TISHREI,
        day: Union[HebrewDay, int] = 1,
        hour: Union[HebrewHour, int] = 0,
        part: Union[HebrewPart, float] = 0.0,
    ) -> CalendarDate:
        return cls(HebrewDate(year, month, day, hour, part))

    @classmethod
    def from_interval(cls, interval: CalendarInterval) -> CalendarDate:
        return cls(GregorianDate.from_interval(interval))

    @classmethod
    def from_datetime(cls, moment: datetime) -> CalendarDate:
        """Naïve datetimes are taken to be UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        moment = moment.astimezone(timezone.utc)
        return cls.gregorian(
            moment.year,
            moment.month,
            moment.day,
            moment.hour,
            moment.minute,
            moment.second + moment.microsecond / 1_000_000,
        )

    @classmethod
    def register(cls, definition_type: type) -> None:
        """Makes ``definition_type`` decodable under its ``identifier``."""
        cls._definitions[definition_type.identifier] = definition_type

    # ── conversion ───────────────────────────────────────────────────────

    @property
    def definition(self) -> DateDefinition:
        return self._definition

    @property
    def interval(self) -> CalendarInterval:
        return self._definition.interval

    def converted_to(self, definition_type: type):
        cached = self._conversions.get(definition_type)
        if cached is None:
            logger.debug("Converting %r to %s", self._definition, definition_type.__name__)
            cached = definition_type.from_interval(self.interval)
            self._conversions[definition_type] = cached
        return cached

    def to_datetime(self) -> datetime:
        return _REFERENCE_DATETIME + self.interval.to_timedelta()

    # ── shortcuts ────────────────────────────────────────────────────────

    @property
    def gregorian_year(self) -> GregorianYear:
        return self.converted_to(GregorianDate).year

    @property
    def gregorian_month(self) -> GregorianMonth:
        return self.converted_to(GregorianDate).month

    @property
    def gregorian_day(self) -> GregorianDay:
        return self.converted_to(GregorianDate).day

    @property
    def gregorian_weekday(self) -> GregorianWeekday:
        return self.converted_to(GregorianDate).weekday

    @property
    def gregorian_hour(self) -> GregorianHour:
        return self.converted_to(GregorianDate).hour

    @property
    def gregorian_minute(self) -> GregorianMinute:
        return self.converted_to(GregorianDate).minute

    @property
    def gregorian_second(self) -> GregorianSecond:
        return self.converted_to(GregorianDate).second

    @property
    def hebrew_year(self) -> HebrewYear:
        return self.converted_to(HebrewDate).year

    @property
    def hebrew_month(self) -> HebrewMonth:
        return self.converted_to(HebrewDate).month

    @property
    def hebrew_day(self) -> HebrewDay:
        return self.converted_to(HebrewDate).day

    @property
    def hebrew_weekday(self) -> HebrewWeekday:
        return self.converted_to(HebrewDate).weekday

    @property
    def hebrew_hour(self) -> HebrewHour:
        return self.converted_to(HebrewDate).hour

    @property
    def hebrew_part(self) -> HebrewPart:
        return self.converted_to(HebrewDate).part

    # ── formatting ───────────────────────────────────────────────────────

    def date_in_iso_format(self) -> str:
        """``2023-09-15``"""
        return "-".join(
            (
                self.gregorian_year.in_iso_format(),
                self.gregorian_month.in_iso_format(),
                self.gregorian_day.in_iso_format(),
            )
        )

    def time_in_iso_format(self, include_seconds: bool = False) -> str:
        """``18:00`` or, with seconds, ``18:00:00``"""
        parts = [self.gregorian_hour.in_iso_format(), self.gregorian_minute.in_iso_format()]
        if include_seconds:
            parts.append(self.gregorian_second.in_iso_format())
        return ":".join(parts)

    # ── arithmetic ───────────────────────────────────────────────────────

    def __add__(self, other: CalendarInterval) -> CalendarDate:
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        return CalendarDate(type(self._definition).from_interval(self.interval + other))

    __radd__ = __add__

    def __sub__(self, other: Union[CalendarDate, CalendarInterval]):
        if isinstance(other, CalendarDate):
            return self.interval - other.interval
        if isinstance(other, CalendarInterval):
            return self + (-other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.interval == other.interval

    def __lt__(self, other: CalendarDate) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.interval < other.interval

    def __hash__(self) -> int:
        return hash(self.interval)

    def __repr__(self) -> str:
        return f"CalendarDate({self._definition!r})"

    # ── encoding ─────────────────────────────────────────────────────────

    def encode(self) -> list[Any]:
        """``[identifier, *fields]``, readable by :meth:`decode`."""
        return [self._definition.identifier, *self._definition.encode()]

    @classmethod
    def decode(cls, payload: Sequence[Any]) -> CalendarDate:
        if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence) or not payload:
            raise CalendarError(f"Expected a non-empty list starting with a calendar identifier; got {payload!r}.")

        identifier, *fields = payload
        definition_type: Optional[type] = (
            cls._definitions.get(identifier) if isinstance(identifier, str) else None
        )
        if definition_type is None:
            raise CalendarError(
                f"Unknown calendar {identifier!r}. Known calendars: {sorted(cls._definitions)}."
            )
        try:
            definition = definition_type.decode(fields)
        except (TypeError, ValueError) as exc:
            raise CalendarError(f"Malformed {identifier} date {fields!r}: {exc}") from exc
        return cls(definition)
