from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Union

# One unit is a third of a second: the largest span that divides both a
# second and a Hebrew part (1/1080 hour) evenly.
UNITS_PER_SECOND = 3
UNITS_PER_MINUTE = 60 * UNITS_PER_SECOND
UNITS_PER_HOUR = 60 * UNITS_PER_MINUTE
UNITS_PER_DAY = 24 * UNITS_PER_HOUR
UNITS_PER_WEEK = 7 * UNITS_PER_DAY
UNITS_PER_HEBREW_PART = UNITS_PER_HOUR // 1080
UNITS_PER_HEBREW_MOON = 29 * UNITS_PER_DAY + 12 * UNITS_PER_HOUR + 793 * UNITS_PER_HEBREW_PART
UNITS_PER_GREGORIAN_LEAP_YEAR_CYCLE = 146_097 * UNITS_PER_DAY

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True, order=True)
class CalendarInterval:
    """
    Signed span of time, counted in thirds of a second.

    ``CalendarInterval.days(1) == CalendarInterval.hours(24)``; dividing two
    intervals gives a plain ratio, dividing by a number gives an interval.
    """

    units: float = 0.0

    # ── constructors ─────────────────────────────────────────────────────

    @classmethod
    def weeks(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_WEEK)

    @classmethod
    def days(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_DAY)

    @classmethod
    def hours(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_HOUR)

    @classmethod
    def minutes(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_MINUTE)

    @classmethod
    def seconds(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_SECOND)

    @classmethod
    def hebrew_parts(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_HEBREW_PART)

    @classmethod
    def hebrew_moons(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_HEBREW_MOON)

    @classmethod
    def gregorian_leap_year_cycles(cls, count: Scalar) -> CalendarInterval:
        return cls(count * UNITS_PER_GREGORIAN_LEAP_YEAR_CYCLE)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> CalendarInterval:
        whole_seconds = delta.days * 86_400 + delta.seconds
        return cls(whole_seconds * UNITS_PER_SECOND + delta.microseconds * UNITS_PER_SECOND / 1e6)

    def __post_init__(self) -> None:
        object.__setattr__(self, "units", float(self.units))

    # ── readers ──────────────────────────────────────────────────────────

    @property
    def in_weeks(self) -> float:
        return self.units / UNITS_PER_WEEK

    @property
    def in_days(self) -> float:
        return self.units / UNITS_PER_DAY

    @property
    def in_hours(self) -> float:
        return self.units / UNITS_PER_HOUR

    @property
    def in_minutes(self) -> float:
        return self.units / UNITS_PER_MINUTE

    @property
    def in_seconds(self) -> float:
        return self.units / UNITS_PER_SECOND

    @property
    def in_hebrew_parts(self) -> float:
        return self.units / UNITS_PER_HEBREW_PART

    @property
    def in_hebrew_moons(self) -> float:
        return self.units / UNITS_PER_HEBREW_MOON

    @property
    def is_negative(self) -> bool:
        return self.units < 0

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.units / UNITS_PER_SECOND)

    # ── arithmetic ───────────────────────────────────────────────────────

    def __add__(self, other: CalendarInterval) -> CalendarInterval:
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        return CalendarInterval(self.units + other.units)

    def __sub__(self, other: CalendarInterval) -> CalendarInterval:
        if not isinstance(other, CalendarInterval):
            return NotImplemented
        return CalendarInterval(self.units - other.units)

    def __mul__(self, factor: Scalar) -> CalendarInterval:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return CalendarInterval(self.units * factor)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[CalendarInterval, Scalar]):
        if isinstance(other, CalendarInterval):
            return self.units / other.units
        if isinstance(other, (int, float)):
            return CalendarInterval(self.units / other)
        return NotImplemented

    def __neg__(self) -> CalendarInterval:
        return CalendarInterval(-self.units)

    def __abs__(self) -> CalendarInterval:
        return CalendarInterval(abs(self.units))

    def mod(self, divisor: CalendarInterval) -> CalendarInterval:
        """Euclidean remainder: never negative, whatever the signs."""
        return CalendarInterval(self.units % abs(divisor.units))

    def rounded_down(self, to_multiple_of: CalendarInterval) -> CalendarInterval:
        return self - self.mod(to_multiple_of)
