from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

from keystone._contracts import contract_violation


@dataclass(frozen=True, order=True)
class CalendarComponent:
    """
    One field of a calendar date wrapping a raw value.

    ``valid_range`` is half-open, ``(lower, upper)``; every construction is
    checked against it. ``number_already_elapsed`` counts from ``lower``.
    """

    value: Any

    valid_range: ClassVar[Optional[tuple[Any, Any]]] = None

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.valid_range is None:
            return
        lower, upper = self.valid_range
        if not lower <= self.value < upper:
            contract_violation(
                f"{type(self).__name__} {self.value!r} is out of range "
                f"[{lower}, {upper})."
            )

    @property
    def number_already_elapsed(self) -> Any:
        return self.value - self.valid_range[0]

    @property
    def ordinal(self) -> Any:
        return self.number_already_elapsed + 1

    @classmethod
    def from_number_already_elapsed(cls, count: Any):
        return cls(cls.valid_range[0] + count)

    @classmethod
    def from_ordinal(cls, ordinal: Any):
        return cls.from_number_already_elapsed(ordinal - 1)

    def in_iso_format(self) -> str:
        return f"{int(self.value):02d}"

    def __int__(self) -> int:
        return int(self.value)


class Weekday(Enum):
    """Shared by the weekday enums: values are ordinals starting at Sunday = 1."""

    @property
    def number_already_elapsed(self) -> int:
        return self.value - 1

    @property
    def ordinal(self) -> int:
        return self.value

    @classmethod
    def from_number_already_elapsed(cls, count: int):
        if not 0 <= count < 7:
            contract_violation(f"There is no weekday {count + 1}.")
        return cls(count + 1)
