from __future__ import annotations


class CalendarError(ValueError):
    """A calendar date could not be decoded."""
