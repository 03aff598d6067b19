"""Internal calendar-day utilities.

This module is not part of the public API and may change without notice.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time


def _as_day(value: date | datetime) -> date:
    """Reduce a ``date`` or ``datetime`` to its calendar day.

    :param value: Date or datetime.
    :return: The calendar day, with any time-of-day dropped.
    :raises TypeError: If *value* is not a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def _start_of_day(value: date | datetime) -> datetime:
    return datetime.combine(_as_day(value), time.min)


def _end_of_day(value: date | datetime) -> datetime:
    return datetime.combine(_as_day(value), time.max)


def _add_months(year: int, month: int, delta: int) -> tuple[int, int]:
    """Shift a ``(year, month)`` pair by *delta* months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _month_last_day(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def _shift_day_by_months(day: date, delta: int) -> date:
    """Move *day* by *delta* months, clamping to the target month's length."""
    year, month = _add_months(day.year, day.month, delta)
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))
