"""Internal calendar pair positioning.

This module is not part of the public API. Import :func:`~daterange_picker.adjust`,
:func:`~daterange_picker.navigate` and :func:`~daterange_picker.jump` from
``daterange_picker`` directly.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from daterange_picker._dates import _as_day
from daterange_picker._month import CalendarMonth

Side = Literal["left", "right"]

SIDES = ("left", "right")


def _separate(
    left: CalendarMonth, right: CalendarMonth
) -> tuple[CalendarMonth, CalendarMonth]:
    # The two calendars never show the same month.
    if left.same_month(right):
        right = right.add_months(1)
    return left, right


def _check_side(side: str) -> None:
    if side not in SIDES:
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")


def adjust(
    left: CalendarMonth,
    right: CalendarMonth,
    start: date | datetime | None,
    end: date | datetime | None,
    today: date | datetime,
) -> tuple[CalendarMonth, CalendarMonth]:
    """Anchor both calendars to the current selection.

    The left calendar shows *start*'s month (today's month when unset),
    the right one *end*'s month (the month after today's when unset).

    :param left: Current left calendar; supplies the first day of week.
    :param right: Current right calendar; supplies the first day of week.
    :param start: Selected start, if any.
    :param end: Selected end, if any.
    :param today: Reference day for unset endpoints.
    :return: New ``(left, right)`` pair, never showing the same month.
    """
    today = _as_day(today)
    new_left = CalendarMonth.containing(
        start if start is not None else today, left.first_day_of_week
    )
    if end is not None:
        new_right = CalendarMonth.containing(end, right.first_day_of_week)
    else:
        anchor = CalendarMonth.containing(today, right.first_day_of_week)
        new_right = anchor.add_months(1)
    return _separate(new_left, new_right)


def navigate(
    left: CalendarMonth,
    right: CalendarMonth,
    side: Side,
    delta: int,
    linked: bool,
) -> tuple[CalendarMonth, CalendarMonth]:
    """Move one calendar, or both when *linked*, by *delta* months.

    :raises ValueError: If *side* is not ``"left"`` or ``"right"``.
    """
    _check_side(side)
    if linked:
        return _separate(left.add_months(delta), right.add_months(delta))
    if side == "left":
        return _separate(left.add_months(delta), right)
    return _separate(left, right.add_months(delta))


def jump(
    left: CalendarMonth,
    right: CalendarMonth,
    side: Side,
    year: int,
    month: int,
    linked: bool,
) -> tuple[CalendarMonth, CalendarMonth]:
    """Show an explicit month on one side.

    In linked mode the other calendar follows by the same offset.

    :raises ValueError: If *side* is unknown or *month* is out of range.
    """
    _check_side(side)
    target = CalendarMonth(year, month, left.first_day_of_week)
    current = left if side == "left" else right
    delta = (target.year - current.year) * 12 + (target.month - current.month)
    return navigate(left, right, side, delta, linked)
