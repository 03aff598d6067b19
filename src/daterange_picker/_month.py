"""Internal calendar month implementation.

This module is not part of the public API. Import
:class:`~daterange_picker.CalendarMonth` from ``daterange_picker`` directly.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from daterange_picker._dates import _add_months, _as_day, _month_last_day

if TYPE_CHECKING:
    import pandas

GRID_WEEKS = 6
GRID_DAYS = GRID_WEEKS * 7


@dataclass(frozen=True)
class CalendarMonth:
    """One displayed month, anchored to a first day of the week.

    The month holds no selection state; the picker is queried for that
    when cells are rendered. Weekdays use the :mod:`calendar` numbering
    (Monday is ``0``, Sunday is ``6``).

    :param year: Four-digit year.
    :param month: Month number, 1-12.
    :param first_day_of_week: Weekday shown in the first grid column.
    :raises ValueError: If *month* or *first_day_of_week* is out of range.
    """

    year: int
    month: int
    first_day_of_week: int = calendar.MONDAY

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month!r}")
        if not 0 <= self.first_day_of_week <= 6:
            raise ValueError(
                f"first_day_of_week must be in 0..6, got {self.first_day_of_week!r}"
            )

    def __repr__(self) -> str:
        return f"CalendarMonth({self.year:04d}-{self.month:02d})"

    @classmethod
    def containing(
        cls, day: date | datetime, first_day_of_week: int = calendar.MONDAY
    ) -> CalendarMonth:
        """Return the month that contains *day*."""
        day = _as_day(day)
        return cls(day.year, day.month, first_day_of_week)

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return _month_last_day(self.year, self.month)

    def add_months(self, delta: int) -> CalendarMonth:
        year, month = _add_months(self.year, self.month, delta)
        return CalendarMonth(year, month, self.first_day_of_week)

    def same_month(self, other: CalendarMonth) -> bool:
        return self.key == other.key

    def in_month(self, day: date | datetime) -> bool:
        day = _as_day(day)
        return (day.year, day.month) == self.key

    @property
    def grid(self) -> list[date]:
        """The 42 days (six weeks) displayed for this month.

        Starts on the last *first_day_of_week* on or before the 1st and
        is padded with days of the adjacent months.
        """
        first = self.first_day
        offset = (first.weekday() - self.first_day_of_week) % 7
        start = first - timedelta(days=offset)
        return [start + timedelta(days=i) for i in range(GRID_DAYS)]

    def weeks(self) -> list[list[date]]:
        days = self.grid
        return [days[i : i + 7] for i in range(0, GRID_DAYS, 7)]

    def weekday_order(self) -> list[int]:
        """Weekday numbers in display order, starting at *first_day_of_week*."""
        return [(self.first_day_of_week + i) % 7 for i in range(7)]

    def week_numbers(self, iso: bool = True) -> list[int]:
        """Return one week number per grid row.

        :param iso: ``True`` for ISO 8601 week numbers, ``False`` for
            week-of-year counted from the week containing January 1st,
            with weeks starting on *first_day_of_week*.
        :return: List of six week numbers, keyed off each row's first day.
        """
        numbers: list[int] = []
        for week in self.weeks():
            first = week[0]
            if iso:
                numbers.append(first.isocalendar()[1])
            else:
                jan1 = date(first.year, 1, 1)
                offset = (jan1.weekday() - self.first_day_of_week) % 7
                numbers.append((first.timetuple().tm_yday - 1 + offset) // 7 + 1)
        return numbers

    def to_dataframe(self) -> pandas.DataFrame:
        """Convert the grid to a :class:`pandas.DataFrame`.

        One row per week, one column per weekday (abbreviated names, in
        display order).

        Requires ``pandas`` (``pip install daterange_picker[pandas]``).

        :return: DataFrame of six rows and seven columns of dates.
        :raises ImportError: If pandas is not installed.
        """
        try:
            import pandas as pd
        except ImportError as err:
            raise ImportError(
                "pandas is required for to_dataframe(). "
                "Install it with: pip install daterange_picker[pandas]"
            ) from err

        columns = [calendar.day_abbr[w] for w in self.weekday_order()]
        return pd.DataFrame(self.weeks(), columns=columns)
