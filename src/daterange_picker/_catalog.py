"""Internal predefined range catalog.

This module is not part of the public API. Import
:class:`~daterange_picker.RangeCatalog` from ``daterange_picker`` directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from daterange_picker._dates import _as_day, _month_last_day, _shift_day_by_months


@dataclass(frozen=True)
class DateRange:
    """An inclusive pair of calendar days.

    :param start: First day of the range.
    :param end: Last day of the range.
    :raises ValueError: If *end* is before *start*.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _as_day(self.start))
        object.__setattr__(self, "end", _as_day(self.end))
        if self.start > self.end:
            raise ValueError(
                f"DateRange start {self.start.isoformat()} is after "
                f"end {self.end.isoformat()}"
            )

    @property
    def span(self) -> timedelta:
        return self.end - self.start

    def contains(self, day: date | datetime) -> bool:
        return self.start <= _as_day(day) <= self.end


@dataclass(frozen=True)
class NamedRange:
    label: str
    range: DateRange


class RangeCatalog:
    """Ordered, immutable list of labelled ranges.

    Labels need not be unique; lookups return the first entry that
    matches, in insertion order.

    :param entries: Named ranges, in display order.
    """

    def __init__(self, entries: Iterable[NamedRange] = ()):
        self._entries: tuple[NamedRange, ...] = tuple(entries)

    @classmethod
    def from_mapping(
        cls, ranges: Mapping[str, DateRange | tuple[date, date]]
    ) -> RangeCatalog:
        """Build a catalog from ``{label: range}``, keeping mapping order.

        Values may be :class:`DateRange` instances or ``(start, end)``
        tuples.
        """
        entries = []
        for label, value in ranges.items():
            if not isinstance(value, DateRange):
                value = DateRange(*value)
            entries.append(NamedRange(label, value))
        return cls(entries)

    def __repr__(self) -> str:
        return f"RangeCatalog(labels={list(self.labels)!r})"

    def __iter__(self) -> Iterator[NamedRange]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(entry.label for entry in self._entries)

    def find_match(self, selection: DateRange | None) -> str | None:
        """Return the label of the first entry equal to *selection*.

        Comparison is by calendar day on both endpoints.

        :param selection: Current selection, or ``None`` when incomplete.
        :return: Matching label, or ``None`` for a custom range.
        """
        if selection is None:
            return None
        for entry in self._entries:
            if (
                entry.range.start == selection.start
                and entry.range.end == selection.end
            ):
                return entry.label
        return None

    def get(self, label: str) -> NamedRange | None:
        for entry in self._entries:
            if entry.label == label:
                return entry
        return None


def standard_ranges(today: date | datetime | None = None) -> RangeCatalog:
    """Return the usual preset ranges relative to *today*.

    :param today: Reference day; defaults to :meth:`date.today`.
    :return: Catalog with Today, Yesterday, Last 7 Days, Last 30 Days,
        This Month and Last Month.
    """
    today = _as_day(today) if today is not None else date.today()
    yesterday = today - timedelta(days=1)
    month_start = today.replace(day=1)
    last_month_start = _shift_day_by_months(month_start, -1)

    return RangeCatalog(
        [
            NamedRange("Today", DateRange(today, today)),
            NamedRange("Yesterday", DateRange(yesterday, yesterday)),
            NamedRange("Last 7 Days", DateRange(today - timedelta(days=6), today)),
            NamedRange("Last 30 Days", DateRange(today - timedelta(days=29), today)),
            NamedRange(
                "This Month",
                DateRange(month_start, _month_last_day(today.year, today.month)),
            ),
            NamedRange(
                "Last Month",
                DateRange(
                    last_month_start,
                    _month_last_day(last_month_start.year, last_month_start.month),
                ),
            ),
        ]
    )
