"""Internal selection state machine.

This module is not part of the public API. Import
:class:`~daterange_picker.DateRangePicker` from ``daterange_picker`` directly.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from daterange_picker._catalog import DateRange, RangeCatalog
from daterange_picker._config import PickerConfig, get_config
from daterange_picker._constraints import Constraints, is_selectable
from daterange_picker._dates import _as_day, _end_of_day, _start_of_day
from daterange_picker._month import CalendarMonth
from daterange_picker._sync import Side, adjust, jump, navigate

logger = logging.getLogger(__name__)

EVENTS = ("opened", "closed", "range-selected", "cancelled", "month-changed")


class PickerState(enum.Enum):
    CLOSED = "closed"
    OPEN_WITH_RANGES_LIST = "open_with_ranges_list"
    OPEN_PICKING_START = "open_picking_start"
    OPEN_PICKING_END = "open_picking_end"


@dataclass(frozen=True)
class DayCell:
    """Render data for one calendar grid cell."""

    day: date
    in_month: bool
    is_today: bool
    is_start: bool
    is_end: bool
    in_range: bool
    disabled: bool
    label: str | None = None


class DateRangePicker:
    """Range-selection engine behind a date-range picker widget.

    Resolves day clicks into a start/end pair, enforces the configured
    constraints, labels the selection from a :class:`RangeCatalog` and
    keeps the two displayed months positioned. The host renders from
    the public attributes and :meth:`cells`, and subscribes to
    notifications with :meth:`on`::

        picker = DateRangePicker(ranges=standard_ranges(), auto_apply=True)
        picker.on("range-selected", lambda selection: print(selection))
        picker.open()
        picker.select_day(date(2024, 1, 12))
        picker.select_day(date(2024, 1, 17))

    Rejected operations (a disabled day, apply with an incomplete
    selection, an unknown range label) never raise. They leave the state
    untouched and emit nothing.

    :param config: Options; defaults to :func:`get_config` for *config_name*.
    :param config_name: Name of a registered config to use when *config*
        is not given.
    :param ranges: Predefined ranges, as a catalog or ``{label: range}``.
    :param start_date: Initially selected start.
    :param end_date: Initially selected end. Given alone, it is used as
        both endpoints.
    :param today: Callable returning the current day.
    :param overrides: Individual :class:`PickerConfig` options applied on
        top of *config*; ``None`` values are ignored.
    """

    def __init__(
        self,
        config: PickerConfig | None = None,
        *,
        config_name: str | None = None,
        ranges: RangeCatalog | Mapping[str, Any] | None = None,
        start_date: date | datetime | None = None,
        end_date: date | datetime | None = None,
        today: Callable[[], date] = date.today,
        **overrides: Any,
    ):
        if config is None:
            config = get_config(config_name)
        config = config.replace(**overrides)
        if config.single_date_mode and not config.auto_apply:
            config = config.replace(auto_apply=True)
        self.config = config
        self.constraints = Constraints(
            min_date=config.min_date,
            max_date=config.max_date,
            max_span=config.max_span,
            is_day_enabled=config.is_day_enabled,
        )
        self._today = today
        self._ranges = _as_catalog(ranges)
        self._listeners: dict[str, list[Callable[..., Any]]] = {e: [] for e in EVENTS}

        self.start_date: datetime | None = None
        self.end_date: datetime | None = None
        self.previous_start: datetime | None = None
        self.previous_end: datetime | None = None
        self.is_open = False
        self.calendars_visible = config.always_show_calendars
        self._store_dates(start_date, end_date)

        self.left_month = CalendarMonth.containing(self.today, config.first_day_of_week)
        self.right_month = self.left_month.add_months(1)
        self.adjust_calendars()
        self.chosen_label: str | None = None
        self._relabel()

    def __repr__(self) -> str:
        start = self.start_date.date().isoformat() if self.start_date else None
        end = self.end_date.date().isoformat() if self.end_date else None
        return f"DateRangePicker(start={start!r}, end={end!r}, state={self.state.name})"

    # --- Notifications ---

    def on(self, event: str, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Subscribe *callback* to *event*.

        Events and their arguments: ``"opened"``, ``"closed"``,
        ``"range-selected"`` (:class:`DateRange`), ``"cancelled"``
        (``True`` for an explicit cancel, ``False`` for an outside click)
        and ``"month-changed"`` (left and right :class:`CalendarMonth`).

        :return: *callback*, for a later :meth:`off`.
        :raises ValueError: If *event* is not a known event name.
        """
        self._check_event(event)
        self._listeners[event].append(callback)
        return callback

    def off(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove *callback* from *event*; unknown callbacks are ignored."""
        self._check_event(event)
        if callback in self._listeners[event]:
            self._listeners[event].remove(callback)

    @staticmethod
    def _check_event(event: str) -> None:
        if event not in EVENTS:
            raise ValueError(f"Unknown event {event!r}; expected one of {EVENTS}")

    def _emit(self, event: str, *args: Any) -> None:
        logger.debug(f"Emitting {event!r}")
        for callback in list(self._listeners[event]):
            callback(*args)

    # --- Queries ---

    @property
    def today(self) -> date:
        return _as_day(self._today())

    @property
    def single_date_mode(self) -> bool:
        return self.config.single_date_mode

    @property
    def auto_apply(self) -> bool:
        return self.config.auto_apply

    @property
    def ranges(self) -> RangeCatalog:
        return self._ranges

    @ranges.setter
    def ranges(self, ranges: RangeCatalog | Mapping[str, Any] | None) -> None:
        self._ranges = _as_catalog(ranges)
        if self._relabel() is None and self.is_open:
            self.calendars_visible = True

    @property
    def selection(self) -> DateRange | None:
        """The completed selection, or ``None`` while an endpoint is missing."""
        if self.start_date is None or self.end_date is None:
            return None
        return DateRange(self.start_date.date(), self.end_date.date())

    @property
    def state(self) -> PickerState:
        if not self.is_open:
            return PickerState.CLOSED
        if not self.calendars_visible:
            return PickerState.OPEN_WITH_RANGES_LIST
        if self._picking_end:
            return PickerState.OPEN_PICKING_END
        return PickerState.OPEN_PICKING_START

    @property
    def _picking_end(self) -> bool:
        return self.start_date is not None and self.end_date is None

    def is_selectable(self, day: date | datetime) -> bool:
        """Whether clicking *day* now would be accepted.

        While the end is being picked the span limit is checked against
        the chosen start.
        """
        other = self.start_date if self._picking_end else None
        return is_selectable(day, self.constraints, other)

    def day_label(self, day: date | datetime) -> str | None:
        """Label produced by the configured ``custom_date_function``."""
        func = self.config.custom_date_function
        if func is None:
            return None
        result = func(_as_day(day))
        if result is True:
            return self.config.custom_date_label
        if isinstance(result, str) and result:
            return result
        return None

    def cells(self, side: Side) -> list[DayCell]:
        """Return the 42 cells of the *side* calendar for rendering.

        :raises ValueError: If *side* is not ``"left"`` or ``"right"``.
        """
        if side == "left":
            month = self.left_month
        elif side == "right":
            month = self.right_month
        else:
            raise ValueError(f"side must be 'left' or 'right', got {side!r}")

        today = self.today
        start = self.start_date.date() if self.start_date else None
        end = self.end_date.date() if self.end_date else None
        return [
            DayCell(
                day=day,
                in_month=month.in_month(day),
                is_today=day == today,
                is_start=day == start,
                is_end=day == end,
                in_range=start is not None and end is not None and start <= day <= end,
                disabled=not self.is_selectable(day),
                label=self.day_label(day),
            )
            for day in month.grid
        ]

    def range_labels(self) -> list[str]:
        """Labels for the ranges list, custom range label last."""
        labels = list(self._ranges.labels)
        if labels and self.config.show_custom_range_label:
            labels.append(self.config.custom_range_label)
        return labels

    # --- Open / close ---

    def open(self) -> None:
        """Show the picker, remembering the selection for :meth:`cancel`."""
        if self.is_open:
            return

        self.previous_start = self.start_date
        self.previous_end = self.end_date

        if self.config.auto_adjust_calendars:
            self.adjust_calendars()

        if self._relabel() is None:
            self.calendars_visible = True

        self.is_open = True
        self._emit("opened")

    def close(self) -> None:
        """Hide the picker. The selection is left as it is."""
        if not self.is_open:
            return
        self.is_open = False
        self.previous_start = None
        self.previous_end = None
        self._emit("closed")

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def cancel(self) -> None:
        """Restore the selection held when the picker opened, then close."""
        if not self.is_open:
            logger.debug("Cancel ignored: picker is closed")
            return
        self._restore()
        self.close()
        self._emit("cancelled", True)

    def outside_click(self) -> None:
        """Dismiss the picker after a click outside it, if so configured."""
        if not self.is_open or not self.config.close_on_outside_click:
            logger.debug("Outside click ignored")
            return
        self._restore()
        self.close()
        self._emit("cancelled", False)

    def _restore(self) -> None:
        self.start_date = self.previous_start
        self.end_date = self.previous_end
        self._relabel()

    # --- Selection ---

    def select_day(self, day: date | datetime) -> None:
        """Handle a click on *day* in either calendar.

        The first click sets the start, the second the end (reordered so
        the earlier day is the start). A click after a completed range
        starts a new one. Clicks on days that fail the constraints are
        ignored.
        """
        day = _as_day(day)

        if self.start_date is None or self.end_date is not None:
            if not is_selectable(day, self.constraints):
                logger.debug(f"Click on {day.isoformat()} rejected by constraints")
                return
            self.start_date = _start_of_day(day)
            self.end_date = None
            if not self.single_date_mode:
                logger.debug(f"Start set to {day.isoformat()}, awaiting end")
                return
            self.end_date = _end_of_day(day)
        else:
            start = self.start_date.date()
            if not is_selectable(day, self.constraints, start):
                logger.debug(
                    f"Click on {day.isoformat()} rejected as end for "
                    f"start {start.isoformat()}"
                )
                return
            if day < start:
                self.start_date = _start_of_day(day)
                self.end_date = _end_of_day(start)
            else:
                self.end_date = _end_of_day(day)

        self._relabel()
        if self.auto_apply:
            self.apply_selection()

    def apply_selection(self) -> None:
        """Emit ``"range-selected"`` for a complete selection and close."""
        selection = self.selection
        if selection is None:
            logger.debug("Apply ignored: selection is incomplete")
            return
        self._emit("range-selected", selection)
        self.close()

    def select_predefined_range(self, label: str) -> None:
        """Select the catalog range named *label*.

        The custom range label reveals the calendars instead. Unknown
        labels are ignored.
        """
        entry = self._ranges.get(label)
        if entry is None:
            if label == self.config.custom_range_label:
                self.show_calendars()
            else:
                logger.debug(f"Unknown range label {label!r}")
            return

        self.start_date = _start_of_day(entry.range.start)
        if self.single_date_mode:
            self.end_date = _end_of_day(entry.range.start)
        else:
            self.end_date = _end_of_day(entry.range.end)
        self.chosen_label = entry.label
        self.hide_calendars()
        self.adjust_calendars()

        if self.auto_apply:
            self.apply_selection()

    def set_dates(
        self, start_date: date | datetime | None, end_date: date | datetime | None
    ) -> None:
        """Replace the selection from the host side.

        Used for two-way binding; no ``"range-selected"`` is emitted.
        Reversed input is swapped and the calendars are re-anchored.
        """
        self._store_dates(start_date, end_date)
        self._relabel()
        self.adjust_calendars()

    def _store_dates(
        self, start: date | datetime | None, end: date | datetime | None
    ) -> None:
        if start is None:
            start = end
        if start is None:
            self.start_date = None
            self.end_date = None
            return
        start_day = _as_day(start)
        end_day = start_day if end is None or self.single_date_mode else _as_day(end)
        if end_day < start_day:
            start_day, end_day = end_day, start_day
        self.start_date = _start_of_day(start_day)
        self.end_date = _end_of_day(end_day)

    def _relabel(self) -> str | None:
        """Refresh :attr:`chosen_label`; return the catalog match, if any."""
        match = self._ranges.find_match(self.selection)
        self.chosen_label = (
            match if match is not None else self.config.custom_range_label
        )
        return match

    def show_calendars(self) -> None:
        self.calendars_visible = True

    def hide_calendars(self) -> None:
        if not self.config.always_show_calendars:
            self.calendars_visible = False

    # --- Calendars ---

    def adjust_calendars(self) -> None:
        """Position both calendars on the current selection."""
        left, right = adjust(
            self.left_month,
            self.right_month,
            self.start_date,
            self.end_date,
            self.today,
        )
        self._set_months(left, right)

    def navigate(self, side: Side, delta: int) -> None:
        """Move the *side* calendar by *delta* months.

        With linked calendars both move together.

        :raises ValueError: If *side* is not ``"left"`` or ``"right"``.
        """
        left, right = navigate(
            self.left_month,
            self.right_month,
            side,
            delta,
            self.config.linked_calendars,
        )
        self._set_months(left, right)

    def jump_to_month(self, side: Side, year: int, month: int) -> None:
        """Show *year*/*month* on the *side* calendar.

        :raises ValueError: If *side* or *month* is invalid.
        """
        left, right = jump(
            self.left_month,
            self.right_month,
            side,
            year,
            month,
            self.config.linked_calendars,
        )
        self._set_months(left, right)

    def _set_months(self, left: CalendarMonth, right: CalendarMonth) -> None:
        if left == self.left_month and right == self.right_month:
            return
        self.left_month = left
        self.right_month = right
        logger.debug(f"Calendars moved to {left!r} / {right!r}")
        self._emit("month-changed", left, right)


def _as_catalog(ranges: RangeCatalog | Mapping[str, Any] | None) -> RangeCatalog:
    if ranges is None:
        return RangeCatalog()
    if isinstance(ranges, RangeCatalog):
        return ranges
    return RangeCatalog.from_mapping(ranges)
