"""Internal date constraint evaluation.

This module is not part of the public API. Import
:class:`~daterange_picker.Constraints` and
:func:`~daterange_picker.is_selectable` from ``daterange_picker`` directly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from daterange_picker._dates import _as_day


@dataclass(frozen=True)
class Constraints:
    """Limits on which calendar days may be picked.

    Every field is optional; ``None`` leaves that axis unconstrained.

    :param min_date: Earliest selectable day, inclusive.
    :param max_date: Latest selectable day, inclusive.
    :param max_span: Largest allowed distance between start and end.
    :param is_day_enabled: Predicate returning ``False`` for days that
        must not be picked.
    """

    min_date: date | None = None
    max_date: date | None = None
    max_span: timedelta | None = None
    is_day_enabled: Callable[[date], bool] | None = None

    def __post_init__(self) -> None:
        if self.min_date is not None:
            object.__setattr__(self, "min_date", _as_day(self.min_date))
        if self.max_date is not None:
            object.__setattr__(self, "max_date", _as_day(self.max_date))


def is_selectable(
    day: date | datetime,
    constraints: Constraints,
    other_endpoint: date | datetime | None = None,
) -> bool:
    """Return whether *day* may be picked under *constraints*.

    Shared by cell rendering and click validation so a disabled cell and
    a rejected click always agree.

    :param day: Candidate day.
    :param constraints: Active constraints.
    :param other_endpoint: The already chosen endpoint when *day* would
        complete a range; enables the ``max_span`` check.
    :return: ``True`` if *day* passes every configured constraint.
    """
    day = _as_day(day)

    if constraints.min_date is not None and day < constraints.min_date:
        return False
    if constraints.max_date is not None and day > constraints.max_date:
        return False
    if constraints.max_span is not None and other_endpoint is not None:
        if abs(day - _as_day(other_endpoint)) > constraints.max_span:
            return False
    if constraints.is_day_enabled is not None and not constraints.is_day_enabled(day):
        return False
    return True
