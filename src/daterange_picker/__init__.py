"""Range-selection engine for date-range picker widgets."""

from ._catalog import DateRange, NamedRange, RangeCatalog, standard_ranges
from ._config import PickerConfig, clear_configs, get_config, register_config
from ._constraints import Constraints, is_selectable
from ._month import CalendarMonth
from ._picker import EVENTS, DateRangePicker, DayCell, PickerState
from ._sync import adjust, jump, navigate

__all__ = [
    "CalendarMonth",
    "Constraints",
    "DateRange",
    "DateRangePicker",
    "DayCell",
    "EVENTS",
    "NamedRange",
    "PickerConfig",
    "PickerState",
    "RangeCatalog",
    "__version__",
    "adjust",
    "clear_configs",
    "get_config",
    "is_selectable",
    "jump",
    "navigate",
    "register_config",
    "standard_ranges",
]


def _get_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("daterange_picker")
    except PackageNotFoundError:
        return "unknown"


__version__ = _get_version()
del _get_version
