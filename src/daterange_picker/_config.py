"""Internal picker configuration and named config registry.

This module is not part of the public API. Import
:class:`~daterange_picker.PickerConfig` from ``daterange_picker`` directly.
"""

from __future__ import annotations

import calendar
import dataclasses
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "DATERANGE_"
DEFAULT_CUSTOM_RANGE_LABEL = "Custom Range"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PickerConfig:
    """Constructor-time options for :class:`~daterange_picker.DateRangePicker`.

    A config can be registered under its *name* with
    :func:`register_config` and shared by several pickers.
    """

    name: str = "default"
    single_date_mode: bool = False
    auto_apply: bool = False
    linked_calendars: bool = False
    min_date: date | None = None
    max_date: date | None = None
    max_span: timedelta | None = None
    is_day_enabled: Callable[[date], bool] | None = None
    custom_date_function: Callable[[date], bool | str | None] | None = None
    custom_date_label: str | None = None
    close_on_outside_click: bool = True
    auto_adjust_calendars: bool = False
    always_show_calendars: bool = False
    show_custom_range_label: bool = True
    custom_range_label: str = DEFAULT_CUSTOM_RANGE_LABEL
    first_day_of_week: int = calendar.MONDAY

    def replace(self, **overrides: Any) -> PickerConfig:
        """Return a copy with the non-``None`` *overrides* applied.

        :raises TypeError: If an override names an unknown option.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, name: str = "default") -> PickerConfig:
        """Build a config from ``DATERANGE_*`` environment variables.

        Loads ``.env`` from the current directory first. Unset variables
        keep their defaults.

        :param name: Name given to the resulting config.
        :return: New config.
        :raises ValueError: If a variable holds a malformed value.
        """
        load_dotenv()

        values: dict[str, Any] = {"name": name}
        for field in (
            "single_date_mode",
            "auto_apply",
            "linked_calendars",
            "close_on_outside_click",
            "auto_adjust_calendars",
            "always_show_calendars",
            "show_custom_range_label",
        ):
            raw = _getenv(field)
            if raw is not None:
                values[field] = _parse_bool(field, raw)

        label = _getenv("custom_range_label")
        if label:
            values["custom_range_label"] = label

        raw = _getenv("first_day_of_week")
        if raw is not None:
            values["first_day_of_week"] = _parse_weekday(raw)

        for field in ("min_date", "max_date"):
            raw = _getenv(field)
            if raw is not None:
                try:
                    values[field] = date.fromisoformat(raw)
                except ValueError as err:
                    raise ValueError(
                        f"Invalid {ENV_PREFIX}{field.upper()}: expected "
                        f"'YYYY-MM-DD', got {raw!r}"
                    ) from err

        raw = _getenv("max_span_days")
        if raw is not None:
            try:
                values["max_span"] = timedelta(days=int(raw))
            except ValueError as err:
                raise ValueError(
                    f"Invalid {ENV_PREFIX}MAX_SPAN_DAYS: expected an integer, "
                    f"got {raw!r}"
                ) from err

        logger.debug(f"Loaded picker config {name!r} from environment")
        return cls(**values)


def _getenv(field: str) -> str | None:
    raw = os.getenv(ENV_PREFIX + field.upper())
    return raw.strip() if raw is not None else None


def _parse_bool(field: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(
        f"Invalid {ENV_PREFIX}{field.upper()}: expected a boolean, got {raw!r}"
    )


def _parse_weekday(raw: str) -> int:
    """Accept a weekday number (Monday=0) or an English day name."""
    if raw.isdigit():
        weekday = int(raw)
    else:
        names = [name.lower() for name in calendar.day_name]
        if raw.lower() not in names:
            raise ValueError(
                f"Invalid {ENV_PREFIX}FIRST_DAY_OF_WEEK: expected 0-6 or a "
                f"day name, got {raw!r}"
            )
        weekday = names.index(raw.lower())
    if not 0 <= weekday <= 6:
        raise ValueError(
            f"Invalid {ENV_PREFIX}FIRST_DAY_OF_WEEK: {raw!r} is out of range"
        )
    return weekday


_registry: dict[str, PickerConfig] = {}


def register_config(config: PickerConfig) -> None:
    """Register *config* under its name, replacing any previous one."""
    _registry[config.name] = config


def get_config(name: str | None = None) -> PickerConfig:
    """Return the config registered as *name*.

    Falls back to the first registered config, then to a default
    :class:`PickerConfig`, when *name* is unset or unknown.
    """
    if name is not None and name in _registry:
        return _registry[name]
    if name is not None:
        logger.debug(f"No picker config named {name!r}, using fallback")
    if _registry:
        return next(iter(_registry.values()))
    return PickerConfig()


def clear_configs() -> None:
    """Forget every registered config."""
    _registry.clear()
