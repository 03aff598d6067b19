"""Tests for PickerConfig, environment loading and the named registry."""

import calendar
import os
from datetime import date, timedelta
from unittest.mock import patch

import pytest

from daterange_picker import PickerConfig, get_config, register_config


@pytest.fixture
def clean_env(monkeypatch):
    """Drop any DATERANGE_* variables and stub out .env loading."""
    for key in list(os.environ):
        if key.startswith("DATERANGE_"):
            monkeypatch.delenv(key)
    with patch("daterange_picker._config.load_dotenv") as mock_load:
        yield mock_load


# --- PickerConfig ---


def test_config_defaults():
    config = PickerConfig()
    assert config.name == "default"
    assert config.custom_range_label == "Custom Range"
    assert config.close_on_outside_click is True
    assert config.auto_apply is False
    assert config.first_day_of_week == calendar.MONDAY
    assert config.max_span is None


def test_replace_skips_none():
    config = PickerConfig(auto_apply=True, custom_range_label="Other")
    updated = config.replace(auto_apply=None, linked_calendars=True)
    assert updated.auto_apply is True
    assert updated.linked_calendars is True
    assert updated.custom_range_label == "Other"


def test_replace_false_overrides():
    assert PickerConfig(auto_apply=True).replace(auto_apply=False).auto_apply is False


def test_replace_unknown_option_raises():
    with pytest.raises(TypeError):
        PickerConfig().replace(not_an_option=True)


# --- PickerConfig.from_env ---


def test_from_env_defaults(clean_env):
    config = PickerConfig.from_env()
    assert config == PickerConfig()
    clean_env.assert_called_once_with()


def test_from_env_reads_variables(clean_env, monkeypatch):
    monkeypatch.setenv("DATERANGE_AUTO_APPLY", "yes")
    monkeypatch.setenv("DATERANGE_LINKED_CALENDARS", "1")
    monkeypatch.setenv("DATERANGE_CLOSE_ON_OUTSIDE_CLICK", "off")
    monkeypatch.setenv("DATERANGE_FIRST_DAY_OF_WEEK", "Sunday")
    monkeypatch.setenv("DATERANGE_CUSTOM_RANGE_LABEL", "Pick dates")
    monkeypatch.setenv("DATERANGE_MIN_DATE", "2024-01-10")
    monkeypatch.setenv("DATERANGE_MAX_DATE", "2024-01-20")
    monkeypatch.setenv("DATERANGE_MAX_SPAN_DAYS", "5")

    config = PickerConfig.from_env(name="env")

    assert config.name == "env"
    assert config.auto_apply is True
    assert config.linked_calendars is True
    assert config.close_on_outside_click is False
    assert config.first_day_of_week == calendar.SUNDAY
    assert config.custom_range_label == "Pick dates"
    assert config.min_date == date(2024, 1, 10)
    assert config.max_date == date(2024, 1, 20)
    assert config.max_span == timedelta(days=5)


def test_from_env_numeric_weekday(clean_env, monkeypatch):
    monkeypatch.setenv("DATERANGE_FIRST_DAY_OF_WEEK", "2")
    assert PickerConfig.from_env().first_day_of_week == calendar.WEDNESDAY


@pytest.mark.parametrize(
    "variable,value,match",
    [
        ("DATERANGE_AUTO_APPLY", "maybe", "DATERANGE_AUTO_APPLY"),
        ("DATERANGE_MIN_DATE", "10/01/2024", "DATERANGE_MIN_DATE"),
        ("DATERANGE_MAX_SPAN_DAYS", "five", "DATERANGE_MAX_SPAN_DAYS"),
        ("DATERANGE_FIRST_DAY_OF_WEEK", "funday", "FIRST_DAY_OF_WEEK"),
        ("DATERANGE_FIRST_DAY_OF_WEEK", "9", "out of range"),
    ],
)
def test_from_env_malformed_raises(clean_env, monkeypatch, variable, value, match):
    monkeypatch.setenv(variable, value)
    with pytest.raises(ValueError, match=match):
        PickerConfig.from_env()


def test_from_env_empty_label_keeps_default(clean_env, monkeypatch):
    monkeypatch.setenv("DATERANGE_CUSTOM_RANGE_LABEL", "  ")
    assert PickerConfig.from_env().custom_range_label == "Custom Range"


# --- Named registry ---


def test_get_config_default_when_empty():
    assert get_config() == PickerConfig()
    assert get_config("anything") == PickerConfig()


def test_get_config_by_name():
    first = PickerConfig(name="first", auto_apply=True)
    second = PickerConfig(name="second", linked_calendars=True)
    register_config(first)
    register_config(second)
    assert get_config("second") is second


def test_get_config_falls_back_to_first_registered():
    first = PickerConfig(name="first")
    register_config(first)
    register_config(PickerConfig(name="second"))
    assert get_config() is first
    assert get_config("missing") is first


def test_register_config_replaces_same_name():
    register_config(PickerConfig(name="shared"))
    replacement = PickerConfig(name="shared", auto_apply=True)
    register_config(replacement)
    assert get_config("shared") is replacement
