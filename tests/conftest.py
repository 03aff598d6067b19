from datetime import date
from unittest.mock import Mock

import pytest

from daterange_picker import EVENTS, DateRangePicker, clear_configs

TODAY = date(2024, 3, 15)


@pytest.fixture(autouse=True)
def _reset_config_registry():
    """Keep the module-level config registry empty between tests."""
    clear_configs()
    yield
    clear_configs()


@pytest.fixture
def make_picker():
    """Build a picker whose clock is pinned to ``TODAY``."""

    def factory(*args, **kwargs):
        kwargs.setdefault("today", lambda: TODAY)
        return DateRangePicker(*args, **kwargs)

    return factory


@pytest.fixture
def watch():
    """Subscribe a Mock to every picker event; return them keyed by event."""

    def attach(picker):
        listeners = {event: Mock(name=event) for event in EVENTS}
        for event, listener in listeners.items():
            picker.on(event, listener)
        return listeners

    return attach
