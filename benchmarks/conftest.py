"""Shared fixtures for benchmarks: synthetic catalogs at realistic sizes."""

from datetime import date, timedelta

import pytest

from daterange_picker import DateRange, NamedRange, RangeCatalog

BENCH_TODAY = date(2024, 3, 15)


def make_catalog(n_entries: int) -> RangeCatalog:
    """Simulate a catalog of n_entries trailing-window ranges."""
    return RangeCatalog(
        NamedRange(
            f"Last {i + 1} Days",
            DateRange(BENCH_TODAY - timedelta(days=i), BENCH_TODAY),
        )
        for i in range(n_entries)
    )


@pytest.fixture(params=[6, 60, 600], ids=["6ranges", "60ranges", "600ranges"])
def catalog(request):
    """Parametrized catalog fixture."""
    return make_catalog(request.param)
