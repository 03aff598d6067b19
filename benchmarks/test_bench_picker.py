"""Benchmarks for the picker's per-event hot paths (pure CPU).

Measures grid generation, cell rendering (one constraint check per
cell), catalog matching, and a full two-click pick. These run once per
render or click in a host UI.

Run:
    uv run pytest benchmarks/test_bench_picker.py -v --benchmark-sort=mean
"""

from datetime import timedelta

from benchmarks.conftest import BENCH_TODAY, make_catalog
from daterange_picker import CalendarMonth, DateRange, DateRangePicker

_WEEKDAYS_ONLY = {"is_day_enabled": lambda d: d.weekday() < 5}

# ---------------------------------------------------------------------------
# Calendar grid
# ---------------------------------------------------------------------------


class TestGrid:
    """Benchmark CalendarMonth.grid, 42 date objects per call."""

    def test_grid(self, benchmark):
        month = CalendarMonth(2024, 3)
        benchmark(lambda: month.grid)

    def test_week_numbers(self, benchmark):
        month = CalendarMonth(2024, 3)
        benchmark(month.week_numbers)


# ---------------------------------------------------------------------------
# Cell rendering
# ---------------------------------------------------------------------------


class TestCells:
    """Benchmark DateRangePicker.cells, what a host calls per re-render."""

    def test_cells_unconstrained(self, benchmark):
        picker = DateRangePicker(today=lambda: BENCH_TODAY)
        benchmark(picker.cells, "left")

    def test_cells_with_predicate(self, benchmark):
        picker = DateRangePicker(today=lambda: BENCH_TODAY, **_WEEKDAYS_ONLY)
        benchmark(picker.cells, "left")

    def test_cells_picking_end(self, benchmark):
        """Span checks run against the chosen start on every cell."""
        picker = DateRangePicker(
            today=lambda: BENCH_TODAY, max_span=timedelta(days=7)
        )
        picker.select_day(BENCH_TODAY)
        benchmark(picker.cells, "right")


# ---------------------------------------------------------------------------
# Catalog matching
# ---------------------------------------------------------------------------


class TestCatalog:
    """Benchmark RangeCatalog.find_match, a linear scan."""

    def test_find_match_miss(self, benchmark, catalog):
        selection = DateRange(BENCH_TODAY, BENCH_TODAY + timedelta(days=1))
        benchmark(catalog.find_match, selection)

    def test_find_match_last_entry(self, benchmark):
        catalog = make_catalog(600)
        selection = DateRange(BENCH_TODAY - timedelta(days=599), BENCH_TODAY)
        benchmark(catalog.find_match, selection)


# ---------------------------------------------------------------------------
# Click resolution
# ---------------------------------------------------------------------------


class TestPick:
    """Benchmark a full open/click/click/apply cycle."""

    def test_two_click_pick(self, benchmark):
        picker = DateRangePicker(
            today=lambda: BENCH_TODAY, ranges=make_catalog(60), auto_apply=True
        )

        def pick():
            picker.open()
            picker.select_day(BENCH_TODAY - timedelta(days=3))
            picker.select_day(BENCH_TODAY)

        benchmark(pick)
