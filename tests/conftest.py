"""Pytest fixtures shared across chart model tests."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

import pytest

from chartmodel.dto import SeriesInput, WeeklyPoint
from chartmodel.layout import build_chart_layout

FIRST_MONDAY = date(2024, 1, 1)


def weekly_series(name: str, values: Sequence[int], *, first_week: date = FIRST_MONDAY, color: str = "#000") -> SeriesInput:
    """Build a SeriesInput with consecutive weekly points starting at `first_week`."""

    points = tuple(
        WeeklyPoint(week_start=first_week + timedelta(weeks=idx), downloads=value)
        for idx, value in enumerate(values)
    )
    return SeriesInput(name=name, color=color, points=points)


@pytest.fixture
def series_a() -> SeriesInput:
    """Return ten weeks of downloads: 100, 200, ..., 1000."""

    return weekly_series("alpha", [100 * n for n in range(1, 11)], color="#e74c3c")


@pytest.fixture
def series_b() -> SeriesInput:
    """Return six weeks of 50 downloads, starting in the fifth week of series_a."""

    return weekly_series("beta", [50] * 6, first_week=FIRST_MONDAY + timedelta(weeks=4), color="#3498db")


@pytest.fixture
def wide_layout():
    """Return a desktop-sized layout."""

    return build_chart_layout(1200, 600)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no filesystem or environment access.
    - `integration`: tests touching the filesystem, environment, or several
      layers together.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )


@pytest.fixture
def make_series():
    """Return the `weekly_series` factory."""

    return weekly_series
