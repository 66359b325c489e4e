"""Unit tests for daily-to-weekly aggregation."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from chartmodel.aggregations import aggregate_weekly, week_start_for
from chartmodel.dto import DailyRecord, WeeklyPoint

pytestmark = pytest.mark.unit


def _days(start: date, count: int, downloads: int) -> list[DailyRecord]:
    return [DailyRecord(day=start + timedelta(days=offset), downloads=downloads) for offset in range(count)]


def test_week_start_for_maps_sunday_to_previous_monday() -> None:
    """Weeks run Monday through Sunday."""

    assert week_start_for(date(2024, 1, 7)) == date(2024, 1, 1)
    assert week_start_for(date(2024, 1, 1)) == date(2024, 1, 1)
    assert week_start_for(date(2024, 1, 3)) == date(2024, 1, 1)
    assert week_start_for(date(2024, 1, 8)) == date(2024, 1, 8)


def test_aggregate_weekly_keeps_week_ending_on_sunday() -> None:
    """A week whose latest day is its Sunday is complete."""

    points = aggregate_weekly(_days(date(2024, 1, 1), 7, 10))
    assert points == (WeeklyPoint(week_start=date(2024, 1, 1), downloads=70),)


def test_aggregate_weekly_drops_incomplete_trailing_week() -> None:
    """The week in progress is an undercount and must not be charted."""

    records = _days(date(2024, 1, 1), 7, 10) + _days(date(2024, 1, 8), 2, 5)
    points = aggregate_weekly(records)
    assert points == (WeeklyPoint(week_start=date(2024, 1, 1), downloads=70),)


def test_aggregate_weekly_sorts_unordered_input() -> None:
    """Input order does not matter; output is ascending by week."""

    records = list(reversed(_days(date(2024, 1, 1), 14, 3)))
    points = aggregate_weekly(records)
    assert [p.week_start for p in points] == [date(2024, 1, 1), date(2024, 1, 8)]
    assert [p.downloads for p in points] == [21, 21]


def test_aggregate_weekly_drops_zero_weeks() -> None:
    """Weeks without downloads never produce a point."""

    records = [
        DailyRecord(day=date(2024, 1, 1), downloads=20),
        DailyRecord(day=date(2024, 1, 10), downloads=0),
        DailyRecord(day=date(2024, 1, 21), downloads=5),
    ]
    points = aggregate_weekly(records)
    assert points == (
        WeeklyPoint(week_start=date(2024, 1, 1), downloads=20),
        WeeklyPoint(week_start=date(2024, 1, 15), downloads=5),
    )
    assert all(point.downloads > 0 for point in points)


def test_aggregate_weekly_empty_input_returns_empty() -> None:
    """No records is a valid "no data" result, not an error."""

    assert aggregate_weekly([]) == ()


def test_aggregate_weekly_weeks_strictly_increase() -> None:
    """Emitted weeks are distinct Mondays in ascending order."""

    records = _days(date(2023, 12, 27), 60, 1)
    points = aggregate_weekly(records)
    starts = [p.week_start for p in points]
    assert starts == sorted(set(starts))
    assert all(start.weekday() == 0 for start in starts)
    # Latest day is 2024-02-24 (Saturday), so its week is dropped.
    assert starts[-1] == date(2024, 2, 12)
