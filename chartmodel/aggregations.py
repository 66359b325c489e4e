"""Weekly aggregation of raw daily download records.

Weeks run Monday through Sunday. The week containing the latest observed day
is dropped unless that day is its Sunday, because a partial week would show up
as an artificial drop at the end of the chart.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import date, timedelta

from .dto import DailyRecord, WeeklyPoint

SUNDAY = 6


def week_start_for(day: date) -> date:
    """Return the Monday that starts the ISO week containing `day`.

    Args:
        day: Any calendar day. Sunday maps to the preceding Monday.

    Returns:
        The Monday of the same week.
    """

    return day - timedelta(days=day.weekday())


def aggregate_weekly(records: Iterable[DailyRecord]) -> tuple[WeeklyPoint, ...]:
    """Aggregate daily records into weekly totals.

    Args:
        records: Daily records for one series, in any order.

    Returns:
        Weekly points with positive totals, ordered ascending by week start.
        The latest week is omitted when its last observed day is not a Sunday.
    """

    totals: dict[date, int] = defaultdict(int)
    latest_day: date | None = None
    for record in records:
        totals[week_start_for(record.day)] += record.downloads
        if latest_day is None or record.day > latest_day:
            latest_day = record.day

    if latest_day is None:
        return ()

    incomplete_week = None
    if latest_day.weekday() != SUNDAY:
        incomplete_week = week_start_for(latest_day)

    return tuple(
        WeeklyPoint(week_start=week_start, downloads=downloads)
        for week_start, downloads in sorted(totals.items())
        if downloads > 0 and week_start != incomplete_week
    )
