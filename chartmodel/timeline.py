"""Multi-series timeline reconciliation.

Two independent builders align every series onto one index space:

- Unified: a shared calendar of Mondays spanning all series. Useful for
  "what is trending right now".
- Aligned: week 0 is each series' own first data point. Useful for "which
  package grew faster from its own start".

Both return plain value arrays plus a `ClipRange` per series so that renderers
can hide the zero padding outside each series' real data.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from .aggregations import week_start_for
from .dto import ClipRange, SeriesInput


@dataclass(frozen=True, slots=True)
class UnifiedTimeline:
    """Series values aligned to a shared calendar of Mondays.

    Attributes:
        timeline: Every Monday between the earliest and latest week, inclusive.
        series_values: One value tuple per input series, `len(timeline)` long.
        clip_ranges: Real-data index range per input series.
    """

    timeline: tuple[date, ...] = ()
    series_values: tuple[tuple[int, ...], ...] = ()
    clip_ranges: tuple[ClipRange, ...] = ()


@dataclass(frozen=True, slots=True)
class AlignedTimeline:
    """Series values aligned to "weeks since first data point".

    Attributes:
        total_weeks: Length of the longest series.
        series_values: One value tuple per input series, zero-padded to `total_weeks`.
        clip_ranges: Real-data index range per input series.
    """

    total_weeks: int = 0
    series_values: tuple[tuple[int, ...], ...] = ()
    clip_ranges: tuple[ClipRange, ...] = ()


def monday_sequence(start: date, end: date) -> tuple[date, ...]:
    """Return every Monday from `start` to `end`, inclusive.

    Args:
        start: First Monday of the sequence.
        end: Last date to include.

    Returns:
        Dates spaced seven days apart; empty when `start > end`.
    """

    mondays: list[date] = []
    current = start
    while current <= end:
        mondays.append(current)
        current += timedelta(days=7)
    return tuple(mondays)


def build_unified_timeline(series: Sequence[SeriesInput]) -> UnifiedTimeline:
    """Align series onto a shared calendar.

    Each timeline week resolves, in order, to: 0 before the series' first
    point, 0 after its last point, the exact weekly value when present, or the
    last known value for a gap inside the series' active range.

    Args:
        series: Caller-supplied series.

    Returns:
        UnifiedTimeline; empty when no series has any points.
    """

    by_series: list[dict[date, int]] = []
    for entry in series:
        weeks: dict[date, int] = {}
        for point in entry.points:
            weeks[week_start_for(point.week_start)] = point.downloads
        by_series.append(weeks)

    active = [weeks for weeks in by_series if weeks]
    if not active:
        return UnifiedTimeline()

    first_week = min(min(weeks) for weeks in active)
    last_week = max(max(weeks) for weeks in active)
    timeline = monday_sequence(first_week, last_week)
    index_of = {week: idx for idx, week in enumerate(timeline)}

    series_values: list[tuple[int, ...]] = []
    clip_ranges: list[ClipRange] = []
    for weeks in by_series:
        if not weeks:
            series_values.append((0,) * len(timeline))
            clip_ranges.append(ClipRange(start_index=0, end_index=len(timeline) - 1))
            continue

        series_first = min(weeks)
        series_last = max(weeks)
        values: list[int] = []
        last_known = 0
        for week in timeline:
            if week < series_first or week > series_last:
                values.append(0)
            elif week in weeks:
                last_known = weeks[week]
                values.append(last_known)
            else:
                values.append(last_known)

        series_values.append(tuple(values))
        clip_ranges.append(ClipRange(start_index=index_of[series_first], end_index=index_of[series_last]))

    return UnifiedTimeline(
        timeline=timeline,
        series_values=tuple(series_values),
        clip_ranges=tuple(clip_ranges),
    )


def build_aligned_timeline(series: Sequence[SeriesInput]) -> AlignedTimeline:
    """Align series so index 0 is each series' own first data point.

    Args:
        series: Caller-supplied series.

    Returns:
        AlignedTimeline; shorter series are padded with trailing zeros.
    """

    raw = [tuple(point.downloads for point in entry.points) for entry in series]
    total_weeks = max((len(values) for values in raw), default=0)
    if total_weeks == 0:
        return AlignedTimeline()

    series_values: list[tuple[int, ...]] = []
    clip_ranges: list[ClipRange] = []
    for values in raw:
        # Series without points span the whole (all-zero) axis.
        end_index = len(values) - 1 if values else total_weeks - 1
        clip_ranges.append(ClipRange(start_index=0, end_index=end_index))
        series_values.append(values + (0,) * (total_weeks - len(values)))

    return AlignedTimeline(
        total_weeks=total_weeks,
        series_values=tuple(series_values),
        clip_ranges=tuple(clip_ranges),
    )
