"""Timeline labels for tooltips and axis ticks.

Every timeline index gets a tooltip-grade label that must be unique: the
renderer's categorical axis collapses equal labels onto one slot. A shorter
display label is also produced per index; the tick policy picks which of those
actually appear on the axis.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from types import MappingProxyType
from typing import Literal

from .dto import LabelSet
from .ticks import AlignUnit, align_unit_for, compute_base_tick_count, round_half_up, tick_interval_for

DateFormat = Literal["month_day", "month", "month_year", "year"]

WEEKS_PER_MONTH = 4.33
WEEKS_PER_YEAR = 52

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def compute_label_format(total_weeks: int, base_tick_count: int) -> DateFormat:
    """Pick the short date format for Unified-mode axis labels.

    Args:
        total_weeks: Timeline length in weeks.
        base_tick_count: Default tick count for that length.

    Returns:
        The coarsest format that still tells adjacent ticks apart.
    """

    tick_interval = tick_interval_for(total_weeks, base_tick_count)
    if tick_interval <= 8:
        return "month_day"
    if total_weeks <= 40:
        return "month"
    if tick_interval <= 52:
        return "month_year"
    return "year"


def format_tooltip_date(day: date) -> str:
    """Format a date as e.g. "May 04, 2017"."""

    return f"{_MONTH_ABBREVIATIONS[day.month - 1]} {day.day:02d}, {day.year}"


def format_short_date(day: date, fmt: DateFormat) -> str:
    """Format a date for the x-axis ("May 4", "May", "May '17" or "2017")."""

    month = _MONTH_ABBREVIATIONS[day.month - 1]
    if fmt == "month_day":
        return f"{month} {day.day}"
    if fmt == "month":
        return month
    if fmt == "month_year":
        return f"{month} '{day.year % 100:02d}"
    return str(day.year)


def format_months(week_index: int) -> str:
    """Format a week offset as a month count, e.g. "2.3 months".

    One decimal is enough for uniqueness: consecutive weeks differ by
    1 / 4.33 ≈ 0.231 months, more than the 0.1 rounding bucket.
    """

    months = f"{week_index / WEEKS_PER_MONTH:.1f}"
    if months.endswith(".0"):
        months = months[:-2]
    return f"{months} months"


def format_align_label(week_index: int, unit: AlignUnit) -> str:
    """Format a week offset for the Aligned-mode axis ("0", "6w", "3 mo", "2 yr").

    Args:
        week_index: Weeks since each series' first data point.
        unit: Display unit shared by all ticks of the chart.

    Returns:
        Short axis label.
    """

    if week_index == 0:
        return "0"
    if unit == "weeks":
        return f"{week_index}w"
    if unit == "months":
        return f"{round_half_up(week_index / WEEKS_PER_MONTH)} mo"
    years = round_half_up(week_index / WEEKS_PER_YEAR)
    if years == 0:
        return "< 1 yr"
    return f"{years} yr"


def build_timeline_labels(timeline: Sequence[date]) -> LabelSet:
    """Build labels for a Unified-mode calendar timeline.

    Args:
        timeline: Distinct Mondays, ascending.

    Returns:
        LabelSet with "May 04, 2017" tooltips and span-dependent short labels.
    """

    if not timeline:
        return LabelSet()

    display_format = compute_label_format(len(timeline), compute_base_tick_count(len(timeline)))
    return LabelSet(
        labels=tuple(format_tooltip_date(day) for day in timeline),
        display_label_by_index=MappingProxyType(
            {idx: format_short_date(day, display_format) for idx, day in enumerate(timeline)}
        ),
    )


def build_aligned_labels(total_weeks: int) -> LabelSet:
    """Build labels for an Aligned-mode relative timeline.

    Args:
        total_weeks: Timeline length in weeks.

    Returns:
        LabelSet with "N months" tooltips and unit-consistent short labels.
    """

    if total_weeks <= 0:
        return LabelSet()

    tick_interval = tick_interval_for(total_weeks, compute_base_tick_count(total_weeks))
    unit = align_unit_for(total_weeks, tick_interval)
    return LabelSet(
        labels=tuple(format_months(idx) for idx in range(total_weeks)),
        display_label_by_index=MappingProxyType(
            {idx: format_align_label(idx, unit) for idx in range(total_weeks)}
        ),
    )
