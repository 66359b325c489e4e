"""Pure chart model pipeline for npm-history.

This package turns weekly download series into a renderer-ready `ChartModel`.
It is deterministic, operates on in-memory inputs only, and must not read
settings, touch the network or keep state between calls.
"""

from .aggregations import aggregate_weekly
from .dto import (
    ChartDataset,
    ChartLayout,
    ChartModel,
    ChartOptions,
    ClipRange,
    DailyRecord,
    SeriesInput,
    TickPolicy,
    WeeklyPoint,
)
from .engine import build_chart_model
from .layout import build_chart_layout

__all__ = [
    "ChartDataset",
    "ChartLayout",
    "ChartModel",
    "ChartOptions",
    "ClipRange",
    "DailyRecord",
    "SeriesInput",
    "TickPolicy",
    "WeeklyPoint",
    "aggregate_weekly",
    "build_chart_layout",
    "build_chart_model",
]
