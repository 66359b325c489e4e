"""Orchestration entry point for the chart model pipeline.

`build_chart_model` is a pure function: it reads caller-supplied series,
options and layout and returns a fresh, immutable `ChartModel`. It performs no
I/O and keeps no state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .dto import ChartDataset, ChartLayout, ChartModel, ChartOptions, ClipRange, LabelSet, SeriesInput
from .labels import build_aligned_labels, build_timeline_labels
from .log_scale import apply_log_transform, log_y_tick_count
from .ticks import build_tick_policy
from .timeline import build_aligned_timeline, build_unified_timeline

logger = logging.getLogger(__name__)

DEFAULT_Y_TICK_COUNT = 4


def build_chart_model(
    series: Sequence[SeriesInput],
    options: ChartOptions,
    layout: ChartLayout,
) -> ChartModel:
    """Build the renderer-ready chart model for a set of series.

    Args:
        series: Weekly series, one dataset each, in display order.
        options: Timeline mode and y-axis scaling.
        layout: Pixel constraints used for tick budgeting.

    Returns:
        ChartModel whose datasets are aligned one-to-one with `labels`. An
        empty model is returned when there are no series or no data.
    """

    if not series:
        return ChartModel()

    series_values: Sequence[Sequence[float]]
    clip_ranges: tuple[ClipRange, ...]
    label_set: LabelSet
    if options.align_timeline:
        aligned = build_aligned_timeline(series)
        series_values = aligned.series_values
        clip_ranges = aligned.clip_ranges
        label_set = build_aligned_labels(aligned.total_weeks)
    else:
        unified = build_unified_timeline(series)
        series_values = unified.series_values
        clip_ranges = unified.clip_ranges
        label_set = build_timeline_labels(unified.timeline)

    if not label_set.labels:
        logger.debug("No weekly data across %d series; returning an empty chart model.", len(series))
        return ChartModel()

    y_tick_count = DEFAULT_Y_TICK_COUNT
    max_log_value = 0.0
    if options.log_scale:
        transformed = apply_log_transform(series_values)
        series_values = transformed.values
        max_log_value = transformed.max_log
        y_tick_count = log_y_tick_count(max_log_value)

    datasets = tuple(
        ChartDataset(label=entry.name, color=entry.color, data=tuple(values))
        for entry, values in zip(series, series_values)
    )
    tick_policy = build_tick_policy(
        total_labels=len(label_set.labels),
        display_label_by_index=label_set.display_label_by_index,
        layout=layout,
    )
    return ChartModel(
        labels=label_set.labels,
        datasets=datasets,
        y_tick_count=y_tick_count,
        max_log_value=max_log_value,
        tick_policy=tick_policy,
        clip_ranges=clip_ranges,
    )
