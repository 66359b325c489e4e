"""Renderer payloads built from a `ChartModel`.

The payload targets a categorical multi-series line renderer. Axis tick
placement, clip rectangles and log-scale tick labels are passed as explicit
instructions, so the renderer never has to infer axis roles from drawn output.
"""

from __future__ import annotations

from typing import TypedDict

from chartmodel.clipping import compute_clip_rects
from chartmodel.dto import ChartLayout, ChartModel, ChartOptions
from chartmodel.formatting import log_tick_label


class RenderDataset(TypedDict):
    """One line series."""

    label: str
    data: list[float]


class RenderData(TypedDict):
    """Labels plus datasets, aligned index by index."""

    labels: list[str]
    datasets: list[RenderDataset]


class RenderOptions(TypedDict):
    """Renderer options derived from the model."""

    yTickCount: int
    xTickCount: int
    dataColors: list[str]
    showLegend: bool
    legendPosition: str


class XAxisInstructions(TypedDict):
    """Which x-axis slots show a label, and with which text."""

    tickPositions: list[int]
    tickDisplayTexts: dict[str, str]


class YAxisInstructions(TypedDict):
    """Display text for log-space y-axis ticks, keyed by tick value."""

    logScale: bool
    tickLabels: dict[str, str]


class ClipRectPayload(TypedDict):
    """A clip rectangle for one series line."""

    id: str
    x: float
    y: float
    width: float
    height: float


class RenderPayload(TypedDict):
    """The full payload handed to the renderer."""

    title: str
    xLabel: str
    yLabel: str
    data: RenderData
    options: RenderOptions
    xAxis: XAxisInstructions
    yAxis: YAxisInstructions
    clipRects: list[ClipRectPayload]


DEFAULT_TITLE = "npm history"


def default_axis_labels(options: ChartOptions) -> tuple[str, str]:
    """Return the (x, y) axis titles for a chart mode."""

    x_label = "Timeline" if options.align_timeline else "Date"
    y_label = "Weekly Downloads (log)" if options.log_scale else "Weekly Downloads"
    return x_label, y_label


def render_payload(
    model: ChartModel,
    *,
    options: ChartOptions,
    layout: ChartLayout,
    title: str = DEFAULT_TITLE,
    x_label: str | None = None,
    y_label: str | None = None,
    show_legend: bool = True,
    legend_position: str = "upLeft",
) -> RenderPayload:
    """Build a JSON-ready renderer payload.

    Args:
        model: Chart model from `build_chart_model`.
        options: Options the model was built with.
        layout: Layout the model was built with.
        title: Chart title.
        x_label: Optional override for the x-axis title.
        y_label: Optional override for the y-axis title.
        show_legend: Whether the renderer draws a legend.
        legend_position: Renderer-specific legend position name.

    Returns:
        RenderPayload whose indices match `model.labels` exactly.
    """

    default_x, default_y = default_axis_labels(options)
    policy = model.tick_policy

    y_tick_labels: dict[str, str] = {}
    if options.log_scale:
        for tick in range(model.y_tick_count + 1):
            y_tick_labels[str(tick)] = log_tick_label(tick)

    clip_rects = compute_clip_rects(model.clip_ranges, len(model.labels), layout)

    return {
        "title": title,
        "xLabel": x_label if x_label is not None else default_x,
        "yLabel": y_label if y_label is not None else default_y,
        "data": {
            "labels": list(model.labels),
            "datasets": [{"label": dataset.label, "data": list(dataset.data)} for dataset in model.datasets],
        },
        "options": {
            "yTickCount": model.y_tick_count,
            "xTickCount": policy.tick_count,
            "dataColors": [dataset.color for dataset in model.datasets],
            "showLegend": show_legend,
            "legendPosition": legend_position,
        },
        "xAxis": {
            "tickPositions": sorted(policy.tick_positions),
            "tickDisplayTexts": {str(idx): text for idx, text in sorted(policy.display_text_by_index.items())},
        },
        "yAxis": {
            "logScale": options.log_scale,
            "tickLabels": y_tick_labels,
        },
        "clipRects": [
            {"id": rect.id, "x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}
            for rect in clip_rects
        ],
    }
