"""npm-history application layer.

Wires settings and fetched download data into the pure `chartmodel` pipeline
and adapts the resulting model for a renderer.
"""

from __future__ import annotations

from collections.abc import Iterable

from chartmodel import ChartModel, ChartOptions, build_chart_model

from .settings import ChartSettings, load_settings, server_layout
from .sources import SourceSeries, prepare_series

__all__ = ["build_server_chart", "load_settings", "prepare_series"]


def build_server_chart(
    sources: Iterable[SourceSeries],
    options: ChartOptions,
    *,
    settings: ChartSettings | None = None,
) -> ChartModel:
    """Build a chart model for the fixed-size server canvas.

    Args:
        sources: Fetched packages in display order.
        options: Timeline mode and y-axis scaling.
        settings: Chart settings; loaded from file/environment when omitted.

    Returns:
        ChartModel sized for `server_layout(settings)`.
    """

    if settings is None:
        settings = load_settings()
    series = prepare_series(sources, palette=settings.palette)
    return build_chart_model(series, options, server_layout(settings))
