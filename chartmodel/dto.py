"""DTO types consumed and produced by the chart model pipeline.

DTOs are plain, immutable data containers. They carry no back-references to
caller input so a `ChartModel` can be handed to a renderer as-is.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from datetime import date
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class DailyRecord:
    """A raw daily download count for one series.

    Attributes:
        day: Calendar day (UTC) the count belongs to.
        downloads: Non-negative download count for that day.
    """

    day: date
    downloads: int


@dataclass(frozen=True, slots=True)
class WeeklyPoint:
    """A weekly download total.

    Attributes:
        week_start: Monday that starts the ISO week.
        downloads: Positive download total for the week.
    """

    week_start: date
    downloads: int


@dataclass(frozen=True, slots=True)
class SeriesInput:
    """A named weekly series supplied by the caller.

    Attributes:
        name: Package name, used as the dataset label.
        color: Opaque color token passed through to the renderer.
        points: Weekly points ordered ascending by `week_start`.
    """

    name: str
    color: str
    points: tuple[WeeklyPoint, ...] = ()


@dataclass(frozen=True, slots=True)
class ChartOptions:
    """Caller-selected chart options.

    Attributes:
        log_scale: Rescale values into base-10 log space.
        align_timeline: Use the relative "weeks since first data" axis instead
            of the shared calendar axis.
    """

    log_scale: bool = False
    align_timeline: bool = False


@dataclass(frozen=True, slots=True)
class ChartLayout:
    """Pixel-space constraints supplied by the rendering context.

    Attributes:
        width_px: Total canvas width.
        height_px: Total canvas height.
        margin_left: Left margin reserved for the y-axis.
        margin_right: Right margin.
        font_size: Axis font size in pixels.
        min_tick_gap_px: Minimum horizontal gap between adjacent tick labels.
        glyph_width_px: Average glyph width used to estimate label widths.
    """

    width_px: int
    height_px: int
    margin_left: int
    margin_right: int
    font_size: int
    min_tick_gap_px: int
    glyph_width_px: float = 7.0

    @property
    def chart_area_width(self) -> int:
        """Return the horizontal space between the margins (never negative)."""

        return max(0, self.width_px - self.margin_left - self.margin_right)


@dataclass(frozen=True, slots=True)
class ClipRange:
    """Inclusive index range where a series has real (non-padded) data."""

    start_index: int
    end_index: int


@dataclass(frozen=True, slots=True)
class ClipRect:
    """A clip rectangle in chart-area pixel space for one series line."""

    id: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class LabelSet:
    """Per-index labels for a timeline.

    Attributes:
        labels: One unique tooltip-grade label per timeline index.
        display_label_by_index: Short on-axis label per timeline index.
    """

    labels: tuple[str, ...] = ()
    display_label_by_index: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class TickPolicy:
    """Which timeline indices carry a visible x-axis tick.

    Attributes:
        tick_count: Number of ticks requested from the renderer.
        tick_positions: Timeline indices that display a label.
        display_text_by_index: Short label for each index in `tick_positions`.
    """

    tick_count: int = 0
    tick_positions: frozenset[int] = frozenset()
    display_text_by_index: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True, slots=True)
class ChartDataset:
    """One renderer-ready series aligned to `ChartModel.labels`."""

    label: str
    color: str
    data: tuple[float, ...] = ()


@dataclass(frozen=True, slots=True)
class ChartModel:
    """The renderer-ready chart model.

    Attributes:
        labels: Unique tooltip-grade labels, one per timeline index.
        datasets: One dataset per series, each `len(labels)` long.
        y_tick_count: Number of y-axis ticks.
        max_log_value: Largest transformed value under log scaling, else 0.
        tick_policy: X-axis tick placement and short display labels.
        clip_ranges: Real-data index range per series, in dataset order.
    """

    labels: tuple[str, ...] = ()
    datasets: tuple[ChartDataset, ...] = ()
    y_tick_count: int = 4
    max_log_value: float = 0.0
    tick_policy: TickPolicy = field(default_factory=TickPolicy)
    clip_ranges: tuple[ClipRange, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Return True when the model has no timeline to draw."""

        return not self.labels
