"""X-axis tick policy.

The renderer uses a categorical x-axis with one slot per timeline index, so
every index carries a label. This module decides which of those indices show a
short label on the axis, given the timeline length and the pixel width
available for labels.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from .dto import ChartLayout, TickPolicy

AlignUnit = Literal["weeks", "months", "years"]

DEFAULT_GLYPH_WIDTH_PX = 7.0

# (max timeline length, tick count); lengths above the last bound use 8.
_BASE_TICK_COUNTS: tuple[tuple[int, int], ...] = (
    (13, 4),
    (26, 5),
    (52, 6),
    (156, 6),
    (416, 7),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""

    return math.floor(value + 0.5)


def compute_base_tick_count(total_labels: int) -> int:
    """Return the default tick count for a timeline length.

    Args:
        total_labels: Number of timeline indices.

    Returns:
        One tick per point up to 4 points, then a slowly growing count capped at 8.
    """

    if total_labels <= 4:
        return max(1, total_labels)
    for bound, count in _BASE_TICK_COUNTS:
        if total_labels <= bound:
            return count
    return 8


def tick_interval_for(total_labels: int, tick_count: int) -> float:
    """Return the approximate number of indices between adjacent ticks."""

    return total_labels / max(1, tick_count - 1)


def align_unit_for(total_weeks: int, tick_interval: float) -> AlignUnit:
    """Pick one display unit for all Aligned-mode tick labels.

    Args:
        total_weeks: Timeline length in weeks.
        tick_interval: Approximate weeks between adjacent ticks.

    Returns:
        "weeks" for short spans, "months" for sub-year spacing, otherwise "years".
    """

    if total_weeks <= 12:
        return "weeks"
    if tick_interval < 52:
        return "months"
    return "years"


def estimate_text_width(label: str, glyph_width_px: float = DEFAULT_GLYPH_WIDTH_PX) -> float:
    """Estimate the rendered width of a label from its character count."""

    return len(label) * glyph_width_px


def compute_max_ticks_by_width(
    *,
    width_px: int,
    margin_left: int,
    margin_right: int,
    max_label_width: float,
    min_gap_px: float,
) -> int:
    """Return how many labels fit side by side in the chart area.

    Args:
        width_px: Total canvas width.
        margin_left: Left margin.
        margin_right: Right margin.
        max_label_width: Estimated width of the widest label.
        min_gap_px: Minimum gap between adjacent labels.

    Returns:
        The number of labels that fit; 2 when either width is zero.
    """

    available = max(0, width_px - margin_left - margin_right)
    if available == 0 or max_label_width <= 0:
        return 2
    gap = max(0.0, min_gap_px)
    return math.floor((available + gap) / (max_label_width + gap)) + 1


def tick_positions_for(total_labels: int, tick_count: int) -> frozenset[int]:
    """Spread `tick_count` ticks evenly across the timeline.

    The first and last index are always included when more than one tick is
    placed. Every index is a tick when the timeline is not longer than
    `tick_count`.
    """

    if total_labels <= tick_count:
        return frozenset(range(total_labels))
    if tick_count <= 1:
        return frozenset({0})
    step = (total_labels - 1) / (tick_count - 1)
    return frozenset(round_half_up(i * step) for i in range(tick_count))


def build_tick_policy(
    *,
    total_labels: int,
    display_label_by_index: Mapping[int, str],
    layout: ChartLayout,
) -> TickPolicy:
    """Build the x-axis tick policy for a timeline.

    Args:
        total_labels: Number of timeline indices.
        display_label_by_index: Short label available at every index.
        layout: Pixel-space constraints of the rendering context.

    Returns:
        TickPolicy whose display texts cover exactly the chosen positions.
    """

    if total_labels <= 0:
        return TickPolicy()
    if total_labels == 1:
        return TickPolicy(
            tick_count=1,
            tick_positions=frozenset({0}),
            display_text_by_index=MappingProxyType({0: display_label_by_index.get(0, "")}),
        )

    base_tick_count = compute_base_tick_count(total_labels)
    max_label_width = max(
        (estimate_text_width(label, layout.glyph_width_px) for label in display_label_by_index.values()),
        default=0.0,
    )
    max_ticks_by_width = compute_max_ticks_by_width(
        width_px=layout.width_px,
        margin_left=layout.margin_left,
        margin_right=layout.margin_right,
        max_label_width=max_label_width,
        min_gap_px=layout.min_tick_gap_px,
    )

    tick_count = max(2, min(base_tick_count, max_ticks_by_width, total_labels))
    positions = tick_positions_for(total_labels, tick_count)
    display_texts = {
        position: display_label_by_index[position]
        for position in sorted(positions)
        if display_label_by_index.get(position)
    }
    return TickPolicy(
        tick_count=tick_count,
        tick_positions=positions,
        display_text_by_index=MappingProxyType(display_texts),
    )
