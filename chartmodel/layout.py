"""Construction of `ChartLayout` values with sensible defaults."""

from __future__ import annotations

from .dto import ChartLayout
from .ticks import DEFAULT_GLYPH_WIDTH_PX, round_half_up

DEFAULT_MARGIN_LEFT = 70
DEFAULT_MARGIN_RIGHT = 30
DEFAULT_FONT_SIZE = 16
MIN_TICK_GAP_PX = 6
TICK_GAP_WIDTH_RATIO = 0.012


def build_chart_layout(
    width_px: float,
    height_px: float,
    *,
    margin_left: int = DEFAULT_MARGIN_LEFT,
    margin_right: int = DEFAULT_MARGIN_RIGHT,
    font_size: int = DEFAULT_FONT_SIZE,
    min_tick_gap_px: int | None = None,
    glyph_width_px: float = DEFAULT_GLYPH_WIDTH_PX,
) -> ChartLayout:
    """Build a ChartLayout from measured or fixed canvas dimensions.

    Args:
        width_px: Canvas width; rounded and clamped at zero.
        height_px: Canvas height; rounded and clamped at zero.
        margin_left: Left margin reserved for the y-axis.
        margin_right: Right margin.
        font_size: Axis font size.
        min_tick_gap_px: Minimum gap between tick labels. Defaults to 1.2% of
            the width, but never less than 6px.
        glyph_width_px: Average glyph width used for label width estimates.

    Returns:
        ChartLayout for the tick policy and clip rectangles.
    """

    width = max(0, round_half_up(width_px))
    height = max(0, round_half_up(height_px))
    if min_tick_gap_px is None:
        min_tick_gap_px = max(MIN_TICK_GAP_PX, round_half_up(width * TICK_GAP_WIDTH_RATIO))
    return ChartLayout(
        width_px=width,
        height_px=height,
        margin_left=margin_left,
        margin_right=margin_right,
        font_size=font_size,
        min_tick_gap_px=min_tick_gap_px,
        glyph_width_px=glyph_width_px,
    )
