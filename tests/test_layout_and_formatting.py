"""Unit tests for layout defaults, count formatting and clip rectangles."""

from __future__ import annotations

import pytest

from chartmodel.clipping import compute_clip_rects
from chartmodel.dto import ClipRange, ClipRect
from chartmodel.formatting import format_downloads, log_tick_label
from chartmodel.layout import build_chart_layout

pytestmark = pytest.mark.unit


def test_build_chart_layout_defaults() -> None:
    """Margins default to 70/30 and the tick gap scales with width."""

    layout = build_chart_layout(1000.4, 500.6)
    assert layout.width_px == 1000
    assert layout.height_px == 501
    assert (layout.margin_left, layout.margin_right, layout.font_size) == (70, 30, 16)
    assert layout.min_tick_gap_px == 12
    assert layout.glyph_width_px == 7.0
    assert layout.chart_area_width == 900


def test_build_chart_layout_clamps_and_floors_gap() -> None:
    """Negative sizes clamp to zero and the gap never drops below 6px."""

    layout = build_chart_layout(-20, -1)
    assert layout.width_px == 0
    assert layout.height_px == 0
    assert layout.min_tick_gap_px == 6
    assert layout.chart_area_width == 0


def test_build_chart_layout_explicit_gap_wins() -> None:
    """An explicit gap overrides the width-derived default."""

    assert build_chart_layout(1000, 500, min_tick_gap_px=3).min_tick_gap_px == 3


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (0, "0"),
        (950, "950"),
        (999.6, "1000"),
        (1000, "1K"),
        (1500, "1.5K"),
        (12_345, "12.3K"),
        (2_000_000, "2M"),
        (1_250_000, "1.3M"),
    ],
)
def test_format_downloads(count: float, expected: str) -> None:
    """Counts are abbreviated with K/M and at most one decimal."""

    assert format_downloads(count) == expected


def test_log_tick_label_converts_back_from_log_space() -> None:
    """Log-space ticks display the original download count."""

    assert log_tick_label(0) == "1"
    assert log_tick_label(3) == "1K"
    assert log_tick_label(6) == "1M"


def test_compute_clip_rects_brackets_real_data() -> None:
    """Rects sit half a spacing outside real data and stay open at the ends."""

    layout = build_chart_layout(1100, 500)
    rects = compute_clip_rects([ClipRange(0, 10), ClipRange(4, 9)], 11, layout)

    assert rects == (
        ClipRect(id="npm-clip-0", x=-10.0, y=-1000.0, width=1020.0, height=2000.0),
        ClipRect(id="npm-clip-1", x=350.0, y=-1000.0, width=600.0, height=2000.0),
    )


def test_compute_clip_rects_skips_degenerate_inputs() -> None:
    """Nothing to clip for single-point timelines or zero-width charts."""

    assert compute_clip_rects([ClipRange(0, 0)], 1, build_chart_layout(800, 500)) == ()
    assert compute_clip_rects([ClipRange(0, 3)], 4, build_chart_layout(50, 500)) == ()
    assert compute_clip_rects([], 4, build_chart_layout(800, 500)) == ()
