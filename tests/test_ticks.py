"""Unit tests for the x-axis tick policy."""

from __future__ import annotations

import pytest

from chartmodel.layout import build_chart_layout
from chartmodel.ticks import (
    align_unit_for,
    build_tick_policy,
    compute_base_tick_count,
    compute_max_ticks_by_width,
    estimate_text_width,
    round_half_up,
    tick_positions_for,
)

pytestmark = pytest.mark.unit


def _labels(total: int, text: str = "Jan '24") -> dict[int, str]:
    return {idx: text for idx in range(total)}


@pytest.mark.parametrize(
    ("total", "expected"),
    [(0, 1), (3, 3), (4, 4), (5, 4), (13, 4), (14, 5), (26, 5), (27, 6), (52, 6), (156, 6), (157, 7), (416, 7), (417, 8)],
)
def test_compute_base_tick_count(total: int, expected: int) -> None:
    """Base tick counts grow slowly with the timeline length."""

    assert compute_base_tick_count(total) == expected


def test_round_half_up_rounds_halves_upward() -> None:
    """Halves round toward +infinity, unlike Python's banker's rounding."""

    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.49) == 2


def test_tick_positions_for_spreads_evenly_and_keeps_ends() -> None:
    """The first and last index are always ticks."""

    assert tick_positions_for(10, 4) == frozenset({0, 3, 6, 9})
    assert tick_positions_for(6, 3) == frozenset({0, 3, 5})
    assert tick_positions_for(3, 5) == frozenset({0, 1, 2})


def test_compute_max_ticks_by_width() -> None:
    """Width cap counts labels plus gaps that fit between the margins."""

    assert compute_max_ticks_by_width(width_px=800, margin_left=70, margin_right=30, max_label_width=42, min_gap_px=10) == 14
    assert compute_max_ticks_by_width(width_px=800, margin_left=70, margin_right=30, max_label_width=0, min_gap_px=10) == 2
    assert compute_max_ticks_by_width(width_px=90, margin_left=70, margin_right=30, max_label_width=42, min_gap_px=10) == 2


def test_estimate_text_width_uses_glyph_width() -> None:
    """Label width scales with character count and the configured glyph width."""

    assert estimate_text_width("Jan '24") == 49
    assert estimate_text_width("Jan '24", glyph_width_px=10) == 70


def test_align_unit_for() -> None:
    """Aligned units: weeks for short spans, months below a yearly interval, else years."""

    assert align_unit_for(12, 4.0) == "weeks"
    assert align_unit_for(100, 20.0) == "months"
    assert align_unit_for(500, 71.4) == "years"


def test_build_tick_policy_single_point_is_one_tick() -> None:
    """A one-week timeline has exactly one tick regardless of layout width."""

    for layout in (build_chart_layout(0, 0), build_chart_layout(1600, 900)):
        policy = build_tick_policy(total_labels=1, display_label_by_index={0: "Jan 1"}, layout=layout)
        assert policy.tick_count == 1
        assert policy.tick_positions == frozenset({0})
        assert dict(policy.display_text_by_index) == {0: "Jan 1"}


def test_build_tick_policy_empty_timeline() -> None:
    """Zero labels produce an empty policy."""

    policy = build_tick_policy(total_labels=0, display_label_by_index={}, layout=build_chart_layout(800, 500))
    assert policy.tick_count == 0
    assert policy.tick_positions == frozenset()


def test_build_tick_policy_wide_layout_uses_base_count(wide_layout) -> None:
    """With room to spare, the base tick count wins."""

    policy = build_tick_policy(total_labels=100, display_label_by_index=_labels(100), layout=wide_layout)

    assert policy.tick_count == 6
    assert policy.tick_positions == frozenset({0, 20, 40, 59, 79, 99})
    assert set(policy.display_text_by_index) == set(policy.tick_positions)


def test_build_tick_policy_narrow_layout_caps_by_width() -> None:
    """A narrow canvas falls back to the two end ticks."""

    layout = build_chart_layout(200, 300)
    policy = build_tick_policy(total_labels=100, display_label_by_index=_labels(100), layout=layout)

    assert policy.tick_count == 2
    assert policy.tick_positions == frozenset({0, 99})


def test_build_tick_policy_zero_width_layout_keeps_two_ticks() -> None:
    """No drawable width still yields a safe minimum of two ticks."""

    policy = build_tick_policy(total_labels=50, display_label_by_index=_labels(50), layout=build_chart_layout(0, 0))
    assert policy.tick_count == 2
    assert policy.tick_positions == frozenset({0, 49})


def test_build_tick_policy_short_timeline_ticks_every_index(wide_layout) -> None:
    """Timelines shorter than the tick budget label every point."""

    policy = build_tick_policy(total_labels=3, display_label_by_index=_labels(3), layout=wide_layout)
    assert policy.tick_count == 3
    assert policy.tick_positions == frozenset({0, 1, 2})


def test_build_tick_policy_larger_glyphs_reduce_ticks() -> None:
    """A wider glyph estimate leaves room for fewer labels."""

    small = build_chart_layout(400, 300, glyph_width_px=7)
    large = build_chart_layout(400, 300, glyph_width_px=20)
    labels = _labels(100)

    small_policy = build_tick_policy(total_labels=100, display_label_by_index=labels, layout=small)
    large_policy = build_tick_policy(total_labels=100, display_label_by_index=labels, layout=large)

    assert small_policy.tick_count == 6
    assert large_policy.tick_count == 3
