"""Clip rectangles that hide zero padding outside each series' real data.

Rectangles are expressed in chart-area pixel space (x = 0 at the first
timeline index). Each edge sits half a point-spacing outside the series' first
and last real index, and is left open past the timeline ends.
"""

from __future__ import annotations

from collections.abc import Sequence

from .dto import ChartLayout, ClipRange, ClipRect

EDGE_OVERSHOOT_PX = 10.0
CLIP_Y = -1000.0
CLIP_HEIGHT = 2000.0


def compute_clip_rects(
    clip_ranges: Sequence[ClipRange],
    total_labels: int,
    layout: ChartLayout,
    *,
    id_prefix: str = "npm-clip",
) -> tuple[ClipRect, ...]:
    """Compute one clip rectangle per series.

    Args:
        clip_ranges: Real-data index ranges, in dataset order.
        total_labels: Timeline length.
        layout: Layout the chart is rendered with.
        id_prefix: Prefix for the generated clip-path ids.

    Returns:
        Clip rectangles in dataset order; empty when there is nothing to clip.
    """

    if not clip_ranges or total_labels < 2:
        return ()

    area_width = layout.width_px - layout.margin_left - layout.margin_right
    if area_width <= 0:
        return ()
    spacing = area_width / (total_labels - 1)

    rects: list[ClipRect] = []
    for idx, clip in enumerate(clip_ranges):
        if clip.start_index > 0:
            start_x = clip.start_index * spacing - spacing * 0.5
        else:
            start_x = -EDGE_OVERSHOOT_PX
        if clip.end_index < total_labels - 1:
            end_x = clip.end_index * spacing + spacing * 0.5
        else:
            end_x = area_width + EDGE_OVERSHOOT_PX
        rects.append(
            ClipRect(
                id=f"{id_prefix}-{idx}",
                x=start_x,
                y=CLIP_Y,
                width=end_x - start_x,
                height=CLIP_HEIGHT,
            )
        )
    return tuple(rects)
