"""Renderer adapters for chart models.

The chart model itself is renderer-agnostic. This package translates it into
the payload shape a categorical line renderer consumes.
"""

from .render import RenderPayload, default_axis_labels, render_payload

__all__ = ["RenderPayload", "default_axis_labels", "render_payload"]
