"""Compact download-count formatting for axis labels."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .ticks import round_half_up

_ONE_DECIMAL = Decimal("0.1")


def _compact(value: float, suffix: str) -> str:
    if value.is_integer():
        return f"{int(value)}{suffix}"
    text = str(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}{suffix}"


def format_downloads(count: float) -> str:
    """Format a download count as e.g. "1.5M", "12K" or "950".

    Args:
        count: Non-negative count.

    Returns:
        Compact string with at most one decimal.
    """

    if count >= 1_000_000:
        return _compact(count / 1_000_000, "M")
    if count >= 1_000:
        return _compact(count / 1_000, "K")
    return str(round_half_up(count))


def log_tick_label(log_value: float) -> str:
    """Format a log10-space y-axis tick as the download count it represents."""

    return format_downloads(10 ** log_value)
