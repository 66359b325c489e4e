"""Base-10 log rescaling for chart values.

Zero stays the "no data" sentinel after transformation. It is never a real
log value, so callers must not feed raw counts of 1 expecting them to be
distinguishable from padding.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LogTransformResult:
    """Log-space values and their maximum.

    Attributes:
        values: One transformed tuple per input series.
        max_log: Largest transformed value, or 0 when no value is positive.
    """

    values: tuple[tuple[float, ...], ...]
    max_log: float


def apply_log_transform(series_values: Sequence[Sequence[float]]) -> LogTransformResult:
    """Rescale every value into log10 space.

    Args:
        series_values: Raw values per series.

    Returns:
        LogTransformResult with non-positive values mapped to 0.
    """

    max_log = 0.0
    transformed: list[tuple[float, ...]] = []
    for values in series_values:
        row: list[float] = []
        for value in values:
            if value <= 0:
                row.append(0)
                continue
            log_value = math.log10(value)
            max_log = max(max_log, log_value)
            row.append(log_value)
        transformed.append(tuple(row))
    return LogTransformResult(values=tuple(transformed), max_log=max_log)


def log_y_tick_count(max_log: float) -> int:
    """Return the y-axis tick count for a log-space range of `[0, max_log]`."""

    return max(2, math.ceil(max_log))
