"""Contract with the download-count source.

Fetching, retries and caching live outside this project. The source hands
over, per package, a list of daily rows plus a completeness flag; this module
turns that into `SeriesInput` values for the chart model pipeline.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from chartmodel.aggregations import aggregate_weekly
from chartmodel.dto import DailyRecord, SeriesInput

logger = logging.getLogger(__name__)


class SourceDataError(ValueError):
    """Raised when a daily row from the source cannot be parsed."""

    def __init__(self, *, row: object, reason: str) -> None:
        """Initialize the error.

        Args:
            row: The offending row as received.
            reason: Why the row was rejected.
        """

        super().__init__(f"Invalid daily download row {row!r}: {reason}")
        self.row = row


@dataclass(frozen=True, slots=True)
class SourceSeries:
    """Daily records fetched for one package.

    Attributes:
        name: Package name.
        records: Daily records in any order; may be empty.
        complete: True only when every requested date range was fetched.
    """

    name: str
    records: tuple[DailyRecord, ...] = ()
    complete: bool = True


def parse_daily_records(rows: Iterable[Mapping[str, Any]]) -> tuple[DailyRecord, ...]:
    """Parse `{"day": "YYYY-MM-DD", "downloads": n}` rows.

    Args:
        rows: Rows as returned by the counting API.

    Returns:
        DailyRecord values in input order.

    Raises:
        SourceDataError: When a row lacks a field, has a malformed date, or a
            negative or non-integer count.
    """

    records: list[DailyRecord] = []
    for row in rows:
        try:
            raw_day = row["day"]
            downloads = row["downloads"]
        except (KeyError, TypeError) as exc:
            raise SourceDataError(row=row, reason="expected 'day' and 'downloads' fields.") from exc

        try:
            day = date.fromisoformat(str(raw_day))
        except ValueError as exc:
            raise SourceDataError(row=row, reason=f"malformed day {raw_day!r}.") from exc

        if isinstance(downloads, bool) or not isinstance(downloads, int):
            raise SourceDataError(row=row, reason="downloads must be an integer.")
        if downloads < 0:
            raise SourceDataError(row=row, reason="downloads must be non-negative.")
        records.append(DailyRecord(day=day, downloads=downloads))
    return tuple(records)


def prepare_series(
    sources: Iterable[SourceSeries],
    *,
    palette: Sequence[str],
    require_complete: bool = False,
) -> tuple[SeriesInput, ...]:
    """Aggregate fetched sources into chartable weekly series.

    Colors are taken from `palette` by the source's position, so a package
    keeps its color even when an earlier package is dropped.

    Args:
        sources: Fetched packages in display order.
        palette: Color tokens, reused cyclically.
        require_complete: Skip packages whose fetch was incomplete.

    Returns:
        SeriesInput values for packages with at least one complete week.
    """

    if not palette:
        raise ValueError("palette must contain at least one color.")

    prepared: list[SeriesInput] = []
    for idx, source in enumerate(sources):
        if require_complete and not source.complete:
            logger.warning("Skipping %s: download history is incomplete.", source.name)
            continue
        points = aggregate_weekly(source.records)
        if not points:
            logger.info("Skipping %s: no complete weeks of downloads.", source.name)
            continue
        prepared.append(SeriesInput(name=source.name, color=palette[idx % len(palette)], points=points))
    return tuple(prepared)
