"""Chart settings for npm-history.

Settings are layered: built-in defaults, then an optional YAML file, then
`NPM_HISTORY_*` environment variables. The pure `chartmodel` package never
reads settings; callers turn settings into a `ChartLayout` here and pass it in.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from chartmodel.dto import ChartLayout
from chartmodel.layout import build_chart_layout

ENV_PREFIX = "NPM_HISTORY_"

DEFAULT_PALETTE: tuple[str, ...] = (
    "#e74c3c",
    "#3498db",
    "#f5a623",
    "#2ecc71",
    "#9b59b6",
    "#ff6b9d",
    "#00bcd4",
    "#ff9800",
)


class SettingsError(ValueError):
    """Raised when a settings file or environment variable is invalid."""

    def __init__(self, *, source: str, message: str) -> None:
        """Initialize the error.

        Args:
            source: Where the bad value came from (file path or variable name).
            message: Human-readable description of the problem.
        """

        super().__init__(f"{source}: {message}")
        self.source = source


@dataclass(frozen=True, slots=True)
class ChartSettings:
    """Tunable inputs for chart layouts.

    Attributes:
        glyph_width_px: Average glyph width used to estimate tick label widths.
        margin_left: Left margin reserved for the y-axis.
        margin_right: Right margin.
        font_size: Axis font size.
        server_width_px: Fixed canvas width for server-side renders.
        server_height_px: Fixed canvas height for server-side renders.
        palette: Color tokens assigned to series by position.
    """

    glyph_width_px: float = 7.0
    margin_left: int = 70
    margin_right: int = 30
    font_size: int = 16
    server_width_px: int = 800
    server_height_px: int = 500
    palette: tuple[str, ...] = DEFAULT_PALETTE


def _env_int(environ: Mapping[str, str], name: str, *, default: int) -> int:
    """Parse an integer environment variable.

    Args:
        environ: Environment mapping to read from.
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed integer value.
    """

    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise SettingsError(source=name, message=f"expected an integer, got {raw!r}.") from exc


def _env_float(environ: Mapping[str, str], name: str, *, default: float) -> float:
    """Parse a float environment variable."""

    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise SettingsError(source=name, message=f"expected a number, got {raw!r}.") from exc


def _env_csv(environ: Mapping[str, str], name: str, *, default: tuple[str, ...]) -> tuple[str, ...]:
    """Parse a comma-separated environment variable into a tuple of strings.

    Args:
        environ: Environment mapping to read from.
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        A tuple of non-empty, trimmed values.
    """

    raw = environ.get(name)
    if raw is None:
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _coerce_file_value(name: str, value: Any, *, source: str) -> Any:
    if name == "palette":
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise SettingsError(source=source, message="palette must be a list of strings.")
        return tuple(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(source=source, message=f"{name} must be a number.")
    if name == "glyph_width_px":
        return float(value)
    if not float(value).is_integer():
        raise SettingsError(source=source, message=f"{name} must be an integer.")
    return int(value)


def _load_file(path: Path, settings: ChartSettings) -> ChartSettings:
    """Overlay values from a YAML settings file."""

    payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise SettingsError(source=str(path), message="expected a mapping at the top level.")

    known = {f.name for f in fields(ChartSettings)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise SettingsError(source=str(path), message=f"unknown settings: {', '.join(unknown)}.")

    overrides = {
        name: _coerce_file_value(name, value, source=str(path))
        for name, value in payload.items()
    }
    return replace(settings, **overrides)


def _load_environ(environ: Mapping[str, str], settings: ChartSettings) -> ChartSettings:
    """Overlay values from `NPM_HISTORY_*` environment variables."""

    return ChartSettings(
        glyph_width_px=_env_float(environ, f"{ENV_PREFIX}GLYPH_WIDTH_PX", default=settings.glyph_width_px),
        margin_left=_env_int(environ, f"{ENV_PREFIX}MARGIN_LEFT", default=settings.margin_left),
        margin_right=_env_int(environ, f"{ENV_PREFIX}MARGIN_RIGHT", default=settings.margin_right),
        font_size=_env_int(environ, f"{ENV_PREFIX}FONT_SIZE", default=settings.font_size),
        server_width_px=_env_int(environ, f"{ENV_PREFIX}SERVER_WIDTH_PX", default=settings.server_width_px),
        server_height_px=_env_int(environ, f"{ENV_PREFIX}SERVER_HEIGHT_PX", default=settings.server_height_px),
        palette=_env_csv(environ, f"{ENV_PREFIX}PALETTE", default=settings.palette),
    )


def load_settings(path: str | Path | None = None, *, environ: Mapping[str, str] | None = None) -> ChartSettings:
    """Load chart settings.

    Args:
        path: Optional YAML file. Defaults to `NPM_HISTORY_SETTINGS_FILE` when set.
        environ: Environment mapping; defaults to `os.environ`.

    Returns:
        ChartSettings with file and environment overrides applied.

    Raises:
        SettingsError: When a value has the wrong type, a key is unknown, or
            the palette ends up empty.
    """

    if environ is None:
        environ = os.environ
    if path is None:
        path = environ.get(f"{ENV_PREFIX}SETTINGS_FILE") or None

    settings = ChartSettings()
    if path is not None:
        settings = _load_file(Path(path), settings)
    settings = _load_environ(environ, settings)

    if not settings.palette:
        raise SettingsError(source="palette", message="at least one color is required.")
    if settings.glyph_width_px <= 0:
        raise SettingsError(source="glyph_width_px", message="must be positive.")
    return settings


def viewport_layout(settings: ChartSettings, *, width_px: float, height_px: float) -> ChartLayout:
    """Build a ChartLayout for a measured client viewport."""

    return build_chart_layout(
        width_px,
        height_px,
        margin_left=settings.margin_left,
        margin_right=settings.margin_right,
        font_size=settings.font_size,
        glyph_width_px=settings.glyph_width_px,
    )


def server_layout(settings: ChartSettings) -> ChartLayout:
    """Build the ChartLayout for the fixed server-side canvas."""

    return viewport_layout(settings, width_px=settings.server_width_px, height_px=settings.server_height_px)
