"""Configuration for the race trends chart."""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from loguru import logger

ENV_PREFIX = "ITRA_RACE_TRENDS_"

DEFAULT_DATA_PATH = Path("dataset") / "week_44_data.csv"

REQUIRED_COLUMNS = ["event_race", "event", "race", "year", "time_in_seconds"]


@dataclass(frozen=True)
class Margins:
    """Space around the plotting area, in pixels."""

    top: int = 10
    right: int = 120
    bottom: int = 30
    left: int = 120


@dataclass(frozen=True)
class ChartDimensions:
    """Outer chart size plus margins.

    The bounded area is what the scales map onto; marks are positioned
    relative to its top-left corner.
    """

    width: int = 1200
    height: int = 400
    margin: Margins = field(default_factory=Margins)
    axis_padding: int = 10

    @property
    def bounded_width(self) -> int:
        return self.width - self.margin.left - self.margin.right

    @property
    def bounded_height(self) -> int:
        return self.height - self.margin.top - self.margin.bottom


@dataclass(frozen=True)
class ChartTheme:
    line_color: str = "#2a9d8f"
    line_width: int = 2
    marker_color: str = "#264653"
    marker_radius: int = 5
    highlight_radius: int = 7
    highlight_width: int = 1
    transition_ms: int = 800
    x_ticks: int = 10
    y_ticks: int = 6
    caption_source: str = "ITRA"
    caption_author: str = "Kaustav Sen"


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the CLI and the dashboard."""

    data_path: Optional[Path] = None
    host: str = "127.0.0.1"
    port: int = 8050
    dimensions: ChartDimensions = field(default_factory=ChartDimensions)
    theme: ChartTheme = field(default_factory=ChartTheme)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "AppSettings":
        """Build settings from ``ITRA_RACE_TRENDS_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            AppSettings with any overrides applied
        """
        env = os.environ if environ is None else environ
        settings = cls()

        data_path = env.get(f"{ENV_PREFIX}DATA")
        if data_path:
            settings = replace(settings, data_path=Path(data_path))

        host = env.get(f"{ENV_PREFIX}HOST")
        if host:
            settings = replace(settings, host=host)

        port = env.get(f"{ENV_PREFIX}PORT")
        if port:
            try:
                settings = replace(settings, port=int(port))
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port!r}")

        logger.debug(f"Settings: data={settings.data_path} host={settings.host} port={settings.port}")
        return settings
