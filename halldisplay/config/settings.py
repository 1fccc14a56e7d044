"""Settings management using Pydantic for type validation and configuration."""

import logging
from pathlib import Path
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..epaper.capabilities import DisplayCapabilities
from ..epaper.region import Region

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "halldisplay" / "config.yaml"


class LayoutConfig(BaseModel):
    """Positions and sizes of everything drawn on the canvas."""

    # Canvas
    canvas_width: int = Field(default=800, gt=0, description="Canvas width in pixels")
    canvas_height: int = Field(default=480, gt=0, description="Canvas height in pixels")

    # Forecast graph
    graph_x: int = Field(default=50, description="Graph left edge")
    graph_y: int = Field(default=150, description="Graph top edge")
    graph_width: int = Field(default=700, gt=0, description="Graph width in pixels")
    graph_height: int = Field(default=200, gt=0, description="Graph height in pixels")
    graph_scale_gap: int = Field(
        default=10, description="Gap between the graph and its min/max temperature labels"
    )
    graph_scale_size: int = Field(default=24, description="Min/max temperature label size")
    day_label_size: int = Field(default=36, description="Day label size inside the graph")

    # Header
    current_temp_x: int = Field(default=10, description="Current temperature left edge")
    current_temp_y: int = Field(default=0, description="Current temperature top edge")
    current_temp_size: int = Field(default=150, description="Current temperature font size")
    description_gap: int = Field(
        default=10, description="Gap between the current temperature and the description"
    )
    description_size: int = Field(default=50, description="Weather description font size")
    today_temps_gap: int = Field(
        default=20, description="Gap between the current temperature and today's high/low"
    )
    today_temps_y: int = Field(default=10, description="Today's high/low top edge")
    header_size: int = Field(default=36, description="Today's high/low and clock font size")
    time_right_x: int = Field(default=790, description="Right edge of the clock text")
    time_y: int = Field(default=10, description="Clock text top edge")

    # Task list
    task_top_gap: int = Field(default=20, description="Gap between graph bottom and first task")
    task_row_height: int = Field(default=30, gt=0, description="Task row pitch")
    task_date_x: int = Field(default=50, description="Due date column left edge")
    task_description_x: int = Field(default=200, description="Description column left edge")
    task_size: int = Field(default=24, description="Task font size")

    @model_validator(mode="after")
    def _graph_inside_canvas(self) -> "LayoutConfig":
        if not self.graph_region.fits_within(self.canvas_width, self.canvas_height):
            raise ValueError(
                f"{self.graph_region!r} does not fit a "
                f"{self.canvas_width}x{self.canvas_height} canvas"
            )
        return self

    @property
    def graph_region(self) -> Region:
        """Area of the canvas covered by the forecast graph."""
        return Region(self.graph_x, self.graph_y, self.graph_width, self.graph_height)

    @property
    def task_start_y(self) -> int:
        """Top edge of the first task row."""
        return self.graph_region.bottom + self.task_top_gap


class PanelSettings(BaseModel):
    """Physical e-Paper panel the frame buffer is packed for."""

    width: int = Field(default=800, gt=0, description="Panel width in pixels")
    height: int = Field(default=480, gt=0, description="Panel height in pixels")
    supports_red: bool = Field(default=True, description="Whether the panel shows red")

    def to_capabilities(self) -> DisplayCapabilities:
        """Convert to the DisplayCapabilities used by the packer."""
        return DisplayCapabilities.from_dict(
            {"width": self.width, "height": self.height, "supports_red": self.supports_red}
        )


class HallDisplaySettings(BaseSettings):
    """Application settings with environment variable support."""

    local_timezone: str = Field(
        default="America/New_York", description="IANA timezone used for dates and the clock"
    )
    font_path: Optional[str] = Field(
        default=None, description="TrueType font file; Pillow's bundled face when unset"
    )
    log_level: str = Field(default="INFO", description="Log level: DEBUG, INFO, WARNING, ERROR")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")
    output_path: str = Field(
        default="halldisplay.bin", description="Frame buffer output path (PNG written alongside)"
    )
    config_file: Optional[Path] = Field(
        default=None, description="YAML file overriding these settings"
    )

    layout: LayoutConfig = Field(default_factory=LayoutConfig, description="Canvas layout")
    panel: PanelSettings = Field(default_factory=PanelSettings, description="Target panel")

    model_config = SettingsConfigDict(
        env_prefix="HALLDISPLAY_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("local_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone {value!r}") from e
        return value

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._load_yaml_config(set(kwargs))

    def _find_config_file(self) -> Optional[Path]:
        """Explicit config file if given, else the per-user default when present."""
        if self.config_file is not None:
            return self.config_file
        if DEFAULT_CONFIG_FILE.exists():
            return DEFAULT_CONFIG_FILE
        return None

    def _load_yaml_config(self, explicit: set[str]) -> None:
        """Apply values from the YAML file; explicit keyword arguments win."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open() as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load YAML config from {config_file}: {e}")
            return

        if not config_data:
            return
        if not isinstance(config_data, dict):
            logger.warning(f"Ignoring {config_file}: top level is not a mapping")
            return

        for key in ("local_timezone", "font_path", "log_level", "log_file", "output_path"):
            if key in config_data and key not in explicit:
                setattr(self, key, config_data[key])

        if "layout" in config_data and "layout" not in explicit:
            merged = {**self.layout.model_dump(), **(config_data["layout"] or {})}
            self.layout = LayoutConfig(**merged)
        if "panel" in config_data and "panel" not in explicit:
            merged = {**self.panel.model_dump(), **(config_data["panel"] or {})}
            self.panel = PanelSettings(**merged)

        logger.info("Loaded configuration from %s", config_file)


_settings_instance: Optional[HallDisplaySettings] = None


def get_settings() -> HallDisplaySettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = HallDisplaySettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
