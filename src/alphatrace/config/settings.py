"""Configuration settings for alphatrace."""

import math
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Outline file format."""

    SVG = "svg"
    JSON = "json"


class RasterConfig(BaseModel):
    """Configuration for image loading and downscaling."""

    max_dimension: int = Field(
        default=150,
        ge=1,
        le=4096,
        description="Images larger than this on either side are downscaled before tracing",
    )
    max_image_bytes: int = Field(
        default=50 * 1024 * 1024,
        ge=1,
        description="Refuse image files larger than this many bytes",
    )


class TracingConfig(BaseModel):
    """Resource ceilings for edge detection and contour tracing."""

    max_edge_pixels: int = Field(
        default=1000,
        ge=1,
        description="Boundary pixel ceiling checked before tracing starts",
    )
    max_scan_edge_pixels: int = Field(
        default=50000,
        ge=1,
        description="Boundary pixel ceiling enforced while scanning",
    )
    scan_timeout_seconds: float = Field(
        default=5.0,
        gt=0.0,
        description="Wall-clock budget for the edge scan",
    )
    trace_timeout_seconds: float = Field(
        default=3.0,
        gt=0.0,
        description="Wall-clock budget for contour tracing",
    )
    max_contours: int = Field(
        default=50,
        ge=1,
        description="More separate contours than this is treated as too complex",
    )
    max_contour_iterations: int = Field(
        default=10000,
        ge=1,
        description="Maximum walk steps for a single contour",
    )


class SimplifyConfig(BaseModel):
    """Configuration for path simplification."""

    target_points: int = Field(
        default=10,
        ge=3,
        le=1000,
        description="Target number of points in the simplified outline",
    )
    corner_angle_degrees: float = Field(
        default=45.0,
        gt=0.0,
        lt=180.0,
        description="Turning angle above which a point is kept as a corner",
    )

    @property
    def corner_angle(self) -> float:
        """Corner threshold in radians."""
        return math.radians(self.corner_angle_degrees)


class OutlineConfig(BaseModel):
    """Configuration for outline geometry."""

    offset_pixels: float = Field(
        default=0.5,
        ge=0.0,
        le=10.0,
        description="Outward vertex offset in source pixels",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AlphaTraceSettings(BaseModel):
    """Main application settings."""

    raster: RasterConfig = Field(default_factory=RasterConfig)
    tracing: TracingConfig = Field(default_factory=TracingConfig)
    simplify: SimplifyConfig = Field(default_factory=SimplifyConfig)
    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AlphaTraceSettings:
    """Get default application settings."""
    return AlphaTraceSettings()
