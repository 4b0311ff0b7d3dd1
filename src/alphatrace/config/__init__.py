"""Configuration management for alphatrace.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RasterConfig: Image loading and downscaling settings
- TracingConfig: Complexity and time ceilings
- SimplifyConfig: Outline simplification settings
- OutlineConfig: Outline geometry settings
- LoggingConfig: Logging settings
- AlphaTraceSettings: Main application settings
"""

from alphatrace.config.settings import (
    AlphaTraceSettings,
    LoggingConfig,
    OutlineConfig,
    OutputFormat,
    RasterConfig,
    SimplifyConfig,
    TracingConfig,
    get_default_settings,
)

__all__ = [
    "AlphaTraceSettings",
    "LoggingConfig",
    "OutlineConfig",
    "OutputFormat",
    "RasterConfig",
    "SimplifyConfig",
    "TracingConfig",
    "get_default_settings",
]
