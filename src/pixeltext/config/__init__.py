"""Configuration management for pixeltext.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LayoutConfig: Text layout limits and policies
- LoggingConfig: Logging settings
- PixelTextSettings: Main application settings
"""

from pixeltext.config.settings import (
    LayoutConfig,
    LoggingConfig,
    MissingGlyphPolicy,
    PixelTextSettings,
    get_default_settings,
)

__all__ = [
    "LayoutConfig",
    "LoggingConfig",
    "MissingGlyphPolicy",
    "PixelTextSettings",
    "get_default_settings",
]
