"""Utility functions for pixeltext.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics tracking
"""

from pixeltext.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
