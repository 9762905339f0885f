"""Configuration settings for pixeltext."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from pixeltext.font.table import Charset


class MissingGlyphPolicy(str, Enum):
    """What the layout engine does with characters the font lacks."""

    STRICT = "strict"
    LOSSY = "lossy"


class LayoutConfig(BaseModel):
    """Configuration for text layout."""

    max_text_length: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Maximum UTF-8 byte length accepted by a single render",
    )
    empty_width: int = Field(
        default=19,
        ge=0,
        description="Canvas width returned for empty input",
    )
    missing_glyph: MissingGlyphPolicy = Field(
        default=MissingGlyphPolicy.STRICT,
        description="Reject text with unsupported characters, or draw them as space",
    )
    charset: Charset = Field(
        default=Charset.EXTENDED,
        description="Built-in character set to render with",
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


class PixelTextSettings(BaseModel):
    """Main application settings."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PixelTextSettings:
    """Get default application settings."""
    return PixelTextSettings()
