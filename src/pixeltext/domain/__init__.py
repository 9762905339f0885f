"""Domain models for pixeltext.

This module contains the domain models representing glyph bitmaps and the
rendered canvas. All models are:

- Immutable (frozen dataclasses)
- Validated on construction
- Independent of the font data and the layout algorithm

Key classes:
- GlyphPattern: The 5-row, variable-width bitmap of one character
- Canvas: The composited grid of pixels produced by a render
"""

from pixeltext.domain.canvas import PIXEL_OFF, PIXEL_ON, Canvas
from pixeltext.domain.glyph import GLYPH_HEIGHT, GlyphPattern

__all__: list[str] = [
    # Constants
    "GLYPH_HEIGHT",
    "PIXEL_OFF",
    "PIXEL_ON",
    # Core types
    "Canvas",
    "GlyphPattern",
]
