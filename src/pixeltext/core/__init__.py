"""Core layout algorithm for pixeltext.

This module contains the layout engine that turns text into a canvas:

- Length and character validation (length first, then left to right)
- Canvas sizing (glyph widths + spacers + padding)
- Compositing glyph bitmaps at computed column offsets

The engine is:
- Stateless between calls (safe to share across threads)
- Pure (no I/O, no logging)

Key classes:
- LayoutEngine: Validates, measures and renders text

Key functions:
- render_text: Render text with the built-in font
- validate_text: Check text against the built-in font
"""

from pixeltext.core.layout import (
    CANVAS_HEIGHT,
    PADDING,
    SPACING,
    LayoutEngine,
    render_text,
    validate_text,
)

__all__ = [
    "CANVAS_HEIGHT",
    "PADDING",
    "SPACING",
    "LayoutEngine",
    "render_text",
    "validate_text",
]
