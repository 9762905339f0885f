"""Built-in bitmap font for pixeltext.

Key classes and functions:
- Charset: Built-in character sets (basic, extended)
- GlyphTable: Immutable character to GlyphPattern mapping
- get_glyph_table: Cached, process-wide table for a charset
"""

from pixeltext.font.table import (
    Charset,
    GlyphTable,
    format_character_ranges,
    get_glyph_table,
)

__all__ = [
    "Charset",
    "GlyphTable",
    "format_character_ranges",
    "get_glyph_table",
]
