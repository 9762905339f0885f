"""Glyph bitmap representation.

This module defines the glyph domain model, which represents the bitmap of a
single character: exactly five rows of pixels, with a width that varies from
glyph to glyph.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from pixeltext.exceptions import GlyphPatternError

GLYPH_HEIGHT = 5


@dataclass(frozen=True, slots=True)
class GlyphPattern:
    """Bitmap for a single character.

    Immutable once constructed. Every instance satisfies:
    - exactly GLYPH_HEIGHT rows
    - all rows share the same length (the glyph width), at least 1
    - every pixel is 0 or 1

    Attributes:
        rows: Pixel rows, top to bottom, each a tuple of 0/1 ints
    """

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if not self.rows:
            raise GlyphPatternError("glyph has no rows")
        if len(self.rows) != GLYPH_HEIGHT:
            raise GlyphPatternError(
                f"glyph must have exactly {GLYPH_HEIGHT} rows, got {len(self.rows)}"
            )

        width = len(self.rows[0])
        if width == 0:
            raise GlyphPatternError("glyph width must be at least 1")

        for idx, row in enumerate(self.rows):
            if len(row) != width:
                raise GlyphPatternError(
                    f"row {idx} has width {len(row)}, expected {width}"
                )
            if any(bit not in (0, 1) for bit in row):
                raise GlyphPatternError(f"row {idx} contains a value other than 0 or 1")

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "GlyphPattern":
        """Build a pattern from any nested sequence of bits.

        Args:
            rows: Rows of 0/1 values, top to bottom

        Returns:
            GlyphPattern instance

        Raises:
            GlyphPatternError: If the rows do not form a valid glyph
        """
        return cls(rows=tuple(tuple(row) for row in rows))

    @classmethod
    def from_strings(cls, rows: Sequence[str], on: str = "#") -> "GlyphPattern":
        """Build a pattern from literal strings.

        Args:
            rows: One string per row; ``on`` marks a set pixel, any other
                character a clear one
            on: Character marking a set pixel

        Returns:
            GlyphPattern instance
        """
        return cls(rows=tuple(tuple(1 if ch == on else 0 for ch in row) for row in rows))

    @property
    def width(self) -> int:
        """Number of pixel columns."""
        return len(self.rows[0])

    @property
    def height(self) -> int:
        """Number of pixel rows (always GLYPH_HEIGHT)."""
        return len(self.rows)

    def is_blank(self) -> bool:
        """Check if no pixel is set.

        Blank glyphs (such as space) only take up horizontal room on the canvas.

        Returns:
            True if every pixel is 0
        """
        return not any(any(row) for row in self.rows)

    def to_strings(self) -> list[str]:
        """Rows as '0'/'1' strings."""
        return ["".join(str(bit) for bit in row) for row in self.rows]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with width and rows fields
        """
        return {
            "width": self.width,
            "rows": self.to_strings()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphPattern":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by to_dict

        Returns:
            GlyphPattern instance
        """
        return cls.from_strings(data["rows"], on="1")
