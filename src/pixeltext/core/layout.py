"""Layout engine: composes glyph bitmaps into a padded canvas.

Layout rules:
- Glyphs are placed left to right on canvas rows 1..5
- Exactly one blank spacer column separates adjacent glyphs
- One blank row/column of padding surrounds the content on all four sides

So for n characters the canvas is
``2 + sum(glyph widths) + (n - 1)`` columns wide and 7 rows tall.

The engine is stateless between calls and never logs; errors are raised to
the caller before any canvas is allocated.
"""

from pixeltext.config import LayoutConfig, MissingGlyphPolicy, PixelTextSettings
from pixeltext.domain import GLYPH_HEIGHT, Canvas, GlyphPattern
from pixeltext.exceptions import TextTooLongError, UnsupportedCharacterError
from pixeltext.font import GlyphTable, get_glyph_table

PADDING = 1
SPACING = 1
CANVAS_HEIGHT = GLYPH_HEIGHT + 2 * PADDING


class LayoutEngine:
    """Renders text into a Canvas using a GlyphTable.

    The missing-glyph policy is fixed per engine: with STRICT, any character
    outside the table is rejected; with LOSSY it is drawn as the table's
    space pattern.

    Example:
        engine = LayoutEngine()
        canvas = engine.render("Hello")
        print(canvas.to_text())
    """

    def __init__(
        self,
        table: GlyphTable | None = None,
        config: LayoutConfig | None = None,
    ) -> None:
        """Initialize layout engine.

        Args:
            table: Glyph table to render with (default: built-in table for
                config.charset)
            config: Layout configuration (default: LayoutConfig())
        """
        self.config = config or LayoutConfig()
        self.table = table if table is not None else get_glyph_table(self.config.charset)

    def validate(self, text: str) -> None:
        """Check that text can be rendered.

        The length check runs first; then characters are checked left to
        right and the first unsupported one is reported.

        Args:
            text: Text to check

        Raises:
            TextTooLongError: If the UTF-8 length of text exceeds config.max_text_length
            UnsupportedCharacterError: If a character has no glyph (STRICT only)
        """
        self._resolve(text)

    def measure(self, text: str) -> tuple[int, int]:
        """Compute the canvas size render() would produce.

        Args:
            text: Text to measure

        Returns:
            Tuple of (width, height)

        Raises:
            TextTooLongError: If the UTF-8 length of text exceeds config.max_text_length
            UnsupportedCharacterError: If a character has no glyph (STRICT only)
        """
        glyphs = self._resolve(text)
        if not glyphs:
            return self.config.empty_width, CANVAS_HEIGHT
        return _content_width(glyphs) + 2 * PADDING, CANVAS_HEIGHT

    def render(self, text: str) -> Canvas:
        """Render text into a canvas.

        Args:
            text: Text to render, one glyph per code point

        Returns:
            Canvas of CANVAS_HEIGHT rows; empty text yields an all-zero
            canvas config.empty_width columns wide

        Raises:
            TextTooLongError: If the UTF-8 length of text exceeds config.max_text_length
            UnsupportedCharacterError: If a character has no glyph (STRICT only)
        """
        glyphs = self._resolve(text)

        if not glyphs:
            return Canvas.from_bits(
                [[0] * self.config.empty_width for _ in range(CANVAS_HEIGHT)]
            )

        total_width = _content_width(glyphs) + 2 * PADDING
        bits = [[0] * total_width for _ in range(CANVAS_HEIGHT)]

        cursor = PADDING
        for idx, glyph in enumerate(glyphs):
            if not glyph.is_blank():
                for row_idx, row in enumerate(glyph.rows):
                    bits[PADDING + row_idx][cursor:cursor + glyph.width] = row
            cursor += glyph.width
            if idx < len(glyphs) - 1:
                cursor += SPACING

        return Canvas.from_bits(bits)

    def _resolve(self, text: str) -> list[GlyphPattern]:
        """Validate text and map each character to its pattern."""
        # Limit counts UTF-8 bytes, checked before any glyph lookup
        length = len(text.encode("utf-8"))
        if length > self.config.max_text_length:
            raise TextTooLongError(length, self.config.max_text_length)

        lossy = self.config.missing_glyph == MissingGlyphPolicy.LOSSY
        glyphs: list[GlyphPattern] = []
        for ch in text:
            glyph = self.table.lookup(ch)
            if glyph is None:
                if not lossy:
                    raise UnsupportedCharacterError(ch)
                glyph = self.table.space_pattern
            glyphs.append(glyph)
        return glyphs


def _content_width(glyphs: list[GlyphPattern]) -> int:
    """Sum of glyph widths plus one spacer between each adjacent pair."""
    return sum(glyph.width for glyph in glyphs) + SPACING * (len(glyphs) - 1)


def render_text(text: str, settings: PixelTextSettings | None = None) -> Canvas:
    """Render text with the built-in font.

    Args:
        text: Text to render
        settings: Application settings (default: get_default_settings())

    Returns:
        Rendered canvas
    """
    config = settings.layout if settings else None
    return LayoutEngine(config=config).render(text)


def validate_text(text: str, settings: PixelTextSettings | None = None) -> None:
    """Check that text can be rendered with the built-in font.

    Args:
        text: Text to check
        settings: Application settings (default: get_default_settings())

    Raises:
        TextTooLongError: If text is too long
        UnsupportedCharacterError: If text has a character the font lacks
    """
    config = settings.layout if settings else None
    LayoutEngine(config=config).validate(text)
