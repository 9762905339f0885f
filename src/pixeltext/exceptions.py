"""Exception hierarchy for pixeltext."""


class PixelTextError(Exception):
    """Base exception for all pixeltext errors."""

    pass


class RenderError(PixelTextError):
    """Errors raised while turning text into a canvas."""

    pass


class TextTooLongError(RenderError):
    """Input text exceeds the maximum supported length."""

    def __init__(self, length: int, limit: int = 1000) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Text too long: {length} characters (max: {limit})")


class UnsupportedCharacterError(RenderError):
    """Input text contains a character the font has no glyph for."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Character '{character}' not found in font")


class GlyphError(PixelTextError):
    """Errors related to glyph data."""

    pass


class GlyphPatternError(GlyphError):
    """Malformed glyph bitmap literal."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid glyph pattern: {reason}")
