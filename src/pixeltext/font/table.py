"""Glyph table: the character to bitmap mapping of the built-in font.

The table is built from the literals in ``pixeltext.font.data``. Building it
validates every literal, so a malformed glyph fails at construction rather
than in the middle of a render.
"""

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from functools import lru_cache
from types import MappingProxyType

from pixeltext.domain.glyph import GlyphPattern
from pixeltext.font.data import DIGIT_ROWS, LETTER_ROWS, SPACE_ROWS, SYMBOL_ROWS, GlyphRows


class Charset(str, Enum):
    """Built-in character sets."""

    BASIC = "basic"  # A-Z, a-z, space
    EXTENDED = "extended"  # basic + 0-9 + symbols


class GlyphTable:
    """Immutable mapping from a single character to its GlyphPattern.

    Space is an ordinary entry of the table. The dedicated space pattern is
    also exposed separately so callers can substitute it for missing glyphs.
    """

    def __init__(
        self,
        glyphs: Mapping[str, GlyphPattern],
        space_pattern: GlyphPattern,
    ) -> None:
        for ch in glyphs:
            if len(ch) != 1:
                raise ValueError(f"Glyph table keys must be single characters, got {ch!r}")
        self._glyphs: Mapping[str, GlyphPattern] = MappingProxyType(dict(glyphs))
        self._space_pattern = space_pattern

    @classmethod
    def from_literals(
        cls,
        literals: Mapping[str, GlyphRows],
        space_rows: GlyphRows = SPACE_ROWS,
    ) -> "GlyphTable":
        """Build a table from '#'/'.' row literals.

        Args:
            literals: Mapping of character to its five row strings
            space_rows: Row strings of the space glyph, added under ' '

        Returns:
            GlyphTable instance

        Raises:
            GlyphPatternError: If any literal is malformed
        """
        space = GlyphPattern.from_strings(space_rows)
        glyphs = {ch: GlyphPattern.from_strings(rows) for ch, rows in literals.items()}
        glyphs[" "] = space
        return cls(glyphs, space_pattern=space)

    @property
    def space_pattern(self) -> GlyphPattern:
        """Pattern used for space (and for missing glyphs in lossy mode)."""
        return self._space_pattern

    def lookup(self, ch: str) -> GlyphPattern | None:
        """Get the pattern for a character.

        Args:
            ch: Single character

        Returns:
            The character's pattern, or None when the font has no glyph for it
        """
        return self._glyphs.get(ch)

    def contains(self, ch: str) -> bool:
        """Check if the font has a glyph for a character."""
        return ch in self._glyphs

    def all_supported_characters(self) -> set[str]:
        """Get every character the table can render."""
        return set(self._glyphs)

    def sorted_characters(self) -> list[str]:
        """Get supported characters in code point order."""
        return sorted(self._glyphs)

    def describe(self) -> str:
        """Summarize supported characters for help and error text.

        Letters and digits are collapsed into ranges, other printable
        characters are listed as symbols.

        Returns:
            Description such as "A-Z, a-z, and space"
        """
        return format_character_ranges(self._glyphs)

    def __contains__(self, ch: object) -> bool:
        return ch in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)


def format_character_ranges(chars: Iterable[str]) -> str:
    """Describe a set of characters as human-readable ranges.

    Args:
        chars: Characters to describe

    Returns:
        Comma-separated description, e.g. "A-Z, a-z, 0-9, space, and symbols !?"
    """
    remaining = set(chars)
    parts: list[str] = []

    for first, last in (("A", "Z"), ("a", "z"), ("0", "9")):
        group = {chr(cp) for cp in range(ord(first), ord(last) + 1)} & remaining
        if not group:
            continue
        remaining -= group
        parts.extend(_collapse_runs(sorted(group)))

    if " " in remaining:
        remaining.discard(" ")
        parts.append("space")

    if remaining:
        parts.append("symbols " + "".join(sorted(remaining)))

    if len(parts) <= 1:
        return "".join(parts)
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + ", and " + parts[-1]


def _collapse_runs(chars: list[str]) -> list[str]:
    """Collapse sorted characters into "first-last" runs."""
    runs: list[str] = []
    start = prev = chars[0]
    for ch in chars[1:]:
        if ord(ch) == ord(prev) + 1:
            prev = ch
            continue
        runs.append(start if start == prev else f"{start}-{prev}")
        start = prev = ch
    runs.append(start if start == prev else f"{start}-{prev}")
    return runs


def get_glyph_table(charset: Charset | str = Charset.EXTENDED) -> GlyphTable:
    """Get the process-wide glyph table for a character set.

    Built once per charset on first use; the returned table is never mutated,
    so it is shared freely between callers and threads.

    Args:
        charset: Which built-in character set to load

    Returns:
        Cached GlyphTable

    Raises:
        ValueError: If charset is not a known character set
    """
    return _build_glyph_table(Charset(charset))


@lru_cache(maxsize=None)
def _build_glyph_table(charset: Charset) -> GlyphTable:
    """Build the table for one charset (cached, one entry per Charset)."""
    literals: dict[str, GlyphRows] = dict(LETTER_ROWS)
    if charset == Charset.EXTENDED:
        literals.update(DIGIT_ROWS)
        literals.update(SYMBOL_ROWS)
    return GlyphTable.from_literals(literals)
