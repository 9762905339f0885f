"""Unit tests for the layout engine."""

import pytest

from pixeltext.config import LayoutConfig, MissingGlyphPolicy, PixelTextSettings
from pixeltext.core import CANVAS_HEIGHT, LayoutEngine, render_text, validate_text
from pixeltext.exceptions import RenderError, TextTooLongError, UnsupportedCharacterError
from pixeltext.font import Charset, GlyphTable, get_glyph_table


@pytest.fixture
def engine():
    """Engine with default settings (extended charset, strict policy)."""
    return LayoutEngine()


@pytest.fixture
def basic_engine():
    """Engine restricted to letters and space."""
    return LayoutEngine(config=LayoutConfig(charset=Charset.BASIC))


def expected_width(table: GlyphTable, text: str) -> int:
    """Canvas width from glyph widths, spacers and padding."""
    return 2 + sum(table.lookup(ch).width for ch in text) + (len(text) - 1)


class TestRender:
    """Tests for LayoutEngine.render."""

    def test_single_character(self, engine):
        """Test rendering 'A' frames its pattern with zeros."""
        canvas = engine.render("A")
        assert canvas.height == 7
        assert canvas.rows[0] == "0000000"
        assert canvas.rows[6] == "0000000"

        pattern = engine.table.lookup("A").to_strings()
        for row_idx in range(5):
            assert canvas.rows[row_idx + 1] == "0" + pattern[row_idx] + "0"

    def test_narrow_characters(self, engine):
        """Test 'il': two 1-column glyphs plus spacer and padding."""
        canvas = engine.render("il")
        assert canvas.width == 5
        assert canvas.rows == (
            "00000",
            "01010",
            "00010",
            "01010",
            "01010",
            "01010",
            "00000",
        )

    def test_empty_input(self, engine):
        """Test empty text renders a blank 7x19 block."""
        canvas = engine.render("")
        assert canvas.rows == ("0" * 19,) * 7

    def test_empty_width_configurable(self):
        """Test the empty-input width comes from config."""
        canvas = LayoutEngine(config=LayoutConfig(empty_width=5)).render("")
        assert canvas.rows == ("00000",) * 7

    def test_mixed_case(self, engine):
        """Test mixed case text with spacing."""
        canvas = engine.render("Aa")
        assert canvas.height == 7
        assert canvas.width == 2 + 5 + 1 + 4
        # Spacer column between the glyphs stays blank
        assert all(row[6] == "0" for row in canvas.rows)

    def test_space_is_blank_gap(self, engine):
        """Test that space only advances the cursor."""
        canvas = engine.render("a b")
        assert canvas.width == 2 + 4 + 1 + 3 + 1 + 4
        # padding, a (1-4), spacer (5), space (6-8), spacer (9), b (10-13), padding
        for row in canvas.rows:
            assert row[5:10] == "00000"
        assert canvas.rows[1] == "000000000010000"

    def test_only_spaces(self, engine):
        """Test text made only of spaces renders blank."""
        canvas = engine.render("  ")
        assert canvas.width == 2 + 3 + 1 + 3
        assert set("".join(canvas.rows)) == {"0"}

    @pytest.mark.parametrize("text", ["Hello World", "pixel", "IiLl", "The quick brown fox"])
    def test_row_widths(self, engine, text):
        """Test every row has the computed width."""
        canvas = engine.render(text)
        width = expected_width(engine.table, text)
        assert canvas.height == CANVAS_HEIGHT
        assert all(len(row) == width for row in canvas.rows)

    def test_padding_is_blank(self, engine):
        """Test the border rows and columns are zero."""
        canvas = engine.render("WMW")
        assert set(canvas.rows[0]) == {"0"}
        assert set(canvas.rows[-1]) == {"0"}
        assert all(row[0] == "0" and row[-1] == "0" for row in canvas.rows)

    def test_every_supported_character_renders(self, engine):
        """Test each supported character alone gives 7 rows."""
        for ch in engine.table.sorted_characters():
            canvas = engine.render(ch)
            assert canvas.height == 7, ch
            assert canvas.width == engine.table.lookup(ch).width + 2, ch

    def test_deterministic(self, engine):
        """Test identical input yields identical output."""
        assert engine.render("Hello World") == engine.render("Hello World")
        assert LayoutEngine().render("abc").to_text() == LayoutEngine().render("abc").to_text()

    def test_max_length_accepted(self, engine):
        """Test text exactly at the limit renders."""
        canvas = engine.render("a" * 1000)
        assert canvas.width == 2 + 4 * 1000 + 999


class TestErrors:
    """Tests for render validation errors."""

    def test_text_too_long(self, engine):
        """Test 1001 characters fails with the observed length."""
        with pytest.raises(TextTooLongError) as exc_info:
            engine.render("a" * 1001)
        assert exc_info.value.length == 1001
        assert exc_info.value.limit == 1000

    def test_length_checked_before_characters(self, engine):
        """Test the length check wins over unsupported characters."""
        with pytest.raises(TextTooLongError):
            engine.render("é" * 1001)

    def test_length_counts_utf8_bytes(self, engine):
        """Test the limit is measured in UTF-8 bytes, not code points."""
        with pytest.raises(TextTooLongError) as exc_info:
            engine.render("é" * 600)
        assert exc_info.value.length == 1200

    def test_multibyte_text_at_byte_limit(self, engine):
        """Test 1000 bytes of two-byte characters passes the length check."""
        with pytest.raises(UnsupportedCharacterError):
            engine.render("é" * 500)

    def test_custom_limit(self):
        """Test max_text_length from config."""
        engine = LayoutEngine(config=LayoutConfig(max_text_length=3))
        engine.render("abc")
        with pytest.raises(TextTooLongError, match="max: 3"):
            engine.render("abcd")

    def test_unsupported_character(self, basic_engine):
        """Test 'Hello!' fails on '!' with the basic charset."""
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            basic_engine.render("Hello!")
        assert exc_info.value.character == "!"

    def test_first_unsupported_character_reported(self, basic_engine):
        """Test the first offender in scan order is reported."""
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            basic_engine.render("a1b!c")
        assert exc_info.value.character == "1"

    def test_non_ascii_rejected(self, engine):
        """Test characters outside the font fail with the extended charset too."""
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            engine.render("café")
        assert exc_info.value.character == "é"

    def test_newline_rejected(self, engine):
        """Test control characters are not glyphs."""
        with pytest.raises(UnsupportedCharacterError):
            engine.render("a\nb")

    def test_errors_share_base(self, engine):
        """Test both render errors derive from RenderError."""
        with pytest.raises(RenderError):
            engine.render("é")
        with pytest.raises(RenderError):
            engine.render("a" * 1001)

    def test_error_messages(self):
        """Test error display text."""
        assert str(UnsupportedCharacterError("!")) == "Character '!' not found in font"
        assert str(TextTooLongError(1001)) == "Text too long: 1001 characters (max: 1000)"


class TestLossyPolicy:
    """Tests for the lossy missing-glyph policy."""

    @pytest.fixture
    def lossy_engine(self):
        return LayoutEngine(
            config=LayoutConfig(charset=Charset.BASIC, missing_glyph=MissingGlyphPolicy.LOSSY)
        )

    def test_missing_character_drawn_as_space(self, lossy_engine, basic_engine):
        """Test an unsupported character renders like a space."""
        assert lossy_engine.render("Hi!") == basic_engine.render("Hi ")

    def test_lossy_validate_accepts_anything(self, lossy_engine):
        """Test validation only checks length under the lossy policy."""
        lossy_engine.validate("éè!?")

    def test_lossy_still_enforces_length(self, lossy_engine):
        """Test the length limit applies to the lossy policy."""
        with pytest.raises(TextTooLongError):
            lossy_engine.render("!" * 1001)

    def test_lossy_length_counts_utf8_bytes(self, lossy_engine):
        """Test multibyte text over the byte limit fails under the lossy policy."""
        with pytest.raises(TextTooLongError) as exc_info:
            lossy_engine.render("é" * 600)
        assert exc_info.value.length == 1200

    def test_lossy_multibyte_within_limit(self, lossy_engine):
        """Test multibyte text within the byte limit renders as spaces."""
        canvas = lossy_engine.render("é" * 2)
        assert canvas.width == 2 + 3 + 1 + 3

    def test_lossy_measure(self, lossy_engine):
        """Test measure uses the space width for missing glyphs."""
        assert lossy_engine.measure("!") == (5, 7)


class TestValidateAndMeasure:
    """Tests for validate and measure."""

    def test_validate_ok(self, basic_engine):
        """Test valid text passes."""
        basic_engine.validate("Hello World")

    def test_validate_failure(self, basic_engine):
        """Test invalid text raises."""
        with pytest.raises(UnsupportedCharacterError, match="'!'"):
            basic_engine.validate("Hello!")

    def test_measure_matches_render(self, engine):
        """Test measure agrees with the rendered canvas."""
        for text in ["", "A", "il", "Hello World", "a b"]:
            canvas = engine.render(text)
            assert engine.measure(text) == (canvas.width, canvas.height)

    def test_measure_hello_world(self, engine):
        """Test a known width."""
        # H5 e4 l1 l1 o4 _3 W5 o4 r3 l1 d4 = 35, 10 spacers, 2 padding
        assert engine.measure("Hello World") == (47, 7)


class TestCustomTable:
    """Tests for rendering with a custom glyph table."""

    def test_custom_table(self):
        """Test the engine uses an injected table."""
        table = GlyphTable.from_literals({"x": ("#.#", ".#.", "#.#", ".#.", "#.#")})
        engine = LayoutEngine(table=table)
        canvas = engine.render("x x")
        assert canvas.width == 2 + 3 + 1 + 3 + 1 + 3
        assert canvas.rows[1] == "0101000001010"

    def test_custom_table_rejects_other_characters(self):
        """Test characters outside an injected table are rejected."""
        table = GlyphTable.from_literals({"x": ("#.#", ".#.", "#.#", ".#.", "#.#")})
        with pytest.raises(UnsupportedCharacterError):
            LayoutEngine(table=table).render("y")


class TestModuleFunctions:
    """Tests for render_text and validate_text."""

    def test_render_text_defaults(self):
        """Test render_text with default settings."""
        assert render_text("A") == LayoutEngine().render("A")

    def test_render_text_settings(self):
        """Test render_text honours settings."""
        settings = PixelTextSettings(layout=LayoutConfig(charset=Charset.BASIC))
        with pytest.raises(UnsupportedCharacterError):
            render_text("1", settings)

    def test_validate_text(self):
        """Test validate_text."""
        validate_text("Hello World")
        with pytest.raises(UnsupportedCharacterError):
            validate_text("Hello¡")

    def test_shared_table(self):
        """Test engines share the cached table."""
        assert LayoutEngine().table is get_glyph_table()

    def test_shared_table_per_charset(self):
        """Test an engine built from config reuses the charset's cached table."""
        engine = LayoutEngine(config=LayoutConfig(charset=Charset.BASIC))
        assert engine.table is get_glyph_table(Charset.BASIC)
        assert engine.table is get_glyph_table("basic")
