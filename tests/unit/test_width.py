"""Tests for display width helpers."""

import pytest

from rain_table.width import (
    char_width,
    display_width,
    is_real_number,
    justify,
    truncate_to_width,
)


class TestDisplayWidth:
    """Tests for char_width and display_width."""

    def test_ascii_is_narrow(self) -> None:
        """ASCII characters take one cell."""
        assert char_width("a") == 1
        assert display_width("hello") == 5

    def test_hiragana_is_wide(self) -> None:
        """Hiragana takes two cells per character."""
        assert char_width("あ") == 2
        assert display_width("あいうえお") == 10

    def test_fullwidth_forms_are_wide(self) -> None:
        """Fullwidth Latin letters take two cells."""
        assert display_width("ＡＢ") == 4

    def test_halfwidth_katakana_is_narrow(self) -> None:
        """Halfwidth katakana takes one cell."""
        assert display_width("ｱｲ") == 2

    def test_mixed(self) -> None:
        """Narrow and wide characters add up."""
        assert display_width("id名前") == 6

    def test_empty(self) -> None:
        """Empty string has no width."""
        assert display_width("") == 0


class TestTruncateToWidth:
    """Tests for truncate_to_width."""

    def test_wide_characters_are_not_split(self) -> None:
        """A wide character crossing the limit is dropped whole."""
        assert truncate_to_width("あいうえお", 5) == "あい"

    def test_narrow_characters(self) -> None:
        """Narrow text is cut at exactly the limit."""
        assert truncate_to_width("0123456789", 5) == "01234"

    def test_exact_fit(self) -> None:
        """Text that fits exactly is kept."""
        assert truncate_to_width("あいう", 6) == "あいう"

    def test_shorter_than_limit(self) -> None:
        """Short text is returned unchanged."""
        assert truncate_to_width("abc", 10) == "abc"

    def test_limit_too_small_for_any_character(self) -> None:
        """A limit smaller than the first character gives an empty string."""
        assert truncate_to_width("あいう", 1) == ""

    def test_zero_limit(self) -> None:
        """Zero limit gives an empty string without raising."""
        assert truncate_to_width("abc", 0) == ""

    def test_mixed_width(self) -> None:
        """Mixed text stops before the character that would overflow."""
        assert truncate_to_width("aあbい", 4) == "aあb"


class TestIsRealNumber:
    """Tests for the numeric grammar used by auto alignment."""

    @pytest.mark.parametrize(
        "text",
        ["1", "0", "-2", "3.14", "-0.5", "+5", "1e5", "2.5E-3", "1_000", " 42 "],
    )
    def test_numeric(self, text: str) -> None:
        """Integers and decimals, with optional sign and exponent, are numbers."""
        assert is_real_number(text)

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "nan", "inf", "1,000", ".5", "1.", "0x1A", "1__0", "12abc", "True"],
    )
    def test_not_numeric(self, text: str) -> None:
        """Anything else is text."""
        assert not is_real_number(text)


class TestJustify:
    """Tests for justify."""

    def test_right(self) -> None:
        """Right alignment puts the fill first."""
        assert justify("ab", 5, "right") == "   ab"

    def test_left(self) -> None:
        """Left alignment puts the fill after."""
        assert justify("ab", 5, "left") == "ab   "

    def test_auto_number_goes_right(self) -> None:
        """Numbers are right-aligned when no alignment is given."""
        assert justify("12", 4) == "  12"

    def test_auto_text_goes_left(self) -> None:
        """Text is left-aligned when no alignment is given."""
        assert justify("ab", 4) == "ab  "

    def test_wide_characters_use_display_width(self) -> None:
        """Fill is computed from display width, not character count."""
        assert justify("名前", 6, "left") == "名前  "

    def test_already_wide_enough(self) -> None:
        """No fill when the text already fills the width."""
        assert justify("abcdef", 3, "right") == "abcdef"
