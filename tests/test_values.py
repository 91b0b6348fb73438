"""Tests for value coercion and escaping."""

import pytest

from ledgerstore.codec.values import (
    coerce_value,
    escape_text,
    format_number,
    unescape_text,
)


class TestCoercionPriority:
    """Tests for the order in which fragments are classified."""

    def test_array_literal_is_list(self):
        """Test that an array never reaches the numeric branch."""
        value = coerce_value('["a","b"]')
        assert value == ["a", "b"]

    def test_quoted_number_stays_string(self):
        """Test that "123" is the string 123."""
        value = coerce_value('"123"')
        assert value == "123"
        assert isinstance(value, str)

    def test_bare_number(self):
        """Test that a bare 123 is the number 123.0."""
        value = coerce_value("123")
        assert value == 123.0
        assert isinstance(value, float)

    def test_bare_negative_decimal(self):
        """Test negative decimals with surrounding whitespace."""
        assert coerce_value("  -2.5 ") == -2.5

    def test_bare_text_kept_verbatim(self):
        """Test that an unquoted non-number is kept as text."""
        assert coerce_value("abc") == "abc"
        assert coerce_value("12abc") == "12abc"

    def test_float_spellings_stay_text(self):
        """Test that only decimal text is read as a number."""
        for fragment in ["inf", "-Infinity", "nan", "1_000", "0x10"]:
            assert coerce_value(fragment) == fragment

    def test_exponent_is_number(self):
        """Test the exponent form written for very small values."""
        assert coerce_value("1e-07") == 1e-07
        assert coerce_value("1.5E+16") == 1.5e16
        assert coerce_value(".5") == 0.5

    def test_lone_quote_is_bare_text(self):
        """Test that a single quote character is not a string literal."""
        assert coerce_value('"') == '"'


class TestStrings:
    """Tests for quoted fragments."""

    def test_unescape(self):
        """Test backslash-quote is restored to a quote."""
        assert coerce_value('"He said \\"hi\\""') == 'He said "hi"'

    def test_empty_string(self):
        """Test the empty string literal."""
        assert coerce_value('""') == ""

    def test_other_backslashes_untouched(self):
        """Test only backslash-quote is unescaped."""
        assert coerce_value('"C:\\temp\\n"') == "C:\\temp\\n"


class TestLists:
    """Tests for list fragments."""

    def test_empty_list(self):
        """Test []."""
        assert coerce_value("[]") == []
        assert coerce_value("[  ]") == []

    def test_trailing_separator_dropped(self):
        """Test trailing commas leave no empty item."""
        assert coerce_value('["a", "b",]') == ["a", "b"]

    def test_blank_items_dropped(self):
        """Test blank bare items are dropped."""
        assert coerce_value('["a", , "b"]') == ["a", "b"]

    def test_quoted_empty_item_kept(self):
        """Test "" is a real empty item."""
        assert coerce_value('[""]') == [""]

    def test_items_with_commas_and_quotes(self):
        """Test items containing separators and escaped quotes."""
        value = coerce_value('["say \\"x\\"", "y, z"]')
        assert value == ['say "x"', "y, z"]

    def test_bare_items_are_text(self):
        """Test unquoted items stay strings, numbers included."""
        assert coerce_value("[a, 1]") == ["a", "1"]


class TestEscaping:
    """Tests for the escape helpers and number formatting."""

    def test_escape_only_quotes(self):
        """Test quotes are escaped and nothing else."""
        assert escape_text('He said "hi"') == 'He said \\"hi\\"'
        assert escape_text("a\\b\nc") == "a\\b\nc"

    def test_unescape_inverts_escape(self):
        """Test unescape(escape(s)) == s."""
        for text in ['He said "hi"', 'a\\"b', '""', "plain"]:
            assert unescape_text(escape_text(text)) == text

    def test_format_number(self):
        """Test number text parses back to the same value."""
        assert format_number(3.0) == "3.0"
        assert format_number(3.14) == "3.14"
        for value in [0.1, -20.75, 1234567.891, 1e-7, 0.0]:
            assert float(format_number(value)) == value


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
