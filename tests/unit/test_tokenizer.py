"""
Unit tests for the line classifier.
"""

import pytest

from tini.tools.tokenizer import (
    LineKind,
    ParsedLine,
    classify_line,
    is_identifier,
    strip_comment
)


class TestStripComment:
    """Test cases for comment stripping."""

    def test_no_comment(self):
        """Test that a line without ';' is unchanged."""
        assert strip_comment("name = value") == "name = value"

    def test_trailing_comment(self):
        """Test that a trailing comment is removed."""
        assert strip_comment("name1 = 100 ; comment") == "name1 = 100 "

    def test_full_line_comment(self):
        """Test that a comment line becomes empty."""
        assert strip_comment(";------") == ""

    def test_escaped_marker_is_kept(self):
        """Test that an escaped ';' does not start a comment."""
        assert strip_comment(r"a = x\;y ; real") == r"a = x\;y "

    def test_double_backslash_does_not_escape(self):
        """Test that an even run of backslashes leaves ';' as a comment."""
        assert strip_comment("a = x\\\\;y") == "a = x\\\\"


class TestIsIdentifier:
    """Test cases for identifier validation."""

    @pytest.mark.parametrize("name", ["name1", "section_one", "_.,:(){}-#@&*|", "A.b-c"])
    def test_valid(self, name):
        """Test identifiers built from the allowed character set."""
        assert is_identifier(name)

    @pytest.mark.parametrize("name", ["", "two words", "a]b", "a[b", "a=b", "a;b", "a/b"])
    def test_invalid(self, name):
        """Test strings outside the allowed character set."""
        assert not is_identifier(name)


class TestClassifyLine:
    """Test cases for classify_line()."""

    def test_blank_line(self):
        """Test empty and whitespace-only lines."""
        assert classify_line("").kind is LineKind.BLANK
        assert classify_line("   \t ").kind is LineKind.BLANK

    def test_comment_line(self):
        """Test that a comment-only line is blank."""
        assert classify_line(";------").kind is LineKind.BLANK

    def test_section_header(self):
        """Test a plain section header."""
        parsed = classify_line("[section_one]", 3)
        assert parsed == ParsedLine(LineKind.SECTION, 3, "[section_one]", name="section_one")

    def test_section_header_with_comment(self):
        """Test a section header followed by a comment."""
        parsed = classify_line("  [section_zero]      ; empty section")
        assert parsed.kind is LineKind.SECTION
        assert parsed.name == "section_zero"

    def test_entry(self):
        """Test an entry with a trailing comment."""
        parsed = classify_line("name1 = 100 ; comment")
        assert parsed.kind is LineKind.ENTRY
        assert parsed.key == "name1"
        assert parsed.value == "100"

    def test_weird_name(self):
        """Test a key made only of symbols from the identifier set."""
        parsed = classify_line("_.,:(){}-#@&*| = 100")
        assert parsed.kind is LineKind.ENTRY
        assert parsed.key == "_.,:(){}-#@&*|"
        assert parsed.value == "100"

    def test_text_entry(self):
        """Test that internal whitespace in values is preserved."""
        parsed = classify_line("text_name = hello   world!")
        assert parsed.value == "hello   world!"

    def test_value_split_on_first_equals(self):
        """Test that only the first '=' separates key and value."""
        parsed = classify_line("expr = a = b")
        assert parsed.key == "expr"
        assert parsed.value == "a = b"

    def test_empty_value(self):
        """Test an entry with nothing after '='."""
        parsed = classify_line("empty =")
        assert parsed.kind is LineKind.ENTRY
        assert parsed.value == ""

    def test_escaped_comma_kept_in_raw_value(self):
        """Test that escape markers survive in the raw value."""
        parsed = classify_line(r"lost = 4, 8, 15, 16\, 23, 42")
        assert parsed.value == r"4, 8, 15, 16\, 23, 42"

    def test_incorrect_token(self):
        """Test that a broken header with '=' is malformed."""
        parsed = classify_line("[section = 1, 2 = value", 7)
        assert parsed.kind is LineKind.MALFORMED
        assert parsed.line_number == 7
        assert parsed.text == "[section = 1, 2 = value"

    @pytest.mark.parametrize("line", [
        "[unclosed",
        "[]",
        "[a]b]",
        "[two words]",
        "just some text",
        "= value",
        "two words = value",
    ])
    def test_malformed(self, line):
        """Test lines that match no rule."""
        assert classify_line(line).kind is LineKind.MALFORMED
