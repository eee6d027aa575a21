"""Tests for text and attribute escaping."""

import pytest

from twiml_markup.markup.escape import escape_attr, escape_text


class TestEscapeText:
    """Test suite for escape_text."""

    @pytest.mark.parametrize("raw,expected", [
        ("", ""),
        ("plain", "plain"),
        ("a & b", "a &amp; b"),
        ("<b>", "&lt;b&gt;"),
        ("&amp;", "&amp;amp;"),
        ("say \"hi\" it's", "say \"hi\" it's"),
        ("café ☃", "café ☃"),
    ])
    def test_escape_table(self, raw, expected) -> None:
        """Test escaping of the three markup characters only."""
        assert escape_text(raw) == expected

    def test_script_injection(self) -> None:
        """Test that a script tag cannot be injected through text."""
        escaped = escape_text("<script>alert('x')</script>")

        assert escaped == "&lt;script&gt;alert('x')&lt;/script&gt;"
        assert "<" not in escaped

    def test_output_never_shorter(self) -> None:
        """Test that escaping never shortens its input."""
        for raw in ["", "x", "&<>", "\x01\x02", "\U0001F600"]:
            assert len(escape_text(raw)) >= len(raw)


class TestEscapeAttr:
    """Test suite for escape_attr."""

    @pytest.mark.parametrize("raw,expected", [
        ("", ""),
        ('"', "&quot;"),
        ("'", "&#39;"),
        ("a&b<c>d", "a&amp;b&lt;c&gt;d"),
        ('" onload="evil()', "&quot; onload=&quot;evil()"),
    ])
    def test_escape_table(self, raw, expected) -> None:
        """Test escaping of markup characters and both quote styles."""
        assert escape_attr(raw) == expected

    def test_no_raw_special_characters_remain(self) -> None:
        """Test that no quote or bracket survives escaping."""
        escaped = escape_attr("<'\"&>")

        for char in "<>\"'":
            assert char not in escaped

    def test_line_breaks_and_controls_untouched(self) -> None:
        """Test that whitespace and control characters pass through as-is."""
        raw = "a\rb\r\nc\td\x01"

        assert escape_attr(raw) == raw
        assert escape_text(raw) == raw
