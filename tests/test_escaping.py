"""Tests for literal escaping helpers."""

import re

import pytest

from form_codegen.generator.escaping import escape_string, js_value


class TestEscapeString:
    """Tests for escape_string."""

    def test_apostrophe(self):
        """Test escaping an apostrophe."""
        assert escape_string("it's") == "it\\'s"

    def test_double_quote(self):
        """Test escaping double quotes."""
        assert escape_string('Say "Hi"') == 'Say \\"Hi\\"'

    def test_both_quotes(self):
        """Test a caption holding both quote characters."""
        assert escape_string("it's \"x\"") == "it\\'s \\\"x\\\""

    def test_other_characters_untouched(self):
        """Test that markup and template syntax pass through unchanged."""
        text = "<b>a & b</b>\n\t`${x}`"
        assert escape_string(text) == text

    @pytest.mark.parametrize("text", ["'", '"', "a'b\"c", "''\"\"", "plain"])
    def test_no_unescaped_quotes(self, text):
        """Test that every quote in the output is preceded by a backslash."""
        escaped = escape_string(text)
        assert re.search(r"(?<!\\)['\"]", escaped) is None

    def test_escaping_twice(self):
        """Test that a second pass escapes the quote again, keeping the backslash."""
        once = escape_string("it's")
        assert escape_string(once) == "it\\\\'s"


class TestJsValue:
    """Tests for js_value."""

    def test_booleans(self):
        """Test JavaScript boolean literals."""
        assert js_value(True) == "true"
        assert js_value(False) == "false"

    def test_numbers(self):
        """Test that integral floats print without a fraction."""
        assert js_value(1) == "1"
        assert js_value(2.0) == "2"
        assert js_value(2.5) == "2.5"

    def test_text(self):
        """Test that text is emitted as is."""
        assert js_value("a") == "a"
