"""Tests for truncation, numeric formatting, and JSON escaping."""

import json

import pytest

from agenttrace.observability.formatting import (
    error_envelope,
    escape_json_string,
    format_currency,
    format_ratio,
    truncate,
)


class TestTruncate:
    """Tests for truncate()."""

    def test_short_text_unchanged(self):
        assert truncate("hello", 10) == "hello"

    def test_exact_length_unchanged(self):
        assert truncate("hello", 5) == "hello"

    def test_long_text_cut_with_ellipsis(self):
        result = truncate("abcdefghij", 4)

        assert result == "abcd..."
        assert len(result) == 4 + 3

    @pytest.mark.parametrize("limit", [1, 50, 100, 200])
    def test_truncated_length_is_limit_plus_marker(self, limit):
        text = "x" * (limit + 25)
        result = truncate(text, limit)

        assert len(result) == limit + 3
        assert result.endswith("...")
        assert result[:limit] == text[:limit]

    def test_zero_limit_yields_only_marker(self):
        """Non-positive limits clamp to 0: non-empty text becomes '...'."""
        assert truncate("abc", 0) == "..."

    def test_negative_limit_yields_only_marker(self):
        assert truncate("abc", -5) == "..."

    def test_non_positive_limit_keeps_empty_text(self):
        assert truncate("", 0) == ""
        assert truncate("", -1) == ""


class TestNumberFormatting:
    """Tests for currency and ratio formatting."""

    def test_currency_six_decimals(self):
        result = format_currency(1.0 / 3.0)

        assert result == "0.333333"
        assert len(result.split(".")[1]) == 6

    def test_currency_no_grouping(self):
        assert format_currency(1234567.5) == "1234567.500000"

    def test_currency_small_values(self):
        assert format_currency(0.000123) == "0.000123"

    def test_ratio_four_decimals(self):
        result = format_ratio(0.12345)

        assert len(result.split(".")[1]) == 4
        assert result.startswith("0.123")

    def test_ratio_rounding(self):
        assert format_ratio(0.8234567) == "0.8235"
        assert format_ratio(0.75) == "0.7500"


class TestJsonEscaping:
    """Tests for escape_json_string() and error_envelope()."""

    def test_escapes_backslash_quote_newline(self):
        assert escape_json_string('a\\b"c\nd') == 'a\\\\b\\"c\\nd'

    def test_backslash_escaped_before_quote(self):
        """A pre-escaped quote does not get double-escaped."""
        assert escape_json_string('\\"') == '\\\\\\"'

    def test_plain_text_untouched(self):
        assert escape_json_string("Unknown function: 'x'") == "Unknown function: 'x'"

    def test_other_control_characters_pass_through(self):
        assert escape_json_string("a\tb\rc") == "a\tb\rc"

    def test_envelope_shape_is_exact(self):
        assert error_envelope("oops") == '{"isError": true, "error": "oops"}'

    @pytest.mark.parametrize(
        "message",
        [
            "simple",
            'quoted "name"',
            "line one\nline two",
            "path C:\\tmp\\file",
            'mixed \\ "q"\n  - next',
        ],
    )
    def test_envelope_round_trips_through_json(self, message):
        parsed = json.loads(error_envelope(message))

        assert parsed == {"isError": True, "error": message}
