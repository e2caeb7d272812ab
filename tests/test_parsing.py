"""Tests for numeric coercion of raw input."""

import math

import pytest

from cba.core.parsing import parse_number


class TestParseNumber:
    """Tests for parse_number()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("480000", 480000.0),
            ("480,000", 480000.0),
            (" 1,250.50 ", 1250.5),
            ("$320,000", 320000.0),
            ("-2,500", -2500.0),
            (42, 42.0),
            (3.5, 3.5),
        ],
    )
    def test_valid_input(self, raw, expected):
        """Numbers and grouped text parse."""
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "?", "NA", "n/a", "abc", "12abc", None])
    def test_malformed_is_zero(self, raw):
        """Blank and malformed input becomes zero."""
        assert parse_number(raw) == 0.0

    @pytest.mark.parametrize("raw", ["inf", "nan", math.inf, math.nan])
    def test_non_finite_is_zero(self, raw):
        """Non-finite values become zero."""
        assert parse_number(raw) == 0.0

    def test_bool_is_zero(self):
        """Booleans are not treated as numbers."""
        assert parse_number(True) == 0.0
