"""
Tests for display formatting

Tests covering:
1. Whole-unit currency
2. Compact currency for text messages, including unit rollover
3. Percentages
"""

import pytest

from utils.formatting import format_compact_currency, format_currency, format_percent


# =============================================================================
# Test: Currency
# =============================================================================

class TestFormatCurrency:
    """Tests for whole-unit currency."""

    def test_thousands_separator(self):
        assert format_currency(1234) == "$1,234"

    def test_negative_sign_before_symbol(self):
        assert format_currency(-26800) == "-$26,800"

    def test_rounds_to_whole_units(self):
        assert format_currency(1234.6) == "$1,235"

    def test_other_currency_uses_code(self):
        assert format_currency(500, currency="CAD") == "CAD 500"


# =============================================================================
# Test: Compact Currency
# =============================================================================

class TestFormatCompactCurrency:
    """Tests for the short format used in SMS bodies."""

    @pytest.mark.parametrize("amount,expected", [
        (950, "$950"),
        (340000, "$340K"),
        (1340000, "$1.3M"),
        (-340000, "-$340K"),
    ])
    def test_units(self, amount, expected):
        assert format_compact_currency(amount) == expected

    def test_thousands_roll_over_to_millions(self):
        """A value that rounds to 1000K is shown in millions."""
        assert format_compact_currency(999_999.6) == "$1.0M"
        assert format_compact_currency(999_600) == "$1.0M"

    def test_units_roll_over_to_thousands(self):
        assert format_compact_currency(999.6) == "$1K"

    def test_just_below_rollover_stays_in_thousands(self):
        assert format_compact_currency(999_400) == "$999K"


# =============================================================================
# Test: Percent
# =============================================================================

class TestFormatPercent:

    def test_default_one_decimal(self):
        assert format_percent(40) == "40.0%"

    def test_custom_decimals(self):
        assert format_percent(12.3456, decimals=2) == "12.35%"
