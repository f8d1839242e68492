"""Tests for currency, percentage and bracket-range formatting."""

from decimal import Decimal

import pytest

from fedtax.engines.brackets import TAX_YEAR_TABLES
from fedtax.formatting import format_bracket_range, format_currency, format_percentage
from fedtax.models.enums import FilingStatus


class TestFormatCurrency:
    @pytest.mark.parametrize("amount, expected", [
        (Decimal("50000"), "$50,000"),
        (Decimal("0"), "$0"),
        (Decimal("1234.49"), "$1,234"),
        (Decimal("1234.50"), "$1,235"),
        (Decimal("999.5"), "$1,000"),
        (Decimal("-1234.4"), "-$1,234"),
        (Decimal("-0.4"), "$0"),
        (Decimal("1234567"), "$1,234,567"),
        (2500, "$2,500"),
        (1984.0, "$1,984"),
        (Decimal("1e30"), "$1,000,000,000,000,000,000,000,000,000,000"),
        (Decimal("-12345678901234567890123456789012.5"),
         "-$12,345,678,901,234,567,890,123,456,789,013"),
    ])
    def test_values(self, amount, expected):
        assert format_currency(amount) == expected


class TestFormatPercentage:
    def test_default_one_decimal(self):
        assert format_percentage(Decimal("8.032")) == "8.0%"

    def test_rounds_half_up(self):
        assert format_percentage(Decimal("8.05")) == "8.1%"

    def test_zero_decimals(self):
        assert format_percentage(Decimal("22"), 0) == "22%"

    def test_two_decimals(self):
        assert format_percentage(12.3456, 2) == "12.35%"

    def test_zero(self):
        assert format_percentage(0) == "0.0%"

    def test_huge_rate(self):
        assert format_percentage(Decimal("1e30")) == "1" + "0" * 30 + ".0%"


class TestFormatBracketRange:
    def test_single_2024_ranges(self):
        brackets = TAX_YEAR_TABLES[2024].brackets[FilingStatus.SINGLE]
        assert format_bracket_range(brackets[0]) == "$0 - $11,600"
        assert format_bracket_range(brackets[1]) == "$11,601 - $47,150"
        assert format_bracket_range(brackets[-1]) == "$609,351+"
