"""
test_formatting.py — Tests for string output

Tests cover:
- canonical to_string() / str()
- grouping (standard and Indian) on the integer part only
- symbol handling and the format_with_symbol default
- locale separators
- JSON value
"""

import json

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from monetary import create, Money


class TestToString:

    @pytest.mark.parametrize("value, options, expected", [
        (1234.5, {}, "1234.50"),
        (-1.99, {}, "-1.99"),
        (0, {}, "0.00"),
        (1234.5, {"precision_digits": 0}, "1235"),
        (1.5, {"precision_digits": 3}, "1.500"),
    ])
    def test_fixed_point(self, value, options, expected):
        assert create(value, options).to_string() == expected

    def test_str_matches_to_string(self):
        m = create("1,234.56")
        assert str(m) == m.to_string() == "1234.56"

    def test_repr(self):
        assert repr(create(1.5)) == "Money('1.50')"

    def test_ignores_display_settings(self):
        m = create(1234.5, decimal_separator=",", symbol_text="€", format_with_symbol=True)
        assert m.to_string() == "1234.50"


class TestFormat:

    def test_default(self):
        assert create(1234.5).format() == "1,234.50"

    def test_with_symbol(self):
        assert create(1234.5, precision_digits=2).format(True) == "$1,234.50"

    def test_negative_with_symbol(self):
        assert create(-1234.5).format(True) == "$-1,234.50"

    def test_format_with_symbol_setting(self):
        m = create(1234.5, format_with_symbol=True)
        assert m.format() == "$1,234.50"
        assert m.format(False) == "1,234.50"

    @pytest.mark.parametrize("value, expected", [
        (1, "1.00"),
        (999, "999.00"),
        (1000, "1,000.00"),
        (123456, "123,456.00"),
        (1000000, "1,000,000.00"),
        (-1000000, "-1,000,000.00"),
    ])
    def test_standard_grouping(self, value, expected):
        assert create(value).format() == expected

    @pytest.mark.parametrize("value, expected", [
        (999, "999.00"),
        (1234, "1,234.00"),
        (100000, "1,00,000.00"),
        (1234567, "12,34,567.00"),
        (-123456789.5, "-12,34,56,789.50"),
    ])
    def test_indian_grouping(self, value, expected):
        assert create(value, use_indian_grouping=True).format() == expected

    def test_locale_separators(self):
        m = create(1234567.891, group_separator=".", decimal_separator=",")
        assert m.format() == "1.234.567,89"

    def test_apostrophe_grouping(self):
        assert create(1234, group_separator="'").format() == "1'234.00"

    def test_multi_character_symbol(self):
        m = create(1234, symbol_text="CHF ")
        assert m.format(True) == "CHF 1,234.00"

    def test_symbol_with_dot_and_no_fraction(self):
        m = create(1234, symbol_text="Rs.", precision_digits=0)
        assert m.format(True) == "Rs.1,234"

    def test_symbol_with_dot_and_locale_decimal(self):
        m = create(
            1234567,
            symbol_text="Rs.",
            precision_digits=0,
            decimal_separator=",",
            use_indian_grouping=True,
        )
        assert m.format(True) == "Rs.12,34,567"

    def test_symbol_with_dot_and_fraction(self):
        m = create(1234567.5, symbol_text="Rs.", use_indian_grouping=True)
        assert m.format(True) == "Rs.12,34,567.50"

    def test_precision_zero_has_no_decimal_part(self):
        assert create(1234567, precision_digits=0).format() == "1,234,567"

    def test_fraction_digits_are_not_grouped(self):
        m = create(12345.6789, precision_digits=4)
        assert m.format() == "12,345.6789"

    def test_non_finite(self):
        assert create(1).divide(0).format(True) == "$inf"


class TestSerialization:

    def test_to_json_is_float(self):
        assert create("12.34").to_json() == 12.34

    def test_json_dumps(self):
        payload = {"total": create(2026).distribute(12)[0].to_json()}
        assert json.dumps(payload) == '{"total": 168.84}'

    def test_round_trip_through_to_string(self):
        m = create("-98765.43")
        assert Money.of(m.to_string()) == m
