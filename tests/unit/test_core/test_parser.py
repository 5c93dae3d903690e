#!/usr/bin/env python3
"""Tests for the amount parser."""

import logging

import pytest

from centwise.core.errors import InvalidInputError
from centwise.core.money import Money
from centwise.core.parser import clean_amount_string, parse, parse_amount_string
from centwise.core.settings import DEFAULT_SETTINGS, MoneySettings


class TestCleanAmountString:
    """Test reduction of amount strings to numeric text."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("$1,234.56", "1234.56"),
            ("(1.99)", "-1.99"),
            ("($5)", "-5"),
            ("USD -5", "-5"),
            ("abc", ""),
            ("  42  ", "42"),
        ],
    )
    def test_clean_amount_string(self, text, expected):
        """Test noise is removed and parentheses become a minus sign."""
        assert clean_amount_string(text) == expected

    @pytest.mark.currency
    def test_custom_decimal_mark(self):
        """Test the decimal mark is normalized to a dot."""
        assert clean_amount_string("1.234,56 EUR", decimal=",") == "1234.56"

    @pytest.mark.currency
    def test_regex_special_decimal_mark(self):
        """Test decimal marks that are regex metacharacters."""
        assert clean_amount_string("1*234^5", decimal="^") == "1234.5"

    @pytest.mark.currency
    def test_parse_amount_string(self):
        """Test string amounts in major units."""
        assert parse_amount_string("$12.34") == 12.34
        assert parse_amount_string("") == 0.0
        assert parse_amount_string("1.2.3") == 0.0


class TestParse:
    """Test parse() across input types."""

    @pytest.mark.currency
    def test_numbers_and_strings(self):
        """Test major-unit input is scaled to minor units."""
        assert parse("$12.34", DEFAULT_SETTINGS) == 1234
        assert parse(0.1, DEFAULT_SETTINGS) == 10
        assert parse(-7, DEFAULT_SETTINGS) == -700

    @pytest.mark.currency
    def test_precision(self):
        """Test the scale follows settings.precision."""
        assert parse("1.5", MoneySettings(precision=0)) == 2
        assert parse("1.5", MoneySettings(precision=4)) == 15000

    @pytest.mark.currency
    def test_money_input(self):
        """Test Money input is read in major units."""
        assert parse(Money(12.34), DEFAULT_SETTINGS) == 1234
        assert parse(Money(12.34), MoneySettings(precision=3)) == 12340

    @pytest.mark.currency
    def test_from_cents(self):
        """Test minor-unit input is only rounded."""
        settings = MoneySettings(from_cents=True)
        assert parse(1234, settings) == 1234
        assert parse("12.5", settings) == 13
        assert parse(Money(1234, settings), settings) == 1234

    @pytest.mark.currency
    def test_without_rounding(self):
        """Test use_rounding=False returns the scaled float."""
        result = parse(10, DEFAULT_SETTINGS, use_rounding=False)
        assert isinstance(result, float)
        assert result == 1000.0
        assert parse(2.5, MoneySettings(from_cents=True), use_rounding=False) == 2.5

    @pytest.mark.currency
    def test_unsupported_types(self):
        """Test unsupported input types become zero or raise."""
        assert parse({}, DEFAULT_SETTINGS) == 0
        assert parse(False, DEFAULT_SETTINGS) == 0
        with pytest.raises(InvalidInputError):
            parse([], MoneySettings(error_on_invalid=True))

    @pytest.mark.currency
    def test_invalid_input_error_is_value_error(self):
        """Test InvalidInputError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Invalid Input"):
            parse(None, MoneySettings(error_on_invalid=True))

    @pytest.mark.currency
    def test_degradation_is_logged(self, caplog):
        """Test unparsable strings are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="centwise.core.parser"):
            assert parse("1.2.3", DEFAULT_SETTINGS) == 0
        assert "1.2.3" in caplog.text
