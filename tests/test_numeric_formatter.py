"""Tests for display text formatting and parsing."""

from __future__ import annotations

import math

import pytest

from format_config import CurrencyPattern, FormatConfig
from numeric_formatter import (
    accepted_characters,
    format_text,
    format_value,
    group_digits,
    parse_value,
    strip_leading_zeros,
)

US = FormatConfig()
EUROPEAN = FormatConfig(decimal_separator=",", grouping_separator=".")


def currency_config(pattern: CurrencyPattern) -> FormatConfig:
    return FormatConfig(show_currency_symbol=True, currency_symbol="$", currency_pattern=pattern)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", "1"),
        ("123", "123"),
        ("1234", "1,234"),
        ("1234567", "1,234,567"),
        ("123456", "123,456"),
        ("1,2,3,4", "1,234"),
        ("1234.5", "1,234.5"),
        ("1234.", "1,234."),
        ("", ""),
    ],
)
def test_format_groups_integer_part(raw, expected):
    assert format_text(raw, US) == expected


def test_grouping_is_counted_from_the_least_significant_digit():
    digits = "1234567890"
    grouped = group_digits(digits, ",")
    groups = grouped.split(",")

    assert grouped.replace(",", "") == digits
    assert not grouped.startswith(",")
    assert all(len(group) == 3 for group in groups[1:])
    assert 1 <= len(groups[0]) <= 3


def test_group_digits_with_multi_character_separator():
    assert group_digits("1234567", "'") == "1'234'567"
    assert group_digits("1234567", " .") == "1 .234 .567"


def test_leading_zeros_are_stripped_but_zero_is_kept():
    assert format_text("007", US) == "7"
    assert format_text("0", US) == "0"
    assert format_text("000", US) == "0"
    assert format_text("0.5", US) == "0.5"
    assert strip_leading_zeros("0001000") == "1000"


def test_fraction_is_reappended_verbatim():
    assert format_text("1234567,891", EUROPEAN) == "1.234.567,891"
    assert format_text("1.234,5", EUROPEAN) == "1.234,5"


@pytest.mark.parametrize(
    "pattern, expected",
    [
        (CurrencyPattern.SYMBOL_NUMBER, "$1,234.56"),
        (CurrencyPattern.NUMBER_SYMBOL, "1,234.56$"),
        (CurrencyPattern.SYMBOL_SPACE_NUMBER, "$ 1,234.56"),
        (CurrencyPattern.NUMBER_SPACE_SYMBOL, "1,234.56 $"),
    ],
)
def test_currency_symbol_follows_pattern(pattern, expected):
    config = currency_config(pattern)
    assert format_text("1234.56", config) == expected
    assert format_text(expected, config) == expected


@pytest.mark.parametrize("raw", ["0", "7", "1234", "1,234.5", "0012.34", "98765432.1", "5."])
def test_format_is_idempotent(raw):
    once = format_text(raw, US)
    assert format_text(once, US) == once


def test_format_is_idempotent_with_currency():
    for pattern in CurrencyPattern:
        config = currency_config(pattern)
        once = format_text("9876543.2", config)
        assert format_text(once, config) == once


def test_parse_ignores_grouping_and_currency():
    assert parse_value("1,234.56", US) == pytest.approx(1234.56)
    assert parse_value("$ 1,234.56", currency_config(CurrencyPattern.SYMBOL_SPACE_NUMBER)) == pytest.approx(1234.56)
    assert parse_value("1.234,5", EUROPEAN) == pytest.approx(1234.5)
    assert parse_value("12.", US) == 12.0
    assert parse_value(".5", US) == 0.5


def test_parse_returns_nan_for_unparsable_text():
    assert math.isnan(parse_value("", US))
    assert math.isnan(parse_value(".", US))
    assert math.isnan(parse_value("$", US))


def test_parse_ignores_text_after_second_decimal_separator():
    assert parse_value("1.2.3", US) == pytest.approx(1.2)


@pytest.mark.parametrize("raw", ["1234", "1234.5", "007", "0.25", "1,000,000"])
def test_parse_of_formatted_text_matches_raw(raw):
    assert parse_value(format_text(raw, US), US) == parse_value(raw, US)


def test_format_value_uses_fraction_digit_limit():
    assert format_value(1234.5, US) == "1,234.50"
    assert format_value(0, US) == "0.00"
    assert format_value(1234.4, FormatConfig(max_digits_after_decimal=0)) == "1,234"
    assert format_value(10, EUROPEAN) == "10,00"


@pytest.mark.parametrize("value", [-1.0, math.nan, math.inf])
def test_format_value_rejects_values_without_display_form(value):
    with pytest.raises(ValueError):
        format_value(value, US)


def test_accepted_characters():
    plain = accepted_characters(US)
    assert set("0123456789.,") <= plain
    assert "$" not in plain
    assert " " not in plain

    with_currency = accepted_characters(currency_config(CurrencyPattern.NUMBER_SPACE_SYMBOL))
    assert "$" in with_currency
    assert " " in with_currency
