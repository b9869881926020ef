"""
Numeric formatting and parsing for display text.

Display text is the grouped, currency-decorated string shown in the field.
Formatting re-renders accepted raw text into that shape; parsing goes the other
way and recovers a float, tolerating grouping and currency artifacts.
"""

from __future__ import annotations

import math
import re
import string
from typing import FrozenSet, List

from format_config import FormatConfig

_NON_DIGIT = re.compile(r"[^0-9]")
_LEADING_ZEROS = re.compile(r"^0+(?!$)")
_GROUP_SIZE = 3


def strip_currency(text: str, config: FormatConfig) -> str:
    """Remove the currency symbol and the space its pattern adds."""
    if not config.show_currency_symbol or not config.currency_symbol:
        return text
    symbol = config.currency_symbol
    pattern = config.currency_pattern
    if pattern.spaced:
        affix = f"{symbol} " if pattern.prefix else f" {symbol}"
        text = text.replace(affix, "")
    return text.replace(symbol, "").strip()


def apply_currency(number: str, config: FormatConfig) -> str:
    """Affix the currency symbol according to the configured pattern."""
    if not config.show_currency_symbol or not config.currency_symbol:
        return number
    symbol = config.currency_symbol
    pattern = config.currency_pattern
    space = " " if pattern.spaced else ""
    if pattern.prefix:
        return f"{symbol}{space}{number}"
    return f"{number}{space}{symbol}"


def group_digits(digits: str, separator: str) -> str:
    """Insert ``separator`` every three digits counted from the right.

    The digits are reversed so chunks can be cut from the start, then each
    chunk and the chunk order are reversed back.
    """
    reversed_digits = digits[::-1]
    chunks: List[str] = [
        reversed_digits[i:i + _GROUP_SIZE]
        for i in range(0, len(reversed_digits), _GROUP_SIZE)
    ]
    return separator.join(chunk[::-1] for chunk in reversed(chunks))


def strip_leading_zeros(digits: str) -> str:
    """``"007"`` becomes ``"7"``; a lone ``"0"`` is kept."""
    return _LEADING_ZEROS.sub("", digits, count=1)


def format_text(raw_text: str, config: FormatConfig) -> str:
    """Render raw accepted text as display text."""
    body = strip_currency(raw_text, config)
    parts = body.split(config.decimal_separator)
    number = strip_leading_zeros(_NON_DIGIT.sub("", parts[0]))
    number = group_digits(number, config.grouping_separator)
    if len(parts) > 1:
        # Fractional digits are kept verbatim; their length is the validator's concern.
        number += config.decimal_separator + parts[1]
    return apply_currency(number, config)


def parse_value(display_text: str, config: FormatConfig) -> float:
    """Parse display text into a float, returning NaN when no number is present.

    Anything after a second decimal separator is ignored.
    """
    parts = display_text.split(config.decimal_separator)
    normalized = _NON_DIGIT.sub("", parts[0])
    if len(parts) > 1:
        normalized += "." + _NON_DIGIT.sub("", parts[1])
    try:
        return float(normalized)
    except ValueError:
        return math.nan


def format_value(value: float, config: FormatConfig) -> str:
    """Render a non-negative number as display text.

    Uses ``max_digits_after_decimal`` fractional digits.

    Raises
    ------
    ValueError
        If ``value`` is negative or not finite, since display text carries
        neither a sign nor a special value.
    """
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Cannot display {value!r} in a numeric field")
    decimals = config.max_digits_after_decimal
    integer, _, fraction = f"{value:.{decimals}f}".partition(".")
    raw = integer
    if fraction:
        raw += config.decimal_separator + fraction
    return format_text(raw, config)


def accepted_characters(config: FormatConfig) -> FrozenSet[str]:
    """Characters a host key filter should let through."""
    allowed = set(string.digits)
    allowed.update(config.decimal_separator)
    allowed.update(config.grouping_separator)
    if config.show_currency_symbol:
        allowed.update(config.currency_symbol)
        allowed.add(" ")
    return frozenset(allowed)
