"""Structural validation of proposed edits in a numeric field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from format_config import FormatConfig
from numeric_formatter import strip_currency


class EditOutcome(Enum):
    """Terminal outcome of validating one proposed edit."""

    ACCEPT = "accept"
    REJECT = "reject"
    CLEAR = "clear"


class RejectReason(Enum):
    """Structural rule that rejected an edit."""

    GROUPING_IN_FRACTION = "grouping separator after the decimal separator"
    LONE_DECIMAL_SEPARATOR = "decimal separator without a leading digit"
    TOO_MANY_INTEGER_DIGITS = "too many digits before the decimal separator"
    TOO_MANY_FRACTION_DIGITS = "too many digits after the decimal separator"
    REPEATED_TRAILING_SEPARATOR = "separator typed twice at the end"
    MULTIPLE_DECIMAL_SEPARATORS = "more than one decimal separator"


@dataclass(frozen=True)
class ValidationResult:
    outcome: EditOutcome
    reason: Optional[RejectReason] = None

    @property
    def accepted(self) -> bool:
        return self.outcome is EditOutcome.ACCEPT


ACCEPTED = ValidationResult(EditOutcome.ACCEPT)
CLEARED = ValidationResult(EditOutcome.CLEAR)


def _reject(reason: RejectReason) -> ValidationResult:
    return ValidationResult(EditOutcome.REJECT, reason)


def count_occurrences(text: str, sub: str) -> int:
    """Count non-overlapping occurrences of ``sub`` scanning from the right."""
    if not text or not sub:
        return 0
    count = 0
    end = len(text)
    while True:
        index = text.rfind(sub, 0, end)
        if index < 0:
            return count
        count += 1
        end = index


def validate(previous_text: str, proposed_text: str, config: FormatConfig) -> ValidationResult:
    """Decide whether ``proposed_text`` may replace ``previous_text``.

    Rules are checked in order and the first match wins. Apart from the
    lone-currency-symbol check, they look at the text with the currency affix
    removed so a suffix symbol is never mistaken for fractional digits.
    ``previous_text`` is what a rejected edit reverts to; no rule inspects it.
    """
    decimal = config.decimal_separator
    grouping = config.grouping_separator

    if (
        config.show_currency_symbol
        and config.currency_symbol
        and proposed_text.strip() == config.currency_symbol
    ):
        return CLEARED

    text = strip_currency(proposed_text, config)

    decimal_position = text.find(decimal)
    if decimal_position > 0 and text.find(grouping, decimal_position + len(decimal)) >= 0:
        return _reject(RejectReason.GROUPING_IN_FRACTION)

    if text == decimal:
        return _reject(RejectReason.LONE_DECIMAL_SEPARATOR)

    parts = text.split(decimal)
    integer_part = parts[0]
    fraction_part = parts[1] if len(parts) > 1 else None

    max_before = config.max_digits_before_decimal
    if max_before > 0 and len(integer_part.replace(grouping, "")) > max_before:
        return _reject(RejectReason.TOO_MANY_INTEGER_DIGITS)

    if fraction_part is not None and len(fraction_part) > config.max_digits_after_decimal:
        return _reject(RejectReason.TOO_MANY_FRACTION_DIGITS)

    if len(text) > 2:
        for separator in (decimal, grouping):
            if text.endswith(separator * 2):
                return _reject(RejectReason.REPEATED_TRAILING_SEPARATOR)

    if count_occurrences(text, decimal) > 1:
        return _reject(RejectReason.MULTIPLE_DECIMAL_SEPARATORS)

    if not text:
        return CLEARED

    return ACCEPTED
