"""Formatting configuration for numeric edit fields."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Mapping, Optional

DEFAULT_DIGITS_BEFORE_DECIMAL = 0
DEFAULT_DIGITS_AFTER_DECIMAL = 2


class CurrencyPattern(Enum):
    """Placement of the currency symbol relative to the number."""

    SYMBOL_NUMBER = "symbol_number"
    NUMBER_SYMBOL = "number_symbol"
    SYMBOL_SPACE_NUMBER = "symbol_space_number"
    NUMBER_SPACE_SYMBOL = "number_space_symbol"

    @property
    def prefix(self) -> bool:
        return self in (CurrencyPattern.SYMBOL_NUMBER, CurrencyPattern.SYMBOL_SPACE_NUMBER)

    @property
    def spaced(self) -> bool:
        return self in (CurrencyPattern.SYMBOL_SPACE_NUMBER, CurrencyPattern.NUMBER_SPACE_SYMBOL)

    @classmethod
    def from_placement(cls, prefix: bool, spaced: bool) -> "CurrencyPattern":
        if prefix:
            return cls.SYMBOL_SPACE_NUMBER if spaced else cls.SYMBOL_NUMBER
        return cls.NUMBER_SPACE_SYMBOL if spaced else cls.NUMBER_SYMBOL


@dataclass(frozen=True)
class LocaleConventions:
    """Separators and currency placement resolved by the host for one locale."""

    decimal_separator: str = "."
    grouping_separator: str = ","
    currency_symbol: str = "$"
    currency_pattern: CurrencyPattern = CurrencyPattern.SYMBOL_NUMBER

    @classmethod
    def from_parts(
        cls,
        decimal_separator: str = "",
        grouping_separator: str = "",
        currency_symbol: str = "",
        currency_pattern: Optional[CurrencyPattern] = None,
    ) -> "LocaleConventions":
        """Build conventions from values a locale reports, filling in gaps.

        Empty values fall back to the defaults. When the grouping separator is
        missing or collides with the decimal separator, ``,`` is used, or ``.``
        when the decimal separator is itself ``,``.
        """

        defaults = cls()
        decimal = decimal_separator or defaults.decimal_separator
        grouping = grouping_separator
        if not grouping or grouping == decimal:
            grouping = "." if decimal == defaults.grouping_separator else defaults.grouping_separator
        symbol = currency_symbol or defaults.currency_symbol
        pattern = currency_pattern or defaults.currency_pattern
        return cls(
            decimal_separator=decimal,
            grouping_separator=grouping,
            currency_symbol=symbol,
            currency_pattern=pattern,
        )


@dataclass(frozen=True)
class FormatConfig:
    """Immutable formatting rules consumed by the validator and formatter."""

    decimal_separator: str = "."
    grouping_separator: str = ","
    max_digits_before_decimal: int = DEFAULT_DIGITS_BEFORE_DECIMAL
    max_digits_after_decimal: int = DEFAULT_DIGITS_AFTER_DECIMAL
    show_currency_symbol: bool = False
    currency_symbol: str = "$"
    currency_pattern: CurrencyPattern = CurrencyPattern.SYMBOL_NUMBER

    @classmethod
    def from_conventions(cls, conventions: LocaleConventions, **overrides: Any) -> "FormatConfig":
        config = cls(
            decimal_separator=conventions.decimal_separator,
            grouping_separator=conventions.grouping_separator,
            currency_symbol=conventions.currency_symbol,
            currency_pattern=conventions.currency_pattern,
        )
        return replace(config, **overrides) if overrides else config


@dataclass(frozen=True)
class ValidationIssue:
    """Represents a configuration validation problem."""

    field: str
    title: str
    message: str


class FormatConfigError(ValueError):
    """Raised when host-supplied attributes cannot form a valid configuration."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = list(issues)
        summary = "; ".join(f"{issue.field}: {issue.title}" for issue in self.issues)
        super().__init__(f"Invalid numeric format configuration ({summary})")


def _coerce_int(value: Any) -> Optional[int]:
    """Best-effort conversion to ``int`` returning ``None`` on failure."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _coerce_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off", ""):
        return False
    return None


def validate_format_config(config: FormatConfig) -> List[ValidationIssue]:
    """Validate a configuration.

    Returns
    -------
    list[ValidationIssue]
        A collection of validation issues. An empty list denotes success.
    """

    issues: List[ValidationIssue] = []

    if not config.decimal_separator:
        issues.append(
            ValidationIssue(
                field="decimal_separator",
                title="Decimal Separator Required",
                message="Provide the character that separates integer and fractional digits.",
            )
        )
    if not config.grouping_separator:
        issues.append(
            ValidationIssue(
                field="grouping_separator",
                title="Grouping Separator Required",
                message="Provide the character inserted between groups of three digits.",
            )
        )
    if config.decimal_separator and config.decimal_separator == config.grouping_separator:
        issues.append(
            ValidationIssue(
                field="grouping_separator",
                title="Separators Must Differ",
                message="The grouping separator must differ from the decimal separator.",
            )
        )
    for field_name, value in (
        ("decimal_separator", config.decimal_separator),
        ("grouping_separator", config.grouping_separator),
    ):
        if any(ch.isdigit() for ch in value):
            issues.append(
                ValidationIssue(
                    field=field_name,
                    title="Digits Not Allowed",
                    message="Separators cannot contain digits.",
                )
            )

    for field_name in ("max_digits_before_decimal", "max_digits_after_decimal"):
        value = getattr(config, field_name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            issues.append(
                ValidationIssue(
                    field=field_name,
                    title="Digit Limit Invalid",
                    message="Digit limits must be whole numbers of zero or more.",
                )
            )

    if not isinstance(config.currency_pattern, CurrencyPattern):
        issues.append(
            ValidationIssue(
                field="currency_pattern",
                title="Currency Pattern Invalid",
                message="Choose one of: " + ", ".join(p.value for p in CurrencyPattern) + ".",
            )
        )

    if config.show_currency_symbol:
        symbol = config.currency_symbol
        if not symbol or not symbol.strip():
            issues.append(
                ValidationIssue(
                    field="currency_symbol",
                    title="Currency Symbol Required",
                    message="Provide a currency symbol or disable currency display.",
                )
            )
        elif (
            any(ch.isdigit() for ch in symbol)
            or config.decimal_separator in symbol
            or config.grouping_separator in symbol
        ):
            issues.append(
                ValidationIssue(
                    field="currency_symbol",
                    title="Currency Symbol Ambiguous",
                    message="The currency symbol cannot contain digits or either separator.",
                )
            )

    return issues


def load_format_config(
    attributes: Mapping[str, Any], conventions: Optional[LocaleConventions] = None
) -> FormatConfig:
    """Build a validated configuration from host widget attributes.

    Parameters
    ----------
    attributes:
        ``max_digits_before_decimal``, ``max_digits_after_decimal``,
        ``show_currency_symbol`` and ``override_currency_symbol``. Missing keys
        take their defaults.
    conventions:
        Locale conventions resolved by the host. Defaults to ``.``/``,``/``$``.

    Raises
    ------
    FormatConfigError
        If any attribute is malformed or the resulting configuration is invalid.
    """

    conventions = conventions or LocaleConventions()
    issues: List[ValidationIssue] = []

    before = _coerce_int(attributes.get("max_digits_before_decimal", DEFAULT_DIGITS_BEFORE_DECIMAL))
    if before is None:
        issues.append(
            ValidationIssue(
                field="max_digits_before_decimal",
                title="Digit Limit Invalid",
                message="Maximum digits before the decimal separator must be a whole number.",
            )
        )
    after = _coerce_int(attributes.get("max_digits_after_decimal", DEFAULT_DIGITS_AFTER_DECIMAL))
    if after is None:
        issues.append(
            ValidationIssue(
                field="max_digits_after_decimal",
                title="Digit Limit Invalid",
                message="Maximum digits after the decimal separator must be a whole number.",
            )
        )
    show_currency = _coerce_bool(attributes.get("show_currency_symbol", False))
    if show_currency is None:
        issues.append(
            ValidationIssue(
                field="show_currency_symbol",
                title="Currency Flag Invalid",
                message="Currency display must be true or false.",
            )
        )

    symbol = conventions.currency_symbol
    override = attributes.get("override_currency_symbol")
    if override:
        # Only the first character of an override is significant.
        symbol = str(override)[0]

    if issues:
        raise FormatConfigError(issues)

    config = FormatConfig.from_conventions(
        conventions,
        max_digits_before_decimal=before,
        max_digits_after_decimal=after,
        show_currency_symbol=show_currency,
        currency_symbol=symbol,
    )
    issues = validate_format_config(config)
    if issues:
        raise FormatConfigError(issues)
    return config
