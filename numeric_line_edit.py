"""
Numeric line edit widget.

Wraps ``NumericEditCore`` in a ``QLineEdit``: every user edit is validated and
reformatted as it happens, and value changes are re-exposed as Qt signals.
"""

from typing import Any, Mapping, Optional

from PySide6.QtCore import QLocale, Signal
from PySide6.QtWidgets import QLineEdit

from format_config import CurrencyPattern, FormatConfig, LocaleConventions, load_format_config
from logger import LoggableMixin
from numeric_edit import EditAction, NumericEditCore, ValueChanged, ValueCleared
from numeric_formatter import accepted_characters


def system_conventions(qlocale: Optional[QLocale] = None) -> LocaleConventions:
    """Read separators and currency placement from a Qt locale.

    Defaults to ``QLocale.system()``. The symbol's position is taken from how
    the locale renders one unit of currency.
    """
    qlocale = qlocale if qlocale is not None else QLocale.system()
    symbol = qlocale.currencySymbol()
    pattern = None
    sample = qlocale.toCurrencyString(1.0)
    symbol_at = sample.find(symbol) if symbol else -1
    number_at = sample.find("1")
    if symbol_at >= 0 and number_at >= 0:
        prefix = symbol_at < number_at
        if prefix:
            gap = sample[symbol_at + len(symbol):number_at]
        else:
            gap = sample[number_at:symbol_at].lstrip("0123456789" + qlocale.decimalPoint())
        pattern = CurrencyPattern.from_placement(prefix, bool(gap) and gap.isspace())
    return LocaleConventions.from_parts(
        decimal_separator=qlocale.decimalPoint(),
        grouping_separator=qlocale.groupSeparator(),
        currency_symbol=symbol,
        currency_pattern=pattern,
    )


class NumericLineEdit(QLineEdit, LoggableMixin):
    """Line edit that keeps its text a grouped, locale-formatted number."""

    # Signals
    numeric_value_changed = Signal(float)
    numeric_value_cleared = Signal()

    def __init__(self, config: Optional[FormatConfig] = None, parent=None):
        QLineEdit.__init__(self, parent)
        LoggableMixin.__init__(self)

        self._core = NumericEditCore(config)
        self._allowed_characters = accepted_characters(self._core.config)

        # Set while the widget writes text itself so the write is not
        # processed as another edit.
        self._internal_update = False

        self.textChanged.connect(self._handle_text_changed)
        self.log_debug("Numeric line edit initialized")

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any],
                        conventions: Optional[LocaleConventions] = None, parent=None):
        """Create a widget from host attributes, raising ``FormatConfigError`` if invalid."""
        return cls(load_format_config(attributes, conventions), parent)

    @property
    def core(self) -> NumericEditCore:
        return self._core

    @property
    def config(self) -> FormatConfig:
        return self._core.config

    def replace_config(self, **changes: Any) -> FormatConfig:
        config = self._core.replace_config(**changes)
        self._allowed_characters = accepted_characters(config)
        return config

    def _set_text_internal(self, text: str):
        self._internal_update = True
        try:
            self.setText(text)
        finally:
            self._internal_update = False
        self.setCursorPosition(len(text))

    def _handle_text_changed(self, text: str):
        if self._internal_update:
            return
        result = self._core.on_text_changed(text)
        if result.action is EditAction.REVERT or result.text != text:
            self._set_text_internal(result.text)
        else:
            self.setCursorPosition(result.caret)
        self._emit_event(result.event)

    def _emit_event(self, event):
        if isinstance(event, ValueChanged):
            self.numeric_value_changed.emit(event.value)
        elif isinstance(event, ValueCleared):
            self.numeric_value_cleared.emit()

    def clear(self):
        """Clear the field, restoring the default value when one is set."""
        text = self._core.clear()
        self._set_text_internal(text)
        if text:
            self._emit_event(ValueChanged(self._core.get_numeric_value()))
        else:
            self._emit_event(ValueCleared())

    def set_default_numeric_value(self, value: float):
        """Show ``value`` now and restore it on ``clear``."""
        self._set_text_internal(self._core.set_default_numeric_value(value))

    def get_numeric_value(self) -> float:
        return self._core.get_numeric_value()

    def get_numeric_value_or_default(self) -> float:
        return self._core.get_numeric_value_or_default()

    def keyPressEvent(self, event):
        """Drop printable characters that can never be part of a number."""
        typed = event.text()
        if typed and typed.isprintable() and any(ch not in self._allowed_characters for ch in typed):
            event.ignore()
            return
        super().keyPressEvent(event)

    def mousePressEvent(self, event):
        """Keep the caret at the end, where edits are formatted from."""
        super().mousePressEvent(event)
        self.setCursorPosition(len(self.text()))
