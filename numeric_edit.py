"""
Edit state machine for a numeric text field.

One edit is processed to completion before the next begins:

    Idle -> Validating -> {Reject -> Idle, Clear -> Idle, Accept -> Formatting -> Idle}

``process_edit`` is the pure step. ``NumericEditCore`` owns the only state that
survives between edits, the last accepted text, and notifies a single
subscriber per event kind.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Optional, Union

from edit_validator import EditOutcome, RejectReason, validate
from format_config import FormatConfig
from logger import LoggableMixin
from numeric_formatter import format_text, format_value, parse_value, strip_currency


@dataclass(frozen=True)
class ValueChanged:
    value: float


@dataclass(frozen=True)
class ValueCleared:
    pass


ChangeEvent = Union[ValueChanged, ValueCleared]


class EditAction(Enum):
    """What the host must do with the field after an edit."""

    ACCEPT = "accept"
    REVERT = "revert"
    CLEAR = "clear"


@dataclass(frozen=True)
class EditResult:
    """Outcome of one edit.

    ``text`` is what the field must show afterwards and ``caret`` where the
    cursor goes. The host writes ``text`` back without re-dispatching it as an
    edit.
    """

    action: EditAction
    text: str
    caret: int
    event: Optional[ChangeEvent] = None
    reason: Optional[RejectReason] = None


@dataclass
class EditState:
    previous_accepted_text: str = ""


def _suffix_backspace(previous_text: str, proposed_text: str, config: FormatConfig) -> str:
    """Turn a backspace over a trailing currency symbol into a deleted digit.

    With the caret kept at the end, backspace can only remove a suffix symbol,
    which formatting would put straight back.
    """
    if not config.show_currency_symbol or config.currency_pattern.prefix:
        return proposed_text
    symbol = config.currency_symbol
    if not symbol or not previous_text.endswith(symbol):
        return proposed_text
    if proposed_text != previous_text[:-len(symbol)]:
        return proposed_text
    return strip_currency(previous_text, config)[:-1]


def _cleared() -> EditResult:
    return EditResult(EditAction.CLEAR, "", 0, event=ValueCleared())


def process_edit(previous_text: str, proposed_text: str, config: FormatConfig) -> EditResult:
    """Validate and format one proposed edit."""
    proposed_text = _suffix_backspace(previous_text, proposed_text, config)
    result = validate(previous_text, proposed_text, config)

    if result.outcome is EditOutcome.REJECT:
        return EditResult(EditAction.REVERT, previous_text, len(previous_text), reason=result.reason)

    if result.outcome is EditOutcome.CLEAR:
        return _cleared()

    display_text = format_text(proposed_text, config)
    if not strip_currency(display_text, config):
        # Separators alone format to no number at all.
        return _cleared()
    return EditResult(
        EditAction.ACCEPT,
        display_text,
        len(display_text),
        event=ValueChanged(parse_value(display_text, config)),
    )


ValueChangedCallback = Callable[[float], None]
ValueClearedCallback = Callable[[], None]


@dataclass
class _Subscribers:
    value_changed: Optional[ValueChangedCallback] = None
    value_cleared: Optional[ValueClearedCallback] = None


class NumericEditCore(LoggableMixin):
    """Host-facing numeric field logic.

    Callbacks are single-slot: assigning ``on_value_changed`` or
    ``on_value_cleared`` replaces any previous handler.
    """

    def __init__(self, config: Optional[FormatConfig] = None):
        LoggableMixin.__init__(self)
        self._config = config or FormatConfig()
        self._state = EditState()
        self._default_text: Optional[str] = None
        self._subscribers = _Subscribers()

    @property
    def config(self) -> FormatConfig:
        return self._config

    def replace_config(self, **changes: Any) -> FormatConfig:
        """Swap in a copy of the configuration with ``changes`` applied."""
        self._config = replace(self._config, **changes)
        self.log_debug("Configuration replaced", changes=changes)
        return self._config

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def text(self) -> str:
        """Text the field currently shows."""
        return self._state.previous_accepted_text

    @property
    def default_text(self) -> Optional[str]:
        return self._default_text

    @property
    def on_value_changed(self) -> Optional[ValueChangedCallback]:
        return self._subscribers.value_changed

    @on_value_changed.setter
    def on_value_changed(self, callback: Optional[ValueChangedCallback]):
        self._subscribers.value_changed = callback

    @property
    def on_value_cleared(self) -> Optional[ValueClearedCallback]:
        return self._subscribers.value_cleared

    @on_value_cleared.setter
    def on_value_cleared(self, callback: Optional[ValueClearedCallback]):
        self._subscribers.value_cleared = callback

    def on_text_changed(self, proposed_text: str) -> EditResult:
        """Process one user edit against the last accepted text."""
        result = process_edit(self._state.previous_accepted_text, proposed_text, self._config)

        if result.action is EditAction.REVERT:
            self._logger.log_edit_outcome(
                result.action.value, proposed_text, reason=result.reason.name
            )
            return result

        self._state.previous_accepted_text = result.text
        self._logger.log_edit_outcome(result.action.value, proposed_text, display_text=result.text)
        self._emit(result.event)
        return result

    def clear(self) -> str:
        """Reset the field and return the text the host should write."""
        if self._default_text is None:
            self._state.previous_accepted_text = ""
            self._emit(ValueCleared())
            return ""
        self._state.previous_accepted_text = self._default_text
        self._emit(ValueChanged(self.get_numeric_value()))
        return self._default_text

    def set_default_numeric_value(self, value: float) -> str:
        """Set the text restored by ``clear`` and return it for the host to write.

        The field shows the default straight away; no change event fires.
        """
        self._default_text = format_value(value, self._config)
        self._state.previous_accepted_text = self._default_text
        self.log_debug("Default value set", default_text=self._default_text)
        return self._default_text

    def get_numeric_value(self) -> float:
        """Value of the current text, NaN when it holds no number."""
        return parse_value(self._state.previous_accepted_text, self._config)

    def get_numeric_value_or_default(self) -> float:
        """Value of the current text, 0.0 when it holds no number."""
        value = self.get_numeric_value()
        return 0.0 if math.isnan(value) else value

    def _emit(self, event: Optional[ChangeEvent]):
        if isinstance(event, ValueChanged):
            callback = self._subscribers.value_changed
            if callback is not None:
                callback(event.value)
        elif isinstance(event, ValueCleared):
            callback = self._subscribers.value_cleared
            if callback is not None:
                callback()
