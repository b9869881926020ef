"""Tests for the per-edit state machine and host-facing core."""

from __future__ import annotations

import math

import pytest

from format_config import CurrencyPattern, FormatConfig
from numeric_edit import (
    EditAction,
    NumericEditCore,
    ValueChanged,
    ValueCleared,
    process_edit,
)


class Recorder:
    def __init__(self):
        self.changed = []
        self.cleared = 0

    def on_changed(self, value):
        self.changed.append(value)

    def on_cleared(self):
        self.cleared += 1


def make_core(config: FormatConfig = None):
    core = NumericEditCore(config)
    recorder = Recorder()
    core.on_value_changed = recorder.on_changed
    core.on_value_cleared = recorder.on_cleared
    return core, recorder


def type_text(core: NumericEditCore, *edits: str):
    result = None
    for edit in edits:
        result = core.on_text_changed(edit)
    return result


def test_accepted_edit_is_formatted_and_reported():
    core, recorder = make_core()

    result = core.on_text_changed("1234")

    assert result.action is EditAction.ACCEPT
    assert result.text == "1,234"
    assert result.caret == len("1,234")
    assert result.event == ValueChanged(1234.0)
    assert core.state.previous_accepted_text == "1,234"
    assert recorder.changed == [1234.0]


def test_repeated_separator_reverts_to_previous_text():
    core, recorder = make_core()
    type_text(core, "1", "12")

    result = core.on_text_changed("12..")

    assert result.action is EditAction.REVERT
    assert result.text == "12"
    assert result.caret == 2
    assert result.event is None
    assert core.state.previous_accepted_text == "12"
    assert recorder.changed == [1.0, 12.0]


def test_integer_digit_limit_reverts():
    core, _ = make_core(FormatConfig(max_digits_before_decimal=3))
    type_text(core, "1", "12", "123")

    result = core.on_text_changed("1234")

    assert result.action is EditAction.REVERT
    assert result.text == "123"


def test_fraction_digit_limit_reverts():
    core, _ = make_core()
    type_text(core, "1", "1.", "1.2", "1.23")

    result = core.on_text_changed("1.234")

    assert result.action is EditAction.REVERT
    assert result.text == "1.23"
    assert core.get_numeric_value() == pytest.approx(1.23)


def test_clearing_the_text():
    core, recorder = make_core()
    type_text(core, "1", "12")

    result = core.on_text_changed("")

    assert result.action is EditAction.CLEAR
    assert result.text == ""
    assert result.event == ValueCleared()
    assert recorder.cleared == 1
    assert core.state.previous_accepted_text == ""
    assert math.isnan(core.get_numeric_value())
    assert core.get_numeric_value_or_default() == 0.0


def test_deleting_down_to_the_currency_symbol_clears():
    config = FormatConfig(show_currency_symbol=True, currency_symbol="$")
    core, recorder = make_core(config)
    assert type_text(core, "5").text == "$5"

    result = core.on_text_changed("$")

    assert result.action is EditAction.CLEAR
    assert recorder.cleared == 1
    assert core.text == ""


def test_currency_suffix_with_space():
    config = FormatConfig(
        show_currency_symbol=True,
        currency_symbol="$",
        currency_pattern=CurrencyPattern.NUMBER_SPACE_SYMBOL,
    )
    core, recorder = make_core(config)

    result = core.on_text_changed("1234.56")

    assert result.text == "1,234.56 $"
    assert recorder.changed == [pytest.approx(1234.56)]


def test_explicit_clear_without_default():
    core, recorder = make_core()
    type_text(core, "42")

    assert core.clear() == ""
    assert recorder.cleared == 1
    assert core.text == ""
    assert math.isnan(core.get_numeric_value())


def test_explicit_clear_restores_default_value():
    core, recorder = make_core()

    assert core.set_default_numeric_value(1500) == "1,500.00"
    assert core.text == "1,500.00"
    assert recorder.changed == []

    type_text(core, "1,500.0", "1,500.", "1,5007")
    assert core.text == "15,007"

    assert core.clear() == "1,500.00"
    assert core.get_numeric_value() == 1500.0
    assert recorder.changed[-1] == 1500.0
    assert recorder.cleared == 0


def test_numeric_value_of_unparsable_text():
    core, _ = make_core()
    assert math.isnan(core.get_numeric_value())
    assert core.get_numeric_value_or_default() == 0.0


def test_callbacks_are_single_slot():
    core = NumericEditCore()
    first, second = [], []
    core.on_value_changed = first.append
    core.on_value_changed = second.append

    core.on_text_changed("7")

    assert first == []
    assert second == [7.0]


def test_edits_without_subscribers():
    core = NumericEditCore()
    assert core.on_text_changed("7").text == "7"
    assert core.on_text_changed("").action is EditAction.CLEAR


def test_replace_config_applies_to_following_edits():
    core, _ = make_core()
    type_text(core, "1")

    core.replace_config(max_digits_after_decimal=0)

    assert core.config.max_digits_after_decimal == 0
    assert core.on_text_changed("1.5").action is EditAction.REVERT


def test_process_edit_is_pure():
    config = FormatConfig()

    result = process_edit("7", "7.", config)
    assert result.action is EditAction.ACCEPT
    assert result.text == "7."
    assert result.event == ValueChanged(7.0)

    reverted = process_edit("7", "7..", config)
    assert reverted.action is EditAction.REVERT
    assert reverted.text == "7"
    assert reverted.reason is not None


def test_leading_zeros_are_removed_while_typing():
    core, _ = make_core()
    assert type_text(core, "0", "00", "007").text == "7"
    assert type_text(core, "").action is EditAction.CLEAR
    assert type_text(core, "0").text == "0"


@pytest.mark.parametrize(
    "pattern, typed, after_backspace",
    [
        (CurrencyPattern.NUMBER_SYMBOL, "1,234$", "123$"),
        (CurrencyPattern.NUMBER_SPACE_SYMBOL, "1,234 $", "123 $"),
    ],
)
def test_backspace_over_suffix_symbol_deletes_a_digit(pattern, typed, after_backspace):
    config = FormatConfig(show_currency_symbol=True, currency_symbol="$", currency_pattern=pattern)
    core, recorder = make_core(config)
    assert core.on_text_changed("1234").text == typed

    result = core.on_text_changed(typed[:-1])

    assert result.action is EditAction.ACCEPT
    assert result.text == after_backspace
    assert recorder.changed == [1234.0, 123.0]


@pytest.mark.parametrize("pattern", [CurrencyPattern.NUMBER_SYMBOL, CurrencyPattern.NUMBER_SPACE_SYMBOL])
def test_backspace_over_suffix_symbol_of_last_digit_clears(pattern):
    config = FormatConfig(show_currency_symbol=True, currency_symbol="$", currency_pattern=pattern)
    core, recorder = make_core(config)
    shown = core.on_text_changed("5").text

    result = core.on_text_changed(shown[:-1])

    assert result.action is EditAction.CLEAR
    assert core.text == ""
    assert recorder.cleared == 1


def test_backspace_over_suffix_symbol_keeps_decimal_separator():
    config = FormatConfig(
        show_currency_symbol=True,
        currency_symbol="$",
        currency_pattern=CurrencyPattern.NUMBER_SPACE_SYMBOL,
    )
    core, _ = make_core(config)
    type_text(core, "1234.5")

    assert core.on_text_changed("1,234.5 ").text == "1,234. $"


@pytest.mark.parametrize(
    "config, proposed",
    [
        (FormatConfig(), ","),
        (FormatConfig(), ",,"),
        (FormatConfig(show_currency_symbol=True, currency_symbol="$"), "$,"),
    ],
)
def test_separator_only_edit_clears(config, proposed):
    core, recorder = make_core(config)

    result = core.on_text_changed(proposed)

    assert result.action is EditAction.CLEAR
    assert result.text == ""
    assert recorder.changed == []
    assert recorder.cleared == 1
