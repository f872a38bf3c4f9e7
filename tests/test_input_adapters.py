"""Adaptadores de entrada: teclado, botones y guiones."""

import pytest

from calculator_engine import CalculatorEngine
from input_adapters import (
    Command,
    command_for_action,
    command_for_key,
    dispatch,
    parse_script,
    run_script,
)
from operations import Operator


@pytest.mark.parametrize("char, keysym, expected", [
    ("7", "7", (Command.DIGIT, "7")),
    (".", "period", (Command.DECIMAL_POINT, None)),
    ("+", "plus", (Command.OPERATOR, Operator.ADD)),
    ("-", "minus", (Command.OPERATOR, Operator.SUBTRACT)),
    ("*", "asterisk", (Command.OPERATOR, Operator.MULTIPLY)),
    ("/", "slash", (Command.OPERATOR, Operator.DIVIDE)),
    ("=", "equal", (Command.EQUALS, None)),
    ("\r", "Return", (Command.EQUALS, None)),
    ("\r", "KP_Enter", (Command.EQUALS, None)),
    ("\x08", "BackSpace", (Command.BACKSPACE, None)),
    ("\x1b", "Escape", (Command.CLEAR, None)),
    ("\x7f", "Delete", (Command.BACKSPACE, None)),
    ("%", "percent", (Command.PERCENT, None)),
    ("", "F9", (Command.TOGGLE_SIGN, None)),
    ("+", "KP_Add", (Command.OPERATOR, Operator.ADD)),
])
def test_command_for_key(char, keysym, expected):
    assert command_for_key(char, keysym) == expected


@pytest.mark.parametrize("char, keysym", [
    ("a", "a"),
    ("", "Shift_L"),
    ("", ""),
    ("^", "asciicircum"),
])
def test_unknown_keys_are_ignored(char, keysym):
    assert command_for_key(char, keysym) is None


@pytest.mark.parametrize("action, expected", [
    ("digit:0", (Command.DIGIT, "0")),
    ("digit:9", (Command.DIGIT, "9")),
    ("op:/", (Command.OPERATOR, Operator.DIVIDE)),
    ("dot", (Command.DECIMAL_POINT, None)),
    ("equals", (Command.EQUALS, None)),
    ("clear", (Command.CLEAR, None)),
    ("sign", (Command.TOGGLE_SIGN, None)),
    ("percent", (Command.PERCENT, None)),
    ("backspace", (Command.BACKSPACE, None)),
])
def test_command_for_action(action, expected):
    assert command_for_action(action) == expected


@pytest.mark.parametrize("action", ["digit:x", "op:^", "insert:7", ""])
def test_unknown_button_action_raises(action):
    with pytest.raises(ValueError):
        command_for_action(action)


def test_dispatch_covers_every_command():
    engine = CalculatorEngine()
    assert dispatch(engine, Command.DIGIT, "4") == "4"
    assert dispatch(engine, Command.DECIMAL_POINT) == "4."
    assert dispatch(engine, Command.DIGIT, "5") == "4.5"
    assert dispatch(engine, Command.TOGGLE_SIGN) == "-4.5"
    assert dispatch(engine, Command.BACKSPACE) == "-4."
    assert dispatch(engine, Command.OPERATOR, Operator.MULTIPLY) == "-4."
    assert dispatch(engine, Command.DIGIT, "2") == "2"
    assert dispatch(engine, Command.EQUALS) == "-8"
    assert dispatch(engine, Command.PERCENT) == "-0.08"
    assert dispatch(engine, Command.CLEAR) == "0"


def test_dispatch_rejects_unknown_command():
    with pytest.raises(ValueError):
        dispatch(CalculatorEngine(), "digit", "1")


def test_parse_script():
    assert parse_script("12 + 3=") == [
        (Command.DIGIT, "1"),
        (Command.DIGIT, "2"),
        (Command.OPERATOR, Operator.ADD),
        (Command.DIGIT, "3"),
        (Command.EQUALS, None),
    ]


def test_parse_script_extra_commands():
    assert parse_script("C~<") == [
        (Command.CLEAR, None),
        (Command.TOGGLE_SIGN, None),
        (Command.BACKSPACE, None),
    ]


def test_parse_script_rejects_unknown_characters():
    with pytest.raises(ValueError, match="posición 2"):
        parse_script("1+x")


def test_run_script_returns_display_after_each_command():
    assert run_script(CalculatorEngine(), "2+3*4=") == [
        "2", "2", "3", "5", "4", "20",
    ]


def test_keyboard_and_buttons_reach_same_state():
    by_keys = CalculatorEngine()
    for char in "9/4=":
        dispatch(by_keys, *command_for_key(char))

    by_buttons = CalculatorEngine()
    for action in ("digit:9", "op:/", "digit:4", "equals"):
        dispatch(by_buttons, *command_for_action(action))

    assert by_keys.snapshot() == by_buttons.snapshot()
    assert by_keys.display == "2.25"


def test_delete_key_removes_last_digit():
    engine = CalculatorEngine()
    run_script(engine, "123")
    assert dispatch(engine, *command_for_key("\x7f", "Delete")) == "12"
