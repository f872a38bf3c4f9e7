"""Pruebas de la interfaz sin abrir ventanas: widgets sustituidos por dobles."""

import pytest

pytest.importorskip("tkinter")

from calculator_engine import CalculatorEngine  # noqa: E402
from calculator_ui import CalculatorApp, ResultDisplay  # noqa: E402


class _FakeVar:
    def __init__(self):
        self.v = ""

    def set(self, x):
        self.v = x

    def get(self):
        return self.v


class _FakeEntry:
    def after(self, _ms, fn=None):
        if fn:
            fn()

    def icursor(self, _):
        return None

    def xview_moveto(self, _):
        return None


class _FakeRoot:
    def __init__(self):
        self.clipboard = ""

    def clipboard_clear(self):
        self.clipboard = ""

    def clipboard_append(self, text):
        self.clipboard += text


class _DummyResultDisplay(ResultDisplay):
    def __init__(self):
        self._var = _FakeVar()
        self._entry = _FakeEntry()


class _DummyApp(CalculatorApp):
    def __init__(self):
        self.root = _FakeRoot()
        self.engine = CalculatorEngine()
        self.result_display = _DummyResultDisplay()


class _Event:
    def __init__(self, char, keysym):
        self.char = char
        self.keysym = keysym


def test_display_shows_text_verbatim():
    display = _DummyResultDisplay()
    display.set_text("0.30000")
    assert display.get_text() == "0.30000"


def test_buttons_drive_engine_and_display():
    app = _DummyApp()
    for action in ("digit:2", "op:+", "digit:3", "op:*", "digit:4", "equals"):
        app._on_button(action)
    assert app.result_display.get_text() == "20"


def test_keyboard_drives_engine_and_display():
    app = _DummyApp()
    events = [_Event("5", "5"), _Event("/", "slash"), _Event("0", "0"),
              _Event("\r", "Return")]
    results = [app._on_keypress(e) for e in events]
    assert results == ["break"] * 4
    assert app.result_display.get_text() == "Error"

    app._on_keypress(_Event("\x1b", "Escape"))
    assert app.result_display.get_text() == "0"


def test_unbound_key_is_ignored():
    app = _DummyApp()
    assert app._on_keypress(_Event("a", "a")) is None
    assert app.engine.display == "0"


def test_copy_result_uses_display_text():
    app = _DummyApp()
    app._on_button("digit:7")
    app._copy_result()
    assert app.root.clipboard == "7"


def test_keypad_actions_are_all_known():
    from input_adapters import command_for_action

    for row in CalculatorApp.KEYPAD:
        for _text, action, kind in row:
            command_for_action(action)
            assert kind in CalculatorApp.C


def test_keypad_rows_have_four_keys():
    assert {len(row) for row in CalculatorApp.KEYPAD} == {4}
