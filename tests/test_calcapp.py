import pytest

from deskutils.calcapp import translate_key
from deskutils.calculator import (
    CalculatorState,
    Key,
    evaluate_expression,
    format_result,
)


@pytest.mark.parametrize(
    "keysym, char, expected",
    [
        ("Return", "\r", Key.RETURN),
        ("KP_Enter", "\r", Key.ENTER),
        ("BackSpace", "\b", Key.BACKSPACE),
        ("Escape", "\x1b", Key.ESCAPE),
        ("a", "a", Key.OTHER),
        ("7", "7", Key.OTHER),
    ],
)
def test_translate_key_maps_keysyms(keysym, char, expected):
    assert translate_key(keysym, char) == (expected, char)


def _type(state, keys):
    for keysym, char in keys:
        state.key_press(*translate_key(keysym, char))


def test_typed_expression_evaluates_on_return():
    state = CalculatorState()
    _type(state, [("2", "2"), ("asciicircum", "^"), ("3", "3"), ("Return", "\r")])
    assert state.display == format_result(evaluate_expression("2^3"))


def test_backspace_after_return_restores_expression():
    state = CalculatorState()
    _type(state, [("1", "1"), ("plus", "+"), ("2", "2"), ("KP_Enter", "\r")])
    _type(state, [("BackSpace", "\b")])
    assert state.display == "1+2"


def test_escape_clears_display():
    state = CalculatorState()
    _type(state, [("9", "9"), ("Escape", "\x1b")])
    assert state.display == ""
    assert state.previous == "9"


def test_function_letter_inserts_call():
    state = CalculatorState()
    _type(state, [("s", "s")])
    assert state.display == "sin("


def test_unknown_key_is_not_handled():
    state = CalculatorState()
    assert state.key_press(*translate_key("z", "z")) is False
    assert state.display == ""