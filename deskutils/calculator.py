"""Calculator logic: expression translation, evaluation and display state."""

from __future__ import annotations

import ast
import math
import re
from enum import Enum, auto
from typing import Any, Callable

BASIC_BUTTONS = (
    "7", "8", "9", "/",
    "4", "5", "6", "*",
    "1", "2", "3", "-",
    "0", ".", "=", "+",
)
ADVANCED_BUTTONS = ("sin", "cos", "tan", "log", "√", "^", "(", ")")
MODES = ("Basic", "Advanced")
KEY_CHARACTERS = "0123456789.+-*/()^"
FUNCTION_KEYS = {"c": "cos(", "s": "sin(", "t": "tan(", "l": "log("}
SYNTAX_ERROR = "Syntax Error"


class CalculatorError(ValueError):
    """The expression could not be evaluated."""


class Key(Enum):
    """Keys with a special meaning to the calculator."""

    RETURN = auto()
    ENTER = auto()
    BACKSPACE = auto()
    ESCAPE = auto()
    OTHER = auto()


_REPLACEMENTS = (
    ("cos", "Math.cos"),
    ("sin", "Math.sin"),
    ("tan", "Math.tan"),
    ("log", "Math.log"),
    ("√", "Math.sqrt"),
    ("^", "**"),
)
_DEGREE_FUNCTIONS = tuple(
    (re.compile(rf"Math\.{name}\(([^)]+)\)"), rf"Math.{name}(toRadians(\1))")
    for name in ("cos", "sin", "tan")
)
_LEADING_ZEROS = re.compile(r"(?<![\w.])0+(?=\d)")
_INCREMENT = re.compile(r"\+\+|--")


def translate_expression(text: str) -> str:
    """Rewrite calculator input into the evaluator's syntax, trig taking degrees."""
    for old, new in _REPLACEMENTS:
        text = text.replace(old, new)
    for pattern, replacement in _DEGREE_FUNCTIONS:
        text = pattern.sub(replacement, text)
    return text


def _nan_on_error(fn: Callable[[float], float]) -> Callable[[float], float]:
    def call(x: float) -> float:
        try:
            return fn(x)
        except ValueError:
            return math.nan
    return call


_NAMES: dict[str, Any] = {
    "Math.cos": _nan_on_error(math.cos),
    "Math.sin": _nan_on_error(math.sin),
    "Math.tan": _nan_on_error(math.tan),
    "Math.log": _nan_on_error(lambda x: -math.inf if x == 0 else math.log(x)),
    "Math.sqrt": _nan_on_error(math.sqrt),
    "Math.PI": math.pi,
    "toRadians": lambda deg: deg * math.pi / 180,
}


def _to_number(value: Any) -> float:
    return value if isinstance(value, float) else math.nan


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(base: float, exp: float) -> float:
    if math.isnan(exp):
        return math.nan
    if exp == 0:
        return 1.0
    if abs(base) == 1 and math.isinf(exp):
        return math.nan
    try:
        return math.pow(base, exp)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exp) else math.inf
    except ValueError:
        if base == 0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exp)
            return -math.inf if negative else math.inf
        return math.nan


_BINARY: dict[type, Callable[[float, float], float]] = {
    ast.Add: lambda a, b: a + b,
    ast.Sub: lambda a, b: a - b,
    ast.Mult: lambda a, b: a * b,
    ast.Div: _divide,
    ast.Pow: _power,
}


def _dotted(node: ast.expr) -> str:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return f"{_dotted(node.value)}.{node.attr}"
    raise CalculatorError("unsupported expression")


def _evaluate(node: ast.expr, source: bytes) -> Any:
    if isinstance(node, ast.Constant) and type(node.value) in (int, float):
        try:
            return float(node.value)
        except OverflowError:
            return math.inf
    if isinstance(node, (ast.Name, ast.Attribute)):
        name = _dotted(node)
        if name not in _NAMES:
            raise CalculatorError(f"{name} is not defined")
        return _NAMES[name]
    if isinstance(node, ast.UnaryOp) and isinstance(node.op, (ast.UAdd, ast.USub)):
        operand = node.operand
        if (
            isinstance(operand, ast.BinOp)
            and isinstance(operand.op, ast.Pow)
            and b"(" not in source[node.col_offset + 1:operand.col_offset]
        ):
            raise CalculatorError("unary operator before '**'")
        value = _to_number(_evaluate(operand, source))
        return -value if isinstance(node.op, ast.USub) else value
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY:
        left = _to_number(_evaluate(node.left, source))
        right = _to_number(_evaluate(node.right, source))
        return _BINARY[type(node.op)](left, right)
    if isinstance(node, ast.Call) and not node.keywords and len(node.args) <= 1:
        function = _evaluate(node.func, source)
        if not callable(function):
            raise CalculatorError("value is not a function")
        if not node.args:
            return math.nan
        return function(_to_number(_evaluate(node.args[0], source)))
    raise CalculatorError("unsupported expression")


def evaluate_expression(text: str) -> float:
    """Evaluate calculator input; trig functions take degrees.

    Raises CalculatorError for malformed input. Division by zero and
    out-of-domain functions give infinities or NaN rather than errors.
    """
    source = _LEADING_ZEROS.sub("", translate_expression(text)).strip()
    if not source:
        return math.nan
    if _INCREMENT.search(source):
        raise CalculatorError("invalid increment or decrement")
    try:
        tree = ast.parse(source, mode="eval")
    except (SyntaxError, ValueError) as exc:
        raise CalculatorError(str(exc)) from exc
    return _to_number(_evaluate(tree.body, source.encode()))


def format_result(value: float) -> str:
    """Format a result for display: near-zero as "0", else ten significant digits."""
    if abs(value + 1 - 1.0) * 1e12 <= min(abs(value + 1), 1.0):
        return "0"
    return f"{value:.10g}"


class CalculatorState:
    """The calculator display with its undo slot and mode."""

    def __init__(self) -> None:
        self.display = ""
        self.previous = ""
        self.advanced = False

    def press(self, label: str) -> None:
        """Handle a click on the button labelled *label*."""
        if label == "=":
            # The equals button is wired to two handlers, so a click evaluates twice.
            self.evaluate()
            self.evaluate()
        else:
            self.display += label

    def clear(self) -> None:
        """Empty the display, remembering its text for undo."""
        self.previous = self.display
        self.display = ""

    def undo(self) -> None:
        """Restore the text the display had before the last clear or evaluation."""
        self.display = self.previous

    def evaluate(self) -> None:
        """Replace the display with the value of its expression."""
        self.previous = self.display
        try:
            self.display = format_result(evaluate_expression(self.display))
        except CalculatorError:
            self.display = SYNTAX_ERROR

    def switch_mode(self, index: int) -> None:
        """Show the advanced buttons for mode 1, hide them otherwise."""
        self.advanced = index == 1

    def key_press(self, key: Key, text: str = "") -> bool:
        """Handle a key press; return False when the key is not the calculator's."""
        if key in (Key.RETURN, Key.ENTER):
            self.evaluate()
        elif key is Key.BACKSPACE:
            self.undo()
        elif key is Key.ESCAPE:
            self.clear()
        elif text in KEY_CHARACTERS:
            self.display += text
        elif text in FUNCTION_KEYS:
            self.display += FUNCTION_KEYS[text]
        else:
            return False
        return True