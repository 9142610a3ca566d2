# deskutils

A few small desktop utilities, each built on a plain Python core that can
also be used without a window.

## Installing

```
pip install .
```

The graphical tools use Tkinter, which ships with most Python installations.
The package has no other dependencies.

## Hex dump viewer

```
deskutils-hexdump
```

This command opens a window titled "Dockable Hex Dump App". Its "Hex Dump" panel
has an "Open File" button. The chosen file is shown as a classic hex dump.
Each line has an eight-digit upper-case offset, up to sixteen bytes in
upper-case hex and their printable ASCII characters. Other bytes appear as `.`.
Only the first megabyte (1 MiB) of a larger file is shown.

The "View" menu has a "Toggle Dark Theme" check item. The theme choice and the
window geometry are saved in `~/.config/deskutils/hexapp.json` and restored on
the next run. The dark theme is the default.

The formatting is available on its own in `deskutils.hexdump`:

```python
from deskutils.hexdump import format_hexdump

print(format_hexdump(b"Hello, world!\x00\x01"))
```

- `format_hexdump(data)` returns the dump as plain text, one line per 16 bytes.
- `hexdump_segments(data)` yields the same dump as `Segment` pieces. Each piece
  has a `text` and a `Style`: `OFFSET`, `HEX`, `ASCII` or `PLAIN`.
  `Style.color` gives the foreground colour of a style, or `None` for the
  default colour.
- `read_dump_source(path)` reads a file and keeps at most its first megabyte.

`deskutils.hexapp.load_dump(path)` reads a file and returns its segments as a
list.

### Themes and settings

`deskutils.themes` provides the colour themes:

- `theme_for(dark)` returns the dark or the light `Theme`.
- `SettingsStore(path)` is a small JSON-backed key/value store. It has
  `get(key, default)` and `set(key, value)`, and `set` writes the file at once.

## Calculator

```
deskutils-calc
```

This command opens a calculator with a basic keypad. Its "Advanced" mode adds
sin, cos, tan, log, √, ^ and parentheses. Trigonometric functions take degrees.
`log` is the natural logarithm.

The keyboard works as follows:

- Enter evaluates the expression.
- Escape clears the display.
- Backspace is undo. It restores the text the display had before the last
  clear or evaluation, and does not delete a single character.
- Digits and `. + - * / ( ) ^` are typed as they are.
- `c`, `s`, `t` and `l` type `cos(`, `sin(`, `tan(` and `log(`.

The engine in `deskutils.calculator` works without a window:

```python
from deskutils.calculator import CalculatorState, evaluate_expression

print(evaluate_expression("2^10"))   # 1024.0

calc = CalculatorState()
for label in ["s", "i", "n", "(", "3", "0", ")"]:
    calc.press(label)
calc.evaluate()
print(calc.display)                  # 0.5
```

### Functions

- `translate_expression(text)` rewrites the input into the evaluator's syntax.
- `evaluate_expression(text)` returns a float. It raises `CalculatorError` for
  malformed input. Division by zero and out-of-domain values give infinities or
  NaN.
- `format_result(value)` shows values very close to zero as `0`. Other values
  are shown with ten significant digits.

### CalculatorState

`CalculatorState` holds the display text and the undo text. Its
`switch_mode(index)` method sets `advanced`.

In `press(label)`, the `=` label evaluates twice. As a result, undo after `=`
gives back the first result rather than the expression.

`key_press(key, text)` takes a `Key` and returns `False` for keys the
calculator does not use. Expressions that cannot be evaluated show
`Syntax Error`.

## Disassembly highlighting

`deskutils.highlight.highlight_line(text)` splits one line of disassembly, such
as `0x1000: mov\trax, 0x10`, into `Span`s. Each span has `start`, `length`,
`end` and its `Rule`. The rules in `RULES` cover addresses, mnemonics,
registers, numbers and comments. They are applied in that order, so later spans
take precedence where they overlap.

`join_instructions(instructions)` joins a list of lines into one listing.

## What is not included

The package does not disassemble machine code, and it has no disassembly
viewer window or command. It only highlights lines of disassembly text that it
is given.

## Tests

```
pip install .[test]
pytest
```