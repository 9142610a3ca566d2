"""Desktop calculator window with basic and advanced button pads."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from deskutils.calculator import ADVANCED_BUTTONS, BASIC_BUTTONS, MODES, CalculatorState, Key
from deskutils.themes import CALCULATOR_THEME

_SPECIAL_KEYS = {
    "Return": Key.RETURN,
    "KP_Enter": Key.ENTER,
    "BackSpace": Key.BACKSPACE,
    "Escape": Key.ESCAPE,
}


def translate_key(keysym: str, char: str) -> tuple[Key, str]:
    """Map a toolkit key symbol and its character to a calculator key and text."""
    return _SPECIAL_KEYS.get(keysym, Key.OTHER), char


class CalculatorApp:
    """Calculator window driving a CalculatorState."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self.state = CalculatorState()
        root.title("Calculator")
        theme = CALCULATOR_THEME
        root.configure(bg=theme.window_bg)
        for pattern, value in (
            ("*Background", theme.window_bg),
            ("*Foreground", theme.window_fg),
            ("*Entry.readonlyBackground", theme.text_bg),
            ("*Entry.Foreground", theme.text_fg),
            ("*Button.Background", theme.button_bg),
            ("*Button.Foreground", theme.button_fg),
            ("*selectBackground", theme.highlight),
        ):
            root.option_add(pattern, value)

        self._display_text = tk.StringVar(master=root)
        top = tk.Frame(root)
        top.grid(row=0, column=0, sticky="ew", padx=6, pady=(6, 2))
        tk.Button(top, text="Undo", command=lambda: self._run(self.state.undo)).pack(side="left")
        tk.Button(
            top, text="Clear", bg="red", fg="white", command=lambda: self._run(self.state.clear)
        ).pack(side="right")
        self._mode = ttk.Combobox(top, values=MODES, state="readonly", width=10)
        self._mode.current(0)
        self._mode.bind("<<ComboboxSelected>>", lambda _e: self.switch_mode(self._mode.current()))
        self._mode.pack(side="right", padx=4)

        tk.Entry(
            root, textvariable=self._display_text, state="readonly",
            justify="right", font=("Helvetica", -18),
        ).grid(row=1, column=0, sticky="ew", padx=6, pady=2, ipady=6)

        basic = tk.Frame(root)
        basic.grid(row=2, column=0, padx=6, pady=2)
        self._advanced = tk.Frame(root)
        self._advanced.grid(row=3, column=0, padx=6, pady=(2, 6))
        for parent, labels in ((basic, BASIC_BUTTONS), (self._advanced, ADVANCED_BUTTONS)):
            for index, label in enumerate(labels):
                colours = {"bg": "green", "fg": "white"} if label == "=" else {}
                row, column = divmod(index, 4)
                tk.Button(
                    parent, text=label, width=5, height=2,
                    command=lambda text=label: self.on_button(text), **colours,
                ).grid(row=row, column=column, padx=1, pady=1)
        self._advanced.grid_remove()

        root.bind("<Key>", self.on_key)

    def _run(self, action: Callable[[], object]) -> None:
        action()
        self._display_text.set(self.state.display)

    def on_button(self, label: str) -> None:
        """Handle a click on the pad button labelled *label*."""
        self._run(lambda: self.state.press(label))

    def on_key(self, event: tk.Event) -> Optional[str]:
        """Handle a key press; stop further handling when the calculator used it."""
        handled = self.state.key_press(*translate_key(event.keysym, event.char))
        self._display_text.set(self.state.display)
        return "break" if handled else None

    def switch_mode(self, index: int) -> None:
        """Show the advanced pad for mode 1, hide it otherwise."""
        self.state.switch_mode(index)
        if self.state.advanced:
            self._advanced.grid()
        else:
            self._advanced.grid_remove()


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(prog="calcapp", description="A desktop calculator.").parse_args(argv)
    root = tk.Tk()
    CalculatorApp(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())