"""Desktop hex dump viewer with a persistent light/dark theme."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog
from typing import Optional, Union

from deskutils.hexdump import Segment, Style, hexdump_segments, read_dump_source
from deskutils.themes import SettingsStore, theme_for

log = logging.getLogger(__name__)


def load_dump(path: Union[str, Path]) -> list[Segment]:
    """Read at most the first megabyte of *path* and return its dump segments."""
    return list(hexdump_segments(read_dump_source(path)))


class HexDumpApp:
    """Main window holding a hex dump panel, a View menu and saved layout."""

    def __init__(self, root: tk.Misc, settings: Optional[SettingsStore] = None) -> None:
        self.root = root
        self.settings = settings or SettingsStore(
            Path.home() / ".config" / "deskutils" / "hexapp.json"
        )
        root.title("Dockable Hex Dump App")
        root.geometry("800x600")

        self._dark = tk.BooleanVar(master=root, value=bool(self.settings.get("darkTheme", True)))
        self._menubar = tk.Menu(root)
        self._view_menu = tk.Menu(self._menubar, tearoff=False)
        self._view_menu.add_checkbutton(
            label="Toggle Dark Theme", variable=self._dark, command=self._on_toggle_theme
        )
        self._menubar.add_cascade(label="View", menu=self._view_menu)
        root.configure(menu=self._menubar)

        self._frame = tk.LabelFrame(root, text="Hex Dump", padx=4, pady=4)
        self._frame.pack(side="left", fill="both", expand=True)
        self._button = tk.Button(self._frame, text="Open File", command=self.open_file)
        self._button.pack(side="top", fill="x")
        self._text = tk.Text(self._frame, wrap="none", state="disabled")
        self._text.pack(side="top", fill="both", expand=True)
        for style in Style:
            if style.color:
                self._text.tag_configure(style.value, foreground=style.color)

        self.apply_theme(self._dark.get())
        geometry = self.settings.get("geometry")
        if isinstance(geometry, str) and geometry:
            try:
                root.geometry(geometry)
            except tk.TclError as exc:
                log.warning("Ignoring saved geometry %r: %s", geometry, exc)
        root.protocol("WM_DELETE_WINDOW", self.on_close)

    def _on_toggle_theme(self) -> None:
        dark = self._dark.get()
        self.apply_theme(dark)
        self.settings.set("darkTheme", dark)

    def apply_theme(self, dark: bool) -> None:
        """Colour the window with the dark theme, or restore the default look."""
        theme = theme_for(dark)
        font = (theme.font_family, -(theme.font_size or 13)) if theme.font_family else None
        settings = {
            self.root: {"bg": theme.window_bg},
            self._frame: {"bg": theme.window_bg, "fg": theme.window_fg},
            self._button: {"bg": theme.window_bg, "fg": theme.window_fg, "font": font},
            self._text: {
                "bg": theme.text_bg, "fg": theme.text_fg, "insertbackground": theme.text_fg,
                "padx": theme.text_padding, "pady": theme.text_padding,
                "highlightbackground": theme.border_color, "font": font,
            },
        }
        for menu in (self._menubar, self._view_menu):
            settings[menu] = {
                "bg": theme.menu_bg, "fg": theme.menu_fg,
                "activebackground": theme.menu_selected_bg,
            }
        for widget, options in settings.items():
            for option, value in options.items():
                if value is None or value == "":
                    value = widget.configure(option)[3]  # the option's default
                widget.configure({option: value})

    def open_file(self) -> None:
        """Ask for a file and show its dump."""
        path = filedialog.askopenfilename(parent=self.root, title="Open File")
        if not path:
            log.info("No file selected.")
            return
        self.load_file(path)

    def load_file(self, path: Union[str, Path]) -> bool:
        """Show the dump of *path*; return False when it cannot be read."""
        try:
            data = read_dump_source(path)
        except OSError as exc:
            log.error("Failed to open file %s: %s", path, exc)
            return False
        self.render(data)
        return True

    def render(self, data: bytes) -> None:
        """Replace the panel's contents with the dump of *data*."""
        self._text.configure(state="normal")
        self._text.delete("1.0", "end")
        for segment in hexdump_segments(data):
            tags = (segment.style.value,) if segment.style.color else ()
            self._text.insert("end", segment.text, tags)
        self._text.configure(state="disabled")
        self._text.yview_moveto(0)

    def on_close(self) -> None:
        """Save the window geometry and close the window."""
        self.settings.set("geometry", self.root.geometry())
        self.root.destroy()


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(prog="hexapp", description="Show a hex dump of a file.").parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    root = tk.Tk()
    HexDumpApp(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())