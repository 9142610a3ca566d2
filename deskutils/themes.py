"""Colour themes and a small persistent key/value settings store."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """A set of colours and fonts; None means the toolkit default."""

    name: str
    window_bg: str | None = None
    window_fg: str | None = None
    text_bg: str | None = None
    text_fg: str | None = None
    text_padding: int | None = None
    border_color: str | None = None
    menu_bg: str | None = None
    menu_fg: str | None = None
    menu_selected_bg: str | None = None
    button_bg: str | None = None
    button_fg: str | None = None
    highlight: str | None = None
    font_family: str | None = None
    font_size: int | None = None


DARK_THEME = Theme(
    name="dark",
    window_bg="#1e1e1e",
    window_fg="#dcdcdc",
    text_bg="#2d2d2d",
    text_fg="#00ffcc",
    text_padding=8,
    border_color="#444",
    menu_bg="#222",
    menu_fg="#fff",
    menu_selected_bg="#444",
    font_family="Consolas",
    font_size=13,
)

LIGHT_THEME = Theme(name="light")

CALCULATOR_THEME = Theme(
    name="calculator",
    window_bg="#353535",
    window_fg="#ffffff",
    text_bg="#191919",
    text_fg="#ffffff",
    button_bg="#353535",
    button_fg="#ffffff",
    # A lightened shade of rgb(142, 45, 197).
    highlight="#c663ff",
)


def theme_for(dark: bool) -> Theme:
    """Return the dark theme when *dark* is true, otherwise the default light one."""
    return DARK_THEME if dark else LIGHT_THEME


class SettingsStore:
    """Settings kept as a JSON object in a file, written on every change."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._values: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            log.warning("Ignoring settings file %s: not an object", self.path)
            return {}
        return raw

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for *key*, or *default* when there is none."""
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key* and save the file."""
        self._values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temporary = self.path.with_name(self.path.name + ".tmp")
        temporary.write_text(
            json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8"
        )
        os.replace(temporary, self.path)