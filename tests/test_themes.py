import json

from deskutils.themes import (
    CALCULATOR_THEME,
    DARK_THEME,
    LIGHT_THEME,
    SettingsStore,
    theme_for,
)


def test_theme_for_dark():
    theme = theme_for(True)
    assert theme is DARK_THEME
    assert theme.window_bg == "#1e1e1e"
    assert theme.text_fg == "#00ffcc"


def test_theme_for_light_uses_defaults():
    theme = theme_for(False)
    assert theme is LIGHT_THEME
    assert theme.window_bg is None
    assert theme.text_bg is None
    assert theme.name == "light"


def test_calculator_theme_is_separate_and_consistent():
    dark = theme_for(True)
    light = theme_for(False)
    assert dark.window_bg == "#1e1e1e"
    assert light.window_bg is None
    assert CALCULATOR_THEME.window_bg not in (dark.window_bg, light.window_bg)
    assert CALCULATOR_THEME.window_bg == CALCULATOR_THEME.button_bg
    assert CALCULATOR_THEME.text_fg == CALCULATOR_THEME.button_fg


def test_missing_key_returns_default(tmp_path):
    store = SettingsStore(tmp_path / "settings.json")
    assert store.get("darkTheme", True) is True
    assert store.get("geometry") is None


def test_set_persists_across_instances(tmp_path):
    path = tmp_path / "settings.json"
    SettingsStore(path).set("darkTheme", False)
    assert SettingsStore(path).get("darkTheme", True) is False


def test_set_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "settings.json"
    store = SettingsStore(path)
    store.set("state", [1, 2, 3])
    assert json.loads(path.read_text(encoding="utf-8")) == {"state": [1, 2, 3]}


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    store = SettingsStore(path)
    assert store.get("darkTheme", True) is True


def test_non_object_file_is_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert SettingsStore(path).get("darkTheme", False) is False


def test_set_keeps_other_keys(tmp_path):
    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    store.set("a", 1)
    store.set("b", "two")
    reloaded = SettingsStore(path)
    assert reloaded.get("a") == 1
    assert reloaded.get("b") == "two"