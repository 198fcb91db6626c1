import json
import logging
import os
from dataclasses import dataclass, fields

import config_paths

logger = logging.getLogger(__name__)


class ThemeError(Exception):
    pass


@dataclass
class Theme:
    global_fg: tuple = (255, 255, 255)
    global_bg: tuple = (18, 18, 18)
    cursor_fg: tuple = (158, 149, 199)
    cursor_bg: tuple = (18, 18, 18)
    title_fg: tuple = (158, 149, 199)
    title_bg: tuple = (18, 18, 18)
    header_fg: tuple = (255, 255, 255)
    header_bg: tuple = (18, 18, 18)
    header_selected_fg: tuple = (255, 255, 255)
    header_selected_bg: tuple = (70, 70, 70)
    selected_cell_fg: tuple = (0, 0, 0)
    selected_cell_bg: tuple = (255, 221, 51)
    selected_row_fg: tuple = (255, 255, 255)
    selected_row_bg: tuple = (32, 32, 32)
    selected_col_fg: tuple = (255, 255, 255)
    selected_col_bg: tuple = (32, 32, 32)

    @classmethod
    def from_config(cls, data):
        if not isinstance(data, dict):
            raise ThemeError("invalid theme json: expected an object")
        theme = cls()
        for f in fields(cls):
            if f.name not in data:
                continue
            setattr(theme, f.name, _parse_rgb(f.name, data[f.name]))
        return theme


def _parse_rgb(name, value):
    if (
        not isinstance(value, list)
        or len(value) != 3
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
        or not all(0 <= v <= 255 for v in value)
    ):
        raise ThemeError(f"invalid theme json: {name} must be [r, g, b] in 0..255")
    return tuple(value)


def themes_dir():
    return config_paths.THEMES_DIR


def normalize_theme_name(name: str) -> str:
    name = name.strip()
    if not name or name in (".", ".."):
        raise ThemeError("invalid theme name")
    if os.path.basename(name) != name or os.sep in name or "/" in name:
        raise ThemeError("theme name must be a file name")
    if name.endswith(".json"):
        return name
    return f"{name}.json"


def load_theme(name: str) -> Theme:
    path = os.path.join(themes_dir(), normalize_theme_name(name))
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as exc:
        raise ThemeError(f"unable to read {path}: {exc.strerror or exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ThemeError(f"invalid theme json: {exc}") from exc
    theme = Theme.from_config(data)
    logger.info("loaded theme %s", path)
    return theme


def list_themes():
    try:
        entries = os.listdir(themes_dir())
    except OSError as exc:
        raise ThemeError(f"unable to read themes dir: {exc.strerror or exc}") from exc
    return sorted(
        os.path.splitext(entry)[0] for entry in entries if entry.endswith(".json")
    )
