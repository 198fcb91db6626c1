import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "vsheet")
THEMES_DIR = os.path.join(CONFIG_DIR, "themes")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "vsheet.log")

# default settings
VISIBLE_COLS_DEFAULT = 8
THEME_DEFAULT = None
CLIPBOARD_INTERFACE_COMMAND_DEFAULT = None

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)
    os.makedirs(THEMES_DIR, exist_ok=True)


def setup_logging(level=logging.INFO):
    """Route the app loggers to LOG_PATH; curses owns the terminal."""
    logger = logging.getLogger()
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return logger
    try:
        file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return logger
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.setLevel(level)
    logger.addHandler(file_handler)
    return logger


def load_config():
    cfg = {
        "VISIBLE_COLS": VISIBLE_COLS_DEFAULT,
        "THEME": THEME_DEFAULT,
        "CLIPBOARD_INTERFACE_COMMAND": CLIPBOARD_INTERFACE_COMMAND_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logging.getLogger(__name__).warning("ignoring %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    cols = data.get("visible_cols")
    if isinstance(cols, int) and not isinstance(cols, bool) and cols >= 1:
        cfg["VISIBLE_COLS"] = cols

    theme = data.get("theme")
    if isinstance(theme, str) and theme.strip():
        cfg["THEME"] = theme.strip()

    clip_cmd = data.get("clipboard_interface_command")
    if isinstance(clip_cmd, list) and clip_cmd and all(
        isinstance(item, str) for item in clip_cmd
    ):
        cfg["CLIPBOARD_INTERFACE_COMMAND"] = clip_cmd

    return cfg
