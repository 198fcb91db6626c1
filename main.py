import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
import curses

import config_paths
from orchestrator import Orchestrator
from sheet_editor import SheetEditor
from theme import ThemeError, load_theme

from _version import __version__

USAGE = "vsheet - modal terminal spreadsheet editor\n\nUsage:\n  vsheet [path]\n  vsheet -v\n"

logger = logging.getLogger(__name__)


def build_editor(path=None):
    cfg = config_paths.load_config()
    editor = SheetEditor(file_name=path, config=cfg)
    theme_name = cfg.get("THEME")
    if theme_name:
        try:
            editor.theme = load_theme(theme_name)
        except ThemeError as e:
            logger.warning("startup theme %s: %s", theme_name, e)
            editor.set_status(str(e))
    return editor


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args or len(args) > 1:
        print(USAGE)
        return 0 if len(args) <= 1 else 2

    try:
        config_paths.ensure_config_dirs()
    except OSError as e:
        print(f"vsheet: cannot create {config_paths.CONFIG_DIR}: {e}", file=sys.stderr)
    config_paths.setup_logging()

    path = args[0] if args else None
    editor = build_editor(path)
    logger.info("starting on %s", editor.file_name)

    def curses_main(stdscr):
        Orchestrator(stdscr, editor).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
