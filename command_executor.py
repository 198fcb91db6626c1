import logging

from cursor_viewport import DEFAULT_VISIBLE_COLS
from theme import ThemeError, list_themes, load_theme

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs a ``:`` command line against a SheetEditor.

    Every outcome, including failures, is reported through the editor's
    status line; nothing is raised to the caller.
    """

    def __init__(self, editor):
        self.editor = editor
        self._commands = {
            "w": self._write,
            "write": self._write,
            "q": self._quit,
            "quit": self._quit,
            "wq": self._write_quit,
            "cols": self._cols,
            "theme": self._theme,
        }

    def execute(self, line: str) -> None:
        parts = line.split(None, 1)
        if not parts:
            return
        name = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ""
        handler = self._commands.get(name)
        if handler is None:
            logger.info("unknown command %r", line)
            self.editor.set_status(f"Unknown command: {name}")
            return
        logger.debug("command %s %r", name, rest)
        handler(rest)

    # ---------- commands ----------
    def _write(self, arg):
        self.editor.save(arg or None)

    def _quit(self, _arg):
        self.editor.quit()

    def _write_quit(self, _arg):
        if self.editor.save():
            self.editor.quit()

    def _cols(self, arg):
        if not arg:
            count = DEFAULT_VISIBLE_COLS
        else:
            try:
                count = int(arg)
            except ValueError:
                return
            if count < 1:
                return
        self.editor.visible_cols = count
        self.editor.view.ensure_visible()

    def _theme(self, arg):
        if not arg:
            try:
                names = list_themes()
            except ThemeError as e:
                self.editor.set_status(str(e))
                return
            if names:
                self.editor.set_status("Themes: " + ", ".join(names))
            else:
                self.editor.set_status("No themes found")
            return

        try:
            self.editor.theme = load_theme(arg)
        except ThemeError as e:
            logger.warning("theme %s: %s", arg, e)
            self.editor.set_status(str(e))
            return
        self.editor.set_status(f"Theme set to {arg}")
