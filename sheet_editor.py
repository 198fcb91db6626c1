import logging

from clipboard import Clipboard
from command_executor import CommandExecutor
from csv_codec import escape
from cursor_viewport import DEFAULT_VISIBLE_COLS, CursorViewport
from file_type_handler import FileTypeHandler, SaveError
from key_event import BACKSPACE, DELETE, DOWN, ENTER, ESC, LEFT, RIGHT, UP
from modes import Command, Insert, Normal
from row_mutator import RowMutator
from sheet_model import SheetModel
from theme import Theme

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "Untitled.csv"
ERROR_TOKEN = "#NAME?"
WORD_JUMP = 5
PENDING_PREFIXES = ("g", "d", "y")


class SheetEditor:
    """Modal controller: owns the sheet, cursor, clipboard and mode.

    One KeyEvent at a time goes through ``handle_event``; the renderer
    reads the resulting state back between events.
    """

    def __init__(self, file_name=None, config=None, theme=None, file_handler_cls=None):
        cfg = config or {}
        self.sheet = SheetModel()
        self.view = CursorViewport(
            self.sheet, visible_cols=cfg.get("VISIBLE_COLS", DEFAULT_VISIBLE_COLS)
        )
        self.rows = RowMutator(self.sheet, self.view)
        self.clipboard = Clipboard(cfg.get("CLIPBOARD_INTERFACE_COMMAND"))
        self.exec = CommandExecutor(self)
        self.file_handler_cls = file_handler_cls or FileTypeHandler

        self.mode = Normal()
        self.command_buffer = ""
        self.file_name = file_name or DEFAULT_FILE_NAME
        self.theme = theme or Theme()
        self.running = True

    # ---------- renderer-facing state ----------
    @property
    def cursor(self):
        return self.view.cursor

    @property
    def viewport(self):
        return self.view.viewport

    @property
    def visible_rows(self):
        return self.view.visible_rows

    @visible_rows.setter
    def visible_rows(self, value):
        self.view.visible_rows = max(0, value)

    @property
    def visible_cols(self):
        return self.view.visible_cols

    @visible_cols.setter
    def visible_cols(self, value):
        self.view.visible_cols = max(0, value)

    def cell_text(self, row, col):
        return self.sheet.get((row, col))

    def display_text(self, row, col):
        value = self.sheet.get((row, col))
        if value.startswith("="):
            return ERROR_TOKEN
        return value

    def set_status(self, msg):
        self.command_buffer = msg

    # ---------- actions ----------
    def quit(self):
        self.running = False

    def save(self, path=None):
        target = path or self.file_name
        try:
            written = self.file_handler_cls(target).save(self.sheet, self.view)
        except (OSError, SaveError) as e:
            logger.error("save to %s failed: %s", target, e)
            self.set_status(f"Save failed: {e}")
            return False
        self.file_name = written
        self.set_status(f"Saved {written}")
        return True

    def yank_cell(self):
        text = escape(self.sheet.get(self.view.address))
        self.clipboard.copy(text)
        self.set_status(f"Yanked: {text}")

    def paste_cell(self):
        value = self.clipboard.paste()
        if value is None:
            self.set_status("Clipboard empty")
            return
        # stores the clipboard text as-is, quotes from yank included
        self.sheet.set(self.view.address, value)
        self.set_status("Pasted")

    # ---------- dispatch ----------
    def handle_event(self, event):
        if event.ctrl and event.key.lower() in ("s", "q", "c"):
            if event.key.lower() == "s":
                self.save()
            else:
                self.quit()
            return

        if isinstance(self.mode, Insert):
            self._handle_insert(event)
        elif isinstance(self.mode, Command):
            self._handle_command(event)
        else:
            self._handle_normal(event)

    # ---------- normal mode ----------
    def _handle_normal(self, event):
        pending = self.command_buffer if self.command_buffer in PENDING_PREFIXES else None
        self.command_buffer = ""
        if event.ctrl:
            return

        key = event.key
        view = self.view
        if key in (LEFT, "h"):
            view.move_cursor(-1, 0)
        elif key in (RIGHT, "l"):
            view.move_cursor(1, 0)
        elif key in (DOWN, "j", ENTER):
            view.move_cursor(0, 1)
        elif key in (UP, "k"):
            view.move_cursor(0, -1)
        elif key == "b":
            view.move_cursor(-WORD_JUMP, 0)
        elif key == "w":
            view.move_cursor(WORD_JUMP, 0)
        elif key == "G":
            view.go_to_last_row_with_value()
        elif key == "g":
            if pending == "g":
                view.go_to_first_row()
            else:
                self.command_buffer = "g"
        elif key == "d":
            if pending == "d":
                self.rows.delete_current_row()
            else:
                self.command_buffer = "d"
        elif key == "y":
            if pending == "y":
                self.yank_cell()
            else:
                self.command_buffer = "y"
        elif key == "p":
            self.paste_cell()
        elif key == "o":
            self.rows.insert_row_below()
            self.mode = Insert(0)
        elif key == "O":
            self.rows.insert_row_above()
            self.mode = Insert(0)
        elif key == "i":
            self.mode = Insert(0)
        elif key == "a":
            self.mode = Insert(len(self.sheet.get(view.address)))
        elif key == ":":
            self.mode = Command()

    # ---------- insert mode ----------
    def _handle_insert(self, event):
        if event.ctrl:
            return

        key = event.key
        if key == ESC:
            self.mode = Normal()
            return
        if key == ENTER:
            self.mode = Normal()
            self.view.move_cursor(0, 1)
            return

        address = self.view.address
        text = self.sheet.get(address)
        caret = min(self.mode.caret, len(text))

        if key == LEFT:
            caret = max(0, caret - 1)
        elif key == RIGHT:
            caret = min(len(text), caret + 1)
        elif key == BACKSPACE:
            if caret > 0:
                self.sheet.set(address, text[: caret - 1] + text[caret:])
                caret -= 1
        elif key == DELETE:
            if caret < len(text):
                self.sheet.set(address, text[:caret] + text[caret + 1 :])
        elif event.is_char and key.isprintable():
            self.sheet.set(address, text[:caret] + key + text[caret:])
            caret += 1
        self.mode.caret = caret

    # ---------- command mode ----------
    def _handle_command(self, event):
        if event.ctrl:
            return

        key = event.key
        if key == ESC:
            self.command_buffer = ""
            self.mode = Normal()
        elif key == ENTER:
            line = self.command_buffer
            self.command_buffer = ""
            self.mode = Normal()
            self.exec.execute(line)
        elif key in (BACKSPACE, DELETE):
            self.command_buffer = self.command_buffer[:-1]
        elif event.is_char and key.isprintable():
            self.command_buffer += key
