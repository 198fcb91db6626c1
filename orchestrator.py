import curses
import logging

from grid_pane import GridPane
from key_event import RESIZE, from_curses
from screen_layout import ScreenLayout
from status_bar import draw_status

logger = logging.getLogger(__name__)


class Orchestrator:
    """Curses event loop: draw, read one key, hand it to the editor."""

    def __init__(self, stdscr, editor):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        # raw mode so Ctrl+S / Ctrl+Q / Ctrl+C reach the editor as keys
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)

        self.editor = editor
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()

    # ---------------- UI ----------------

    def _relayout(self):
        try:
            curses.update_lines_cols()
        except AttributeError:
            pass
        self.stdscr.clear()
        self.stdscr.noutrefresh()
        self.layout = ScreenLayout(self.stdscr)

    def redraw(self):
        if self.layout.grid_win is not None:
            self.grid.draw(self.layout.grid_win, self.editor)
        if self.layout.footer_win is not None:
            draw_status(self.layout.footer_win, self.editor, self.grid.attrs["global"])
        curses.doupdate()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while self.editor.running:
            try:
                wch = self.stdscr.get_wch()
            except curses.error:
                continue

            event = from_curses(wch)
            if event is None:
                continue

            if event.key == RESIZE:
                self._relayout()
            else:
                self.editor.handle_event(event)

            self.redraw()
        logger.info("event loop finished")
