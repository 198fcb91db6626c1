import curses

from modes import Insert
from sheet_model import column_name

TITLE = "vsheet :: Terminal Sheet"
ROW_HEADER_WIDTH = 5
TITLE_H = 1
HEADER_H = 1

# (role, fg field, bg field); pair numbers follow this order starting at 1
ROLES = (
    ("global", "global_fg", "global_bg"),
    ("cursor", "cursor_fg", "cursor_bg"),
    ("title", "title_fg", "title_bg"),
    ("header", "header_fg", "header_bg"),
    ("header_selected", "header_selected_fg", "header_selected_bg"),
    ("selected_cell", "selected_cell_fg", "selected_cell_bg"),
    ("selected_row", "selected_row_fg", "selected_row_bg"),
    ("selected_col", "selected_col_fg", "selected_col_bg"),
)
FIRST_CUSTOM_COLOR = 16

_BASIC_COLORS = (
    ((0, 0, 0), curses.COLOR_BLACK),
    ((205, 0, 0), curses.COLOR_RED),
    ((0, 205, 0), curses.COLOR_GREEN),
    ((205, 205, 0), curses.COLOR_YELLOW),
    ((0, 0, 238), curses.COLOR_BLUE),
    ((205, 0, 205), curses.COLOR_MAGENTA),
    ((0, 205, 205), curses.COLOR_CYAN),
    ((229, 229, 229), curses.COLOR_WHITE),
)


def nearest_basic_color(rgb):
    def dist(item):
        ref, _ = item
        return sum((a - b) ** 2 for a, b in zip(ref, rgb))

    return min(_BASIC_COLORS, key=dist)[1]


def grid_rows_for_height(height: int) -> int:
    return max(0, height - TITLE_H - HEADER_H)


def column_widths(width: int, visible_cols: int):
    """Split what is left of the row header evenly; leftover goes to the first columns."""
    avail = max(0, width - ROW_HEADER_WIDTH)
    if visible_cols <= 0 or avail == 0:
        return []
    base, extra = divmod(avail, visible_cols)
    return [base + (1 if i < extra else 0) for i in range(visible_cols)]


def caret_window(text: str, caret: int, width: int):
    """Slice of ``text`` that keeps ``caret`` on screen, plus caret offset in it."""
    if width <= 0:
        return "", 0
    caret = max(0, min(caret, len(text)))
    start = max(0, caret - width + 1)
    return text[start : start + width], caret - start


class GridPane:
    def __init__(self):
        self.attrs = {role: curses.A_NORMAL for role, _, _ in ROLES}
        self._theme = None

    # ---------- colors ----------
    def apply_theme(self, theme):
        if theme is self._theme:
            return
        self._theme = theme
        try:
            curses.start_color()
            custom = curses.can_change_color() and curses.COLORS >= FIRST_CUSTOM_COLOR + 2 * len(ROLES)
        except curses.error:
            return

        for idx, (role, fg_name, bg_name) in enumerate(ROLES):
            pair = idx + 1
            fg_rgb = getattr(theme, fg_name)
            bg_rgb = getattr(theme, bg_name)
            try:
                if custom:
                    fg = FIRST_CUSTOM_COLOR + 2 * idx
                    bg = fg + 1
                    curses.init_color(fg, *(v * 1000 // 255 for v in fg_rgb))
                    curses.init_color(bg, *(v * 1000 // 255 for v in bg_rgb))
                else:
                    fg = nearest_basic_color(fg_rgb)
                    bg = nearest_basic_color(bg_rgb)
                curses.init_pair(pair, fg, bg)
                self.attrs[role] = curses.color_pair(pair)
            except curses.error:
                self.attrs[role] = curses.A_NORMAL

    # ---------- rendering ----------
    def draw(self, win, editor):
        self.apply_theme(editor.theme)
        win.erase()
        try:
            win.bkgd(" ", self.attrs["global"])
        except curses.error:
            pass
        h, w = win.getmaxyx()

        rows_to_render = grid_rows_for_height(h)
        editor.visible_rows = rows_to_render

        self._put(win, 0, 0, TITLE.center(w), self.attrs["title"] | curses.A_BOLD)
        widths = column_widths(w, editor.visible_cols)
        if rows_to_render == 0 or not widths:
            win.noutrefresh()
            return

        self._draw_column_headers(win, editor, widths)
        for i in range(rows_to_render):
            self._draw_row(win, TITLE_H + HEADER_H + i, editor, editor.viewport.row + i, widths)
        win.noutrefresh()

    def _draw_column_headers(self, win, editor, widths):
        y = TITLE_H
        cursor, viewport = editor.cursor, editor.viewport
        corner = self.attrs["header_selected"] if editor.view.is_visible(cursor.row, cursor.col) else self.attrs["header"]
        self._put(win, y, 0, " " * ROW_HEADER_WIDTH, corner)

        x = ROW_HEADER_WIDTH
        for i, cw in enumerate(widths):
            col = viewport.col + i
            role = "header_selected" if col == cursor.col else "header"
            self._put(win, y, x, column_name(col)[:cw].center(cw), self.attrs[role])
            x += cw

    def _draw_row(self, win, y, editor, row, widths):
        cursor, viewport = editor.cursor, editor.viewport
        role = "header_selected" if row == cursor.row else "header"
        self._put(win, y, 0, str(row + 1)[:ROW_HEADER_WIDTH].center(ROW_HEADER_WIDTH), self.attrs[role])

        x = ROW_HEADER_WIDTH
        for i, cw in enumerate(widths):
            col = viewport.col + i
            if row == cursor.row and col == cursor.col:
                attr = self.attrs["selected_cell"]
            elif row == cursor.row:
                attr = self.attrs["selected_row"]
            elif col == cursor.col:
                attr = self.attrs["selected_col"]
            else:
                attr = self.attrs["global"]

            mode = editor.mode
            if isinstance(mode, Insert) and row == cursor.row and col == cursor.col:
                self._draw_caret_cell(win, y, x, cw, editor.cell_text(row, col), mode.caret, attr)
            else:
                self._put(win, y, x, editor.display_text(row, col)[:cw].ljust(cw), attr)
            x += cw

    def _draw_caret_cell(self, win, y, x, cw, text, caret, attr):
        visible, offset = caret_window(text, caret, cw)
        self._put(win, y, x, visible.ljust(cw), attr)
        under = visible[offset] if offset < len(visible) else " "
        self._put(win, y, x + offset, under, self.attrs["cursor"] | curses.A_REVERSE)

    @staticmethod
    def _put(win, y, x, text, attr):
        h, w = win.getmaxyx()
        if y >= h or x >= w:
            return
        try:
            win.addnstr(y, x, text, w - x, attr)
        except curses.error:
            # writing the bottom-right cell raises after the text is placed
            pass
