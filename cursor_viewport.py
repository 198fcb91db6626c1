from dataclasses import dataclass

from sheet_model import cell_label

DEFAULT_VISIBLE_ROWS = 12
DEFAULT_VISIBLE_COLS = 8


@dataclass
class Position:
    row: int = 0
    col: int = 0


def _apply_delta(value: int, delta: int) -> int:
    return max(0, value + delta)


def _clamp_origin(cursor: int, origin: int, visible: int) -> int:
    if cursor < origin:
        return cursor
    if visible <= 0:
        return cursor
    bottom_edge = origin + visible - 1
    if cursor > bottom_edge:
        return cursor + 1 - visible
    return origin


class CursorViewport:
    """Cursor position plus the top-left origin of the visible window."""

    def __init__(
        self,
        sheet,
        visible_rows: int = DEFAULT_VISIBLE_ROWS,
        visible_cols: int = DEFAULT_VISIBLE_COLS,
    ):
        self.sheet = sheet
        self.cursor = Position()
        self.viewport = Position()
        self.visible_rows = visible_rows
        self.visible_cols = visible_cols

    # ---------- navigation ----------
    def move_cursor(self, delta_col: int, delta_row: int) -> None:
        self.cursor.row = _apply_delta(self.cursor.row, delta_row)
        self.cursor.col = _apply_delta(self.cursor.col, delta_col)
        self.ensure_visible()

    def move_to(self, row: int, col: int) -> None:
        self.cursor.row = max(0, row)
        self.cursor.col = max(0, col)
        self.ensure_visible()

    def go_to_first_row(self) -> None:
        self.cursor.row = 0
        self.ensure_visible()

    def go_to_last_row_with_value(self) -> None:
        self.cursor.row = self.sheet.max_row()
        self.ensure_visible()

    def ensure_visible(self) -> None:
        # Moves the window the minimum needed; never moves the cursor.
        self.viewport.row = _clamp_origin(
            self.cursor.row, self.viewport.row, self.visible_rows
        )
        self.viewport.col = _clamp_origin(
            self.cursor.col, self.viewport.col, self.visible_cols
        )

    # ---------- queries ----------
    @property
    def address(self):
        return (self.cursor.row, self.cursor.col)

    def cell_label(self) -> str:
        return cell_label(self.cursor.row, self.cursor.col)

    def is_visible(self, row: int, col: int) -> bool:
        return (
            self.viewport.row <= row < self.viewport.row + self.visible_rows
            and self.viewport.col <= col < self.viewport.col + self.visible_cols
        )
