import logging

logger = logging.getLogger(__name__)


class RowMutator:
    """Whole-row insertion and deletion over a SheetModel.

    Shifted entries are collected first and moved in an order where no
    destination is still occupied by an entry that has not moved yet.
    """

    def __init__(self, sheet, view):
        self.sheet = sheet
        self.view = view

    def insert_row_at(self, row: int) -> None:
        moved = sorted(
            ((address, text) for address, text in self.sheet.items() if address[0] >= row),
            key=lambda item: item[0],
            reverse=True,
        )
        for (r, c), text in moved:
            self.sheet.remove((r, c))
            self.sheet.set((r + 1, c), text)
        logger.debug("inserted row %d, shifted %d cells", row, len(moved))

    def delete_row(self, row: int) -> None:
        for address in [a for a in self.sheet if a[0] == row]:
            self.sheet.remove(address)
        moved = sorted(
            (address, text) for address, text in self.sheet.items() if address[0] > row
        )
        for (r, c), text in moved:
            self.sheet.remove((r, c))
            self.sheet.set((r - 1, c), text)
        logger.debug("deleted row %d, shifted %d cells", row, len(moved))

    def delete_current_row(self) -> None:
        cursor = self.view.cursor
        self.delete_row(cursor.row)
        if cursor.row > self.sheet.max_row() and cursor.row > 0:
            cursor.row -= 1
        self.view.ensure_visible()

    def insert_row_above(self) -> None:
        row = self.view.cursor.row
        self.insert_row_at(row)
        self.view.move_to(row, 0)

    def insert_row_below(self) -> None:
        row = self.view.cursor.row + 1
        self.insert_row_at(row)
        self.view.move_to(row, 0)
