import logging

logger = logging.getLogger(__name__)

_SPECIAL = (",", '"', "\n")


def escape(text: str) -> str:
    if any(ch in text for ch in _SPECIAL):
        return '"' + text.replace('"', '""') + '"'
    return text


class CsvCodec:
    """Serializes a SheetModel to CSV text."""

    def __init__(self, sheet, view):
        self.sheet = sheet
        self.view = view

    def row_to_line(self, row: int) -> str:
        last_col = self.sheet.max_col_in_row(row)
        return ",".join(
            escape(self.sheet.get((row, col))) for col in range(last_col + 1)
        )

    def last_row(self) -> int:
        if len(self.sheet) == 0:
            return self.view.cursor.row
        return self.sheet.max_row()

    def to_text(self) -> str:
        return "".join(
            self.row_to_line(row) + "\n" for row in range(self.last_row() + 1)
        )

    def save(self, path: str) -> str:
        # whole file rendered before the target is opened
        text = self.to_text()
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
        logger.info("wrote %d rows to %s", self.last_row() + 1, path)
        return path
