import logging
import os

import pandas as pd

from csv_codec import CsvCodec

logger = logging.getLogger(__name__)


class SaveError(Exception):
    """A save target that cannot be written for a reason other than I/O."""


class FileTypeHandler:
    """Picks the writer for a save path by its extension.

    CSV is the native format. ``.xlsx`` and ``.parquet`` go through pandas
    and need their optional engines installed.
    """

    SHEET_NAME = "Sheet1"
    EXCEL_MAX_ROWS = 1048576
    EXCEL_MAX_COLS = 16384

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

    def save(self, sheet, view) -> str:
        if self.ext == ".xlsx":
            self._ensure_excel_engine()
            self._write_excel(sheet.to_frame())
        elif self.ext == ".parquet":
            self._ensure_parquet_engine()
            self._write_parquet(sheet.to_frame())
        else:
            CsvCodec(sheet, view).save(self.path)
        logger.info("saved %s (%s)", self.path, self.ext or "csv")
        return self.path

    def _write_excel(self, df: pd.DataFrame):
        n_rows, n_cols = df.shape
        if n_rows > self.EXCEL_MAX_ROWS or n_cols > self.EXCEL_MAX_COLS:
            raise SaveError(
                f"sheet is {n_rows}x{n_cols}, xlsx allows at most "
                f"{self.EXCEL_MAX_ROWS}x{self.EXCEL_MAX_COLS}"
            )
        try:
            with pd.ExcelWriter(self.path, engine="openpyxl") as writer:
                df.to_excel(
                    writer, index=False, header=False, sheet_name=self.SHEET_NAME
                )
                # openpyxl turns "=..." strings into formulas; keep them as text
                for row in writer.sheets[self.SHEET_NAME].iter_rows():
                    for cell in row:
                        if cell.data_type == "f":
                            cell.data_type = "s"
        except ValueError as e:
            raise SaveError(str(e)) from e

    def _write_parquet(self, df: pd.DataFrame):
        try:
            df.to_parquet(self.path, index=False)
        except ValueError as e:
            raise SaveError(str(e)) from e

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401
        except ImportError:
            raise SaveError(
                "Parquet support requires pyarrow. Install via: pip install pyarrow"
            ) from None

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401
        except ImportError:
            raise SaveError(
                "XLSX support requires openpyxl. Install via: pip install openpyxl"
            ) from None
