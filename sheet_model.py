from typing import Dict, Iterator, List, Tuple

import pandas as pd

CellAddress = Tuple[int, int]


def column_name(index: int) -> str:
    """Zero-based column index to spreadsheet letters (0 -> A, 26 -> AA)."""
    name = ""
    index += 1
    while index > 0:
        rem = (index - 1) % 26
        name = chr(ord("A") + rem) + name
        index = (index - 1) // 26
    return name


def cell_label(row: int, col: int) -> str:
    return f"{column_name(col)}{row + 1}"


class SheetModel:
    """Sparse grid of cell text keyed by (row, col).

    Empty text is never stored; writing "" drops the entry instead.
    """

    def __init__(self, cells=None):
        self._cells: Dict[CellAddress, str] = {}
        for address, text in (cells or {}).items():
            self.set(address, text)

    def get(self, address: CellAddress) -> str:
        return self._cells.get(address, "")

    def set(self, address: CellAddress, text: str) -> None:
        if text:
            self._cells[address] = text
        else:
            self._cells.pop(address, None)

    def remove(self, address: CellAddress) -> None:
        self._cells.pop(address, None)

    def max_row(self) -> int:
        return max((row for row, _ in self._cells), default=0)

    def max_col_in_row(self, row: int) -> int:
        return max((c for r, c in self._cells if r == row), default=0)

    def row_has_entries(self, row: int) -> bool:
        return any(r == row for r, _ in self._cells)

    def entries_in_row(self, row: int) -> Dict[int, str]:
        return {c: text for (r, c), text in self._cells.items() if r == row}

    def items(self) -> List[Tuple[CellAddress, str]]:
        return list(self._cells.items())

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, address) -> bool:
        return address in self._cells

    def __iter__(self) -> Iterator[CellAddress]:
        return iter(list(self._cells))

    # ---------- export ----------
    def to_frame(self) -> pd.DataFrame:
        """Dense DataFrame of the populated rectangle, labelled A, B, ..."""
        if not self._cells:
            return pd.DataFrame()
        n_rows = self.max_row() + 1
        n_cols = max(c for _, c in self._cells) + 1
        columns = [column_name(c) for c in range(n_cols)]
        df = pd.DataFrame("", index=range(n_rows), columns=columns, dtype=object)
        for (r, c), text in self._cells.items():
            df.iat[r, c] = text
        return df
