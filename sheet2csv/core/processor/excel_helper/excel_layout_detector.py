"""
Excel layout detection

Finds the area of a sheet that actually holds data (the bounding box of
its non-empty cells), so the grid readers never materialize the empty
margins Excel reports as part of a sheet's dimensions.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

logger = logging.getLogger("sheet-processor")

# Maximum rows/columns read from a single sheet (memory protection)
MAX_ROWS = 100000
MAX_COLS = 1000


@dataclass
class LayoutRange:
    """Layout range of a sheet (1-based, inclusive)."""
    min_row: int
    max_row: int
    min_col: int
    max_col: int

    def is_valid(self) -> bool:
        return (self.min_row > 0 and self.max_row > 0 and
                self.min_col > 0 and self.max_col > 0 and
                self.min_row <= self.max_row and
                self.min_col <= self.max_col)

    def row_count(self) -> int:
        return self.max_row - self.min_row + 1

    def col_count(self) -> int:
        return self.max_col - self.min_col + 1

    def cell_count(self) -> int:
        return self.row_count() * self.col_count()


def has_cell_value(value: Any) -> bool:
    """Whether a raw cell value carries text (None and "" do not)."""
    return value is not None and str(value) != ""


def _detect_range(rows: Iterable[Sequence[Any]]) -> Optional[LayoutRange]:
    # rows are enumerated from sheet row 1 / column 1
    min_row = max_row = min_col = max_col = None

    for row_idx, values in enumerate(rows, start=1):
        for col_idx, value in enumerate(values, start=1):
            if not has_cell_value(value):
                continue
            if min_row is None:
                min_row = row_idx
            max_row = row_idx
            if min_col is None or col_idx < min_col:
                min_col = col_idx
            if max_col is None or col_idx > max_col:
                max_col = col_idx

    if min_row is None:
        return None

    return LayoutRange(min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col)


def layout_detect_range_xlsx(
    ws,
    max_rows: int = MAX_ROWS,
    max_cols: int = MAX_COLS,
) -> Optional[LayoutRange]:
    """
    Detect the area holding data in an XLSX worksheet.

    Args:
        ws: openpyxl Worksheet object
        max_rows: Maximum number of rows to scan
        max_cols: Maximum number of columns to scan

    Returns:
        LayoutRange, or None if the sheet holds no data
    """
    if not ws.max_row or not ws.max_column:
        return None

    sheet_max_row = min(ws.max_row, max_rows)
    sheet_max_col = min(ws.max_column, max_cols)

    if ws.max_row > max_rows or ws.max_column > max_cols:
        logger.warning(
            f"Sheet '{ws.title}' exceeds {max_rows} rows / {max_cols} columns, "
            f"reading {sheet_max_row}x{sheet_max_col} cells only"
        )

    layout = _detect_range(
        ws.iter_rows(min_row=1, max_row=sheet_max_row, min_col=1,
                     max_col=sheet_max_col, values_only=True)
    )
    if layout is not None:
        logger.debug(
            f"Layout detected: rows {layout.min_row}-{layout.max_row}, "
            f"cols {layout.min_col}-{layout.max_col}"
        )
    return layout


def layout_detect_range_xls(
    sheet,
    max_rows: int = MAX_ROWS,
    max_cols: int = MAX_COLS,
) -> Optional[LayoutRange]:
    """
    Detect the area holding data in an XLS sheet.

    Args:
        sheet: xlrd Sheet object
        max_rows: Maximum number of rows to scan
        max_cols: Maximum number of columns to scan

    Returns:
        LayoutRange (1-based), or None if the sheet holds no data
    """
    if sheet.nrows == 0 or sheet.ncols == 0:
        return None

    sheet_max_row = min(sheet.nrows, max_rows)
    sheet_max_col = min(sheet.ncols, max_cols)

    if sheet.nrows > max_rows or sheet.ncols > max_cols:
        logger.warning(
            f"XLS sheet '{sheet.name}' exceeds {max_rows} rows / {max_cols} columns, "
            f"reading {sheet_max_row}x{sheet_max_col} cells only"
        )

    layout = _detect_range(
        sheet.row_values(row_idx, 0, sheet_max_col) for row_idx in range(sheet_max_row)
    )
    if layout is not None:
        logger.debug(
            f"XLS Layout detected: rows {layout.min_row}-{layout.max_row}, "
            f"cols {layout.min_col}-{layout.max_col}"
        )
    return layout
