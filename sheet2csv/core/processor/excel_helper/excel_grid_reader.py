"""
Excel grid reader

Reads the cell text of one sheet into a Grid[str]. Cells without text
become None, so blank cells are "empty" for the partitioner.
"""

import datetime
import logging
from typing import Any, List, Optional

import xlrd

from sheet2csv.core.processor.excel_helper.excel_layout_detector import (
    MAX_COLS,
    MAX_ROWS,
    LayoutRange,
    has_cell_value,
    layout_detect_range_xls,
    layout_detect_range_xlsx,
)
from sheet2csv.core.table.grid import Grid

logger = logging.getLogger("sheet-processor")


def read_xlsx_sheet_grid(
    ws,
    layout: Optional[LayoutRange] = None,
    max_rows: int = MAX_ROWS,
    max_cols: int = MAX_COLS,
) -> Grid[str]:
    """
    Read an XLSX worksheet into a grid.

    Args:
        ws: openpyxl Worksheet object
        layout: Area to read (None: detect automatically)
        max_rows: Maximum number of rows to scan when detecting the layout
        max_cols: Maximum number of columns to scan when detecting the layout

    Returns:
        Grid of cell texts (invalid if the sheet holds no data)
    """
    if layout is None:
        layout = layout_detect_range_xlsx(ws, max_rows, max_cols)
        if layout is None:
            logger.debug(f"No data found in worksheet '{ws.title}'")
            return Grid()

    rows: List[List[Optional[str]]] = [
        [_format_xlsx_cell_value(value) for value in values]
        for values in ws.iter_rows(
            min_row=layout.min_row, max_row=layout.max_row,
            min_col=layout.min_col, max_col=layout.max_col,
            values_only=True,
        )
    ]
    return Grid(rows)


def read_xls_sheet_grid(
    sheet,
    wb=None,
    layout: Optional[LayoutRange] = None,
    max_rows: int = MAX_ROWS,
    max_cols: int = MAX_COLS,
) -> Grid[str]:
    """
    Read an XLS sheet into a grid.

    Args:
        sheet: xlrd Sheet object
        wb: xlrd Book object (needed for date cells)
        layout: Area to read, 1-based (None: detect automatically)
        max_rows: Maximum number of rows to scan when detecting the layout
        max_cols: Maximum number of columns to scan when detecting the layout

    Returns:
        Grid of cell texts (invalid if the sheet holds no data)
    """
    if layout is None:
        layout = layout_detect_range_xls(sheet, max_rows, max_cols)
        if layout is None:
            logger.debug(f"No data found in XLS sheet '{sheet.name}'")
            return Grid()

    rows: List[List[Optional[str]]] = []
    for row_idx in range(layout.min_row - 1, layout.max_row):
        row: List[Optional[str]] = []
        for col_idx in range(layout.min_col - 1, layout.max_col):
            # xlrd is 0-based
            value = sheet.cell_value(row_idx, col_idx)
            cell_type = sheet.cell_type(row_idx, col_idx)
            row.append(_format_xls_cell_value(value, cell_type, wb))
        rows.append(row)

    return Grid(rows)


def _format_xlsx_cell_value(value: Any) -> Optional[str]:
    if not has_cell_value(value):
        return None

    if isinstance(value, bool):
        return str(value).upper()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime.datetime) and value.time() == datetime.time(0, 0):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _format_xls_cell_value(value: Any, cell_type: int, wb) -> Optional[str]:
    """
    Format an XLS cell value as text.

    Args:
        value: Cell value
        cell_type: xlrd cell type
        wb: xlrd Book object

    Returns:
        Cell text, or None for an empty cell
    """
    if cell_type in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return None

    if cell_type == xlrd.XL_CELL_NUMBER:
        if value == int(value):
            return str(int(value))
        return str(value)

    if cell_type == xlrd.XL_CELL_DATE and wb is not None:
        try:
            date_tuple = xlrd.xldate_as_tuple(value, wb.datemode)
            return f"{date_tuple[0]:04d}-{date_tuple[1]:02d}-{date_tuple[2]:02d}"
        except xlrd.xldate.XLDateError:
            return str(value)

    if cell_type == xlrd.XL_CELL_BOOLEAN:
        return "TRUE" if value else "FALSE"

    text = str(value)
    return text if text else None
