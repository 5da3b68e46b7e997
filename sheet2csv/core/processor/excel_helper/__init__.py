"""
Excel Helper Module

Turns XLSX/XLS workbooks into one Grid per sheet.

Module Structure:
- excel_file_converter: bytes -> openpyxl Workbook / xlrd Book
- excel_layout_detector: Data area detection (LayoutRange)
- excel_grid_reader: Sheet -> Grid[str]
"""

# === File Converter ===
from sheet2csv.core.processor.excel_helper.excel_file_converter import (
    ExcelFileConverter,
    XLSXFileConverter,
    XLSFileConverter,
    SUPPORTED_EXTENSIONS,
)

# === Layout Detector ===
from sheet2csv.core.processor.excel_helper.excel_layout_detector import (
    layout_detect_range_xlsx,
    layout_detect_range_xls,
    LayoutRange,
)

# === Grid Reader ===
from sheet2csv.core.processor.excel_helper.excel_grid_reader import (
    read_xlsx_sheet_grid,
    read_xls_sheet_grid,
)


__all__ = [
    # File Converter
    'ExcelFileConverter',
    'XLSXFileConverter',
    'XLSFileConverter',
    'SUPPORTED_EXTENSIONS',
    # Layout Detector
    'layout_detect_range_xlsx',
    'layout_detect_range_xls',
    'LayoutRange',
    # Grid Reader
    'read_xlsx_sheet_grid',
    'read_xls_sheet_grid',
]
