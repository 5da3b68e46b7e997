"""
Processor - Format-specific spreadsheet collaborators

Subpackages:
- excel_helper: XLSX (openpyxl) / XLS (xlrd) workbook conversion and grid reading
"""

from sheet2csv.core.processor import excel_helper

__all__ = [
    "excel_helper",
]
