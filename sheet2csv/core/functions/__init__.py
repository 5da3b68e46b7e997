"""
Functions - Shared helpers of the export pipeline

Module Components:
- file_converter: BaseFileConverter interface (bytes -> workbook)
- table_naming: Title row/column detection and removal
- text_escape: Percent escaping of exported text

Usage Example:
    from sheet2csv.core.functions import extract_name_and_format, escape_percent
"""

from sheet2csv.core.functions.file_converter import BaseFileConverter
from sheet2csv.core.functions.table_naming import (
    extract_name_from_line,
    extract_name_and_format,
    format_table_name,
)
from sheet2csv.core.functions.text_escape import escape_percent

__all__ = [
    "BaseFileConverter",
    # Table naming
    "extract_name_from_line",
    "extract_name_and_format",
    "format_table_name",
    # Escaping
    "escape_percent",
]
