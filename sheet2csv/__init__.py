# sheet2csv/__init__.py
"""
sheet2csv Library

Splits spreadsheet sheets into their independent sub-tables (blocks of data
separated by blank rows and columns) and serializes each as CSV text.

Package Structure:
- core: Extraction core module
    - SheetProcessor: Workbook/grid to CSV export pipeline
    - table: Grid, TablePartitioner, CsvWriter
    - functions: Table naming and escaping helpers
    - processor: XLSX/XLS readers

Usage:
    from sheet2csv import Grid, divide

    grid = Grid([["Sales", None, None], ["Jan", "100", None]])
    for sub_table in divide(grid):
        print(sub_table.to_csv(",", ";", ""))
"""

__version__ = "0.1.0"

# Expose core classes at top level
from sheet2csv.core import SheetProcessor, ExtractionConfig, CsvDocument
from sheet2csv.core.table import (
    Grid,
    TablePartitioner,
    divide,
    EmptyPredicate,
    NullEmptyPredicate,
    BlankTextEmptyPredicate,
    CsvWriter,
    CsvWriterConfig,
    InvalidGridAccessError,
)

# Explicit subpackages
from sheet2csv import core

__all__ = [
    "__version__",
    # Pipeline
    "SheetProcessor",
    "ExtractionConfig",
    "CsvDocument",
    # Core classes
    "Grid",
    "TablePartitioner",
    "divide",
    "EmptyPredicate",
    "NullEmptyPredicate",
    "BlankTextEmptyPredicate",
    "CsvWriter",
    "CsvWriterConfig",
    "InvalidGridAccessError",
    # Subpackages
    "core",
]
