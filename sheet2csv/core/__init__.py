# sheet2csv/core/__init__.py
"""
Core - Sub-table extraction core module

Module Structure:
- sheet_processor: SheetProcessor export pipeline
- table/: Grid, emptiness rules, partitioner, CSV writer
- functions/: Table naming, escaping, file converter interface
- processor/: Spreadsheet format collaborators (XLSX/XLS)

Usage:
    from sheet2csv.core import SheetProcessor
    from sheet2csv.core.table import Grid, divide
"""

# === Main Class ===
from sheet2csv.core.sheet_processor import (
    SheetProcessor,
    ExtractionConfig,
    CsvDocument,
)

# === Explicit Subpackage Imports ===
from sheet2csv.core import table
from sheet2csv.core import functions
from sheet2csv.core import processor

__all__ = [
    # Main Class
    "SheetProcessor",
    "ExtractionConfig",
    "CsvDocument",
    # Subpackages
    "table",
    "functions",
    "processor",
]
