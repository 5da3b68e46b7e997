"""
Table - Grid structure and sub-table partitioning

Module Structure:
- grid: Transpose-aware Grid of optional cells
- empty_predicate: Emptiness rules injected into the partitioner
- partitioner: Recursive division of a Grid along empty rows/columns
- csv_writer: Delimited text serialization
- exceptions: InvalidGridAccessError

Usage:
    from sheet2csv.core.table import Grid, divide

    for sub_table in divide(Grid(rows)):
        print(sub_table.to_csv())
"""

from sheet2csv.core.table.exceptions import InvalidGridAccessError
from sheet2csv.core.table.empty_predicate import (
    EmptyPredicate,
    NullEmptyPredicate,
    BlankTextEmptyPredicate,
    DEFAULT_EMPTY_PREDICATE,
)
from sheet2csv.core.table.csv_writer import CsvWriter, CsvWriterConfig
from sheet2csv.core.table.grid import Grid
from sheet2csv.core.table.partitioner import TablePartitioner, divide

__all__ = [
    "InvalidGridAccessError",
    # Emptiness rules
    "EmptyPredicate",
    "NullEmptyPredicate",
    "BlankTextEmptyPredicate",
    "DEFAULT_EMPTY_PREDICATE",
    # Serialization
    "CsvWriter",
    "CsvWriterConfig",
    # Grid / partitioning
    "Grid",
    "TablePartitioner",
    "divide",
]
