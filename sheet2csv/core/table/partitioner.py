# sheet2csv/core/table/partitioner.py
"""
Table Partitioner - Split one sheet grid into independent sub-tables

A sheet often holds several tables separated by blank rows or columns.
The partitioner cuts a Grid along fully empty bands until no piece contains
an empty row or column any more.

================================================================================
ALGORITHM
================================================================================

divide(grid)
|
+-- band detection on grid
|   +-- empty column indices (column_iterator)
|   +-- empty row indices    (row_iterator)
|
+-- first cut: columns
|   +-- one copy per segment between consecutive empty columns
|
+-- second cut: rows (per valid column segment)
|   +-- one copy per segment between consecutive empty rows
|
+-- per resulting piece
    +-- invalid (all-empty band)  -> dropped
    +-- still has empty bands     -> divide(piece), results spliced in place
    +-- otherwise                 -> terminal sub-table

Order: column segments left to right, within each segment top to bottom.

Tables arranged in an "L" or staggered layout are not separated, since
every cut runs across the full width or height of the piece being divided.

================================================================================
"""
import logging
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from sheet2csv.core.table.empty_predicate import DEFAULT_EMPTY_PREDICATE, EmptyPredicate
from sheet2csv.core.table.grid import Grid

logger = logging.getLogger("sheet-processor")

T = TypeVar("T")


class TablePartitioner(Generic[T]):
    """
    Divides a Grid into its sub-tables using an injected emptiness rule.

    Usage:
        partitioner = TablePartitioner()
        sub_tables = partitioner.divide(grid)
    """

    def __init__(self, empty_predicate: Optional[EmptyPredicate] = None):
        self.empty_predicate = empty_predicate or DEFAULT_EMPTY_PREDICATE

    def divide(self, grid: Grid[T]) -> List[Grid[T]]:
        """
        Divide the grid into its sub-tables (delimited by empty columns and rows).

        Every returned grid is valid, independent of the input and contains
        no empty row or column.

        Args:
            grid: The grid to divide

        Returns:
            Sub-tables in column-segment, then row-segment order

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        sub_tables = self._divide(grid, depth=0)
        logger.debug(f"Divided grid into {len(sub_tables)} sub-tables")
        return sub_tables

    def _divide(self, grid: Grid[T], depth: int) -> List[Grid[T]]:
        empty_columns = self.find_empty_bands(grid.column_iterator())
        empty_rows = self.find_empty_bands(grid.row_iterator())

        logger.debug(
            f"Depth {depth}: {len(empty_columns)} empty columns, "
            f"{len(empty_rows)} empty rows in {grid!r}"
        )

        # split at empty columns first
        row_end = grid.row_count() - 1
        first_cut = [
            grid.copy(0, row_end, start, end)
            for start, end in _segments(empty_columns, grid.column_count())
        ]

        # then split every column segment at the empty rows
        second_cut: List[Grid[T]] = []
        for segment in first_cut:
            if not segment.is_valid():
                continue

            column_end = segment.column_count() - 1
            for start, end in _segments(empty_rows, segment.row_count()):
                second_cut.append(segment.copy(start, end, 0, column_end))

        sub_tables: List[Grid[T]] = []
        for piece in second_cut:
            if not piece.is_valid():
                continue

            if self.has_empty_bands(piece):
                sub_tables.extend(self._divide(piece, depth + 1))
            else:
                sub_tables.append(piece)

        return sub_tables

    def find_empty_bands(self, lines: Iterator[Sequence[Optional[T]]]) -> List[int]:
        """
        Get the indices of the empty lines of the iterated data set.

        Args:
            lines: Iterator over rows or columns

        Returns:
            Ascending indices of the lines whose cells are all empty
        """
        is_empty = self.empty_predicate.is_empty
        return [
            index for index, line in enumerate(lines)
            if all(is_empty(cell) for cell in line)
        ]

    def has_empty_bands(self, grid: Grid[T]) -> bool:
        """Whether the grid still contains an empty row or column."""
        return bool(
            self.find_empty_bands(grid.column_iterator())
            or self.find_empty_bands(grid.row_iterator())
        )


def _segments(empty_indices: List[int], count: int) -> List[Tuple[int, int]]:
    """
    Inclusive (start, end) ranges between the given empty indices.

    Ranges may be empty (end < start); copying them yields an invalid grid.
    """
    segments = []
    start = 0
    for index in empty_indices:
        segments.append((start, index - 1))
        start = index + 1
    segments.append((start, count - 1))
    return segments


def divide(grid: Grid[T], empty_predicate: Optional[EmptyPredicate] = None) -> List[Grid[T]]:
    """
    Divide a grid into its sub-tables.

    Shortcut for TablePartitioner(empty_predicate).divide(grid).
    """
    return TablePartitioner(empty_predicate).divide(grid)
