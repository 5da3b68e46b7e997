# sheet2csv/core/table/grid.py
"""
Grid - Transpose-aware two-dimensional table of optional cells

A Grid stores a rectangular block of cells of one element type. A missing
cell is represented by None and is treated as "empty" throughout.

================================================================================
GRID ARCHITECTURE
================================================================================

Backing store:
    _data[physical_row][physical_column]   (never jagged)
    _rows x _columns                        (untransposed extents)

Logical view:
    transpose() only flips _transposed. Every coordinate-based accessor
    translates (row, column) through _read_line()/get()/set(), so the
    backing store is never indexed by callers directly.

Structural edits:
    delete_row() / delete_column() / trim() copy the surviving ranges and
    install a fresh, untransposed backing store holding the logical view.

Validity:
    A grid without rows or columns is invalid. Every coordinate-based
    operation on it raises InvalidGridAccessError.

================================================================================
"""
import logging
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

from sheet2csv.core.table.csv_writer import CsvWriter, CsvWriterConfig
from sheet2csv.core.table.empty_predicate import EmptyPredicate
from sheet2csv.core.table.exceptions import InvalidGridAccessError

logger = logging.getLogger("sheet-processor")

T = TypeVar("T")


class Grid(Generic[T]):
    """
    Two-dimensional table of optional elements.

    Usage:
        grid = Grid([["Sales", None], ["Jan", "100"]])
        grid.get(1, 1)          # "100"
        grid.get(5, 5)          # None (out of range, not an error)
        grid.transpose()
        grid.row(0)             # ["Sales", "Jan"]
        csv_text = grid.to_csv(",", ";", "")
    """

    def __init__(self, data: Optional[Sequence[Sequence[Optional[T]]]] = None):
        """
        Create a grid from a (possibly ragged) buffer of rows.

        Every row is padded with None to the length of the longest row.
        An empty buffer or None yields an invalid grid.

        Args:
            data: Rows of cell values
        """
        self._rows = 0
        self._columns = 0
        self._data: Optional[List[List[Optional[T]]]] = None
        self._transposed = False
        self._set_data(data)

    @classmethod
    def from_rows(cls, rows: Optional[Sequence[Sequence[Optional[T]]]]) -> "Grid[T]":
        """Create a grid from raw extracted rows."""
        return cls(rows)

    def _set_data(self, data: Optional[Sequence[Sequence[Optional[T]]]]) -> None:
        self._transposed = False

        columns = max((len(row) for row in data), default=0) if data else 0
        if not data or columns == 0:
            self._rows = 0
            self._columns = 0
            self._data = None
            return

        self._rows = len(data)
        self._columns = columns
        self._data = [self._fit_row(row, columns) for row in data]

    @staticmethod
    def _fit_row(row: Sequence[Optional[T]], width: int) -> List[Optional[T]]:
        fitted = list(row)[:width]
        fitted.extend([None] * (width - len(fitted)))
        return fitted

    def _physical_rows(self) -> List[List[Optional[T]]]:
        return self._data if self.is_valid() else []

    # ==========================================================================
    # Validity / extents
    # ==========================================================================

    def is_valid(self) -> bool:
        """Whether the grid has at least one row and one column."""
        return self._data is not None and self._rows > 0 and self._columns > 0

    def _validate_access(self) -> None:
        if not self.is_valid():
            raise InvalidGridAccessError()

    def transpose(self) -> None:
        """Swap the meaning of rows and columns without copying data."""
        self._validate_access()
        self._transposed = not self._transposed

    def is_transposed(self) -> bool:
        """
        Whether the view is currently transposed.

        delete_row, delete_column and trim materialize the current view into
        a new backing store, so after any of them this returns False while
        the view itself is unchanged.
        """
        return self._transposed

    def row_count(self) -> int:
        """Number of rows in the current (transpose-aware) view."""
        self._validate_access()
        return self._columns if self._transposed else self._rows

    def column_count(self) -> int:
        """Number of columns in the current (transpose-aware) view."""
        self._validate_access()
        return self._rows if self._transposed else self._columns

    def _in_range(self, row: int, column: int) -> bool:
        return 0 <= row < self.row_count() and 0 <= column < self.column_count()

    # ==========================================================================
    # Cell access
    # ==========================================================================

    def get(self, row: int, column: int) -> Optional[T]:
        """
        Get the element at the given position.

        Coordinates outside the grid refer to empty elements.

        Args:
            row: Row index
            column: Column index

        Returns:
            The element, or None for an empty cell

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        self._validate_access()

        if not self._in_range(row, column):
            return None

        if self._transposed:
            return self._data[column][row]
        return self._data[row][column]

    def set(self, row: int, column: int, value: Optional[T]) -> None:
        """
        Set the content of a cell. Writes outside the grid are dropped.

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        self._validate_access()

        if not self._in_range(row, column):
            return

        if self._transposed:
            self._data[column][row] = value
        else:
            self._data[row][column] = value

    def clear(self, row: int, column: int) -> None:
        """Empty the given cell."""
        self.set(row, column, None)

    # ==========================================================================
    # Row / column access
    # ==========================================================================

    @staticmethod
    def _read_line(
        data: List[List[Optional[T]]],
        transposed: bool,
        index: int,
        count: int,
        length: int,
        along_rows: bool,
    ) -> List[Optional[T]]:
        # count: lines on the requested axis, length: cells per line
        if not 0 <= index < count:
            return [None] * length

        if along_rows != transposed:
            return list(data[index])
        return [physical_row[index] for physical_row in data]

    def row(self, index: int) -> List[Optional[T]]:
        """
        Get a snapshot of the row with the given index.

        Indices outside the grid yield a row of empty elements.
        """
        self._validate_access()
        return self._read_line(
            self._data, self._transposed, index,
            self.row_count(), self.column_count(), along_rows=True
        )

    def column(self, index: int) -> List[Optional[T]]:
        """
        Get a snapshot of the column with the given index.

        Indices outside the grid yield a column of empty elements.
        """
        self._validate_access()
        return self._read_line(
            self._data, self._transposed, index,
            self.column_count(), self.row_count(), along_rows=False
        )

    @classmethod
    def _iterate_lines(
        cls,
        data: List[List[Optional[T]]],
        transposed: bool,
        count: int,
        length: int,
        along_rows: bool,
    ) -> Iterator[List[Optional[T]]]:
        for index in range(count):
            yield cls._read_line(data, transposed, index, count, length, along_rows)

    def row_iterator(self) -> Iterator[List[Optional[T]]]:
        """
        Iterate over the rows of this grid.

        The iterator is bound to the backing store and extents at the time
        of the call. Structural edits made afterwards (delete_row,
        delete_column, trim) install a new backing store and are not seen by
        it; cell values changed through set() are.
        """
        self._validate_access()
        return self._iterate_lines(
            self._data, self._transposed,
            self.row_count(), self.column_count(), along_rows=True
        )

    def column_iterator(self) -> Iterator[List[Optional[T]]]:
        """Iterate over the columns of this grid (see row_iterator)."""
        self._validate_access()
        return self._iterate_lines(
            self._data, self._transposed,
            self.column_count(), self.row_count(), along_rows=False
        )

    def to_rows(self) -> List[List[Optional[T]]]:
        """Logical content as a list of rows (empty list for an invalid grid)."""
        if not self.is_valid():
            return []
        return list(self.row_iterator())

    def is_empty(self) -> bool:
        """
        Whether every cell of this grid is empty.

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        self._validate_access()

        for line in self.row_iterator():
            for cell in line:
                if cell is not None:
                    return False
        return True

    # ==========================================================================
    # Copy / structural edits
    # ==========================================================================

    def copy(
        self,
        row_start: int = 0,
        row_end: Optional[int] = None,
        column_start: int = 0,
        column_end: Optional[int] = None,
    ) -> "Grid[T]":
        """
        Copy the given sub-range into an independent grid.

        Bounds are inclusive and refer to the current view. An end before its
        start yields an invalid grid. Cells beyond the grid are copied as
        empty elements.

        Args:
            row_start: Index of the first row to copy
            row_end: Index of the last row to copy (default: last row)
            column_start: Index of the first column to copy
            column_end: Index of the last column to copy (default: last column)

        Returns:
            The copied sub-grid

        Raises:
            InvalidGridAccessError: If this grid is invalid
            ValueError: If a bound is negative
        """
        self._validate_access()

        if row_end is None:
            row_end = self.row_count() - 1
        if column_end is None:
            column_end = self.column_count() - 1

        if row_end < row_start or column_end < column_start:
            return Grid()
        if min(row_start, row_end, column_start, column_end) < 0:
            raise ValueError("Only non-negative indices allowed")

        width = column_end - column_start + 1
        copied: List[List[Optional[T]]] = []

        for index in range(row_start, row_end + 1):
            line = self.row(index)[column_start:column_end + 1]
            line.extend([None] * (width - len(line)))
            copied.append(line)

        return Grid(copied)

    def delete_row(self, index: int) -> None:
        """
        Delete the row with the given index. Following rows move up by one.

        Out-of-range indices are ignored. Deleting the only row leaves an
        invalid grid.
        """
        self._validate_access()

        if not 0 <= index < self.row_count():
            return

        last_column = self.column_count() - 1
        head = self.copy(0, index - 1, 0, last_column)
        tail = self.copy(index + 1, self.row_count() - 1, 0, last_column)

        self._set_data(head._physical_rows() + tail._physical_rows())
        logger.debug(f"Deleted row {index}")

    def delete_column(self, index: int) -> None:
        """
        Delete the column with the given index. Following columns move left by one.

        Out-of-range indices are ignored. Deleting the only column leaves an
        invalid grid.
        """
        self._validate_access()

        if not 0 <= index < self.column_count():
            return

        row_count = self.row_count()
        last_row = row_count - 1
        head = self.copy(0, last_row, 0, index - 1)
        tail = self.copy(0, last_row, index + 1, self.column_count() - 1)

        head_rows = head._physical_rows() or [[] for _ in range(row_count)]
        tail_rows = tail._physical_rows() or [[] for _ in range(row_count)]

        self._set_data([left + right for left, right in zip(head_rows, tail_rows)])
        logger.debug(f"Deleted column {index}")

    def trim(self, empty_predicate: Optional[EmptyPredicate] = None) -> None:
        """
        Remove every empty row and every empty column, including interior ones.

        Trimming an all-empty grid leaves an invalid grid.

        Args:
            empty_predicate: Rule for blank cells (default: cell is None)

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        self._validate_access()

        is_blank: Callable[[Any], bool] = (
            empty_predicate.is_empty if empty_predicate is not None else _is_none
        )

        empty_rows = [
            index for index, line in enumerate(self.row_iterator())
            if all(is_blank(cell) for cell in line)
        ]
        # each deletion shifts the remaining indices up by one
        for removed, index in enumerate(empty_rows):
            self.delete_row(index - removed)

        if not self.is_valid():
            return

        empty_columns = [
            index for index, line in enumerate(self.column_iterator())
            if all(is_blank(cell) for cell in line)
        ]
        for removed, index in enumerate(empty_columns):
            self.delete_column(index - removed)

        if empty_rows or empty_columns:
            logger.debug(
                f"Trimmed {len(empty_rows)} empty rows and {len(empty_columns)} empty columns"
            )

    # ==========================================================================
    # Serialization
    # ==========================================================================

    def to_csv(
        self,
        separator: str = "\t",
        separator_replacement: str = "    ",
        empty_replacement: str = "",
    ) -> str:
        """
        Serialize this grid as delimited text.

        Args:
            separator: Cell separator
            separator_replacement: Replacement for separators inside cell content
            empty_replacement: Text written for empty cells

        Returns:
            Delimited text, every row terminated by a newline

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        config = CsvWriterConfig(
            separator=separator,
            separator_replacement=separator_replacement,
            empty_replacement=empty_replacement,
        )
        return CsvWriter(config).write(self)

    def __repr__(self) -> str:
        if not self.is_valid():
            return "Grid(<empty>)"
        return (
            f"Grid(rows={self.row_count()}, columns={self.column_count()}, "
            f"transposed={self._transposed})"
        )

    def __str__(self) -> str:
        if not self.is_valid():
            return "EmptyGrid"
        return "\n".join(str(line) for line in self.row_iterator())


def _is_none(value: Any) -> bool:
    return value is None
