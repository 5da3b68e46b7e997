# sheet2csv/core/functions/table_naming.py
"""
Table Naming - Detect and strip a title row/column from a sub-table

A sub-table often carries its name as the only value of its first row
(or first column):

    | Sales |     |     |
    | Jan   | 100 |     |
    | Feb   | 200 |     |

extract_name_and_format() returns "Sales", removes that row and trims the
remaining table.
"""
import logging
import re
from typing import Optional, Sequence

from sheet2csv.core.table.empty_predicate import DEFAULT_EMPTY_PREDICATE, EmptyPredicate
from sheet2csv.core.table.grid import Grid

logger = logging.getLogger("sheet-processor")

_SLASHES = re.compile(r"[/\\]")


def extract_name_from_line(
    values: Sequence[Optional[str]],
    empty_predicate: Optional[EmptyPredicate] = None,
) -> Optional[str]:
    """
    Extract a table name from a row or column.

    A name is the only non-empty entry of a line with at least two cells.

    Args:
        values: Cells of the row/column
        empty_predicate: Rule for blank cells (default: cell is None)

    Returns:
        The formatted name, or None if the line holds no name
    """
    if len(values) < 2:
        return None

    is_empty = (empty_predicate or DEFAULT_EMPTY_PREDICATE).is_empty

    name = None
    for value in values:
        if is_empty(value):
            continue
        if name is not None:
            return None
        name = value

    if name is None:
        return None

    return format_table_name(str(name))


def format_table_name(name: str) -> Optional[str]:
    """
    Make a raw title usable as a file name stem.

    Slashes and backslashes are removed, surrounding whitespace is stripped
    and blanks become underscores.

    Returns:
        The formatted name, or None if nothing usable remains
    """
    formatted = _SLASHES.sub("", name).strip().replace(" ", "_")
    return formatted or None


def extract_name_and_format(
    grid: Grid[str],
    empty_predicate: Optional[EmptyPredicate] = None,
) -> Optional[str]:
    """
    Find the name of the given table in its first row or column.

    If a name is found the respective row/column is deleted and the table
    is trimmed so that it won't contain any completely empty rows/columns.

    Args:
        grid: The table whose name should be obtained (modified in place)
        empty_predicate: Rule for blank cells, used for the name lookup and
            the trim (default: cell is None)

    Returns:
        The name of the table, or None if none could be found

    Raises:
        InvalidGridAccessError: If the grid is invalid
    """
    name = extract_name_from_line(grid.row(0), empty_predicate)
    if name is not None:
        grid.delete_row(0)
        _trim_if_valid(grid, empty_predicate)
        logger.debug(f"Found table name '{name}' in first row")
        return name

    name = extract_name_from_line(grid.column(0), empty_predicate)
    if name is not None:
        grid.delete_column(0)
        _trim_if_valid(grid, empty_predicate)
        logger.debug(f"Found table name '{name}' in first column")
        return name

    return None


def _trim_if_valid(grid: Grid[str], empty_predicate: Optional[EmptyPredicate]) -> None:
    if grid.is_valid():
        grid.trim(empty_predicate)
