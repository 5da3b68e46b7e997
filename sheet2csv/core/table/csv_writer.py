# sheet2csv/core/table/csv_writer.py
"""
CsvWriter - Delimited text serialization of a Grid

Output rules:
    - rows in view order (transpose-aware), each terminated by "\\n"
    - exactly one separator between neighbouring cells, none after the last
    - empty cell          -> config.empty_replacement
    - separator in a cell -> config.separator_replacement
    - line break in a cell -> single space ("\\r\\n" counts as one)
"""
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from sheet2csv.core.table.grid import Grid

logger = logging.getLogger("sheet-processor")

_LINE_BREAKS = re.compile(r"\r\n|[\r\n]")


@dataclass
class CsvWriterConfig:
    """Configuration for CSV serialization."""
    separator: str = "\t"
    separator_replacement: str = "    "
    empty_replacement: str = ""


class CsvWriter:
    """
    Converts a Grid into delimited text.

    Usage:
        writer = CsvWriter(CsvWriterConfig(separator=",", separator_replacement=";"))
        text = writer.write(grid)
    """

    def __init__(self, config: Optional[CsvWriterConfig] = None):
        self.config = config or CsvWriterConfig()

    def write(self, grid: "Grid") -> str:
        """
        Serialize the grid.

        Args:
            grid: Grid to serialize

        Returns:
            Delimited text

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        lines: List[str] = []

        for row in grid.row_iterator():
            cells = [self._format_cell(cell) for cell in row]
            lines.append(self.config.separator.join(cells) + "\n")

        logger.debug(f"Serialized {len(lines)} rows")
        return "".join(lines)

    def _format_cell(self, value: Any) -> str:
        if value is None:
            return self.config.empty_replacement

        text = str(value)
        if self.config.separator:
            text = text.replace(self.config.separator, self.config.separator_replacement)
        return _LINE_BREAKS.sub(" ", text)
