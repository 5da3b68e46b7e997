# sheet2csv/core/sheet_processor.py
"""SheetProcessor - Spreadsheet to CSV export pipeline

Main entry point of the sheet2csv library. Turns every sheet of a workbook
into its independent sub-tables and serializes each of them as CSV text.

Processing Pipeline:
    1. ExcelFileConverter.convert()   bytes -> Workbook
    2. read_*_sheet_grid()            sheet -> Grid[str]
    3. TablePartitioner.divide()      Grid  -> sub-tables
    4. extract_name_and_format()      title row/column -> table name
    5. Grid.to_csv() + escape_percent()

Writing the resulting documents to storage is left to the caller.

Usage Example:
    from sheet2csv import SheetProcessor, ExtractionConfig

    processor = SheetProcessor(ExtractionConfig(column_delimiter=","))
    for document in processor.export_workbook(file_data, extension="xlsx"):
        print(document.file_name, document.content)
"""

import logging
import traceback
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from sheet2csv.core.functions.table_naming import extract_name_and_format
from sheet2csv.core.functions.text_escape import escape_percent
from sheet2csv.core.processor.excel_helper.excel_file_converter import ExcelFileConverter
from sheet2csv.core.processor.excel_helper.excel_grid_reader import (
    read_xls_sheet_grid,
    read_xlsx_sheet_grid,
)
from sheet2csv.core.processor.excel_helper.excel_layout_detector import MAX_COLS, MAX_ROWS
from sheet2csv.core.table.empty_predicate import EmptyPredicate
from sheet2csv.core.table.grid import Grid
from sheet2csv.core.table.partitioner import TablePartitioner

logger = logging.getLogger("sheet-processor")


@dataclass
class ExtractionConfig:
    """Configuration for the CSV export."""
    column_delimiter: str = "\t"
    delimiter_replacement: str = "    "
    empty_replacement: str = ""
    add_transposed: bool = False
    escape_percent: bool = True
    extract_names: bool = True
    empty_predicate: Optional[EmptyPredicate] = None
    max_rows: int = MAX_ROWS
    max_cols: int = MAX_COLS
    sheet_names: Optional[Sequence[str]] = None


@dataclass
class CsvDocument:
    """
    One exported sub-table.

    Attributes:
        file_name: Suggested file name ("<name>.csv" or "<name>_t.csv")
        content: CSV text
        sheet_name: Sheet the table was found on
        table_index: Running number of the table within the export
        transposed: Whether content holds the transposed table
    """
    file_name: str
    content: str
    sheet_name: str
    table_index: int
    transposed: bool = False


class SheetProcessor:
    """
    Exports the sub-tables of spreadsheet sheets as CSV documents.

    Usage:
        processor = SheetProcessor()
        documents = processor.export_rows([["Title", None], ["a", "b"]])
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()
        self.partitioner: TablePartitioner[str] = TablePartitioner(self.config.empty_predicate)
        self.file_converter = ExcelFileConverter()
        self.logger = logging.getLogger("sheet-processor")

    # ==========================================================================
    # Public API
    # ==========================================================================

    def export_workbook(self, file_data: bytes, extension: Optional[str] = None) -> List[CsvDocument]:
        """
        Export every sheet of an in-memory workbook.

        Table numbering continues across sheets.

        Args:
            file_data: Raw XLSX/XLS bytes
            extension: Format hint ('xlsx' or 'xls'); detected when omitted

        Returns:
            CSV documents in sheet order

        Raises:
            ValueError: If the format is not supported
        """
        try:
            wb = self.file_converter.convert(file_data, extension=extension)
        except Exception as e:
            self.logger.error(f"Error opening workbook: {e}")
            self.logger.debug(traceback.format_exc())
            raise

        try:
            documents: List[CsvDocument] = []
            table_index = 0

            for sheet_name, grid in self.read_sheet_grids(wb):
                if not grid.is_valid():
                    self.logger.info(f"Sheet '{sheet_name}' holds no data, skipping")
                    continue

                sheet_documents, table_index = self._export_grid(grid, sheet_name, table_index)
                documents.extend(sheet_documents)

            self.logger.info(
                f"{self.file_converter.get_format_name()} export completed: "
                f"{table_index} tables, {len(documents)} documents"
            )
            return documents

        except Exception as e:
            self.logger.error(f"Error in workbook export: {e}")
            self.logger.debug(traceback.format_exc())
            raise
        finally:
            self.file_converter.close(wb)

    def export_rows(
        self,
        rows: Sequence[Sequence[Optional[str]]],
        sheet_name: str = "",
        start_index: int = 0,
    ) -> List[CsvDocument]:
        """
        Export a raw buffer of cell texts (None for a blank cell).

        Raises:
            InvalidGridAccessError: If the buffer has no rows or columns
        """
        return self.export_grid(Grid.from_rows(rows), sheet_name, start_index)

    def export_grid(
        self,
        grid: Grid[str],
        sheet_name: str = "",
        start_index: int = 0,
    ) -> List[CsvDocument]:
        """
        Divide a sheet grid and export its sub-tables.

        Args:
            grid: Grid of one sheet
            sheet_name: Name recorded on the documents
            start_index: Number of the first table (used for "Table<n>" names)

        Returns:
            CSV documents in partition order

        Raises:
            InvalidGridAccessError: If the grid is invalid
        """
        documents, _ = self._export_grid(grid, sheet_name, start_index)
        return documents

    def read_sheet_grids(self, wb: Any) -> List[Tuple[str, Grid[str]]]:
        """
        Read the selected sheets of a workbook into grids.

        Args:
            wb: openpyxl Workbook or xlrd Book

        Returns:
            (sheet_name, grid) pairs in workbook order
        """
        if hasattr(wb, 'sheetnames'):
            available = list(wb.sheetnames)
        else:
            available = list(wb.sheet_names())

        grids: List[Tuple[str, Grid[str]]] = []
        for sheet_name in self._select_sheets(available):
            if hasattr(wb, 'sheetnames'):
                grid = read_xlsx_sheet_grid(
                    wb[sheet_name], max_rows=self.config.max_rows, max_cols=self.config.max_cols
                )
            else:
                grid = read_xls_sheet_grid(
                    wb.sheet_by_name(sheet_name), wb,
                    max_rows=self.config.max_rows, max_cols=self.config.max_cols
                )
            grids.append((sheet_name, grid))

        return grids

    # ==========================================================================
    # Internal
    # ==========================================================================

    def _select_sheets(self, available: List[str]) -> List[str]:
        if self.config.sheet_names is None:
            return available

        missing = [name for name in self.config.sheet_names if name not in available]
        if missing:
            self.logger.warning(f"Sheets not found in workbook: {', '.join(missing)}")

        return [name for name in available if name in self.config.sheet_names]

    def _export_grid(
        self,
        grid: Grid[str],
        sheet_name: str,
        table_index: int,
    ) -> Tuple[List[CsvDocument], int]:
        sub_tables = self.partitioner.divide(grid)
        self.logger.info(f"Detected {len(sub_tables)} sub-tables in sheet '{sheet_name}'")

        documents: List[CsvDocument] = []
        for sub_table in sub_tables:
            documents.extend(self._export_table(sub_table, sheet_name, table_index))
            table_index += 1

        return documents, table_index

    def _export_table(self, table: Grid[str], sheet_name: str, table_index: int) -> List[CsvDocument]:
        name = None
        if self.config.extract_names:
            name = extract_name_and_format(table, self.partitioner.empty_predicate)

        if not table.is_valid():
            self.logger.warning(
                f"Sub-table {table_index} of sheet '{sheet_name}' holds only its name "
                f"'{name}', skipping"
            )
            return []

        if name is None:
            name = f"Table{table_index}"

        documents = [self._to_document(table, f"{name}.csv", sheet_name, table_index, False)]

        if self.config.add_transposed:
            table.transpose()
            documents.append(self._to_document(table, f"{name}_t.csv", sheet_name, table_index, True))
            table.transpose()

        return documents

    def _to_document(
        self,
        table: Grid[str],
        file_name: str,
        sheet_name: str,
        table_index: int,
        transposed: bool,
    ) -> CsvDocument:
        content = table.to_csv(
            self.config.column_delimiter,
            self.config.delimiter_replacement,
            self.config.empty_replacement,
        )
        if self.config.escape_percent:
            content = escape_percent(content)

        self.logger.info(
            f"Exported{' transposed' if transposed else ''} sub-table {table_index} "
            f"as {file_name}"
        )
        return CsvDocument(
            file_name=file_name,
            content=content,
            sheet_name=sheet_name,
            table_index=table_index,
            transposed=transposed,
        )
