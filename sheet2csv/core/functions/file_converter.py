# sheet2csv/core/functions/file_converter.py
"""
BaseFileConverter - Abstract base class for file format conversion

The converter's job is to transform raw in-memory spreadsheet bytes into a
format-specific workbook object that the grid readers can work with.

This is the FIRST step in the export pipeline:
    Binary Data -> FileConverter -> Workbook -> Grid per sheet

Usage:
    class XLSXFileConverter(BaseFileConverter):
        def convert(self, file_data: bytes, file_stream: BinaryIO = None) -> Any:
            from openpyxl import load_workbook
            return load_workbook(BytesIO(file_data), data_only=True)

        def get_format_name(self) -> str:
            return "XLSX Workbook"
"""
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Optional


class BaseFileConverter(ABC):
    """
    Abstract base class for file format converters.

    Subclasses must implement:
    - convert(): Convert binary data to workable format
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> Any:
        """
        Convert binary file data to a workable format.

        Args:
            file_data: Raw binary file data
            file_stream: Optional file stream (BytesIO) for libraries that prefer streams
            **kwargs: Additional format-specific options

        Returns:
            Format-specific workbook object
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Return human-readable format name."""
        pass

    def validate(self, file_data: bytes) -> bool:
        """
        Validate if the file data can be converted by this converter.

        Default implementation returns True.
        """
        return True

    def close(self, converted_object: Any) -> None:
        """
        Close/cleanup the converted object if needed.

        Default implementation does nothing.
        """
        pass
