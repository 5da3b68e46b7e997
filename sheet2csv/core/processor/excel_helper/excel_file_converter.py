# sheet2csv/core/processor/excel_helper/excel_file_converter.py
"""
ExcelFileConverter - Workbook bytes to openpyxl/xlrd workbook

Format selection:
    extension hint given  -> must be one of SUPPORTED_EXTENSIONS
    no hint               -> file signature (OLE -> XLS, ZIP -> XLSX)
    neither               -> ValueError
"""
import logging
from io import BytesIO
from typing import Any, BinaryIO, Dict, Optional

from sheet2csv.core.functions.file_converter import BaseFileConverter

logger = logging.getLogger("sheet-processor")

SUPPORTED_EXTENSIONS = ("xlsx", "xls")


class _SignatureConverter(BaseFileConverter):
    """Converter recognising its format by a leading byte signature."""

    SIGNATURE = b""

    def validate(self, file_data: bytes) -> bool:
        """Whether file_data starts with this format's signature."""
        return bool(file_data) and file_data[:len(self.SIGNATURE)] == self.SIGNATURE


class XLSXFileConverter(_SignatureConverter):
    """Opens XLSX data with openpyxl (cached values, not formulas)."""

    # XLSX is a ZIP container
    SIGNATURE = b'PK\x03\x04'

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        data_only: bool = True,
        **kwargs
    ) -> Any:
        from openpyxl import load_workbook

        stream = file_stream if file_stream is not None else BytesIO(file_data)
        stream.seek(0)
        return load_workbook(stream, data_only=data_only)

    def get_format_name(self) -> str:
        return "XLSX Workbook"

    def close(self, converted_object: Any) -> None:
        converted_object.close()


class XLSFileConverter(_SignatureConverter):
    """Opens legacy XLS data with xlrd."""

    # XLS is an OLE compound document
    SIGNATURE = b'\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1'

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> Any:
        import xlrd

        if file_stream is not None:
            file_stream.seek(0)
            file_data = file_stream.read()
        return xlrd.open_workbook(file_contents=file_data)

    def get_format_name(self) -> str:
        return "XLS Workbook"

    def close(self, converted_object: Any) -> None:
        converted_object.release_resources()


class ExcelFileConverter(BaseFileConverter):
    """
    Picks the XLSX or XLS converter and remembers it for close().

    Usage:
        converter = ExcelFileConverter()
        wb = converter.convert(file_data, extension="xlsx")
        try:
            ...
        finally:
            converter.close(wb)
    """

    def __init__(self):
        self._converters: Dict[str, _SignatureConverter] = {
            "xlsx": XLSXFileConverter(),
            "xls": XLSFileConverter(),
        }
        self._used_converter: Optional[BaseFileConverter] = None

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        extension: Optional[str] = None,
        **kwargs
    ) -> Any:
        """
        Convert workbook bytes.

        Args:
            file_data: Raw XLSX/XLS bytes
            file_stream: Optional stream holding the same data
            extension: Format hint ('xlsx' or 'xls'); detected when omitted

        Returns:
            openpyxl Workbook or xlrd Book

        Raises:
            ValueError: If the hint names an unsupported format, or no hint
                is given and the data matches no known signature
        """
        self._used_converter = self._select_converter(file_data, extension)
        return self._used_converter.convert(file_data, file_stream, **kwargs)

    def _select_converter(self, file_data: bytes, extension: Optional[str]) -> BaseFileConverter:
        if extension:
            ext = extension.lower().lstrip('.')
            if ext not in SUPPORTED_EXTENSIONS:
                raise ValueError(
                    f"Unsupported spreadsheet format: {ext} "
                    f"(expected one of {', '.join(SUPPORTED_EXTENSIONS)})"
                )
            return self._converters[ext]

        # OLE first, a ZIP signature is the more generic one
        for ext in ("xls", "xlsx"):
            if self._converters[ext].validate(file_data):
                logger.debug(f"Detected {ext} workbook from file signature")
                return self._converters[ext]

        raise ValueError("Unrecognised spreadsheet data: neither XLSX nor XLS signature")

    def validate(self, file_data: bytes) -> bool:
        return any(converter.validate(file_data) for converter in self._converters.values())

    def get_format_name(self) -> str:
        if self._used_converter:
            return self._used_converter.get_format_name()
        return "Excel Workbook"

    def close(self, converted_object: Any) -> None:
        if self._used_converter:
            self._used_converter.close(converted_object)
