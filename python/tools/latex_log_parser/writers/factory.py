"""
Writer factory for creating appropriate writer instances.

This module provides a factory for creating report writers based on the format type.
"""

from typing import Union

from ..core.enums import OutputFormat
from ..core.exceptions import UnsupportedFormatError
from .base import ReportWriter
from .csv_writer import CsvWriter
from .json_writer import JsonWriter
from .xml_writer import XmlWriter


class WriterFactory:
    """Factory for creating appropriate report writer instances."""

    @staticmethod
    def create_writer(format_type: Union[OutputFormat, str]) -> ReportWriter:
        """Create and return the appropriate writer for the given output format."""
        if isinstance(format_type, str):
            try:
                format_type = OutputFormat.from_string(format_type)
            except ValueError as e:
                raise UnsupportedFormatError(
                    str(e), error_code="UNSUPPORTED_FORMAT", format=format_type
                ) from e

        match format_type:
            case OutputFormat.JSON:
                return JsonWriter()
            case OutputFormat.CSV:
                return CsvWriter()
            case OutputFormat.XML:
                return XmlWriter()
            case _:
                raise UnsupportedFormatError(
                    f"Unsupported output format: {format_type}",
                    error_code="UNSUPPORTED_FORMAT",
                )
