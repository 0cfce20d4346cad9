"""
Writer modules for different output formats.

This module provides writers for various output formats including JSON, CSV, and XML.
"""

from .base import ReportWriter
from .json_writer import JsonWriter
from .csv_writer import CsvWriter
from .xml_writer import XmlWriter
from .factory import WriterFactory

__all__ = [
    "ReportWriter",
    "JsonWriter",
    "CsvWriter",
    "XmlWriter",
    "WriterFactory",
]
