"""
Core module for the LaTeX log parser.

This module contains the fundamental data structures, enums, configuration and
exceptions used throughout the log parser system.
"""

from .enums import DiagnosticKind, OutputChannel, OutputFormat
from .data_structures import Diagnostic, LogReport, OutputLine
from .config import (
    DEFAULT_CONFIG,
    DEFAULT_ERROR_PATTERN,
    DEFAULT_WARNING_PREFIXES,
    DEFAULT_WRAP_WIDTH,
    ParserConfig,
)
from .exceptions import (
    ConfigurationError,
    LogFileError,
    LogParserException,
    UnsupportedFormatError,
)

__all__ = [
    "DiagnosticKind",
    "OutputChannel",
    "OutputFormat",
    "Diagnostic",
    "LogReport",
    "OutputLine",
    "DEFAULT_CONFIG",
    "DEFAULT_ERROR_PATTERN",
    "DEFAULT_WARNING_PREFIXES",
    "DEFAULT_WRAP_WIDTH",
    "ParserConfig",
    "ConfigurationError",
    "LogFileError",
    "LogParserException",
    "UnsupportedFormatError",
]
