"""
LaTeX Log Parser

This module extracts errors and warnings from the console output of a LaTeX
compiler. LaTeX wraps its output at 79 columns without any continuation marker;
the parser joins wrapped lines back into complete messages and classifies each
one as an error or a warning.

Features:
- Streaming, line-at-a-time parsing of process output
- Reconstruction of messages wrapped over several physical lines
- Configurable wrap width, warning prefixes and error pattern
- Multiple export formats (JSON, CSV, XML)
- Concurrent file processing and statistics
- Console formatting with colorized output
"""

from typing import Any, Dict, Optional, Sequence, Union
from pathlib import Path

from .core import (
    ConfigurationError,
    DEFAULT_CONFIG,
    Diagnostic,
    DiagnosticKind,
    LogFileError,
    LogParserException,
    LogReport,
    OutputChannel,
    OutputFormat,
    OutputLine,
    ParserConfig,
    UnsupportedFormatError,
)

from .parsers import (
    CallbackSink,
    CollectingSink,
    DiagnosticSink,
    LatexLogParser,
)

from .writers import ReportWriter, WriterFactory

from .widgets import (
    ConsoleFormatterWidget,
    LogParserWidget,
    LogProcessorWidget,
)

from .utils import parse_args, main_cli


def parse_latex_log(
    output: str,
    filter_kinds: Optional[Sequence[str]] = None,
    config: Optional[ParserConfig] = None,
) -> Dict[str, Any]:
    """
    Parse LaTeX output held in a string and return structured data.

    Args:
        output: The raw compiler output
        filter_kinds: Optional list of kinds to include (error, warning)
        config: Optional description of the log format

    Returns:
        Dictionary with the source name and the diagnostics found
    """
    widget = LogParserWidget(config)
    return widget.parse_from_string(output, filter_kinds).to_dict()


def parse_latex_log_file(
    file_path: Union[str, Path],
    filter_kinds: Optional[Sequence[str]] = None,
    config: Optional[ParserConfig] = None,
) -> Dict[str, Any]:
    """
    Parse a LaTeX log file and return structured data.

    Args:
        file_path: Path to the log file
        filter_kinds: Optional list of kinds to include (error, warning)
        config: Optional description of the log format

    Returns:
        Dictionary with the source name and the diagnostics found
    """
    widget = LogParserWidget(config)
    return widget.parse_from_file(file_path, filter_kinds).to_dict()


__all__ = [
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DiagnosticKind",
    "LogFileError",
    "LogParserException",
    "LogReport",
    "OutputChannel",
    "OutputFormat",
    "OutputLine",
    "ParserConfig",
    "UnsupportedFormatError",
    "CallbackSink",
    "CollectingSink",
    "DiagnosticSink",
    "LatexLogParser",
    "ReportWriter",
    "WriterFactory",
    "ConsoleFormatterWidget",
    "LogParserWidget",
    "LogProcessorWidget",
    "parse_args",
    "main_cli",
    "parse_latex_log",
    "parse_latex_log_file",
]
