"""
Widget modules for the LaTeX log parser.

This module provides widgets for processing, formatting, and managing parsed logs.
"""

from .formatter import ConsoleFormatterWidget
from .processor import LogProcessorWidget
from .main_widget import LogParserWidget

__all__ = [
    "ConsoleFormatterWidget",
    "LogProcessorWidget",
    "LogParserWidget",
]
