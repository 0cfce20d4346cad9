"""
Main LaTeX log parser widget.

This module provides the main widget that orchestrates the entire log parsing process,
integrating all the sub-widgets for a complete solution.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.config import ParserConfig
from ..core.data_structures import LogReport
from ..core.enums import DiagnosticKind, OutputFormat
from ..writers.factory import WriterFactory
from .formatter import ConsoleFormatterWidget
from .processor import LogProcessorWidget

KindFilter = Optional[Sequence[Union[DiagnosticKind, str]]]


def _resolve_kinds(kinds: KindFilter) -> Optional[List[DiagnosticKind]]:
    if not kinds:
        return None
    return [
        DiagnosticKind.from_string(kind) if isinstance(kind, str) else kind
        for kind in kinds
    ]


class LogParserWidget:
    """Main widget for orchestrating LaTeX log parsing and processing."""

    def __init__(self, config: Optional[ParserConfig] = None, flush_on_end: bool = True):
        """Initialize the main log parser widget."""
        self.processor = LogProcessorWidget(config, flush_on_end=flush_on_end)
        self.formatter = ConsoleFormatterWidget()

    @property
    def config(self) -> ParserConfig:
        return self.processor.config

    def parse_from_string(
        self,
        output: str,
        filter_kinds: KindFilter = None,
        message_pattern: Optional[str] = None,
        source: str = "<string>",
    ) -> LogReport:
        """Parse a LaTeX log held in a string."""
        report = self.processor.process_string(output, source)
        return self.processor.filter_diagnostics(
            report, kinds=_resolve_kinds(filter_kinds), message_pattern=message_pattern
        )

    def parse_from_file(
        self,
        file_path: Union[str, Path],
        filter_kinds: KindFilter = None,
        message_pattern: Optional[str] = None,
    ) -> LogReport:
        """Parse a LaTeX log file."""
        report = self.processor.process_file(file_path)
        return self.processor.filter_diagnostics(
            report, kinds=_resolve_kinds(filter_kinds), message_pattern=message_pattern
        )

    def parse_from_files(
        self,
        file_paths: List[Union[str, Path]],
        filter_kinds: KindFilter = None,
        message_pattern: Optional[str] = None,
        concurrency: int = 4,
    ) -> List[LogReport]:
        """Parse several LaTeX log files, one report per readable file."""
        kinds = _resolve_kinds(filter_kinds)
        return [
            self.processor.filter_diagnostics(
                report, kinds=kinds, message_pattern=message_pattern
            )
            for report in self.processor.process_files(file_paths, concurrency)
        ]

    def write_output(
        self,
        report: LogReport,
        output_format: Union[OutputFormat, str],
        output_path: Union[str, Path],
    ) -> None:
        """Write a report to a file in the specified format."""
        writer = WriterFactory.create_writer(output_format)
        writer.write(report, Path(output_path))

    def display_output(self, report: LogReport, colorize: bool = True) -> None:
        """Display a report on the console."""
        if colorize:
            self.formatter.colorize_output(report)
        else:
            print(self.formatter.get_formatted_output(report))

    def generate_statistics(self, reports: List[LogReport]) -> Dict[str, Any]:
        """Generate statistics from log reports."""
        return self.processor.generate_statistics(reports)

    def process_and_export(
        self,
        input_files: List[Union[str, Path]],
        output_format: Union[OutputFormat, str],
        output_path: Union[str, Path],
        filter_kinds: KindFilter = None,
        message_pattern: Optional[str] = None,
        concurrency: int = 4,
        display_stats: bool = False,
        display_output: bool = False,
        colorize: bool = True,
    ) -> LogReport:
        """Complete processing pipeline: parse, filter, combine, and export."""
        reports = self.parse_from_files(
            input_files, filter_kinds, message_pattern, concurrency
        )
        combined = self.processor.combine_reports(reports)

        self.write_output(combined, output_format, output_path)

        if display_stats:
            stats = self.generate_statistics(reports)
            print("\nStatistics:")
            print(json.dumps(stats, indent=4))

        if display_output:
            self.display_output(combined, colorize=colorize)

        return combined
