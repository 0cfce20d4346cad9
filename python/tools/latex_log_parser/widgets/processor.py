"""
Log processor widget.

This module provides functionality to run the streaming parser over log files,
strings and channel-tagged process output, with filtering, statistics and
concurrent processing of several files.
"""

import re
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from loguru import logger

from ..core.config import DEFAULT_CONFIG, ParserConfig
from ..core.data_structures import LogReport, OutputLine
from ..core.enums import DiagnosticKind
from ..core.exceptions import ConfigurationError, LogFileError
from ..parsers.emitter import CollectingSink
from ..parsers.log_parser import LatexLogParser, split_lines


class LogProcessorWidget:
    """Widget for processing LaTeX logs."""

    def __init__(
        self, config: Optional[ParserConfig] = None, flush_on_end: bool = True
    ):
        """
        Initialize the processor widget.

        Args:
            config: Output format description handed to every parser
            flush_on_end: Emit a message left unfinished when the input ends
        """
        self.config = config or DEFAULT_CONFIG
        self.flush_on_end = flush_on_end

    def create_parser(self, sink: Optional[CollectingSink] = None) -> LatexLogParser:
        """Create a fresh parser; each stream gets its own."""
        return LatexLogParser(sink=sink, config=self.config)

    def process_lines(self, lines: Iterable[str], source: str = "<lines>") -> LogReport:
        """Process physical lines of a single log."""
        sink = CollectingSink()
        parser = self.create_parser(sink)
        for line in lines:
            parser.feed_line(line)
        return self._finish(parser, sink, source)

    def process_stream(
        self, output: Iterable[OutputLine], source: str = "<process>"
    ) -> LogReport:
        """Process channel-tagged lines as delivered by a process reader."""
        sink = CollectingSink()
        parser = self.create_parser(sink)
        for item in output:
            parser.on_text_available(item.text, item.channel)
        return self._finish(parser, sink, source)

    def process_string(self, output: str, source: str = "<string>") -> LogReport:
        """Process a string containing a complete log."""
        return self.process_lines(split_lines(output), source)

    def process_file(self, file_path: Union[str, Path]) -> LogReport:
        """Process a single log file."""
        file_path = Path(file_path)

        logger.info(f"Processing file: {file_path}")

        try:
            # TeX logs are not reliably UTF-8 (inputenc, 8-bit fonts)
            with file_path.open("r", encoding="utf-8", errors="replace") as file:
                return self.process_lines(file, str(file_path))
        except FileNotFoundError as e:
            raise LogFileError(
                f"File not found: {file_path}",
                error_code="FILE_NOT_FOUND",
                file_path=str(file_path),
            ) from e
        except OSError as e:
            raise LogFileError(
                f"Failed to read file {file_path}: {e}",
                error_code="FILE_READ_ERROR",
                file_path=str(file_path),
                os_error=str(e),
            ) from e

    def process_files(
        self, file_paths: List[Union[str, Path]], concurrency: int = 4
    ) -> List[LogReport]:
        """Process multiple files concurrently, keeping the input order."""
        paths = [Path(p) for p in file_paths]
        results: Dict[int, LogReport] = {}

        with ThreadPoolExecutor(max_workers=max(1, concurrency)) as executor:
            futures = {
                executor.submit(self.process_file, path): index
                for index, path in enumerate(paths)
            }

            for future in as_completed(futures):
                index = futures[future]
                try:
                    results[index] = future.result()
                    logger.info(f"Successfully processed {paths[index]}")
                except LogFileError as e:
                    logger.error(f"Failed to process {paths[index]}: {e}")

        return [results[index] for index in sorted(results)]

    def filter_diagnostics(
        self,
        report: LogReport,
        kinds: Optional[List[DiagnosticKind]] = None,
        message_pattern: Optional[str] = None,
    ) -> LogReport:
        """Filter diagnostics by kind and/or a regular expression on the message."""
        if not kinds and not message_pattern:
            return report

        try:
            pattern = re.compile(message_pattern) if message_pattern else None
        except re.error as e:
            raise ConfigurationError(
                f"Invalid message pattern {message_pattern!r}: {e}",
                error_code="INVALID_PATTERN",
                pattern=message_pattern,
            ) from e

        filtered = LogReport(source=report.source)
        for diag in report.diagnostics:
            kind_match = not kinds or diag.kind in kinds
            message_match = pattern is None or pattern.search(diag.message)
            if kind_match and message_match:
                filtered.add_diagnostic(diag)

        return filtered

    def combine_reports(
        self, reports: List[LogReport], source: str = "<combined>"
    ) -> LogReport:
        """Combine several reports into one, keeping their order."""
        combined = LogReport(source=source)
        for report in reports:
            for diag in report.diagnostics:
                combined.add_diagnostic(diag)
        return combined

    def generate_statistics(self, reports: List[LogReport]) -> Dict[str, Any]:
        """Generate statistics from a list of log reports."""
        stats: Dict[str, Any] = {
            "total_files": len(reports),
            "total_diagnostics": 0,
            "by_kind": {kind.value: 0 for kind in DiagnosticKind},
            "files_with_errors": 0,
        }

        for report in reports:
            errors = len(report.errors)
            warnings = len(report.warnings)

            stats["total_diagnostics"] += errors + warnings
            stats["by_kind"][DiagnosticKind.ERROR.value] += errors
            stats["by_kind"][DiagnosticKind.WARNING.value] += warnings

            if errors > 0:
                stats["files_with_errors"] += 1

        return stats

    def _finish(
        self, parser: LatexLogParser, sink: CollectingSink, source: str
    ) -> LogReport:
        if self.flush_on_end:
            parser.finalize()
        elif parser.assembler.is_collecting:
            logger.warning(f"Dropping unterminated message at end of {source}")
        logger.debug(f"{source}: {len(sink)} diagnostics")
        return LogReport(source=source, diagnostics=list(sink.diagnostics))
