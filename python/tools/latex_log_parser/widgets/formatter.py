"""
Console formatter widget.

This module provides functionality to format a log report for console display
with colorized output based on diagnostic kind.
"""

from termcolor import colored

from ..core.data_structures import Diagnostic, LogReport
from ..core.enums import DiagnosticKind


class ConsoleFormatterWidget:
    """Widget for formatting log reports for console display."""

    def __init__(self):
        """Initialize the console formatter widget."""
        self.color_map = {
            DiagnosticKind.ERROR: "red",
            DiagnosticKind.WARNING: "yellow",
        }

        self.prefix_map = {
            DiagnosticKind.ERROR: "ERROR",
            DiagnosticKind.WARNING: "WARNING",
        }

    def format_summary(self, report: LogReport) -> str:
        """Format a summary of a log report."""
        lines = [
            "\nLaTeX Log Summary:",
            f"Source: {report.source}",
            f"Total Diagnostics: {len(report.diagnostics)}",
            f"Errors: {len(report.errors)}",
            f"Warnings: {len(report.warnings)}",
        ]
        return "\n".join(lines)

    def format_diagnostic(self, diag: Diagnostic, colorize: bool = True) -> str:
        """Format a single diagnostic, with color unless disabled."""
        prefix = self.prefix_map.get(diag.kind, "UNKNOWN")
        text = f"{prefix}: {diag.message}"
        if not colorize:
            return text
        return colored(text, self.color_map.get(diag.kind, "white"))

    def colorize_output(self, report: LogReport) -> None:
        """Print the report with colorized formatting based on diagnostic kind."""
        print(self.format_summary(report))
        print("\nMessages:")

        for diag in report.diagnostics:
            print(self.format_diagnostic(diag))

    def get_formatted_output(self, report: LogReport) -> str:
        """Get formatted output as a string without colors."""
        lines = [self.format_summary(report), "\nMessages:"]
        lines.extend(
            self.format_diagnostic(diag, colorize=False) for diag in report.diagnostics
        )
        return "\n".join(lines)
