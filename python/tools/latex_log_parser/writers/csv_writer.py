"""
CSV report writer.

This module provides functionality to write a log report to CSV format.
"""

import csv
from pathlib import Path

from loguru import logger

from ..core.data_structures import LogReport


class CsvWriter:
    """Writer for CSV output format."""

    fieldnames = ["source", "kind", "message"]

    def write(self, report: LogReport, output_path: Path) -> None:
        """Write the log report to a CSV file, one row per diagnostic."""
        rows = [
            {"source": report.source, **diag.to_dict()} for diag in report.diagnostics
        ]

        with output_path.open("w", newline="", encoding="utf-8") as csvfile:
            writer = csv.DictWriter(
                csvfile, fieldnames=self.fieldnames, extrasaction="ignore"
            )
            writer.writeheader()
            writer.writerows(rows)
        logger.info(f"CSV output written to {output_path}")
