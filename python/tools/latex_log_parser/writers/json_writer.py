"""
JSON report writer.

This module provides functionality to write a log report to JSON format.
"""

import json
from pathlib import Path

from loguru import logger

from ..core.data_structures import LogReport


class JsonWriter:
    """Writer for JSON output format."""

    def write(self, report: LogReport, output_path: Path) -> None:
        """Write the log report to a JSON file."""
        data = report.to_dict()
        with output_path.open("w", encoding="utf-8") as json_file:
            json.dump(data, json_file, indent=2, ensure_ascii=False)
        logger.info(f"JSON output written to {output_path}")
