"""
Base writer interface.

This module defines the protocol that all report writers must implement.
"""

from pathlib import Path
from typing import Protocol

from ..core.data_structures import LogReport


class ReportWriter(Protocol):
    """Protocol defining interface for report writers."""

    def write(self, report: LogReport, output_path: Path) -> None:
        """Write the log report to the specified path."""
        ...
