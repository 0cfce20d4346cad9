"""
Data structures for the LaTeX log parser.

This module contains the core data structures used to represent diagnostics,
lines of process output and the report produced for a single log.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .enums import DiagnosticKind, OutputChannel


@dataclass(frozen=True)
class Diagnostic:
    """A fully reassembled error or warning message."""

    kind: DiagnosticKind
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Diagnostic to a dictionary."""
        return {"kind": self.kind.value, "message": self.message}


@dataclass(frozen=True)
class OutputLine:
    """One physical line of process output together with its channel."""

    text: str
    channel: OutputChannel = OutputChannel.STDOUT


@dataclass
class LogReport:
    """Data class representing the diagnostics found in one compiler log."""

    source: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def add_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic to the report."""
        self.diagnostics.append(diagnostic)

    def get_diagnostics_by_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        """Get all diagnostics of the specified kind."""
        return [diag for diag in self.diagnostics if diag.kind == kind]

    @property
    def errors(self) -> List[Diagnostic]:
        """Get all error diagnostics."""
        return self.get_diagnostics_by_kind(DiagnosticKind.ERROR)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get all warning diagnostics."""
        return self.get_diagnostics_by_kind(DiagnosticKind.WARNING)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the LogReport to a dictionary."""
        return {
            "source": self.source,
            "diagnostics": [diag.to_dict() for diag in self.diagnostics],
        }
