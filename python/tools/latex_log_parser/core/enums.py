"""
Enums for the LaTeX log parser.

This module contains all the enumeration types used throughout the log parser system.
"""

from enum import Enum, auto


class DiagnosticKind(Enum):
    """Enumeration of diagnostic kinds found in LaTeX output."""

    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def from_string(cls, kind: str) -> "DiagnosticKind":
        """Convert string kind to enum value."""
        normalized = kind.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported diagnostic kind: {kind}")


class OutputChannel(Enum):
    """Channel a line of process output arrived on."""

    STDOUT = auto()
    STDERR = auto()
    SYSTEM = auto()

    @property
    def is_process_output(self) -> bool:
        """Whether lines on this channel were written by the compiler process."""
        return self in (OutputChannel.STDOUT, OutputChannel.STDERR)


class OutputFormat(Enum):
    """Enumeration of supported output formats."""

    JSON = auto()
    CSV = auto()
    XML = auto()

    @classmethod
    def from_string(cls, format_name: str) -> "OutputFormat":
        """Convert string format name to enum value."""
        name = format_name.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unsupported output format: {format_name}")
