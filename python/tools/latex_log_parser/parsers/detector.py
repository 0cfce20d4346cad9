"""
Diagnostic detector.

Decides whether a piece of LaTeX output starts an error or a warning. Errors
are recognised by the configured error pattern, warnings by a table of literal
prefixes; the error pattern is tried first.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.config import DEFAULT_CONFIG, ParserConfig
from ..core.enums import DiagnosticKind


@dataclass(frozen=True)
class Detection:
    """A diagnostic start found in a piece of text."""

    kind: DiagnosticKind
    message: str


class DiagnosticDetector:
    """Matches text against the error pattern and the warning prefix table."""

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config
        self.error_pattern = config.error_regex
        self.warning_prefixes = config.warning_prefixes

    def match_error(self, text: str) -> Optional[Detection]:
        """Errors keep only the message; the file and line prefix is dropped."""
        match = self.error_pattern.search(text)
        # A custom pattern may leave the message group unmatched
        if match is None or match.group("message") is None:
            return None
        return Detection(DiagnosticKind.ERROR, match.group("message"))

    def match_warning(self, text: str) -> Optional[Detection]:
        """Warnings have no location prefix, the whole text is the message."""
        if any(text.startswith(prefix) for prefix in self.warning_prefixes):
            return Detection(DiagnosticKind.WARNING, text)
        return None

    def match(self, text: str) -> Optional[Detection]:
        """Return the diagnostic starting in ``text``, errors taking precedence."""
        return self.match_error(text) or self.match_warning(text)
