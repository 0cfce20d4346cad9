"""
Exception hierarchy for the LaTeX log parser.

Parsing itself never raises: any text is valid input. These exceptions cover
the surroundings of the parser (configuration, log files, export formats).
"""

from typing import Any, Optional

from loguru import logger


class LogParserException(Exception):
    """Base exception for log parser errors."""

    def __init__(
        self, message: str, *, error_code: Optional[str] = None, **kwargs: Any
    ):
        super().__init__(message)
        self.error_code = error_code
        self.context = kwargs

        logger.bind(error_code=error_code, context=kwargs).error(
            f"LogParserException: {message}"
        )


class ConfigurationError(LogParserException):
    """Raised when a parser configuration cannot be loaded or is invalid."""

    pass


class LogFileError(LogParserException):
    """Raised when a log file cannot be read."""

    pass


class UnsupportedFormatError(LogParserException):
    """Raised when an export format is not supported."""

    pass
