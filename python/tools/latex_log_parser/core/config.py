"""
Parser configuration.

The wrap width, the warning prefix table and the error pattern are static data
describing the compiler's output format. They are bundled in an immutable
``ParserConfig`` handed to each parser at construction, so independent parsers
can run side by side with different settings.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Pattern, Tuple, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

PathLike = Union[str, Path]

DEFAULT_WRAP_WIDTH = 79

DEFAULT_ERROR_PATTERN = r"^(?P<file>.+)?:(?P<line>\d+): (?P<message>.+)$"

DEFAULT_WARNING_PREFIXES: Tuple[str, ...] = (
    "LaTeX Warning: ",
    "LaTeX Font Warning: ",
    "AVAIL list clobbered at",
    "Double-AVAIL list clobbered at",
    "Doubly free location at",
    "Bad flag at",
    "Runaway definition",
    "Runaway argument",
    "Runaway text",
    "Missing character: There is no",
    "No pages of output.",
    "Underfull \\hbox",
    "Overfull \\hbox",
    "Loose \\hbox",
    "Tight \\hbox",
    "Underfull \\vbox",
    "Overfull \\vbox",
    "Loose \\vbox",
    "Tight \\vbox",
)


class ParserConfig(BaseModel):
    """Output format of the compiler being parsed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    wrap_width: int = Field(
        default=DEFAULT_WRAP_WIDTH,
        ge=1,
        description="Column at which the compiler wraps its output lines",
    )
    warning_prefixes: Tuple[str, ...] = Field(
        default=DEFAULT_WARNING_PREFIXES,
        description="Literal, case-sensitive prefixes identifying a warning",
    )
    error_pattern: str = Field(
        default=DEFAULT_ERROR_PATTERN,
        description="Regular expression identifying an error; must define a 'message' group",
    )

    @field_validator("warning_prefixes")
    @classmethod
    def validate_warning_prefixes(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Reject empty prefixes, they would match every line."""
        if any(not prefix for prefix in v):
            raise ValueError("warning prefixes must not be empty")
        return v

    @field_validator("error_pattern")
    @classmethod
    def validate_error_pattern(cls, v: str) -> str:
        """Ensure the pattern compiles and captures the message."""
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid error pattern: {e}") from e
        if "message" not in compiled.groupindex:
            raise ValueError("error pattern must define a 'message' group")
        return v

    @property
    def error_regex(self) -> Pattern[str]:
        """Compiled error pattern (``re`` keeps compiled patterns cached)."""
        return re.compile(self.error_pattern)

    def with_overrides(self, **overrides: Any) -> ParserConfig:
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return ParserConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration override: {e}",
                error_code="INVALID_CONFIGURATION",
                validation_errors=e.errors(),
            ) from e

    @classmethod
    def from_file(cls, file_path: PathLike) -> ParserConfig:
        """
        Load and validate a configuration from a JSON file.

        Keys missing from the file keep their default values.

        Raises:
            ConfigurationError: If the file cannot be read, parsed or validated
        """
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                error_code="FILE_NOT_FOUND",
                file_path=str(path),
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in file {path}: {e}",
                error_code="INVALID_JSON",
                file_path=str(path),
                json_error=str(e),
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read file {path}: {e}",
                error_code="FILE_READ_ERROR",
                file_path=str(path),
                os_error=str(e),
            ) from e

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {path}: {e}",
                error_code="INVALID_CONFIGURATION",
                file_path=str(path),
                validation_errors=e.errors(),
            ) from e

        logger.debug(f"Loaded parser configuration from {path}")
        return config


DEFAULT_CONFIG = ParserConfig()
