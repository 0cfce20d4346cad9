import json

import pytest
from pydantic import ValidationError

from .core.config import (
    DEFAULT_CONFIG,
    DEFAULT_WARNING_PREFIXES,
    ParserConfig,
)
from .core.exceptions import ConfigurationError


def test_default_config_values():
    assert DEFAULT_CONFIG.wrap_width == 79
    assert len(DEFAULT_CONFIG.warning_prefixes) == 19
    assert DEFAULT_CONFIG.warning_prefixes[0] == "LaTeX Warning: "
    assert DEFAULT_CONFIG.warning_prefixes[-1] == "Tight \\vbox"
    assert DEFAULT_CONFIG.error_regex.match("a.tex:1: b").group("message") == "b"


def test_config_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.wrap_width = 80


@pytest.mark.parametrize(
    "kwargs",
    [
        {"wrap_width": 0},
        {"error_pattern": "(unclosed"},
        {"error_pattern": r"^(?P<file>.+):(?P<line>\d+): (.+)$"},
        {"warning_prefixes": ("LaTeX Warning: ", "")},
        {"unknown_option": True},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValidationError):
        ParserConfig(**kwargs)


def test_with_overrides():
    config = DEFAULT_CONFIG.with_overrides(wrap_width=100)
    assert config.wrap_width == 100
    assert config.warning_prefixes == DEFAULT_WARNING_PREFIXES
    assert DEFAULT_CONFIG.wrap_width == 79


def test_with_overrides_ignores_none():
    assert DEFAULT_CONFIG.with_overrides(wrap_width=None) == DEFAULT_CONFIG


def test_with_overrides_validates():
    with pytest.raises(ConfigurationError) as excinfo:
        DEFAULT_CONFIG.with_overrides(wrap_width=-1)
    assert excinfo.value.error_code == "INVALID_CONFIGURATION"


def test_from_file_merges_defaults(tmp_path):
    path = tmp_path / "format.json"
    path.write_text(json.dumps({"wrap_width": 120, "warning_prefixes": ["Package "]}))
    config = ParserConfig.from_file(path)
    assert config.wrap_width == 120
    assert config.warning_prefixes == ("Package ",)
    assert config.error_pattern == DEFAULT_CONFIG.error_pattern


@pytest.mark.parametrize(
    "content, error_code",
    [
        ("{not json", "INVALID_JSON"),
        (json.dumps({"wrap_width": "wide"}), "INVALID_CONFIGURATION"),
    ],
)
def test_from_file_errors(tmp_path, content, error_code):
    path = tmp_path / "format.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError) as excinfo:
        ParserConfig.from_file(path)
    assert excinfo.value.error_code == error_code
    assert excinfo.value.context["file_path"] == str(path)


def test_from_file_missing(tmp_path):
    with pytest.raises(ConfigurationError) as excinfo:
        ParserConfig.from_file(tmp_path / "missing.json")
    assert excinfo.value.error_code == "FILE_NOT_FOUND"
