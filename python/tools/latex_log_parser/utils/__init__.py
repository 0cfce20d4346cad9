"""
Utility modules for the LaTeX log parser.

This module provides CLI support.
"""

from .cli import load_config, main_cli, parse_args

__all__ = [
    "load_config",
    "main_cli",
    "parse_args",
]
