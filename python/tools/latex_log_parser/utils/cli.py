"""
Command-line interface utilities.

This module provides CLI argument parsing and main function for command-line operation.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..core.config import DEFAULT_CONFIG, ParserConfig
from ..core.exceptions import LogParserException
from ..widgets.main_widget import LogParserWidget


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract errors and warnings from LaTeX compiler logs."
    )

    parser.add_argument("file_paths", nargs="+", help="Paths to the LaTeX log files.")

    parser.add_argument(
        "--output-format",
        choices=["json", "csv", "xml"],
        default="json",
        help="Output format (default: json).",
    )

    parser.add_argument(
        "--output-file",
        default="latex_diagnostics",
        help="Base name for the output file without extension (default: latex_diagnostics).",
    )

    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for output files (default: current directory).",
    )

    parser.add_argument(
        "--filter",
        nargs="*",
        choices=["error", "warning"],
        help="Filter by diagnostic kind.",
    )

    parser.add_argument(
        "--message-pattern", help="Regular expression to filter diagnostics by message."
    )

    parser.add_argument(
        "--config", help="JSON file describing the log format (wrap width, patterns)."
    )

    parser.add_argument(
        "--wrap-width",
        type=int,
        help=f"Column at which the log wraps (default: {DEFAULT_CONFIG.wrap_width}).",
    )

    parser.add_argument(
        "--no-flush",
        action="store_true",
        help="Drop a message left unfinished at the end of a log instead of emitting it.",
    )

    parser.add_argument(
        "--stats", action="store_true", help="Include statistics in the output."
    )

    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging output."
    )

    parser.add_argument(
        "--concurrency",
        type=int,
        default=4,
        help="Number of concurrent threads for processing files (default: 4).",
    )

    parser.add_argument(
        "--no-color", action="store_true", help="Disable colorized output."
    )

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> ParserConfig:
    """Build the parser configuration from a config file and CLI overrides."""
    config = ParserConfig.from_file(args.config) if args.config else DEFAULT_CONFIG
    return config.with_overrides(wrap_width=args.wrap_width)


def main_cli(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line operation."""
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    logger.info(f"Starting LaTeX log processing for {len(args.file_paths)} file(s)")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{args.output_file}.{args.output_format.lower()}"

    try:
        widget = LogParserWidget(load_config(args), flush_on_end=not args.no_flush)

        result = widget.process_and_export(
            input_files=args.file_paths,
            output_format=args.output_format,
            output_path=output_path,
            filter_kinds=args.filter,
            message_pattern=args.message_pattern,
            concurrency=args.concurrency,
            display_stats=args.stats,
            display_output=True,
            colorize=not args.no_color,
        )
    except LogParserException as e:
        logger.error(f"Error processing LaTeX log: {e}")
        return 1

    print(f"\nOutput saved to: {output_path}")

    if result.diagnostics:
        print(f"Found {len(result.errors)} error(s) and {len(result.warnings)} warning(s).")
    else:
        print("No diagnostics found or all diagnostics were filtered out.")

    return 0
