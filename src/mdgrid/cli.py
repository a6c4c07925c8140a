#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/cli.py
"""Command line interface for mdgrid.

Usage::

    mdgrid README.md
    mdgrid README.md -o docs.xlsx --sheet-name Readme --cell-width 2.5

Options are resolved from defaults, then a configuration file, then
command line flags, later sources winning.

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, Optional

from mdgrid import __version__
from mdgrid.api import convert_file
from mdgrid.config import load_config_with_priority, merge_configs, options_from_config
from mdgrid.exceptions import MdGridError
from mdgrid.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdgrid",
        description="Convert Markdown into a grid-style spreadsheet.",
    )
    parser.add_argument("input", help="Markdown file to convert (UTF-8)")
    parser.add_argument("-o", "--out", dest="output", help="Output workbook (default: input with .xlsx suffix)")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .yml, .json or pyproject.toml)")

    layout = parser.add_argument_group("layout")
    layout.add_argument("--sheet-name", help="Base name of the new worksheet")
    layout.add_argument("--cell-width", type=float, help="Width of every grid column")
    layout.add_argument("--row-height", type=float, help="Height of every row")
    layout.add_argument("--indent-offset", type=int, help="Columns to shift per indentation level")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", help="Logging level")
    logging_group.add_argument("--log-file", help="Also write log output to this file")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def cli_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Collect layout flags that were given on the command line."""
    overrides: Dict[str, Any] = {}
    if parsed_args.sheet_name is not None:
        overrides["sheet_name"] = parsed_args.sheet_name
    if parsed_args.cell_width is not None:
        overrides["cell_width"] = parsed_args.cell_width
    if parsed_args.row_height is not None:
        overrides["row_height"] = parsed_args.row_height
    if parsed_args.indent_offset is not None:
        overrides["indent_column_offset"] = parsed_args.indent_offset
    return overrides


def main(args: Optional[list[str]] = None) -> int:
    """Run the command line interface and return the exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = merge_configs(load_config_with_priority(parsed_args.config), cli_overrides(parsed_args))
        parser_options, renderer_options = options_from_config(config)
        output = convert_file(parsed_args.input, parsed_args.output, parser_options, renderer_options)
    except MdGridError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    print(f"Wrote {output}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
