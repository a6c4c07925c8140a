#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown parsing into the line-oriented document model.

The stages run per line in source order:

- :mod:`mdgrid.parsers.lines` normalizes line endings and measures indentation
- :mod:`mdgrid.parsers.classifier` assigns a line kind and tracks code fences
- :mod:`mdgrid.parsers.lists` substitutes list markers and renumbers items
- :mod:`mdgrid.parsers.inline` converts inline markup to styled runs
- :mod:`mdgrid.parsers.markdown` drives the stages and assembles the document
"""

from mdgrid.parsers.base import BaseParser
from mdgrid.parsers.classifier import FenceState, classify_and_track, classify_line, header_level, strip_line_prefix
from mdgrid.parsers.inline import InlineFormatter, merge_adjacent_runs
from mdgrid.parsers.lines import IndentSplit, normalize_newlines, split_indent, split_lines
from mdgrid.parsers.lists import ListRenumberer
from mdgrid.parsers.markdown import LineCursor, MarkdownGridParser, parse_markdown, parse_markdown_file

__all__ = [
    "BaseParser",
    "FenceState",
    "IndentSplit",
    "InlineFormatter",
    "LineCursor",
    "ListRenumberer",
    "MarkdownGridParser",
    "classify_and_track",
    "classify_line",
    "header_level",
    "merge_adjacent_runs",
    "normalize_newlines",
    "parse_markdown",
    "parse_markdown_file",
    "split_indent",
    "split_lines",
    "strip_line_prefix",
]
