"""mdgrid - convert Markdown into grid-style spreadsheets.

mdgrid reads a Markdown document line by line and lays it out on a fine
spreadsheet grid: every source line becomes one cell, indentation becomes a
column offset, and inline formatting (bold, italic, strikethrough, code spans,
links and images) is kept as rich text inside the cell. Links are numbered
across the document and listed in an appendix below the content.

The pipeline has two pure stages plus a file boundary on either side:

1. :func:`parse_markdown` turns text into an immutable :class:`Document`
2. :func:`place_document` maps the document onto grid cells and a link table
3. :class:`XlsxGridWriter` serializes the placed grid with openpyxl

Requirements
------------
- Python 3.10+
- markdown-it-py for inline tokenizing, openpyxl for XLSX output

Examples
--------
Convert a file:

    >>> from mdgrid import convert_file
    >>> convert_file("README.md")
    PosixPath('README.xlsx')

Inspect the intermediate model:

    >>> from mdgrid import parse_markdown, place_document
    >>> doc = parse_markdown("# Title\\n\\n- item")
    >>> [line.plain_text for line in doc.lines]
    ['Title', '', '• item']
    >>> layout = place_document(doc)
    >>> [(cell.row, cell.column) for cell in layout.cells]
    [(1, 1), (2, 1), (3, 1)]

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdgrid requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdgrid.api import convert_file  # noqa: E402
from mdgrid.ast import Document, DocumentInfo, DocumentLine, LineKind, TextRun  # noqa: E402
from mdgrid.exceptions import (  # noqa: E402
    ConfigurationError,
    MdGridError,
    OutputWriteError,
    SourceNotFoundError,
    SourceReadError,
)
from mdgrid.options import GridRendererOptions, MarkdownParserOptions, StyleOptions  # noqa: E402
from mdgrid.parsers.markdown import MarkdownGridParser, parse_markdown, parse_markdown_file  # noqa: E402
from mdgrid.renderers.grid import GridLayout, place_document  # noqa: E402
from mdgrid.renderers.xlsx import XlsxGridWriter  # noqa: E402

__all__ = [
    "__version__",
    "convert_file",
    "parse_markdown",
    "parse_markdown_file",
    "place_document",
    "MarkdownGridParser",
    "XlsxGridWriter",
    "Document",
    "DocumentInfo",
    "DocumentLine",
    "GridLayout",
    "LineKind",
    "TextRun",
    "GridRendererOptions",
    "MarkdownParserOptions",
    "StyleOptions",
    "MdGridError",
    "ConfigurationError",
    "OutputWriteError",
    "SourceNotFoundError",
    "SourceReadError",
]
