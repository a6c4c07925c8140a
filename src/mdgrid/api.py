#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/api.py
"""High-level conversion entry points.

These functions wire the file boundary, the parser, the grid placer and the
XLSX writer together. File errors surface as
:class:`~mdgrid.exceptions.FileError` subclasses before any parsing happens,
and a conversion either writes a complete workbook or raises.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from mdgrid.options.grid import GridRendererOptions
from mdgrid.options.markdown import MarkdownParserOptions
from mdgrid.parsers.markdown import parse_markdown_file
from mdgrid.renderers.xlsx import XlsxGridWriter
from mdgrid.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".xlsx"


def default_output_path(input_path: Union[str, Path]) -> Path:
    """Return ``input_path`` with its suffix replaced by ``.xlsx``.

    Examples
    --------
    >>> default_output_path("notes/readme.md").as_posix()
    'notes/readme.xlsx'

    """
    return Path(input_path).with_suffix(OUTPUT_SUFFIX)


def convert_file(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: GridRendererOptions | None = None,
) -> Path:
    """Convert a Markdown file into a grid-style XLSX workbook.

    Parameters
    ----------
    input_path : str or Path
        UTF-8 Markdown source
    output_path : str or Path, optional
        Destination workbook. Defaults to ``input_path`` with an ``.xlsx``
        suffix. An existing workbook gets a new sheet.
    parser_options : MarkdownParserOptions, optional
        Parsing options
    renderer_options : GridRendererOptions, optional
        Layout options

    Returns
    -------
    Path
        The written workbook path

    Raises
    ------
    SourceNotFoundError
        If ``input_path`` does not exist
    SourceReadError
        If ``input_path`` cannot be read or decoded
    OutputWriteError
        If the workbook cannot be written

    """
    input_path = Path(input_path)
    output = Path(output_path) if output_path is not None else default_output_path(input_path)

    with debug_timer(logger, f"Converting {input_path}"):
        document = parse_markdown_file(input_path, parser_options)
        XlsxGridWriter(renderer_options).render(document, output)

    logger.info(f"Converted {input_path} -> {output} ({document.info.line_count} lines)")
    return output


__all__ = ["convert_file", "default_output_path"]
