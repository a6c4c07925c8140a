#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/parsers/lines.py
"""Line splitting and indentation analysis.

Two small, pure helpers sit at the bottom of the parsing pipeline:

- :func:`split_lines` normalizes CRLF and lone CR to LF and splits on LF
- :func:`split_indent` derives an indentation level from the leading
  whitespace width of a line and strips exactly that much width

"""

from __future__ import annotations

from typing import NamedTuple

from mdgrid.constants import INDENT_WIDTH, TAB_WIDTH


class IndentSplit(NamedTuple):
    """Result of :func:`split_indent`."""

    level: int
    content: str


def normalize_newlines(text: str) -> str:
    """Convert Windows (CRLF) and classic Mac (CR) line breaks to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> list[str]:
    r"""Split source text into logical lines.

    A trailing line break yields a trailing empty line, so the number of lines
    is always the number of line breaks plus one. Empty input yields ``[""]``.

    Examples
    --------
    >>> split_lines("a\r\nb\rc\n")
    ['a', 'b', 'c', '']

    """
    return normalize_newlines(text).split("\n")


def _char_width(char: str) -> int:
    if char == " ":
        return 1
    if char == "\t":
        return TAB_WIDTH
    return 0


def split_indent(line: str) -> IndentSplit:
    """Compute the indentation level of a line and the residual content.

    Each leading space counts one width unit and each leading tab counts four.
    The level is ``total_width // 4``. The residual is the line with leading
    whitespace removed until ``level * 4`` width units have been consumed; a
    tab that crosses the boundary is consumed whole, and whitespace after the
    boundary is preserved verbatim.

    Parameters
    ----------
    line : str
        A single source line without line terminator

    Returns
    -------
    IndentSplit
        ``(level, content)``

    Examples
    --------
    >>> split_indent("\\t  x")
    IndentSplit(level=1, content='  x')
    >>> split_indent("  - item")
    IndentSplit(level=0, content='  - item')

    """
    total_width = 0
    for char in line:
        width = _char_width(char)
        if not width:
            break
        total_width += width

    level = total_width // INDENT_WIDTH
    target_width = level * INDENT_WIDTH
    if target_width == 0:
        return IndentSplit(level, line)

    consumed = 0
    cut_index = 0
    for index, char in enumerate(line):
        if consumed >= target_width:
            break
        width = _char_width(char)
        if not width:
            break
        consumed += width
        cut_index = index + 1

    return IndentSplit(level, line[cut_index:])
