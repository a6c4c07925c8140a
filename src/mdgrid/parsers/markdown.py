#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/parsers/markdown.py
"""Markdown to line-oriented document converter.

The parser walks the source strictly line by line. Every line goes through
the same stages:

1. indentation analysis (:func:`~mdgrid.parsers.lines.split_indent`)
2. classification, consulting and updating the code fence state
3. list marker substitution, consulting and updating the list counters
4. inline formatting into styled runs, then line-level style overlay

The fence state and list counters live in a :class:`LineCursor` created for
each :meth:`MarkdownGridParser.parse` call, so one parser instance can convert
several documents, concurrently or not, without interference.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from mdgrid.ast import (
    Document,
    DocumentInfo,
    DocumentLine,
    LineFormatting,
    LineKind,
    RunStyle,
    TextRun,
)
from mdgrid.constants import HORIZONTAL_RULE_TEXT, QUOTE_LABEL, TABLE_LABEL
from mdgrid.options.markdown import MarkdownParserOptions
from mdgrid.parsers.base import BaseParser
from mdgrid.parsers.classifier import FenceState, classify_and_track, header_level, strip_line_prefix
from mdgrid.parsers.inline import InlineFormatter
from mdgrid.parsers.lines import split_indent, split_lines
from mdgrid.parsers.lists import ListRenumberer
from mdgrid.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass
class LineCursor:
    """Per-document parsing state threaded through every line."""

    fence: FenceState = field(default_factory=FenceState)
    lists: ListRenumberer = field(default_factory=ListRenumberer)


class MarkdownGridParser(BaseParser):
    r"""Convert Markdown text into a :class:`~mdgrid.ast.Document`.

    Parsing never fails on text input: empty input, unterminated fences and
    unbalanced emphasis all produce a well-formed document.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> doc = MarkdownGridParser().parse("# Hello\n\nThis is **bold**.")
        >>> [line.kind.value for line in doc.lines]
        ['header', 'empty', 'paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self.style = options.style
        self.inline = InlineFormatter(options.style)

    def parse(self, text: str, source_name: Optional[str] = None, source_path: Optional[str] = None) -> Document:
        """Parse Markdown text into a Document.

        Parameters
        ----------
        text : str
            Complete decoded Markdown source
        source_name : str, optional
            Display name stored in the document metadata
        source_path : str, optional
            Source path stored in the document metadata

        Returns
        -------
        Document
            One :class:`~mdgrid.ast.DocumentLine` per source line

        """
        raw_lines = split_lines(text)
        cursor = LineCursor()

        with debug_timer(logger, f"Parsing {len(raw_lines)} lines"):
            lines = tuple(self.parse_line(raw_line, cursor) for raw_line in raw_lines)

        if cursor.fence.inside_code_fence:
            logger.debug("Code fence left open at end of input; remaining lines were treated as code")

        info = DocumentInfo(
            source_name=source_name,
            source_path=source_path,
            line_count=len(raw_lines),
            converted_at=datetime.now(timezone.utc).isoformat(),
        )
        return Document(lines=lines, info=info)

    def parse_line(self, raw_line: str, cursor: LineCursor) -> DocumentLine:
        """Parse one source line, advancing ``cursor``.

        Lines must be fed in source order; the fence state and list counters
        in ``cursor`` depend on every preceding line.
        """
        indent_level, residual = split_indent(raw_line)
        content = residual.lstrip()

        inside_fence = cursor.fence.inside_code_fence
        kind = classify_and_track(content, cursor.fence)
        if kind is not LineKind.LIST_ITEM:
            cursor.lists.reset()

        is_code_content = inside_fence and kind is LineKind.PARAGRAPH
        formatting = self._line_formatting(kind, content, is_code_content)

        if is_code_content:
            runs = self._code_content_runs(residual)
        else:
            runs = self._content_runs(kind, content, residual, indent_level, formatting, cursor)

        if formatting.background_color is None and any(run.image for run in runs):
            formatting = replace(formatting, background_color=self.style.image_background_color)

        return DocumentLine(
            indent_level=indent_level,
            kind=kind,
            rich_text=tuple(runs),
            formatting=formatting,
            original_line=raw_line,
        )

    def _line_formatting(self, kind: LineKind, content: str, is_code_content: bool) -> LineFormatting:
        if kind is LineKind.HEADER:
            level = header_level(content)
            return LineFormatting(header_level=level, font_size=self.style.header_font_size(level))
        if kind is LineKind.QUOTE:
            return LineFormatting(
                is_quote=True,
                font_size=self.style.base_font_size,
                background_color=self.style.quote_background_color,
                left_border_color=self.style.quote_border_color,
            )
        if kind is LineKind.HORIZONTAL_RULE:
            return LineFormatting(
                is_horizontal_rule=True,
                font_size=self.style.base_font_size,
                bottom_border_color=self.style.horizontal_rule_color,
            )
        if kind is LineKind.CODE_BLOCK or is_code_content:
            return LineFormatting(font_size=self.style.base_font_size, background_color=self.style.code_background_color)
        return LineFormatting(font_size=self.style.base_font_size)

    def _code_style(self) -> RunStyle:
        return RunStyle(font_name=self.style.code_font_name, color=self.style.code_color)

    def _code_content_runs(self, residual: str) -> list[TextRun]:
        # Fence interior is copied verbatim, including indentation past the indent level
        return [TextRun(residual, self._code_style())]

    def _content_runs(
        self,
        kind: LineKind,
        content: str,
        residual: str,
        indent_level: int,
        formatting: LineFormatting,
        cursor: LineCursor,
    ) -> list[TextRun]:
        if kind is LineKind.EMPTY:
            return [TextRun("")]
        if kind is LineKind.HORIZONTAL_RULE:
            return [TextRun(HORIZONTAL_RULE_TEXT)]
        if kind is LineKind.TABLE:
            return [TextRun(TABLE_LABEL + residual)]
        if kind is LineKind.CODE_BLOCK:
            return [TextRun("", replace(self._code_style(), font_size=formatting.font_size))]

        if kind is LineKind.LIST_ITEM:
            inline_source = cursor.lists.render(content, indent_level)
        elif kind is LineKind.QUOTE:
            inline_source = QUOTE_LABEL + strip_line_prefix(content, kind)
        elif kind is LineKind.HEADER:
            inline_source = strip_line_prefix(content, kind)
        else:
            inline_source = residual

        runs = self.inline.format(inline_source) or [TextRun("")]
        return [self._overlay_line_style(run, formatting) for run in runs]

    @staticmethod
    def _overlay_line_style(run: TextRun, formatting: LineFormatting) -> TextRun:
        style = run.style
        if formatting.font_size is not None:
            style = replace(style, font_size=formatting.font_size)
        if formatting.header_level > 0:
            style = replace(style, bold=True)
        return replace(run, style=style)


def parse_markdown(
    text: str,
    source_name: Optional[str] = None,
    options: MarkdownParserOptions | None = None,
) -> Document:
    """Parse Markdown text into a Document.

    Convenience wrapper around :class:`MarkdownGridParser`.
    """
    return MarkdownGridParser(options).parse(text, source_name=source_name)


def parse_markdown_file(path: Union[str, Path], options: MarkdownParserOptions | None = None) -> Document:
    """Read a UTF-8 Markdown file and parse it.

    Raises
    ------
    SourceNotFoundError
        If the file does not exist
    SourceReadError
        If the file cannot be read or is not valid UTF-8

    """
    return MarkdownGridParser(options).parse_file(path)
