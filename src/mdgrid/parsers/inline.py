#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/parsers/inline.py
"""Inline Markdown to styled text runs.

Inline markup is tokenized with markdown-it-py in inline mode, which gives
CommonMark semantics for the hard cases: a link destination ends at the first
unbalanced ``)``, balanced parentheses and backslash-escaped ``\\)`` stay in
the destination, ``_`` does not open or close emphasis inside a word while
``*`` does, and unmatched delimiters stay literal. Entities and backslash
escapes arrive already decoded.

The flat open/close token stream is folded into the closed node set of
:mod:`mdgrid.ast.nodes`, and a visitor turns the node tree into
:class:`~mdgrid.ast.TextRun` objects while accumulating the inherited style.
Adjacent runs with identical style, link and image are finally merged.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from markdown_it import MarkdownIt

from mdgrid.ast import (
    DEFAULT_STYLE,
    CodeSpan,
    Emphasis,
    Image,
    ImageRef,
    InlineNode,
    InlineVisitor,
    Link,
    RawMarkup,
    RunStyle,
    Strikethrough,
    Strong,
    Text,
    TextRun,
    plain_text,
)
from mdgrid.constants import IMAGE_PLACEHOLDER_TEXT
from mdgrid.options.style import StyleOptions

if TYPE_CHECKING:
    from markdown_it.token import Token

logger = logging.getLogger(__name__)

_TEXT_TOKENS = frozenset({"text", "text_special"})


def create_inline_parser() -> MarkdownIt:
    """Create a CommonMark markdown-it instance with strikethrough enabled."""
    return MarkdownIt("commonmark").enable("strikethrough")


def _container_nodes(opener: Token, children: list[InlineNode]) -> list[InlineNode]:
    content = tuple(children)
    if opener.type == "strong_open":
        return [Strong(content=content)]
    if opener.type == "em_open":
        return [Emphasis(content=content)]
    if opener.type == "s_open":
        return [Strikethrough(content=content)]
    if opener.type == "link_open":
        href = opener.attrGet("href")
        title = opener.attrGet("title")
        return [Link(url=str(href or ""), content=content, title=str(title) if title else None)]
    # Unsupported container: keep its children, drop the container
    return children


def _leaf_node(token: Token) -> Optional[InlineNode]:
    if token.type in _TEXT_TOKENS:
        return Text(token.content) if token.content else None
    if token.type == "code_inline":
        return CodeSpan(token.content)
    if token.type == "html_inline":
        return RawMarkup(token.content)
    if token.type == "image":
        alt = plain_text(build_inline_nodes(token.children or []))
        title = token.attrGet("title")
        return Image(src=str(token.attrGet("src") or ""), alt=alt, title=str(title) if title else None)
    if token.type in ("softbreak", "hardbreak"):
        return Text(" ")
    if token.content:
        logger.debug("Flattening unsupported inline token %r to text", token.type)
        return Text(token.content)
    return None


def build_inline_nodes(tokens: Sequence[Token]) -> list[InlineNode]:
    """Fold a flat markdown-it inline token stream into inline nodes.

    Opening tokens push a frame, closing tokens pop it and wrap the collected
    children in the matching node. Stray closers are ignored and openers left
    unclosed at the end are flattened into their parent.

    Parameters
    ----------
    tokens : sequence of Token
        Children of a markdown-it ``inline`` token

    Returns
    -------
    list of InlineNode
        Top-level inline nodes

    """
    current: list[InlineNode] = []
    stack: list[tuple[Token, list[InlineNode]]] = []

    for token in tokens:
        if token.nesting == 1:
            stack.append((token, current))
            current = []
        elif token.nesting == -1:
            if not stack:
                continue
            opener, parent = stack.pop()
            parent.extend(_container_nodes(opener, current))
            current = parent
        else:
            node = _leaf_node(token)
            if node is not None:
                current.append(node)

    while stack:
        _, parent = stack.pop()
        parent.extend(current)
        current = parent

    return current


class RunBuilder(InlineVisitor):
    """Visitor turning inline nodes into text runs.

    The style in effect while visiting a node is the style inherited from its
    ancestors: strong, emphasis and strikethrough each add one flag for their
    children, links add underline and the link color and then stamp their
    target on every run they produced.

    Parameters
    ----------
    style_options : StyleOptions
        Fonts and colors for code spans, links and image placeholders
    base_style : RunStyle, default DEFAULT_STYLE
        Style inherited by top-level nodes

    """

    def __init__(self, style_options: StyleOptions, base_style: RunStyle = DEFAULT_STYLE) -> None:
        self.style_options = style_options
        self._style = base_style

    def build(self, nodes: Iterable[InlineNode]) -> list[TextRun]:
        runs: list[TextRun] = []
        for node in nodes:
            runs.extend(node.accept(self))
        return runs

    def _build_with_style(self, style: RunStyle, nodes: Iterable[InlineNode]) -> list[TextRun]:
        saved = self._style
        self._style = style
        try:
            return self.build(nodes)
        finally:
            self._style = saved

    def visit_text(self, node: Text) -> list[TextRun]:
        return [TextRun(node.content, self._style)] if node.content else []

    def visit_raw_markup(self, node: RawMarkup) -> list[TextRun]:
        return [TextRun(node.content, self._style)] if node.content else []

    def visit_code_span(self, node: CodeSpan) -> list[TextRun]:
        style = replace(
            self._style,
            code=True,
            color=self.style_options.inline_code_color,
            font_name=self.style_options.code_font_name,
        )
        return [TextRun(node.content, style)]

    def visit_image(self, node: Image) -> list[TextRun]:
        style = replace(self._style, color=self.style_options.image_alt_color)
        return [TextRun(node.alt or IMAGE_PLACEHOLDER_TEXT, style, image=ImageRef(src=node.src, alt=node.alt))]

    def visit_strong(self, node: Strong) -> list[TextRun]:
        return self._build_with_style(replace(self._style, bold=True), node.content)

    def visit_emphasis(self, node: Emphasis) -> list[TextRun]:
        return self._build_with_style(replace(self._style, italic=True), node.content)

    def visit_strikethrough(self, node: Strikethrough) -> list[TextRun]:
        return self._build_with_style(replace(self._style, strike=True), node.content)

    def visit_link(self, node: Link) -> list[TextRun]:
        style = replace(self._style, underline=True, color=self.style_options.link_color)
        return [replace(run, link=node.url) for run in self._build_with_style(style, node.content)]


def merge_adjacent_runs(runs: Iterable[TextRun]) -> list[TextRun]:
    """Concatenate neighbouring runs whose style, link and image are equal.

    Examples
    --------
    >>> runs = merge_adjacent_runs([TextRun("a"), TextRun("b"), TextRun("c", RunStyle(bold=True))])
    >>> [run.text for run in runs]
    ['ab', 'c']

    """
    merged: list[TextRun] = []
    for run in runs:
        if merged and merged[-1].merge_key() == run.merge_key():
            merged[-1] = replace(merged[-1], text=merged[-1].text + run.text)
        else:
            merged.append(run)
    return merged


class InlineFormatter:
    """Parse inline Markdown in one line of content into merged text runs.

    Parameters
    ----------
    style_options : StyleOptions or None, default None
        Fonts and colors for code spans, links and images

    Examples
    --------
    >>> runs = InlineFormatter().format("plain **bold** `code`")
    >>> [run.text for run in runs]
    ['plain ', 'bold', ' ', 'code']

    """

    def __init__(self, style_options: StyleOptions | None = None) -> None:
        self.style_options = style_options or StyleOptions()
        self._md = create_inline_parser()

    def parse_nodes(self, content: str) -> list[InlineNode]:
        """Tokenize ``content`` and return its inline node tree."""
        if not content:
            return []
        nodes: list[InlineNode] = []
        for block_token in self._md.parseInline(content):
            nodes.extend(build_inline_nodes(block_token.children or []))
        return nodes

    def format(self, content: str) -> list[TextRun]:
        """Return the merged styled runs for a line's content."""
        builder = RunBuilder(self.style_options)
        return merge_adjacent_runs(builder.build(self.parse_nodes(content)))
