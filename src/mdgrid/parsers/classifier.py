#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/parsers/classifier.py
"""Line classification.

Each line is assigned exactly one :class:`~mdgrid.ast.LineKind`. The only
state carried across lines is whether a code fence is open; it lives in a
:class:`FenceState` owned by the document-level parser, never in this module.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mdgrid.ast import LineKind
from mdgrid.constants import CODE_FENCE

HEADER_RE = re.compile(r"^(#{1,6})\s")
UNORDERED_MARKER_RE = re.compile(r"^[-*+]\s")
ORDERED_MARKER_RE = re.compile(r"^\d+\.\s")
HORIZONTAL_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
QUOTE_PREFIX = "> "


@dataclass
class FenceState:
    """Whether the cursor is currently between two code fence delimiters."""

    inside_code_fence: bool = False

    def toggle(self) -> None:
        self.inside_code_fence = not self.inside_code_fence


def is_fence_delimiter(content: str) -> bool:
    return content.startswith(CODE_FENCE)


def is_table_row(content: str) -> bool:
    return content.startswith("|") and content.endswith("|") and content.count("|") >= 2


def classify_line(content: str, inside_code_fence: bool = False) -> LineKind:
    """Classify left-trimmed line content, first matching rule wins.

    Parameters
    ----------
    content : str
        Line content with all leading whitespace removed
    inside_code_fence : bool, default False
        Whether a code fence is open before this line

    Returns
    -------
    LineKind
        The line classification. This function is pure; fence toggling is
        done by :func:`classify_and_track`.

    """
    if not content:
        return LineKind.EMPTY

    if inside_code_fence and not is_fence_delimiter(content):
        return LineKind.PARAGRAPH

    if HEADER_RE.match(content):
        return LineKind.HEADER

    if UNORDERED_MARKER_RE.match(content) or ORDERED_MARKER_RE.match(content):
        return LineKind.LIST_ITEM

    if is_fence_delimiter(content):
        return LineKind.CODE_BLOCK

    if content.startswith(QUOTE_PREFIX):
        return LineKind.QUOTE

    if HORIZONTAL_RULE_RE.match(content):
        return LineKind.HORIZONTAL_RULE

    if is_table_row(content):
        return LineKind.TABLE

    return LineKind.PARAGRAPH


def classify_and_track(content: str, state: FenceState) -> LineKind:
    """Classify a line and flip the fence state on every delimiter line."""
    kind = classify_line(content, state.inside_code_fence)
    if kind is LineKind.CODE_BLOCK:
        state.toggle()
    return kind


def header_level(content: str) -> int:
    """Return the header level (1-6) of a header line, 0 otherwise."""
    match = HEADER_RE.match(content)
    return len(match.group(1)) if match else 0


def strip_line_prefix(content: str, kind: LineKind) -> str:
    """Remove the Markdown marker that introduced a line of the given kind.

    Header markers drop the ``#`` run and exactly one whitespace character,
    quote markers drop ``>`` and at most one following space, and a fence
    delimiter line (including any language tag) reduces to an empty string.
    """
    if kind is LineKind.HEADER:
        return HEADER_RE.sub("", content, count=1)
    if kind is LineKind.LIST_ITEM:
        if UNORDERED_MARKER_RE.match(content):
            return UNORDERED_MARKER_RE.sub("", content, count=1)
        return ORDERED_MARKER_RE.sub("", content, count=1)
    if kind is LineKind.CODE_BLOCK:
        return ""
    if kind is LineKind.QUOTE:
        return re.sub(r"^> ?", "", content, count=1)
    return content
