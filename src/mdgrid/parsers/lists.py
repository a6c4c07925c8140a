#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/parsers/lists.py
"""List marker substitution and ordered-list renumbering."""

from __future__ import annotations

from mdgrid.constants import BULLET_MARKER, ORDERED_MARKER_TEMPLATE
from mdgrid.parsers.classifier import ORDERED_MARKER_RE, UNORDERED_MARKER_RE


class ListRenumberer:
    """Running ordinals for ordered list items, one counter per indent level.

    The source numbers of ordered items are ignored: the first ordered item
    at a level is rendered ``1.``, the next ``2.``, and so on. Any non-list
    line clears every level at once, so numbering restarts after an
    intervening paragraph even for nested levels.

    Examples
    --------
    >>> renumberer = ListRenumberer()
    >>> renumberer.render("7. first", 0)
    '1. first'
    >>> renumberer.render("7. second", 0)
    '2. second'
    >>> renumberer.reset()
    >>> renumberer.render("3. again", 0)
    '1. again'

    """

    def __init__(self) -> None:
        self._counters: dict[int, int] = {}

    def reset(self) -> None:
        self._counters = {}

    def next_ordinal(self, indent_level: int) -> int:
        ordinal = self._counters.get(indent_level, 0) + 1
        self._counters[indent_level] = ordinal
        return ordinal

    def render(self, content: str, indent_level: int) -> str:
        """Replace the list marker of a list item line.

        Unordered markers (``-``, ``*``, ``+``) become the fixed bullet marker;
        ordered markers become the running ordinal for ``indent_level``.
        Content without a list marker is returned unchanged.
        """
        unordered = UNORDERED_MARKER_RE.match(content)
        if unordered:
            return BULLET_MARKER + content[unordered.end() :]

        ordered = ORDERED_MARKER_RE.match(content)
        if ordered:
            number = self.next_ordinal(indent_level)
            return ORDERED_MARKER_TEMPLATE.format(number=number) + content[ordered.end() :]

        return content
