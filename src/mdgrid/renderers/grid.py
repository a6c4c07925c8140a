#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/renderers/grid.py
"""Placement of a parsed document onto a row/column grid.

Placement is a pure function from a :class:`~mdgrid.ast.Document` and
:class:`~mdgrid.options.GridRendererOptions` to a :class:`GridLayout`. It
creates no new document and keeps no state between calls; the spreadsheet
writer consumes the layout without revisiting the document.

Layout rules
------------
- Line ``i`` (0-based) goes to row ``i + 1``, column
  ``indent_level * indent_column_offset + 1``, one cell per line.
- Link targets are numbered in first-occurrence order across the whole
  document. Every linked run is rendered with a trailing `` [n]`` marker.
- When the document has links, an appendix follows the content after
  a gap of blank rows: a header cell, then one ``[n] target`` row per
  distinct target.

"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Collection, Iterator, Optional

from mdgrid.ast import Document, DocumentLine, RunStyle, TextRun
from mdgrid.constants import (
    APPENDIX_GAP_ROWS,
    APPENDIX_HEADER_LEVEL,
    APPENDIX_HEADER_TEXT,
    LINK_MARKER_TEMPLATE,
    MAX_SHEET_NAME_ATTEMPTS,
)
from mdgrid.options.grid import GridRendererOptions
from mdgrid.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellAttributes:
    """Cell-level fill and borders derived from a line's formatting."""

    background_color: Optional[str] = None
    left_border_color: Optional[str] = None
    bottom_border_color: Optional[str] = None

    @property
    def is_plain(self) -> bool:
        return self.background_color is None and self.left_border_color is None and self.bottom_border_color is None


PLAIN_CELL = CellAttributes()


@dataclass(frozen=True)
class GridCell:
    """One populated cell of the grid.

    Parameters
    ----------
    row, column : int
        1-based coordinates
    runs : tuple of TextRun
        Rich text content of the cell
    attributes : CellAttributes
        Fill and borders
    hyperlink : str or None
        Cell-level hyperlink; only appendix entries carry one

    """

    row: int
    column: int
    runs: tuple[TextRun, ...]
    attributes: CellAttributes = PLAIN_CELL
    hyperlink: Optional[str] = None

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True)
class LinkTable:
    """Distinct link targets in first-occurrence order.

    The number of a target is its 1-based position in ``targets``.

    Examples
    --------
    >>> table = LinkTable(("https://a.example", "https://b.example"))
    >>> table.number_for("https://b.example")
    2
    >>> table.marker_for("https://a.example")
    '[1]'

    """

    targets: tuple[str, ...] = ()
    _numbers: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_numbers", {target: i for i, target in enumerate(self.targets, start=1)})

    @classmethod
    def from_document(cls, document: Document) -> LinkTable:
        """Collect every link target of ``document``, first occurrence wins."""
        seen: dict[str, None] = {}
        for line in document.lines:
            for target in line.links:
                seen.setdefault(target, None)
        return cls(tuple(seen))

    def __len__(self) -> int:
        return len(self.targets)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(enumerate(self.targets, start=1))

    def __contains__(self, target: object) -> bool:
        return target in self._numbers

    def number_for(self, target: str) -> int:
        """Return the number of ``target``.

        Raises
        ------
        KeyError
            If ``target`` is not in the table

        """
        return self._numbers[target]

    def marker_for(self, target: str) -> str:
        return LINK_MARKER_TEMPLATE.format(number=self.number_for(target))


@dataclass(frozen=True)
class GridLayout:
    """Result of placing a document.

    Parameters
    ----------
    cells : tuple of GridCell
        One cell per document line, in row order
    appendix_cells : tuple of GridCell
        Link appendix header and entries; empty when the document has no links
    link_table : LinkTable
        Numbering shared by the inline markers and the appendix
    cell_width : float
        Width of every column in ``1..column_count``
    row_height : float
        Height of every content row
    column_count : int
        Number of columns in the addressable grid
    sheet_name : str
        Requested sheet name, before collision avoidance

    """

    cells: tuple[GridCell, ...]
    appendix_cells: tuple[GridCell, ...]
    link_table: LinkTable
    cell_width: float
    row_height: float
    column_count: int
    sheet_name: str

    @property
    def last_row(self) -> int:
        """Last populated row, counting the appendix; 0 for an empty layout."""
        rows = [cell.row for cell in self.cells] + [cell.row for cell in self.appendix_cells]
        return max(rows, default=0)

    def all_cells(self) -> Iterator[GridCell]:
        yield from self.cells
        yield from self.appendix_cells


def cell_attributes_for(line: DocumentLine) -> CellAttributes:
    """Translate line formatting into cell fill and borders.

    Header level, font size and bold are already carried by the runs and are
    not repeated at the cell level.
    """
    formatting = line.formatting
    return CellAttributes(
        background_color=formatting.background_color,
        left_border_color=formatting.left_border_color,
        bottom_border_color=formatting.bottom_border_color,
    )


def annotate_link_runs(runs: tuple[TextRun, ...], link_table: LinkTable) -> tuple[TextRun, ...]:
    """Append the `` [n]`` marker to every run that carries a link."""
    return tuple(
        replace(run, text=f"{run.text} {link_table.marker_for(run.link)}") if run.link else run for run in runs
    )


def place_line(line: DocumentLine, index: int, link_table: LinkTable, options: GridRendererOptions) -> GridCell:
    """Place the line at 0-based position ``index``."""
    return GridCell(
        row=index + 1,
        column=options.column_for_indent(line.indent_level),
        runs=annotate_link_runs(line.rich_text, link_table),
        attributes=cell_attributes_for(line),
    )


def build_appendix(link_table: LinkTable, content_rows: int, options: GridRendererOptions) -> tuple[GridCell, ...]:
    """Build the link appendix cells that follow ``content_rows`` rows.

    Returns an empty tuple for an empty link table.
    """
    if not link_table:
        return ()

    style = options.style
    header_row = content_rows + APPENDIX_GAP_ROWS + 1
    header_style = RunStyle(
        bold=True,
        font_name=style.font_name,
        font_size=style.header_font_size(APPENDIX_HEADER_LEVEL),
    )
    entry_style = RunStyle(
        underline=True,
        font_name=style.font_name,
        font_size=style.base_font_size,
        color=style.link_color,
    )

    cells = [GridCell(row=header_row, column=1, runs=(TextRun(APPENDIX_HEADER_TEXT, header_style),))]
    for number, target in link_table:
        marker = LINK_MARKER_TEMPLATE.format(number=number)
        cells.append(
            GridCell(
                row=header_row + number,
                column=1,
                runs=(TextRun(f"{marker} {target}", entry_style, link=target),),
                hyperlink=target,
            )
        )
    return tuple(cells)


def place_document(document: Document, options: GridRendererOptions | None = None) -> GridLayout:
    """Project a document onto grid cells plus a link appendix.

    Parameters
    ----------
    document : Document
        Parsed document
    options : GridRendererOptions or None, default None
        Layout configuration; defaults are used when omitted

    Returns
    -------
    GridLayout
        Content cells, appendix cells and uniform layout parameters

    Examples
    --------
    >>> from mdgrid.parsers.markdown import parse_markdown
    >>> layout = place_document(parse_markdown("See [docs](https://d.example)"))
    >>> layout.cells[0].text
    'See docs [1]'
    >>> [cell.text for cell in layout.appendix_cells]
    ['Links', '[1] https://d.example']

    """
    options = options or GridRendererOptions()

    with debug_timer(logger, f"Placing {len(document.lines)} lines"):
        link_table = LinkTable.from_document(document)
        cells = tuple(place_line(line, index, link_table, options) for index, line in enumerate(document.lines))
        appendix = build_appendix(link_table, len(cells), options)

    logger.debug(f"Placed {len(cells)} content cells with {len(link_table)} distinct link targets")
    return GridLayout(
        cells=cells,
        appendix_cells=appendix,
        link_table=link_table,
        cell_width=options.cell_width,
        row_height=options.row_height,
        column_count=options.column_count,
        sheet_name=options.sheet_name,
    )


def unique_sheet_name(
    base_name: str,
    existing_names: Collection[str],
    clock: Callable[[], float] = time.time,
) -> str:
    """Pick a sheet name that does not collide with ``existing_names``.

    The base name is used when free. Otherwise `` (k)`` is appended for the
    smallest free ``k`` in ``1..100``; when all of those are taken the
    current time in milliseconds is used as the suffix.

    Examples
    --------
    >>> unique_sheet_name("Markdown", [])
    'Markdown'
    >>> unique_sheet_name("Markdown", ["Markdown", "Markdown (1)"])
    'Markdown (2)'

    """
    if base_name not in existing_names:
        return base_name

    for attempt in range(1, MAX_SHEET_NAME_ATTEMPTS + 1):
        candidate = f"{base_name} ({attempt})"
        if candidate not in existing_names:
            return candidate

    fallback = f"{base_name} ({int(clock() * 1000)})"
    logger.warning(f"Sheet names '{base_name} (1)' through ({MAX_SHEET_NAME_ATTEMPTS}) are taken, using '{fallback}'")
    return fallback


__all__ = [
    "CellAttributes",
    "GridCell",
    "LinkTable",
    "GridLayout",
    "annotate_link_runs",
    "build_appendix",
    "cell_attributes_for",
    "place_document",
    "place_line",
    "unique_sheet_name",
]
