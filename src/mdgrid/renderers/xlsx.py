#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/renderers/xlsx.py
"""Spreadsheet output for placed grid layouts.

This module provides :class:`XlsxGridWriter`, which places a document with
:func:`~mdgrid.renderers.grid.place_document` and serializes the resulting
layout as an XLSX worksheet with openpyxl. Each cell receives its runs as
rich text, so emphasis, code spans and links keep their character
formatting inside a single cell.

When the output path already holds a workbook, the new worksheet is added
to it under a name that does not collide with the existing sheets.

"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import IO, Optional, Union

from openpyxl import Workbook, load_workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from mdgrid.ast import Document, RunStyle, TextRun
from mdgrid.exceptions import RenderingError
from mdgrid.options.grid import GridRendererOptions
from mdgrid.renderers.base import BaseRenderer
from mdgrid.renderers.grid import CellAttributes, GridCell, GridLayout, place_document, unique_sheet_name
from mdgrid.utils.decorators import debug_timer
from mdgrid.utils.io_utils import write_bytes

logger = logging.getLogger(__name__)

QUOTE_BORDER_STYLE = "thick"
RULE_BORDER_STYLE = "thin"


def _clean_text(text: str) -> str:
    # Control characters are not allowed in SpreadsheetML strings
    return ILLEGAL_CHARACTERS_RE.sub("", text)


class XlsxGridWriter(BaseRenderer):
    """Render documents as grid-style XLSX worksheets.

    Parameters
    ----------
    options : GridRendererOptions or None, default = None
        Layout, fonts and colors

    Examples
    --------
    Write a workbook:

        >>> from mdgrid.parsers.markdown import parse_markdown
        >>> writer = XlsxGridWriter()
        >>> writer.render(parse_markdown("# Notes"), "notes.xlsx")

    """

    def __init__(self, options: GridRendererOptions | None = None):
        """Initialize the writer with options."""
        BaseRenderer._validate_options_type(options, GridRendererOptions, "xlsx")
        options = options or GridRendererOptions()
        super().__init__(options)
        self.options: GridRendererOptions = options

    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the document and write the workbook.

        Parameters
        ----------
        doc : Document
            Parsed document
        output : str, Path, or IO[bytes]
            Destination. An existing workbook at a path destination is
            extended with a new sheet rather than replaced.

        Raises
        ------
        RenderingError
            If the workbook cannot be built
        OutputWriteError
            If the destination cannot be written

        """
        existing_path = Path(output) if isinstance(output, (str, Path)) else None
        content = self.render_to_bytes(doc, existing_path=existing_path)
        write_bytes(content, output)

    def render_to_bytes(self, doc: Document, existing_path: Optional[Path] = None) -> bytes:
        """Render the document to XLSX bytes.

        Parameters
        ----------
        doc : Document
            Parsed document
        existing_path : Path, optional
            Workbook to extend with the new sheet, if the file exists

        Returns
        -------
        bytes
            XLSX file content

        """
        layout = place_document(doc, self.options)
        workbook = self.build_workbook(layout, existing_path)
        buffer = BytesIO()
        try:
            workbook.save(buffer)
        except Exception as e:
            raise RenderingError(f"Failed to render XLSX: {e!r}", rendering_stage="save", original_error=e) from e
        return buffer.getvalue()

    def build_workbook(self, layout: GridLayout, existing_path: Optional[Path] = None) -> Workbook:
        """Create or load a workbook and add a worksheet for ``layout``."""
        workbook = self._open_workbook(existing_path)
        sheet_name = unique_sheet_name(layout.sheet_name, workbook.sheetnames)
        logger.debug(f"Adding worksheet '{sheet_name}'")
        worksheet = workbook.create_sheet(title=sheet_name)

        with debug_timer(logger, f"Writing worksheet '{sheet_name}'"):
            self._setup_grid(worksheet, layout)
            for cell in layout.all_cells():
                self._write_cell(worksheet, cell)
        return workbook

    @staticmethod
    def _open_workbook(existing_path: Optional[Path]) -> Workbook:
        if existing_path is not None and existing_path.exists():
            try:
                return load_workbook(existing_path, rich_text=True)
            except Exception as e:
                logger.warning(f"Could not read existing workbook {existing_path}, creating a new one instead: {e}")

        workbook = Workbook()
        # A fresh workbook starts with an empty default sheet
        workbook.remove(workbook.active)
        return workbook

    @staticmethod
    def _setup_grid(worksheet: Worksheet, layout: GridLayout) -> None:
        for column_index in range(1, layout.column_count + 1):
            worksheet.column_dimensions[get_column_letter(column_index)].width = layout.cell_width
        for row_index in range(1, layout.last_row + 1):
            worksheet.row_dimensions[row_index].height = layout.row_height

    def _write_cell(self, worksheet: Worksheet, grid_cell: GridCell) -> None:
        cell = worksheet.cell(row=grid_cell.row, column=grid_cell.column)

        if grid_cell.hyperlink:
            cell.value = _clean_text(grid_cell.text)
            cell.hyperlink = grid_cell.hyperlink
            if grid_cell.runs:
                cell.font = self._cell_font(grid_cell.runs[0].style)
        elif grid_cell.text:
            cell.value = self._rich_text(grid_cell.runs)
        elif grid_cell.runs:
            # Empty content still carries the line font, e.g. code fence rows
            cell.font = self._cell_font(grid_cell.runs[0].style)

        self._apply_attributes(cell, grid_cell.attributes)

    def _rich_text(self, runs: tuple[TextRun, ...]) -> CellRichText:
        blocks = [TextBlock(self._inline_font(run.style), _clean_text(run.text)) for run in runs if run.text]
        return CellRichText(blocks)

    def _font_name(self, style: RunStyle) -> str:
        return style.font_name or self.options.style.font_name

    def _inline_font(self, style: RunStyle) -> InlineFont:
        return InlineFont(
            rFont=self._font_name(style),
            sz=style.font_size or self.options.style.base_font_size,
            b=bool(style.bold),
            i=bool(style.italic),
            strike=bool(style.strike),
            u="single" if style.underline else None,
            color=style.color,
        )

    def _cell_font(self, style: RunStyle) -> Font:
        return Font(
            name=self._font_name(style),
            size=style.font_size or self.options.style.base_font_size,
            bold=bool(style.bold),
            italic=bool(style.italic),
            strike=bool(style.strike),
            underline="single" if style.underline else None,
            color=style.color,
        )

    @staticmethod
    def _apply_attributes(cell, attributes: CellAttributes) -> None:
        if attributes.is_plain:
            return

        if attributes.background_color:
            cell.fill = PatternFill(fill_type="solid", fgColor=attributes.background_color)

        sides = {}
        if attributes.left_border_color:
            sides["left"] = Side(style=QUOTE_BORDER_STYLE, color=attributes.left_border_color)
        if attributes.bottom_border_color:
            sides["bottom"] = Side(style=RULE_BORDER_STYLE, color=attributes.bottom_border_color)
        if sides:
            cell.border = Border(**sides)


__all__ = ["XlsxGridWriter"]
