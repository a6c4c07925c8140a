#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Grid placement and spreadsheet output.

- :mod:`mdgrid.renderers.grid` places a document onto grid coordinates
- :mod:`mdgrid.renderers.xlsx` serializes a placed grid with openpyxl
"""

from mdgrid.renderers.base import BaseRenderer
from mdgrid.renderers.grid import (
    CellAttributes,
    GridCell,
    GridLayout,
    LinkTable,
    place_document,
    unique_sheet_name,
)
from mdgrid.renderers.xlsx import XlsxGridWriter

__all__ = [
    "BaseRenderer",
    "CellAttributes",
    "GridCell",
    "GridLayout",
    "LinkTable",
    "XlsxGridWriter",
    "place_document",
    "unique_sheet_name",
]
