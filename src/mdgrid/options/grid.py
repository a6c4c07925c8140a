#  Copyright (c) 2025 Tom Villani, Ph.D.

# mdgrid/options/grid.py
"""Configuration options for grid placement and spreadsheet output."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdgrid.constants import (
    DEFAULT_CELL_WIDTH,
    DEFAULT_GRID_COLUMN_COUNT,
    DEFAULT_INDENT_COLUMN_OFFSET,
    DEFAULT_ROW_HEIGHT,
    DEFAULT_SHEET_NAME,
)
from mdgrid.options.base import BaseRendererOptions
from mdgrid.options.style import StyleOptions

INVALID_SHEET_NAME_CHARS = frozenset("\\/?*[]:")


@dataclass(frozen=True)
class GridRendererOptions(BaseRendererOptions):
    """Layout options for projecting a document onto a row/column grid.

    Parameters
    ----------
    cell_width : float, default 3.0
        Width applied to every column of the addressable grid, in characters.
    row_height : float, default 20.0
        Height applied to every row, in points.
    indent_column_offset : int, default 1
        Columns to shift right per indentation level.
    sheet_name : str, default "Markdown"
        Base name of the worksheet; a numbered suffix is added on collision.
    column_count : int, default 100
        Number of columns that receive ``cell_width``.
    style : StyleOptions
        Fonts and colors for the link appendix and run font fallbacks.

    """

    cell_width: float = field(default=DEFAULT_CELL_WIDTH, metadata={"help": "Column width (characters)"})
    row_height: float = field(default=DEFAULT_ROW_HEIGHT, metadata={"help": "Row height (points)"})
    indent_column_offset: int = field(
        default=DEFAULT_INDENT_COLUMN_OFFSET, metadata={"help": "Columns per indentation level"}
    )
    sheet_name: str = field(default=DEFAULT_SHEET_NAME, metadata={"help": "Base worksheet name"})
    column_count: int = field(
        default=DEFAULT_GRID_COLUMN_COUNT, metadata={"help": "Number of columns sized to cell_width"}
    )
    style: StyleOptions = field(default_factory=StyleOptions, metadata={"help": "Typography and color settings"})

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.cell_width <= 0:
            raise ValueError(f"cell_width must be positive, got {self.cell_width}")
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive, got {self.row_height}")
        if self.indent_column_offset < 0:
            raise ValueError(f"indent_column_offset must be non-negative, got {self.indent_column_offset}")
        if self.column_count < 1:
            raise ValueError(f"column_count must be at least 1, got {self.column_count}")
        if not self.sheet_name or not self.sheet_name.strip():
            raise ValueError("sheet_name must not be empty")
        invalid = sorted(set(self.sheet_name) & INVALID_SHEET_NAME_CHARS)
        if invalid:
            raise ValueError(f"sheet_name must not contain {''.join(invalid)!r}, got {self.sheet_name!r}")
        if not isinstance(self.style, StyleOptions):
            raise ValueError(f"style must be StyleOptions, got {type(self.style).__name__}")

    def column_for_indent(self, indent_level: int) -> int:
        """Return the 1-based grid column for an indentation level."""
        return indent_level * self.indent_column_offset + 1
