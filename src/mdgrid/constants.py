#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/constants.py
"""Default values and fixed labels used across mdgrid.

Sections
--------
1. Layout defaults - grid cell size, indentation, sheet naming
2. Typography defaults - fonts and header size table
3. Color defaults - ARGB font colors and RGB fill/border colors
4. Fixed labels - text substituted for list markers, tables, rules, images
5. Appendix layout - trailing link reference block

"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# =============================================================================
# 1. Layout defaults
# =============================================================================

DEFAULT_CELL_WIDTH: float = 3.0
DEFAULT_ROW_HEIGHT: float = 20.0
DEFAULT_INDENT_COLUMN_OFFSET: int = 1
DEFAULT_SHEET_NAME: str = "Markdown"

# Number of columns that receive the configured cell width
DEFAULT_GRID_COLUMN_COUNT: int = 100

# Whitespace width units per indentation level; a tab counts as a full level
INDENT_WIDTH: int = 4
TAB_WIDTH: int = 4

MAX_SHEET_NAME_ATTEMPTS: int = 100

# =============================================================================
# 2. Typography defaults
# =============================================================================

DEFAULT_FONT_NAME: str = "Meiryo"
DEFAULT_CODE_FONT_NAME: str = "Consolas"
DEFAULT_BASE_FONT_SIZE: float = 11

DEFAULT_HEADER_FONT_SIZES: Mapping[int, float] = MappingProxyType({1: 18, 2: 16, 3: 14, 4: 12, 5: 11, 6: 10})

MAX_HEADER_LEVEL: int = 6

# =============================================================================
# 3. Color defaults
# =============================================================================

# Fills and borders (RGB)
DEFAULT_CODE_BACKGROUND_COLOR: str = "F5F5F5"
DEFAULT_QUOTE_BACKGROUND_COLOR: str = "E8F4FD"
DEFAULT_IMAGE_BACKGROUND_COLOR: str = "FFF2CC"
DEFAULT_QUOTE_BORDER_COLOR: str = "4472C4"
DEFAULT_HORIZONTAL_RULE_COLOR: str = "D0D0D0"

# Font colors (ARGB)
DEFAULT_CODE_COLOR: str = "FF000080"
DEFAULT_INLINE_CODE_COLOR: str = "FFA31515"
DEFAULT_LINK_COLOR: str = "FF0563C1"
DEFAULT_IMAGE_ALT_COLOR: str = "FF808080"

# =============================================================================
# 4. Fixed labels
# =============================================================================

BULLET_MARKER: str = "• "
ORDERED_MARKER_TEMPLATE: str = "{number}. "
QUOTE_LABEL: str = "Quote: "
TABLE_LABEL: str = "Table: "
HORIZONTAL_RULE_TEXT: str = "-" * 30
IMAGE_PLACEHOLDER_TEXT: str = "Image"
CODE_FENCE: str = "```"

# =============================================================================
# 5. Appendix layout
# =============================================================================

# Blank rows between the last content row and the appendix header
APPENDIX_GAP_ROWS: int = 2
APPENDIX_HEADER_TEXT: str = "Links"
APPENDIX_HEADER_LEVEL: int = 2
LINK_MARKER_TEMPLATE: str = "[{number}]"
