#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/options/style.py
"""Typography and color options shared by the parser and the grid renderer.

Font colors are ARGB hex strings, fill and border colors are RGB hex strings,
matching what the spreadsheet writer hands to openpyxl.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from mdgrid.constants import (
    DEFAULT_BASE_FONT_SIZE,
    DEFAULT_CODE_BACKGROUND_COLOR,
    DEFAULT_CODE_COLOR,
    DEFAULT_CODE_FONT_NAME,
    DEFAULT_FONT_NAME,
    DEFAULT_HEADER_FONT_SIZES,
    DEFAULT_HORIZONTAL_RULE_COLOR,
    DEFAULT_IMAGE_ALT_COLOR,
    DEFAULT_IMAGE_BACKGROUND_COLOR,
    DEFAULT_INLINE_CODE_COLOR,
    DEFAULT_LINK_COLOR,
    DEFAULT_QUOTE_BACKGROUND_COLOR,
    DEFAULT_QUOTE_BORDER_COLOR,
    MAX_HEADER_LEVEL,
)
from mdgrid.options.base import CloneFrozenMixin, validate_hex_color

COLOR_FIELDS: tuple[str, ...] = (
    "code_color",
    "inline_code_color",
    "link_color",
    "image_alt_color",
    "quote_background_color",
    "quote_border_color",
    "horizontal_rule_color",
    "code_background_color",
    "image_background_color",
)


def _normalize_header_sizes(sizes: Mapping[Any, Any]) -> dict[int, float]:
    normalized: dict[int, float] = {}
    for level, size in sizes.items():
        try:
            level_int = int(level)
        except (TypeError, ValueError) as e:
            raise ValueError(f"header_font_sizes keys must be header levels 1-6, got {level!r}") from e
        if not 1 <= level_int <= MAX_HEADER_LEVEL:
            raise ValueError(f"header_font_sizes keys must be header levels 1-6, got {level_int}")
        if not isinstance(size, (int, float)) or size <= 0:
            raise ValueError(f"header_font_sizes[{level_int}] must be a positive number, got {size!r}")
        normalized[level_int] = size
    return normalized


@dataclass(frozen=True)
class StyleOptions(CloneFrozenMixin):
    """Fonts, sizes and colors applied to runs and cells.

    Parameters
    ----------
    font_name : str, default "Meiryo"
        Body font, used for runs without an explicit font and for the appendix.
    code_font_name : str, default "Consolas"
        Monospace font for inline code spans and fenced code lines.
    base_font_size : float, default 11
        Font size of non-header lines.
    header_font_sizes : dict[int, float]
        Font size per header level 1-6. Missing levels fall back to ``base_font_size``.
    code_color, inline_code_color, link_color, image_alt_color : str
        ARGB font colors.
    quote_background_color, quote_border_color, horizontal_rule_color,
    code_background_color, image_background_color : str
        RGB fill and border colors.

    """

    font_name: str = field(default=DEFAULT_FONT_NAME, metadata={"help": "Body font name"})
    code_font_name: str = field(default=DEFAULT_CODE_FONT_NAME, metadata={"help": "Monospace font for code"})
    base_font_size: float = field(default=DEFAULT_BASE_FONT_SIZE, metadata={"help": "Base font size"})
    header_font_sizes: dict[int, float] = field(
        default_factory=lambda: dict(DEFAULT_HEADER_FONT_SIZES),
        metadata={"help": "Font size per header level (1-6)"},
    )
    code_color: str = field(default=DEFAULT_CODE_COLOR, metadata={"help": "Fenced code text color (ARGB)"})
    inline_code_color: str = field(default=DEFAULT_INLINE_CODE_COLOR, metadata={"help": "Inline code color (ARGB)"})
    link_color: str = field(default=DEFAULT_LINK_COLOR, metadata={"help": "Hyperlink text color (ARGB)"})
    image_alt_color: str = field(default=DEFAULT_IMAGE_ALT_COLOR, metadata={"help": "Image alt text color (ARGB)"})
    quote_background_color: str = field(
        default=DEFAULT_QUOTE_BACKGROUND_COLOR, metadata={"help": "Block quote fill color (RGB)"}
    )
    quote_border_color: str = field(
        default=DEFAULT_QUOTE_BORDER_COLOR, metadata={"help": "Block quote left border color (RGB)"}
    )
    horizontal_rule_color: str = field(
        default=DEFAULT_HORIZONTAL_RULE_COLOR, metadata={"help": "Horizontal rule border color (RGB)"}
    )
    code_background_color: str = field(
        default=DEFAULT_CODE_BACKGROUND_COLOR, metadata={"help": "Fenced code fill color (RGB)"}
    )
    image_background_color: str = field(
        default=DEFAULT_IMAGE_BACKGROUND_COLOR, metadata={"help": "Fill color of lines with images (RGB)"}
    )

    def __post_init__(self) -> None:
        """Validate sizes and colors.

        Raises
        ------
        ValueError
            If a size is not positive, a header level is out of range, or a
            color is not a hex string.

        """
        if self.base_font_size <= 0:
            raise ValueError(f"base_font_size must be positive, got {self.base_font_size}")
        # Config files deliver header levels as strings; store them as ints
        object.__setattr__(self, "header_font_sizes", _normalize_header_sizes(self.header_font_sizes))
        for name in COLOR_FIELDS:
            validate_hex_color(name, getattr(self, name))

    def header_font_size(self, level: int) -> float:
        """Return the font size for a header level, or the base size if unmapped."""
        return self.header_font_sizes.get(level, self.base_font_size)
