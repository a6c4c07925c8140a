#  Copyright (c) 2025 Tom Villani, Ph.D.

# mdgrid/options/markdown.py
"""Configuration options for Markdown parsing.

The parser stamps fonts, sizes and colors onto runs and line formatting while
it builds the document, so it carries the shared style options.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdgrid.options.base import BaseParserOptions
from mdgrid.options.style import StyleOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for converting Markdown text to a grid document.

    Parameters
    ----------
    style : StyleOptions
        Fonts, header sizes and colors applied while building text runs.

    """

    style: StyleOptions = field(
        default_factory=StyleOptions,
        metadata={"help": "Typography and color settings applied to parsed runs"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
        if not isinstance(self.style, StyleOptions):
            raise ValueError(f"style must be StyleOptions, got {type(self.style).__name__}")
