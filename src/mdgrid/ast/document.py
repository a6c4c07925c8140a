#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/ast/document.py
"""Line-oriented document model.

A :class:`Document` is an ordered tuple of :class:`DocumentLine` records, one
per source line, each carrying its indentation level, its line kind, the
formatting hints for the whole line and the styled text runs of its content.
All classes are frozen: a document is built once from a complete source text
and never modified afterwards.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    """Closed set of line classifications."""

    HEADER = "header"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"
    CODE_BLOCK = "code_block"
    QUOTE = "quote"
    HORIZONTAL_RULE = "horizontal_rule"
    TABLE = "table"
    EMPTY = "empty"


@dataclass(frozen=True)
class RunStyle:
    """Character formatting of a text run.

    Every field is optional; ``None`` means the attribute is inherited from
    the cell or workbook default.

    Parameters
    ----------
    bold, italic, strike, underline : bool or None
        Character flags
    code : bool or None
        Marks runs produced from inline code spans
    font_name : str or None
        Font family
    font_size : float or None
        Font size in points
    color : str or None
        ARGB hex font color

    """

    bold: Optional[bool] = None
    italic: Optional[bool] = None
    strike: Optional[bool] = None
    underline: Optional[bool] = None
    code: Optional[bool] = None
    font_name: Optional[str] = None
    font_size: Optional[float] = None
    color: Optional[str] = None

    def style_key(self) -> tuple:
        """Return the fields compared when deciding whether two runs can merge."""
        return (
            self.bold,
            self.italic,
            self.strike,
            self.underline,
            self.code,
            self.font_name,
            self.font_size,
            self.color,
        )


DEFAULT_STYLE = RunStyle()


@dataclass(frozen=True)
class ImageRef:
    """Image descriptor carried by the run holding an image's alt text."""

    src: str
    alt: str


@dataclass(frozen=True)
class TextRun:
    """A span of text sharing one style.

    Parameters
    ----------
    text : str
        Run text. Empty only for the single run of an empty or delimiter line.
    style : RunStyle
        Character formatting
    link : str or None
        Hyperlink target
    image : ImageRef or None
        Image descriptor

    """

    text: str
    style: RunStyle = DEFAULT_STYLE
    link: Optional[str] = None
    image: Optional[ImageRef] = None

    def merge_key(self) -> tuple:
        """Return the identity used by adjacent-run merging."""
        return (self.style.style_key(), self.link, self.image)


@dataclass(frozen=True)
class LineFormatting:
    """Formatting hints that apply to a whole line (and its grid cell).

    Parameters
    ----------
    header_level : int
        0 for non-header lines, 1-6 for headers
    is_quote : bool
        Whether the line is a block quote
    is_horizontal_rule : bool
        Whether the line is a horizontal rule
    font_size : float or None
        Base font size stamped onto the line's runs
    background_color : str or None
        RGB fill color of the cell
    left_border_color : str or None
        RGB color of the quote border
    bottom_border_color : str or None
        RGB color of the rule border

    """

    header_level: int = 0
    is_quote: bool = False
    is_horizontal_rule: bool = False
    font_size: Optional[float] = None
    background_color: Optional[str] = None
    left_border_color: Optional[str] = None
    bottom_border_color: Optional[str] = None


@dataclass(frozen=True)
class DocumentLine:
    """One parsed source line.

    ``plain_text`` is derived from ``rich_text`` on access and never stored.
    """

    indent_level: int
    kind: LineKind
    rich_text: tuple[TextRun, ...]
    formatting: LineFormatting = field(default_factory=LineFormatting)
    original_line: str = ""

    @property
    def plain_text(self) -> str:
        return "".join(run.text for run in self.rich_text)

    @property
    def links(self) -> list[str]:
        """Link targets of this line's runs, in run order, with repeats."""
        return [run.link for run in self.rich_text if run.link]


@dataclass(frozen=True)
class DocumentInfo:
    """Descriptive metadata; never consulted while parsing or placing."""

    source_name: Optional[str] = None
    source_path: Optional[str] = None
    line_count: int = 0
    converted_at: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """Parsed document: lines in source order plus metadata."""

    lines: tuple[DocumentLine, ...] = ()
    info: DocumentInfo = field(default_factory=DocumentInfo)

    def __len__(self) -> int:
        return len(self.lines)
