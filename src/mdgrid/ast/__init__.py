#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document model and inline AST for mdgrid.

- :mod:`mdgrid.ast.document` holds the immutable line-oriented document model
- :mod:`mdgrid.ast.nodes` holds the closed set of inline nodes produced from
  the inline tokenizer
"""

from mdgrid.ast.document import (
    DEFAULT_STYLE,
    Document,
    DocumentInfo,
    DocumentLine,
    ImageRef,
    LineFormatting,
    LineKind,
    RunStyle,
    TextRun,
)
from mdgrid.ast.nodes import (
    CodeSpan,
    Emphasis,
    Image,
    InlineNode,
    InlineVisitor,
    Link,
    RawMarkup,
    Strikethrough,
    Strong,
    Text,
    plain_text,
)

__all__ = [
    "DEFAULT_STYLE",
    "Document",
    "DocumentInfo",
    "DocumentLine",
    "ImageRef",
    "LineFormatting",
    "LineKind",
    "RunStyle",
    "TextRun",
    "CodeSpan",
    "Emphasis",
    "Image",
    "InlineNode",
    "InlineVisitor",
    "Link",
    "RawMarkup",
    "Strikethrough",
    "Strong",
    "Text",
    "plain_text",
]
