#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/ast/nodes.py
"""Inline AST node classes.

The inline tokenizer yields a loosely structured token stream. It is folded
into the closed set of node classes defined here, one per supported inline
construct. Anything the tokenizer produces outside this set is flattened to
:class:`Text` before it reaches a visitor, so visitors only ever see these
eight node types.

Node Hierarchy
--------------
Leaf nodes:
    - Text, RawMarkup, CodeSpan, Image

Container nodes (carry inline children):
    - Strong, Emphasis, Strikethrough, Link

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class InlineNode(ABC):
    """Base class for all inline nodes."""

    @abstractmethod
    def accept(self, visitor: InlineVisitor) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : InlineVisitor
            A visitor implementing one ``visit_*`` method per node type

        Returns
        -------
        Any
            Result from the matching ``visit_*`` method

        """


@dataclass(frozen=True)
class Text(InlineNode):
    """Plain text, with entities and backslash escapes already decoded."""

    content: str

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_text(self)


@dataclass(frozen=True)
class RawMarkup(InlineNode):
    """Embedded HTML tag, kept as literal text."""

    content: str

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_raw_markup(self)


@dataclass(frozen=True)
class CodeSpan(InlineNode):
    """Inline code span; its content is never parsed further."""

    content: str

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_code_span(self)


@dataclass(frozen=True)
class Image(InlineNode):
    """Image reference.

    Parameters
    ----------
    src : str
        Image source URL or path
    alt : str
        Plain-text alternative text, possibly empty
    title : str or None, default = None
        Optional image title

    """

    src: str
    alt: str = ""
    title: Optional[str] = None

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_image(self)


@dataclass(frozen=True)
class Strong(InlineNode):
    """Strong emphasis (bold)."""

    content: tuple[InlineNode, ...] = field(default_factory=tuple)

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_strong(self)


@dataclass(frozen=True)
class Emphasis(InlineNode):
    """Emphasis (italic)."""

    content: tuple[InlineNode, ...] = field(default_factory=tuple)

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_emphasis(self)


@dataclass(frozen=True)
class Strikethrough(InlineNode):
    """Strikethrough text (``~~text~~``)."""

    content: tuple[InlineNode, ...] = field(default_factory=tuple)

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass(frozen=True)
class Link(InlineNode):
    """Hyperlink with inline children as its label.

    Parameters
    ----------
    url : str
        Link target
    content : tuple of InlineNode
        Link label nodes
    title : str or None, default = None
        Optional link title

    """

    url: str
    content: tuple[InlineNode, ...] = field(default_factory=tuple)
    title: Optional[str] = None

    def accept(self, visitor: InlineVisitor) -> Any:
        return visitor.visit_link(self)


class InlineVisitor(ABC):
    """Visitor over the closed set of inline nodes.

    Subclasses must implement every ``visit_*`` method; a visitor missing a
    node type cannot be instantiated.
    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any: ...

    @abstractmethod
    def visit_raw_markup(self, node: RawMarkup) -> Any: ...

    @abstractmethod
    def visit_code_span(self, node: CodeSpan) -> Any: ...

    @abstractmethod
    def visit_image(self, node: Image) -> Any: ...

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any: ...

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any: ...

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any: ...

    @abstractmethod
    def visit_link(self, node: Link) -> Any: ...


def plain_text(nodes: tuple[InlineNode, ...] | list[InlineNode]) -> str:
    """Flatten inline nodes to their literal text content.

    Used for image alt text, where nested emphasis contributes its text only.
    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, (Text, RawMarkup, CodeSpan)):
            parts.append(node.content)
        elif isinstance(node, Image):
            parts.append(node.alt)
        elif isinstance(node, (Strong, Emphasis, Strikethrough, Link)):
            parts.append(plain_text(node.content))
    return "".join(parts)
