#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for mdgrid parsing and grid rendering.

Options are frozen dataclasses. The parser and the grid renderer each take
their own options class; both embed the shared :class:`StyleOptions`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from mdgrid.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdgrid.options.grid import GridRendererOptions
from mdgrid.options.markdown import MarkdownParserOptions
from mdgrid.options.style import StyleOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Keyword arguments with the field names and new values to update

    Returns
    -------
    Any
        A new options instance with the updated values

    Examples
    --------
    >>> original = GridRendererOptions(cell_width=3.0)
    >>> updated = create_updated_options(original, cell_width=4.5)
    >>> # original remains unchanged, updated has new values

    """
    return replace(options, **kwargs)


__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "StyleOptions",
    "MarkdownParserOptions",
    "GridRendererOptions",
    "create_updated_options",
]
