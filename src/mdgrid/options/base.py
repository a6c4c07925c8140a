#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
by the Markdown parser and the grid renderer.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

_HEX_COLOR_RE = re.compile(r"^(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def validate_hex_color(name: str, value: str) -> None:
    """Check that ``value`` is an RGB or ARGB hex color without a leading ``#``.

    Raises
    ------
    ValueError
        If the value is not six or eight hexadecimal digits.

    """
    if not isinstance(value, str) or not _HEX_COLOR_RE.match(value):
        raise ValueError(f"{name} must be a 6 or 8 digit hex color, got {value!r}")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parsers convert source text into the line-oriented document model.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Renderers project a parsed document onto an output surface.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass
