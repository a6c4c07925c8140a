#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/renderers/base.py
"""Base class for document renderers.

A renderer turns a parsed :class:`~mdgrid.ast.Document` into an output file
format and writes it to a path or a binary stream.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from mdgrid.ast import Document
from mdgrid.exceptions import ValidationError
from mdgrid.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the document to the specified output.

        Parameters
        ----------
        doc : Document
            Parsed document to render
        output : str, Path, or IO[bytes]
            File path or binary file-like object

        Raises
        ------
        RenderingError
            If rendering fails

        """

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the document and return the output file content.

        The default implementation renders into a :class:`io.BytesIO` buffer.
        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the expected type.

        Raises
        ------
        ValidationError
            If options is not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise ValidationError(
                f"{renderer_name} renderer expected options of type '{expected_type.__name__}' "
                f"but received '{type(options).__name__}'",
                parameter_name="options",
                parameter_value=type(options),
            )
