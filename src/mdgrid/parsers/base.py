#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/parsers/base.py
"""Base class for document parsers.

This module defines the abstract base class that parsers inherit from. A
parser turns complete, already-decoded source text into a
:class:`~mdgrid.ast.Document`; file access happens outside the parser.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from mdgrid.ast import Document
from mdgrid.exceptions import ValidationError
from mdgrid.options.base import BaseParserOptions
from mdgrid.utils.io_utils import read_source_text


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the expected type.

        Raises
        ------
        ValidationError
            If options is not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise ValidationError(
                f"{parser_name} parser expected options of type '{expected_type.__name__}' "
                f"but received '{type(options).__name__}'",
                parameter_name="options",
                parameter_value=type(options),
            )

    @abstractmethod
    def parse(self, text: str, source_name: Optional[str] = None, source_path: Optional[str] = None) -> Document:
        """Parse complete source text into a Document.

        Parameters
        ----------
        text : str
            Decoded source text
        source_name : str, optional
            Display name of the source, stored as metadata only
        source_path : str, optional
            Path of the source, stored as metadata only

        Returns
        -------
        Document
            Parsed document

        """

    def parse_file(self, path: Union[str, Path]) -> Document:
        """Read a UTF-8 source file and parse it.

        Raises
        ------
        SourceNotFoundError
            If the file does not exist
        SourceReadError
            If the file cannot be read or decoded

        """
        path = Path(path)
        text = read_source_text(path)
        return self.parse(text, source_name=path.name, source_path=str(path))
