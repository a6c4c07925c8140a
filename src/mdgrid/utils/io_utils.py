#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdgrid/utils/io_utils.py
"""I/O utilities for reading Markdown sources and writing workbooks.

File system errors are translated into the :mod:`mdgrid.exceptions`
hierarchy here so that parsers and renderers only ever see decoded text
and produce bytes.

"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Union

from mdgrid.exceptions import OutputWriteError, SourceNotFoundError, SourceReadError


def read_source_text(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file.

    A leading byte order mark is dropped.

    Parameters
    ----------
    path : str or Path
        File to read

    Returns
    -------
    str
        Decoded file content

    Raises
    ------
    SourceNotFoundError
        If ``path`` does not exist
    SourceReadError
        If ``path`` is not a regular file, cannot be read, or is not valid UTF-8

    """
    path = Path(path)
    if not path.exists():
        raise SourceNotFoundError(str(path))
    if not path.is_file():
        raise SourceReadError(str(path), message=f"Not a file: {path}")

    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise SourceReadError(str(path), message=f"File is not valid UTF-8: {path}", original_error=e) from e
    except OSError as e:
        raise SourceReadError(str(path), original_error=e) from e


def write_bytes(content: bytes, output: Union[str, Path, IO[bytes]]) -> None:
    """Write binary content to a path or a binary file-like object.

    Parameters
    ----------
    content : bytes
        Data to write
    output : str, Path or IO[bytes]
        Destination path or writable binary stream

    Raises
    ------
    OutputWriteError
        If the destination cannot be written

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_bytes(content)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if hasattr(output, "write"):
        try:
            output.write(content)
        except (OSError, TypeError) as e:
            raise OutputWriteError(repr(output), original_error=e) from e
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["read_source_text", "write_bytes"]
