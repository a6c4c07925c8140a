#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdgrid library.

This module defines the exception classes raised around the conversion core.
The Markdown parser itself never raises on text input: malformed markup
degrades to literal text. Errors originate at the boundaries, when reading the
source, loading configuration, or persisting the workbook.

Exception Hierarchy
-------------------
- MdGridError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (unreadable or malformed configuration files)

  - FileError (file access and I/O)
    - SourceNotFoundError (source file doesn't exist)
    - SourceReadError (permissions, decoding failures)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class MdGridError(Exception):
    """Base exception class for all mdgrid-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdGridError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ConfigurationError(ValidationError):
    """Exception raised when a configuration file cannot be used.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class FileError(MdGridError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class SourceNotFoundError(FileError):
    """Exception raised when the source document cannot be found.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the source not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class SourceReadError(FileError):
    """Exception raised when the source document exists but cannot be read.

    This includes permission errors, directories passed as files and
    content that is not valid UTF-8.

    Parameters
    ----------
    file_path : str
        Path to the file that cannot be read
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the source read error."""
        if message is None:
            reason = f": {original_error}" if original_error else ""
            message = f"Failed to read file {file_path}{reason}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(MdGridError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when the rendered workbook cannot be written.

    Parameters
    ----------
    output_path : str
        Destination that could not be written
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The underlying exception that caused the failure

    """

    def __init__(self, output_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            reason = f": {original_error}" if original_error else ""
            message = f"Failed to write output file {output_path}{reason}"
        super().__init__(message, rendering_stage="write", original_error=original_error)
        self.output_path = output_path


__all__ = [
    "MdGridError",
    "ValidationError",
    "ConfigurationError",
    "FileError",
    "SourceNotFoundError",
    "SourceReadError",
    "RenderingError",
    "OutputWriteError",
]
