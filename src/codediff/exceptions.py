#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the codediff library.

The comparison core is total over arbitrary text: splitting lines, tokenizing
and aligning never fail. The only failure a comparison can surface is a
structured-mode parse error, which :func:`codediff.api.run` converts into an
error value at the boundary. The remaining classes serve option validation
and the file/CLI helpers wrapped around the core.

Exception Hierarchy
-------------------
- CodediffError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, undecodable content)

  - NormalizationError (input preparation failures)
    - MalformedStructuredInputError (structured-mode parse failure)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from __future__ import annotations

from typing import Any

from codediff.constants import Side


class CodediffError(Exception):
    """Base exception class for all codediff-specific errors.

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


class ValidationError(CodediffError):
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


class FileError(CodediffError):
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


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file cannot be read as text.

    This includes permission errors and content that does not decode with
    the requested encoding (binary input is not compared).
    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class NormalizationError(CodediffError):
    """Exception raised when an input cannot be prepared for comparison.

    Parameters
    ----------
    message : str
        Description of the failure
    side : {'left', 'right'}, optional
        Which input failed, once known
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, side: Side | None = None, original_error: Exception | None = None):
        """Initialize the normalization error."""
        super().__init__(message, original_error)
        self.side = side


class MalformedStructuredInputError(NormalizationError):
    """Exception raised when structured mode cannot parse an input.

    Parameters
    ----------
    message : str
        The parser's message
    char_offset : int, optional
        Zero-based character offset of the failure
    line : int, optional
        One-based line of the failure
    column : int, optional
        One-based column of the failure
    side : {'left', 'right'}, optional
        Which input failed
    original_error : Exception, optional
        The parser exception

    """

    def __init__(
        self,
        message: str,
        char_offset: int | None = None,
        line: int | None = None,
        column: int | None = None,
        side: Side | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the malformed input error with position details."""
        super().__init__(message, side=side, original_error=original_error)
        self.char_offset = char_offset
        self.line = line
        self.column = column

    def with_side(self, side: Side) -> "MalformedStructuredInputError":
        """Return a copy of this error attributed to ``side``."""
        return MalformedStructuredInputError(
            self.message,
            char_offset=self.char_offset,
            line=self.line,
            column=self.column,
            side=side,
            original_error=self.original_error,
        )

    def describe(self) -> str:
        """Describe the failure for display, naming the side when known."""
        if self.side is None:
            return f"Invalid JSON: {self.message}"
        return f"{self.side.capitalize()} pane: Invalid JSON: {self.message}"


class RenderingError(CodediffError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "CodediffError",
    "ValidationError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "NormalizationError",
    "MalformedStructuredInputError",
    "RenderingError",
    "OutputWriteError",
]
