"""
Exception classes for jsonx.

Every failure surfaces as a JsonXError subclass. The numeric codes group
errors the same way for callers that dispatch on a code rather than a type.
"""

from pathlib import Path
from typing import Optional, Union

ERROR_FILE = 1
ERROR_DECODE = 2

PathLike = Union[str, Path]


class JsonXError(Exception):
    """Base exception for all jsonx errors."""

    code = 0

    def __init__(self, message: str, path: Optional[PathLike] = None):
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


class FileError(JsonXError):
    """Source or target file cannot be used."""

    code = ERROR_FILE

    NOT_FOUND = "not found"
    NOT_REGULAR_FILE = "not a regular file"
    NOT_READABLE = "not readable"
    NOT_WRITABLE = "not writable"
    TARGET_EXISTS = "target already exists"
    TARGET_UNDEFINED = "target file undefined"

    def __init__(self, condition: str, path: Optional[PathLike] = None):
        self.condition = condition
        message = condition[0].upper() + condition[1:]
        super().__init__(message, path)


class EmptySourceError(JsonXError):
    """Decoding was requested with no source text loaded."""

    code = ERROR_DECODE

    def __init__(self, message: str = "Source for decoding is empty"):
        super().__init__(message)


class DecodeError(JsonXError, ValueError):
    """Normalized text cannot be decoded or nests deeper than allowed."""

    code = ERROR_DECODE

    def __init__(
        self,
        max_depth: int,
        reason: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.max_depth = max_depth
        self.reason = reason
        self.line = line
        self.column = column
        message = (
            "Source cannot be decoded or nesting exceeds "
            f"the depth limit ({max_depth})"
        )
        if reason:
            message += f": {reason}"
        super().__init__(message)

    def _format_message(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message} at line {self.line}, column {self.column}"
        return self.message
