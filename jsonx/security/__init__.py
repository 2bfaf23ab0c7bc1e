"""
jsonx errors and nesting limits.
"""

from .exceptions import DecodeError, EmptySourceError, FileError, JsonXError
from .limits import LimitValidator

__all__ = ["JsonXError", "FileError", "EmptySourceError", "DecodeError", "LimitValidator"]
