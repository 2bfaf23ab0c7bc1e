"""
JSONX normalization.

This module turns JSONX (JSON with `#` and `//` line comments and trailing
commas) into strict JSON. The work is split into small string-aware steps
composed by NormalizationPipeline.
"""

from .base import PreprocessingStep, PreprocessingStepBase
from .handlers import (
    CommentHandler,
    TrailingCommaHandler,
    strip_line_comments,
    strip_trailing_commas,
)
from .normalizers import WhitespaceNormalizer
from .pipeline import NormalizationPipeline, normalize, to_json

__all__ = [
    "NormalizationPipeline",
    "PreprocessingStep",
    "PreprocessingStepBase",
    "CommentHandler",
    "TrailingCommaHandler",
    "WhitespaceNormalizer",
    "normalize",
    "to_json",
    "strip_line_comments",
    "strip_trailing_commas",
]
