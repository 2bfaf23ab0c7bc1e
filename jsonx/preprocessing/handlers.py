"""
Comment and trailing-comma handlers.

Both handlers scan character by character and leave string literals untouched.
"""

from ..utils.config import NormalizeConfig
from .base import PreprocessingStepBase
from .string_utils import (
    HORIZONTAL_WHITESPACE,
    StringStateTracker,
    find_line_end,
    iterate_with_string_tracking,
    next_significant_char,
    starts_value,
)

HASH_MARKER = "#"
SLASH_MARKER = "//"


class CommentHandler(PreprocessingStepBase):
    """Removes line comments introduced by one marker."""

    def __init__(self, marker: str):
        if not marker:
            raise ValueError("Comment marker must not be empty")
        self.marker = marker

    def should_apply(self, config: NormalizeConfig) -> bool:
        """Apply if stripping is enabled for this marker."""
        if self.marker == HASH_MARKER:
            return config.strip_hash_comments
        if self.marker == SLASH_MARKER:
            return config.strip_slash_comments
        return True

    def process(self, text: str, config: NormalizeConfig) -> str:
        """Remove line comments from JSONX text."""
        return strip_line_comments(text, self.marker)

    def __repr__(self) -> str:
        return f"CommentHandler({self.marker!r})"


class TrailingCommaHandler(PreprocessingStepBase):
    """Removes commas that are not followed by another value."""

    def should_apply(self, config: NormalizeConfig) -> bool:
        """Apply if trailing comma removal is enabled."""
        return config.strip_trailing_commas

    def process(self, text: str, config: NormalizeConfig) -> str:
        """Remove trailing commas from JSON text."""
        return strip_trailing_commas(text)


def strip_line_comments(text: str, marker: str) -> str:
    """
    Remove every unquoted `marker ... end of line` span from text.

    Horizontal whitespace directly in front of the marker goes with the
    comment. Line terminators are kept.
    """
    result: list[str] = []
    tracker = StringStateTracker()
    i = 0

    while i < len(text):
        char = text[i]
        in_string = tracker.update_state(char)

        if not in_string and text.startswith(marker, i):
            while result and result[-1] in HORIZONTAL_WHITESPACE:
                result.pop()
            i = find_line_end(text, i)
            tracker.reset()
            continue

        result.append(char)
        i += 1

    return "".join(result)


def strip_trailing_commas(text: str) -> str:
    """
    Remove commas outside strings that do not separate two values.

    A comma survives only when the next non-whitespace character can start a
    key or value; commas before `}`, `]`, another comma or the end of the
    text are dropped.
    """
    result: list[str] = []

    for i, char, in_string in iterate_with_string_tracking(text):
        if char == "," and not in_string:
            if not starts_value(next_significant_char(text, i + 1)):
                continue
        result.append(char)

    return "".join(result)
