"""
Utility functions for string-aware scanning shared by the normalization steps.

JSON string literals cannot span lines, so string state is tracked per line:
every newline resets the tracker to "outside a string".
"""

from collections.abc import Generator
from typing import Optional

QUOTE = '"'
ESCAPE = "\\"

# Whitespace removed in front of a line comment; never crosses a newline.
HORIZONTAL_WHITESPACE = " \t\f\v"

# Characters that may open the next value or key after a separator comma.
VALUE_START_CHARS = frozenset("{[\"'-")


class StringStateTracker:
    """Helper class to track string state during text processing."""

    def __init__(self) -> None:
        self.in_string = False
        self.escaped = False

    def update_state(self, char: str) -> bool:
        """
        Update string state based on current character.

        Args:
            char: Current character

        Returns:
            True if the character belongs to a string literal, quotes included
        """
        if char == "\n":
            self.reset()
            return False

        if self.in_string:
            if self.escaped:
                self.escaped = False
            elif char == ESCAPE:
                self.escaped = True
            elif char == QUOTE:
                self.in_string = False
            return True

        if char == QUOTE:
            self.in_string = True
            return True

        return False

    def reset(self) -> None:
        """Reset string state tracking."""
        self.in_string = False
        self.escaped = False


def iterate_with_string_tracking(
    text: str,
) -> Generator[tuple[int, str, bool], None, None]:
    """
    Iterate through text with string state tracking.

    Yields:
        Tuple of (index, character, in_string_state)
    """
    tracker = StringStateTracker()

    for i, char in enumerate(text):
        yield i, char, tracker.update_state(char)


def find_line_end(text: str, start: int) -> int:
    """
    Find the end of the line containing position start.

    A carriage return directly before the newline is treated as part of the
    line terminator, so CRLF files keep their line endings.

    Returns:
        Index of the line terminator, or len(text) on the last line
    """
    end = text.find("\n", start)
    if end == -1:
        return len(text)
    if end > start and text[end - 1] == "\r":
        return end - 1
    return end


def next_significant_char(text: str, start: int) -> Optional[str]:
    """Return the first non-whitespace character at or after start, if any."""
    for i in range(start, len(text)):
        if not text[i].isspace():
            return text[i]
    return None


def starts_value(char: Optional[str]) -> bool:
    """Whether char can open an object key, an array element or a value."""
    if char is None:
        return False
    return char in VALUE_START_CHARS or char.isalnum() or char == "_"
