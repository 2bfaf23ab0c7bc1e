"""
Nesting limits for jsonx decoding.

The standard library decoder has no depth option, so the structure depth of
normalized text is measured here before the text is handed over.
"""

from ..preprocessing.string_utils import iterate_with_string_tracking
from .exceptions import DecodeError

OPENERS = "{["
CLOSERS = "}]"


class LimitValidator:
    """Validates nesting depth to prevent resource exhaustion."""

    def __init__(self, max_depth: int):
        if max_depth < 1:
            raise ValueError("max_depth must be positive")
        self.max_depth = max_depth
        self.nesting_depth = 0

    def enter_structure(self) -> None:
        """Track entering a nested structure and validate depth."""
        self.nesting_depth += 1
        if self.nesting_depth > self.max_depth:
            raise DecodeError(
                self.max_depth,
                f"nesting depth {self.nesting_depth} exceeds limit {self.max_depth}",
            )

    def exit_structure(self) -> None:
        """Track exiting a nested structure."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def validate_text(self, text: str) -> None:
        """Walk text outside string literals and validate its structure depth."""
        self.reset()
        for _, char, in_string in iterate_with_string_tracking(text):
            if in_string:
                continue
            if char in OPENERS:
                self.enter_structure()
            elif char in CLOSERS:
                self.exit_structure()

    def reset(self) -> None:
        """Reset validator state for reuse."""
        self.nesting_depth = 0
