"""
Test cases for nesting limit validation.
"""

import unittest

from jsonx.security.exceptions import DecodeError
from jsonx.security.limits import LimitValidator


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator depth tracking."""

    def setUp(self):
        """Set up test validator with a small limit."""
        self.validator = LimitValidator(3)

    def test_nesting_depth_validation_pass(self):
        """Test entering structures up to the limit."""
        for _ in range(3):
            self.validator.enter_structure()
        self.assertEqual(self.validator.nesting_depth, 3)

    def test_nesting_depth_validation_fail(self):
        """Test entering one structure too many."""
        for _ in range(3):
            self.validator.enter_structure()
        with self.assertRaises(DecodeError) as cm:
            self.validator.enter_structure()
        self.assertIn("nesting depth 4 exceeds limit 3", str(cm.exception))

    def test_exit_structure_never_negative(self):
        """Test unbalanced closers do not underflow."""
        self.validator.exit_structure()
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_validate_text_ignores_strings(self):
        """Test brackets inside string literals are not counted."""
        self.validator.validate_text('[{"a": "[[[[{{{{"}]')
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_validate_text_sibling_structures(self):
        """Test siblings do not accumulate depth."""
        self.validator.validate_text("[[1], [2], [[3]]]")

    def test_validate_text_too_deep(self):
        """Test text nested deeper than the limit."""
        with self.assertRaises(DecodeError):
            self.validator.validate_text("[[[[1]]]]")

    def test_reset(self):
        """Test reset clears depth."""
        self.validator.enter_structure()
        self.validator.reset()
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_invalid_limit(self):
        """Test the limit must be positive."""
        with self.assertRaises(ValueError):
            LimitValidator(0)


if __name__ == "__main__":
    unittest.main()
