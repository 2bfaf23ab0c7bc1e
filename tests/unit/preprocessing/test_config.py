"""
Test cases for jsonx configuration.

Tests focus on defaults, validation and the presets used by sessions.
"""

import unittest

from jsonx.utils.config import (
    DecodeFlag,
    DecodeOptions,
    JsonXConfig,
    NormalizeConfig,
    WriteOptions,
)


class TestDecodeOptions(unittest.TestCase):
    """Test decode option defaults and validation."""

    def test_defaults(self):
        """Test the documented defaults."""
        options = DecodeOptions()
        self.assertTrue(options.associative)
        self.assertEqual(options.max_depth, 512)
        self.assertEqual(options.flags, DecodeFlag.NONE)

    def test_max_depth_must_be_positive(self):
        """Test a depth below one is rejected."""
        with self.assertRaises(ValueError):
            DecodeOptions(max_depth=0)

    def test_int_flags_coerced(self):
        """Test plain integers become DecodeFlag values."""
        options = DecodeOptions(flags=3)
        self.assertIsInstance(options.flags, DecodeFlag)
        self.assertTrue(options.flags & DecodeFlag.BIGINT_AS_STRING)

    def test_objects_as_dicts(self):
        """Test OBJECT_AS_ARRAY overrides associative=False."""
        self.assertFalse(DecodeOptions(associative=False).objects_as_dicts)
        self.assertTrue(
            DecodeOptions(
                associative=False, flags=DecodeFlag.OBJECT_AS_ARRAY
            ).objects_as_dicts
        )


class TestNormalizeConfig(unittest.TestCase):
    """Test normalization presets."""

    def test_defaults_enable_everything(self):
        """Test every step is on by default."""
        config = NormalizeConfig()
        self.assertTrue(config.strip_hash_comments)
        self.assertTrue(config.strip_slash_comments)
        self.assertTrue(config.strip_trailing_commas)
        self.assertTrue(config.trim_whitespace)

    def test_from_features_method(self):
        """Test selective feature enabling ignores unknown names."""
        config = NormalizeConfig.from_features({"strip_hash_comments", "bogus", "max_passes"})
        self.assertTrue(config.strip_hash_comments)
        self.assertFalse(config.strip_slash_comments)
        self.assertFalse(config.strip_trailing_commas)
        self.assertFalse(config.trim_whitespace)
        self.assertEqual(config.max_passes, 10)

    def test_max_passes_must_be_positive(self):
        """Test at least one pass is required."""
        with self.assertRaises(ValueError):
            NormalizeConfig(max_passes=0)


class TestJsonXConfig(unittest.TestCase):
    """Test the aggregate session configuration."""

    def test_defaults(self):
        """Test default groups are created per instance."""
        first = JsonXConfig()
        second = JsonXConfig()
        self.assertIsNot(first.decode, second.decode)
        self.assertEqual(first.write, WriteOptions())
        self.assertFalse(first.write.overwrite)

    def test_create(self):
        """Test the flat keyword constructor."""
        config = JsonXConfig.create(max_depth=8, flags=DecodeFlag.FLOAT_AS_DECIMAL, overwrite=True)
        self.assertEqual(config.decode.max_depth, 8)
        self.assertEqual(config.decode.flags, DecodeFlag.FLOAT_AS_DECIMAL)
        self.assertTrue(config.write.overwrite)
        self.assertEqual(config.normalize, NormalizeConfig())


if __name__ == "__main__":
    unittest.main()
