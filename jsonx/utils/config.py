"""
Configuration for jsonx normalization, decoding and file translation.

This module defines the option groups a JsonX session carries. Each group is a
small dataclass; JsonXConfig aggregates them for one session.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Optional

DEFAULT_MAX_DEPTH = 512
DEFAULT_ENCODING = "utf-8"
JSON_EXTENSION = "json"


class DecodeFlag(IntFlag):
    """Decoder flag bitset applied on top of the associative setting."""

    NONE = 0
    OBJECT_AS_ARRAY = 1
    BIGINT_AS_STRING = 2
    FLOAT_AS_DECIMAL = 4
    REJECT_CONSTANTS = 8


@dataclass
class DecodeOptions:
    """Options handed to the JSON decoder."""

    associative: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    flags: DecodeFlag = DecodeFlag.NONE

    def __post_init__(self) -> None:
        self.flags = DecodeFlag(self.flags)
        if self.max_depth < 1:
            raise ValueError("max_depth must be positive")

    @property
    def objects_as_dicts(self) -> bool:
        """Whether JSON objects decode to dicts rather than records."""
        return self.associative or bool(self.flags & DecodeFlag.OBJECT_AS_ARRAY)


@dataclass
class WriteOptions:
    """Options used when writing normalized JSON to disk."""

    overwrite: bool = False
    encoding: str = DEFAULT_ENCODING


@dataclass
class NormalizeConfig:
    """Granular control over normalization steps."""

    strip_hash_comments: bool = True
    strip_slash_comments: bool = True
    strip_trailing_commas: bool = True
    trim_whitespace: bool = True
    max_passes: int = 10

    def __post_init__(self) -> None:
        if self.max_passes < 1:
            raise ValueError("max_passes must be positive")

    @classmethod
    def comments_only(cls) -> "NormalizeConfig":
        """Create a configuration that only strips comments."""
        return cls(strip_trailing_commas=False)

    @classmethod
    def from_features(cls, enabled_features: set[str]) -> "NormalizeConfig":
        """Create configuration from a set of enabled feature names."""
        config = cls(
            strip_hash_comments=False,
            strip_slash_comments=False,
            strip_trailing_commas=False,
            trim_whitespace=False,
        )
        for feature_name in enabled_features:
            if isinstance(getattr(config, feature_name, None), bool):
                setattr(config, feature_name, True)
        return config


@dataclass
class JsonXConfig:
    """Configuration options for one jsonx session."""

    decode: DecodeOptions = field(default_factory=DecodeOptions)
    write: WriteOptions = field(default_factory=WriteOptions)
    normalize: NormalizeConfig = field(default_factory=NormalizeConfig)

    @classmethod
    def create(
        cls,
        *,
        associative: bool = True,
        max_depth: int = DEFAULT_MAX_DEPTH,
        flags: DecodeFlag = DecodeFlag.NONE,
        overwrite: bool = False,
        normalize: Optional[NormalizeConfig] = None,
    ) -> "JsonXConfig":
        """Build a configuration from flat keyword options."""
        return cls(
            decode=DecodeOptions(
                associative=associative, max_depth=max_depth, flags=flags
            ),
            write=WriteOptions(overwrite=overwrite),
            normalize=normalize or NormalizeConfig(),
        )
