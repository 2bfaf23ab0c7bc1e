"""
jsonx - JSON with comments and trailing commas, normalized to strict JSON.

JSONX extends JSON with `#` and `//` line comments and trailing commas.
jsonx strips both (leaving string literals untouched) and decodes the result
with the standard json module.

Quick Start:
    import jsonx
    data = jsonx.loads('{"a": 1, # comment\\n "b": [1, 2,],}')

    # Text only
    text = jsonx.to_json(jsonx_text)

    # Sessions
    from jsonx import JsonX
    JsonX().from_file("settings.jsonx").write_json()   # writes settings.json
    data = JsonX().max_depth(32).decode_file("settings.jsonx")
"""

import logging

from .core.decoder import decode
from .core.engine import load, load_file, loads, translate_file
from .core.session import JsonX
from .preprocessing.pipeline import NormalizationPipeline, normalize, to_json
from .security.exceptions import (
    ERROR_DECODE,
    ERROR_FILE,
    DecodeError,
    EmptySourceError,
    FileError,
    JsonXError,
)
from .utils.config import (
    DecodeFlag,
    DecodeOptions,
    JsonXConfig,
    NormalizeConfig,
    WriteOptions,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Functions
    "loads", "load", "load_file", "translate_file", "decode", "normalize", "to_json",
    # Session
    "JsonX", "NormalizationPipeline",
    # Configuration classes
    "JsonXConfig", "DecodeOptions", "WriteOptions", "NormalizeConfig", "DecodeFlag",
    # Exception classes
    "JsonXError", "FileError", "EmptySourceError", "DecodeError",
    "ERROR_FILE", "ERROR_DECODE",
]
