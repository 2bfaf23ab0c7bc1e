"""
Module level API for jsonx.

Each call builds its own JsonX session, so nothing is shared between calls.
"""

from pathlib import Path
from typing import Any, Optional, TextIO, Union

from ..security.exceptions import DecodeError
from ..utils.config import DEFAULT_MAX_DEPTH, DecodeFlag, JsonXConfig, NormalizeConfig
from .session import JsonX

PathLike = Union[str, Path]


def loads(
    s: Union[str, bytes, bytearray],
    *,
    associative: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
    flags: DecodeFlag = DecodeFlag.NONE,
    normalize: Optional[NormalizeConfig] = None,
) -> Any:
    """
    Deserialize a JSONX document to a Python object.

    Args:
        s: JSONX text (str, or UTF-8 bytes/bytearray)
        associative: Decode objects as dicts; records when False
        max_depth: Maximum structure nesting depth
        flags: Decoder flag bitset
        normalize: Optional normalization step selection

    Returns:
        Parsed Python data structure

    Raises:
        EmptySourceError: If s is empty
        DecodeError: If bytes are not UTF-8 or the normalized text cannot
            be decoded
    """
    if isinstance(s, (bytes, bytearray)):
        try:
            s = s.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(max_depth, str(e)) from e

    config = JsonXConfig.create(
        associative=associative, max_depth=max_depth, flags=flags, normalize=normalize
    )
    return JsonX(config).decode_text(s)


def load(fp: TextIO, **options: Any) -> Any:
    """Same as loads() but reads from a file-like object."""
    return loads(fp.read(), **options)


def load_file(path: PathLike, **options: Any) -> Any:
    """Same as loads() but reads the file at path."""
    return JsonX(JsonXConfig.create(**options)).decode_file(path)


def translate_file(
    source: PathLike,
    target: Optional[PathLike] = None,
    overwrite: bool = True,
    normalize: Optional[NormalizeConfig] = None,
) -> int:
    """
    Convert a JSONX file to a JSON file.

    Returns:
        Number of bytes written to the target
    """
    config = JsonXConfig.create(normalize=normalize)
    return JsonX(config).translate_file(source, target, overwrite)
