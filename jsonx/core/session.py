"""
JsonX session - owns the loaded source text and sequences the
load -> normalize -> decode and load -> normalize -> write workflows.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..preprocessing.pipeline import normalize
from ..security.exceptions import DecodeError, EmptySourceError, FileError
from ..utils.config import JSON_EXTENSION, DecodeFlag, JsonXConfig
from . import files
from .decoder import decode as decode_json

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class JsonX:
    """
    One JSONX conversion session.

    Holds the current source text, the file it came from (if any) and the
    decode and write options. Setters return the session so calls chain:

        data = JsonX().max_depth(32).associative(False).from_file(path).decode()
    """

    def __init__(self, config: Optional[JsonXConfig] = None):
        self.config = config or JsonXConfig()
        self._source = ""
        self._origin: Optional[Path] = None

    def __repr__(self) -> str:
        return f"JsonX(origin={self._origin!r}, length={len(self._source)})"

    @property
    def source(self) -> str:
        """The current source text; normalized after to_json()."""
        return self._source

    @property
    def origin(self) -> Optional[Path]:
        """Absolute path the source was loaded from, or None."""
        return self._origin

    def from_string(self, text: str) -> "JsonX":
        """Load source text from a string and forget any origin file."""
        self._source = text
        self._origin = None
        return self

    def from_file(self, path: PathLike) -> "JsonX":
        """
        Load source text from a file.

        Raises:
            FileError: If the path is missing, not a regular file or not
                readable
            DecodeError: If the file is not valid text in the configured
                encoding
        """
        files.check_source(path)
        try:
            text = files.read_all(path, self.config.write.encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(self.config.decode.max_depth, str(e)) from e
        self._source = text
        self._origin = files.resolve_absolute(path)
        logger.debug("Loaded %d characters from %s", len(self._source), self._origin)
        return self

    def to_json(self) -> str:
        """Normalize the source text in place and return it."""
        self._source = normalize(self._source, self.config.normalize)
        return self._source

    def decode(self) -> Any:
        """
        Normalize and decode the loaded source.

        Raises:
            EmptySourceError: If no source text is loaded
            DecodeError: If the normalized text cannot be decoded
        """
        if not self._source:
            raise EmptySourceError()
        return decode_json(self.to_json(), self.config.decode)

    def decode_text(self, text: str) -> Any:
        """Replace the source with text, then decode it."""
        return self.from_string(text).decode()

    def decode_file(self, path: PathLike) -> Any:
        """Load a file and decode it."""
        return self.from_file(path).decode()

    def write_json(self, target: Optional[PathLike] = None) -> int:
        """
        Normalize the source and write it as JSON.

        Without a target, the output path is the origin file with its
        extension replaced by `.json`.

        Returns:
            Number of bytes written

        Raises:
            FileError: If no target can be derived, the target exists and
                may not be overwritten, or the target cannot be written
        """
        text = self.to_json()
        target_path = self._resolve_target(target)
        files.check_target(target_path, self.config.write.overwrite)
        return files.write_all(target_path, text, self.config.write.encoding)

    def translate_file(
        self,
        source: PathLike,
        target: Optional[PathLike] = None,
        overwrite: bool = True,
    ) -> int:
        """Convert a JSONX file to a JSON file; see write_json()."""
        self.from_file(source)
        self.overwrite(overwrite)
        return self.write_json(target)

    def _resolve_target(self, target: Optional[PathLike]) -> Path:
        if target is not None:
            return Path(target)
        if self._origin is None:
            raise FileError(FileError.TARGET_UNDEFINED)
        return files.derive_target(self._origin, JSON_EXTENSION)

    # Fluent configuration

    def associative(self, value: bool = True) -> "JsonX":
        """Decode objects as dicts (True) or SimpleNamespace records (False)."""
        self.config.decode.associative = value
        return self

    def max_depth(self, depth: int) -> "JsonX":
        """Set the maximum nesting depth accepted when decoding."""
        if depth < 1:
            raise ValueError("max_depth must be positive")
        self.config.decode.max_depth = depth
        return self

    def flags(self, flags: Union[DecodeFlag, int]) -> "JsonX":
        """Set the decoder flag bitset."""
        self.config.decode.flags = DecodeFlag(flags)
        return self

    def overwrite(self, value: bool = True) -> "JsonX":
        """Allow write_json() to replace an existing target file."""
        self.config.write.overwrite = value
        return self
