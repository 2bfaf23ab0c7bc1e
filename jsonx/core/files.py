"""
File system access for jsonx sessions.

Thin wrappers over pathlib and os.access plus the source/target checks that
turn a failed precondition into a FileError naming the violated condition.
"""

import logging
import os
from pathlib import Path
from typing import Union

from ..security.exceptions import FileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def exists(path: PathLike) -> bool:
    return Path(path).exists()


def is_regular_file(path: PathLike) -> bool:
    return Path(path).is_file()


def is_readable(path: PathLike) -> bool:
    return os.access(path, os.R_OK)


def is_writable(path: PathLike) -> bool:
    return os.access(path, os.W_OK)


def resolve_absolute(path: PathLike) -> Path:
    """Make path absolute without following symlinks."""
    return Path(path).expanduser().absolute()


def read_all(path: PathLike, encoding: str = "utf-8") -> str:
    """Read the whole file as text."""
    with open(path, encoding=encoding, newline="") as fp:
        return fp.read()


def write_all(path: PathLike, text: str, encoding: str = "utf-8") -> int:
    """Write text to path, returning the number of bytes written."""
    data = text.encode(encoding)
    try:
        with open(path, "wb") as fp:
            written = fp.write(data)
    except OSError as e:
        raise FileError(FileError.NOT_WRITABLE, path) from e
    logger.debug("Wrote %d bytes to %s", written, path)
    return written


def check_source(path: PathLike) -> None:
    """Raise FileError unless path is an existing, readable regular file."""
    if not exists(path):
        raise FileError(FileError.NOT_FOUND, path)
    if not is_regular_file(path):
        raise FileError(FileError.NOT_REGULAR_FILE, path)
    if not is_readable(path):
        raise FileError(FileError.NOT_READABLE, path)


def check_target(path: PathLike, overwrite: bool) -> None:
    """Raise FileError if an existing target may not be replaced."""
    if not exists(path):
        return
    if not overwrite:
        raise FileError(FileError.TARGET_EXISTS, path)
    if not is_regular_file(path):
        raise FileError(FileError.NOT_REGULAR_FILE, path)
    if not is_writable(path):
        raise FileError(FileError.NOT_WRITABLE, path)


def derive_target(source: PathLike, extension: str) -> Path:
    """Replace everything from the last `.` of the file name with `.extension`."""
    path = Path(source)
    stem, dot, _ = path.name.rpartition(".")
    if not dot:
        stem = path.name
    return path.with_name(f"{stem}.{extension}")
