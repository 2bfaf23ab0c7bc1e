"""
jsonx core: decoder adapter, file access and the JsonX session.
"""

from .decoder import decode
from .engine import load, load_file, loads, translate_file
from .session import JsonX

__all__ = ["decode", "JsonX", "loads", "load", "load_file", "translate_file"]
