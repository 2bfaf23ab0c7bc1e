"""
Decoder adapter - hands normalized JSON text to the standard json decoder.
"""

import json
from decimal import Decimal
from types import SimpleNamespace
from typing import Any, Callable, NoReturn, Optional

from ..security.exceptions import DecodeError
from ..security.limits import LimitValidator
from ..utils.config import DecodeFlag, DecodeOptions

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _int_or_string(literal: str) -> Any:
    value = int(literal)
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return literal


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Constant {name} is not allowed")


def _decoder_hooks(options: DecodeOptions) -> dict[str, Optional[Callable[..., Any]]]:
    """Translate decode options into json.loads keyword hooks."""
    hooks: dict[str, Optional[Callable[..., Any]]] = {}
    if not options.objects_as_dicts:
        hooks["object_hook"] = lambda obj: SimpleNamespace(**obj)
    if options.flags & DecodeFlag.BIGINT_AS_STRING:
        hooks["parse_int"] = _int_or_string
    if options.flags & DecodeFlag.FLOAT_AS_DECIMAL:
        hooks["parse_float"] = Decimal
    if options.flags & DecodeFlag.REJECT_CONSTANTS:
        hooks["parse_constant"] = _reject_constant
    return hooks


def decode(text: str, options: Optional[DecodeOptions] = None) -> Any:
    """
    Decode normalized JSON text into Python values.

    Args:
        text: Strict JSON text, usually the output of normalize()
        options: Associative mode, nesting limit and decoder flags

    Returns:
        Decoded value tree; objects are dicts, or SimpleNamespace records
        when the options are not associative

    Raises:
        DecodeError: If the text is not valid JSON or nests deeper than
            options.max_depth
    """
    if options is None:
        options = DecodeOptions()

    LimitValidator(options.max_depth).validate_text(text)

    try:
        return json.loads(text, **_decoder_hooks(options))
    except json.JSONDecodeError as e:
        raise DecodeError(options.max_depth, e.msg, e.lineno, e.colno) from e
    except RecursionError as e:
        raise DecodeError(options.max_depth, "maximum recursion depth exceeded") from e
    except ValueError as e:
        raise DecodeError(options.max_depth, str(e)) from e
