"""
JSON codec used by data transfer objects.

Wraps the standard library :mod:`json` module so that every failure surfaces
as :class:`~dtoview.exceptions.DecodeError` or
:class:`~dtoview.exceptions.EncodeError`, and so that formatting is driven by
:class:`~dtoview.enums.JsonOption` flags.
"""

import json
import logging
from types import SimpleNamespace
from typing import Any, Optional, Union

from dtoview.config import get_settings
from dtoview.enums import JsonOption
from dtoview.exceptions import DecodeError, EncodeError

logger = logging.getLogger(__name__)

COMPACT_SEPARATORS = (",", ":")
PRETTY_SEPARATORS = (",", ": ")


def _force_object(value: Any) -> Any:
    """Replace every list and tuple, nested ones included, with an index-keyed dict."""
    if isinstance(value, (list, tuple)):
        return {str(index): _force_object(item) for index, item in enumerate(value)}
    if isinstance(value, dict):
        return {key: _force_object(item) for key, item in value.items()}
    return value


def encode(value: Any, options: Optional[JsonOption] = None, *, indent: Optional[int] = None) -> str:
    """
    Encode a value as a JSON string.

    Args:
        value: JSON compatible value
        options: Formatting flags; the configured default is used when omitted
        indent: Indentation width applied with ``PRETTY_PRINT``; the configured
            ``json_indent`` is used when omitted

    Returns:
        The JSON document.

    Raises:
        EncodeError: If the value cannot be represented, e.g. cyclic structures,
            unsupported types or non-finite floats.
    """
    settings = get_settings()
    options = settings.json_options if options is None else JsonOption(options)

    pretty = bool(options & JsonOption.PRETTY_PRINT)
    if pretty and indent is None:
        indent = settings.json_indent

    try:
        if options & JsonOption.FORCE_OBJECT:
            value = _force_object(value)
        return json.dumps(
            value,
            indent=indent if pretty else None,
            separators=PRETTY_SEPARATORS if pretty else COMPACT_SEPARATORS,
            sort_keys=bool(options & JsonOption.SORT_KEYS),
            ensure_ascii=not options & JsonOption.UNESCAPED_UNICODE,
            allow_nan=False,
        )
    except (TypeError, ValueError, OverflowError, RecursionError) as error:
        logger.error("JSON encoding error for %s: %s", type(value).__name__, error)
        raise EncodeError(value_type=type(value).__name__, cause=error) from error


def decode(text: Union[str, bytes, bytearray], as_mapping: bool = True) -> Any:
    """
    Decode a JSON document.

    Args:
        text: The JSON document
        as_mapping: Decode JSON objects to ``dict`` when true, otherwise to
            :class:`types.SimpleNamespace` instances

    Returns:
        The decoded value.

    Raises:
        DecodeError: If the document is malformed or not text.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise DecodeError(f"JSON payload must be str or bytes, received {type(text).__name__}")

    object_hook = None if as_mapping else (lambda obj: SimpleNamespace(**obj))

    try:
        return json.loads(text, object_hook=object_hook)
    except json.JSONDecodeError as error:
        logger.error("JSON parsing error at line %d column %d: %s", error.lineno, error.colno, error.msg)
        raise DecodeError(line=error.lineno, column=error.colno, cause=error) from error
    except (UnicodeDecodeError, RecursionError) as error:
        logger.error("JSON parsing error: %s", error)
        raise DecodeError(cause=error) from error


__all__ = ["encode", "decode", "JsonOption"]
