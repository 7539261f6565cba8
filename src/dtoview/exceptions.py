"""
Exceptions for the dtoview package.

The hierarchy mirrors the failure surfaces of a data transfer object:

- JSON codec failures (``DecodeError``, ``EncodeError``)
- Property access failures raised by hosts (``PropertyError``)
- Settings failures (``ConfigurationError``)

Every error carries a machine readable ``error_code`` and an optional
``context`` mapping to aid in troubleshooting.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class DtoError(Exception):
    """Base exception class for all dtoview errors."""

    default_error_code: Optional[str] = None

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize a dtoview error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information for debugging
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.context = context or {}

        logger.debug(f"{type(self).__name__}: {message}", extra={
            "error_code": self.error_code,
            "context": self.context
        })

    def __str__(self) -> str:
        return self.message


# JSON Codec Exceptions

class DecodeError(DtoError, ValueError):
    """Raised when a JSON payload cannot be decoded."""

    default_error_code = "JSON_DECODE_ERROR"

    def __init__(self, message: Optional[str] = None, line: Optional[int] = None,
                 column: Optional[int] = None, cause: Optional[Exception] = None):
        """
        Initialize a decode error.

        Args:
            message: Optional custom message
            line: Line of the payload where decoding failed, when known
            column: Column of the payload where decoding failed, when known
            cause: Optional underlying exception that caused this error
        """
        self.line = line
        self.column = column
        self.cause = cause

        default_message = "Unable to decode JSON payload"
        if cause:
            default_message += f": {cause}"

        super().__init__(
            message or default_message,
            context={"line": line, "column": column, "cause": str(cause) if cause else None}
        )


class EncodeError(DtoError, ValueError):
    """Raised when a value cannot be represented as JSON."""

    default_error_code = "JSON_ENCODE_ERROR"

    def __init__(self, message: Optional[str] = None, value_type: Optional[str] = None,
                 cause: Optional[Exception] = None):
        """
        Initialize an encode error.

        Args:
            message: Optional custom message
            value_type: Name of the type that was being encoded
            cause: Optional underlying exception that caused this error
        """
        self.value_type = value_type
        self.cause = cause

        default_message = "Unable to encode value as JSON"
        if cause:
            default_message += f": {cause}"

        super().__init__(
            message or default_message,
            context={"value_type": value_type, "cause": str(cause) if cause else None}
        )


# Property Exceptions

class PropertyError(DtoError):
    """Raised by hosts for an invalid property name or value."""

    default_error_code = "PROPERTY_ERROR"


class UndefinedPropertyError(PropertyError, KeyError):
    """Raised when a property is not declared by the DTO."""

    default_error_code = "UNDEFINED_PROPERTY"

    def __init__(self, property_name: str, dto_class: Optional[str] = None, message: Optional[str] = None):
        """
        Initialize an undefined property error.

        Args:
            property_name: The property that does not exist
            dto_class: Name of the DTO class that was accessed
            message: Optional custom message
        """
        self.property_name = property_name
        self.dto_class = dto_class

        default_message = f"Property '{property_name}' does not exist"
        if dto_class:
            default_message += f" in {dto_class}"

        super().__init__(
            message or default_message,
            context={"property_name": property_name, "dto_class": dto_class}
        )


# Configuration Exceptions

class ConfigurationError(DtoError):
    """Raised when settings cannot be loaded or are invalid."""

    default_error_code = "CONFIGURATION_ERROR"


__all__ = [
    "DtoError",
    "DecodeError",
    "EncodeError",
    "PropertyError",
    "UndefinedPropertyError",
    "ConfigurationError",
]
