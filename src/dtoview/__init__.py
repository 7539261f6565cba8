"""Data transfer object behaviour for plain Python objects."""

from .contracts import Container, JsonProjectable, MapExportable, PropertyAccessor
from .dto import Dto
from .enums import JsonOption
from .exceptions import (
    ConfigurationError,
    DecodeError,
    DtoError,
    EncodeError,
    PropertyError,
    UndefinedPropertyError,
)
from .logging import configure_logger
from .object_view import ObjectView

__all__ = [
    "Container",
    "ConfigurationError",
    "DecodeError",
    "Dto",
    "DtoError",
    "EncodeError",
    "JsonOption",
    "JsonProjectable",
    "MapExportable",
    "ObjectView",
    "PropertyAccessor",
    "PropertyError",
    "UndefinedPropertyError",
    "configure_logger",
]

configure_logger(__name__)
