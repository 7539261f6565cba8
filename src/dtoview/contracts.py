"""
Capability interfaces consumed and provided by data transfer objects.

``JsonProjectable``, ``MapExportable`` and ``Container`` recognise objects
structurally: any object exposing the named method passes ``isinstance``
without inheriting from the interface.
"""

import abc
from typing import Any, Dict, Mapping, Sequence


def _has_method(cls: type, name: str) -> bool:
    for base in cls.__mro__:
        if name in base.__dict__:
            return callable(base.__dict__[name])
    return False


class PropertyAccessor(abc.ABC):
    """Property access capabilities a host must expose to compose ObjectView."""

    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def get_property_names(cls) -> Sequence[str]:
        """Return the ordered names of the populatable properties."""

    @abc.abstractmethod
    def get_property(self, name: str) -> Any:
        """Read the current value of a property."""

    @abc.abstractmethod
    def set_property(self, name: str, value: Any) -> None:
        """Write a property value."""

    @abc.abstractmethod
    def has_property(self, name: str) -> bool:
        """Return whether the property currently holds a value."""

    @abc.abstractmethod
    def unset_property(self, name: str) -> None:
        """Remove the value of a property."""


class JsonProjectable(abc.ABC):
    """Values that can produce their own JSON-serialisable projection."""

    __slots__ = ()

    @abc.abstractmethod
    def to_json_value(self) -> Any:
        """Return data which can be encoded by the JSON codec."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is JsonProjectable:
            return _has_method(subclass, "to_json_value") or NotImplemented
        return NotImplemented


class MapExportable(abc.ABC):
    """Values that can export themselves as a plain mapping."""

    __slots__ = ()

    @abc.abstractmethod
    def to_mapping(self) -> Dict[str, Any]:
        """Return the instance as a dictionary."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is MapExportable:
            return _has_method(subclass, "to_mapping") or NotImplemented
        return NotImplemented


class Container(abc.ABC):
    """Construction-time collaborator used to build nested objects."""

    __slots__ = ()

    @abc.abstractmethod
    def make(self, abstract: type, parameters: Mapping[str, Any]) -> Any:
        """Build an instance of ``abstract`` using ``parameters`` as keyword arguments."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is Container:
            return _has_method(subclass, "make") or NotImplemented
        return NotImplemented


__all__ = ["PropertyAccessor", "JsonProjectable", "MapExportable", "Container"]
