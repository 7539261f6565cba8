"""
ObjectView mixin.

Composes data transfer object behaviour onto any host implementing
:class:`~dtoview.contracts.PropertyAccessor`: bulk population, mapping and
JSON export, JSON import, indexed access, string and debug representations and
state hooks for generic persistence (``pickle``, ``copy``).

Usage:
    class Person(ObjectView):
        ...  # implement the PropertyAccessor methods

    person = Person.create({"name": "Ann"})
    person.to_array()   # {"name": "Ann"}
    person.to_json()    # '{"name":"Ann"}'
"""

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from dtoview import json_codec
from dtoview.contracts import Container, JsonProjectable, MapExportable, PropertyAccessor
from dtoview.enums import JsonOption
from dtoview.exceptions import DecodeError

logger = logging.getLogger(__name__)

V = TypeVar('V', bound='ObjectView')


class ObjectView(PropertyAccessor):
    """Data transfer object behaviour over the host's property accessors."""

    __slots__ = ()

    def populate(self, data: Optional[Mapping[str, Any]] = None) -> None:
        """
        Populate this object from a mapping of property names to values.

        Properties that are not present in ``data`` are left unchanged, and an
        empty mapping populates nothing.

        Args:
            data: Key-value pairs, key = property name, value = property value

        Raises:
            PropertyError: Propagated from the host when an entry is invalid
        """
        if not data:
            return

        for name, value in data.items():
            self.set_property(name, value)

        logger.debug("Populated %s with %d properties", type(self).__name__, len(data))

    @classmethod
    def create(cls: Type[V], initial: Optional[Mapping[str, Any]] = None, context: Optional[Container] = None) -> V:
        """
        Return a new instance of this object.

        Args:
            initial: Initial property values
            context: Optional container used by the host to resolve nested values

        Returns:
            The new instance.
        """
        return cls(initial, context)

    @classmethod
    def from_json(cls: Type[V], text: str) -> V:
        """
        Create a new populated instance from a JSON encoded object.

        Raises:
            DecodeError: If ``text`` is malformed or not a JSON object
        """
        data = json_codec.decode(text, as_mapping=True)
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected JSON object when decoding {cls.__name__}, received {type(data).__name__}"
            )

        logger.debug("Decoded %s from JSON with keys %s", cls.__name__, list(data))
        return cls.create(data)

    def to_array(self) -> Dict[str, Any]:
        """Return the set properties, in declaration order, as a dictionary."""
        output: Dict[str, Any] = {}

        for name in self.get_property_names():
            if self._is_property_unset(name):
                continue

            # Read through the host so getter hooks apply
            output[name] = self.get_property(name)

        return output

    def to_mapping(self) -> Dict[str, Any]:
        """Alias of :meth:`to_array`, so nested objects export as mappings."""
        return self.to_array()

    def to_json_value(self) -> Dict[str, Any]:
        """
        Return data which can be encoded as JSON.

        Nested values projecting themselves to JSON take precedence over values
        that only export a mapping; all other values pass through unchanged.
        """
        output: Dict[str, Any] = {}

        for name, value in self.to_array().items():
            if isinstance(value, JsonProjectable):
                value = value.to_json_value()
            elif isinstance(value, MapExportable):
                value = value.to_mapping()
            output[name] = value

        return output

    def to_json(self, options: Optional[JsonOption] = None) -> str:
        """
        Convert this object to its JSON representation.

        Raises:
            EncodeError: If a value cannot be represented as JSON
        """
        return json_codec.encode(self.to_json_value(), options)

    def serialize_state(self) -> Dict[str, Any]:
        """
        Return the data this object chooses to have serialised.

        Only top-level ``None`` values are dropped; restoring them could
        overwrite nested objects built by the host.
        """
        return {name: value for name, value in self.to_array().items() if value is not None}

    def restore_state(self, data: Mapping[str, Any]) -> None:
        """Populate this object with previously serialised data."""
        self.populate(data)

    def to_display_string(self) -> str:
        """Return the JSON representation using the default options."""
        return self.to_json()

    def debug_snapshot(self) -> Dict[str, Any]:
        """Return the current state for debugging and introspection."""
        return self.to_array()

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.debug_snapshot()!r})"

    def __getstate__(self) -> Dict[str, Any]:
        return self.serialize_state()

    def __setstate__(self, state: Mapping[str, Any]) -> None:
        self.restore_state(state)

    # Indexed access

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_property(key)

    def __getitem__(self, key: str) -> Any:
        return self.get_property(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_property(key, value)

    def __delitem__(self, key: str) -> None:
        self.unset_property(key)

    # Internals

    def _is_property_unset(self, name: str) -> bool:
        """Determine whether the host currently holds no value for ``name``."""
        return not self.has_property(name)


__all__ = ["ObjectView"]
