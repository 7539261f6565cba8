"""
Data transfer object base class.

``Dto`` implements the property accessor capabilities on top of class
annotations and composes :class:`~dtoview.object_view.ObjectView`, so a
concrete DTO only declares its properties:

    class Address(Dto):
        street: str
        city: str

    class Person(Dto):
        name: str
        age: Optional[int] = None
        address: Optional[Address]

        def set_name_attribute(self, value):
            return value.strip()

Properties are ordered by declaration, base classes first. A property is set
once a value has been assigned to it (or it declares a default); unset
properties are skipped by exports. Mappings assigned to a property declared as
another DTO type are turned into that DTO, through the container when one was
given.
"""

import copy
import inspect
import logging
import sys
import types
import typing
from collections.abc import Mapping as MappingABC
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

from dtoview.contracts import Container
from dtoview.exceptions import UndefinedPropertyError
from dtoview.object_view import ObjectView

logger = logging.getLogger(__name__)

GETTER_TEMPLATE = "get_{name}_attribute"
SETTER_TEMPLATE = "set_{name}_attribute"


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


class Dto(ObjectView):
    """Base class for data transfer objects declared through annotations."""

    _property_names: ClassVar[Tuple[str, ...]] = ()
    _property_defaults: ClassVar[Dict[str, Any]] = {}
    _resolved_types: ClassVar[Optional[Dict[str, Any]]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        names: Dict[str, None] = {}
        defaults: Dict[str, Any] = {}
        for base in reversed(cls.__mro__[1:]):
            names.update(dict.fromkeys(base.__dict__.get("_property_names", ())))
            defaults.update(base.__dict__.get("_property_defaults", {}))

        for name, annotation in inspect.get_annotations(cls).items():
            if name.startswith("_") or _is_class_var(annotation):
                continue
            names[name] = None
            if name in cls.__dict__:
                # Keep defaults off the class so attribute reads reach the accessors
                defaults[name] = cls.__dict__[name]
                delattr(cls, name)

        cls._property_names = tuple(names)
        cls._property_defaults = defaults
        cls._resolved_types = None

    def __init__(self, properties: Optional[Mapping[str, Any]] = None, container: Optional[Container] = None):
        """
        Initialize the DTO.

        Args:
            properties: Initial property values
            container: Optional container used to build nested DTOs
        """
        self._reset_storage(container)
        self.populate(properties)

    def _reset_storage(self, container: Optional[Container] = None) -> None:
        object.__setattr__(self, "_data", copy.deepcopy(self._property_defaults))
        object.__setattr__(self, "_container", container)

    def get_container(self) -> Optional[Container]:
        """Return the container given at construction, if any."""
        return self._container

    # Property accessors

    @classmethod
    def get_property_names(cls) -> Tuple[str, ...]:
        return cls._property_names

    def get_property(self, name: str) -> Any:
        self._assert_declared(name)
        value = self._data.get(name)

        getter = getattr(self, GETTER_TEMPLATE.format(name=name), None)
        if getter is not None:
            return getter(value)
        return value

    def set_property(self, name: str, value: Any) -> None:
        self._assert_declared(name)
        value = self._resolve_value(name, value)

        setter = getattr(self, SETTER_TEMPLATE.format(name=name), None)
        if setter is not None:
            value = setter(value)
        self._data[name] = value

    def has_property(self, name: str) -> bool:
        return name in self._data

    def unset_property(self, name: str) -> None:
        self._assert_declared(name)
        self._data.pop(name, None)

    # Attribute access routes through the accessors

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name not in self._property_names:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return self.get_property(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._property_names:
            self.set_property(name, value)
        else:
            object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._property_names:
            self.unset_property(name)
        else:
            object.__delattr__(self, name)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_array() == other.to_array()

    __hash__ = None  # type: ignore[assignment]

    def __setstate__(self, state: Mapping[str, Any]) -> None:
        # Unpickled instances bypass __init__
        if "_data" not in self.__dict__:
            self._reset_storage()
        super().__setstate__(state)

    # Internals

    def _assert_declared(self, name: str) -> None:
        if name not in self._property_names:
            raise UndefinedPropertyError(name, type(self).__name__)

    @classmethod
    def _property_type(cls, name: str) -> Any:
        if cls.__dict__.get("_resolved_types") is None:
            try:
                hints = typing.get_type_hints(cls)
            except (NameError, AttributeError, TypeError, SyntaxError) as e:
                logger.debug("Resolving %s property types one by one: %s", cls.__name__, e)
                hints = {key: cls._resolve_annotation(key) for key in cls._property_names}
            cls._resolved_types = {key: _unwrap_optional(hints.get(key)) for key in cls._property_names}
        return cls._resolved_types.get(name)

    @classmethod
    def _resolve_annotation(cls, name: str) -> Any:
        """Evaluate the annotation declaring ``name``; ``None`` when it cannot be resolved."""
        for klass in cls.__mro__:
            annotations = inspect.get_annotations(klass)
            if name not in annotations:
                continue
            annotation = annotations[name]
            if not isinstance(annotation, str):
                return annotation
            module = sys.modules.get(klass.__module__)
            try:
                return eval(annotation, vars(module) if module else {}, dict(vars(klass)))
            except (NameError, AttributeError, TypeError, SyntaxError) as e:
                logger.debug("Unresolvable type for %s.%s: %s", cls.__name__, name, e)
                return None
        return None

    def _resolve_value(self, name: str, value: Any) -> Any:
        if not isinstance(value, MappingABC):
            return value

        declared = self._property_type(name)
        if not (inspect.isclass(declared) and issubclass(declared, ObjectView)):
            return value

        container = self._container
        logger.debug("Resolving nested %s for %s.%s", declared.__name__, type(self).__name__, name)
        if container is not None:
            return container.make(declared, {"properties": value, "container": container})
        return declared.create(value)


__all__ = ["Dto"]
