"""
Representations the property mapper can read from and write to.

Every object taking part in a conversion is wrapped in one of two tagged
variants:

- ``StructuredValue``: an object with a fixed set of named fields
  (pydantic models, dataclasses, plain objects with attributes or properties)
- ``MapValue``: a string-keyed ``Mapping``

Both expose the same name-based read/write surface so that the conversion
code never needs to inspect concrete types itself.
"""

import dataclasses
import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel

from property_mapper.core.model.errors import (
    PropertyNotReadableError,
    PropertyNotWritableError,
    PropertyTypeMismatchError,
)

# Classes from these modules contribute no properties of their own
_BUILTIN_MODULES = frozenset({"builtins", "collections", "collections.abc", "_collections_abc", "typing"})


class RepresentationKind(Enum):
    """Tag distinguishing the two representation variants."""

    STRUCTURED = "structured"
    MAP = "map"


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def declared_properties(cls: type) -> Dict[str, property]:
    """
    Collect public ``property`` descriptors declared on a class hierarchy.

    Base classes come first, so the result follows definition order.
    Properties of builtin and standard collection types are ignored.

    Args:
        cls: The class to inspect

    Returns:
        Mapping of property name to descriptor
    """
    found: Dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        if klass.__module__ in _BUILTIN_MODULES:
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and _is_public(name):
                found[name] = attr
    return found


def _is_callable_member(attr: Any) -> bool:
    return inspect.isroutine(attr) or isinstance(attr, (staticmethod, classmethod, type))


def declared_attributes(cls: type) -> List[str]:
    """
    Collect public names declared at class level on a class hierarchy.

    Covers annotated names, class attributes with default values, slots and
    properties. Methods and nested classes are not attributes. Base classes
    come first; builtin and standard collection types are ignored.
    """
    names: List[str] = []
    for klass in reversed(cls.__mro__):
        if klass.__module__ in _BUILTIN_MODULES:
            continue
        candidates = list(inspect.get_annotations(klass)) + [
            name for name, attr in vars(klass).items() if not _is_callable_member(attr)
        ]
        names.extend(name for name in candidates if _is_public(name) and name not in names)
    return names


class Representation(ABC):
    """Name-based read/write capability over a wrapped object."""

    kind: RepresentationKind

    def __init__(self, value: Any):
        self.value = value

    @property
    def owner_type(self) -> type:
        return type(self.value)

    @abstractmethod
    def property_names(self) -> List[str]:
        """Return the names exposed by this representation, in stable order."""

    @abstractmethod
    def read_property(self, name: str) -> Any:
        """
        Read a property through the structured (attribute) surface.

        Raises:
            PropertyNotReadableError: If the property is not readable
        """

    @abstractmethod
    def write_property(self, name: str, value: Any) -> None:
        """
        Write a property through the structured (attribute) surface.

        Raises:
            PropertyNotWritableError: If the property is not writable
            PropertyTypeMismatchError: If the owner rejects the value
        """

    def _read_attribute(self, name: str) -> Any:
        try:
            result = getattr(self.value, name)
        except AttributeError as e:
            raise PropertyNotReadableError(name, self.owner_type) from e
        except Exception as e:
            raise PropertyNotReadableError(name, self.owner_type, str(e)) from e
        return result

    def _write_attribute(self, name: str, value: Any) -> None:
        try:
            setattr(self.value, name, value)
        except AttributeError as e:
            raise PropertyNotWritableError(name, self.owner_type, str(e)) from e
        except (TypeError, ValueError) as e:
            raise PropertyTypeMismatchError(name, self.owner_type, str(e)) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.owner_type.__name__})"


class StructuredValue(Representation):
    """
    An object with a fixed set of named fields.

    The exposed surface depends on the kind of object:
    - pydantic models: declared fields followed by computed fields
    - dataclasses: dataclass fields
    - anything else: public instance attributes followed by class-level
      attributes (annotated names, defaults, slots and properties)
    """

    kind = RepresentationKind.STRUCTURED

    def property_names(self) -> List[str]:
        value = self.value
        if isinstance(value, BaseModel):
            model_type = type(value)
            return list(model_type.model_fields) + list(model_type.model_computed_fields)

        if dataclasses.is_dataclass(value):
            return [field.name for field in dataclasses.fields(value)]

        names: List[str] = []
        if hasattr(value, "__dict__"):
            names.extend(name for name in vars(value) if _is_public(name))
        for name in declared_attributes(type(value)):
            if name not in names:
                names.append(name)
        return names

    def read_property(self, name: str) -> Any:
        if not _is_public(name):
            raise PropertyNotReadableError(name, self.owner_type, "name is not public")
        if name not in self.property_names() and _is_callable_member(
            inspect.getattr_static(self.owner_type, name, None)
        ):
            raise PropertyNotReadableError(name, self.owner_type, "name refers to a method")
        return self._read_attribute(name)

    def write_property(self, name: str, value: Any) -> None:
        target = self.value
        if isinstance(target, BaseModel):
            model_type = type(target)
            if name not in model_type.model_fields:
                raise PropertyNotWritableError(name, self.owner_type, "no such field")
            if model_type.model_config.get("frozen"):
                raise PropertyNotWritableError(name, self.owner_type, "model is frozen")
        elif name not in self.property_names():
            raise PropertyNotWritableError(name, self.owner_type, "no such property")

        self._write_attribute(name, value)


class MapValue(Representation):
    """
    A string-keyed mapping.

    The structured surface of a mapping only covers ``property`` descriptors
    declared on user subclasses; ordinary entries are reached through
    ``get_entry`` and ``put_entry``.
    """

    kind = RepresentationKind.MAP

    def property_names(self) -> List[str]:
        return [key for key in self.value if isinstance(key, str)]

    def read_property(self, name: str) -> Any:
        if name not in declared_properties(self.owner_type):
            raise PropertyNotReadableError(name, self.owner_type)
        return self._read_attribute(name)

    def write_property(self, name: str, value: Any) -> None:
        prop = declared_properties(self.owner_type).get(name)
        if prop is None or prop.fset is None:
            raise PropertyNotWritableError(name, self.owner_type)
        self._write_attribute(name, value)

    def get_entry(self, name: str) -> Any:
        """Return the entry stored under ``name``, or None when absent."""
        return self.value.get(name)

    def put_entry(self, name: str, value: Any) -> None:
        """
        Create or overwrite the entry stored under ``name``.

        Raises:
            PropertyNotWritableError: If the mapping is read-only
        """
        if not isinstance(self.value, MutableMapping):
            raise PropertyNotWritableError(name, self.owner_type, "mapping is read-only")
        self.value[name] = value


def as_representation(value: Any) -> Representation:
    """
    Wrap an object in the matching representation variant.

    Objects already wrapped are returned unchanged.
    """
    if isinstance(value, Representation):
        return value
    if isinstance(value, Mapping):
        return MapValue(value)
    return StructuredValue(value)
