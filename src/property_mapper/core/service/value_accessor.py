"""
Reads and writes single named properties on either representation kind.

The structured (attribute) surface is always tried first. When it rejects
the access and the representation is a mapping, the entry is read or
written directly instead. Any other failure is raised to the caller.
"""

from typing import Any

from property_mapper.core.model.errors import (
    PropertyNotReadableError,
    PropertyNotWritableError,
)
from property_mapper.core.model.representation import MapValue, Representation


def read_value(representation: Representation, name: str) -> Any:
    """
    Read one property.

    Args:
        representation: The wrapped source object
        name: Property name

    Returns:
        The property value. Missing map entries read as None.

    Raises:
        PropertyNotReadableError: If a structured value has no readable property
    """
    try:
        return representation.read_property(name)
    except PropertyNotReadableError:
        if isinstance(representation, MapValue):
            return representation.get_entry(name)
        raise


def write_value(representation: Representation, name: str, value: Any) -> None:
    """
    Write one property, creating the entry when the target is a mapping.

    Args:
        representation: The wrapped target object
        name: Property name
        value: Value to store

    Raises:
        PropertyNotWritableError: If the property cannot be written
        PropertyTypeMismatchError: If the target rejects the value
    """
    try:
        representation.write_property(name, value)
    except PropertyNotWritableError:
        if isinstance(representation, MapValue):
            representation.put_entry(name, value)
            return
        raise
