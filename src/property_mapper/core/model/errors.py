"""
Error types raised by the property mapper engine.

Configuration errors (duplicate mapper registration) and type mismatches are
always raised synchronously. Access errors are raised by representations on
the default copy path and are routed through the converter's fail-on-error policy.
"""

from typing import Optional


class PropertyMapperError(Exception):
    """Base class for all property mapper errors."""


class DuplicateMapperError(PropertyMapperError):
    """Raised when a mapper is registered twice for the same property."""

    def __init__(self, property_name: str):
        self.property_name = property_name
        super().__init__(f"Mapper already registered for property: {property_name}")


class PropertyAccessError(PropertyMapperError):
    """
    A named property could not be read from or written to a representation.

    Attributes:
        property_name: Name of the property that failed
        owner_type: Type of the object the property was accessed on
    """

    action = "access"

    def __init__(self, property_name: str, owner_type: type, detail: Optional[str] = None):
        self.property_name = property_name
        self.owner_type = owner_type
        message = f"Cannot {self.action} property '{property_name}' on {owner_type.__name__}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class PropertyNotReadableError(PropertyAccessError):
    """The property does not exist or its getter failed."""

    action = "read"


class PropertyNotWritableError(PropertyAccessError):
    """The property does not exist, has no setter, or the owner is immutable."""

    action = "write"


class PropertyTypeMismatchError(PropertyMapperError, TypeError):
    """
    The owner rejected the value written to an otherwise writable property.

    Not an access error: it is raised whatever the fail-on-error setting.

    Attributes:
        property_name: Name of the property that failed
        owner_type: Type of the object the value was assigned on
    """

    def __init__(self, property_name: str, owner_type: type, detail: Optional[str] = None):
        self.property_name = property_name
        self.owner_type = owner_type
        message = f"Cannot assign value to property '{property_name}' on {owner_type.__name__}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MapperResultTypeError(PropertyMapperError, TypeError):
    """A mapper returned a value of a different type than the caller expected."""

    def __init__(self, property_name: str, expected: type, actual: type):
        self.property_name = property_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Mapper for property '{property_name}' returned {actual.__name__}, "
            f"expected {expected.__name__}"
        )
