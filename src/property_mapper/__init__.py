"""Property Mapper.

Copies named properties between structured objects and string-keyed
mappings, with exclusions, per-property mappers and a configurable
error policy.
"""

__version__ = "0.1.0"

from .core.model.errors import (
    DuplicateMapperError,
    MapperResultTypeError,
    PropertyAccessError,
    PropertyMapperError,
    PropertyNotReadableError,
    PropertyNotWritableError,
    PropertyTypeMismatchError,
)
from .core.model.representation import MapValue, StructuredValue, as_representation
from .core.service.exclusion_filter import DEFAULT_EXCLUSIONS
from .core.service.property_converter import PropertyConverter

__all__ = [
    # Conversion
    "PropertyConverter",
    "DEFAULT_EXCLUSIONS",
    # Representations
    "MapValue",
    "StructuredValue",
    "as_representation",
    # Errors
    "DuplicateMapperError",
    "MapperResultTypeError",
    "PropertyAccessError",
    "PropertyMapperError",
    "PropertyNotReadableError",
    "PropertyNotWritableError",
    "PropertyTypeMismatchError",
]
