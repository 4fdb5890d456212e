from .errors import (
    DuplicateMapperError,
    MapperResultTypeError,
    PropertyAccessError,
    PropertyMapperError,
    PropertyNotReadableError,
    PropertyNotWritableError,
    PropertyTypeMismatchError,
)
from .representation import (
    MapValue,
    Representation,
    RepresentationKind,
    StructuredValue,
    as_representation,
)

__all__ = [
    "DuplicateMapperError",
    "MapperResultTypeError",
    "PropertyAccessError",
    "PropertyMapperError",
    "PropertyNotReadableError",
    "PropertyNotWritableError",
    "PropertyTypeMismatchError",
    "MapValue",
    "Representation",
    "RepresentationKind",
    "StructuredValue",
    "as_representation",
]
