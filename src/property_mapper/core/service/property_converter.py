"""
Copies named properties from one object to another.

Either side may be a structured object (pydantic model, dataclass, plain
object) or a string-keyed mapping. Exclusions remove names up front,
per-property mappers override the default copy, and the fail-on-error flag
decides whether a failed default copy aborts the conversion or is logged and
skipped.
"""

import logging
from typing import AbstractSet, Any, Callable, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from property_mapper.base.property_mapper_registry import PropertyMapperRegistry
from property_mapper.config.converter_config import ConverterConfig
from property_mapper.core.model.errors import PropertyAccessError
from property_mapper.core.model.representation import Representation, as_representation
from property_mapper.core.service.exclusion_filter import DEFAULT_EXCLUSIONS, apply_exclusions
from property_mapper.core.service.value_accessor import read_value, write_value

logger = logging.getLogger(__name__)

T = TypeVar('T')  # Source type
R = TypeVar('R')  # Target type
V = TypeVar('V')  # Expected mapper result type


class _ReadFailed:
    """Marker for a default-path read that failed and was skipped."""


_READ_FAILED = _ReadFailed()
_SELF_CONVERT: Any = object()


class PropertyConverter(Generic[T]):
    """
    Converts one object into another by copying same-named properties.

    Mapper contract: a mapper registered for a property receives the source
    object and owns that property completely. Its return value is ignored;
    if the mapper does not write the target itself, the property is left
    untouched. In a self-conversion (``convert(obj)``) mappers are the only
    thing that runs.

    Example:
        converter = PropertyConverter()
        converter.exclusions = {"password"}
        dto = converter.convert(user_dict, UserDto())
    """

    def __init__(
        self,
        fail_on_error: bool = False,
        exclusions: Optional[Iterable[str]] = None,
    ) -> None:
        """
        Args:
            fail_on_error: Raise default-path access failures instead of logging them
            exclusions: Names never read or written (defaults to DEFAULT_EXCLUSIONS)
        """
        self._registry: PropertyMapperRegistry[T] = PropertyMapperRegistry()
        self._exclusions: frozenset = frozenset(DEFAULT_EXCLUSIONS if exclusions is None else exclusions)
        self._fail_on_error = fail_on_error

    @classmethod
    def from_config(cls, config: ConverterConfig) -> "PropertyConverter[T]":
        """Create a converter from a ConverterConfig."""
        return cls(fail_on_error=config.fail_on_error, exclusions=config.exclusions)

    @property
    def exclusions(self) -> AbstractSet[str]:
        """Snapshot of the excluded property names."""
        return self._exclusions

    @exclusions.setter
    def exclusions(self, exclusions: Iterable[str]) -> None:
        if exclusions is None or isinstance(exclusions, str):
            raise TypeError("Exclusions must be an iterable of property names")
        self._exclusions = frozenset(exclusions)
        logger.debug(f"Exclusions replaced: {sorted(self._exclusions)}")

    @property
    def fail_on_error(self) -> bool:
        """Whether a failed default-path read or write aborts the conversion."""
        return self._fail_on_error

    @fail_on_error.setter
    def fail_on_error(self, fail_on_error: bool) -> None:
        self._fail_on_error = fail_on_error

    @property
    def mappers(self) -> Mapping[str, Callable[[T], Any]]:
        """Read-only view of the registered mappers."""
        return self._registry.mappers

    def add_mapper(self, property_name: str, mapper: Callable[[T], Any]) -> None:
        """
        Register a mapper that takes over a property.

        The mapper is called with the source object during ``convert`` and
        must write the target itself; its return value is discarded.

        Raises:
            DuplicateMapperError: If a mapper is already registered for the name
        """
        self._registry.add_mapper(property_name, mapper)

    def has_mapper(self, property_name: str) -> bool:
        return self._registry.has_mapper(property_name)

    def get_mapper(self, property_name: str, result_type: Optional[Type[V]] = None) -> Optional[Callable[[T], Any]]:
        """
        Return the mapper registered for a property, or None.

        Passing ``result_type`` returns a callable that raises
        MapperResultTypeError when the mapper's result is not of that type.
        """
        return self._registry.get_mapper(property_name, result_type)

    def convert(self, source: Optional[T], target: R = _SELF_CONVERT) -> Optional[R]:
        """
        Copy properties from source onto target.

        Args:
            source: The object to copy from. None short-circuits to None.
            target: The object to copy to. When omitted the source itself is
                the target and only registered mappers run. An explicit None
                is rejected.

        Returns:
            The target (or the source for a self-conversion)

        Raises:
            ValueError: If target is passed explicitly as None
            PropertyAccessError: On a failed default-path copy when fail_on_error is set
            PropertyTypeMismatchError: If the target rejects a copied value
        """
        if source is None:
            return None
        if target is None:
            raise ValueError("Target must not be None; call convert(source) for a self-conversion")
        if target is _SELF_CONVERT:
            target = source

        self_convert = source is target
        source_rep = as_representation(source)
        target_rep = as_representation(target)

        for property_name in self._get_property_names(source_rep):
            if self.has_mapper(property_name):
                self._registry.mappers[property_name](source)
            elif not self_convert:
                value = self._read_value(source_rep, property_name)
                if value is not _READ_FAILED:
                    self._write_value(target_rep, property_name, value)

        return target

    def _get_property_names(self, source: Representation) -> List[str]:
        return apply_exclusions(source.property_names(), self._exclusions)

    def _read_value(self, source: Representation, property_name: str) -> Any:
        try:
            return read_value(source, property_name)
        except PropertyAccessError as e:
            self._log_or_fail("Exception trying to read value", property_name, e)
            return _READ_FAILED

    def _write_value(self, target: Representation, property_name: str, value: Any) -> None:
        try:
            write_value(target, property_name, value)
        except PropertyAccessError as e:
            self._log_or_fail("Exception trying to write value", property_name, e)

    def _log_or_fail(self, message: str, property_name: str, error: PropertyAccessError) -> None:
        if self._fail_on_error:
            raise error
        logger.debug(f"{message} - property: {property_name}", exc_info=error)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(fail_on_error={self._fail_on_error}, "
            f"exclusions={sorted(self._exclusions)}, mappers={sorted(self._registry.mappers)})"
        )
