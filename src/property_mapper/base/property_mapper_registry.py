import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Type, TypeVar, overload

from property_mapper.core.model.errors import DuplicateMapperError, MapperResultTypeError

logger = logging.getLogger(__name__)

# Generic type variables for the registry
T = TypeVar('T')  # The type of source object handed to mappers
R = TypeVar('R')  # The result type a caller expects from a mapper


class PropertyMapperRegistry(Generic[T]):
    """
    Registry holding at most one mapper function per property name.

    A mapper receives the conversion source and is responsible for both
    reading and writing the property it is registered for. The registry
    never looks at what a mapper returns.

    Type Parameters:
        T: The type of source object the mappers accept
    """

    def __init__(self) -> None:
        self._mapper_map: Dict[str, Callable[[T], Any]] = {}

    def add_mapper(self, property_name: str, mapper: Callable[[T], Any]) -> None:
        """
        Register a mapper for a property name.

        Args:
            property_name: The property the mapper owns
            mapper: Function taking the source object

        Raises:
            ValueError: If the property name is empty
            TypeError: If the mapper is not callable
            DuplicateMapperError: If a mapper is already registered for the name
        """
        if not property_name:
            raise ValueError("Property name for a mapper must be a non-empty string.")
        if not callable(mapper):
            raise TypeError(f"Mapper for property '{property_name}' must be callable, got {type(mapper).__name__}")

        if property_name in self._mapper_map:
            raise DuplicateMapperError(property_name)

        self._mapper_map[property_name] = mapper
        logger.debug(f"Registered mapper for property '{property_name}': {mapper}")

    def has_mapper(self, property_name: str) -> bool:
        """
        Check if a mapper is registered for a property name.

        Args:
            property_name: The property name to check

        Returns:
            True if a mapper is registered, False otherwise
        """
        return property_name in self._mapper_map

    @overload
    def get_mapper(self, property_name: str) -> Optional[Callable[[T], Any]]: ...

    @overload
    def get_mapper(self, property_name: str, result_type: Type[R]) -> Optional[Callable[[T], R]]: ...

    def get_mapper(self, property_name: str, result_type: Optional[type] = None) -> Optional[Callable[[T], Any]]:
        """
        Get the mapper registered for a property name.

        When ``result_type`` is given the returned callable checks the
        mapper's result on every call and raises ``MapperResultTypeError``
        if it is not an instance of ``result_type``. Neither retrieval nor
        registration performs any check.

        Args:
            property_name: The property name to look up
            result_type: Optional type the caller expects the mapper to return

        Returns:
            The mapper if found, None otherwise
        """
        mapper = self._mapper_map.get(property_name)
        if mapper is None or result_type is None:
            return mapper

        def checked_mapper(source: T) -> Any:
            result = mapper(source)
            if not isinstance(result, result_type):
                raise MapperResultTypeError(property_name, result_type, type(result))
            return result

        return checked_mapper

    @property
    def mappers(self) -> Mapping[str, Callable[[T], Any]]:
        """Read-only view of all registered mappers."""
        return MappingProxyType(self._mapper_map)

    def __len__(self) -> int:
        return len(self._mapper_map)

    def __contains__(self, property_name: object) -> bool:
        return property_name in self._mapper_map

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._mapper_map)} registered mappers)"
