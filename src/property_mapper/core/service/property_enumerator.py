"""
Enumeration of the property names a representation exposes.
"""

from typing import Any, List

from property_mapper.core.model.representation import as_representation


def enumerate_properties(value: Any) -> List[str]:
    """
    List the property names of an object or representation.

    Mappings contribute their string keys verbatim; structured values
    contribute the names of their introspectable surface. No filtering is
    applied here.

    Args:
        value: A plain object, a mapping, or an existing representation

    Returns:
        Property names in a stable iteration order
    """
    return list(as_representation(value).property_names())
