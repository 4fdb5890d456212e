from .exclusion_filter import DEFAULT_EXCLUSIONS, apply_exclusions
from .property_converter import PropertyConverter
from .property_enumerator import enumerate_properties
from .value_accessor import read_value, write_value

__all__ = [
    "DEFAULT_EXCLUSIONS",
    "apply_exclusions",
    "PropertyConverter",
    "enumerate_properties",
    "read_value",
    "write_value",
]
