"""Unit tests for enumerate_properties()."""

from property_mapper.core.model.representation import MapValue
from property_mapper.core.service.property_enumerator import enumerate_properties
from sample_models import SampleData, SampleModel


def test_map_keys_are_returned_verbatim() -> None:
    """Given a mapping When enumerated Then every key is returned, excluded names included."""
    # Given
    source = {"number_field": 1, "__class__": "meta", "string_field": "foo"}

    # When
    names = enumerate_properties(source)

    # Then
    assert names == ["number_field", "__class__", "string_field"]


def test_structured_value_surface() -> None:
    """Given a dataclass and a pydantic model When enumerated Then their fields are returned."""
    assert enumerate_properties(SampleData()) == ["number_field", "string_field", "map_field"]
    assert enumerate_properties(SampleModel()) == ["number_field", "string_field", "map_field"]


def test_accepts_existing_representation() -> None:
    """Given a wrapped mapping When enumerated Then the wrapped keys are returned."""
    assert enumerate_properties(MapValue({"a": 1})) == ["a"]


def test_empty_mapping_has_no_properties() -> None:
    assert enumerate_properties({}) == []
