"""
Shared test fixtures for property-mapper tests.

Provides sample sources/targets and logging isolation following the
Given/When/Then structure requirements.
"""

import logging
from typing import Any, Dict, Generator

import pytest

from property_mapper.core.service.property_converter import PropertyConverter
from sample_models import SampleData


@pytest.fixture
def sample_data() -> SampleData:
    """Provide a populated SampleData instance."""
    return SampleData(number_field=1, string_field="foo", map_field={"innerFoo": "innerBar"})


@pytest.fixture
def sample_map() -> Dict[str, Any]:
    """Provide a mapping with the same property names as SampleData."""
    return {
        "number_field": 1,
        "string_field": "foo",
        "map_field": {"innerFoo": "innerBar"},
    }


@pytest.fixture
def converter() -> PropertyConverter:
    """Provide a converter with default configuration."""
    return PropertyConverter()


@pytest.fixture
def isolated_root_logger() -> Generator[logging.Logger, None, None]:
    """
    Remove the handlers a test installs on the root logger and restore its level.

    Handlers installed during the test are closed to release file handles.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            if handler not in original_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(original_level)
