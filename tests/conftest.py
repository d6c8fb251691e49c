"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
from dotenv import load_dotenv

from typewriter.config import get_settings
from typewriter.inference import TypeModelBuilder

# Load .env file at test collection time
load_dotenv(Path(__file__).parent.parent / ".env")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def builder() -> TypeModelBuilder:
    """Create an empty TypeModelBuilder."""
    return TypeModelBuilder()


@pytest.fixture
def complex_examples() -> list:
    """Examples covering unions, empty containers, functions and nesting."""
    return [
        # union types
        {"foo": None},
        {"foo": "string"},
        {"foo": 1},
        {"foo": True},
        # empty array
        {"foo": []},
        # array with a single value
        {"bax": ["string"]},
        # union of array types
        {"foo": [1, 2, 3]},
        {"foo": ["a", "b", "c"]},
        {"foo": lambda: None},
        # nested typing, with a common field
        {"foo": {"mandatory": True, "bar": "baz"}},
        {"foo": {"mandatory": True, "hello": "world"}},
        # empty array with no typing information
        {"bar": []},
        # mixed array
        {"mixed": [1, 2, "a", "b"]},
        # array with complex values
        {"arr": [{"mandatory": True, "bar": "baz"}]},
        {"arr": [{"mandatory": True, "hello": "world"}]},
        # empty object
        {"empty": {}},
    ]


@pytest.fixture
def complex_builder(complex_examples) -> TypeModelBuilder:
    """Create a TypeModelBuilder loaded with the complex examples."""
    builder = TypeModelBuilder()
    builder.add_examples(complex_examples)
    return builder
