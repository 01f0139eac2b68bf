"""Shared test fixtures."""

from collections.abc import Callable, Iterator

import pytest

from common_validation.config import get_settings
from common_validation.core.layers import clear_layer, register_layer
from common_validation.definitions.registry import ValidatorTypeRegistry


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop the cached Settings so env changes made by a test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> ValidatorTypeRegistry:
    """A registry holding only the built-in validator types."""
    return ValidatorTypeRegistry()


@pytest.fixture
def declare_layer() -> Iterator[Callable[[type, str], type]]:
    """Register a type-level layer for the duration of one test."""
    declared: list[type] = []

    def _declare(cls: type, layer: str) -> type:
        register_layer(cls, layer)
        declared.append(cls)
        return cls

    yield _declare
    for cls in declared:
        clear_layer(cls)
