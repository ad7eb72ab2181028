"""Shared fixtures for tsbridge tests."""

from collections.abc import Iterator

import pytest

from tsbridge.registry import TypeRegistry


@pytest.fixture(autouse=True)
def fresh_registry() -> Iterator[None]:
    """Give every test a registry holding only the builtins."""
    TypeRegistry.clear()
    yield
    TypeRegistry.clear()
