"""Pytest configuration and fixtures for classweave tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from classweave.config import set_config_path
from classweave.logger import reset_logger
from classweave.registry import StyleRegistry, create_default_registry, set_default_registry


@pytest.fixture(autouse=True)
def clean_global_state() -> Iterator[None]:
    """Give every test a fresh default registry, no --config path and a quiet logger."""
    set_default_registry(None)
    set_config_path(None)
    reset_logger()
    yield
    set_default_registry(None)
    set_config_path(None)
    reset_logger()


@pytest.fixture
def registry() -> StyleRegistry:
    """A fresh registry holding only the built-in concerns."""
    return create_default_registry()
