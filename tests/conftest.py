"""Shared pytest fixtures for exprtree tests."""

from __future__ import annotations

from types import MappingProxyType

import pytest


@pytest.fixture
def variables() -> MappingProxyType[str, float]:
    """Return the read-only variable mapping used across evaluation tests."""
    return MappingProxyType({"x": 12.0})
