"""Shared test fixtures."""

import pytest

from variantkit import DeciderRegistry


class FixtureWidget:
    pass


@pytest.fixture
def registry():
    """Fresh DeciderRegistry, not attached to the global type registry."""
    return DeciderRegistry(FixtureWidget)
