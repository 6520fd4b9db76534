"""Shared fixtures for romantic tests."""

import pytest

from romantic import Roman


@pytest.fixture
def roman():
    """Codec for the classical Roman numerals."""
    return Roman.default()


@pytest.fixture
def custom():
    """Codec where A=1, B=5, C=10."""
    return Roman(["A", "B", "C"])
