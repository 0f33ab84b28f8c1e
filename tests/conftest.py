"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_ints() -> list[int]:
    """Integers used by the sample selections."""
    return [1, 4, 2, 30, 5, 6, 11, 10, 9, 100]


@pytest.fixture
def grid_points() -> list[tuple[int, int]]:
    """3x3 grid in the sample offer order."""
    return [(3, 1), (3, 2), (3, 3), (1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3)]
