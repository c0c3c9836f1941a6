"""
Pytest configuration and shared fixtures for swessn tests.
"""

import random
from datetime import date

import pytest


@pytest.fixture
def today() -> date:
    """Fixed reference date so century resolution does not drift."""
    return date(2024, 6, 1)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible generated numbers."""
    return random.Random(1234)
