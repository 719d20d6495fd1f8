"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (no network, no files)
- Deterministic (seeded random sources)
"""

import random
import pytest

from models import VitalArticles


@pytest.fixture
def rng():
    """Seeded random source for hint selection."""
    return random.Random(1234)


@pytest.fixture
def corpus():
    """Two-level corpus."""
    return VitalArticles([
        {
            "Geography": ["Paris"],
            "People": ["Ada Lovelace"],
        },
        {
            "Geography": ["Atlantis", "History of France", "Mercury"],
            "Biology and health sciences": ["Felidae"],
        },
    ])


