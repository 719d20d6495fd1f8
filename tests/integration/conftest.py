"""
Integration test fixtures.

Integration tests:
- Test component boundaries
- Use real I/O but to temp locations
- Should be deterministic
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from models import VitalArticles
from repositories import JsonCorpusRepository


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def corpus_path(temp_dir):
    return temp_dir / "vital-articles.json"


@pytest.fixture
def saved_corpus(corpus_path):
    """A JSON corpus on disk with the two articles the fake fetcher knows."""
    repo = JsonCorpusRepository(corpus_path)
    repo.save(VitalArticles([
        {"Geography": ["Paris"], "People": ["Ada Lovelace"]},
        {"Geography": ["Mercury"]},
    ]))
    return corpus_path
