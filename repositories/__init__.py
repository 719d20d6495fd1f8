"""
Repository layer - abstracts where the answer corpus is stored.

Usage:
    from repositories import get_repository

    repo = get_repository(settings.corpus_path)
    corpus = repo.load()

Backends are swappable via configure_backend().
"""

from pathlib import Path

from .base import CorpusRepository, CorpusNotFound
from .json_backend import JsonCorpusRepository

# Default backend - can be changed via configure_backend()
_backend: str = "json"


def get_repository(path: Path) -> CorpusRepository:
    """Get a corpus repository for the configured backend."""
    if _backend == "json":
        return JsonCorpusRepository(path)
    raise ValueError(f"Unknown backend: {_backend}")


def configure_backend(backend: str) -> None:
    """Configure the repository backend."""
    global _backend
    _backend = backend


__all__ = [
    "get_repository",
    "configure_backend",
    "CorpusRepository",
    "CorpusNotFound",
    "JsonCorpusRepository",
]
