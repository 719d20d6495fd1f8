"""
JSON file backend - the corpus is a single vital-articles.json file.

Format (one mapping per difficulty level):
    [
        {"Geography": ["Africa", "Asia", ...], "People": [...]},
        ...
    ]
"""

import json
import logging
import threading
from pathlib import Path
from typing import Optional

from models import VitalArticles
from .base import CorpusRepository, CorpusNotFound

logger = logging.getLogger(__name__)


class WriteQueue:
    """Thread-safe write serialization."""

    def __init__(self):
        self._lock = threading.Lock()

    def write_json(self, path: Path, data) -> None:
        """Atomic JSON write."""
        with self._lock:
            temp = path.with_suffix(".json.tmp")
            with open(temp, "w") as f:
                json.dump(data, f)
            temp.replace(path)


_write_queue = WriteQueue()


class JsonCorpusRepository(CorpusRepository):
    """JSON file implementation of the corpus repository. Caches after first load."""

    def __init__(self, path: Path):
        self._path = Path(path)
        self._cached: Optional[VitalArticles] = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> VitalArticles:
        if self._cached is not None:
            return self._cached
        if not self._path.exists():
            raise CorpusNotFound(f"No corpus at {self._path}")

        try:
            with open(self._path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CorpusNotFound(f"Corrupt corpus at {self._path}: {e}") from e

        self._cached = VitalArticles.model_validate(data)
        logger.info("[CORPUS] Loaded %d levels from %s", self._cached.levels, self._path)
        return self._cached

    def save(self, corpus: VitalArticles) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        _write_queue.write_json(self._path, corpus.model_dump(mode="json"))
        self._cached = corpus

    def exists(self) -> bool:
        return self._path.exists()
