"""
Repository base classes - define the interface.
"""

from abc import ABC, abstractmethod

from models import VitalArticles


class CorpusNotFound(Exception):
    """No corpus has been built or saved yet."""
    pass


class CorpusRepository(ABC):
    """Where the answer corpus lives."""

    @abstractmethod
    def load(self) -> VitalArticles:
        """
        Load the corpus.

        Raises:
            CorpusNotFound: nothing saved yet
        """
        pass

    @abstractmethod
    def save(self, corpus: VitalArticles) -> None:
        """Replace the stored corpus."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Check if a corpus is stored."""
        pass
