"""
Domain models - single source of truth for questions and the answer corpus.

Design principles:
- Every value defined once
- Immutable once produced by the pipeline
- Validation at the boundary
"""

from .base import FrozenModel
from .topic import Topic
from .question import Question, display_form, article_url
from .corpus import VitalArticles, Candidate, ALL_TOPICS

__all__ = [
    # Base
    "FrozenModel",
    # Topic
    "Topic",
    # Question
    "Question",
    "display_form",
    "article_url",
    # Corpus
    "VitalArticles",
    "Candidate",
    "ALL_TOPICS",
]
