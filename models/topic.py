"""
Topic - the category label that picks redaction rules and the question header.
"""

from enum import Enum


class Topic(str, Enum):
    """Vital-article topics, plus a catch-all bucket."""
    ARTS = "Arts"
    BIOLOGY = "Biology and health sciences"
    EVERYDAY_LIFE = "Everyday life"
    GEOGRAPHY = "Geography"
    HISTORY = "History"
    MATHEMATICS = "Mathematics"
    PEOPLE = "People"
    PHILOSOPHY = "Philosophy and religion"
    PHYSICAL_SCIENCES = "Physical sciences"
    SOCIETY = "Society and social sciences"
    TECHNOLOGY = "Technology"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value):
        # Corpus labels we don't know still get the default rules
        return cls.OTHER

    @property
    def label(self) -> str:
        return self.value
