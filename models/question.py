"""
Question - the finished artifact of one successful generation attempt.
"""

import re
from urllib.parse import quote

from pydantic import Field

from .base import FrozenModel
from .topic import Topic

WIKI_BASE_URL = "https://en.wikipedia.org/wiki/"

# encodeURIComponent leaves these unescaped on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


def display_form(raw_answer: str) -> str:
    """Strip disambiguators: "Apple (fruit)" -> "Apple"."""
    return re.sub(r" *\([^)]*\)", "", raw_answer)


def article_url(raw_answer: str) -> str:
    """Wiki URL for an article title (spaces become underscores)."""
    return WIKI_BASE_URL + quote(raw_answer.replace(" ", "_"), safe=_URI_COMPONENT_SAFE)


class Question(FrozenModel):
    """
    Ordered hints for one answer, most obscure first, revealer last.

    raw_answer is the article title as found in the corpus and is only used
    for the outbound link; display_answer is what the reader sees. Likewise
    topic_label is the corpus label shown in the header, while topic picks
    the rules and falls back to Topic.OTHER for labels it doesn't know.
    """
    topic: Topic
    topic_label: str
    hints: tuple[str, ...] = Field(min_length=2)
    raw_answer: str
    display_answer: str

    @classmethod
    def for_answer(cls, topic: str, raw_answer: str, hints) -> "Question":
        """topic is a corpus label or a Topic member."""
        label = topic.value if isinstance(topic, Topic) else topic
        return cls(
            topic=Topic(label),
            topic_label=label,
            hints=tuple(hints),
            raw_answer=raw_answer,
            display_answer=display_form(raw_answer),
        )

    @property
    def revealer(self) -> str:
        return self.hints[-1]

    @property
    def answer_url(self) -> str:
        return article_url(self.raw_answer)
