"""
Corpus - candidate answers grouped by difficulty level and topic.

vital-articles.json maps directly to this: a list with one
{topic label: [article titles]} mapping per difficulty level.
"""

from pydantic import BaseModel, Field, RootModel

ALL_TOPICS = "All"


class Candidate(BaseModel):
    """One (topic, answer) pair the caller may attempt."""
    topic: str
    answer: str


class VitalArticles(RootModel[list[dict[str, list[str]]]]):
    """Answer corpus. Level 1 is the easiest (index 0)."""
    root: list[dict[str, list[str]]] = Field(default_factory=list)

    @property
    def levels(self) -> int:
        return len(self.root)

    def topics(self, difficulty: int) -> list[str]:
        """Topic labels available at a difficulty level."""
        return sorted(self.level(difficulty).keys())

    def all_topics(self) -> list[str]:
        """Every topic label across all levels."""
        labels = set()
        for level in self.root:
            labels.update(level.keys())
        return sorted(labels)

    def level(self, difficulty: int) -> dict[str, list[str]]:
        if difficulty < 1 or difficulty > self.levels:
            raise ValueError(f"difficulty must be between 1 and {self.levels}: {difficulty}")
        return self.root[difficulty - 1]

    def candidates(self, difficulty: int, topic: str = ALL_TOPICS) -> list[Candidate]:
        """Flatten one level into (topic, answer) pairs, optionally for one topic."""
        return [
            Candidate(topic=label, answer=answer)
            for label, answers in self.level(difficulty).items()
            if topic == ALL_TOPICS or label == topic
            for answer in answers
        ]
