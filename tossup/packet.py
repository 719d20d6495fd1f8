"""
Packet building - the caller side of question generation.

Picks random candidates from the corpus, skips answers that make poor
questions, and gives each question slot a fixed number of attempts. A
failed attempt is logged and forgotten; a slot that runs out of attempts is
left out of the packet.
"""

import logging
import random
import re
from typing import Callable, Optional

from models import ALL_TOPICS, Question, VitalArticles
from sources import SourceError

from .errors import QuestionError
from .pipeline import FetchText, generate_question

logger = logging.getLogger(__name__)

DEFAULT_ATTEMPTS = 5

SKIP_PATTERNS = [
    re.compile(r".{30,}"),                # Long answers
    re.compile(r"\b(1\d|20)\d\d\b"),       # Year-specific answers
    re.compile(r"^(Cinema|History) of "),  # Listings
    re.compile(r"^[A-Z][a-z]{4,}ae$"),     # Taxonomic families
]


def should_skip(answer: str) -> bool:
    return any(p.search(answer) for p in SKIP_PATTERNS)


class PacketBuilder:
    """
    Generates packets of questions from a corpus.

    The seen set is owned here, not by the pipeline: an answer is never
    attempted twice by the same builder, successful or not.
    """

    def __init__(self, corpus: VitalArticles, fetch_text: FetchText,
                 attempts: int = DEFAULT_ATTEMPTS, rng: Optional[random.Random] = None,
                 seen: Optional[set] = None,
                 generate: Callable[..., Question] = generate_question):
        if attempts < 1:
            raise ValueError(f"attempts must be at least 1: {attempts}")
        self.corpus = corpus
        self.fetch_text = fetch_text
        self.attempts = attempts
        self.rng = rng or random.Random()
        self.seen = seen if seen is not None else set()
        self._generate = generate

    def attempt(self, topic: str, answer: str) -> Optional[Question]:
        """One try at one candidate. None if it was skipped or failed."""
        if answer in self.seen:
            return None
        self.seen.add(answer)
        if should_skip(answer):
            logger.info("[PACKET] Skipping %s", answer)
            return None

        try:
            return self._generate(topic, answer, self.fetch_text, rng=self.rng)
        except QuestionError as e:
            logger.warning("[PACKET] %s", e)
        except SourceError as e:
            logger.warning("[PACKET] Fetch failed for %s: %s", answer, e)
        return None

    def build(self, count: int, difficulty: int, topic: str = ALL_TOPICS) -> list[Question]:
        """Up to `count` questions; fewer if slots run out of attempts."""
        candidates = self.corpus.candidates(difficulty, topic)
        if not candidates:
            logger.warning("[PACKET] No candidates for %s at difficulty %d", topic, difficulty)
            return []

        questions = []
        for _ in range(count):
            for _ in range(self.attempts):
                candidate = self.rng.choice(candidates)
                question = self.attempt(candidate.topic, candidate.answer)
                if question:
                    questions.append(question)
                    break
        logger.info("[PACKET] Built %d/%d questions", len(questions), count)
        return questions
