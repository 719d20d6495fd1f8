"""
Question generation for one (topic, answer) attempt.

SCREEN → NORMALIZE → SEGMENT → VALIDATE → REDACT → FILTER → REVEAL → ASSEMBLE

All-or-nothing: either a Question comes back or a QuestionError is raised.
The only I/O is the injected fetch_text callable.
"""

import logging
import random
import re
from typing import Callable, Optional

from models import Question, Topic, display_form

from .assemble import assemble_hints, build_revealer
from .errors import ArticleNotFound, DisambiguationPage, TaxonomicName
from .normalize import normalize_article
from .quality import filter_quality
from .redact import redact_sentences
from .rules import rules_for
from .segment import filter_valid, split_sentences

logger = logging.getLogger(__name__)

FetchText = Callable[[str], Optional[str]]

DISAMBIGUATION_WINDOW = 100
TAXONOMIC = re.compile(r"is a (phylum|class|order|family|genus|species)")


def screen_article(text: Optional[str], answer: str) -> str:
    """
    Reject articles that can't become a question at all.

    Raises:
        ArticleNotFound: no text
        DisambiguationPage: "... may refer to" near the top
        TaxonomicName: the article is about a taxon
    """
    if not text:
        raise ArticleNotFound(answer)
    if " may refer to" in text[:DISAMBIGUATION_WINDOW]:
        raise DisambiguationPage(answer)
    if TAXONOMIC.search(text):
        raise TaxonomicName(answer)
    return text


def question_from_text(topic: str, raw_answer: str, text: Optional[str],
                       rng: Optional[random.Random] = None) -> Question:
    """
    Build a question from already-fetched article text.

    Args:
        topic: corpus label or Topic member; picks the rules and the header
        raw_answer: article title as listed in the corpus
        text: plain-text article extract
        rng: random source for hint selection

    Raises:
        QuestionError: any subclass, see tossup.errors
    """
    answer = display_form(raw_answer)
    text = screen_article(text, answer)
    rules = rules_for(Topic(topic))

    alternates = rules.alternates(answer)
    logger.debug("[PIPELINE] Alternates: %s", alternates)

    normalized = normalize_article(text)
    sentences = filter_valid(split_sentences(normalized), answer)
    redacted = redact_sentences(sentences, alternates, rules, normalized)
    usable = filter_quality(redacted, alternates, answer)
    logger.debug("[PIPELINE] %s: %d sentences, %d usable", answer, len(sentences), len(usable))

    revealer = build_revealer(usable[0], rules, answer)
    hint_set = assemble_hints(usable, revealer, answer, rng=rng)
    return Question.for_answer(topic, raw_answer, hint_set.hints)


def generate_question(topic: str, raw_answer: str, fetch_text: FetchText,
                      rng: Optional[random.Random] = None) -> Question:
    """Fetch the article for an answer and build its question."""
    answer = display_form(raw_answer)
    return question_from_text(topic, raw_answer, fetch_text(answer), rng=rng)
