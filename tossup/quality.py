"""
Content-quality filter for redacted sentences.

A hint has to mention the (masked) answer, stay a readable length, give
nothing away and make sense on its own.
"""

import logging
import re
from typing import Optional

from .errors import InsufficientContent
from .markup import has_placeholder

logger = logging.getLogger(__name__)

MIN_SENTENCE_LENGTH = 40
MAX_SENTENCE_LENGTH = 200

SPOILERS = re.compile(r"plural|pronounce|pronunciation", re.IGNORECASE)

# Placeholder spliced into a name, a compound or a title
BROKEN_ADJACENCY = re.compile(r"\b[A-Z][a-z]{2,} <|[-/]<|>[-/]|> [A-Z]")

# Openers that lean on a sentence we may not include. Anchored to the start
# for every word: a mid-sentence "however" or "thus" still reads on its own.
ORPHANED_REFERENCE = re.compile(
    r"^(so|though|both|\w+ contrast|overall|then|he|she|they|these|those|that"
    r"|this|it|later|such|this section|now|for example|subsequently|same"
    r"|another|furthermore|similarly|therefore|however|thus)\b(?!<)",
    re.IGNORECASE,
)


def answer_prefixes(alternates) -> list[str]:
    """First four letters of each alternate, ignoring a leading "the "."""
    return [re.sub(r"^the ", "", a.lower())[:4] for a in alternates]


def rejection_reason(sentence: str, alternates) -> Optional[str]:
    """Why a non-lead sentence can't be a hint, or None if it can."""
    if not MIN_SENTENCE_LENGTH < len(sentence) < MAX_SENTENCE_LENGTH:
        return "length"
    if not has_placeholder(sentence):
        return "no placeholder"
    if SPOILERS.search(sentence):
        return "spoiler"
    if BROKEN_ADJACENCY.search(sentence):
        return "broken adjacency"
    lowered = sentence.lower()
    if any(prefix in lowered for prefix in answer_prefixes(alternates)):
        return "answer fragment"
    if ORPHANED_REFERENCE.search(sentence):
        return "orphaned reference"
    return None


def filter_quality(sentences, alternates, answer: str) -> tuple[str, ...]:
    """
    Keep the lead sentence plus every later sentence that passes all checks.

    Raises:
        InsufficientContent: fewer than two sentences survive
    """
    kept = []
    for i, sentence in enumerate(sentences):
        if i == 0:
            kept.append(sentence)
            continue
        reason = rejection_reason(sentence, alternates)
        if reason:
            logger.debug("[QUALITY] %s: %s", reason, sentence[:60])
        else:
            kept.append(sentence)

    if len(kept) < 2:
        raise InsufficientContent(answer, f"{len(kept)} usable sentence(s)")
    return tuple(kept)
