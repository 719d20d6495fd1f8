"""
Sentence segmentation and structural validity.

The splitter is a heuristic: punctuation + whitespace + anything that is not
a lowercase letter. A space, one capital and an optional lowercase letter
right before the punctuation ("J. R. R.", "St.", "Mt.") is treated as an
abbreviation and does not end a sentence.
"""

import logging
import re

from .errors import InvalidLeadSentence

logger = logging.getLogger(__name__)

SENTENCE_BOUNDARY = re.compile(
    r"(?<=[.?!])(?<! [A-Z][.?!])(?<! [A-Z][a-z][.?!])\s+(?=[^a-z])"
)

# "1987: Something happened." from timeline lists
LIST_PREFIX = re.compile(r"^\d+: ")

# Lowercase continuations and leftover template/math markup
INVALID_SENTENCE = re.compile(r"^[a-z]|\{\{|cite book|diagram|displaystyle")


def clean_sentence(chunk: str) -> str:
    """Keep the text after the last line break, drop list prefixes, trim."""
    last_line = chunk.split("\n")[-1]
    return LIST_PREFIX.sub("", last_line).strip()


def split_sentences(text: str) -> tuple[str, ...]:
    """Split normalized text into cleaned candidate sentences."""
    return tuple(clean_sentence(chunk) for chunk in SENTENCE_BOUNDARY.split(text))


def is_valid_sentence(sentence: str) -> bool:
    return not INVALID_SENTENCE.search(sentence)


def filter_valid(sentences, answer: str) -> tuple[str, ...]:
    """
    Drop structurally broken sentences.

    The lead sentence carries the revealer, so if it is broken the whole
    attempt is off.

    Raises:
        InvalidLeadSentence: the first sentence failed the check
    """
    valid = []
    for i, sentence in enumerate(sentences):
        if is_valid_sentence(sentence):
            valid.append(sentence)
        elif i == 0:
            raise InvalidLeadSentence(answer, sentence[:60])
        else:
            logger.debug("[SEGMENT] Dropped fragment: %s", sentence[:60])
    return tuple(valid)
