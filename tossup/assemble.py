"""
Revealer construction and hint-budget assembly.

A question reads obscure-to-obvious: randomly chosen filler first, then the
second sentence of the article, then the revealer built from the lead.
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import Optional

from .errors import InsufficientContent
from .rules import TopicRules

logger = logging.getLogger(__name__)

LEAD_IN = "For 10 points: "

MIN_QUESTION_LENGTH = 350
MAX_QUESTION_LENGTH = 550

# ">Foo, also known as Bar, is ..." -> ">is ..."
ALIAS_CLAUSE = re.compile(
    r">[^<>]*( or .+?|, (also|commonly|known as|officially|sometimes|spelled) .+?,)"
    r"(?= (is|are|was|were) )"
)


def strip_alias_clause(sentence: str) -> str:
    return ALIAS_CLAUSE.sub(">", sentence, count=1)


def build_revealer(lead: str, rules: TopicRules, answer: str) -> str:
    """
    Turn the lead sentence into the final "For 10 points" hint.

    Raises:
        NoBiographicalPredicate: People topic and the lead has no is/was clause
    """
    revealer = rules.revealer(strip_alias_clause(lead), answer)
    return f"{LEAD_IN}{revealer[:1].lower()}{revealer[1:]}"


@dataclass(frozen=True)
class HintSet:
    """Assembled hints, revealer last."""
    hints: tuple[str, ...]

    @property
    def text(self) -> str:
        return " ".join(self.hints)

    @property
    def length(self) -> int:
        return len(self.text)


def assemble_hints(sentences, revealer: str, answer: str,
                   rng: Optional[random.Random] = None) -> HintSet:
    """
    Grow the hint list from the front until it passes the length budget.

    Args:
        sentences: quality-filtered sentences, lead first (at least two)
        revealer: output of build_revealer()
        answer: display answer, for error reporting
        rng: random source; pass a seeded Random for repeatable picks

    Raises:
        InsufficientContent: pool ran dry below MIN_QUESTION_LENGTH
    """
    rng = rng or random.Random()
    hints = [sentences[1], revealer]
    unused = list(sentences[2:])

    while True:
        length = len(" ".join(hints))
        if length > MAX_QUESTION_LENGTH:
            break
        if not unused:
            if length < MIN_QUESTION_LENGTH:
                raise InsufficientContent(answer, f"only {length} characters of hints")
            break
        hint = unused.pop(rng.randrange(len(unused)))
        # An article can repeat a sentence; a question never repeats a hint
        unused = [h for h in unused if h != hint]
        hints.insert(0, hint)

    logger.debug("[ASSEMBLE] %d hints, %d unused", len(hints), len(unused))
    return HintSet(hints=tuple(hints))
