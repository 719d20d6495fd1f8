"""
Topic rules - the per-topic parts of alternates, redaction and the revealer.

Each topic maps to one TopicRules variant; shared stages call into it and
never branch on the topic themselves. New topic behaviour means a new
subclass plus an entry in RULES.
"""

import re
from abc import ABC, abstractmethod

from models import Topic

from .errors import NoBiographicalPredicate
from .markup import THESE, THIS, THIS_PERSON, THIS_PLACE, emphasize


def _word(pattern: str) -> re.Pattern:
    """Whole-word, case-insensitive."""
    return re.compile(rf"\b{pattern}\b", re.IGNORECASE)


def looks_plural(answer: str, text: str) -> bool:
    """
    Guess whether an answer is a regular plural.

    Ends in "s" (but not "-ics", e.g. kinematics) and a near-singular form of
    the last word - minus one or two letters - shows up in the article.
    """
    if not answer.endswith("s") or answer.endswith("ics"):
        return False
    last_word = answer.split(" ")[-1]
    stems = f"{re.escape(last_word[:-2])}|{re.escape(last_word[:-1])}"
    return _word(f"({stems})").search(text) is not None


class TopicRules(ABC):
    """
    Behaviour that varies by topic.

    Subclasses set `placeholder` and implement `redact`. Alternates and the
    revealer subject default to "no change".
    """

    placeholder: str

    def alternates(self, answer: str) -> list[str]:
        """Every form of the answer to redact, display form first."""
        return [answer]

    @abstractmethod
    def redact(self, sentence: str, alternate: str, text: str) -> str:
        """Replace one alternate in one sentence. text is the whole article."""
        pass

    def revealer(self, sentence: str, answer: str) -> str:
        """Shape the lead sentence into the revealer body."""
        return sentence


class DefaultRules(TopicRules):
    """Things: "this" for singulars, "these" for plurals."""

    placeholder = THIS

    def redact(self, sentence: str, alternate: str, text: str) -> str:
        escaped = re.escape(alternate)
        if looks_plural(alternate, text):
            return _word(f"(the )?{escaped}").sub(emphasize(THESE), sentence)

        if alternate.endswith("y"):
            plural = _word(f"(the )?{re.escape(alternate[:-1])}ies")
        else:
            plural = _word(f"((an?|the) )?{escaped}s")
        sentence = plural.sub(emphasize(THESE), sentence)
        return _word(f"((an?|the) )?{escaped}").sub(emphasize(self.placeholder), sentence)


class GeographyRules(TopicRules):
    placeholder = THIS_PLACE

    def redact(self, sentence: str, alternate: str, text: str) -> str:
        return _word(f"(the )?{re.escape(alternate)}").sub(emphasize(self.placeholder), sentence)


class PeopleRules(TopicRules):
    """Full name plus the regnal root ("Louis XIV of France") or the surname."""

    placeholder = THIS_PERSON

    def alternates(self, answer: str) -> list[str]:
        if " of " in answer:
            return [answer, answer.split(" of ")[0]]
        return [answer, answer.split(" ")[-1]]

    def redact(self, sentence: str, alternate: str, text: str) -> str:
        return _word(re.escape(alternate)).sub(emphasize(self.placeholder), sentence)

    def revealer(self, sentence: str, answer: str) -> str:
        # Cruder than matching names, but far more reliable
        predicate = " ".join(re.split(r" (?=is|was)", sentence)[1:])
        if not predicate:
            raise NoBiographicalPredicate(answer)
        return f"{emphasize(self.placeholder)} {predicate}"


RULES: dict[Topic, TopicRules] = {
    Topic.GEOGRAPHY: GeographyRules(),
    Topic.PEOPLE: PeopleRules(),
}

_DEFAULT_RULES = DefaultRules()


def rules_for(topic: Topic) -> TopicRules:
    return RULES.get(topic, _DEFAULT_RULES)


def derive_alternates(topic: Topic, answer: str) -> list[str]:
    """AlternateSet for an answer: never empty, display form first."""
    return rules_for(topic).alternates(answer)
