"""
Answer redaction across every sentence and every alternate.
"""

from .rules import TopicRules


def redact_sentence(sentence: str, alternates, rules: TopicRules, text: str) -> str:
    for alternate in alternates:
        sentence = rules.redact(sentence, alternate, text)
    return sentence


def redact_sentences(sentences, alternates, rules: TopicRules, text: str) -> tuple[str, ...]:
    """
    Mask the answer in each sentence.

    Args:
        sentences: valid sentences, lead first
        alternates: AlternateSet, applied in order
        rules: topic rules supplying the placeholder vocabulary
        text: the normalized article, used for plural detection
    """
    return tuple(redact_sentence(s, alternates, rules, text) for s in sentences)
