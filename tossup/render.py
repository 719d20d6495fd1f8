"""
HTML rendering of a finished question.
"""

import re

from models import Question

from .markup import MARKER_OPEN


def polish_hint(hint: str) -> str:
    """Capitalise a leading placeholder and drop orphaned "also"s."""
    return re.sub(rf"^{MARKER_OPEN}t", f"{MARKER_OPEN}T", hint).replace(" also", "")


def format_hints(hints) -> str:
    return " ".join(polish_hint(h) for h in hints).replace("\n", "<br>")


def format_question(question: Question) -> str:
    """Topic header, hints, and an answer line linking to the article."""
    return (
        f"<strong>{question.topic_label}</strong><br><br>"
        f"{format_hints(question.hints)}<br><br>"
        f"<strong>Answer:</strong> "
        f'<a href="{question.answer_url}" target="_blank">{question.display_answer}</a>'
    )
