"""
Placeholder markup shared by redaction, filtering and formatting.

Placeholders are wrapped in <em> so later stages can tell them apart from
ordinary prose.
"""

MARKER_OPEN = "<em>"
MARKER_CLOSE = "</em>"

THIS = "this"
THESE = "these"
THIS_PLACE = "this place"
THIS_PERSON = "this person"


def emphasize(placeholder: str) -> str:
    return f"{MARKER_OPEN}{placeholder}{MARKER_CLOSE}"


def has_placeholder(sentence: str) -> bool:
    return MARKER_OPEN in sentence
