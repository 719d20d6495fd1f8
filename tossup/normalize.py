"""
Article normalization - strip what never makes a good hint.

Works on the plain-text extract (exsectionformat=plain), where section
headings are bare lines surrounded by blank lines.
"""

import re

# Everything from the first boilerplate section onward
TRAILING_SECTIONS = re.compile(
    r"\b(Gallery|External links|Notes|References|See also|Selected works|Works)\b.*",
    re.DOTALL,
)

# Heading line: blank line before, capitalised, no terminating period
SECTION_HEADING = re.compile(r"(?<=\n\n)[A-Z][^\n]*[^.\n]\n(?=[A-Z]|\n)")

PARENTHETICAL = re.compile(r" *\([^)]*\)")


def strip_trailing_sections(text: str) -> str:
    return TRAILING_SECTIONS.sub("", text, count=1)


def strip_section_headings(text: str) -> str:
    return SECTION_HEADING.sub("", text)


def strip_parentheticals(text: str) -> str:
    return PARENTHETICAL.sub("", text)


def normalize_article(text: str) -> str:
    """Trailing sections, then inline headings, then parenthetical asides."""
    text = strip_trailing_sections(text)
    text = strip_section_headings(text)
    return strip_parentheticals(text)
