"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, no I/O, collaborators faked
- integration/ Component boundaries, real I/O to temp locations

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")


# Plain-text extracts shaped like the MediaWiki API returns them:
# headings are bare lines between blank lines, boilerplate sections last.

PARIS_ARTICLE = (
    "Paris (French pronunciation: [paʁi]) is the capital and largest city of France. "
    "Paris is located on the river Seine in the north of the country.\n\n"
    "History\n\n"
    "However, Paris suffered greatly during the siege of 1870. "
    "Paris hosts the Louvre, which is the most visited art museum in the world. "
    "Tourists often visit Paris in the spring to see the gardens along the river banks.\n\n"
    "Economy\n\n"
    "Several major international organizations keep their headquarters in Paris today. "
    "Paris is big.\n\n"
    "See also\n\n"
    "Paris is mentioned again here in a sentence that would otherwise qualify as a hint."
)

LOVELACE_ARTICLE = (
    "Ada Lovelace was an English mathematician and writer. "
    "Lovelace is chiefly known for her work on the Analytical Engine of Charles Babbage.\n\n"
    "Early life\n\n"
    "Lovelace was the only legitimate child of the poet Lord Byron and his wife. "
    "Her mother promoted her interest in mathematics and logic from an early age. "
    "In 1843 Lovelace published the first algorithm intended for a computing machine. "
    "Historians regard Lovelace as one of the first computer programmers in history. "
    "A programming language named after Lovelace was developed for the United States Department of Defense. "
    "Her legacy endures.\n\n"
    "References\n\n"
    "Lovelace, Ada. Notes. 1843."
)


@pytest.fixture
def paris_article():
    return PARIS_ARTICLE


@pytest.fixture
def lovelace_article():
    return LOVELACE_ARTICLE


@pytest.fixture
def articles():
    """Title -> extract, for fake fetchers."""
    return {
        "Paris": PARIS_ARTICLE,
        "Ada Lovelace": LOVELACE_ARTICLE,
        "Mercury": "Mercury may refer to:\n\nMercury (planet)\nMercury (element)",
    }


@pytest.fixture
def fake_fetch(articles):
    """fetch_text stand-in: known titles only, None otherwise."""
    return articles.get
