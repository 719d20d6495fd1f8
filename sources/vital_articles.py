"""
Vital articles crawler - builds the answer corpus.

One pass over Wikipedia's "vital articles by topic" categories per level.
Difficulty follows the level: level 1 articles are the best known.
"""

import logging
import re

from models import VitalArticles

from .wikipedia import WikipediaClient

logger = logging.getLogger(__name__)

LEVELS = 5
CATEGORY_NAMESPACE = 14
LEVEL_CATEGORY = "Category:Wikipedia_level-{level}_vital_articles_by_topic"
TOPIC_SEPARATOR = " vital articles in "


def crawl_level(client: WikipediaClient, level: int) -> dict[str, list[str]]:
    """Topic label -> sorted article titles for one level."""
    topics = {}
    for member in client.list_category_members(LEVEL_CATEGORY.format(level=level)):
        if member.get("ns") != CATEGORY_NAMESPACE:
            continue
        title = member["title"]
        if TOPIC_SEPARATOR not in title:
            logger.debug("[CRAWL] Skipping %s", title)
            continue
        topic = title.split(TOPIC_SEPARATOR)[1]
        # Vital article categories hold talk pages
        topics[topic] = sorted(
            re.sub(r"^Talk:", "", m["title"]) for m in client.list_category_members(title)
        )
        logger.info("[CRAWL] Level %d %s: %d articles", level, topic, len(topics[topic]))
    return topics


def crawl_vital_articles(client: WikipediaClient, levels: int = LEVELS) -> VitalArticles:
    """Crawl every level into a corpus."""
    return VitalArticles([crawl_level(client, level) for level in range(1, levels + 1)])
