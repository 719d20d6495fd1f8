"""
External sources - everything that talks to Wikipedia.
"""

from .wikipedia import WikipediaClient, SourceError
from .vital_articles import crawl_vital_articles, crawl_level

__all__ = [
    "WikipediaClient",
    "SourceError",
    "crawl_vital_articles",
    "crawl_level",
]
