"""
Core scraper components.

The scraper itself lives in langnews.core.scraper; it is not imported here
because the content package depends on the article model below.
"""

from .article import Article, render_article, save_article_file
from .sources import SOURCES, LanguageSource, get_source

__all__ = [
    "Article",
    "LanguageSource",
    "SOURCES",
    "get_source",
    "render_article",
    "save_article_file",
]
