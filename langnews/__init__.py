"""
lang-news scraper package.

This package fetches recent news for programming languages and writes
Markdown articles with YAML front matter for the lang-news static site.
"""

__version__ = "0.1.0"

from .content.filter import ContentFilter
from .content.markdown import clean_markdown, element_to_markdown
from .core.article import Article
from .core.scraper import LanguageScraper
from .core.sources import get_source

__all__ = [
    "Article",
    "ContentFilter",
    "LanguageScraper",
    "clean_markdown",
    "element_to_markdown",
    "get_source",
]
