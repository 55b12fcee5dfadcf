"""
Content processing module for converting article HTML to Markdown.

This package contains components for filtering article pages, parsing
archive pages and transforming article bodies to Markdown.
"""

from .extractor import extract_article_content
from .filter import ContentFilter
from .markdown import (FALLBACK_CONTENT, TRUNCATION_NOTICE, clean_markdown,
                       element_to_markdown, html_fragment_to_markdown)
from .parser import infer_tags, parse_archive_page

__all__ = [
    "ContentFilter",
    "extract_article_content",
    "element_to_markdown",
    "clean_markdown",
    "html_fragment_to_markdown",
    "parse_archive_page",
    "infer_tags",
    "FALLBACK_CONTENT",
    "TRUNCATION_NOTICE",
]
