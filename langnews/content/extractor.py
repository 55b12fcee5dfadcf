#!/usr/bin/env python3
"""
Article content extraction module.

This module contains functions for locating the body of an article page
and converting it to cleaned Markdown.
"""

import re

from bs4 import BeautifulSoup

from .filter import ContentFilter
from .markdown import (MAX_CONTENT_LENGTH, clean_markdown, element_to_markdown,
                       html_fragment_to_markdown)

_CONTENT_CLASS_RE = re.compile(r"content")


def find_article_root(soup):
    """
    Find the element holding the article body.

    Args:
        soup: BeautifulSoup object of the page

    Returns:
        Tag: The first <article> element, or None
    """
    return soup.find("article")


def find_content_div(soup):
    """
    Find a fallback content container for pages without an <article>.

    Args:
        soup: BeautifulSoup object of the page

    Returns:
        Tag: The first <div> whose class contains "content", or None
    """
    return soup.find("div", class_=_CONTENT_CLASS_RE)


def extract_article_content(html_content, content_filter=None,
                            max_length=MAX_CONTENT_LENGTH):
    """
    Extract the article body of a page as Markdown.

    The first <article> element is filtered (title heading, metadata marker
    and custom selectors removed) and converted with element_to_markdown.
    Pages without an article element fall back to a content <div>
    converted with html2text.

    Args:
        html_content: Raw HTML of the article page
        content_filter: ContentFilter instance (default filter if None)
        max_length: Maximum length of the returned content

    Returns:
        str: Cleaned Markdown, or the fallback sentence if nothing was found
    """
    content_filter = content_filter or ContentFilter()
    soup = BeautifulSoup(html_content or "", "html.parser")

    for element in soup.find_all(["script", "style"]):
        element.decompose()

    article = find_article_root(soup)
    if article is not None:
        content_filter.apply_to_element(article)
        return clean_markdown(element_to_markdown(article), max_length)

    content_div = find_content_div(soup)
    if content_div is not None:
        return clean_markdown(html_fragment_to_markdown(str(content_div)), max_length)

    return clean_markdown("", max_length)
