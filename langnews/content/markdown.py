#!/usr/bin/env python3
"""
HTML to Markdown conversion module.

This module contains the recursive element-to-Markdown converter used for
article bodies, the post-processing applied to its output, and an html2text
based converter for pages that have no article element.
"""

import re

import html2text
from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

# Default maximum length of an article body before truncation
MAX_CONTENT_LENGTH = 3000

TRUNCATION_NOTICE = (
    "\n\n*[Content truncated. Please visit the original article to read more.]*"
)

FALLBACK_CONTENT = (
    "Content not available. Please visit the original article for full details."
)

HEADING_LEVELS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4}

# Elements whose whole subtree is dropped
SKIPPED_TAGS = frozenset(["img", "video", "script", "style"])

_WHITESPACE_RE = re.compile(r"\s+")
_BLANK_LINE_RE = re.compile(r"\n[ \t]+\n")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def collapse_whitespace(text):
    """Collapse every run of whitespace in text to a single space."""
    return _WHITESPACE_RE.sub(" ", text or "")


def flatten_text(element):
    """
    Return the text of all descendant text nodes of an element.

    Args:
        element: BeautifulSoup Tag

    Returns:
        str: Whitespace-collapsed, trimmed text (empty string if none)
    """
    return collapse_whitespace(element.get_text()).strip()


def _heading(element):
    level = HEADING_LEVELS[element.name.lower()]
    return f"{'#' * level} {flatten_text(element)}\n\n"


def _paragraph(element):
    content = element_to_markdown(element).strip()
    if content:
        return f"{content}\n\n"
    return ""


def _link(element):
    href = element.get("href") or ""
    return f"[{flatten_text(element)}]({href})"


def _bold(element):
    return f"**{flatten_text(element)}**"


def _italic(element):
    return f"*{flatten_text(element)}*"


def _inline_code(element):
    return f"`{flatten_text(element)}`"


def _preformatted(element):
    # Keep the original line structure of code blocks
    text = element.get_text().strip("\n")
    return f"```\n{text}\n```\n"


def _list(element):
    return "\n" + element_to_markdown(element)


def _list_item(element):
    return f"- {element_to_markdown(element).strip()}\n"


def _line_break(element):
    return "\n"


def _skip(element):
    return ""


TAG_HANDLERS = {
    "h1": _heading,
    "h2": _heading,
    "h3": _heading,
    "h4": _heading,
    "p": _paragraph,
    "a": _link,
    "strong": _bold,
    "b": _bold,
    "em": _italic,
    "i": _italic,
    "code": _inline_code,
    "pre": _preformatted,
    "ul": _list,
    "ol": _list,
    "li": _list_item,
    "br": _line_break,
}
TAG_HANDLERS.update({tag: _skip for tag in SKIPPED_TAGS})


def element_to_markdown(element):
    """
    Convert the children of an HTML element to Markdown.

    Children are processed in document order. Text nodes contribute their
    whitespace-collapsed text, elements are converted according to
    TAG_HANDLERS and any tag without a handler (span, div, section, ...) is
    transparent: its children are converted with no markup added.

    Args:
        element: BeautifulSoup Tag (typically an <article> element)

    Returns:
        str: Markdown representation of the element's content
    """
    parts = []

    for node in element.children:
        if isinstance(node, NavigableString):
            # Comments, doctypes and CDATA are not content
            if isinstance(node, PreformattedString):
                continue
            if node.strip():
                parts.append(collapse_whitespace(node))
        elif isinstance(node, Tag):
            handler = TAG_HANDLERS.get(node.name.lower())
            if handler is None:
                parts.append(element_to_markdown(node))
            else:
                parts.append(handler(node))

    return "".join(parts)


def clean_markdown(markdown, max_length=MAX_CONTENT_LENGTH):
    """
    Tidy extracted Markdown for writing to an article file.

    Whitespace-only lines are folded into the surrounding blank lines, runs of
    three or more newlines become a single blank line and the result is
    trimmed. Content longer than max_length is cut and followed by
    TRUNCATION_NOTICE; empty content is replaced by FALLBACK_CONTENT.

    Args:
        markdown: Raw Markdown produced by element_to_markdown
        max_length: Maximum number of content characters to keep

    Returns:
        str: Cleaned Markdown
    """
    content = markdown or ""
    # Repeat until stable so consecutive whitespace-only lines all fold
    previous = None
    while previous != content:
        previous = content
        content = _BLANK_LINE_RE.sub("\n\n", content)
    content = _EXCESS_NEWLINES_RE.sub("\n\n", content)
    content = content.strip()

    if not content:
        return FALLBACK_CONTENT

    if max_length is not None and len(content) > max_length:
        content = content[:max_length] + TRUNCATION_NOTICE

    return content


def html_fragment_to_markdown(html_content):
    """
    Convert a raw HTML fragment to Markdown with html2text.

    Used for pages that carry their text in a content <div> instead of an
    <article> element.

    Args:
        html_content: HTML content to convert

    Returns:
        str: Markdown formatted content
    """
    # Configure html2text
    h = html2text.HTML2Text()
    h.ignore_links = False
    h.ignore_images = True
    h.ignore_tables = False
    h.ignore_emphasis = False
    h.body_width = 0  # Don't wrap lines

    return h.handle(html_content)
