#!/usr/bin/env python3
"""
URL handling and normalization module.

This module contains functions for resolving and normalizing article URLs
found on archive pages.
"""

import datetime
import re
import urllib.parse
from urllib.parse import urljoin

DATE_IN_URL_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")

# Substrings marking archive navigation rather than articles
NON_ARTICLE_MARKERS = ("archive", "feed")


def normalize_url(url):
    """
    Normalize a URL to avoid duplicates.

    Query parameters are kept, fragments and trailing slashes are dropped.

    Args:
        url: The URL to normalize

    Returns:
        str: Normalized URL
    """
    parsed = urllib.parse.urlparse(url)

    # Handle scheme and netloc (domain)
    normalized = f"{parsed.scheme}://{parsed.netloc}"

    # Handle path
    if parsed.path:
        # Ensure path starts with / and remove trailing /
        path = parsed.path if parsed.path.startswith("/") else "/" + parsed.path
        path = path[:-1] if path.endswith("/") and len(path) > 1 else path
        normalized += path
    else:
        normalized += "/"

    if parsed.query:
        normalized += f"?{parsed.query}"

    return normalized


def resolve_url(href, base_url):
    """
    Make an archive link absolute.

    Args:
        href: Link target as written in the page
        base_url: Site root the archive belongs to

    Returns:
        str: Absolute URL
    """
    if href.startswith("http"):
        return href
    return urljoin(base_url.rstrip("/") + "/", href.lstrip("/"))


def is_article_link(href):
    """
    Check whether an archive link points to a dated article.

    Args:
        href: Link target as written in the page

    Returns:
        bool: True for site-relative or absolute links that are not
        archive/feed navigation and contain a valid YYYY-MM-DD date
    """
    if not href or not (href.startswith("/") or href.startswith("http")):
        return False
    if any(marker in href for marker in NON_ARTICLE_MARKERS):
        return False
    return extract_date(href) is not None


def extract_date(href):
    """
    Extract the ISO date embedded in a link.

    Args:
        href: Link target

    Returns:
        str: Date as YYYY-MM-DD, or None if the link carries no date or the
        date does not exist in the calendar (e.g. 2026-02-30)
    """
    match = DATE_IN_URL_RE.search(href or "")
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day).isoformat()
    except ValueError:
        return None
