"""
Utility functions for URL and HTTP response handling.
"""

from .http import handle_response_code, should_retry
from .url import extract_date, is_article_link, normalize_url, resolve_url

__all__ = [
    "handle_response_code",
    "should_retry",
    "normalize_url",
    "resolve_url",
    "is_article_link",
    "extract_date",
]
