#!/usr/bin/env python3
"""
Exception classes for the lang-news scrapers.
"""


class ScraperError(Exception):
    """Base exception for all scraper errors."""
    pass


class ConfigurationError(ScraperError):
    """Raised when configuration values or files are invalid."""
    pass


class FetchError(ScraperError):
    """
    Raised when a page could not be fetched.

    Attributes:
        url: The URL that failed
        status: HTTP status code if one was observed, otherwise None
    """

    def __init__(self, url, reason, status=None):
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"Failed to fetch {url}: {reason}")


class ArticleWriteError(ScraperError):
    """Raised when an article file cannot be written."""
    pass
