#!/usr/bin/env python3
"""
Content filtering module.

This module contains the ContentFilter class that removes noise elements
(title heading, metadata markers, custom selectors) from an article before
it is converted to Markdown.
"""

# Selectors removed from every article root by default
DEFAULT_NOISE_SELECTORS = ["span.s95"]


class ContentFilter:
    """
    Filter controlling which parts of an article root are converted.

    The article title is already part of the front matter, so the first
    heading of the article is removed unless include_title is set. Metadata
    markers (author/date lines) and any custom selectors are always removed.
    """

    def __init__(self, include_title=False, include_metadata=False,
                 custom_exclude_selectors=None):
        """
        Initialize a ContentFilter instance.

        Args:
            include_title: Whether to keep the article's leading h1
            include_metadata: Whether to keep metadata marker elements
            custom_exclude_selectors: List of additional CSS selectors to exclude
        """
        self.include_title = include_title
        self.include_metadata = include_metadata
        self.custom_exclude_selectors = custom_exclude_selectors or []

    def get_excluded_selectors(self):
        """
        Return CSS selectors for elements that should be excluded.

        The title heading is not part of this list; it is handled separately
        because only the first h1 is removed.

        Returns:
            list: List of CSS selectors to exclude
        """
        excluded = []

        if not self.include_metadata:
            excluded.extend(DEFAULT_NOISE_SELECTORS)

        excluded.extend(self.custom_exclude_selectors)

        return excluded

    def apply_to_element(self, element):
        """
        Remove excluded elements from an article element in place.

        Args:
            element: BeautifulSoup Tag for the article root

        Returns:
            Tag: The same element, filtered
        """
        if not self.include_title:
            title = element.find("h1")
            if title is not None:
                title.decompose()

        for selector in self.get_excluded_selectors():
            for match in element.select(selector):
                # Nested matches are gone once their ancestor is removed
                if not match.decomposed:
                    match.decompose()

        return element

    def __str__(self):
        """String representation of the content filter settings."""
        included = []

        if self.include_title:
            included.append("title")
        if self.include_metadata:
            included.append("metadata")

        if included:
            return f"ContentFilter(Includes: {', '.join(included)})"
        return "ContentFilter(Excludes: title, metadata)"
