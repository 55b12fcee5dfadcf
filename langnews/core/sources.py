#!/usr/bin/env python3
"""
Language source registry.

Each supported language has a LanguageSource describing where its news
archive lives and how tags are inferred for its articles.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class LanguageSource:
    """Archive location and tagging rules for one language."""
    language: str
    archive_url: str
    base_url: str
    # Ordered (tag, keywords) pairs; a tag applies if any keyword matches
    tag_rules: List[Tuple[str, Tuple[str, ...]]] = field(default_factory=list)
    default_tag: str = "news"


HASKELL = LanguageSource(
    language="haskell",
    archive_url="https://blog.haskell.org/archive/",
    base_url="https://blog.haskell.org",
    tag_rules=[
        ("ghc", ("ghc", "compiler")),
        ("release", ("release", "announce")),
        ("stack", ("stack",)),
        ("cabal", ("cabal",)),
        ("foundation", ("foundation",)),
        ("community", ("community",)),
        ("library", ("library", "package")),
        ("tutorial", ("tutorial", "guide")),
        ("performance", ("performance",)),
        ("security", ("security",)),
    ],
)

SOURCES = {source.language: source for source in [HASKELL]}


def get_source(language):
    """
    Look up the source for a language.

    Args:
        language: Language name (case-insensitive)

    Returns:
        LanguageSource: The registered source

    Raises:
        ConfigurationError: If no source is registered for the language
    """
    source = SOURCES.get((language or "").lower())
    if source is None:
        available = ", ".join(sorted(SOURCES))
        raise ConfigurationError(
            f"Unknown language: {language!r} (available: {available})"
        )
    return source
