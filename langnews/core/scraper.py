#!/usr/bin/env python3
"""
Language news scraper module.

This module contains the LanguageScraper class, which turns a language's
blog archive into Markdown article files for the static site.
"""

import os
from dataclasses import dataclass

from ..content.extractor import extract_article_content
from ..content.filter import ContentFilter
from ..content.markdown import FALLBACK_CONTENT, MAX_CONTENT_LENGTH
from ..content.parser import DEFAULT_MAX_ARTICLES, parse_archive_page
from ..exceptions import FetchError
from .article import article_path, save_article_file


@dataclass
class ScrapeSummary:
    """Counts collected during a scraper run."""
    found: int = 0
    created: int = 0
    skipped: int = 0
    failed_fetches: int = 0


class LanguageScraper:
    """
    Scraper producing article files for one language source.

    Existing article files are never overwritten unless requested, so the
    scraper can be re-run to pick up new articles only.
    """

    def __init__(self, source, output_dir, fetcher, max_articles=DEFAULT_MAX_ARTICLES,
                 max_content_length=MAX_CONTENT_LENGTH, content_filter=None,
                 overwrite=False):
        """
        Initialize the scraper.

        Args:
            source: LanguageSource to scrape
            output_dir: Directory where article files are created
            fetcher: Object with a fetch(url) method returning page HTML
            max_articles: Number of most recent articles to process
            max_content_length: Maximum article body length before truncation
            content_filter: ContentFilter applied to article bodies
            overwrite: Whether to regenerate files that already exist
        """
        self.source = source
        self.output_dir = output_dir
        self.fetcher = fetcher
        self.max_articles = max_articles
        self.max_content_length = max_content_length
        self.content_filter = content_filter or ContentFilter()
        self.overwrite = overwrite
        self.summary = ScrapeSummary()
        # Paths written during the current run
        self.written_paths = set()

    @property
    def language(self):
        return self.source.language

    def ensure_output_dir(self):
        """Create the output directory if it doesn't exist."""
        os.makedirs(self.output_dir, exist_ok=True)

    def fetch_archive(self):
        """
        Fetch the archive page and parse it into articles.

        Returns:
            list: Most recent articles, newest first

        Raises:
            FetchError: If the archive page cannot be fetched
        """
        print(f"Fetching from {self.source.archive_url}...")
        try:
            html_content = self.fetcher.fetch(self.source.archive_url)
        except FetchError as e:
            print(f"Error fetching blog archive: {e}")
            raise

        return parse_archive_page(html_content, self.source, self.max_articles)

    def fetch_article_content(self, url):
        """
        Fetch an article page and extract its body as Markdown.

        Fetch failures are reported and produce the fallback sentence rather
        than aborting the run.

        Args:
            url: Article URL

        Returns:
            str: Markdown content for the article file
        """
        try:
            html_content = self.fetcher.fetch(url)
        except FetchError as e:
            print(f"Warning: Error fetching article content from {url}: {e.reason}")
            self.summary.failed_fetches += 1
            return FALLBACK_CONTENT

        return extract_article_content(
            html_content,
            content_filter=self.content_filter,
            max_length=self.max_content_length,
        )

    def generate_article_file(self, article):
        """
        Generate the file for one article.

        Args:
            article: Article from the archive

        Returns:
            str: Path of the created file, or None if it already existed
        """
        file_path = article_path(self.output_dir, article)

        # Same-day articles share a file name; the first one in the archive wins
        if file_path in self.written_paths or (
                os.path.exists(file_path) and not self.overwrite):
            print(f"- Skipped (exists): {file_path}")
            self.summary.skipped += 1
            return None

        print(f"Fetching content for: {article.title}")
        article.content = self.fetch_article_content(article.url)

        save_article_file(self.output_dir, article)
        self.written_paths.add(file_path)
        print(f"✓ Created: {file_path}")
        self.summary.created += 1
        return file_path

    def run(self):
        """
        Scrape the archive and generate all article files.

        Returns:
            ScrapeSummary: Counts of found, created and skipped articles

        Raises:
            FetchError: If the archive page cannot be fetched
            ArticleWriteError: If an article file cannot be written
        """
        self.summary = ScrapeSummary()
        self.written_paths = set()
        self.ensure_output_dir()

        articles = self.fetch_archive()
        self.summary.found = len(articles)

        if not articles:
            print("No articles found.")
            return self.summary

        print(f"Found {len(articles)} articles")
        print("")

        for article in articles:
            self.generate_article_file(article)

        self._print_summary()
        return self.summary

    def _print_summary(self):
        """Print a summary of the scrape results."""
        print("\nScrape summary:")
        print(f"- Language: {self.language}")
        print(f"- Articles found: {self.summary.found}")
        print(f"- Files created: {self.summary.created}")
        print(f"- Files skipped: {self.summary.skipped}")
        if self.summary.failed_fetches:
            print(f"- Articles without content: {self.summary.failed_fetches}")
