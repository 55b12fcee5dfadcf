#!/usr/bin/env python3
"""
Command-line argument parsing module.

This module provides functions for setting up and parsing command-line
arguments for the lang-news scrapers.
"""

import argparse

from ..content.markdown import MAX_CONTENT_LENGTH
from ..content.parser import DEFAULT_MAX_ARTICLES
from ..core.sources import SOURCES


def create_parser():
    """
    Create the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='langnews',
        description='Fetch recent news for a programming language and write article files for the lang-news site'
    )

    parser.add_argument('output_dir', nargs='?', default='src/articles',
                        help='Directory where article files will be created (default: src/articles)')

    # Source options
    parser.add_argument('--language', type=str.lower, default='haskell',
                        choices=sorted(SOURCES),
                        help='Language whose news to scrape (default: haskell)')
    parser.add_argument('--max-articles', type=int, default=DEFAULT_MAX_ARTICLES,
                        help=f'Number of most recent articles to process (default: {DEFAULT_MAX_ARTICLES})')
    parser.add_argument('--max-content-length', type=int, default=MAX_CONTENT_LENGTH,
                        help=f'Truncate article bodies longer than this many characters (default: {MAX_CONTENT_LENGTH})')
    parser.add_argument('--overwrite', action='store_true',
                        help='Regenerate article files that already exist (default: skip them)')

    # Browser options
    browser_group = parser.add_argument_group('Browser Options')
    browser_group.add_argument('--visible', action='store_true',
                        help='Run in visible browser mode instead of headless (default: headless)')
    browser_group.add_argument('--webdriver-path', type=str, default=None,
                        help='Path to the webdriver executable (optional)')
    browser_group.add_argument('--page-load-timeout', type=int, default=30,
                        help='Page load timeout in seconds (default: 30)')
    browser_group.add_argument('--max-retries', type=int, default=3,
                        help='Maximum retries per page for transient failures (default: 3)')

    # Content filtering options
    content_group = parser.add_argument_group('Content Filtering Options')
    content_group.add_argument('--exclude-selectors', type=str, default="",
                        help='Comma-separated CSS selectors to remove from articles (e.g., ".toc,.comments")')

    # Configuration file options
    config_group = parser.add_argument_group('Configuration Options')
    config_group.add_argument('--config', type=str, default=None,
                        help='Path to configuration file (JSON)')
    config_group.add_argument('--save-config', type=str, default=None,
                        help='Save current settings to configuration file')

    return parser


def parse_args(args=None):
    """
    Parse command-line arguments.

    Args:
        args: Command-line arguments to parse (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments

    Raises:
        SystemExit: If arguments are invalid
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.max_articles < 1:
        parser.error("--max-articles must be at least 1")

    if parsed_args.max_content_length < 1:
        parser.error("--max-content-length must be at least 1")

    # Process content filter exclude selectors
    if parsed_args.exclude_selectors:
        parsed_args.exclude_selectors = [s.strip() for s in parsed_args.exclude_selectors.split(',') if s.strip()]
    else:
        parsed_args.exclude_selectors = []

    return parsed_args
