#!/usr/bin/env python3
"""
Main entry point for the lang-news scrapers.

This module provides the main entry point for running a scraper
from the command line.
"""

import sys
import traceback

from .browser.driver import PageFetcher
from .cli.argument_parser import parse_args
from .cli.config import load_config_from_args, save_config
from .content.filter import ContentFilter
from .core.scraper import LanguageScraper
from .exceptions import ScraperError


def main(argv=None, fetcher=None):
    """
    Main entry point for the scrapers.

    Args:
        argv: Command-line arguments (uses sys.argv if None)
        fetcher: Page fetcher to use instead of a browser-backed PageFetcher

    Returns:
        int: Process exit code
    """
    try:
        args = parse_args(argv)
        config = load_config_from_args(args)

        if args.save_config:
            save_config(config, args.save_config)
            print(f"Configuration saved to {args.save_config}")

        title = f"{config.language.capitalize()} News Scraper"
        print(title)
        print("=" * len(title))
        config.print_summary()

        content_filter = ContentFilter(custom_exclude_selectors=config.exclude_selectors)

        owns_fetcher = fetcher is None
        if owns_fetcher:
            fetcher = PageFetcher(
                headless=config.headless,
                webdriver_path=config.webdriver_path,
                page_load_timeout=config.page_load_timeout,
                max_retries=config.max_retries,
            )

        try:
            scraper = LanguageScraper(
                source=config.source,
                output_dir=config.output_dir,
                fetcher=fetcher,
                max_articles=config.max_articles,
                max_content_length=config.max_content_length,
                content_filter=content_filter,
                overwrite=config.overwrite,
            )
            scraper.run()
        finally:
            if owns_fetcher:
                fetcher.close()

        print("")
        print(f"Done! Generated articles in {config.output_dir}")
        return 0

    except KeyboardInterrupt:
        print("\nScraping interrupted by user.")
        return 130  # Standard exit code for SIGINT

    except ScraperError as e:
        print(f"\nError: {e}")
        return 1

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
