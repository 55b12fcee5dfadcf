#!/usr/bin/env python3
"""
Configuration management module.

This module provides functionality for loading and saving configuration
files, and for managing scraper configuration.
"""

import json
import os
from dataclasses import asdict, dataclass, field, fields
from typing import List, Optional

from ..content.markdown import MAX_CONTENT_LENGTH
from ..content.parser import DEFAULT_MAX_ARTICLES
from ..core.sources import get_source
from ..exceptions import ConfigurationError
from .argument_parser import parse_args

DEFAULT_OUTPUT_DIR = "src/articles"


@dataclass
class Configuration:
    """
    Configuration class for the lang-news scrapers.

    This dataclass holds all configuration parameters for a scraper run,
    allowing for easy serialization and deserialization.
    """
    # Source and output
    language: str = "haskell"
    output_dir: str = DEFAULT_OUTPUT_DIR
    max_articles: int = DEFAULT_MAX_ARTICLES
    max_content_length: int = MAX_CONTENT_LENGTH
    overwrite: bool = False

    # Browser configuration
    headless: bool = True
    webdriver_path: Optional[str] = None
    page_load_timeout: int = 30
    max_retries: int = 3

    # Content filtering
    exclude_selectors: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate configuration after initialization."""
        # Raises ConfigurationError for unknown languages
        self.language = get_source(self.language).language

        if not self.output_dir:
            raise ConfigurationError("Output directory must not be empty")

        if self.max_articles < 1:
            raise ConfigurationError(f"max_articles must be positive, got {self.max_articles}")

        if self.max_content_length < 1:
            raise ConfigurationError(
                f"max_content_length must be positive, got {self.max_content_length}"
            )

        if self.page_load_timeout < 1:
            raise ConfigurationError(
                f"page_load_timeout must be positive, got {self.page_load_timeout}"
            )

        if self.max_retries < 0:
            print(f"Warning: max_retries ({self.max_retries}) is negative. Setting max_retries to 0.")
            self.max_retries = 0

    @property
    def source(self):
        """LanguageSource for the configured language."""
        return get_source(self.language)

    @classmethod
    def from_args(cls, args):
        """
        Create a Configuration instance from parsed command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            Configuration: Configuration instance
        """
        return cls(
            language=args.language,
            output_dir=args.output_dir,
            max_articles=args.max_articles,
            max_content_length=args.max_content_length,
            overwrite=args.overwrite,
            headless=not args.visible,
            webdriver_path=args.webdriver_path,
            page_load_timeout=args.page_load_timeout,
            max_retries=args.max_retries,
            exclude_selectors=args.exclude_selectors,
        )

    def to_dict(self):
        """
        Convert configuration to a dictionary.

        Returns:
            dict: Dictionary representation of the configuration
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict):
        """
        Create a Configuration instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration parameters

        Returns:
            Configuration: Configuration instance

        Raises:
            ConfigurationError: If the dictionary contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**config_dict)

    def print_summary(self):
        """Print a summary of the configuration."""
        print("\nScraper configuration:")
        print(f"- Language: {self.language}")
        print(f"- Archive: {self.source.archive_url}")
        print(f"- Output directory: {self.output_dir}")
        print(f"- Max articles: {self.max_articles}")
        print(f"- Max content length: {self.max_content_length} characters")
        print(f"- Existing files: {'Overwritten' if self.overwrite else 'Skipped'}")
        print(f"- Browser mode: {'Headless' if self.headless else 'Visible'}")
        print(f"- Page load timeout: {self.page_load_timeout}s (max retries: {self.max_retries})")
        if self.exclude_selectors:
            print(f"- Custom exclude selectors: {', '.join(self.exclude_selectors)}")
        print()


def load_config(config_file: str) -> Configuration:
    """
    Load configuration from a JSON file.

    Args:
        config_file: Path to the configuration file

    Returns:
        Configuration: Configuration instance

    Raises:
        ConfigurationError: If the file is missing, not valid JSON or invalid
    """
    if not os.path.exists(config_file):
        raise ConfigurationError(f"Configuration file not found: {config_file}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config_dict = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration file: {e.msg}") from e

    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Configuration file must contain a JSON object: {config_file}")

    return Configuration.from_dict(config_dict)


def save_config(config: Configuration, config_file: str) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration instance
        config_file: Path to the configuration file

    Raises:
        ConfigurationError: If the configuration file cannot be written
    """
    try:
        directory = os.path.dirname(os.path.abspath(config_file))
        os.makedirs(directory, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)

    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}") from e


def load_config_from_args(args):
    """
    Load configuration from command-line arguments or a config file.

    Values given explicitly on the command line take precedence over the
    configuration file.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration: Configuration instance

    Raises:
        ConfigurationError: If the configuration file or values are invalid
    """
    if args.config:
        config = load_config(args.config)
        print(f"Loaded configuration from {args.config}")
        return _override_config_from_args(config, args)

    return Configuration.from_args(args)


def _override_config_from_args(config, args):
    """
    Override configuration with explicitly specified command-line arguments.

    Args:
        config: Existing configuration
        args: Parsed command-line arguments

    Returns:
        Configuration: Updated and re-validated configuration
    """
    # Get default argument values
    defaults = vars(parse_args([]))

    overrides = {}
    for key, value in vars(args).items():
        # Skip if the value is the same as the default
        if value == defaults.get(key):
            continue
        if key == 'visible':
            overrides['headless'] = not value
        elif key in config.to_dict():
            overrides[key] = value

    merged = config.to_dict()
    merged.update(overrides)
    return Configuration.from_dict(merged)
