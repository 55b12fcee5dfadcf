"""
Browser module for fetching pages through Selenium.
"""

from .driver import PageFetcher, setup_webdriver

__all__ = ["PageFetcher", "setup_webdriver"]
