#!/usr/bin/env python3
"""
WebDriver setup and page fetching module.

This module contains functions for creating and configuring WebDriver
instances and the PageFetcher used by the scrapers to download pages.
"""

import time

from selenium import webdriver
from selenium.common.exceptions import (SessionNotCreatedException,
                                        TimeoutException, WebDriverException)
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

from ..exceptions import FetchError
from ..utils.http import handle_response_code, should_retry

# Reads the HTTP status of the main document from the Navigation Timing API
NAVIGATION_STATUS_SCRIPT = """
const entries = performance.getEntriesByType('navigation');
if (entries.length && entries[0].responseStatus) {
    return entries[0].responseStatus;
}
return null;
"""


def build_chrome_options(headless=True):
    """
    Build Chrome options for loading article pages.

    Chrome keeps its own user agent.

    Args:
        headless: Whether to run in headless mode

    Returns:
        Options: Configured Chrome options
    """
    chrome_options = Options()
    if headless:
        chrome_options.add_argument('--headless=new')

    # Article pages are static, no need to wait for late subresources
    chrome_options.page_load_strategy = 'eager'

    chrome_options.add_argument('--no-sandbox')
    chrome_options.add_argument('--disable-dev-shm-usage')
    chrome_options.add_argument('--disable-gpu')
    chrome_options.add_argument('--disable-extensions')
    chrome_options.add_argument('--disable-notifications')
    chrome_options.add_argument('--blink-settings=imagesEnabled=false')

    return chrome_options


def setup_webdriver(headless=True, webdriver_path=None, retry_count=3, page_load_timeout=30):
    """
    Set up and configure a Chrome WebDriver instance.

    Args:
        headless: Whether to run in headless mode
        webdriver_path: Path to chromedriver, downloaded when not given
        retry_count: Number of creation attempts
        page_load_timeout: Seconds before a page load times out

    Returns:
        WebDriver: Configured WebDriver instance

    Raises:
        WebDriverException: If the browser cannot be started
    """
    chrome_options = build_chrome_options(headless)

    for attempt in range(retry_count):
        try:
            if not webdriver_path:
                service = Service(ChromeDriverManager().install())
            else:
                service = Service(webdriver_path)

            driver = webdriver.Chrome(service=service, options=chrome_options)

            driver.set_page_load_timeout(page_load_timeout)
            driver.set_script_timeout(page_load_timeout)

            return driver

        except (WebDriverException, SessionNotCreatedException) as e:
            print(f"WebDriver creation failed (attempt {attempt+1}/{retry_count}): {e}")

            if attempt == retry_count - 1:
                raise
            time.sleep(2)


def get_navigation_status(driver):
    """
    Return the HTTP status of the page currently loaded in the driver.

    Args:
        driver: Selenium WebDriver instance

    Returns:
        int: Status code, or None if the browser does not report it
    """
    try:
        status = driver.execute_script(NAVIGATION_STATUS_SCRIPT)
    except WebDriverException:
        return None
    return status if isinstance(status, int) else None


class PageFetcher:
    """
    Fetches rendered page sources through a lazily created browser.

    The browser is started on the first fetch and reused until close() is
    called. A PageFetcher can be used as a context manager.
    """

    def __init__(self, headless=True, webdriver_path=None, page_load_timeout=30,
                 max_retries=3, retry_delay=2.0, max_retry_delay=30.0,
                 driver_factory=None):
        """
        Initialize the fetcher.

        Args:
            headless: Whether to run the browser headless
            webdriver_path: Path to the WebDriver executable (downloaded if None)
            page_load_timeout: Timeout for page loads in seconds
            max_retries: Maximum retries per URL for transient failures
            retry_delay: Delay before retrying after a browser error, in seconds
            max_retry_delay: Upper bound for server-suggested retry delays
            driver_factory: Callable returning a WebDriver (defaults to setup_webdriver)
        """
        self.headless = headless
        self.webdriver_path = webdriver_path
        self.page_load_timeout = page_load_timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.max_retry_delay = max_retry_delay
        self.driver_factory = driver_factory or self._default_driver_factory
        self.driver = None

    def _default_driver_factory(self):
        return setup_webdriver(
            headless=self.headless,
            webdriver_path=self.webdriver_path,
            page_load_timeout=self.page_load_timeout,
        )

    def _get_driver(self):
        if self.driver is None:
            try:
                self.driver = self.driver_factory()
            except WebDriverException as e:
                raise FetchError("<browser>", f"could not start browser: {e}") from e
        return self.driver

    def fetch(self, url):
        """
        Load a URL and return the page source.

        Args:
            url: URL to load

        Returns:
            str: HTML source of the loaded page

        Raises:
            FetchError: If the page could not be loaded or returned an error status
        """
        retry_count = 0

        while True:
            driver = self._get_driver()

            try:
                driver.get(url)
            except (TimeoutException, WebDriverException) as e:
                if retry_count >= self.max_retries:
                    raise FetchError(url, f"browser error: {e}") from e
                retry_count += 1
                print(f"Warning: browser error for {url} (retry {retry_count}/{self.max_retries}): {e}")
                time.sleep(self.retry_delay)
                continue

            status = get_navigation_status(driver)
            handling = handle_response_code(url, status)

            if handling['success']:
                return driver.page_source

            if handling['action'] == 'retry' and should_retry(status, retry_count, self.max_retries):
                retry_count += 1
                delay = min(handling['retry_after'] or self.retry_delay, self.max_retry_delay)
                print(f"Warning: {handling['reason']} for {url}, retrying in {delay}s "
                      f"(retry {retry_count}/{self.max_retries})")
                time.sleep(delay)
                continue

            raise FetchError(url, handling['reason'], status)

    def close(self):
        """Quit the browser if one was started."""
        if self.driver is not None:
            try:
                self.driver.quit()
            except WebDriverException as e:
                print(f"Warning: error closing browser: {e}")
            finally:
                self.driver = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
