import pytest
from bs4 import BeautifulSoup

from langnews.core.sources import HASKELL
from langnews.exceptions import FetchError

ARCHIVE_HTML = """
<html><body>
<nav><a href="/archive/">Archive</a> <a href="/feed.xml">Feed</a></nav>
<ul>
  <li><a href="/2026-01-10-cabal-3-12/">Cabal 3.12 released</a></li>
  <li><a href="/2026-02-01-ghc-9-6-4/">GHC 9.6.4 Released</a></li>
  <li><a href="https://blog.haskell.org/2025-12-24-community-survey/">Community survey results</a></li>
  <li><a href="/about/">About this blog</a></li>
  <li><a href="mailto:blog@haskell.org">Contact 2026-01-01</a></li>
  <li><a href="/2026-02-01-ghc-9-6-4/">GHC 9.6.4 Released</a></li>
</ul>
</body></html>
"""

ARTICLE_HTML = """
<html><head><style>p { color: red; }</style></head><body>
<article>
  <h1>GHC 9.6.4 Released</h1>
  <span class="s95">Posted by the GHC team on 2026-02-01</span>
  <p>The GHC team is pleased to announce <strong>GHC 9.6.4</strong>.</p>
  <h2>Highlights</h2>
  <ul>
    <li>Faster <code>ghc --make</code></li>
    <li>See the <a href="https://www.haskell.org/ghc/">release notes</a></li>
  </ul>
  <script>track();</script>
</article>
</body></html>
"""


class FakeFetcher:
    """Serves canned pages; unknown URLs fail like a 404."""

    def __init__(self, pages):
        self.pages = dict(pages)
        self.requested = []

    def fetch(self, url):
        self.requested.append(url)
        if url not in self.pages:
            raise FetchError(url, "Page not found (404)", 404)
        return self.pages[url]


@pytest.fixture
def parse():
    """Parse an HTML snippet and return its first element."""
    def _parse(html):
        soup = BeautifulSoup(html, "html.parser")
        return soup.find(True)
    return _parse


@pytest.fixture
def archive_html():
    return ARCHIVE_HTML


@pytest.fixture
def article_html():
    return ARTICLE_HTML


@pytest.fixture
def fake_fetcher():
    return FakeFetcher({
        HASKELL.archive_url: ARCHIVE_HTML,
        "https://blog.haskell.org/2026-02-01-ghc-9-6-4/": ARTICLE_HTML,
        "https://blog.haskell.org/2026-01-10-cabal-3-12/": "<article><p>Cabal news</p></article>",
    })
