from bs4 import BeautifulSoup

from langnews.content.extractor import extract_article_content
from langnews.content.filter import ContentFilter
from langnews.content.markdown import FALLBACK_CONTENT, TRUNCATION_NOTICE


def test_extracts_article_without_noise(article_html):
    content = extract_article_content(article_html)

    assert content == (
        "The GHC team is pleased to announce **GHC 9.6.4**.\n\n"
        "## Highlights\n\n"
        "- Faster `ghc --make`\n"
        "- See the [release notes](https://www.haskell.org/ghc/)"
    )


def test_title_and_metadata_removed(article_html):
    content = extract_article_content(article_html)

    assert "# GHC 9.6.4 Released" not in content
    assert "Posted by" not in content


def test_scripts_and_styles_removed(article_html):
    content = extract_article_content(article_html)

    assert "track()" not in content
    assert "color" not in content


def test_custom_exclude_selectors():
    html = '<article><p>Keep</p><div class="toc"><p>Contents</p></div></article>'

    content = extract_article_content(html, ContentFilter(custom_exclude_selectors=[".toc"]))

    assert content == "Keep"


def test_include_title():
    html = "<article><h1>Title</h1><p>Body</p></article>"

    content = extract_article_content(html, ContentFilter(include_title=True))

    assert content == "# Title\n\nBody"


def test_only_first_h1_removed():
    html = "<article><h1>Title</h1><p>Body</p><h1>Second part</h1></article>"

    assert extract_article_content(html) == "Body\n\n# Second part"


def test_article_with_only_skipped_children():
    assert extract_article_content("<article><img src='x.png'></article>") == FALLBACK_CONTENT


def test_long_article_truncated():
    html = f"<article><p>{'word ' * 1000}</p></article>"

    content = extract_article_content(html)

    assert content.endswith(TRUNCATION_NOTICE)
    assert len(content) == 3000 + len(TRUNCATION_NOTICE)


def test_falls_back_to_content_div():
    html = '<html><body><div class="post-content"><h2>News</h2><p>Text here</p></div></body></html>'

    content = extract_article_content(html)

    assert "## News" in content
    assert "Text here" in content


def test_page_without_content():
    assert extract_article_content("<html><body><p>nothing</p></body></html>") == FALLBACK_CONTENT


def test_empty_page():
    assert extract_article_content("") == FALLBACK_CONTENT


def test_filter_handles_nested_matches():
    soup = BeautifulSoup(
        '<article><div class="ad"><div class="ad">x</div></div><p>Body</p></article>',
        "html.parser",
    )
    article = soup.find("article")

    ContentFilter(custom_exclude_selectors=[".ad"]).apply_to_element(article)

    assert article.find("div") is None
    assert article.get_text() == "Body"


def test_filter_str():
    assert str(ContentFilter()) == "ContentFilter(Excludes: title, metadata)"
    assert str(ContentFilter(include_title=True)) == "ContentFilter(Includes: title)"
