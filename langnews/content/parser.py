#!/usr/bin/env python3
"""
Archive page parsing module.

This module contains functions for turning a language's blog archive page
into Article records and inferring tags for them.
"""

from bs4 import BeautifulSoup

from ..core.article import Article
from ..utils.url import extract_date, is_article_link, normalize_url, resolve_url

# Number of most recent articles taken from an archive by default
DEFAULT_MAX_ARTICLES = 10


def infer_tags(title, url, tag_rules, default_tag="news"):
    """
    Infer article tags from its title and URL.

    Args:
        title: Article title
        url: Article URL
        tag_rules: Ordered (tag, keywords) pairs
        default_tag: Tag used when no rule matches

    Returns:
        list: Tags in rule order, or [default_tag]
    """
    text = f"{title} {url}".lower()

    tags = []
    for tag, keywords in tag_rules:
        if tag not in tags and any(keyword in text for keyword in keywords):
            tags.append(tag)

    return tags or [default_tag]


def parse_archive_page(html_content, source, max_articles=DEFAULT_MAX_ARTICLES):
    """
    Extract the most recent articles listed on an archive page.

    Every link to a dated article becomes an Article; navigation links
    (archive, feed, in-page anchors) and links without text are ignored.

    Args:
        html_content: Raw HTML of the archive page
        source: LanguageSource the archive belongs to
        max_articles: Maximum number of articles to return

    Returns:
        list: Articles sorted newest first
    """
    soup = BeautifulSoup(html_content or "", "html.parser")

    articles = []
    seen_urls = set()

    for link in soup.find_all("a", href=True):
        href = link["href"].strip()
        title = link.get_text(" ", strip=True)

        if not title or not is_article_link(href):
            continue

        url = resolve_url(href, source.base_url)
        key = normalize_url(url)
        if key in seen_urls:
            continue
        seen_urls.add(key)

        articles.append(Article(
            title=title,
            date=extract_date(href),
            url=url,
            language=source.language,
            tags=infer_tags(title, url, source.tag_rules, source.default_tag),
        ))

    # sorted() is stable, so same-day articles keep page order
    articles = sorted(articles, key=lambda article: article.date, reverse=True)
    return articles[:max_articles]
