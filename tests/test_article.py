import datetime
import os

import pytest
import yaml

from langnews.core.article import (Article, article_path, render_article,
                                   render_front_matter, save_article_file)
from langnews.exceptions import ArticleWriteError


@pytest.fixture
def article():
    return Article(
        title='GHC 9.6.4 Released: "fast" edition',
        date="2026-02-01",
        url="https://blog.haskell.org/2026-02-01-ghc-9-6-4/",
        language="haskell",
        content="Body text",
        tags=["ghc", "release"],
    )


def split_front_matter(text):
    assert text.startswith("---\n")
    front_matter, body = text[4:].split("---\n", 1)
    return yaml.safe_load(front_matter), body


def test_filename(article):
    assert article.filename == "2026-02-01-haskell.md"


def test_article_path(article, tmp_path):
    assert article_path(str(tmp_path), article) == os.path.join(str(tmp_path), "2026-02-01-haskell.md")


def test_front_matter_fields(article):
    metadata, _ = split_front_matter(render_front_matter(article))

    assert metadata == {
        "title": 'GHC 9.6.4 Released: "fast" edition',
        "date": datetime.date(2026, 2, 1),
        "language": "haskell",
        "source": "https://blog.haskell.org/2026-02-01-ghc-9-6-4/",
        "tags": ["ghc", "release"],
    }


def test_front_matter_layout(article):
    lines = render_front_matter(article).splitlines()

    assert lines[0] == "---"
    assert lines[-1] == "---"
    assert [line.split(":")[0] for line in lines[1:-1]] == ["title", "date", "language", "source", "tags"]
    assert "date: 2026-02-01" in lines
    assert "tags: [ghc, release]" in lines


def test_render_article(article):
    metadata, body = split_front_matter(render_article(article))

    assert metadata["language"] == "haskell"
    assert body == "\nBody text\n"


def test_save_article_file(article, tmp_path):
    path = save_article_file(str(tmp_path), article)

    with open(path, encoding="utf-8") as f:
        assert f.read() == render_article(article)


def test_save_article_file_missing_directory(article, tmp_path):
    with pytest.raises(ArticleWriteError):
        save_article_file(str(tmp_path / "missing"), article)
