#!/usr/bin/env python3
"""
Article model and file writing module.

This module contains the Article dataclass and functions for rendering an
article as Markdown with YAML front matter and saving it to disk.
"""

import datetime
import os
from dataclasses import dataclass, field
from typing import List

import yaml

from ..exceptions import ArticleWriteError


@dataclass
class Article:
    """A single news article discovered on a language's archive page."""
    title: str
    date: str  # ISO date, YYYY-MM-DD
    url: str
    language: str
    content: str = ""
    tags: List[str] = field(default_factory=list)

    @property
    def filename(self):
        """File name following the <date>-<language>.md convention."""
        return f"{self.date}-{self.language}.md"


class _FrontMatterDumper(yaml.SafeDumper):
    """SafeDumper that writes lists in flow style, e.g. tags: [release, ghc]."""


def _represent_list(dumper, data):
    return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)


_FrontMatterDumper.add_representer(list, _represent_list)


def render_front_matter(article):
    """
    Render the YAML front matter block for an article.

    Args:
        article: Article instance

    Returns:
        str: Front matter including the --- delimiters
    """
    metadata = {
        "title": article.title,
        "date": datetime.date.fromisoformat(article.date),
        "language": article.language,
        "source": article.url,
        "tags": list(article.tags),
    }
    body = yaml.dump(
        metadata,
        Dumper=_FrontMatterDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=1000,
    )
    return f"---\n{body}---\n"


def render_article(article):
    """
    Render the complete article file content.

    Args:
        article: Article instance with content filled in

    Returns:
        str: Front matter, a blank line and the Markdown body
    """
    return f"{render_front_matter(article)}\n{article.content}\n"


def article_path(output_dir, article):
    """Return the path an article is written to inside output_dir."""
    return os.path.join(output_dir, article.filename)


def save_article_file(output_dir, article):
    """
    Write an article to its file inside output_dir.

    Args:
        output_dir: Directory for article files (must exist)
        article: Article instance with content filled in

    Returns:
        str: Path to the saved file

    Raises:
        ArticleWriteError: If the file cannot be written
    """
    file_path = article_path(output_dir, article)

    try:
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(render_article(article))
    except OSError as e:
        raise ArticleWriteError(f"Error writing file {file_path}: {e}") from e

    return file_path
