"""Shared formatting and ordering rules for fragments and generated pages."""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence
from datetime import date

from folio.content.models import BlogPost, Publication, parse_iso_date

DEFAULT_READ_TIME = "5 min read"

# Fixed English names so output never depends on the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def escape(value: object) -> str:
    """HTML-escape a text value for element content or a quoted attribute."""
    return html.escape(str(value), quote=True)


def parse_post_date(value: str) -> date | None:
    return parse_iso_date(value)


def format_long_date(value: str | date) -> str:
    """Format a date as ``June 15, 2023``.

    Unparseable strings are returned unchanged.
    """
    parsed = value if isinstance(value, date) else parse_iso_date(value)
    if parsed is None:
        return str(value)
    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.day}, {parsed.year}"


def read_time_or_default(post: BlogPost) -> str:
    return post.read_time or DEFAULT_READ_TIME


def sort_posts_by_date(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Newest first. Posts with invalid dates keep their relative order at the end."""
    posts = list(posts)
    dated = [p for p in posts if p.published is not None]
    undated = [p for p in posts if p.published is None]
    return sorted(dated, key=lambda p: p.published, reverse=True) + undated


def sort_publications_by_year(publications: Iterable[Publication]) -> list[Publication]:
    """Newest year first; equal years keep Content Store order."""
    return sorted(publications, key=lambda p: p.year, reverse=True)


def tag_list(tags: Sequence[str], css_class: str = "tag", separator: str = "") -> str:
    """Render tags as inline spans. An empty sequence gives an empty string."""
    return separator.join(f'<span class="{css_class}">{escape(tag)}</span>' for tag in tags)
