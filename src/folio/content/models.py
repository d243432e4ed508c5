"""
Typed records for the Content Store.

Projects, publications and blog posts are authored as JSON objects. These
dataclasses are the read-only projection the renderers and the page generator
work from; nothing downstream mutates them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

SLUG_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class ContentError(ValueError):
    """Raised when Content Store data cannot be turned into a record."""


def _text(data: dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    return str(value)


def _optional_text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _string_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key) or []
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list):
        raise ContentError(f"'{key}' must be a list of strings, got {type(value).__name__}")
    return tuple(str(item) for item in value)


def parse_iso_date(value: Any) -> date | None:
    """Parse an ISO 8601 date or datetime string into a calendar date.

    Returns None when the value is missing or unparseable; callers decide
    how to treat such posts (they sort last and fail validation).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


@dataclass(frozen=True)
class Project:
    """A research or software project card."""

    title: str
    description: str = ""
    category: str = ""
    year: str = ""
    image: str | None = None
    link: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    technologies: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        if not isinstance(data, dict):
            raise ContentError(f"Project entry must be an object, got {type(data).__name__}")
        return cls(
            title=_text(data, "title"),
            description=_text(data, "description"),
            category=_text(data, "category"),
            year=_text(data, "year"),
            image=_optional_text(data, "image"),
            link=_optional_text(data, "link"),
            tags=_string_list(data, "tags"),
            technologies=_string_list(data, "technologies"),
        )


@dataclass(frozen=True)
class Publication:
    """A journal article, conference paper or preprint."""

    title: str
    authors: str
    journal: str
    year: int
    volume: str | None = None
    issue: str | None = None
    pages: str | None = None
    doi: str | None = None
    pdf: str | None = None
    is_preprint: bool = False
    preprint_link: str | None = None
    category: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Publication:
        if not isinstance(data, dict):
            raise ContentError(f"Publication entry must be an object, got {type(data).__name__}")

        raw_year = data.get("year")
        try:
            year = int(str(raw_year).strip())
        except (TypeError, ValueError):
            raise ContentError(
                f"Publication '{data.get('title', '?')}' has non-numeric year: {raw_year!r}"
            ) from None

        authors = data.get("authors", "")
        if isinstance(authors, list):
            authors = ", ".join(str(a) for a in authors)

        return cls(
            title=_text(data, "title"),
            authors=str(authors),
            journal=_text(data, "journal"),
            year=year,
            volume=_optional_text(data, "volume"),
            issue=_optional_text(data, "issue"),
            pages=_optional_text(data, "pages"),
            doi=_optional_text(data, "doi"),
            pdf=_optional_text(data, "pdf"),
            is_preprint=data.get("is_preprint") is True,
            preprint_link=_optional_text(data, "preprint_link"),
            category=_optional_text(data, "category"),
        )


@dataclass(frozen=True)
class BlogPost:
    """A blog post; ``content`` is trusted, pre-rendered HTML."""

    title: str
    slug: str
    date: str
    excerpt: str = ""
    content: str = ""
    category: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    image: str | None = None
    read_time: str | None = None
    featured: bool = False

    @property
    def published(self) -> date | None:
        """Parsed calendar date, or None if ``date`` is not a valid ISO date."""
        return parse_iso_date(self.date)

    @property
    def filename(self) -> str:
        return f"{self.slug}.html"

    def has_safe_slug(self) -> bool:
        return bool(SLUG_PATTERN.match(self.slug))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BlogPost:
        if not isinstance(data, dict):
            raise ContentError(f"Post entry must be an object, got {type(data).__name__}")
        return cls(
            title=_text(data, "title"),
            slug=_text(data, "slug"),
            date=_text(data, "date"),
            excerpt=_text(data, "excerpt"),
            content=_text(data, "content"),
            category=_text(data, "category"),
            tags=_string_list(data, "tags"),
            image=_optional_text(data, "image"),
            read_time=_optional_text(data, "read_time"),
            # Only a literal JSON true features a post
            featured=data.get("featured") is True,
        )
