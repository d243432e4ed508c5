"""
Content Store loading and validation.

The Content Store is three flat JSON documents, each holding one top-level
array: ``projects``, ``publications`` and ``posts``. Loading is strict about
shape (a malformed file raises) and lenient about content (odd values are
reported by :meth:`ContentStore.validate` instead).
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from folio.content.models import BlogPost, ContentError, Project, Publication
from folio.core.config import SitePaths

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_json(path: Path) -> dict[str, Any]:
    """Read a Content Store document.

    Raises:
        OSError: If the file cannot be read
        ContentError: If the file is not UTF-8 or not a JSON object
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ContentError(f"{path}: not valid UTF-8 ({e})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ContentError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ContentError(f"{path}: expected a JSON object at top level")
    return data


def _load_records(path: Path, key: str, factory: Callable[[dict[str, Any]], T]) -> list[T]:
    data = _read_json(path)
    entries = data.get(key) or []
    if not isinstance(entries, list):
        raise ContentError(f"{path}: '{key}' must be an array")

    records = []
    for index, entry in enumerate(entries):
        try:
            records.append(factory(entry))
        except ContentError as e:
            raise ContentError(f"{path}: {key}[{index}]: {e}") from e
    logger.debug("Loaded %d %s from %s", len(records), key, path)
    return records


def load_projects(path: Path) -> list[Project]:
    """Load projects in authored order."""
    return _load_records(path, "projects", Project.from_dict)


def load_publications(path: Path) -> list[Publication]:
    """Load publications in authored order."""
    return _load_records(path, "publications", Publication.from_dict)


def load_posts(path: Path) -> list[BlogPost]:
    """Load blog posts in authored order (the canonical navigation order)."""
    return _load_records(path, "posts", BlogPost.from_dict)


@dataclass
class ContentIssue:
    """A single validation finding."""

    severity: str  # "error" or "warning"
    kind: str  # "project", "publication" or "post"
    identifier: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "severity": self.severity,
            "kind": self.kind,
            "identifier": self.identifier,
            "message": self.message,
        }


@dataclass
class ContentStore:
    """All three Content Store collections, loaded together."""

    projects: list[Project] = field(default_factory=list)
    publications: list[Publication] = field(default_factory=list)
    posts: list[BlogPost] = field(default_factory=list)

    @classmethod
    def load(cls, paths: SitePaths) -> ContentStore:
        """Load every collection.

        Any single failure propagates; callers wanting per-collection
        isolation use the ``load_*`` functions directly.
        """
        return cls(
            projects=load_projects(paths.projects_json),
            publications=load_publications(paths.publications_json),
            posts=load_posts(paths.posts_json),
        )

    def get_post(self, slug: str) -> BlogPost | None:
        for post in self.posts:
            if post.slug == slug:
                return post
        return None

    def validate(self) -> list[ContentIssue]:
        """Check records against the content rules.

        Returns:
            Issues in collection order; errors and warnings interleaved.
        """
        issues: list[ContentIssue] = []

        for project in self.projects:
            ident = project.title or "(untitled)"
            if not project.title:
                issues.append(ContentIssue("warning", "project", ident, "missing title"))
            if not project.category:
                issues.append(ContentIssue("warning", "project", ident, "missing category"))

        for pub in self.publications:
            ident = pub.title or "(untitled)"
            if not 1000 <= pub.year <= 9999:
                issues.append(
                    ContentIssue("error", "publication", ident, f"year {pub.year} is not 4 digits")
                )
            if not pub.journal:
                issues.append(ContentIssue("warning", "publication", ident, "missing journal"))
            if pub.is_preprint and not pub.preprint_link:
                issues.append(
                    ContentIssue("warning", "publication", ident, "preprint without preprint_link")
                )

        slug_counts = Counter(post.slug for post in self.posts)
        for post in self.posts:
            ident = post.slug or post.title or "(untitled)"
            if not post.slug:
                issues.append(ContentIssue("error", "post", ident, "missing slug"))
            elif not post.has_safe_slug():
                issues.append(ContentIssue("error", "post", ident, "slug is not URL-safe"))
            elif slug_counts[post.slug] > 1:
                issues.append(ContentIssue("error", "post", ident, "duplicate slug"))
            if post.published is None:
                issues.append(
                    ContentIssue("error", "post", ident, f"unparseable date: {post.date!r}")
                )
            if not post.title:
                issues.append(ContentIssue("warning", "post", ident, "missing title"))
            if not post.tags:
                issues.append(ContentIssue("warning", "post", ident, "no tags"))

        return issues
