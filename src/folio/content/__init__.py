"""Content Store: typed records and JSON loading."""

from folio.content.models import BlogPost, ContentError, Project, Publication
from folio.content.store import (
    ContentIssue,
    ContentStore,
    load_posts,
    load_projects,
    load_publications,
)

__all__ = [
    "BlogPost",
    "ContentError",
    "ContentIssue",
    "ContentStore",
    "Project",
    "Publication",
    "load_posts",
    "load_projects",
    "load_publications",
]
