"""
Populate an HTML page with rendered Content Store fragments.

This is the build-time counterpart of the site's page-load script: it loads
the JSON content, renders the project, publication and blog listings, and
writes each into its container element.

By default loading is all-or-nothing. If any of the requested collections
fails to load, every container receives its error message and nothing is
rendered. ``isolated=True`` opts into per-section degradation instead.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Callable

from bs4 import BeautifulSoup

from folio.content.models import BlogPost, ContentError, Project, Publication
from folio.content.store import load_posts, load_projects, load_publications
from folio.core.config import SitePaths
from folio.render.fragments import (
    DEFAULT_POST_LIMIT,
    BlogMode,
    render_blog_posts,
    render_projects,
    render_publications,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Section:
    """A page container that receives one rendered listing."""

    name: str
    selector: str
    error_message: str

    def error_html(self) -> str:
        return f'<p class="error-message">{self.error_message}</p>'


SECTIONS: dict[str, Section] = {
    "projects": Section(
        "projects",
        "#projects-container",
        "Failed to load projects. Please try again later.",
    ),
    "publications": Section(
        "publications",
        ".publications-list",
        "Failed to load publications. Please try again later.",
    ),
    "posts": Section(
        "posts",
        ".blog-grid",
        "Failed to load blog posts. Please try again later.",
    ),
}


@dataclass
class RenderContext:
    """Everything a page render needs, passed explicitly."""

    projects: list[Project] = field(default_factory=list)
    publications: list[Publication] = field(default_factory=list)
    posts: list[BlogPost] = field(default_factory=list)
    blog_mode: BlogMode = BlogMode.FEATURED
    post_limit: int | None = DEFAULT_POST_LIMIT

    def render(self, name: str) -> str:
        """Render the fragment for one section name."""
        if name == "projects":
            return render_projects(self.projects)
        if name == "publications":
            return render_publications(self.publications)
        if name == "posts":
            return render_blog_posts(self.posts, self.blog_mode, self.post_limit)
        raise KeyError(f"Unknown section: {name}")


@dataclass
class PageResult:
    """Outcome of populating a page."""

    html: str
    rendered: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def _loaders(paths: SitePaths) -> dict[str, Callable[[], list]]:
    return {
        "projects": lambda: load_projects(paths.projects_json),
        "publications": lambda: load_publications(paths.publications_json),
        "posts": lambda: load_posts(paths.posts_json),
    }


def inject_fragment(soup: BeautifulSoup, selector: str, fragment: str) -> bool:
    """Replace the children of the element matching *selector*.

    Returns:
        False (and leaves the document untouched) if no element matches.
    """
    container = soup.select_one(selector)
    if container is None:
        return False
    container.clear()
    container.append(BeautifulSoup(fragment, "html.parser"))
    return True


def populate_page(
    html: str,
    paths: SitePaths,
    mode: BlogMode = BlogMode.FEATURED,
    isolated: bool = False,
    sections: Sequence[str] | None = None,
    limit: int | None = DEFAULT_POST_LIMIT,
) -> PageResult:
    """Load content and write rendered listings into *html*.

    Args:
        html: Page document
        paths: Site paths locating the Content Store
        mode: Blog listing mode for the posts section
        isolated: Degrade per section instead of failing every section
        sections: Section names to populate (default: all)
        limit: Maximum number of blog cards

    Returns:
        PageResult with the new document, populated section names and
        per-section load errors
    """
    names = list(sections) if sections else list(SECTIONS)
    for name in names:
        if name not in SECTIONS:
            raise KeyError(f"Unknown section: {name}")

    loaders = _loaders(paths)
    loaded: dict[str, list] = {}
    errors: dict[str, str] = {}

    for name in names:
        try:
            loaded[name] = loaders[name]()
        except (OSError, ContentError) as e:
            logger.error("Error loading %s: %s", name, e)
            errors[name] = str(e)
            if not isolated:
                break

    soup = BeautifulSoup(html, "html.parser")
    result = PageResult(html=html, errors=errors)

    if errors and not isolated:
        for name in names:
            inject_fragment(soup, SECTIONS[name].selector, SECTIONS[name].error_html())
        result.html = str(soup)
        return result

    ctx = RenderContext(
        projects=loaded.get("projects", []),
        publications=loaded.get("publications", []),
        posts=loaded.get("posts", []),
        blog_mode=mode,
        post_limit=limit,
    )

    for name in names:
        section = SECTIONS[name]
        if name in errors:
            inject_fragment(soup, section.selector, section.error_html())
            continue
        fragment = ctx.render(name)
        if not fragment:
            logger.debug("Nothing to render for %s", name)
            continue
        if inject_fragment(soup, section.selector, fragment):
            result.rendered.append(name)
        else:
            logger.debug("No container %s for %s", section.selector, name)

    result.html = str(soup)
    return result
