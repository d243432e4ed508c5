"""
HTML fragment rendering for projects, publications and blog posts.

Each ``render_*`` function maps a list of records to one fragment per record
and joins them. An empty input yields an empty string; nothing here raises on
missing optional fields.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from folio.content.models import BlogPost, Project, Publication
from folio.render.formatting import (
    escape,
    format_long_date,
    read_time_or_default,
    sort_posts_by_date,
    sort_publications_by_year,
    tag_list,
)

PROJECT_PLACEHOLDER_IMAGE = "project-placeholder.jpg"
BLOG_PLACEHOLDER_IMAGE = "blog-placeholder.jpg"
DEFAULT_POST_LIMIT = 3


class BlogMode(str, Enum):
    """Which posts a listing shows."""

    RECENT = "recent"  # blog page: newest posts
    FEATURED = "featured"  # homepage teaser: newest featured posts


def render_project(project: Project) -> str:
    image = project.image or PROJECT_PLACEHOLDER_IMAGE
    link = (
        f'<a href="{escape(project.link)}" class="btn btn-sm btn-outline">View Project</a>'
        if project.link
        else ""
    )
    return f"""
        <div class="project-card" data-category="{escape(project.category)}" data-year="{escape(project.year)}">
            <div class="project-image">
                <img src="images/{escape(image)}" alt="{escape(project.title)}">
                <div class="project-overlay">
                    <div class="project-tags">
                        {tag_list(project.tags, "tag")}
                    </div>
                </div>
            </div>
            <div class="project-info">
                <h3>{escape(project.title)}</h3>
                <p>{escape(project.description)}</p>
                <div class="project-meta">
                    <span class="project-category">{escape(project.category)}</span>
                    <span class="project-year">{escape(project.year)}</span>
                </div>
                <div class="project-technologies">
                    {tag_list(project.technologies, "tech-tag")}
                </div>
                {link}
            </div>
        </div>
    """


def render_projects(projects: Sequence[Project]) -> str:
    """Render project cards in Content Store order."""
    return "".join(render_project(p) for p in projects)


def publication_venue(pub: Publication) -> str:
    """Build ``journal[, volume][(issue)][: pages] (year)``."""
    venue = escape(pub.journal)
    if pub.volume:
        venue += f", {escape(pub.volume)}"
    if pub.issue:
        venue += f"({escape(pub.issue)})"
    if pub.pages:
        venue += f": {escape(pub.pages)}"
    return f"{venue} ({pub.year})"


def publication_links(pub: Publication) -> str:
    links = []
    if pub.doi:
        links.append(
            f'<a href="https://doi.org/{escape(pub.doi)}" target="_blank" class="publication-link">'
            '<i class="fas fa-external-link-alt"></i> DOI</a>'
        )
    if pub.pdf:
        links.append(
            f'<a href="{escape(pub.pdf)}" target="_blank" class="publication-link">'
            '<i class="fas fa-file-pdf"></i> PDF</a>'
        )
    if pub.is_preprint and pub.preprint_link:
        links.append(
            f'<a href="{escape(pub.preprint_link)}" target="_blank" class="publication-link">'
            '<i class="fas fa-file-alt"></i> Preprint</a>'
        )
    return "\n                ".join(links)


def render_publication(pub: Publication) -> str:
    category = pub.category or "publication"
    return f"""
        <div class="publication-item" data-year="{pub.year}" data-category="{escape(category)}">
            <h3 class="publication-title">{escape(pub.title)}</h3>
            <p class="publication-authors">{escape(pub.authors)}</p>
            <p class="publication-journal">
                {publication_venue(pub)}
            </p>
            <div class="publication-links">
                {publication_links(pub)}
            </div>
        </div>
    """


def render_publications(publications: Sequence[Publication]) -> str:
    """Render publications newest year first (stable for equal years)."""
    return "".join(render_publication(p) for p in sort_publications_by_year(publications))


def render_blog_card(post: BlogPost) -> str:
    image = post.image or BLOG_PLACEHOLDER_IMAGE
    return f"""
        <article class="blog-card">
            <div class="blog-card-image">
                <img src="images/{escape(image)}" alt="{escape(post.title)}">
                <div class="blog-card-category">{escape(post.category)}</div>
            </div>
            <div class="blog-card-content">
                <div class="blog-card-meta">
                    <span class="blog-card-date">{escape(format_long_date(post.date))}</span>
                    <span class="blog-card-readtime">{escape(read_time_or_default(post))}</span>
                </div>
                <h3 class="blog-card-title">{escape(post.title)}</h3>
                <p class="blog-card-excerpt">{escape(post.excerpt)}</p>
                <div class="blog-card-footer">
                    <div class="blog-card-tags">
                        {tag_list(post.tags, "tag")}
                    </div>
                    <a href="blog/{escape(post.filename)}" class="read-more">Read More <i class="fas fa-arrow-right"></i></a>
                </div>
            </div>
        </article>
    """


def select_blog_posts(
    posts: Sequence[BlogPost],
    mode: BlogMode = BlogMode.RECENT,
    limit: int | None = DEFAULT_POST_LIMIT,
) -> list[BlogPost]:
    """Pick the posts a listing shows, newest first.

    ``FEATURED`` keeps only posts whose ``featured`` flag is true before
    applying the limit; ``RECENT`` applies no filter.
    """
    ordered = sort_posts_by_date(posts)
    if BlogMode(mode) is BlogMode.FEATURED:
        ordered = [p for p in ordered if p.featured is True]
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


def render_blog_posts(
    posts: Sequence[BlogPost],
    mode: BlogMode = BlogMode.RECENT,
    limit: int | None = DEFAULT_POST_LIMIT,
) -> str:
    """Render blog cards for a listing (see :func:`select_blog_posts`)."""
    return "".join(render_blog_card(p) for p in select_blog_posts(posts, mode, limit))
