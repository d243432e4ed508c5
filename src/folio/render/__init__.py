"""Fragment rendering and page population."""

from folio.render.fragments import (
    BlogMode,
    render_blog_posts,
    render_projects,
    render_publications,
    select_blog_posts,
)
from folio.render.page import PageResult, RenderContext, populate_page

__all__ = [
    "BlogMode",
    "PageResult",
    "RenderContext",
    "populate_page",
    "render_blog_posts",
    "render_projects",
    "render_publications",
    "select_blog_posts",
]
