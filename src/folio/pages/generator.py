"""
Static blog post page generator.

Stamps out ``<slug>.html`` for every post from the post template. Posts are
processed strictly in Content Store order; previous/next links follow that
order, not publication date.

A failure on one post (missing template slot, unsafe slug, write error) is
logged and recorded in the report, and generation continues with the next
post.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from folio.content.models import BlogPost, ContentError
from folio.core.config import SiteSettings
from folio.core.fileio import safe_write_json, safe_write_text
from folio.pages.template import PostTemplate, TemplateSlotError
from folio.render.formatting import escape, format_long_date, read_time_or_default, tag_list

console = Console()
logger = logging.getLogger(__name__)

BACK_LINK = '<a href="../index.html#blog" class="btn btn-outline">Back to Blog</a>'
EMPTY_NAV = "<span></span>"


@dataclass
class GenerationReport:
    """Result of a generation run."""

    generated: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def manifest(self) -> list[str]:
        """Output file names, in generation order."""
        return list(self.generated)

    @property
    def ok(self) -> bool:
        return not self.failed


def neighbours(posts: Sequence[BlogPost], index: int) -> tuple[BlogPost | None, BlogPost | None]:
    """Previous and next post by list position."""
    previous = posts[index - 1] if index > 0 else None
    following = posts[index + 1] if index < len(posts) - 1 else None
    return previous, following


def build_navigation(posts: Sequence[BlogPost], index: int) -> str:
    previous, following = neighbours(posts, index)

    prev_link = (
        f'<a href="{escape(previous.filename)}" class="btn btn-outline">'
        f'<i class="fas fa-arrow-left"></i> {escape(previous.title)}</a>'
        if previous
        else EMPTY_NAV
    )
    next_link = (
        f'<a href="{escape(following.filename)}" class="btn btn-outline">'
        f'{escape(following.title)} <i class="fas fa-arrow-right"></i></a>'
        if following
        else EMPTY_NAV
    )

    return f"""<div class="blog-navigation">
            {prev_link}
            {BACK_LINK}
            {next_link}
        </div>"""


def build_meta_tags(post: BlogPost, site: SiteSettings) -> str:
    """Open Graph and Twitter card tags for sharing."""
    url = f"{site.base_url}/blog/posts/{post.filename}"
    lines = [
        f'<meta property="og:title" content="{escape(post.title)}">',
        f'<meta property="og:description" content="{escape(post.excerpt)}">',
        '<meta property="og:type" content="article">',
        f'<meta property="og:url" content="{escape(url)}">',
        '<meta name="twitter:card" content="summary_large_image">',
        f'<meta name="twitter:title" content="{escape(post.title)}">',
        f'<meta name="twitter:description" content="{escape(post.excerpt)}">',
    ]
    if post.image:
        image_url = f"{site.base_url}/{post.image.lstrip('/')}"
        lines.append(f'<meta property="og:image" content="{escape(image_url)}">')
        lines.append(f'<meta name="twitter:image" content="{escape(image_url)}">')
    return "\n        " + "\n        ".join(lines) + "\n    "


def slot_values(
    posts: Sequence[BlogPost],
    index: int,
    site: SiteSettings,
) -> dict[str, str]:
    """Replacement HTML for every template slot of ``posts[index]``."""
    post = posts[index]
    title = escape(post.title)
    tags_html = tag_list(post.tags, "blog-tag", separator="\n")
    return {
        "page_title": f"<title>{title} | {escape(site.name)}</title>",
        "title": title,
        "date": f'<span><i class="far fa-calendar"></i> {escape(format_long_date(post.date))}</span>',
        "read_time": f'<span><i class="far fa-clock"></i> {escape(read_time_or_default(post))}</span>',
        "category": f'<span><i class="far fa-folder"></i> {escape(post.category)}</span>',
        "tags": f'<div class="blog-tags">{tags_html}</div>',
        "content": post.content,
        "navigation": build_navigation(posts, index),
        "head_end": f"{build_meta_tags(post, site)}</head>",
    }


def render_post_page(
    template: PostTemplate,
    posts: Sequence[BlogPost],
    index: int,
    site: SiteSettings,
    strict: bool = True,
) -> str:
    """Render the full page for ``posts[index]``.

    Raises:
        ContentError: If the post's slug cannot be used as a file name
        TemplateSlotError: In strict mode, if the template lacks a slot
    """
    post = posts[index]
    if not post.has_safe_slug():
        raise ContentError(f"slug {post.slug!r} is not URL-safe")
    return template.fill(slot_values(posts, index, site), strict=strict)


def generate_post_pages(
    posts: Sequence[BlogPost],
    template: PostTemplate,
    output_dir: Path,
    site: SiteSettings,
    strict: bool = True,
    dry_run: bool = False,
    only: str | None = None,
) -> GenerationReport:
    """Generate one page per post.

    Args:
        posts: Posts in Content Store order
        template: Post template
        output_dir: Directory receiving ``<slug>.html`` files
        site: Site name and base URL
        strict: Fail a post when the template lacks a slot
        dry_run: Render but do not write
        only: Generate only the post with this slug (links still use the full list)

    Returns:
        GenerationReport with generated file names and per-post failures
    """
    report = GenerationReport()
    output_dir = Path(output_dir)

    for index, post in enumerate(posts):
        if only is not None and post.slug != only:
            continue

        label = post.slug or f"#{index}"
        console.print(f"  Generating post: [cyan]{post.title or label}[/cyan]")
        try:
            page = render_post_page(template, posts, index, site, strict=strict)
            output_path = output_dir / post.filename
            if dry_run:
                console.print(f"  [dim]Would write: {output_path}[/dim]")
            else:
                safe_write_text(output_path, page)
                console.print(f"  [green]✓[/green] Generated: {output_path}")
            report.generated.append(post.filename)
        except (TemplateSlotError, ContentError, OSError) as e:
            logger.error("Error generating %s: %s", label, e)
            console.print(f"  [red]✗ {label}: {e}[/red]")
            report.failed.append((label, str(e)))

    return report


def write_manifest(report: GenerationReport, path: Path) -> Path:
    """Write the generated file names as a JSON array."""
    return safe_write_json(path, report.manifest)
