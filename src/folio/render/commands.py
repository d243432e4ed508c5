"""CLI commands for rendering Content Store fragments and pages."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

console = Console()

MODES = ("recent", "featured")


@click.group(name="render")
def render() -> None:
    """Render projects, publications and blog listings to HTML."""
    pass


@render.command(name="fragments")
@click.argument("kind", type=click.Choice(["projects", "publications", "posts"]))
@click.option("--mode", type=click.Choice(MODES), default="recent", show_default=True,
              help="Blog listing mode (posts only)")
@click.option("--limit", type=int, default=3, show_default=True, help="Maximum blog cards")
def fragments_cmd(kind: str, mode: str, limit: int) -> None:
    """Print the HTML fragment for one collection.

    \b
    Examples:
        folio render fragments publications
        folio render fragments posts --mode featured
    """
    from folio.content.models import ContentError
    from folio.content.store import load_posts, load_projects, load_publications
    from folio.core.config import get_paths
    from folio.render.fragments import (
        BlogMode,
        render_blog_posts,
        render_projects,
        render_publications,
    )

    paths = get_paths()
    try:
        if kind == "projects":
            html = render_projects(load_projects(paths.projects_json))
        elif kind == "publications":
            html = render_publications(load_publications(paths.publications_json))
        else:
            html = render_blog_posts(load_posts(paths.posts_json), BlogMode(mode), limit)
    except (OSError, ContentError) as e:
        console.print(f"[red]Failed to load {kind}: {e}[/red]")
        raise SystemExit(1)

    click.echo(html)


@render.command(name="page")
@click.argument("page", required=False, type=click.Path(path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path),
              help="Write here instead of updating PAGE in place")
@click.option("--mode", type=click.Choice(MODES), default="featured", show_default=True,
              help="Blog listing mode")
@click.option("--limit", type=int, default=3, show_default=True, help="Maximum blog cards")
@click.option("-s", "--section", "sections", multiple=True,
              type=click.Choice(["projects", "publications", "posts"]),
              help="Only populate these sections (can repeat)")
@click.option("--isolated", is_flag=True,
              help="Show an error only in sections whose data failed to load")
@click.pass_obj
def page_cmd(
    ctx,
    page: Path | None,
    output: Path | None,
    mode: str,
    limit: int,
    sections: tuple[str, ...],
    isolated: bool,
) -> None:
    """Populate a page's listing containers from the Content Store.

    PAGE defaults to the site's index page. By default a failure loading any
    collection replaces every section with an error message; use --isolated
    to degrade section by section.

    \b
    Examples:
        folio render page                           # homepage, featured posts
        folio render page blog.html --mode recent -s posts
        folio render page -o dist/index.html
    """
    from folio.core.config import get_paths
    from folio.core.fileio import safe_write_text
    from folio.render.fragments import BlogMode
    from folio.render.page import populate_page

    dry_run = ctx.dry_run if ctx else False
    paths = get_paths()
    page_path = page or paths.index_page
    if not page_path.is_absolute() and not page_path.exists():
        page_path = paths.root / page_path

    try:
        html = page_path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot read page {page_path}: {e}[/red]")
        raise SystemExit(1)

    result = populate_page(
        html,
        paths,
        mode=BlogMode(mode),
        isolated=isolated,
        sections=sections or None,
        limit=limit,
    )

    for name, error in result.errors.items():
        console.print(f"[red]Failed to load {name}:[/red] {error}")
    if result.rendered:
        console.print(f"[green]Rendered:[/green] {', '.join(result.rendered)}")

    target = output or page_path
    if dry_run:
        console.print(f"[dim]Would write: {target}[/dim]")
    else:
        safe_write_text(target, result.html)
        console.print(f"[green]✓[/green] Wrote {target}")

    if not result.ok:
        raise SystemExit(1)
