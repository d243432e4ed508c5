"""CLI commands for standalone blog post pages.

Generate one HTML page per post from the post template, and rewrite
already-generated pages (shared chrome, link replacements).
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.group(name="posts")
def posts() -> None:
    """Generate and maintain static blog post pages."""
    pass


@posts.command(name="generate")
@click.option("--template", "template_path", type=click.Path(path_type=Path),
              help="Post template (default: blog/post-template.html)")
@click.option("--output-dir", type=click.Path(path_type=Path),
              help="Output directory (default: blog/posts)")
@click.option("--slug", help="Generate only this post")
@click.option("--lenient", is_flag=True,
              help="Skip missing template slots instead of failing the post")
@click.option("--manifest", "manifest_path", type=click.Path(path_type=Path),
              help="Also write the generated file names as JSON")
@click.pass_obj
def generate_cmd(
    ctx,
    template_path: Path | None,
    output_dir: Path | None,
    slug: str | None,
    lenient: bool,
    manifest_path: Path | None,
) -> None:
    """Generate <slug>.html for every blog post.

    Previous/next links follow the order of posts in the data file, not
    their dates. A post that fails (missing template slot, bad slug, write
    error) is reported and the rest are still generated.

    \b
    Examples:
        folio posts generate
        folio posts generate --slug camera-trap-survey
        folio posts generate --lenient --manifest blog/posts/manifest.json
    """
    from folio.content.models import ContentError
    from folio.content.store import load_posts
    from folio.core.config import get_paths, get_site_settings
    from folio.pages.generator import generate_post_pages, write_manifest
    from folio.pages.template import PostTemplate

    dry_run = ctx.dry_run if ctx else False
    paths = get_paths()

    try:
        all_posts = load_posts(paths.posts_json)
    except (OSError, ContentError) as e:
        console.print(f"[red]Failed to load posts: {e}[/red]")
        raise SystemExit(1)

    if slug and not any(p.slug == slug for p in all_posts):
        console.print(f"[red]Post not found: {slug}[/red]")
        raise SystemExit(1)

    template_file = template_path or paths.post_template
    try:
        template = PostTemplate.from_file(template_file)
    except OSError as e:
        console.print(f"[red]Cannot read template {template_file}: {e}[/red]")
        raise SystemExit(1)

    missing = template.missing_slots()
    if missing:
        style = "yellow" if lenient else "red"
        console.print(f"[{style}]Template is missing slot(s): {', '.join(missing)}[/{style}]")

    report = generate_post_pages(
        all_posts,
        template,
        output_dir or paths.posts_output,
        get_site_settings(paths.root),
        strict=not lenient,
        dry_run=dry_run,
        only=slug,
    )

    if manifest_path and not dry_run:
        try:
            write_manifest(report, manifest_path)
        except OSError as e:
            console.print(f"[red]Cannot write manifest {manifest_path}: {e}[/red]")
            raise SystemExit(1)
        console.print(f"[dim]Manifest: {manifest_path}[/dim]")

    console.print()
    console.print(f"[green]Generated:[/green] {len(report.generated)}")
    if report.failed:
        table = Table(title=f"Failed ({len(report.failed)})")
        table.add_column("Post", style="cyan")
        table.add_column("Error", style="red")
        for failed_slug, message in report.failed:
            table.add_row(failed_slug, message)
        console.print(table)
        raise SystemExit(1)


@posts.command(name="refresh")
@click.option("--dir", "pages_dir", type=click.Path(path_type=Path),
              help="Pages directory (default: blog/posts)")
@click.pass_obj
def refresh_cmd(ctx, pages_dir: Path | None) -> None:
    """Replace navbar, footer and scripts in generated pages.

    Uses .folio/partials/nav.html, footer.html and scripts.html.
    ``{year}`` in a partial becomes the current year.
    """
    from folio.core.config import get_paths
    from folio.pages.rewrite import load_partials, refresh_chrome, rewrite_pages

    dry_run = ctx.dry_run if ctx else False
    paths = get_paths()

    try:
        partials = load_partials(paths.partials)
    except OSError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    report = rewrite_pages(
        pages_dir or paths.posts_output,
        lambda text: refresh_chrome(
            text, partials["nav"], partials["footer"], partials["scripts"]
        ),
        dry_run=dry_run,
    )

    console.print(
        f"\nUpdate complete. Successfully updated {len(report.updated)} "
        f"of {report.total} blog posts."
    )
    if report.failed:
        raise SystemExit(1)


@posts.command(name="relink")
@click.option("--dir", "pages_dir", type=click.Path(path_type=Path),
              help="Pages directory (default: blog/posts)")
@click.pass_obj
def relink_cmd(ctx, pages_dir: Path | None) -> None:
    """Apply the configured link replacements to generated pages.

    Rules come from ``rewrite.replacements`` in .folio/config.yaml:

    \b
        rewrite:
          replacements:
            - old: https://github.com/yourusername
              new: https://github.com/adhithmk
            - old: '<i class="fas fa-cloud"></i>'
              new: '<i class="fab fa-bluesky"></i>'
    """
    from folio.core.config import get_paths, get_setting, load_site_config
    from folio.pages.rewrite import Replacement, apply_replacements, rewrite_pages

    dry_run = ctx.dry_run if ctx else False
    paths = get_paths()

    raw_rules = get_setting(load_site_config(paths.root), "rewrite.replacements", []) or []
    try:
        rules = [Replacement.from_dict(r) for r in raw_rules]
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid replacement rule: {e}[/red]")
        raise SystemExit(1)

    if not rules:
        console.print("[yellow]No replacements configured (rewrite.replacements)[/yellow]")
        return

    report = rewrite_pages(
        pages_dir or paths.posts_output,
        lambda text: apply_replacements(text, rules)[0],
        dry_run=dry_run,
    )

    console.print(f"\nUpdated {len(report.updated)} out of {report.total} blog posts.")
    if report.failed:
        raise SystemExit(1)
