"""CLI command for building the distributable site."""

from __future__ import annotations

import click
from rich.console import Console

console = Console()


@click.command(name="build")
@click.option("--clean", is_flag=True, help="Remove the dist directory first")
@click.pass_obj
def build(ctx, clean: bool) -> None:
    """Minify CSS/JS and copy assets into dist/.

    File lists come from the ``build:`` section of .folio/config.yaml and
    default to the site's standard layout. A file that fails is reported
    and the build continues; the exit status is 1 if anything failed.
    """
    from folio.build.pipeline import BuildConfig, BuildError, build_site
    from folio.core.config import get_site_root, load_site_config

    dry_run = ctx.dry_run if ctx else False
    root = get_site_root()
    config = BuildConfig.from_config(load_site_config(root))

    try:
        report = build_site(root, config, clean=clean, dry_run=dry_run)
    except BuildError as e:
        console.print(f"[red]❌ Build failed: {e}[/red]")
        raise SystemExit(1)

    console.print()
    if report.ok:
        console.print("[green]✅ Build completed successfully![/green]")
        console.print(f"Your optimized files are in the {config.dist}/ directory.")
        return

    console.print(f"[yellow]Build finished with {len(report.failed)} error(s):[/yellow]")
    for source, message in report.failed:
        console.print(f"  [red]{source}[/red]: {message}")
    raise SystemExit(1)
