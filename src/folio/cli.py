"""
Main CLI dispatcher for folio.

Usage:
    folio init                               # Initialize .folio/ directory
    folio content [list|check]
    folio render [fragments|page]
    folio posts [generate|refresh|relink]
    folio build
    folio contact [check|send]
    folio config [show|get|set|unset|path]
"""

import logging

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler

from folio import __version__

console = Console()


class Context:
    """Shared context for all commands."""

    def __init__(self, verbose: bool = False, dry_run: bool = False):
        self.verbose = verbose
        self.dry_run = dry_run
        self.console = console


pass_context = click.make_pass_decorator(Context, ensure=True)


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="folio")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-n", "--dry-run", is_flag=True, help="Preview without making changes")
@click.pass_context
def main(ctx: click.Context, verbose: bool, dry_run: bool) -> None:
    """Portfolio site tools.

    Render projects, publications and blog posts from the JSON Content Store,
    generate static post pages, and build the distributable site.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj = Context(verbose=verbose, dry_run=dry_run)

    if dry_run:
        console.print("[yellow]DRY RUN MODE - No changes will be made[/yellow]")


STARTER_CONFIG = {
    "site": {
        "name": "Adhith M K",
        "base_url": "https://yourdomain.com",
    },
    "contact": {
        "endpoint": "",
    },
    "rewrite": {
        "replacements": [],
    },
}

STARTER_PARTIALS = {
    "nav.html": '<nav class="navbar">\n    <div class="nav-container">\n'
    '        <a href="../index.html" class="logo">Adhith M K</a>\n'
    "    </div>\n</nav>\n",
    "footer.html": '<footer class="footer">\n    <div class="footer-bottom">\n'
    "        <p>&copy; {year} Adhith M K. All rights reserved.</p>\n"
    "    </div>\n</footer>\n",
    "scripts.html": "    <!-- Scripts -->\n"
    '    <script src="../js/main.js"></script>\n',
}


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing .folio/ directory")
@click.pass_obj
def init(ctx, force: bool) -> None:
    """Initialize .folio/ directory structure.

    Creates .folio/ with a starter config.yaml and page partials.
    """
    from pathlib import Path

    from folio.core.config import get_site_root

    dry_run = ctx.dry_run if ctx else False

    try:
        site_root = get_site_root()
    except FileNotFoundError:
        # For init, use cwd as the site root since .folio/ doesn't exist yet
        site_root = Path.cwd()

    folio_dir = site_root / ".folio"

    if folio_dir.exists() and not force:
        console.print(f"[yellow].folio/ directory already exists at {folio_dir}[/yellow]")
        console.print("[dim]Use --force to reinitialize.[/dim]")
        return

    console.print(f"[cyan]Initializing .folio/ directory at {site_root}[/cyan]")

    partials_dir = folio_dir / "partials"
    for dir_path in (folio_dir, partials_dir):
        if not dry_run:
            dir_path.mkdir(parents=True, exist_ok=True)
        console.print(f"  [green]Created[/green] {dir_path.relative_to(site_root)}")

    config_path = folio_dir / "config.yaml"
    if not config_path.exists() or force:
        if not dry_run:
            config_path.write_text(
                yaml.dump(STARTER_CONFIG, default_flow_style=False, sort_keys=False),
                encoding="utf-8",
            )
        console.print(f"  [green]Wrote[/green] {config_path.relative_to(site_root)}")

    for name, text in STARTER_PARTIALS.items():
        partial_path = partials_dir / name
        if partial_path.exists() and not force:
            continue
        if not dry_run:
            partial_path.write_text(text, encoding="utf-8")
        console.print(f"  [green]Wrote[/green] {partial_path.relative_to(site_root)}")

    console.print()
    if dry_run:
        console.print("[yellow]DRY RUN - no changes made[/yellow]")
    else:
        console.print("[green]Done![/green] .folio/ directory initialized.")


# Import and register command groups (imports after main definition intentional)
from folio.build.commands import build  # noqa: E402
from folio.config.commands import config  # noqa: E402
from folio.contact.commands import contact  # noqa: E402
from folio.content.commands import content  # noqa: E402
from folio.pages.commands import posts  # noqa: E402
from folio.render.commands import render  # noqa: E402

main.add_command(content)
main.add_command(render)
main.add_command(posts)
main.add_command(build)
main.add_command(contact)
main.add_command(config)


if __name__ == "__main__":
    main()
