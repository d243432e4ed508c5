"""CLI commands for inspecting and validating the Content Store."""

from __future__ import annotations

import json as json_module

import click
from rich.console import Console
from rich.table import Table

console = Console()

KINDS = ("projects", "publications", "posts")


@click.group(name="content")
def content() -> None:
    """Inspect and validate the JSON Content Store.

    Projects, publications and blog posts live in flat JSON files
    (js/data/ by default).
    """
    pass


@content.command(name="list")
@click.argument("kind", type=click.Choice(KINDS))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_cmd(kind: str, as_json: bool) -> None:
    """List records of one kind in Content Store order.

    \b
    Examples:
        folio content list posts
        folio content list publications --json
    """
    from folio.content.models import ContentError
    from folio.content.store import load_posts, load_projects, load_publications
    from folio.core.config import get_paths

    paths = get_paths()
    try:
        if kind == "projects":
            records = load_projects(paths.projects_json)
        elif kind == "publications":
            records = load_publications(paths.publications_json)
        else:
            records = load_posts(paths.posts_json)
    except (OSError, ContentError) as e:
        console.print(f"[red]Failed to load {kind}: {e}[/red]")
        raise SystemExit(1)

    if as_json:
        from dataclasses import asdict

        click.echo(json_module.dumps([asdict(r) for r in records], indent=2))
        return

    if not records:
        console.print(f"[yellow]No {kind} found[/yellow]")
        return

    table = Table(title=f"{kind.title()} ({len(records)})")
    if kind == "projects":
        table.add_column("Title", style="cyan")
        table.add_column("Category", style="green")
        table.add_column("Year", style="dim")
        table.add_column("Tags")
        for p in records:
            table.add_row(p.title, p.category, p.year, ", ".join(p.tags))
    elif kind == "publications":
        table.add_column("Year", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Journal", style="green")
        for pub in records:
            title = pub.title[:50] + "..." if len(pub.title) > 50 else pub.title
            table.add_row(str(pub.year), title, pub.journal)
    else:
        table.add_column("Slug", style="cyan")
        table.add_column("Title")
        table.add_column("Date", style="dim")
        table.add_column("Category", style="green")
        table.add_column("Featured")
        for post in records:
            table.add_row(
                post.slug,
                post.title[:45] + "..." if len(post.title) > 45 else post.title,
                post.date,
                post.category,
                "★" if post.featured else "",
            )

    console.print(table)


@content.command(name="check")
@click.option("--json", "as_json", is_flag=True, help="Output issues as JSON")
@click.option("--strict", is_flag=True, help="Treat warnings as failures")
def check_cmd(as_json: bool, strict: bool) -> None:
    """Validate the Content Store.

    Reports duplicate or unsafe slugs, unparseable post dates, bad
    publication years and missing fields. Exits with status 1 when
    errors are found.
    """
    from folio.content.models import ContentError
    from folio.content.store import ContentStore
    from folio.core.config import get_paths

    try:
        store = ContentStore.load(get_paths())
    except (OSError, ContentError) as e:
        if as_json:
            click.echo(json_module.dumps({"load_error": str(e), "issues": []}, indent=2))
        else:
            console.print(f"[red]Failed to load content: {e}[/red]")
        raise SystemExit(1)

    issues = store.validate()
    errors = [i for i in issues if i.severity == "error"]
    failing = issues if strict else errors

    if as_json:
        click.echo(json_module.dumps({"issues": [i.to_dict() for i in issues]}, indent=2))
    elif not issues:
        console.print(
            f"[green]Content OK:[/green] {len(store.projects)} projects, "
            f"{len(store.publications)} publications, {len(store.posts)} posts"
        )
    else:
        table = Table(title=f"Content Issues ({len(issues)})")
        table.add_column("Severity")
        table.add_column("Kind", style="dim")
        table.add_column("Record", style="cyan")
        table.add_column("Issue")
        for issue in issues:
            style = "red" if issue.severity == "error" else "yellow"
            table.add_row(
                f"[{style}]{issue.severity}[/{style}]",
                issue.kind,
                issue.identifier,
                issue.message,
            )
        console.print(table)

    if failing:
        raise SystemExit(1)
