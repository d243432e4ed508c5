"""CLI commands for the contact form."""

from __future__ import annotations

import click
from rich.console import Console

console = Console()


def _form_options(func):
    for option in reversed([
        click.option("--name", default="", help="Sender name"),
        click.option("--email", default="", help="Sender e-mail address"),
        click.option("--subject", default="", help="Subject"),
        click.option("--message", default="", help="Message body"),
    ]):
        func = option(func)
    return func


def _print_errors(errors: dict[str, str]) -> None:
    for field_name, message in errors.items():
        console.print(f"  [red]{field_name}[/red]: {message}")


@click.group(name="contact")
def contact() -> None:
    """Validate and submit contact form messages."""
    pass


@contact.command(name="check")
@_form_options
def check_cmd(name: str, email: str, subject: str, message: str) -> None:
    """Validate contact form fields without sending."""
    from folio.contact.form import validate_contact_form

    errors = validate_contact_form(
        {"name": name, "email": email, "subject": subject, "message": message}
    )
    if errors:
        console.print("[red]Form is invalid:[/red]")
        _print_errors(errors)
        raise SystemExit(1)
    console.print("[green]Form is valid.[/green]")


@contact.command(name="send")
@_form_options
@click.option("--endpoint", help="Form endpoint URL (default: contact.endpoint in config)")
@click.pass_obj
def send_cmd(
    ctx,
    name: str,
    email: str,
    subject: str,
    message: str,
    endpoint: str | None,
) -> None:
    """Submit a message to the site's form endpoint.

    \b
    Examples:
        folio contact send --name Ada --email ada@example.com \\
            --subject research --message "Interested in your camera-trap work"
    """
    from folio.contact.form import ContactClient, ContactValidationError
    from folio.core.config import get_setting, load_site_config

    dry_run = ctx.dry_run if ctx else False
    fields = {"name": name, "email": email, "subject": subject, "message": message}

    if not endpoint:
        endpoint = get_setting(load_site_config(), "contact.endpoint")
    if not endpoint:
        console.print("[red]No endpoint configured. Set contact.endpoint or pass --endpoint.[/red]")
        raise SystemExit(1)

    if dry_run:
        from folio.contact.form import validate_contact_form

        errors = validate_contact_form(fields)
        if errors:
            _print_errors(errors)
            raise SystemExit(1)
        console.print(f"[dim]Would POST to {endpoint}[/dim]")
        return

    client = ContactClient(endpoint)
    try:
        result = client.submit(fields)
    except ContactValidationError as e:
        console.print("[red]Form is invalid:[/red]")
        _print_errors(e.errors)
        raise SystemExit(1)

    if result.ok:
        console.print(f"[green]{result.message}[/green]")
        return

    console.print(f"[red]{result.message}[/red]")
    if result.detail:
        console.print(f"[dim]{result.detail}[/dim]")
    raise SystemExit(1)
