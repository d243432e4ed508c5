"""
Site settings CLI commands.

Settings live in .folio/config.yaml (JSON is still read). Only the keys in
SETTINGS can be changed from the command line; ``build:`` lists and
``rewrite.replacements`` are edited in the file directly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlparse

import click
import yaml
from rich.console import Console
from rich.table import Table

from folio.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_PATHS,
    DEFAULT_SITE_NAME,
    get_paths,
    get_setting,
    read_config_file,
)
from folio.core.fileio import safe_write_text

console = Console()


def _check_name(value: str) -> str | None:
    if not value.strip():
        return "must not be empty"
    return None


def _check_url(value: str) -> str | None:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return "must be an http(s) URL"
    return None


def _check_site_path(value: str) -> str | None:
    path = PurePosixPath(value)
    if path.is_absolute() or value.startswith("~"):
        return "must be relative to the site root"
    if ".." in path.parts:
        return "must stay inside the site root"
    return None


@dataclass(frozen=True)
class Setting:
    """A settable config key."""

    key: str
    default: str | None
    description: str
    check: Callable[[str], str | None]


SETTINGS: dict[str, Setting] = {
    s.key: s
    for s in (
        Setting("site.name", DEFAULT_SITE_NAME, "Owner name in page titles", _check_name),
        Setting("site.base_url", DEFAULT_BASE_URL, "Base URL for share links", _check_url),
        Setting("contact.endpoint", None, "Contact form endpoint", _check_url),
        *(
            Setting(f"paths.{name}", default, "Site-relative path", _check_site_path)
            for name, default in DEFAULT_PATHS.items()
        ),
    )
}


def get_config_path():
    """Get path to the site config file."""
    return get_paths().config_file


def load_config() -> dict[str, Any]:
    """Load the site config (YAML or JSON)."""
    return read_config_file(get_config_path())


def save_config(config: dict[str, Any]) -> None:
    """Write the site config as YAML."""
    safe_write_text(
        get_config_path(),
        yaml.dump(config, default_flow_style=False, sort_keys=False),
    )


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a configuration value by dotted key."""
    return get_setting(load_config(), key, default)


def set_config_value(key: str, value: Any) -> None:
    """Set a configuration value by dotted key."""
    config = load_config()
    *parents, leaf = key.split(".")
    current = config
    for part in parents:
        current = current.setdefault(part, {})
    current[leaf] = value
    save_config(config)


def unset_config_value(key: str) -> bool:
    """Remove a dotted key, dropping sections left empty.

    Returns:
        True if the key was present.
    """
    config = load_config()
    *parents, leaf = key.split(".")
    chain = [config]
    for part in parents:
        child = chain[-1].get(part)
        if not isinstance(child, dict):
            return False
        chain.append(child)
    if leaf not in chain[-1]:
        return False

    del chain[-1][leaf]
    for part, parent in zip(reversed(parents), reversed(chain[:-1])):
        if parent[part]:
            break
        del parent[part]
    save_config(config)
    return True


def _require_setting(key: str) -> Setting:
    setting = SETTINGS.get(key)
    if setting is None:
        console.print(f"[red]Unknown setting: {key}[/red]")
        console.print("[dim]Run 'folio config show' for the list of settings.[/dim]")
        raise SystemExit(1)
    return setting


@click.group()
def config():
    """View and change site settings in .folio/config.yaml."""
    pass


@config.command(name="show")
def show_cmd():
    """Show every setting with its value and where it comes from."""
    cfg = load_config()

    table = Table(title="Site settings", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for key, setting in SETTINGS.items():
        value = get_setting(cfg, key)
        if value is None:
            table.add_row(key, str(setting.default or "-"), "default")
        else:
            table.add_row(key, str(value), "config")

    console.print(table)
    console.print(f"\n[dim]Config file: {get_config_path()}[/dim]")


@config.command(name="get")
@click.argument("key")
def get_cmd(key: str):
    """Print one setting.

    \b
    Examples:
        folio config get site.base_url
    """
    setting = _require_setting(key)
    value = get_config_value(key)
    if value is None:
        console.print(f"{key} = {setting.default} [dim](default)[/dim]")
    else:
        console.print(f"{key} = {value}")


@config.command(name="set")
@click.argument("key")
@click.argument("value")
def set_cmd(key: str, value: str):
    """Change one setting after checking the value.

    URLs must be http(s); paths must be relative to the site root.

    \b
    Examples:
        folio config set site.base_url https://adhithmk.github.io
        folio config set paths.posts_output blog/posts
    """
    setting = _require_setting(key)
    problem = setting.check(value)
    if problem:
        console.print(f"[red]Invalid value for {key}: {problem}[/red]")
        raise SystemExit(1)

    set_config_value(key, value)
    console.print(f"[green]Set {key} = {value}[/green]")


@config.command(name="unset")
@click.argument("key")
def unset_cmd(key: str):
    """Remove a setting so its default applies again."""
    setting = _require_setting(key)
    if unset_config_value(key):
        console.print(f"[green]Removed {key} (default: {setting.default})[/green]")
    else:
        console.print(f"[dim]{key} is not set[/dim]")


@config.command(name="path")
def path_cmd():
    """Print the config file path."""
    click.echo(str(get_config_path()))
