"""
Configuration and path management.

Provides site root detection and standard paths for the portfolio site.
Uses .folio/ directory for folio-specific data (config, partials, manifests).

Resolution order for site root:
  1. FOLIO_SITE_ROOT environment variable (highest priority)
  2. Walk up from cwd looking for .folio/ directory
  3. Global config file (~/.config/folio/config.yaml) site_root key
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SITE_NAME = "Adhith M K"
DEFAULT_BASE_URL = "https://yourdomain.com"

# Site-relative defaults, overridable under ``paths:`` in .folio/config.yaml
DEFAULT_PATHS: dict[str, str] = {
    "data_dir": "js/data",
    "projects_json": "js/data/projects.json",
    "publications_json": "js/data/publications.json",
    "posts_json": "js/data/blog-posts.json",
    "post_template": "blog/post-template.html",
    "posts_output": "blog/posts",
    "index_page": "index.html",
    "dist": "dist",
}


@dataclass(frozen=True)
class SitePaths:
    """Standard paths for the portfolio site and folio data."""

    root: Path
    folio_dir: Path
    config_file: Path
    partials: Path

    # Content Store
    data_dir: Path
    projects_json: Path
    publications_json: Path
    posts_json: Path

    # Blog pages
    post_template: Path
    posts_output: Path
    manifest: Path

    # Pages and build output
    index_page: Path
    dist: Path


def get_global_config_path() -> Path:
    """Return the path to the global folio config file.

    Respects XDG_CONFIG_HOME if set, otherwise defaults to ~/.config/folio/config.yaml.

    Returns:
        Path to global config file (may not exist).
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "folio" / "config.yaml"


def read_config_file(config_path: Path) -> dict[str, Any]:
    """Read a YAML (or legacy JSON) config file.

    Args:
        config_path: File to read

    Returns:
        Configuration dict, or empty dict if the file is missing or empty.
    """
    if not config_path.is_file():
        return {}

    content = config_path.read_text(encoding="utf-8")
    if not content.strip():
        return {}

    # Detect format: YAML files typically don't start with '{'
    if content.strip().startswith("{"):
        result: dict[str, Any] = json.loads(content)
        return result
    loaded = yaml.safe_load(content)
    if isinstance(loaded, dict):
        return loaded
    return {}


def load_global_config() -> dict:
    """Load the global folio configuration.

    Returns:
        Configuration dict, or empty dict if file is missing or invalid.
    """
    try:
        return read_config_file(get_global_config_path())
    except (OSError, ValueError, yaml.YAMLError):
        return {}


def _walk_up_for_folio(start_path: Path) -> Path | None:
    """Walk up directory tree looking for .folio/ directory.

    Args:
        start_path: Starting path for search.

    Returns:
        Path to directory containing .folio/, or None if not found.
    """
    current = start_path.resolve()
    while current != current.parent:
        if (current / ".folio").is_dir():
            return current
        current = current.parent
    return None


def find_site_root(start_path: Path | None = None) -> Path:
    """Find the site root using 3-tier resolution.

    Resolution order:
      1. FOLIO_SITE_ROOT environment variable (highest priority)
      2. Walk up from start_path (or cwd) looking for .folio/ directory
      3. Global config file site_root key

    Args:
        start_path: Starting path for .folio/ directory walk (defaults to cwd)

    Returns:
        Path to site root

    Raises:
        FileNotFoundError: If .folio/ directory not found by any method
    """
    env_root = os.environ.get("FOLIO_SITE_ROOT")
    if env_root:
        env_path = Path(env_root).resolve()
        if (env_path / ".folio").is_dir():
            return env_path
        raise FileNotFoundError(
            f"FOLIO_SITE_ROOT={env_root} does not contain a .folio/ directory."
        )

    if start_path is None:
        start_path = Path.cwd()
    result = _walk_up_for_folio(Path(start_path))
    if result is not None:
        return result

    global_config = load_global_config()
    site_root_str = global_config.get("site_root")
    if site_root_str:
        global_path = Path(site_root_str).expanduser().resolve()
        if (global_path / ".folio").is_dir():
            return global_path
        raise FileNotFoundError(
            f"Global config site_root={site_root_str} does not contain a .folio/ directory."
        )

    raise FileNotFoundError(
        f"Could not find .folio/ directory starting from {start_path}. "
        f"Run 'folio init' to initialize, set FOLIO_SITE_ROOT, or configure "
        f"site_root in {get_global_config_path()}."
    )


@lru_cache(maxsize=1)
def get_site_root() -> Path:
    """Get the cached site root path."""
    return find_site_root()


def load_site_config(site_root: Path | None = None) -> dict[str, Any]:
    """Load .folio/config.yaml for the site.

    Args:
        site_root: Site root path (uses cached default if not provided)

    Returns:
        Configuration dict (empty if no config file exists)
    """
    if site_root is None:
        site_root = get_site_root()
    return read_config_file(Path(site_root) / ".folio" / "config.yaml")


def get_setting(config: dict[str, Any], key: str, default: Any = None) -> Any:
    """Look up a dotted key (``site.base_url``) in a config dict."""
    current: Any = config
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return default
    return current


def get_paths(site_root: Path | None = None) -> SitePaths:
    """Get all standard paths for the site.

    Relative entries under ``paths:`` in the site config override the
    defaults; absolute entries are used as-is.

    Args:
        site_root: Site root path (uses cached default if not provided)

    Returns:
        SitePaths dataclass with all paths
    """
    if site_root is None:
        site_root = get_site_root()

    site_root = Path(site_root)
    folio_dir = site_root / ".folio"

    overrides = get_setting(load_site_config(site_root), "paths", {}) or {}
    rel = {**DEFAULT_PATHS, **{k: str(v) for k, v in overrides.items() if k in DEFAULT_PATHS}}

    def resolve(key: str) -> Path:
        return site_root / rel[key]

    return SitePaths(
        root=site_root,
        folio_dir=folio_dir,
        config_file=folio_dir / "config.yaml",
        partials=folio_dir / "partials",
        data_dir=resolve("data_dir"),
        projects_json=resolve("projects_json"),
        publications_json=resolve("publications_json"),
        posts_json=resolve("posts_json"),
        post_template=resolve("post_template"),
        posts_output=resolve("posts_output"),
        manifest=folio_dir / "manifest.json",
        index_page=resolve("index_page"),
        dist=resolve("dist"),
    )


@dataclass(frozen=True)
class SiteSettings:
    """Site identity used in generated pages."""

    name: str = DEFAULT_SITE_NAME
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> SiteSettings:
        return cls(
            name=str(get_setting(config, "site.name", DEFAULT_SITE_NAME)),
            base_url=str(get_setting(config, "site.base_url", DEFAULT_BASE_URL)).rstrip("/"),
        )


def get_site_settings(site_root: Path | None = None) -> SiteSettings:
    """Read site name and base URL from the site config."""
    return SiteSettings.from_config(load_site_config(site_root))
