"""Core utilities for folio."""

from folio.core.config import (
    SitePaths,
    SiteSettings,
    get_paths,
    get_site_root,
    get_site_settings,
    load_site_config,
)
from folio.core.fileio import safe_write_json, safe_write_text

__all__ = [
    # Config
    "SitePaths",
    "SiteSettings",
    "get_site_root",
    "get_paths",
    "get_site_settings",
    "load_site_config",
    # File writing
    "safe_write_text",
    "safe_write_json",
]
