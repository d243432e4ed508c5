"""
Build the distributable site tree.

Minifies the configured CSS and JS files into ``dist/`` and copies every
other asset verbatim. Each file is handled on its own: a failure is logged
and recorded, and the build moves on.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import rcssmin
import rjsmin
from rich.console import Console

from folio.core.config import get_setting

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_CSS_FILES = (
    "base.css",
    "layout.css",
    "components.css",
    "sections.css",
    "media.css",
    "custom.css",
    "map.css",
)
DEFAULT_JS_FILES = ("main.js", "blog.js", "map.js", "contact.js")
DEFAULT_ASSETS = ("images", "blog", "index.html")


class BuildError(RuntimeError):
    """Raised when the build cannot start at all."""


def minify_css(text: str) -> str:
    return rcssmin.cssmin(text)


def minify_js(text: str) -> str:
    return rjsmin.jsmin(text)


@dataclass(frozen=True)
class BuildConfig:
    """What to minify and copy, relative to the site root."""

    css_dir: str = "css"
    css_files: tuple[str, ...] = DEFAULT_CSS_FILES
    js_dir: str = "js"
    js_files: tuple[str, ...] = DEFAULT_JS_FILES
    assets: tuple[str, ...] = DEFAULT_ASSETS
    dist: str = "dist"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> BuildConfig:
        build = get_setting(config, "build", {}) or {}
        return cls(
            css_dir=str(build.get("css_dir", cls.css_dir)),
            css_files=tuple(build.get("css_files", DEFAULT_CSS_FILES)),
            js_dir=str(build.get("js_dir", cls.js_dir)),
            js_files=tuple(build.get("js_files", DEFAULT_JS_FILES)),
            assets=tuple(build.get("assets", DEFAULT_ASSETS)),
            dist=str(get_setting(config, "paths.dist", cls.dist)),
        )


@dataclass
class FileResult:
    """A minified file and its size change."""

    source: Path
    dest: Path
    original_size: int
    output_size: int

    @property
    def reduction(self) -> float:
        """Percentage saved (0 for empty input)."""
        if not self.original_size:
            return 0.0
        return (self.original_size - self.output_size) / self.original_size * 100


@dataclass
class BuildReport:
    """Outcome of a build."""

    minified: list[FileResult] = field(default_factory=list)
    copied: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def _minify_files(
    root: Path,
    src_dir: str,
    files: tuple[str, ...],
    dist_dir: Path,
    minifier: Callable[[str], str],
    report: BuildReport,
    dry_run: bool,
) -> None:
    for name in files:
        src_path = root / src_dir / name
        dest_path = dist_dir / name
        try:
            text = src_path.read_text(encoding="utf-8")
            output = minifier(text)
            result = FileResult(
                source=src_path,
                dest=dest_path,
                original_size=len(text.encode("utf-8")),
                output_size=len(output.encode("utf-8")),
            )
            if not dry_run:
                dest_path.parent.mkdir(parents=True, exist_ok=True)
                dest_path.write_text(output, encoding="utf-8")
            report.minified.append(result)
            console.print(
                f"  [green]✓[/green] Minified: {name} "
                f"({result.original_size / 1024:.2f}KB → {result.output_size / 1024:.2f}KB, "
                f"{result.reduction:.2f}% reduction)"
            )
        except (OSError, ValueError) as e:
            logger.error("Error processing %s: %s", src_path, e)
            console.print(f"  [red]✗ {name}: {e}[/red]")
            report.failed.append((str(src_path), str(e)))


def _copy_assets(
    root: Path,
    assets: tuple[str, ...],
    dist: Path,
    report: BuildReport,
    dry_run: bool,
) -> None:
    for asset in assets:
        src = root / asset
        dest = dist / asset
        try:
            if not src.exists():
                raise FileNotFoundError(f"No such file or directory: {src}")
            if not dry_run:
                if src.is_dir():
                    shutil.copytree(src, dest, dirs_exist_ok=True)
                else:
                    dest.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copy2(src, dest)
            report.copied.append(asset)
            console.print(f"  [green]✓[/green] Copied: {asset} → {dest}")
        except OSError as e:
            logger.error("Error copying %s: %s", src, e)
            console.print(f"  [red]✗ {asset}: {e}[/red]")
            report.failed.append((str(src), str(e)))


def build_site(
    root: Path,
    config: BuildConfig | None = None,
    clean: bool = False,
    dry_run: bool = False,
) -> BuildReport:
    """Minify CSS/JS and copy assets into the dist directory.

    Args:
        root: Site root
        config: Build configuration (defaults to the standard site layout)
        clean: Remove the dist directory first
        dry_run: Report without writing

    Raises:
        BuildError: If the site root does not exist
    """
    root = Path(root)
    if not root.is_dir():
        raise BuildError(f"Site root not found: {root}")

    config = config or BuildConfig()
    dist = root / config.dist
    report = BuildReport()

    console.print("Starting build process...")

    if clean and dist.exists() and not dry_run:
        shutil.rmtree(dist)
        console.print(f"  [yellow]Removed[/yellow] {dist}")

    css_dist = dist / config.css_dir
    js_dist = dist / config.js_dir
    if not dry_run:
        for directory in (css_dist, js_dist):
            directory.mkdir(parents=True, exist_ok=True)

    console.print("\n[bold]Minifying CSS files...[/bold]")
    _minify_files(root, config.css_dir, config.css_files, css_dist, minify_css, report, dry_run)

    console.print("\n[bold]Minifying JS files...[/bold]")
    _minify_files(root, config.js_dir, config.js_files, js_dist, minify_js, report, dry_run)

    console.print("\n[bold]Copying other assets...[/bold]")
    _copy_assets(root, config.assets, dist, report, dry_run)

    return report
