"""
Rewrite already-generated blog pages in place.

Two transforms are provided:

- chrome refresh: swap the navbar and footer for the current partials and
  rebuild the script block at the end of ``<body>``
- link replacements: configured literal or regex substitutions (profile
  URLs, e-mail addresses, icon classes)

Both run file by file; a file that cannot be read, decoded or written is
logged and skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from rich.console import Console

from folio.core.fileio import safe_write_text

console = Console()
logger = logging.getLogger(__name__)

NAV_PATTERN = re.compile(r"<nav[\s>].*?</nav>", re.DOTALL)
FOOTER_PATTERN = re.compile(r"<footer[\s>].*?</footer>", re.DOTALL)
SCRIPT_PATTERN = re.compile(r"[ \t]*<script\b.*?</script>[ \t]*\n?", re.DOTALL)

PARTIAL_NAMES = ("nav", "footer", "scripts")


@dataclass(frozen=True)
class Replacement:
    """One substitution rule."""

    old: str
    new: str
    is_regex: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Replacement:
        if "old" not in data or "new" not in data:
            raise ValueError(f"Replacement needs 'old' and 'new' keys: {data!r}")
        rule = cls(str(data["old"]), str(data["new"]), bool(data.get("is_regex", False)))
        if rule.is_regex:
            try:
                re.compile(rule.old)
            except re.error as e:
                raise ValueError(f"Invalid replacement pattern {rule.old!r}: {e}") from e
        return rule

    def apply(self, text: str) -> tuple[str, bool]:
        if self.is_regex:
            pattern = re.compile(self.old, re.DOTALL)
            if not pattern.search(text):
                return text, False
            return pattern.sub(lambda _m: self.new, text, count=1), True
        if self.old not in text:
            return text, False
        return text.replace(self.old, self.new), True


def apply_replacements(text: str, replacements: Iterable[Replacement]) -> tuple[str, bool]:
    """Apply every rule in order.

    Returns:
        (new_text, changed)
    """
    changed = False
    for rule in replacements:
        text, hit = rule.apply(text)
        changed = changed or hit
    return text, changed


def expand_partial(text: str, year: int | None = None) -> str:
    """Expand the ``{year}`` token used in footers."""
    return text.replace("{year}", str(year if year is not None else datetime.now().year))


def load_partials(partials_dir: Path) -> dict[str, str]:
    """Read nav.html, footer.html and scripts.html from *partials_dir*.

    Raises:
        FileNotFoundError: If any partial is missing
    """
    partials = {}
    for name in PARTIAL_NAMES:
        path = Path(partials_dir) / f"{name}.html"
        if not path.is_file():
            raise FileNotFoundError(f"Missing partial: {path}")
        partials[name] = expand_partial(path.read_text(encoding="utf-8"))
    return partials


def refresh_chrome(text: str, nav_html: str, footer_html: str, scripts_html: str) -> str:
    """Replace navbar and footer and rebuild the trailing script block."""
    text = NAV_PATTERN.sub(lambda _m: nav_html.strip(), text, count=1)
    text = FOOTER_PATTERN.sub(lambda _m: footer_html.strip(), text, count=1)
    text = SCRIPT_PATTERN.sub("", text)
    return text.replace("</body>", f"{scripts_html.rstrip()}\n</body>", 1)


@dataclass
class RewriteReport:
    """Outcome of rewriting a directory of pages."""

    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.updated) + len(self.unchanged) + len(self.failed)


def rewrite_pages(
    directory: Path,
    transform: Callable[[str], str],
    dry_run: bool = False,
) -> RewriteReport:
    """Run *transform* over every ``*.html`` file in *directory*.

    Files whose text does not change are not rewritten. A missing
    directory is recorded as a single failure.
    """
    report = RewriteReport()
    directory = Path(directory)
    if not directory.is_dir():
        logger.error("Pages directory not found: %s", directory)
        console.print(f"[red]Pages directory not found: {directory}[/red]")
        report.failed.append((str(directory), "pages directory not found"))
        return report

    files = sorted(directory.glob("*.html"))
    console.print(f"Found {len(files)} page(s) in {directory}")

    for path in files:
        try:
            original = path.read_text(encoding="utf-8")
            updated = transform(original)
            if updated == original:
                report.unchanged.append(path.name)
                continue
            if dry_run:
                console.print(f"  [dim]Would update: {path.name}[/dim]")
            else:
                safe_write_text(path, updated)
                console.print(f"  [green]Updated:[/green] {path.name}")
            report.updated.append(path.name)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error updating %s: %s", path, e)
            console.print(f"  [red]✗ {path.name}: {e}[/red]")
            report.failed.append((path.name, str(e)))

    return report
