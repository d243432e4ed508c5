"""
Post template with named, validated slots.

The blog post template is an ordinary HTML page containing known placeholder
snippets (a "Blog Post Title" heading, a calendar metadata line, an empty tag
container and so on). Each snippet is a :class:`Slot`. Filling a template
checks every slot it is asked to fill; a slot whose snippet is not in the
document raises :class:`TemplateSlotError` in strict mode, or is skipped with
a warning in lenient mode.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class TemplateSlotError(ValueError):
    """Raised when a template lacks a slot it is asked to fill."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Template is missing slot(s): {', '.join(missing)}")


@dataclass(frozen=True)
class Slot:
    """A named placeholder region of the template.

    ``pattern`` matches the whole region that gets replaced. With
    ``replace_all`` every match is replaced, otherwise only the first.
    """

    name: str
    pattern: re.Pattern[str]
    replace_all: bool = False

    def present_in(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _meta_line(icon: str) -> re.Pattern[str]:
    return re.compile(rf'<span><i class="far {icon}"></i>[^<]*</span>')


DEFAULT_SLOTS: tuple[Slot, ...] = (
    Slot("page_title", re.compile(r"<title>[^<]*</title>")),
    Slot("title", re.compile(r"Blog Post Title"), replace_all=True),
    Slot("date", _meta_line("fa-calendar")),
    Slot("read_time", _meta_line("fa-clock")),
    Slot("category", _meta_line("fa-folder")),
    Slot("tags", re.compile(r'<div class="blog-tags">.*?</div>', re.DOTALL)),
    Slot("content", re.compile(re.escape("<!-- Blog post content will be dynamically inserted here -->"))),
    Slot("navigation", re.compile(r'<div class="blog-navigation">.*?</div>', re.DOTALL)),
    Slot("head_end", re.compile(r"</head>")),
)


class PostTemplate:
    """An HTML post template and its slots."""

    def __init__(self, text: str, slots: tuple[Slot, ...] = DEFAULT_SLOTS):
        self.text = text
        self.slots = {slot.name: slot for slot in slots}

    @classmethod
    def from_file(cls, path: Path, slots: tuple[Slot, ...] = DEFAULT_SLOTS) -> PostTemplate:
        return cls(Path(path).read_text(encoding="utf-8"), slots)

    def missing_slots(self) -> list[str]:
        """Names of slots whose snippet does not occur in the template."""
        return [name for name, slot in self.slots.items() if not slot.present_in(self.text)]

    def fill(self, values: Mapping[str, str], strict: bool = True) -> str:
        """Substitute *values* into their slots, in slot definition order.

        Slots are matched against the original template text, so a value
        can never be mistaken for a later slot's snippet.

        Args:
            values: Replacement HTML keyed by slot name
            strict: Raise on missing slots instead of skipping them

        Raises:
            KeyError: If *values* names an unknown slot
            TemplateSlotError: In strict mode, if a slot is absent
        """
        unknown = [name for name in values if name not in self.slots]
        if unknown:
            raise KeyError(f"Unknown slot(s): {', '.join(unknown)}")

        requested = [name for name in self.slots if name in values]
        missing = [name for name in requested if not self.slots[name].present_in(self.text)]
        if missing:
            if strict:
                raise TemplateSlotError(missing)
            logger.warning("Template slot(s) not found, leaving unchanged: %s", ", ".join(missing))

        # Collect every region first, then splice, so substituted content is
        # never rescanned by another slot.
        regions: list[tuple[int, int, str]] = []
        for name in requested:
            if name in missing:
                continue
            slot = self.slots[name]
            for match in slot.pattern.finditer(self.text):
                regions.append((match.start(), match.end(), values[name]))
                if not slot.replace_all:
                    break

        regions.sort(key=lambda r: r[0])
        out: list[str] = []
        pos = 0
        for start, end, value in regions:
            if start < pos:
                # Overlapping snippets: the earlier region wins
                continue
            out.append(self.text[pos:start])
            out.append(value)
            pos = end
        out.append(self.text[pos:])
        return "".join(out)
