"""Standalone blog post pages: generation and in-place rewriting."""

from folio.pages.generator import GenerationReport, generate_post_pages, render_post_page
from folio.pages.template import DEFAULT_SLOTS, PostTemplate, Slot, TemplateSlotError

__all__ = [
    "DEFAULT_SLOTS",
    "GenerationReport",
    "PostTemplate",
    "Slot",
    "TemplateSlotError",
    "generate_post_pages",
    "render_post_page",
]
