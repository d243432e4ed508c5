"""folio: content pipeline and site tooling for a static academic portfolio."""

__version__ = "0.3.0"
