"""Minify and copy the site into a distributable tree."""

from folio.build.pipeline import BuildConfig, BuildError, BuildReport, build_site

__all__ = ["BuildConfig", "BuildError", "BuildReport", "build_site"]
