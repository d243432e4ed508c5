"""Tests for folio.core.fileio module."""

import json

import pytest

from folio.core.fileio import safe_write_json, safe_write_text


def test_safe_write_text_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "page.html"
    result = safe_write_text(target, "<p>hi</p>")
    assert result == target
    assert target.read_text() == "<p>hi</p>"


def test_safe_write_text_replaces_existing(tmp_path):
    target = tmp_path / "page.html"
    target.write_text("old")
    safe_write_text(target, "new")
    assert target.read_text() == "new"
    # No temp files left behind
    assert [p.name for p in tmp_path.iterdir()] == ["page.html"]


def test_safe_write_json(tmp_path):
    target = tmp_path / "manifest.json"
    safe_write_json(target, ["a.html", "b.html"])
    assert json.loads(target.read_text()) == ["a.html", "b.html"]
    assert target.read_text().endswith("\n")


def test_safe_write_json_keeps_unicode(tmp_path):
    target = tmp_path / "data.json"
    safe_write_json(target, {"name": "Ādhith"})
    assert "Ādhith" in target.read_text(encoding="utf-8")


def test_safe_write_json_unserializable(tmp_path):
    with pytest.raises(ValueError, match="Cannot serialize"):
        safe_write_json(tmp_path / "bad.json", {"x": object()})
    assert not (tmp_path / "bad.json").exists()
