"""Tests for folio.pages.commands CLI module."""

import json

import pytest
import yaml
from click.testing import CliRunner

from folio.cli import Context
from folio.pages.commands import posts


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def partials(mock_site_root):
    partials_dir = mock_site_root / ".folio" / "partials"
    (partials_dir / "nav.html").write_text('<nav class="navbar">NEW NAV</nav>\n')
    (partials_dir / "footer.html").write_text('<footer class="footer">&copy; {year}</footer>\n')
    (partials_dir / "scripts.html").write_text('    <script src="../js/main.js"></script>\n')
    return partials_dir


def _output_dir(root):
    return root / "blog" / "posts"


def test_generate_all(runner, mock_site_root):
    result = runner.invoke(posts, ["generate"], obj=Context())
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in _output_dir(mock_site_root).iterdir()) == [
        "a.html", "b.html", "c.html",
    ]


def test_generate_uses_site_config(runner, mock_site_root):
    (mock_site_root / ".folio" / "config.yaml").write_text(
        yaml.dump({"site": {"name": "Jane Doe", "base_url": "https://jane.dev"}})
    )
    result = runner.invoke(posts, ["generate", "--slug", "a"], obj=Context())
    assert result.exit_code == 0
    html = (_output_dir(mock_site_root) / "a.html").read_text()
    assert "<title>Post A | Jane Doe</title>" in html
    assert "https://jane.dev/blog/posts/a.html" in html


def test_generate_unknown_slug(runner, mock_site_root):
    result = runner.invoke(posts, ["generate", "--slug", "zzz"], obj=Context())
    assert result.exit_code == 1
    assert "Post not found" in result.output


def test_generate_missing_template(runner, mock_site_root):
    (mock_site_root / "blog" / "post-template.html").unlink()
    result = runner.invoke(posts, ["generate"], obj=Context())
    assert result.exit_code == 1
    assert "Cannot read template" in result.output


def test_generate_strict_fails_on_missing_slot(runner, mock_site_root):
    (mock_site_root / "blog" / "post-template.html").write_text(
        "<html><head></head><body><h1>Blog Post Title</h1></body></html>"
    )
    result = runner.invoke(posts, ["generate"], obj=Context())
    assert result.exit_code == 1
    assert not _output_dir(mock_site_root).exists()


def test_generate_lenient(runner, mock_site_root):
    (mock_site_root / "blog" / "post-template.html").write_text(
        "<html><head></head><body><h1>Blog Post Title</h1></body></html>"
    )
    result = runner.invoke(posts, ["generate", "--lenient"], obj=Context())
    assert result.exit_code == 0
    assert (_output_dir(mock_site_root) / "c.html").exists()


def test_generate_manifest(runner, mock_site_root):
    manifest = mock_site_root / "manifest.json"
    result = runner.invoke(posts, ["generate", "--manifest", str(manifest)], obj=Context())
    assert result.exit_code == 0
    assert json.loads(manifest.read_text()) == ["a.html", "b.html", "c.html"]


def test_generate_manifest_unwritable(runner, mock_site_root):
    blocker = mock_site_root / "blocker"
    blocker.write_text("not a directory")
    result = runner.invoke(
        posts, ["generate", "--manifest", str(blocker / "manifest.json")], obj=Context()
    )
    assert result.exit_code == 1
    assert "Cannot write manifest" in result.output
    assert (_output_dir(mock_site_root) / "a.html").exists()


def test_generate_dry_run(runner, mock_site_root):
    result = runner.invoke(posts, ["generate"], obj=Context(dry_run=True))
    assert result.exit_code == 0
    assert not _output_dir(mock_site_root).exists()


def test_generate_bad_posts_file(runner, mock_site_root):
    (mock_site_root / "js" / "data" / "blog-posts.json").write_text("{")
    result = runner.invoke(posts, ["generate"], obj=Context())
    assert result.exit_code == 1
    assert "Failed to load posts" in result.output


def test_refresh_without_partials(runner, mock_site_root):
    result = runner.invoke(posts, ["refresh"], obj=Context())
    assert result.exit_code == 1
    assert "Missing partial" in result.output


def test_refresh(runner, mock_site_root, partials):
    runner.invoke(posts, ["generate"], obj=Context())
    result = runner.invoke(posts, ["refresh"], obj=Context())
    assert result.exit_code == 0
    assert "Successfully updated 3 of 3" in result.output
    html = (_output_dir(mock_site_root) / "a.html").read_text()
    assert "NEW NAV" in html
    assert "old.js" not in html
    assert "{year}" not in html


def test_refresh_missing_pages_dir(runner, mock_site_root, partials):
    result = runner.invoke(
        posts, ["refresh", "--dir", str(mock_site_root / "nowhere")], obj=Context()
    )
    assert result.exit_code == 1
    assert "Pages directory not found" in result.output


def test_relink(runner, mock_site_root):
    (mock_site_root / ".folio" / "config.yaml").write_text(yaml.dump({
        "rewrite": {"replacements": [{"old": "Old footer", "new": "Footer 2025"}]},
    }))
    runner.invoke(posts, ["generate"], obj=Context())
    result = runner.invoke(posts, ["relink"], obj=Context())
    assert result.exit_code == 0
    assert "Updated 3 out of 3" in result.output
    assert "Footer 2025" in (_output_dir(mock_site_root) / "b.html").read_text()


def test_relink_no_rules(runner, mock_site_root):
    result = runner.invoke(posts, ["relink"], obj=Context())
    assert result.exit_code == 0
    assert "No replacements configured" in result.output


def test_relink_invalid_rule(runner, mock_site_root):
    (mock_site_root / ".folio" / "config.yaml").write_text(yaml.dump({
        "rewrite": {"replacements": [{"old": "only-old"}]},
    }))
    result = runner.invoke(posts, ["relink"], obj=Context())
    assert result.exit_code == 1
    assert "Invalid replacement rule" in result.output
