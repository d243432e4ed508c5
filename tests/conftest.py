"""Shared test fixtures for folio package."""

import json

import pytest

SAMPLE_PROJECTS = {
    "projects": [
        {
            "title": "Bioacoustic Monitoring",
            "description": "Passive acoustic survey of forest birds.",
            "category": "research",
            "year": "2022",
            "image": "bioacoustics.jpg",
            "link": "https://example.org/bioacoustics",
            "tags": ["acoustics", "birds"],
            "technologies": ["Python", "R"],
        },
        {
            "title": "Camera Trap Atlas",
            "description": "Mapping mammal detections.",
            "category": "conservation",
            "year": "2023",
            "tags": [],
            "technologies": [],
        },
    ]
}

SAMPLE_PUBLICATIONS = {
    "publications": [
        {
            "title": "Older Paper",
            "authors": "Adhith M K, A. Colleague",
            "journal": "Ecological Informatics",
            "year": 2021,
            "volume": "12",
            "issue": "3",
            "pages": "100-110",
            "doi": "10.1000/older",
        },
        {
            "title": "Newer Paper",
            "authors": "Adhith M K",
            "journal": "Biodiversity Letters",
            "year": 2023,
            "pdf": "papers/newer.pdf",
        },
        {
            "title": "Preprint Paper",
            "authors": ["Adhith M K", "B. Other"],
            "journal": "bioRxiv",
            "year": "2023",
            "is_preprint": True,
            "preprint_link": "https://biorxiv.org/x",
        },
    ]
}

SAMPLE_POSTS = {
    "posts": [
        {
            "title": "Post A",
            "slug": "a",
            "date": "2023-01-01",
            "excerpt": "About A.",
            "content": "<p>Body of A</p>",
            "category": "Fieldwork",
            "tags": ["birds", "kerala"],
            "featured": True,
            "read_time": "4 min read",
        },
        {
            "title": "Post B",
            "slug": "b",
            "date": "2024-01-01",
            "excerpt": "About B.",
            "content": "<p>Body of B</p>",
            "category": "Methods",
            "tags": ["r"],
            "featured": False,
            "image": "images/b.jpg",
        },
        {
            "title": "Post C",
            "slug": "c",
            "date": "2022-01-01",
            "excerpt": "About C.",
            "content": "<p>Body of C</p>",
            "category": "Fieldwork",
            "tags": [],
            "featured": True,
        },
    ]
}

POST_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Blog Post Title | Adhith M K</title>
    <meta name="description" content="Blog Post Title | Adhith M K">
</head>
<body>
    <nav class="navbar"><a href="../index.html">Old nav</a></nav>
    <article class="blog-post">
        <h1 class="blog-post-title">Blog Post Title</h1>
        <div class="blog-post-meta">
            <span><i class="far fa-calendar"></i> June 18, 2025</span>
            <span><i class="far fa-clock"></i> 5 min read</span>
            <span><i class="far fa-folder"></i> Category</span>
        </div>
        <div class="blog-tags">
            <span class="blog-tag">Tag</span>
        </div>
        <div class="blog-post-content">
            <!-- Blog post content will be dynamically inserted here -->
        </div>
        <div class="blog-navigation">
            <a href="#" class="btn btn-outline">Previous</a>
        </div>
    </article>
    <footer class="footer"><p>Old footer</p></footer>
    <script src="../js/old.js"></script>
</body>
</html>
"""

INDEX_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Adhith M K</title></head>
<body>
    <section id="projects"><div id="projects-container" class="projects-grid"><p>Loading...</p></div></section>
    <section id="publications"><div class="publications-list"></div></section>
    <section id="blog"><div class="blog-grid"></div></section>
</body>
</html>
"""


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory."""
    return tmp_path


@pytest.fixture
def sample_posts_data():
    return json.loads(json.dumps(SAMPLE_POSTS))


@pytest.fixture
def post_template_text():
    return POST_TEMPLATE


@pytest.fixture
def mock_site_root(tmp_path, monkeypatch):
    """Create a mock site with .folio/, Content Store files and a post template."""
    folio_dir = tmp_path / ".folio"
    folio_dir.mkdir()
    (folio_dir / "partials").mkdir()

    data_dir = tmp_path / "js" / "data"
    data_dir.mkdir(parents=True)
    (data_dir / "projects.json").write_text(json.dumps(SAMPLE_PROJECTS, indent=2))
    (data_dir / "publications.json").write_text(json.dumps(SAMPLE_PUBLICATIONS, indent=2))
    (data_dir / "blog-posts.json").write_text(json.dumps(SAMPLE_POSTS, indent=2))

    blog_dir = tmp_path / "blog"
    blog_dir.mkdir()
    (blog_dir / "post-template.html").write_text(POST_TEMPLATE)
    (tmp_path / "index.html").write_text(INDEX_PAGE)

    # Mock get_site_root to return our tmp_path
    from folio.core import config

    # Clear the lru_cache first
    config.get_site_root.cache_clear()
    monkeypatch.setattr(config, "get_site_root", lambda: tmp_path)

    return tmp_path


@pytest.fixture
def write_posts(mock_site_root):
    """Factory fixture replacing the posts data file."""

    def _write(posts: list[dict]) -> None:
        path = mock_site_root / "js" / "data" / "blog-posts.json"
        path.write_text(json.dumps({"posts": posts}, indent=2))

    return _write
