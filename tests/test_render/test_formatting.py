"""Tests for folio.render.formatting."""

from datetime import date

import pytest

from folio.content.models import BlogPost, Publication
from folio.render.formatting import (
    escape,
    format_long_date,
    read_time_or_default,
    sort_posts_by_date,
    sort_publications_by_year,
    tag_list,
)


def _post(slug, when, **kwargs):
    return BlogPost(title=slug.upper(), slug=slug, date=when, **kwargs)


def _pub(title, year):
    return Publication(title=title, authors="A", journal="J", year=year)


@pytest.mark.parametrize("value,expected", [
    ("2023-06-15", "June 15, 2023"),
    ("2024-01-01T08:00:00Z", "January 1, 2024"),
    (date(2022, 12, 9), "December 9, 2022"),
    ("not-a-date", "not-a-date"),
    ("", ""),
])
def test_format_long_date(value, expected):
    assert format_long_date(value) == expected


def test_escape_markup_and_quotes():
    assert escape('<b>"x" & y</b>') == "&lt;b&gt;&quot;x&quot; &amp; y&lt;/b&gt;"


def test_read_time_default():
    assert read_time_or_default(_post("a", "2023-01-01")) == "5 min read"
    assert read_time_or_default(_post("a", "2023-01-01", read_time="8 min read")) == "8 min read"


def test_sort_posts_newest_first():
    posts = [_post("a", "2023-01-01"), _post("b", "2024-01-01"), _post("c", "2022-01-01")]
    assert [p.slug for p in sort_posts_by_date(posts)] == ["b", "a", "c"]


def test_sort_posts_invalid_dates_last_and_stable():
    posts = [
        _post("x", "garbage"),
        _post("a", "2023-01-01"),
        _post("y", ""),
        _post("b", "2024-01-01"),
    ]
    assert [p.slug for p in sort_posts_by_date(posts)] == ["b", "a", "x", "y"]


def test_sort_posts_equal_dates_keep_order():
    posts = [_post("first", "2023-01-01"), _post("second", "2023-01-01")]
    assert [p.slug for p in sort_posts_by_date(posts)] == ["first", "second"]


def test_sort_posts_does_not_mutate_input():
    posts = [_post("a", "2022-01-01"), _post("b", "2024-01-01")]
    sort_posts_by_date(posts)
    assert [p.slug for p in posts] == ["a", "b"]


def test_sort_publications_stable_for_ties():
    pubs = [_pub("P1", 2021), _pub("P2", 2023), _pub("P3", 2023), _pub("P4", 2020)]
    assert [p.title for p in sort_publications_by_year(pubs)] == ["P2", "P3", "P1", "P4"]


def test_tag_list():
    assert tag_list([]) == ""
    assert tag_list(["a", "<b>"], "blog-tag", "\n") == (
        '<span class="blog-tag">a</span>\n<span class="blog-tag">&lt;b&gt;</span>'
    )
