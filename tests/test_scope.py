"""Tests for template scope construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import write_post
from wolfdog.core.models import PostSettings
from wolfdog.core.posts import read_all_posts
from wolfdog.rendering.scope import all_pages_scope, post_page_scope, post_scope

TAG = "Wolfdog Generator 1.0.0"


def _only_post(tmp_path: Path, **metadata):
    write_post(tmp_path, "hello", "2020-01-01T23:30:00-05:00", "Hello", **metadata)
    [post] = read_all_posts(tmp_path)
    return post


def test_post_scope_fields(tmp_path: Path) -> None:
    post = _only_post(tmp_path, additionalValues={"mood": "howling"})

    scope = post_scope(post, PostSettings(), TAG)

    assert scope == {
        "slug": "hello",
        "title": "Hello",
        "showPubDate": True,
        "pubDate": "January 1, 2020",
        "pubDateIso": "2020-01-01T23:30:00-05:00",
        "pubDateRfc": "Wed, 01 Jan 2020 23:30:00 -0500",
        "content": "<p>Body of hello</p>",
        "additionalValues": {"mood": "howling"},
        "generatorTag": TAG,
    }


def test_show_pub_date_string_overrides_display(tmp_path: Path) -> None:
    post = _only_post(tmp_path, showPubDate="New Year's Day")

    scope = post_scope(post, PostSettings(), TAG)

    assert scope["showPubDate"] is True
    assert scope["pubDate"] == "New Year's Day"
    assert scope["pubDateIso"] == "2020-01-01T23:30:00-05:00"


def test_show_pub_date_false_hides_date(tmp_path: Path) -> None:
    post = _only_post(tmp_path, showPubDate=False)

    scope = post_scope(post, PostSettings(), TAG)

    assert scope["showPubDate"] is False
    assert scope["pubDate"] is None


@pytest.mark.parametrize(
    ("fmt", "locale", "expected"),
    [
        ("long", "de_DE", "1. Januar 2020"),
        ("yyyy-MM-dd", "en_US", "2020-01-01"),
        ("short", "en_US", "1/1/20"),
    ],
)
def test_pub_date_format_and_locale(tmp_path: Path, fmt: str, locale: str, expected: str) -> None:
    post = _only_post(tmp_path)
    settings = PostSettings(pubDateFormat=fmt, pubDateLocale=locale)

    assert post_scope(post, settings, TAG)["pubDate"] == expected


def test_post_page_scope_wraps_post() -> None:
    scope = post_page_scope({"slug": "s"}, {"site": "x"}, TAG)

    assert scope == {"post": {"slug": "s"}, "additionalValues": {"site": "x"}, "generatorTag": TAG}


def test_all_pages_scope_keeps_post_order(tmp_path: Path) -> None:
    write_post(tmp_path, "old", "2019-01-01T00:00:00Z")
    write_post(tmp_path, "new", "2021-01-01T00:00:00Z")
    posts = read_all_posts(tmp_path)

    scope = all_pages_scope(posts, PostSettings(), None, TAG)

    assert [p["slug"] for p in scope["allPosts"]] == ["new", "old"]
    assert scope["additionalValues"] is None
    assert scope["generatorTag"] == TAG
