from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from tests.helpers import write, write_post
from wolfdog import __version__
from wolfdog.settings import get_settings

POST_TEMPLATE = """<html><head><title>{{ post.title }}</title></head>
<body>{% include "header.html" %}
{% if post.showPubDate %}<time datetime="{{ post.pubDateIso }}">{{ post.pubDate }}</time>{% endif %}
{{ post.content }}
<footer>{{ generatorTag }}</footer></body></html>
"""

INDEX_TEMPLATE = """{% include "header.html" %}
<ul>
{% for post in allPosts %}<li><a href="/posts/{{ post.slug }}/">{{ post.title }}</a></li>
{% endfor %}</ul>
"""


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_site(tmp_path: Path) -> Callable[..., Path]:
    """Create a small, valid site; manifest fields can be overridden."""

    def _make(**manifest_overrides: Any) -> Path:
        site = tmp_path / "site"
        manifest = {"version": __version__, **manifest_overrides}
        write(site / "wolfdog.json", json.dumps(manifest))

        write_post(site / "posts", "first", "2020-01-01T09:00:00+00:00", "First post")
        write_post(site / "posts", "second", "2021-06-01T09:00:00+02:00", "Second post")
        write(site / "static" / "css" / "site.css", "body { color: black; }\n")
        write(site / "templates" / "post.html", POST_TEMPLATE)
        write(site / "templates" / "partials" / "header.html", "<header>My blog</header>")
        write(site / "templates" / "additionalPages" / "index.html.jinja", INDEX_TEMPLATE)
        return site

    return _make
