"""Template scope construction."""

from __future__ import annotations

import logging
from datetime import datetime
from email.utils import format_datetime
from typing import Any

from babel.dates import format_date
from pydantic import JsonValue

from ..core.models import PostSettings, SitePost
from .io import read_text

logger = logging.getLogger(__name__)


def format_pub_date(pub_date: datetime, settings: PostSettings) -> str:
    """Format a publication date for display in the post's own UTC offset."""
    return format_date(
        pub_date.date(),
        format=settings.pub_date_format,
        locale=settings.pub_date_locale,
    )


def display_pub_date(post: SitePost, settings: PostSettings) -> str | None:
    """Return the date text a template should show, or None to hide it."""
    override = post.metadata.show_pub_date
    if override is False:
        return None
    if override is not None:
        return override
    return format_pub_date(post.metadata.pub_date, settings)


def post_scope(post: SitePost, settings: PostSettings, generator_tag: str) -> dict[str, Any]:
    """Build the per-post scope exposed to templates."""
    metadata = post.metadata
    return {
        "slug": post.slug,
        "title": metadata.title,
        "showPubDate": metadata.show_pub_date is not False,
        "pubDate": display_pub_date(post, settings),
        "pubDateIso": metadata.pub_date.isoformat(),
        "pubDateRfc": format_datetime(metadata.pub_date),
        "content": read_text(post.content_path),
        "additionalValues": metadata.additional_values,
        "generatorTag": generator_tag,
    }


def post_page_scope(
    post: dict[str, Any], additional_values: JsonValue, generator_tag: str
) -> dict[str, Any]:
    """Wrap a per-post scope for the post template and output-path template."""
    return {
        "post": post,
        "additionalValues": additional_values,
        "generatorTag": generator_tag,
    }


def all_pages_scope(
    posts: list[SitePost],
    settings: PostSettings,
    additional_values: JsonValue,
    generator_tag: str,
) -> dict[str, Any]:
    """Build the scope shared by every additional page.

    Args:
        posts: Posts in newest-first order
        settings: Post settings for date formatting
        additional_values: Manifest-wide additional values
        generator_tag: Generator identification string

    Returns:
        Scope with ``allPosts`` in the same order as ``posts``
    """
    logger.debug(f"Building page scope for {len(posts)} post(s)")
    return {
        "allPosts": [post_scope(post, settings, generator_tag) for post in posts],
        "additionalValues": additional_values,
        "generatorTag": generator_tag,
    }
