"""Post discovery, pairing and metadata parsing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from ..errors import PostMetadataError, PostPairingError, SiteIOError
from .manifest import format_validation_error
from .models import PostMetadata, SitePost

logger = logging.getLogger(__name__)

CONTENT_EXTENSION = ".html"
METADATA_EXTENSION = ".json"

MISSING_CONTENT = "No content file found for posts"
MISSING_METADATA = "No metadata file found for posts"
UNRECOGNIZED = "Unrecognized post files"
SLUG_COLLISION = "Conflicting post slugs"


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every file below ``root`` in lexical order, depth-first.

    Symlinked subdirectories are skipped. Yields nothing when ``root`` does
    not exist.
    """
    if not root.is_dir():
        return

    stack = [root]
    while stack:
        current = stack.pop()
        children = sorted(current.iterdir(), key=lambda p: p.name)
        subdirs = []
        for child in children:
            if child.is_dir():
                if child.is_symlink():
                    logger.info(f"Skipping symlinked directory: {child}")
                    continue
                subdirs.append(child)
            else:
                yield child
        stack.extend(reversed(subdirs))


def _relative(path: Path, root: Path) -> str:
    return path.relative_to(root).as_posix()


def pair_post_files(post_dir: Path) -> list[tuple[str, Path, Path]]:
    """Group post files into ``(slug, content_path, metadata_path)`` triples.

    Every problem is collected before failing.

    Raises:
        PostPairingError: On orphans, unrecognized files or slug collisions
    """
    if not post_dir.is_dir():
        raise PostPairingError({"Post directory not found": [str(post_dir)]})

    content: dict[str, list[Path]] = {}
    metadata: dict[str, list[Path]] = {}
    problems: dict[str, list[str]] = {}

    for path in iter_files(post_dir):
        suffix = path.suffix.lower()
        if suffix == CONTENT_EXTENSION:
            content.setdefault(path.stem, []).append(path)
        elif suffix == METADATA_EXTENSION:
            metadata.setdefault(path.stem, []).append(path)
        else:
            problems.setdefault(UNRECOGNIZED, []).append(_relative(path, post_dir))

    for slug, paths in metadata.items():
        if slug not in content:
            problems.setdefault(MISSING_CONTENT, []).extend(
                _relative(p, post_dir) for p in paths
            )
    for slug, paths in content.items():
        if slug not in metadata:
            problems.setdefault(MISSING_METADATA, []).extend(
                _relative(p, post_dir) for p in paths
            )

    for slug in content.keys() | metadata.keys():
        paths = content.get(slug, []) + metadata.get(slug, [])
        if len(content.get(slug, [])) > 1 or len(metadata.get(slug, [])) > 1:
            listing = ", ".join(_relative(p, post_dir) for p in paths)
            problems.setdefault(SLUG_COLLISION, []).append(f"{slug} ({listing})")
    if SLUG_COLLISION in problems:
        problems[SLUG_COLLISION].sort()

    if problems:
        for category, items in problems.items():
            logger.error(f"❌ {category}: {', '.join(items)}")
        raise PostPairingError(problems)

    return [(slug, paths[0], metadata[slug][0]) for slug, paths in content.items()]


def parse_post_metadata(slug: str, metadata_path: Path) -> PostMetadata:
    """Read and validate one post's metadata file."""
    try:
        raw = metadata_path.read_bytes()
    except OSError as e:
        raise SiteIOError(metadata_path, str(e)) from e

    try:
        return PostMetadata.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"❌ Error reading metadata for post: {slug}")
        raise PostMetadataError(slug, format_validation_error(e)) from e


def read_all_posts(post_dir: Path) -> list[SitePost]:
    """Discover, validate and order every post under ``post_dir``.

    Args:
        post_dir: Directory holding ``<slug>.html``/``<slug>.json`` pairs,
            possibly nested in subdirectories

    Returns:
        Posts sorted by publication date, most recent first
    """
    logger.debug(f"Scanning posts in {post_dir}")

    posts = [
        SitePost(
            slug=slug,
            content_path=content_path,
            metadata_path=metadata_path,
            metadata=parse_post_metadata(slug, metadata_path),
        )
        for slug, content_path, metadata_path in pair_post_files(post_dir)
    ]

    # list.sort is stable, so equal dates keep discovery order
    posts.sort(key=lambda post: post.metadata.pub_date, reverse=True)

    logger.info(f"Found {len(posts)} post(s)")
    return posts
