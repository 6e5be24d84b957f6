"""One end-to-end site generation run."""

from __future__ import annotations

import logging
from pathlib import Path

from . import GENERATOR_TAG, __version__
from .core.manifest import check_manifest_version, load_manifest
from .core.models import BuildResult
from .core.paths import check_paths
from .core.posts import read_all_posts
from .errors import SiteIOError
from .rendering.engine import create_environment
from .rendering.io import copy_static_assets
from .rendering.pages import render_additional_pages
from .rendering.partials import load_partials
from .rendering.posts import PostRenderer
from .rendering.scope import all_pages_scope
from .settings import get_settings

logger = logging.getLogger(__name__)


def generate_site(
    site_dir: Path,
    *,
    manifest_filename: str | None = None,
    generator_version: str = __version__,
) -> BuildResult:
    """Build the site in ``site_dir`` into its configured output directory.

    Stages run strictly in order and the first fatal error aborts the run.
    Files written before a failure are left in place.

    Args:
        site_dir: Directory holding the manifest
        manifest_filename: Manifest file name (default from settings)
        generator_version: Version the manifest is checked against

    Returns:
        Summary of what was written
    """
    manifest_path = site_dir / (manifest_filename or get_settings().manifest_filename)
    logger.info(f"Compiling website at: {site_dir}")

    logger.info("📋 Reading manifest...")
    manifest = load_manifest(manifest_path)
    check_manifest_version(manifest, generator_version)

    paths = check_paths(site_dir, manifest)

    logger.info(f"📂 Creating output directory: {paths.output_dir}")
    try:
        paths.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SiteIOError(paths.output_dir, str(e)) from e

    logger.info("📂 Copying static files")
    static_files = copy_static_assets(paths.static_assets_dir, paths.output_dir)

    logger.info("📝 Reading all posts")
    posts = read_all_posts(paths.post_input_dir)

    logger.info("📐 Reading partial templates")
    env = create_environment(load_partials(paths.partial_templates_dir))

    logger.info("📝 Templating and writing all posts")
    renderer = PostRenderer(
        env,
        paths.post_template,
        manifest.post_settings,
        paths.output_dir,
        manifest.additional_values,
        GENERATOR_TAG,
    )
    post_outputs = renderer.render_all(posts)

    logger.info("📝 Templating and writing all other pages")
    scope = all_pages_scope(
        posts, manifest.post_settings, manifest.additional_values, GENERATOR_TAG
    )
    page_outputs = render_additional_pages(
        env,
        paths.additional_pages_dir,
        paths.output_dir,
        scope,
        manifest.additional_page_template_suffix,
    )

    logger.info("✅ All done! 🐺")
    return BuildResult(
        output_dir=paths.output_dir,
        static_files=static_files,
        posts_rendered=len(post_outputs),
        pages_rendered=len(page_outputs),
    )
