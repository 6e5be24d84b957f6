"""Rendering every post through the post template."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment
from pydantic import JsonValue

from ..core.models import PostSettings, SitePost
from ..core.paths import ensure_within_output
from ..errors import WolfdogError
from .engine import compile_template, render_template
from .io import atomic_write_text, read_text
from .scope import post_page_scope, post_scope

logger = logging.getLogger(__name__)


class PostRenderer:
    """Renders posts with a post template and an output-path template.

    Both templates are compiled once, against the run's environment, when
    the renderer is created.
    """

    def __init__(
        self,
        env: Environment,
        post_template_path: Path,
        settings: PostSettings,
        output_dir: Path,
        additional_values: JsonValue,
        generator_tag: str,
    ) -> None:
        self.settings = settings
        self.output_dir = output_dir
        self.additional_values = additional_values
        self.generator_tag = generator_tag

        self.template = compile_template(
            env, read_text(post_template_path), str(post_template_path)
        )
        self.path_template = compile_template(
            env, settings.post_output_file_template, "postOutputFileTemplate"
        )

    def output_path(self, scope: dict) -> Path:
        relative = render_template(self.path_template, scope, "postOutputFileTemplate")
        return ensure_within_output(self.output_dir, relative.strip())

    def render_post(self, post: SitePost) -> Path:
        """Render one post and write it to its templated output path.

        Returns:
            Output file path
        """
        logger.debug(f"Rendering post: {post.slug}")

        scope = post_page_scope(
            post_scope(post, self.settings, self.generator_tag),
            self.additional_values,
            self.generator_tag,
        )
        output_path = self.output_path(scope)
        rendered = render_template(self.template, scope, f"post {post.slug!r}")
        atomic_write_text(output_path, rendered)

        logger.debug(f"Rendered post {post.slug} → {output_path}")
        return output_path

    def render_all(self, posts: list[SitePost]) -> list[Path]:
        """Render all posts, stopping at the first failure.

        Args:
            posts: Posts to render

        Returns:
            List of output file paths
        """
        logger.info(f"Rendering {len(posts)} post(s)")

        outputs = []
        for post in posts:
            try:
                outputs.append(self.render_post(post))
            except WolfdogError:
                logger.error(f"❌ Error processing post: {post.slug}")
                raise

        logger.info(f"Successfully rendered {len(outputs)} post(s)")
        return outputs
