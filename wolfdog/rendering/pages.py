"""Rendering the additional-page template tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment

from ..core.models import PageWalkTask
from ..errors import SiteIOError, WolfdogError
from .engine import compile_template, render_template
from .io import atomic_write_text, read_text

logger = logging.getLogger(__name__)


def strip_suffix(name: str, suffix: str) -> str | None:
    """Return ``name`` without ``suffix`` (case-insensitive), or None if it doesn't end with it."""
    if len(name) > len(suffix) and name.lower().endswith(suffix.lower()):
        return name[: -len(suffix)]
    return None


def _child_tasks(task: PageWalkTask) -> list[PageWalkTask]:
    try:
        children = sorted(task.input_path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SiteIOError(task.input_path, str(e)) from e
    return [
        PageWalkTask(input_path=child, output_path=task.output_path / child.name)
        for child in children
    ]


def render_additional_pages(
    env: Environment,
    pages_dir: Path,
    output_dir: Path,
    scope: dict[str, Any],
    suffix: str,
) -> list[Path]:
    """Render every template under ``pages_dir`` into the mirrored output path.

    Siblings are visited in lexical order. Files not ending in ``suffix`` are
    skipped.

    Args:
        env: Environment holding the partials
        pages_dir: Additional-page template directory; may not exist
        output_dir: Output directory mirroring ``pages_dir``
        scope: All-pages template scope
        suffix: Template file suffix, stripped from output names

    Returns:
        List of output file paths
    """
    if not pages_dir.is_dir():
        logger.info(f"No additional pages directory at {pages_dir}")
        return []

    outputs: list[Path] = []
    root = PageWalkTask(input_path=pages_dir, output_path=output_dir)
    stack = list(reversed(_child_tasks(root)))

    while stack:
        task = stack.pop()

        if task.input_path.is_dir():
            if task.input_path.is_symlink():
                logger.info(f"Skipping symlinked directory: {task.input_path}")
                continue
            stack.extend(reversed(_child_tasks(task)))
            continue

        output_name = strip_suffix(task.input_path.name, suffix)
        if output_name is None:
            logger.info(f"Ignoring non-template file: {task.input_path}")
            continue

        output_path = task.output_path.with_name(output_name)
        try:
            target = str(task.input_path)
            template = compile_template(env, read_text(task.input_path), target)
            atomic_write_text(
                output_path, render_template(template, scope, target)
            )
        except WolfdogError:
            logger.error(f"❌ Error processing page: {task.input_path}")
            raise

        logger.debug(f"Rendered page {task.input_path} → {output_path}")
        outputs.append(output_path)

    logger.info(f"Rendered {len(outputs)} additional page(s)")
    return outputs
