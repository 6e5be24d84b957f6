"""Containment checks for the directories a manifest points at."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..errors import PathContainmentError
from .models import Manifest

logger = logging.getLogger(__name__)

# Inputs that are walked recursively; the post template is a single file
_DIRECTORY_ROLES = frozenset(
    {
        "post input directory",
        "static assets directory",
        "partial templates directory",
        "additional page templates directory",
    }
)


class SitePaths(BaseModel):
    """Absolute, lexically normalized locations used by one generation run."""

    model_config = ConfigDict(frozen=True)

    root: Path
    output_dir: Path
    post_input_dir: Path
    post_template: Path
    static_assets_dir: Path
    partial_templates_dir: Path
    additional_pages_dir: Path


def resolve_lexically(root: Path, candidate: str | Path) -> Path:
    """Join ``candidate`` onto ``root`` and collapse ``.``/``..`` without touching disk."""
    return Path(os.path.normpath(os.path.join(os.path.abspath(root), candidate)))


def is_within(path: Path, parent: Path) -> bool:
    """Return True when ``path`` is ``parent`` or one of its descendants."""
    return path == parent or parent in path.parents


def check_paths(root: Path, manifest: Manifest) -> SitePaths:
    """Resolve every configured path and check containment.

    All checks run before failing so every problem is reported at once.

    Args:
        root: Site directory holding the manifest
        manifest: Validated manifest

    Returns:
        Resolved site paths

    Raises:
        PathContainmentError: If any path escapes ``root`` or lies in the output dir
    """
    root = Path(os.path.normpath(os.path.abspath(root)))
    output_dir = resolve_lexically(root, manifest.output_dir)
    post_settings = manifest.post_settings

    problems: list[str] = []

    if not is_within(output_dir, root) or output_dir == root:
        problems.append(
            f"Output directory {manifest.output_dir!r} must be inside the site directory {root}"
        )

    inputs = {
        "post input directory": post_settings.post_input_dir,
        "post template": post_settings.post_template,
        "static assets directory": manifest.static_assets_input_dir,
        "partial templates directory": manifest.partial_templates_dir,
        "additional page templates directory": manifest.additional_page_templates_dir,
    }
    resolved: dict[str, Path] = {}
    for role, configured in inputs.items():
        path = resolve_lexically(root, configured)
        resolved[role] = path
        if not is_within(path, root):
            problems.append(
                f"The {role} {configured!r} is outside the site directory {root}"
            )
        if is_within(path, output_dir):
            problems.append(
                f"The {role} {configured!r} is inside the output directory {output_dir}"
            )
        elif role in _DIRECTORY_ROLES and is_within(output_dir, path):
            problems.append(
                f"The {role} {configured!r} contains the output directory {output_dir}"
            )

    if problems:
        for problem in problems:
            logger.error(f"❌ {problem}")
        raise PathContainmentError(problems)

    return SitePaths(
        root=root,
        output_dir=output_dir,
        post_input_dir=resolved["post input directory"],
        post_template=resolved["post template"],
        static_assets_dir=resolved["static assets directory"],
        partial_templates_dir=resolved["partial templates directory"],
        additional_pages_dir=resolved["additional page templates directory"],
    )


def ensure_within_output(output_dir: Path, relative: str) -> Path:
    """Resolve a rendered relative output path, refusing anything outside ``output_dir``."""
    if not relative.strip():
        raise PathContainmentError(["Rendered output path is empty"])
    if os.path.isabs(relative):
        raise PathContainmentError([f"Rendered output path {relative!r} is absolute"])

    target = resolve_lexically(output_dir, relative)
    if not is_within(target, output_dir) or target == output_dir:
        raise PathContainmentError(
            [f"Rendered output path {relative!r} escapes the output directory {output_dir}"]
        )
    return target
