"""Manifest loading and generator version compatibility."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..errors import ManifestParseError, VersionIncompatibleError
from .models import Manifest, Version

logger = logging.getLogger(__name__)


def format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into ``field.path: message`` lines."""
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        lines.append(f"{location}: {error['msg']}")
    return "; ".join(lines)


def parse_manifest(raw: str | bytes, *, source: str = "manifest") -> Manifest:
    """Parse and validate manifest JSON text.

    Args:
        raw: Manifest JSON document
        source: Name used in error messages

    Returns:
        Validated manifest with defaults applied
    """
    try:
        return Manifest.model_validate_json(raw)
    except ValidationError as e:
        raise ManifestParseError(
            f"Invalid manifest {source}: {format_validation_error(e)}"
        ) from e


def load_manifest(manifest_path: Path) -> Manifest:
    """Read and validate the manifest file at ``manifest_path``."""
    logger.debug(f"Reading manifest: {manifest_path}")

    try:
        raw = manifest_path.read_bytes()
    except FileNotFoundError as e:
        raise ManifestParseError(f"Manifest not found: {manifest_path}") from e
    except OSError as e:
        raise ManifestParseError(f"Cannot read manifest {manifest_path}: {e}") from e

    return parse_manifest(raw, source=str(manifest_path))


def is_compatible(manifest_version: Version, generator_version: Version) -> bool:
    """Return True when a generator can build a site declaring ``manifest_version``."""
    if manifest_version.major != generator_version.major:
        return False
    if generator_version.minor != manifest_version.minor:
        return generator_version.minor > manifest_version.minor
    return generator_version.revision >= manifest_version.revision


def check_manifest_version(
    manifest: Manifest, generator_version: str = __version__
) -> None:
    """Raise VersionIncompatibleError unless the manifest version is supported."""
    if not is_compatible(manifest.parsed_version, Version.parse(generator_version)):
        raise VersionIncompatibleError(manifest.version, generator_version)

    logger.debug(
        f"Manifest version {manifest.version} is compatible with {generator_version}"
    )
