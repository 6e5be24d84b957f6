"""File I/O operations for rendering."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from shutil import copy2, copytree

from ..errors import SiteIOError

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    try:
        ensure_parent(path)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, path)
            os.chmod(path, mode)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
    except OSError as e:
        raise SiteIOError(path, str(e)) from e


def read_text(path: Path) -> str:
    """Read a UTF-8 site file, wrapping failures in SiteIOError."""
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SiteIOError(path, str(e)) from e


def copy_static_assets(source: Path, destination: Path) -> int:
    """Copy the static asset tree into the output directory.

    Args:
        source: Static assets directory; may not exist
        destination: Output directory

    Returns:
        Number of files copied
    """
    if not source.is_dir():
        logger.info(f"No static assets directory at {source}")
        return 0

    copied: list[str] = []

    def _copy(src: str, dst: str) -> str:
        copied.append(src)
        return copy2(src, dst)

    try:
        copytree(source, destination, copy_function=_copy, dirs_exist_ok=True)
    except OSError as e:
        raise SiteIOError(source, str(e)) from e

    logger.info(f"Copied {len(copied)} static file(s) → {destination}")
    return len(copied)
