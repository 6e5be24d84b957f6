"""Partial template registry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from ..core.posts import iter_files
from .io import read_text

logger = logging.getLogger(__name__)


class PartialRegistry:
    """Named template fragments available to every template in one run.

    Partials are registered up front and the registry is frozen before the
    first template is compiled.
    """

    def __init__(self) -> None:
        self._partials: dict[str, str] = {}
        self._frozen = False

    def register(self, name: str, source: str) -> None:
        if self._frozen:
            raise RuntimeError(f"Cannot register partial {name!r}: registry is frozen")
        self._partials[name] = source

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def partials(self) -> Mapping[str, str]:
        return self._partials

    def __contains__(self, name: object) -> bool:
        return name in self._partials

    def __len__(self) -> int:
        return len(self._partials)


def load_partials(partials_dir: Path) -> PartialRegistry:
    """Register every file under ``partials_dir`` by its relative POSIX path.

    Args:
        partials_dir: Directory of partial templates; may not exist

    Returns:
        Frozen registry (empty if the directory is missing)
    """
    registry = PartialRegistry()

    if not partials_dir.is_dir():
        logger.debug(f"No partials directory at {partials_dir}")
    for path in iter_files(partials_dir):
        name = path.relative_to(partials_dir).as_posix()
        registry.register(name, read_text(path))
        logger.debug(f"Registered partial: {name}")

    registry.freeze()
    logger.info(f"Registered {len(registry)} partial template(s)")
    return registry
