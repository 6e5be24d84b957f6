"""Exceptions raised while generating a site."""

from __future__ import annotations

from pathlib import Path


class WolfdogError(Exception):
    """Base class for every fatal generation failure."""


class ManifestParseError(WolfdogError):
    """Raised when the manifest is unreadable, malformed JSON or schema-invalid."""


class VersionIncompatibleError(WolfdogError):
    """Raised when the manifest requires a generator version we can't satisfy."""

    def __init__(self, manifest_version: str, generator_version: str) -> None:
        super().__init__(
            f"The website requires Wolfdog version {manifest_version}, "
            f"but you're using version {generator_version}"
        )
        self.manifest_version = manifest_version
        self.generator_version = generator_version


class PathContainmentError(WolfdogError):
    """Raised when a configured path escapes the site or lands in the output dir."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("Invalid paths in manifest:\n  " + "\n  ".join(problems))
        self.problems = problems


class PostPairingError(WolfdogError):
    """Raised when post content and metadata files don't pair up."""

    def __init__(self, problems: dict[str, list[str]]) -> None:
        lines = [f"{category}: {', '.join(items)}" for category, items in problems.items()]
        super().__init__("Invalid post directory:\n  " + "\n  ".join(lines))
        self.problems = problems


class PostMetadataError(WolfdogError):
    """Raised when a post's metadata file fails validation."""

    def __init__(self, slug: str, detail: str) -> None:
        super().__init__(f"Invalid metadata for post {slug!r}: {detail}")
        self.slug = slug


class TemplateRenderError(WolfdogError):
    """Raised when a template fails to compile or render."""

    def __init__(self, target: str, detail: str) -> None:
        super().__init__(f"Error rendering {target}: {detail}")
        self.target = target


class SiteIOError(WolfdogError):
    """Raised when reading or writing a site file fails."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"I/O error on {path}: {detail}")
        self.path = path
