"""Domain models for the site manifest, posts and page walk."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Literal, NamedTuple, Optional, Union

from babel import Locale, UnknownLocaleError
from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    field_validator,
)

_VERSION_PATTERN = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")
_ISO_DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:\d{2})$"
)


class Version(NamedTuple):
    """A MAJOR.MINOR.REVISION version triple."""

    major: int
    minor: int
    revision: int

    @classmethod
    def parse(cls, value: str) -> Version:
        match = _VERSION_PATTERN.match(value)
        if not match:
            raise ValueError(
                f"Version must be three dot-separated non-negative integers, got: {value!r}"
            )
        return cls(*(int(part) for part in match.groups()))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.revision}"


class PostSettings(BaseModel):
    """Settings for post discovery, templating and date display."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    post_input_dir: str = Field(default="posts", alias="postInputDir")
    post_template: str = Field(default="templates/post.html", alias="postTemplate")
    post_output_file_template: str = Field(
        default="posts/{{ post.slug }}/index.html",
        alias="postOutputFileTemplate",
        min_length=1,
    )
    pub_date_format: str = Field(
        default="long",
        alias="pubDateFormat",
        min_length=1,
        description="Babel named format (short/medium/long/full) or CLDR pattern",
    )
    pub_date_locale: str = Field(default="en_US", alias="pubDateLocale")

    @field_validator("pub_date_locale")
    @classmethod
    def _known_locale(cls, value: str) -> str:
        try:
            Locale.parse(value)
        except (UnknownLocaleError, ValueError) as e:
            raise ValueError(f"Unknown locale: {value!r}") from e
        return value


class Manifest(BaseModel):
    """The ``wolfdog.json`` site manifest."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = Field(..., description="Required generator version")
    output_dir: str = Field(default="dist", alias="outputDir")
    static_assets_input_dir: str = Field(default="static", alias="staticAssetsInputDir")
    partial_templates_dir: str = Field(
        default="templates/partials", alias="partialTemplatesDir"
    )
    additional_page_templates_dir: str = Field(
        default="templates/additionalPages", alias="additionalPageTemplatesDir"
    )
    additional_page_template_suffix: str = Field(
        default=".jinja",
        alias="additionalPageTemplateSuffix",
        pattern=r"^\.[^/\\]+$",
    )
    additional_values: JsonValue = Field(default=None, alias="additionalValues")
    post_settings: PostSettings = Field(
        default_factory=PostSettings, alias="postSettings"
    )

    @field_validator("version")
    @classmethod
    def _well_formed_version(cls, value: str) -> str:
        Version.parse(value)
        return value

    @property
    def parsed_version(self) -> Version:
        return Version.parse(self.version)


class PostMetadata(BaseModel):
    """Contents of a post's ``.json`` metadata file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    pub_date: AwareDatetime = Field(..., alias="pubDate")
    # ``false`` hides the date, a string replaces the formatted one
    show_pub_date: Optional[Union[str, Literal[False]]] = Field(
        default=None, alias="showPubDate"
    )
    additional_values: JsonValue = Field(default=None, alias="additionalValues")

    @field_validator("pub_date", mode="before")
    @classmethod
    def _iso_string_only(cls, value: object) -> object:
        if not isinstance(value, str) or not _ISO_DATETIME_PATTERN.match(value):
            raise ValueError("pubDate must be an ISO-8601 string with a UTC offset")
        return value


class SitePost(BaseModel):
    """One post: a matched content/metadata file pair plus parsed metadata."""

    model_config = ConfigDict(frozen=True)

    slug: str
    content_path: Path
    metadata_path: Path
    metadata: PostMetadata


class PageWalkTask(BaseModel):
    """An input/output path pair queued during the additional-page walk."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_path: Path


class BuildResult(BaseModel):
    """Summary of a completed generation run."""

    output_dir: Path
    static_files: int = Field(default=0, ge=0)
    posts_rendered: int = Field(default=0, ge=0)
    pages_rendered: int = Field(default=0, ge=0)
