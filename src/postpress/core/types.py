"""Core data types for Postpress."""

import datetime as dt
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from postpress.core.utils import permalink_to_output_path


def _as_name_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    msg = f"expected a name or a list of names, got {type(value).__name__}"
    raise ValueError(msg)


class Post(BaseModel):
    """One article, as loaded from a Markdown file with front-matter."""

    model_config = ConfigDict(frozen=True)

    title: str
    layout: str
    date: dt.date
    slug: str
    permalink: str
    description: str = ""
    authors: list[str] = Field(default_factory=list)
    reviewers: list[str] | None = None
    body: str = ""
    published: bool = True
    source_path: Path | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("title", "layout")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "must be a non-empty string"
            raise ValueError(msg)
        return value

    @field_validator("authors", mode="before")
    @classmethod
    def _coerce_authors(cls, value: Any) -> list[str]:
        return _as_name_list(value)

    @field_validator("reviewers", mode="before")
    @classmethod
    def _coerce_reviewers(cls, value: Any) -> list[str] | None:
        names = _as_name_list(value)
        return names or None

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def url(self) -> str:
        return self.permalink

    @property
    def has_reviewers(self) -> bool:
        return self.reviewers is not None and len(self.reviewers) > 0

    @property
    def output_path(self) -> str:
        """Path of the rendered page, relative to the output directory."""
        return permalink_to_output_path(self.permalink)


class RenderedPage(BaseModel):
    """A fully rendered HTML page waiting to be written."""

    model_config = ConfigDict(frozen=True)

    output_path: str
    html: str


class RenderedSite(BaseModel):
    """Everything a build produced, in memory."""

    posts: list[Post] = Field(default_factory=list)
    pages: list[RenderedPage] = Field(default_factory=list)

    @property
    def index(self) -> RenderedPage | None:
        for page in self.pages:
            if page.output_path == "index.html":
                return page
        return None
