"""Load posts from Markdown files with YAML front-matter."""

from __future__ import annotations

import datetime as dt
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from postpress.core.exceptions import (
    DuplicatePermalinkError,
    FrontMatterError,
    InvalidPermalinkError,
    InvalidPostFilenameError,
    MissingFieldError,
)
from postpress.core.frontmatter import parse_frontmatter
from postpress.core.types import Post
from postpress.core.utils import expand_permalink, normalize_permalink, split_post_filename

if TYPE_CHECKING:
    from pathlib import Path

    from postpress.core.config import SiteConfig

logger = logging.getLogger(__name__)

POST_SUFFIXES = (".md", ".markdown")
REQUIRED_FIELDS = ("title", "layout")
# Written by the index page
RESERVED_OUTPUT_PATHS = frozenset({"index.html"})
KNOWN_FIELDS = frozenset(
    {"title", "layout", "date", "permalink", "description", "authors", "reviewers", "published"}
)


def _coerce_date(value: Any, path: Path) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(str(value).strip()[:10])
    except ValueError as exc:
        raise InvalidPostFilenameError(f"unparseable date {value!r}", path) from exc


def _required_text(metadata: dict[str, Any], field: str, path: Path) -> str:
    value = metadata.get(field)
    if value is None:
        raise MissingFieldError(field, path)
    # YAML reads `title: No` as a boolean
    if isinstance(value, bool) or not isinstance(value, (str, int, float, dt.date)):
        msg = f"front-matter key '{field}' must be a string, got {type(value).__name__}"
        raise FrontMatterError(msg, path)
    text = str(value).strip()
    if not text:
        raise MissingFieldError(field, path)
    return text


def load_post(path: Path, config: SiteConfig) -> Post:
    """Build a Post from a single file.

    The publication date comes from the ``YYYY-MM-DD-`` filename prefix unless
    the front-matter sets ``date``. The slug always comes from the filename.
    """
    metadata, body = parse_frontmatter(path.read_text(encoding="utf-8"), path)

    if not metadata.get("layout") and config.defaults.layout:
        metadata["layout"] = config.defaults.layout

    for field in REQUIRED_FIELDS:
        metadata[field] = _required_text(metadata, field, path)

    filename_date, slug = split_post_filename(path.stem)
    if "date" in metadata:
        post_date = _coerce_date(metadata["date"], path)
    elif filename_date is not None:
        post_date = filename_date
    else:
        msg = "filename must start with YYYY-MM-DD- or front-matter must set 'date'"
        raise InvalidPostFilenameError(msg, path)

    raw_permalink = str(metadata.get("permalink") or "") or expand_permalink(
        config.permalink, post_date=post_date, slug=slug, title=metadata["title"]
    )
    permalink = normalize_permalink(raw_permalink)
    if permalink is None:
        raise InvalidPermalinkError(f"permalink '{raw_permalink}' leaves the site root", path)

    try:
        return Post(
            title=metadata["title"],
            layout=metadata["layout"],
            date=post_date,
            slug=slug,
            permalink=permalink,
            description=metadata.get("description"),
            authors=metadata.get("authors"),
            reviewers=metadata.get("reviewers"),
            body=body,
            published=metadata.get("published", True) is not False,
            source_path=path,
            extra={k: v for k, v in metadata.items() if k not in KNOWN_FIELDS},
        )
    except ValidationError as exc:
        raise FrontMatterError(f"invalid front-matter values: {exc}", path) from exc


def sort_posts(posts: list[Post]) -> list[Post]:
    """Order posts newest first; posts sharing a date fall back to slug order."""
    return sorted(posts, key=lambda p: (p.date, p.slug), reverse=True)


def iter_post_files(posts_dir: Path) -> list[Path]:
    if not posts_dir.is_dir():
        logger.warning("Posts directory %s does not exist", posts_dir)
        return []

    return sorted(
        path
        for path in posts_dir.iterdir()
        if path.is_file() and path.suffix in POST_SUFFIXES and not path.name.startswith(("_", "."))
    )


def load_posts(config: SiteConfig, posts_dir: Path | None = None) -> list[Post]:
    """Load every post in the posts directory, newest first.

    Posts with ``published: false`` are skipped.

    Raises:
        DuplicatePermalinkError: If two posts would be written to the same file.

    """
    posts_dir = posts_dir if posts_dir is not None else config.paths.abs_posts_dir
    posts: list[Post] = []
    seen: dict[str, Post] = {}

    for path in iter_post_files(posts_dir):
        post = load_post(path, config)
        if not post.published:
            logger.info("Skipping unpublished post %s", path.name)
            continue

        if post.output_path in RESERVED_OUTPUT_PATHS:
            raise DuplicatePermalinkError(post.permalink, path)

        other = seen.get(post.output_path)
        if other is not None:
            raise DuplicatePermalinkError(post.permalink, path, other.source_path)
        seen[post.output_path] = post

        logger.debug("Loaded %s -> %s", path.name, post.permalink)
        posts.append(post)

    return sort_posts(posts)

