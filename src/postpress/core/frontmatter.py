"""Helpers for parsing YAML front-matter from Markdown and layout files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml
from frontmatter.default_handlers import YAMLHandler

from postpress.core.exceptions import FrontMatterError

if TYPE_CHECKING:
    from pathlib import Path

_handler = YAMLHandler()


def parse_frontmatter(content: str, path: Path | None = None) -> tuple[dict[str, Any], str]:
    """Parse YAML front-matter using python-frontmatter's YAML handler.

    Args:
        content: Text that may start with a ``---`` delimited YAML block.
        path: Source file, used in error messages.

    Returns:
        Tuple of (metadata dict, body string). Text without front-matter, or
        with an empty block, yields an empty dict.

    Raises:
        FrontMatterError: If the YAML is malformed or is not a mapping.

    """
    text = content.strip()
    if not _handler.detect(text):
        return {}, text

    try:
        raw, body = _handler.split(text)
        metadata = _handler.load(raw)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontMatterError(f"invalid front-matter: {exc}", path) from exc

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        msg = f"front-matter must be a mapping, got {type(metadata).__name__}"
        raise FrontMatterError(msg, path)
    return dict(metadata), body.strip()
