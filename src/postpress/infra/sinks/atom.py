"""Atom feed output sink."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from postpress.core.atom import posts_to_xml_string

if TYPE_CHECKING:
    from postpress.core.config import SiteConfig
    from postpress.core.types import Post

logger = logging.getLogger(__name__)


class AtomFeedSink:
    """Writes the post collection as an Atom XML file."""

    def __init__(self, output_path: Path, config: SiteConfig) -> None:
        self.output_path = Path(output_path)
        self.config = config

    def publish(self, posts: Sequence[Post]) -> Path:
        """Render the feed and write it, replacing any existing file."""
        xml_content = posts_to_xml_string(posts, self.config)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(xml_content, encoding="utf-8")
        logger.info("Wrote feed with %d entries to %s", len(posts), self.output_path)
        return self.output_path
