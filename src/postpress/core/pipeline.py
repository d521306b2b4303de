"""Site build: load posts, render everything, then publish."""

from __future__ import annotations

import logging

from postpress.core.config import SiteConfig
from postpress.core.loader import load_posts
from postpress.core.types import RenderedSite
from postpress.engine.renderer import PostRenderer
from postpress.infra.sinks import AtomFeedSink, HtmlSiteSink

logger = logging.getLogger(__name__)


def render(config: SiteConfig) -> RenderedSite:
    """Load and render the whole site in memory.

    Any loading or layout error propagates before a single file is written.
    """
    posts = load_posts(config)
    logger.info("Loaded %d posts from %s", len(posts), config.paths.abs_posts_dir)
    return PostRenderer(config).render_site(posts)


def build_site(config: SiteConfig, *, dry_run: bool = False) -> RenderedSite:
    """Render the site and write it to the configured output directory."""
    site = render(config)
    if dry_run:
        logger.info("Dry run: skipping writes to %s", config.paths.abs_output_dir)
        return site

    output_dir = config.paths.abs_output_dir
    HtmlSiteSink(output_dir).publish(site)
    if config.feed.enabled:
        AtomFeedSink(output_dir / config.feed.path, config).publish(site.posts)

    return site
