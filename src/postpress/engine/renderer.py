"""Render posts and the post index into HTML pages."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from postpress.core.exceptions import LayoutNotFoundError
from postpress.core.rendering import render_html
from postpress.core.types import Post, RenderedPage, RenderedSite
from postpress.engine.template_loader import TemplateLoader

if TYPE_CHECKING:
    from postpress.core.config import SiteConfig

logger = logging.getLogger(__name__)

POST_LIST_TEMPLATE = "_post_list.html"
INDEX_OUTPUT_PATH = "index.html"


class PostRenderer:
    """Stateless renderer for a site's index and post pages.

    Every method is a pure function of its arguments and the layouts on disk,
    so rendering the same input twice yields identical output.
    """

    def __init__(self, config: SiteConfig, templates: TemplateLoader | None = None) -> None:
        self.config = config
        self.templates = templates or TemplateLoader(config.paths.abs_layouts_dir)

    def render_listing(self, posts: Sequence[Post]) -> str:
        """Render one listing entry per post, in the order given."""
        return self.templates.render_template(POST_LIST_TEMPLATE, posts=posts, site=self.config)

    def render_index(self, posts: Sequence[Post]) -> str:
        """Render the index page: the post listing wrapped in the index layout."""
        listing = self.render_listing(posts)
        return self.templates.render_layout(
            self.config.index_layout,
            listing,
            page={"title": None, "posts": posts},
            site=self.config,
        )

    def render_post(self, post: Post) -> str:
        """Render a post's Markdown body inside the layout it names."""
        return self.templates.render_layout(
            post.layout,
            render_html(post.body),
            page=post,
            site=self.config,
        )

    def check_layouts(self, posts: Sequence[Post]) -> None:
        """Fail before rendering if the index or any post names an unknown layout."""
        names = {self.config.index_layout, *(post.layout for post in posts)}
        missing = sorted(name for name in names if not self.templates.has_layout(name))
        if missing:
            logger.error("Unknown layouts: %s", ", ".join(missing))
            raise LayoutNotFoundError(missing[0], self.templates.available_layouts())

    def render_site(self, posts: Sequence[Post]) -> RenderedSite:
        """Render the index and every post, without writing anything."""
        self.check_layouts(posts)
        pages = [RenderedPage(output_path=INDEX_OUTPUT_PATH, html=self.render_index(posts))]
        for post in posts:
            pages.append(RenderedPage(output_path=post.output_path, html=self.render_post(post)))

        logger.info("Rendered %d posts", len(posts))
        return RenderedSite(posts=list(posts), pages=pages)
