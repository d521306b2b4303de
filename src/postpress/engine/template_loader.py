"""Jinja2 template loader for site layouts.

Layouts are looked up in the site's own layouts directory first and in the
packaged defaults second. A layout may start with front-matter naming a parent
layout, in which case its output becomes the parent's ``content``.
"""

from __future__ import annotations

import logging
from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    Template,
    TemplateNotFound,
    select_autoescape,
)
from markupsafe import Markup

from postpress.core.exceptions import LayoutCycleError, LayoutNotFoundError
from postpress.core.frontmatter import parse_frontmatter
from postpress.core.utils import slugify
from postpress.engine import filters

logger = logging.getLogger(__name__)

LAYOUT_SUFFIX = ".html"


class Layout:
    """A parsed layout file: its template and optional parent layout."""

    def __init__(self, name: str, template: Template, parent: str | None = None) -> None:
        self.name = name
        self.template = template
        self.parent = parent


class TemplateLoader:
    """Loads layouts and renders content through layout chains.

    Supports:
    - Site layouts overriding packaged defaults
    - Layout inheritance through a ``layout:`` front-matter key
    - Custom filters (byline, date formatting, inline markdown, slugify)
    """

    def __init__(self, layouts_dir: Path | None = None) -> None:
        """Initialize TemplateLoader.

        Args:
            layouts_dir: Site layouts directory, searched before the packaged layouts.

        """
        self.layouts_dir = layouts_dir
        self.default_dir = Path(str(files("postpress.engine").joinpath("layouts")))

        search_path = [self.default_dir]
        if layouts_dir is not None and layouts_dir.is_dir():
            search_path.insert(0, layouts_dir)
        self._fs_loaders = [FileSystemLoader(path) for path in search_path]

        self.env = Environment(
            loader=ChoiceLoader(self._fs_loaders),
            autoescape=select_autoescape(enabled_extensions=("html", "htm", "xml")),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._register_filters()
        self._layouts: dict[str, Layout] = {}

    def _register_filters(self) -> None:
        self.env.filters["byline"] = filters.byline
        self.env.filters["format_date"] = filters.format_date
        self.env.filters["markdownify"] = filters.markdownify
        self.env.filters["slugify"] = slugify

    def available_layouts(self) -> list[str]:
        names = {
            name[: -len(LAYOUT_SUFFIX)]
            for name in self.env.list_templates(extensions=[LAYOUT_SUFFIX.lstrip(".")])
            if not name.startswith("_")
        }
        return sorted(names)

    def has_layout(self, name: str) -> bool:
        try:
            self.get_layout(name)
        except LayoutNotFoundError:
            return False
        return True

    def get_layout(self, name: str) -> Layout:
        """Load a layout by name (without the ``.html`` suffix).

        Raises:
            LayoutNotFoundError: If no layout with that name exists.

        """
        if name in self._layouts:
            return self._layouts[name]

        filename = f"{name}{LAYOUT_SUFFIX}"
        try:
            source, path, _ = self.env.loader.get_source(self.env, filename)
        except TemplateNotFound as exc:
            raise LayoutNotFoundError(name, self.available_layouts()) from exc

        metadata, body = parse_frontmatter(source, Path(path) if path else None)

        parent = metadata.get("layout")
        layout = Layout(
            name=name,
            template=self.env.from_string(body),
            parent=str(parent) if parent else None,
        )
        self._layouts[name] = layout
        return layout

    def render_template(self, template_name: str, **context: Any) -> str:
        """Render a non-layout template such as a partial."""
        return self.env.get_template(template_name).render(**context)

    def render_layout(self, name: str, content: str, **context: Any) -> str:
        """Render content through a layout and all of its parents.

        Raises:
            LayoutNotFoundError: If the layout or one of its parents is missing.
            LayoutCycleError: If the chain refers back to a layout already used.

        """
        chain: list[str] = []
        current: str | None = name
        html = content
        while current is not None:
            if current in chain:
                raise LayoutCycleError([*chain, current])
            chain.append(current)

            layout = self.get_layout(current)
            html = layout.template.render(content=Markup(html), layout=current, **context)
            current = layout.parent

        logger.debug("Rendered through layouts %s", " -> ".join(chain))
        return html
