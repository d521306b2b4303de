"""Markdown rendering."""

from markdown_it import MarkdownIt

_md = MarkdownIt("commonmark", {"html": True})


def render_html(content: str | None) -> str:
    """Render a Markdown document to HTML.

    Returns an empty string if content is None or empty.
    """
    if content:
        return _md.render(content).strip()
    return ""


def render_inline(content: str | None) -> str:
    """Render a single line of inline Markdown, without a wrapping paragraph."""
    if content:
        return _md.renderInline(content.strip())
    return ""
