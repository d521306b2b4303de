"""Atom feed serialization."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement, tostring

from postpress.core.rendering import render_html

if TYPE_CHECKING:
    from postpress.core.config import SiteConfig
    from postpress.core.types import Post

ATOM_NS = "http://www.w3.org/2005/Atom"
# <updated> of a feed with no entries
EMPTY_FEED_UPDATED = date(1970, 1, 1)


def format_datetime(value: date) -> str:
    """Format a post date as RFC 3339 midnight UTC (Atom requirement)."""
    dt = datetime.combine(value, time.min, tzinfo=UTC)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def posts_to_xml_string(posts: Sequence[Post], config: SiteConfig) -> str:
    """Serialize posts to an Atom XML string, in the order given."""
    root = Element("feed", attrib={"xmlns": ATOM_NS})
    SubElement(root, "id").text = config.absolute_url("/")
    SubElement(root, "title").text = config.title
    if config.description:
        SubElement(root, "subtitle").text = config.description
    updated = max((post.date for post in posts), default=EMPTY_FEED_UPDATED)
    SubElement(root, "updated").text = format_datetime(updated)
    SubElement(root, "link", attrib={"href": config.absolute_url(config.feed.path), "rel": "self"})
    SubElement(root, "link", attrib={"href": config.absolute_url("/"), "rel": "alternate"})

    if config.feed.author:
        author_el = SubElement(root, "author")
        SubElement(author_el, "name").text = config.feed.author

    for post in posts:
        url = config.absolute_url(post.url)
        entry_el = SubElement(root, "entry")
        SubElement(entry_el, "id").text = url
        SubElement(entry_el, "title").text = post.title
        SubElement(entry_el, "link", attrib={"href": url, "rel": "alternate"})
        SubElement(entry_el, "published").text = format_datetime(post.date)
        SubElement(entry_el, "updated").text = format_datetime(post.date)

        for name in post.authors:
            author_el = SubElement(entry_el, "author")
            SubElement(author_el, "name").text = name

        if post.description:
            SubElement(entry_el, "summary", attrib={"type": "html"}).text = post.description

        content_el = SubElement(entry_el, "content", attrib={"type": "html"})
        content_el.text = render_html(post.body)

    return "<?xml version='1.0' encoding='UTF-8'?>\n" + tostring(root, encoding="unicode")
