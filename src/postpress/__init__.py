"""Postpress: render a Markdown blog with front-matter into a static site."""

__version__ = "0.1.0"
