"""Shared fixtures for Postpress tests."""

from datetime import date
from pathlib import Path
from textwrap import dedent

import pytest

from postpress.core.config import PathsSettings, SiteConfig
from postpress.core.types import Post


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create an empty site with a posts directory."""
    (tmp_path / "_posts").mkdir()
    return tmp_path


@pytest.fixture
def config(site_root: Path) -> SiteConfig:
    return SiteConfig(title="Test Blog", url="https://blog.example.org", paths=PathsSettings(site_root=site_root))


@pytest.fixture
def write_post(site_root: Path):
    """Write a post file into the site's _posts directory."""

    def _write(filename: str, front_matter: str, body: str = "Body text.") -> Path:
        path = site_root / "_posts" / filename
        path.write_text(f"---\n{dedent(front_matter).strip()}\n---\n{body}\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_post():
    """Build a Post with sensible defaults."""

    def _make(**overrides) -> Post:
        values = {
            "title": "Hello",
            "layout": "post",
            "date": date(2023, 1, 5),
            "slug": "hello",
            "permalink": "/hello/",
            "description": "A short *intro*.",
            "authors": ["Alice"],
            "body": "# Heading\n\nSome text.",
        }
        values.update(overrides)
        return Post(**values)

    return _make
