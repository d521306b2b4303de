"""Tests for the post renderer: the index listing and per-post pages."""

import re
from datetime import date
from pathlib import Path

import pytest

from postpress.core.exceptions import LayoutNotFoundError
from postpress.engine.renderer import PostRenderer

ENTRY_PATTERN = re.compile(r'<article class="post-entry">(.*?)</article>', re.DOTALL)


@pytest.fixture
def renderer(config) -> PostRenderer:
    return PostRenderer(config)


def _entries(html: str) -> list[str]:
    return ENTRY_PATTERN.findall(html)


def test_index_has_one_entry_per_post_in_input_order(renderer, make_post):
    posts = [
        make_post(title=f"Post {n}", slug=f"post-{n}", permalink=f"/post-{n}/", date=date(2023, 1, n))
        for n in (3, 1, 2)
    ]

    entries = _entries(renderer.render_index(posts))

    assert len(entries) == 3
    assert [re.search(r">(Post \d)</a>", e).group(1) for e in entries] == ["Post 3", "Post 1", "Post 2"]


def test_index_entry_with_author_and_reviewer(renderer, make_post):
    post = make_post(title="X", authors=["Adrien Zinger"], reviewers=["Yvan Sraka"], permalink="/x/")

    (entry,) = _entries(renderer.render_index([post]))

    assert '<a href="/x/">X</a>' in entry
    assert '<p class="authors">By: Adrien Zinger;</p>' in entry
    assert '<p class="reviewers">Reviewers: Yvan Sraka;</p>' in entry


def test_index_entry_without_reviewers_key_has_no_reviewers_line(renderer, make_post):
    (entry,) = _entries(renderer.render_index([make_post()]))

    assert "reviewers" not in entry
    assert "Reviewers:" not in entry


def test_index_entry_with_empty_reviewers_has_no_reviewers_line(renderer, make_post):
    (entry,) = _entries(renderer.render_index([make_post(reviewers=[])]))

    assert "Reviewers:" not in entry


def test_index_lists_every_reviewer_and_author(renderer, make_post):
    post = make_post(authors=["A", "B", "C"], reviewers=["R1", "R2"])

    (entry,) = _entries(renderer.render_index([post]))

    assert "By: A; B; C;" in entry
    assert "Reviewers: R1; R2;" in entry


def test_index_entry_without_authors_omits_line(renderer, make_post):
    (entry,) = _entries(renderer.render_index([make_post(authors=[])]))

    assert "By:" not in entry


def test_index_description_keeps_inline_markup(renderer, make_post):
    post = make_post(description="Using <code>Arc</code> and *Mutex*")

    (entry,) = _entries(renderer.render_index([post]))

    assert '<p class="description">Using <code>Arc</code> and <em>Mutex</em></p>' in entry


def test_index_escapes_titles_and_names(renderer, make_post):
    post = make_post(title="Send & Sync", authors=["<script>"])

    (entry,) = _entries(renderer.render_index([post]))

    assert "Send &amp; Sync" in entry
    assert "By: &lt;script&gt;;" in entry


def test_index_uses_baseurl_for_links(config, make_post):
    config.baseurl = "/blog"

    html = PostRenderer(config).render_index([make_post(permalink="/x/")])

    assert '<a href="/blog/x/">' in html


def test_index_is_wrapped_in_index_layout(renderer, make_post):
    html = renderer.render_index([make_post()])

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Test Blog</title>" in html


def test_empty_index(renderer):
    assert _entries(renderer.render_index([])) == []


def test_render_index_does_not_mutate_input(renderer, make_post):
    posts = [make_post()]
    before = [p.model_dump() for p in posts]

    renderer.render_index(posts)

    assert [p.model_dump() for p in posts] == before


def test_render_post_embeds_body_in_layout(renderer, make_post):
    post = make_post(title="Hello", body="# Heading\n\nSome `code`.", reviewers=["Yvan Sraka"])

    html = renderer.render_post(post)

    assert "<title>Hello | Test Blog</title>" in html
    assert '<h1 class="post-title">Hello</h1>' in html
    assert "<h1>Heading</h1>" in html
    assert "<p>Some <code>code</code>.</p>" in html
    assert "By: Alice;" in html
    assert "Reviewers: Yvan Sraka;" in html
    assert '<time datetime="2023-01-05">05 January 2023</time>' in html


def test_render_post_is_idempotent(renderer, make_post):
    post = make_post()

    assert renderer.render_post(post) == renderer.render_post(post)


def test_render_post_with_site_layout(config, make_post, site_root: Path):
    layouts = site_root / "_layouts"
    layouts.mkdir()
    (layouts / "bare.html").write_text("<div>{{ page.title }}|{{ content }}</div>")

    html = PostRenderer(config).render_post(make_post(layout="bare", body="text"))

    assert html == "<div>Hello|<p>text</p></div>"


def test_render_post_unknown_layout(renderer, make_post):
    with pytest.raises(LayoutNotFoundError):
        renderer.render_post(make_post(layout="missing"))


def test_render_site_pages(renderer, make_post):
    posts = [make_post(), make_post(title="Other", slug="other", permalink="/2023/other.html")]

    site = renderer.render_site(posts)

    assert [p.output_path for p in site.pages] == ["index.html", "hello/index.html", "2023/other.html"]
    assert site.index is not None
    assert site.posts == posts


def test_render_site_checks_every_layout_before_rendering(renderer, make_post, mocker):
    posts = [make_post(layout="post"), make_post(slug="b", permalink="/b/", layout="gallery")]
    render_post = mocker.spy(renderer, "render_post")

    with pytest.raises(LayoutNotFoundError) as excinfo:
        renderer.render_site(posts)

    assert excinfo.value.name == "gallery"
    assert "post" in excinfo.value.available
    render_post.assert_not_called()


def test_render_site_rejects_unknown_index_layout(config, make_post):
    config.index_layout = "home"

    with pytest.raises(LayoutNotFoundError, match="'home'"):
        PostRenderer(config).render_site([make_post()])
