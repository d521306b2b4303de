"""Slug and filename helpers."""

import posixpath
import re
from datetime import date
from unicodedata import normalize

# Jekyll post filename: YYYY-MM-DD-slug.md
POST_FILENAME_PATTERN = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})-(?P<slug>.+)$")


def slugify(text: str, max_len: int = 60) -> str:
    """Convert text to a safe URL-friendly slug.

    Examples:
        >>> slugify("Hello World")
        'hello-world'
        >>> slugify("Café")
        'cafe'

    """
    normalized = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()

    slug = re.sub(r"[^a-z0-9]+", "-", normalized)
    slug = slug.strip("-")
    slug = re.sub(r"-+", "-", slug)

    if not slug:
        return "untitled"

    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")

    return slug


def split_post_filename(stem: str) -> tuple[date | None, str]:
    """Split a post file stem into its date and slug.

    Returns ``(None, slug)`` when the stem has no valid date prefix.

        >>> split_post_filename("2023-01-05-hello-world")
        (datetime.date(2023, 1, 5), 'hello-world')
    """
    match = POST_FILENAME_PATTERN.match(stem)
    if not match:
        return None, slugify(stem)

    try:
        post_date = date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError:
        return None, slugify(stem)

    return post_date, slugify(match["slug"])


def expand_permalink(pattern: str, *, post_date: date, slug: str, title: str) -> str:
    """Fill ``:year``, ``:month``, ``:day``, ``:slug`` and ``:title`` in a permalink pattern."""
    replacements = {
        ":year": f"{post_date.year:04d}",
        ":month": f"{post_date.month:02d}",
        ":day": f"{post_date.day:02d}",
        ":slug": slug,
        ":title": slugify(title),
    }
    result = pattern
    # Longest placeholders first so ":slug" never clobbers a longer name
    for placeholder in sorted(replacements, key=len, reverse=True):
        result = result.replace(placeholder, replacements[placeholder])

    if not result.startswith("/"):
        result = "/" + result
    return result


def permalink_to_output_path(permalink: str) -> str:
    """Map a permalink to the relative file written under the output directory.

        >>> permalink_to_output_path("/hello/")
        'hello/index.html'
        >>> permalink_to_output_path("/2023/hello.html")
        '2023/hello.html'
    """
    path = permalink.lstrip("/")
    if not path:
        return "index.html"
    if path.endswith("/"):
        return f"{path}index.html"
    if path.endswith((".html", ".htm")):
        return path
    return f"{path}/index.html"


def normalize_permalink(permalink: str) -> str | None:
    """Collapse ``.`` and duplicate slashes in a permalink.

    Returns None when the permalink climbs above the site root.

        >>> normalize_permalink("/a//b/./c/")
        '/a/b/c/'
        >>> normalize_permalink("/../escaped.html") is None
        True
    """
    if ".." in permalink.split("/"):
        return None

    normalized = posixpath.normpath("/" + permalink.lstrip("/"))
    # normpath drops the trailing slash that selects an index.html page
    if permalink.endswith("/") and normalized != "/":
        normalized += "/"
    return normalized
