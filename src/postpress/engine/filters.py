"""Custom Jinja2 filters for layouts."""

from collections.abc import Iterable
from datetime import date

from markupsafe import Markup

from postpress.core.rendering import render_inline


def byline(names: Iterable[str] | None, label: str = "By") -> str:
    """Format a list of names with a trailing ';' after each one.

        >>> byline(["Alice", "Bob"])
        'By: Alice; Bob;'
        >>> byline(["Yvan Sraka"], label="Reviewers")
        'Reviewers: Yvan Sraka;'
    """
    entries = " ".join(f"{name};" for name in names or ())
    return f"{label}: {entries}"


def format_date(value: date, format_str: str = "%Y-%m-%d") -> str:
    """Format a date object.

    Args:
        value: Date to format
        format_str: strftime format string

    Returns:
        Formatted date string

    """
    if not isinstance(value, date):
        return str(value)
    return value.strftime(format_str)


def markdownify(value: str | None) -> Markup:
    """Render inline Markdown; raw HTML is passed through unchanged."""
    return Markup(render_inline(value))
