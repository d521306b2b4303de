"""Exceptions raised while loading and rendering a site."""

from pathlib import Path


class PostpressError(Exception):
    """Base exception for all Postpress errors."""


class ConfigError(PostpressError):
    """Raised when the site configuration cannot be loaded."""


class PostError(PostpressError):
    """Base exception for errors tied to a single post file."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class FrontMatterError(PostError):
    """Raised when a post's front-matter cannot be parsed."""


class MissingFieldError(PostError):
    """Raised when a required front-matter key is missing or empty."""

    def __init__(self, field: str, path: Path | None = None) -> None:
        self.field = field
        super().__init__(f"missing required front-matter key '{field}'", path)


class InvalidPostFilenameError(PostError):
    """Raised when no publication date can be derived for a post."""


class InvalidPermalinkError(PostError):
    """Raised when a permalink would place a page outside the output directory."""


class DuplicatePermalinkError(PostError):
    """Raised when two posts resolve to the same output path."""

    def __init__(self, permalink: str, path: Path | None = None, other: Path | None = None) -> None:
        self.permalink = permalink
        self.other = other
        msg = f"permalink '{permalink}' is already used"
        if other is not None:
            msg += f" by {other}"
        super().__init__(msg, path)


class LayoutError(PostpressError):
    """Base exception for layout resolution errors."""


class LayoutNotFoundError(LayoutError, LookupError):
    """Raised when a layout name does not resolve to a template."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        msg = f"Unknown layout: '{name}'"
        if self.available:
            msg += f". Available: {', '.join(self.available)}"
        super().__init__(msg)


class LayoutCycleError(LayoutError):
    """Raised when a chain of layouts refers back to itself."""

    def __init__(self, chain: list[str]) -> None:
        self.chain = chain
        super().__init__(f"Layout chain loops: {' -> '.join(chain)}")


class OutputPathError(PostpressError):
    """Raised when a page would be written outside the output directory."""

    def __init__(self, relative: str, output_dir: Path) -> None:
        self.relative = relative
        self.output_dir = output_dir
        super().__init__(f"'{relative}' resolves outside the output directory {output_dir}")
