"""HTML output sink for publishing a rendered site."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from postpress.core.exceptions import OutputPathError

if TYPE_CHECKING:
    from postpress.core.types import RenderedSite

logger = logging.getLogger(__name__)

MANIFEST_NAME = ".postpress-manifest"


class HtmlSiteSink:
    """Writes rendered pages into the output directory.

    Files written by the previous build are listed in a manifest. Any of them
    that the current build no longer produces are removed, so the output always
    matches the current set of posts. Files the sink never wrote are left alone.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    @property
    def manifest_path(self) -> Path:
        return self.output_dir / MANIFEST_NAME

    def publish(self, site: RenderedSite) -> list[Path]:
        """Write every page of the site.

        Returns:
            Absolute paths of the files written, in page order.

        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        current = [page.output_path for page in site.pages]
        targets = [self._target(relative) for relative in current]
        self._remove_stale(set(current))

        written: list[Path] = []
        for page, target in zip(site.pages, targets):
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(page.html, encoding="utf-8")
            written.append(target)

        self.manifest_path.write_text("\n".join(sorted(current)) + "\n", encoding="utf-8")
        logger.info("Wrote %d pages to %s", len(written), self.output_dir)
        return written

    def _contains(self, target: Path) -> bool:
        return target.resolve().is_relative_to(self.output_dir.resolve())

    def _target(self, relative: str) -> Path:
        target = self.output_dir / relative
        if not self._contains(target):
            raise OutputPathError(relative, self.output_dir)
        return target

    def _read_manifest(self) -> list[str]:
        if not self.manifest_path.is_file():
            return []
        lines = self.manifest_path.read_text(encoding="utf-8").splitlines()
        return [line.strip() for line in lines if line.strip()]

    def _remove_stale(self, current: set[str]) -> None:
        for relative in self._read_manifest():
            if relative in current:
                continue
            stale = self.output_dir / relative
            if not self._contains(stale):
                logger.warning("Ignoring manifest entry outside %s: %s", self.output_dir, relative)
                continue
            if stale.is_file():
                logger.debug("Removing stale page %s", relative)
                stale.unlink()
                self._prune_empty_dirs(stale.parent)

    def _prune_empty_dirs(self, directory: Path) -> None:
        while directory != self.output_dir and directory.is_dir() and not any(directory.iterdir()):
            directory.rmdir()
            directory = directory.parent
