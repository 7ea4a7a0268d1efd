"""Static site output sink for rendered entry pages."""

from __future__ import annotations

import logging
import shutil
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from noogle.core.types import RenderedPage

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


class StaticSiteSink:
    """Writes rendered pages as a directory tree of ``index.html`` files.

    An entry at ``["lib", "strings", "concat"]`` ends up in
    ``<output_dir>/f/lib/strings/concat/index.html`` and is served as
    ``/f/lib/strings/concat``.
    """

    def __init__(self, output_dir: Path, route_prefix: str = "/f") -> None:
        self.output_dir = output_dir
        self.pages_dir = output_dir / route_prefix.strip("/")

    def publish(self, pages: Iterable[RenderedPage], index_html: str | None = None) -> int:
        """Write all pages, replacing any previous output.

        Returns:
            Number of entry pages written

        """
        self._clean_pages()
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written = 0
        for page in pages:
            target = self.page_file(page.path)
            if target is None:
                logger.warning("Skipping page with unsafe path: %s", page.path)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(page.html, encoding="utf-8")
            written += 1

        if index_html is not None:
            (self.output_dir / INDEX_FILE).write_text(index_html, encoding="utf-8")

        logger.info("Wrote %d pages to %s", written, self.pages_dir)
        return written

    def page_file(self, path: list[str]) -> Path | None:
        """Output file for an entry path, or None if a segment would escape the tree."""
        if not path or any(not segment or segment in {".", ".."} or "/" in segment for segment in path):
            return None
        return self.pages_dir.joinpath(*path) / INDEX_FILE

    def _clean_pages(self) -> None:
        """Remove previously rendered entry pages.

        Pages written straight into the output directory are never cleaned, so
        unrelated files there survive.
        """
        if self.output_dir.resolve().is_relative_to(self.pages_dir.resolve()):
            logger.warning("Not cleaning %s: pages share the output directory", self.output_dir)
            return
        if self.pages_dir.exists():
            shutil.rmtree(self.pages_dir)
