"""Whole-site generation: one page per corpus entry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from noogle.core.resolver import join_path, static_params
from noogle.core.types import Doc, RenderedPage
from noogle.engine.page import PageBuilder
from noogle.infra.corpus import load_corpus
from noogle.infra.sinks.static_site import StaticSiteSink

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from noogle.core.config import NoogleConfig

logger = logging.getLogger(__name__)


def index_corpus(corpus: Sequence[Doc]) -> dict[str, Doc]:
    """Map joined paths to entries; the first entry of a duplicated path wins."""
    index: dict[str, Doc] = {}
    for doc in corpus:
        index.setdefault(join_path(doc.meta.path), doc)
    return index


class SiteBuilder:
    """Renders every entry of the corpus and publishes the result."""

    def __init__(self, config: NoogleConfig, builder: PageBuilder | None = None) -> None:
        self.config = config
        self.builder = builder or PageBuilder(config)

    def render_pages(self, corpus: Sequence[Doc]) -> Iterator[RenderedPage]:
        index = index_corpus(corpus)
        for params in static_params(corpus):
            path = params["path"]
            page = self.builder.build(path, index.get(join_path(path)))
            yield RenderedPage(path=path, title=page.title, html=self.builder.render(page))

    def build(self, corpus: Sequence[Doc] | None = None) -> int:
        """Render and write the site.

        Returns:
            Number of entry pages written

        """
        if corpus is None:
            corpus = load_corpus(self.config.paths.abs_data_file)

        sink = StaticSiteSink(self.config.paths.abs_output_dir, self.config.site.route_prefix)
        return sink.publish(self.render_pages(corpus), index_html=self.builder.render_index(corpus))
